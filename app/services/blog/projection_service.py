"""
Proyección de entidades a su representación pública.
Funciones puras: no consultan la base de datos ni modifican la entidad.
"""

from app.models.blog.category import Category
from app.models.blog.comment import Comment
from app.models.blog.post import Post
from app.schemas.blog.category_schema import CategoryData
from app.schemas.blog.comment_schema import CommentData
from app.schemas.blog.post_schema import PostData


def to_category_data(category: Category) -> CategoryData:
    return CategoryData(
        id=category.id,
        name=category.name,
        description=category.description,
        created_at=category.created_at,
        updated_at=category.updated_at,
    )


def to_post_data(post: Post, category: Category) -> PostData:
    """`category` debe ser la categoría actual del post, obtenida explícitamente por quien llama."""
    if category.id != post.category_id:
        raise ValueError(f"Category {category.id} is not the category of post {post.id}")

    return PostData(
        id=post.id,
        title=post.title,
        content=post.content,
        author=post.author,
        category_id=category.id,
        category_name=category.name,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


def to_comment_data(comment: Comment) -> CommentData:
    return CommentData(
        id=comment.id,
        content=comment.content,
        author=comment.author,
        post_id=comment.post_id,
        approved=bool(comment.approved),
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )
