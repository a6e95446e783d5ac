from .blog.category import Category
from .blog.post import Post
from .blog.comment import Comment
