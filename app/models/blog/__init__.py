from .category import Category
from .post import Post
from .comment import Comment
