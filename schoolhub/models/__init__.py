from .user import User, UserRole
from .post import Post, PostType
from .comment import Comment
from .like import Like

__all__ = [
    "User",
    "UserRole",
    "Post",
    "PostType",
    "Comment",
    "Like",
]
