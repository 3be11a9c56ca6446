from .common import SuccessResponse
from .user import UserCreate, UserUpdate, UserResponse
from .post import PostCreate, PostUpdate, PostResponse
from .comment import CommentCreate, CommentUpdate, CommentResponse
from .like import LikeCreate, LikeResponse

__all__ = [
    "SuccessResponse",
    "UserCreate", "UserUpdate", "UserResponse",
    "PostCreate", "PostUpdate", "PostResponse",
    "CommentCreate", "CommentUpdate", "CommentResponse",
    "LikeCreate", "LikeResponse",
]
