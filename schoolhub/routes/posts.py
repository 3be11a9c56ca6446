"""
Posts routes for CRUD operations on community posts.
"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from typing import List, Optional

from ..config import get_settings
from ..database import get_db
from ..limiter import limiter
from ..schemas.comment import CommentResponse
from ..schemas.common import SuccessResponse
from ..schemas.post import PostCreate, PostUpdate, PostResponse
from ..services import comments as comment_service
from ..services import likes as like_service
from ..services import posts as post_service

settings = get_settings()

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=List[PostResponse], operation_id="getPosts")
def get_posts(db: Session = Depends(get_db)):
    """Get all posts, pinned posts first, then newest first."""
    return post_service.get_posts(db)


@router.get("/{post_id}", response_model=Optional[PostResponse], operation_id="getPostById")
def get_post_by_id(post_id: int, db: Session = Depends(get_db)):
    """Get a single post, or null when it does not exist."""
    return post_service.get_post_by_id(db, post_id)


@router.post("", response_model=PostResponse, operation_id="createPost")
@limiter.limit(settings.write_rate_limit)
def create_post(request: Request, post_data: PostCreate, db: Session = Depends(get_db)):
    """Create a new post. Announcements require an admin author."""
    return post_service.create_post(db, post_data)


@router.patch("/{post_id}", response_model=PostResponse, operation_id="updatePost")
def update_post(post_id: int, post_update: PostUpdate, db: Session = Depends(get_db)):
    """Update a post's content, media or pinned flag."""
    return post_service.update_post(db, post_id, post_update)


@router.delete("/{post_id}", response_model=SuccessResponse, operation_id="deletePost")
def delete_post(post_id: int, db: Session = Depends(get_db)):
    """Delete a post with its comments and likes."""
    return post_service.delete_post(db, post_id)


@router.get("/{post_id}/comments", response_model=List[CommentResponse], operation_id="getCommentsByPost")
def get_comments_by_post(post_id: int, db: Session = Depends(get_db)):
    """Comments on a post, oldest first."""
    return comment_service.get_comments_by_post(db, post_id)


@router.delete("/{post_id}/likes/{user_id}", response_model=SuccessResponse, operation_id="removeLike")
def remove_like(post_id: int, user_id: int, db: Session = Depends(get_db)):
    """Remove a user's like from a post. Succeeds if there was none."""
    return like_service.remove_like(db, post_id, user_id)
