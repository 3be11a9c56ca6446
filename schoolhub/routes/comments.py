"""
Comment routes.
"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from ..config import get_settings
from ..database import get_db
from ..limiter import limiter
from ..schemas.comment import CommentCreate, CommentUpdate, CommentResponse
from ..schemas.common import SuccessResponse
from ..services import comments as comment_service

settings = get_settings()

router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.post("", response_model=CommentResponse, operation_id="createComment")
@limiter.limit(settings.write_rate_limit)
def create_comment(request: Request, comment_data: CommentCreate, db: Session = Depends(get_db)):
    """Comment on a post."""
    return comment_service.create_comment(db, comment_data)


@router.patch("/{comment_id}", response_model=CommentResponse, operation_id="updateComment")
def update_comment(comment_id: int, comment_update: CommentUpdate, db: Session = Depends(get_db)):
    return comment_service.update_comment(db, comment_id, comment_update)


@router.delete("/{comment_id}", response_model=SuccessResponse, operation_id="deleteComment")
def delete_comment(comment_id: int, db: Session = Depends(get_db)):
    return comment_service.delete_comment(db, comment_id)
