"""
Like routes. Removing a like lives under /api/posts/{post_id}/likes/{user_id}.
"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from ..config import get_settings
from ..database import get_db
from ..limiter import limiter
from ..schemas.like import LikeCreate, LikeResponse
from ..services import likes as like_service

settings = get_settings()

router = APIRouter(prefix="/api/likes", tags=["likes"])


@router.post("", response_model=LikeResponse, operation_id="createLike")
@limiter.limit(settings.write_rate_limit)
def create_like(request: Request, like_data: LikeCreate, db: Session = Depends(get_db)):
    """Like a post. Each user may like a post once."""
    return like_service.create_like(db, like_data)
