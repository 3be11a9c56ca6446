"""
Like handlers. A user likes a post at most once; ``likes_count`` on the post
follows every insert and delete.
"""
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from datetime import datetime, timezone

from ..errors import ConflictError, NotFoundError
from ..logging_config import service_logger, timed
from ..models.like import Like
from ..models.post import Post
from ..models.user import User
from ..schemas.like import LikeCreate
from .counters import adjust_post_counter

ALREADY_LIKED = "User has already liked this post"


@timed(service_logger)
def create_like(db: Session, data: LikeCreate) -> Like:
    post = db.query(Post.id).filter(Post.id == data.post_id).first()
    if not post:
        raise NotFoundError(f"Post with id {data.post_id} does not exist")

    user = db.query(User.id).filter(User.id == data.user_id).first()
    if not user:
        raise NotFoundError(f"User with id {data.user_id} does not exist")

    existing = db.query(Like.id).filter(
        Like.post_id == data.post_id,
        Like.user_id == data.user_id,
    ).first()
    if existing:
        raise ConflictError(ALREADY_LIKED, {"post_id": data.post_id, "user_id": data.user_id})

    like = Like(
        post_id=data.post_id,
        user_id=data.user_id,
        created_at=datetime.now(timezone.utc),
    )
    try:
        db.add(like)
        db.flush()
        adjust_post_counter(db, data.post_id, Post.likes_count, 1)
        db.commit()
    except IntegrityError as e:
        # Lost a race against a concurrent like on the same pair.
        db.rollback()
        raise ConflictError(ALREADY_LIKED, {"post_id": data.post_id, "user_id": data.user_id}) from e
    except Exception:
        db.rollback()
        raise
    db.refresh(like)

    service_logger.info("Like created", like_id=like.id, post_id=like.post_id, user_id=like.user_id)
    return like


@timed(service_logger)
def remove_like(db: Session, post_id: int, user_id: int) -> dict:
    """
    Remove a like. Removing a like that does not exist succeeds and leaves the
    post untouched, so repeated calls decrement the counter only once.
    """
    try:
        removed = db.query(Like).filter(
            Like.post_id == post_id,
            Like.user_id == user_id,
        ).delete(synchronize_session=False)
        if removed:
            adjust_post_counter(db, post_id, Post.likes_count, -removed)
        db.commit()
    except Exception:
        db.rollback()
        raise

    if removed:
        service_logger.info("Like removed", post_id=post_id, user_id=user_id)
    return {"success": True}
