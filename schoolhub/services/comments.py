"""
Comment handlers. Creating or deleting a comment keeps the parent post's
``comments_count`` in step within the same transaction.
"""
from typing import List

from sqlalchemy.orm import Session
from datetime import datetime, timezone

from ..errors import NotFoundError
from ..logging_config import service_logger, timed
from ..models.comment import Comment
from ..models.post import Post
from ..models.user import User
from ..schemas.comment import CommentCreate, CommentUpdate
from .counters import adjust_post_counter


@timed(service_logger)
def create_comment(db: Session, data: CommentCreate) -> Comment:
    post = db.query(Post.id).filter(Post.id == data.post_id).first()
    if not post:
        raise NotFoundError(f"Post with id {data.post_id} not found")

    author = db.query(User.id).filter(User.id == data.author_id).first()
    if not author:
        raise NotFoundError(f"User with id {data.author_id} not found")

    now = datetime.now(timezone.utc)
    comment = Comment(
        content=data.content,
        post_id=data.post_id,
        author_id=data.author_id,
        created_at=now,
        updated_at=now,
    )
    try:
        db.add(comment)
        db.flush()
        adjust_post_counter(db, data.post_id, Post.comments_count, 1)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(comment)

    service_logger.info("Comment created", comment_id=comment.id, post_id=comment.post_id)
    return comment


def get_comments_by_post(db: Session, post_id: int) -> List[Comment]:
    """Comments on a post, oldest first. Unknown posts simply have none."""
    return db.query(Comment).filter(Comment.post_id == post_id).order_by(
        Comment.created_at.asc(),
        Comment.id.asc(),
    ).all()


@timed(service_logger)
def update_comment(db: Session, comment_id: int, data: CommentUpdate) -> Comment:
    comment = db.query(Comment).filter(Comment.id == comment_id).first()
    if not comment:
        raise NotFoundError(f"Comment with id {comment_id} not found")

    comment.content = data.content
    comment.updated_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(comment)

    service_logger.info("Comment updated", comment_id=comment.id)
    return comment


@timed(service_logger)
def delete_comment(db: Session, comment_id: int) -> dict:
    comment = db.query(Comment).filter(Comment.id == comment_id).first()
    if not comment:
        raise NotFoundError("Comment not found", {"comment_id": comment_id})

    post_id = comment.post_id
    try:
        db.delete(comment)
        db.flush()
        adjust_post_counter(db, post_id, Post.comments_count, -1)
        db.commit()
    except Exception:
        db.rollback()
        raise

    service_logger.info("Comment deleted", comment_id=comment_id, post_id=post_id)
    return {"success": True}
