"""
Post handlers.
"""
from typing import List, Optional

from sqlalchemy.orm import Session
from datetime import datetime, timezone

from ..errors import NotFoundError, PermissionDenied
from ..logging_config import service_logger, timed
from ..models.post import Post, PostType
from ..models.user import User, UserRole
from ..schemas.post import PostCreate, PostUpdate

NULLABLE_FIELDS = {"media_url", "media_type"}


@timed(service_logger)
def create_post(db: Session, data: PostCreate) -> Post:
    """Create a post; only admins may publish announcements."""
    author = db.query(User).filter(User.id == data.author_id).first()
    if not author:
        raise NotFoundError(f"Author with id {data.author_id} not found")

    if data.type == PostType.ANNOUNCEMENT and author.role != UserRole.ADMIN.value:
        raise PermissionDenied(
            "Only admin users can create announcements",
            {"author_id": author.id, "role": author.role},
        )

    now = datetime.now(timezone.utc)
    post = Post(
        title=data.title,
        content=data.content,
        media_url=data.media_url,
        media_type=data.media_type,
        type=data.type.value,
        author_id=author.id,
        likes_count=0,
        comments_count=0,
        is_pinned=data.is_pinned,
        created_at=now,
        updated_at=now,
    )
    db.add(post)
    db.commit()
    db.refresh(post)

    service_logger.info("Post created", post_id=post.id, author_id=author.id, type=post.type)
    return post


def get_posts(db: Session) -> List[Post]:
    """All posts, pinned first, then newest first."""
    return db.query(Post).order_by(
        Post.is_pinned.desc(),
        Post.created_at.desc(),
        Post.id.desc(),
    ).all()


def get_post_by_id(db: Session, post_id: int) -> Optional[Post]:
    return db.query(Post).filter(Post.id == post_id).first()


def get_posts_by_author(db: Session, author_id: int) -> List[Post]:
    return db.query(Post).filter(Post.author_id == author_id).order_by(
        Post.created_at.desc(),
        Post.id.desc(),
    ).all()


@timed(service_logger)
def update_post(db: Session, post_id: int, data: PostUpdate) -> Post:
    """Update the supplied fields. Type and author cannot be changed."""
    post = get_post_by_id(db, post_id)
    if not post:
        raise NotFoundError(f"Post with id {post_id} not found")

    update_data = data.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        if value is None and key not in NULLABLE_FIELDS:
            continue
        setattr(post, key, value)
    post.updated_at = datetime.now(timezone.utc)

    db.commit()
    db.refresh(post)

    service_logger.info("Post updated", post_id=post.id, fields=sorted(update_data))
    return post


@timed(service_logger)
def delete_post(db: Session, post_id: int) -> dict:
    """Delete a post; its comments and likes go with it."""
    post = get_post_by_id(db, post_id)
    if not post:
        raise NotFoundError(f"Post with id {post_id} not found")

    db.delete(post)
    db.commit()

    service_logger.info("Post deleted", post_id=post_id)
    return {"success": True}
