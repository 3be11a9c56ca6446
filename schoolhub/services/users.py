"""
User handlers: account creation, profile updates and account removal.
"""
from typing import List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from datetime import datetime, timezone

from ..errors import NotFoundError, UniquenessViolation
from ..logging_config import service_logger, timed
from ..models.comment import Comment
from ..models.like import Like
from ..models.post import Post
from ..models.user import User
from ..schemas.user import UserCreate, UserUpdate
from .counters import adjust_post_counter

# Columns that may be cleared by sending an explicit null.
NULLABLE_FIELDS = {"profile_picture_url"}


def _ensure_unique(db: Session, username: Optional[str], email: Optional[str], exclude_id: Optional[int] = None):
    conditions = []
    if username is not None:
        conditions.append(User.username == username)
    if email is not None:
        conditions.append(User.email == email)
    if not conditions:
        return

    query = db.query(User).filter(or_(*conditions))
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    existing = query.first()
    if existing is None:
        return

    if username is not None and existing.username == username:
        raise UniquenessViolation(f"Username '{username}' is already taken", {"field": "username"})
    raise UniquenessViolation(f"Email '{email}' is already registered", {"field": "email"})


def _commit_user(db: Session, user: User) -> User:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise UniquenessViolation("Username or email is already in use") from e
    db.refresh(user)
    return user


@timed(service_logger)
def create_user(db: Session, data: UserCreate) -> User:
    """Create a user; role defaults to student and the account starts active."""
    _ensure_unique(db, data.username, data.email)

    now = datetime.now(timezone.utc)
    user = User(
        username=data.username,
        email=data.email,
        name=data.name,
        class_name=data.class_name,
        profile_picture_url=data.profile_picture_url,
        role=data.role.value,
        is_active=True,
        created_at=now,
        updated_at=now,
    )
    db.add(user)
    user = _commit_user(db, user)

    service_logger.info("User created", user_id=user.id, role=user.role)
    return user


def get_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id).all()


def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


@timed(service_logger)
def update_user(db: Session, user_id: int, data: UserUpdate) -> User:
    """Apply only the supplied fields; updated_at is always refreshed."""
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError(f"User with id {user_id} not found")

    update_data = data.model_dump(exclude_unset=True)
    _ensure_unique(db, update_data.get("username"), update_data.get("email"), exclude_id=user_id)

    for key, value in update_data.items():
        if value is None and key not in NULLABLE_FIELDS:
            continue
        if key == "role":
            value = value.value
        setattr(user, key, value)
    user.updated_at = datetime.now(timezone.utc)

    user = _commit_user(db, user)
    service_logger.info("User updated", user_id=user.id, fields=sorted(update_data))
    return user


@timed(service_logger)
def delete_user(db: Session, user_id: int) -> dict:
    """
    Delete a user together with everything they own.

    Likes and comments the user left on other people's posts are removed and
    those posts' counters decremented. The user's own posts are removed with
    all of their comments and likes. Everything happens in one transaction.
    """
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError(f"User with id {user_id} not found")

    try:
        liked = db.query(Like.post_id, func.count(Like.id)).filter(
            Like.user_id == user_id
        ).group_by(Like.post_id).all()
        for post_id, count in liked:
            adjust_post_counter(db, post_id, Post.likes_count, -count)
        db.query(Like).filter(Like.user_id == user_id).delete(synchronize_session=False)

        commented = db.query(Comment.post_id, func.count(Comment.id)).filter(
            Comment.author_id == user_id
        ).group_by(Comment.post_id).all()
        for post_id, count in commented:
            adjust_post_counter(db, post_id, Post.comments_count, -count)
        db.query(Comment).filter(Comment.author_id == user_id).delete(synchronize_session=False)

        authored = select(Post.id).where(Post.author_id == user_id)
        db.query(Comment).filter(Comment.post_id.in_(authored)).delete(synchronize_session=False)
        db.query(Like).filter(Like.post_id.in_(authored)).delete(synchronize_session=False)
        deleted_posts = db.query(Post).filter(Post.author_id == user_id).delete(synchronize_session=False)

        db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        db.commit()
    except Exception:
        db.rollback()
        raise

    service_logger.info(
        "User deleted",
        user_id=user_id,
        posts_removed=deleted_posts,
        likes_removed=sum(count for _, count in liked),
        comments_removed=sum(count for _, count in commented),
    )
    return {"success": True}
