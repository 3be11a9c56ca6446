"""
Denormalized post counters.

``likes_count`` and ``comments_count`` are changed with a single UPDATE
statement so concurrent writers on the same post never lose an increment.
Callers run this inside the same transaction as the row insert/delete it
tracks.
"""
from datetime import datetime, timezone

from sqlalchemy import case
from sqlalchemy.orm import Session

from ..models.post import Post


def adjust_post_counter(db: Session, post_id: int, column, delta: int) -> None:
    """Add ``delta`` to a post counter column, flooring at zero, and touch updated_at."""
    if delta >= 0:
        new_value = column + delta
    else:
        new_value = case((column + delta > 0, column + delta), else_=0)

    db.query(Post).filter(Post.id == post_id).update(
        {column: new_value, Post.updated_at: datetime.now(timezone.utc)},
        synchronize_session=False,
    )
