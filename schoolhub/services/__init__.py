"""
Transaction scripts, one per (entity, operation).

Every handler takes a SQLAlchemy session first, commits its own work, and
either returns its result or raises a ``schoolhub.errors.SchoolHubError``.
"""
from . import comments, likes, posts, users

__all__ = ["comments", "likes", "posts", "users"]
