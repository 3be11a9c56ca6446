"""
User routes: account management procedures.
"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from typing import List, Optional

from ..config import get_settings
from ..database import get_db
from ..limiter import limiter
from ..schemas.common import SuccessResponse
from ..schemas.post import PostResponse
from ..schemas.user import UserCreate, UserUpdate, UserResponse
from ..services import posts as post_service
from ..services import users as user_service

settings = get_settings()

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse, operation_id="createUser")
@limiter.limit(settings.write_rate_limit)
def create_user(request: Request, user_data: UserCreate, db: Session = Depends(get_db)):
    """Create a new user account (role defaults to student)."""
    return user_service.create_user(db, user_data)


@router.get("", response_model=List[UserResponse], operation_id="getUsers")
def get_users(db: Session = Depends(get_db)):
    """List all users."""
    return user_service.get_users(db)


@router.get("/{user_id}", response_model=Optional[UserResponse], operation_id="getUserById")
def get_user_by_id(user_id: int, db: Session = Depends(get_db)):
    """Get a single user, or null when no such user exists."""
    return user_service.get_user_by_id(db, user_id)


@router.get("/{author_id}/posts", response_model=List[PostResponse], operation_id="getPostsByAuthor")
def get_posts_by_author(author_id: int, db: Session = Depends(get_db)):
    """Posts written by a user, newest first."""
    return post_service.get_posts_by_author(db, author_id)


@router.patch("/{user_id}", response_model=UserResponse, operation_id="updateUser")
def update_user(user_id: int, user_update: UserUpdate, db: Session = Depends(get_db)):
    """Update profile fields, role or active flag."""
    return user_service.update_user(db, user_id, user_update)


@router.delete("/{user_id}", response_model=SuccessResponse, operation_id="deleteUser")
def delete_user(user_id: int, db: Session = Depends(get_db)):
    """Delete a user along with their posts, comments and likes."""
    return user_service.delete_user(db, user_id)
