from schoolhub.database import SessionLocal, engine, Base
from schoolhub.logging_config import get_logger
from schoolhub.models import Comment, Like, Post, User
from schoolhub.schemas import CommentCreate, LikeCreate, PostCreate, UserCreate
from schoolhub.services import comments, likes, posts, users

logger = get_logger("seed")

# Create tables
Base.metadata.create_all(bind=engine)

db = SessionLocal()

# Clear existing data (children before parents)
db.query(Like).delete()
db.query(Comment).delete()
db.query(Post).delete()
db.query(User).delete()
db.commit()

# Sample community
admin = users.create_user(db, UserCreate(
    username="principal",
    email="principal@example.com",
    name="Principal Skinner",
    class_name="Staff",
    role="admin",
))
alice = users.create_user(db, UserCreate(
    username="alice",
    email="alice@example.com",
    name="Alice Park",
    class_name="10A",
))
bob = users.create_user(db, UserCreate(
    username="bob",
    email="bob@example.com",
    name="Bob Moreno",
    class_name="11C",
    profile_picture_url="https://cdn.school.example/avatars/bob.png",
))

welcome = posts.create_post(db, PostCreate(
    title="Welcome back!",
    content="Classes resume Monday. Check the noticeboard for the new timetable.",
    type="announcement",
    author_id=admin.id,
    is_pinned=True,
))
trip = posts.create_post(db, PostCreate(
    title="Science fair photos",
    content="Some shots from yesterday's science fair.",
    media_url="https://cdn.school.example/media/science-fair.jpg",
    media_type="image/jpeg",
    type="image",
    author_id=alice.id,
))
question = posts.create_post(db, PostCreate(
    title="Study group?",
    content="Anyone up for a chemistry study group on Thursday?",
    type="text",
    author_id=bob.id,
))

comments.create_comment(db, CommentCreate(content="Great photos!", post_id=trip.id, author_id=bob.id))
comments.create_comment(db, CommentCreate(content="Count me in.", post_id=question.id, author_id=alice.id))

likes.create_like(db, LikeCreate(post_id=welcome.id, user_id=alice.id))
likes.create_like(db, LikeCreate(post_id=welcome.id, user_id=bob.id))
likes.create_like(db, LikeCreate(post_id=trip.id, user_id=bob.id))

logger.info(
    "Database seeded successfully",
    users=db.query(User).count(),
    posts=db.query(Post).count(),
    comments=db.query(Comment).count(),
    likes=db.query(Like).count(),
)

db.close()
