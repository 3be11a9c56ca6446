"""
Tests for user endpoints.
"""
from schoolhub.models import Comment, Like, Post, User


def new_user_payload(**overrides):
    payload = {
        "username": "newuser",
        "email": "newuser@example.com",
        "name": "New User",
        "class_name": "9B",
        "profile_picture_url": None,
    }
    payload.update(overrides)
    return payload


class TestUserEndpoints:
    """Test user endpoints."""

    def test_create_user(self, client):
        """Test creating a user with default role."""
        response = client.post("/api/users", json=new_user_payload())
        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "newuser"
        assert data["email"] == "newuser@example.com"
        assert data["role"] == "student"
        assert data["is_active"] is True
        assert data["profile_picture_url"] is None
        assert data["created_at"] == data["updated_at"]
        assert "id" in data

    def test_create_admin_user(self, client):
        """Test creating a user with an explicit admin role."""
        response = client.post(
            "/api/users",
            json=new_user_payload(role="admin", profile_picture_url="https://cdn.example.com/a.png"),
        )
        assert response.status_code == 200
        data = response.json()
        assert data["role"] == "admin"
        assert data["profile_picture_url"] == "https://cdn.example.com/a.png"

    def test_create_user_duplicate_username(self, client, student):
        """Test that a taken username is rejected."""
        response = client.post("/api/users", json=new_user_payload(username="student"))
        assert response.status_code == 409
        data = response.json()
        assert data["ok"] is False
        assert data["error_code"] == "UNIQUENESS_VIOLATION"
        assert "student" in data["error"]

    def test_create_user_duplicate_email(self, client, student):
        """Test that a taken email is rejected."""
        response = client.post("/api/users", json=new_user_payload(email=student.email))
        assert response.status_code == 409
        assert response.json()["error_code"] == "UNIQUENESS_VIOLATION"

    def test_create_user_invalid_input(self, client):
        """Test that malformed input never reaches the handler."""
        response = client.post("/api/users", json=new_user_payload(username="ab"))
        assert response.status_code == 422

        response = client.post("/api/users", json=new_user_payload(email="not-an-email"))
        assert response.status_code == 422

        response = client.post("/api/users", json=new_user_payload(profile_picture_url="nope"))
        assert response.status_code == 422

    def test_get_users(self, client, student, admin):
        """Test listing users."""
        response = client.get("/api/users")
        assert response.status_code == 200
        usernames = [u["username"] for u in response.json()]
        assert usernames == ["student", "admin"]

    def test_get_user_by_id(self, client, student):
        """Test getting a specific user."""
        response = client.get(f"/api/users/{student.id}")
        assert response.status_code == 200
        assert response.json()["username"] == "student"

    def test_get_user_not_found_returns_null(self, client, db):
        """Test that a missing user is null, not an error."""
        response = client.get("/api/users/99999")
        assert response.status_code == 200
        assert response.json() is None

    def test_update_user(self, client, student):
        """Test updating only the supplied fields."""
        response = client.patch(
            f"/api/users/{student.id}",
            json={"name": "Renamed", "is_active": False},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Renamed"
        assert data["is_active"] is False
        assert data["username"] == "student"
        assert data["class_name"] == "10A"
        assert data["updated_at"] >= data["created_at"]

    def test_update_user_clears_profile_picture(self, client, make_user):
        """Test that profile_picture_url can be cleared with null."""
        user = make_user("pictured", profile_picture_url="https://cdn.example.com/p.png")
        response = client.patch(f"/api/users/{user.id}", json={"profile_picture_url": None})
        assert response.status_code == 200
        assert response.json()["profile_picture_url"] is None

    def test_update_user_keeps_own_username(self, client, student):
        """Test that re-submitting the user's own username is not a collision."""
        response = client.patch(f"/api/users/{student.id}", json={"username": "student"})
        assert response.status_code == 200

    def test_update_user_username_collision(self, client, student, admin):
        """Test that taking another user's username fails."""
        response = client.patch(f"/api/users/{student.id}", json={"username": "admin"})
        assert response.status_code == 409
        assert response.json()["error_code"] == "UNIQUENESS_VIOLATION"

    def test_update_user_email_collision(self, client, student, admin):
        """Test that taking another user's email fails."""
        response = client.patch(f"/api/users/{student.id}", json={"email": admin.email})
        assert response.status_code == 409

    def test_update_user_not_found(self, client, db):
        """Test updating a non-existent user."""
        response = client.patch("/api/users/99999", json={"name": "Ghost"})
        assert response.status_code == 404
        assert response.json()["error_code"] == "NOT_FOUND"

    def test_delete_user(self, client, student, db):
        """Test deleting a user without content."""
        user_id = student.id
        response = client.delete(f"/api/users/{user_id}")
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert db.query(User).filter(User.id == user_id).count() == 0

    def test_delete_user_not_found(self, client, db):
        """Test deleting a non-existent user."""
        response = client.delete("/api/users/99999")
        assert response.status_code == 404

    def test_delete_user_removes_authored_posts(self, client, db, student, admin, make_post):
        """Test that a user's posts go with them, along with their comments and likes."""
        own_post = make_post(student, title="Mine")
        post_id = own_post.id
        client.post("/api/comments", json={"content": "Nice", "post_id": post_id, "author_id": admin.id})
        client.post("/api/likes", json={"post_id": post_id, "user_id": admin.id})

        response = client.delete(f"/api/users/{student.id}")
        assert response.status_code == 200

        assert db.query(Post).filter(Post.id == post_id).count() == 0
        assert db.query(Comment).filter(Comment.post_id == post_id).count() == 0
        assert db.query(Like).filter(Like.post_id == post_id).count() == 0
        # the admin is untouched
        assert client.get(f"/api/users/{admin.id}").json()["username"] == "admin"

    def test_delete_user_adjusts_counters_on_other_posts(self, client, db, student, admin, make_user, make_post):
        """Test that deleting a commenter/liker keeps the other post and fixes its counters."""
        announcement = make_post(admin, title="News", type="announcement")
        post_id = announcement.id
        other = make_user("other")

        client.post("/api/comments", json={"content": "First", "post_id": post_id, "author_id": student.id})
        client.post("/api/comments", json={"content": "Second", "post_id": post_id, "author_id": student.id})
        client.post("/api/comments", json={"content": "Third", "post_id": post_id, "author_id": other.id})
        client.post("/api/likes", json={"post_id": post_id, "user_id": student.id})
        client.post("/api/likes", json={"post_id": post_id, "user_id": other.id})

        response = client.delete(f"/api/users/{student.id}")
        assert response.status_code == 200

        data = client.get(f"/api/posts/{post_id}").json()
        assert data is not None
        assert data["comments_count"] == 1
        assert data["likes_count"] == 1
        assert db.query(Comment).filter(Comment.post_id == post_id).count() == 1
        assert db.query(Like).filter(Like.post_id == post_id).count() == 1

    def test_get_posts_by_author(self, client, student, admin, make_post):
        """Test listing a user's posts newest first."""
        make_post(student, title="Old", minutes_ago=30)
        make_post(student, title="New", minutes_ago=1)
        make_post(admin, title="Not mine")

        response = client.get(f"/api/users/{student.id}/posts")
        assert response.status_code == 200
        assert [p["title"] for p in response.json()] == ["New", "Old"]

    def test_get_posts_by_unknown_author(self, client, db):
        """Test that an unknown author simply has no posts."""
        response = client.get("/api/users/99999/posts")
        assert response.status_code == 200
        assert response.json() == []
