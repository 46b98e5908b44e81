"""End-to-end tests for comments, media, follows and health."""

from tests.conftest import auth_headers


def _create_post(client, user, content="Match thread"):
    response = client.post(
        "/posts",
        json={"content": content, "type": "CHEERING"},
        headers=auth_headers(user.id),
    )
    return response.json()["post"]["post_id"]


class TestCommentEndpoints:
    """End-to-end tests for comments."""

    def test_reply_on_other_post_is_422(self, client, seed_user):
        """C2 replying to C1 from another post fails with invalid_relation."""
        # Arrange
        user = seed_user()
        post_1 = _create_post(client, user, "P1")
        post_2 = _create_post(client, user, "P2")
        c1 = client.post(
            f"/posts/{post_1}/comments",
            json={"content": "C1"},
            headers=auth_headers(user.id),
        ).json()["comment"]

        # Act
        response = client.post(
            f"/posts/{post_2}/comments",
            json={"content": "C2", "parent_comment_id": c1["comment_id"]},
            headers=auth_headers(user.id),
        )

        # Assert
        assert response.status_code == 422
        assert response.json()["detail"]["code"] == "invalid_relation"
        assert client.get(f"/posts/{post_2}/comments").json()["total"] == 0

    def test_comment_edit_and_delete_by_owner_only(self, client, seed_user):
        """Only the comment author may edit or delete it."""
        # Arrange
        author = seed_user()
        other = seed_user()
        post_id = _create_post(client, author)
        comment = client.post(
            f"/posts/{post_id}/comments",
            json={"content": "First!"},
            headers=auth_headers(author.id),
        ).json()["comment"]
        url = f"/comments/{comment['comment_id']}"

        # Act
        denied = client.patch(url, json={"content": "x"}, headers=auth_headers(other.id))
        edited = client.patch(
            url, json={"content": "Second"}, headers=auth_headers(author.id)
        )
        deleted = client.delete(url, headers=auth_headers(author.id))

        # Assert
        assert denied.status_code == 403
        assert edited.json()["comment"]["content"] == "Second"
        assert deleted.status_code == 200
        assert client.get(f"/posts/{post_id}/comments").json()["total"] == 0


class TestMediaEndpoints:
    """End-to-end tests for media uploads."""

    def test_upload_lifecycle(self, client, seed_user):
        """UPLOADING to COMPLETED stores the url, going back is a 409."""
        # Arrange
        author = seed_user()
        post_id = _create_post(client, author)
        media = client.post(
            f"/posts/{post_id}/media",
            json={"type": "image"},
            headers=auth_headers(author.id),
        ).json()["media"]

        # Act
        completed = client.patch(
            f"/media/{media['media_id']}/status",
            json={"status": "COMPLETED", "url": "https://cdn.example.com/a.png"},
            headers=auth_headers(author.id),
        )
        reverted = client.patch(
            f"/media/{media['media_id']}/status",
            json={"status": "UPLOADING"},
            headers=auth_headers(author.id),
        )

        # Assert
        assert media["status"] == "UPLOADING"
        assert media["url"] == ""
        assert completed.json()["media"]["url"] == "https://cdn.example.com/a.png"
        assert reverted.status_code == 409
        assert reverted.json()["detail"]["code"] == "invalid_status_transition"

    def test_media_on_foreign_post_forbidden(self, client, seed_user):
        """Attaching media to someone else's post is a 403."""
        # Arrange
        owner = seed_user()
        other = seed_user()
        post_id = _create_post(client, owner)

        # Act
        response = client.post(
            f"/posts/{post_id}/media",
            json={"type": "video"},
            headers=auth_headers(other.id),
        )

        # Assert
        assert response.status_code == 403
        assert client.get(f"/posts/{post_id}/media").json()["media"] == []


class TestFollowEndpoints:
    """End-to-end tests for follows."""

    def test_follow_rules(self, client, seed_user):
        """Self follow is 400, duplicate is 409, unfollow is 200."""
        # Arrange
        fan = seed_user()
        star = seed_user()

        # Act
        self_follow = client.post(f"/users/{fan.id}/follow", headers=auth_headers(fan.id))
        first = client.post(f"/users/{star.id}/follow", headers=auth_headers(fan.id))
        second = client.post(f"/users/{star.id}/follow", headers=auth_headers(fan.id))
        counts = client.get(
            f"/users/{star.id}/follow-counts", headers=auth_headers(fan.id)
        ).json()
        unfollow = client.delete(f"/users/{star.id}/follow", headers=auth_headers(fan.id))

        # Assert
        assert self_follow.status_code == 400
        assert first.status_code == 201
        assert second.status_code == 409
        assert counts["followers"] == 1
        assert counts["is_following"] is True
        assert unfollow.status_code == 200
        assert client.get(f"/users/{star.id}/followers").json()["total"] == 0


class TestHealth:
    """Health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
