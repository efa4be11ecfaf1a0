"""
API tests for the contact inbox and gallery image metadata.

Contact messages arrive through /api/contact and are triaged under
/api/contact-messages. Gallery images are registered by URL only.
"""

from datetime import datetime

import pytest

from studio.models import ContactMessage, GalleryImage


def contact_payload(**overrides):
    payload = {
        "name": "Malia Kealoha",
        "email": "  Malia@Example.com ",
        "subject": "Engagement shoot in October",
        "message": "Are sunset sessions at Lanikai available?",
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# Contact messages
# ---------------------------------------------------------------------------

class TestContactMessages:

    def test_submission_is_stored_unread(self, client, db):
        response = client.post("/api/contact", json=contact_payload(), headers={"User-Agent": "pytest-browser"})
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "unread"
        assert body["priority"] == "normal"
        assert body["source"] == "website"
        assert body["email"] == "malia@example.com"
        assert body["userAgent"] == "pytest-browser"
        assert body["ipAddress"]
        assert db.query(ContactMessage).count() == 1

    @pytest.mark.parametrize("overrides", [
        {"email": ""},
        {"email": "malia"},
        {"subject": ""},
        {"message": ""},
        {"priority": "whenever"},
    ])
    def test_invalid_submission_is_422(self, client, db, overrides):
        assert client.post("/api/contact", json=contact_payload(**overrides)).status_code == 422
        assert db.query(ContactMessage).count() == 0

    def test_inbox_is_newest_first_and_filterable(self, client):
        first = client.post("/api/contact", json=contact_payload()).json()
        second = client.post("/api/contact", json=contact_payload(priority="urgent")).json()

        ids = [m["id"] for m in client.get("/api/contact-messages").json()]
        assert ids == [second["id"], first["id"]]

        urgent = client.get("/api/contact-messages", params={"priority": "urgent"}).json()
        assert [m["id"] for m in urgent] == [second["id"]]
        assert client.get("/api/contact-messages", params={"status": "replied"}).json() == []

    def test_status_update_and_delete(self, client, db):
        message = client.post("/api/contact", json=contact_payload()).json()

        body = client.patch(f"/api/contact-messages/{message['id']}", json={"status": "replied"}).json()
        assert body["status"] == "replied"
        assert body["priority"] == "normal"

        assert client.delete(f"/api/contact-messages/{message['id']}").json() == {"success": True}
        assert db.query(ContactMessage).count() == 0

    def test_unknown_status_is_422(self, client):
        message = client.post("/api/contact", json=contact_payload()).json()
        response = client.patch(f"/api/contact-messages/{message['id']}", json={"status": "spam"})
        assert response.status_code == 422

    def test_missing_message_is_404(self, client):
        assert client.patch("/api/contact-messages/9", json={"status": "read"}).status_code == 404
        assert client.delete("/api/contact-messages/9").status_code == 404


# ---------------------------------------------------------------------------
# Gallery
# ---------------------------------------------------------------------------

class TestGallery:

    def test_register_by_url_fills_names(self, client):
        response = client.post(
            "/api/gallery",
            json={"url": "https://cdn.example.com/portfolio/sunset-01.jpg", "category": "portrait", "tags": ["beach"]},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["filename"] == "sunset-01.jpg"
        assert body["originalName"] == "sunset-01.jpg"
        assert body["featured"] is False
        assert body["tags"] == ["beach"]
        assert body["bookingId"] is None

    @pytest.mark.parametrize("url", ["", "sunset.jpg", "ftp://cdn.example.com/a.jpg"])
    def test_invalid_url_is_422(self, client, url):
        assert client.post("/api/gallery", json={"url": url}).status_code == 422

    def test_booking_must_exist(self, client, make_booking):
        assert client.post(
            "/api/gallery", json={"url": "https://cdn.example.com/a.jpg", "bookingId": 42}
        ).status_code == 404

        booking = make_booking(datetime(2025, 7, 15, 18, 0))
        body = client.post(
            "/api/gallery", json={"url": "https://cdn.example.com/a.jpg", "bookingId": booking.id}
        ).json()
        assert body["bookingId"] == booking.id
        listed = client.get("/api/gallery", params={"bookingId": booking.id}).json()
        assert [i["id"] for i in listed] == [body["id"]]

    def test_featured_filter_and_toggle(self, client):
        plain = client.post("/api/gallery", json={"url": "https://cdn.example.com/a.jpg"}).json()
        starred = client.post(
            "/api/gallery", json={"url": "https://cdn.example.com/b.jpg", "featured": True}
        ).json()

        assert [i["id"] for i in client.get("/api/gallery").json()] == [starred["id"], plain["id"]]
        assert [i["id"] for i in client.get("/api/gallery", params={"featured": "true"}).json()] == [starred["id"]]

        body = client.patch(f"/api/gallery/{plain['id']}/featured", json={"featured": True}).json()
        assert body["featured"] is True
        featured = client.get("/api/gallery", params={"featured": "true"}).json()
        assert sorted(i["id"] for i in featured) == sorted([plain["id"], starred["id"]])

    def test_delete(self, client, db):
        image = client.post("/api/gallery", json={"url": "https://cdn.example.com/a.jpg"}).json()
        assert client.delete(f"/api/gallery/{image['id']}").json() == {"message": "Image deleted successfully"}
        assert db.query(GalleryImage).count() == 0

    def test_missing_image_is_404(self, client):
        assert client.patch("/api/gallery/3/featured", json={"featured": True}).status_code == 404
        assert client.delete("/api/gallery/3").status_code == 404
