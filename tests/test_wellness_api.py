"""
Integration tests for the Wellness Journal API.

Each test runs against a fresh SQLite database and a fake text API via the
``client`` fixture, so no network access or API key is needed.

Usage:
    pytest tests/test_wellness_api.py -v
"""
from datetime import datetime, timedelta, timezone

import pytest

from server.wellness_api.database import DatabaseManager
from server.wellness_api.dependencies import get_mood_store
from server.wellness_api.main import app
from server.wellness_api.services.chat_responder import DEFAULT_RESPONSE
from server.wellness_api.stores import MoodStore

TODAY = datetime.now(timezone.utc).date()


def log_mood(client, headers, emoji, days_ago=0, note=None):
    body = {"emoji": emoji, "date": (TODAY - timedelta(days=days_ago)).isoformat()}
    if note is not None:
        body["note"] = note
    response = client.post("/api/moods", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestHealthAndAuth:

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "wellness-api"}

    def test_protected_routes_require_token(self, client):
        assert client.get("/api/moods").status_code == 401
        response = client.get("/api/moods", headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or expired session"

    def test_signup_returns_session(self, client):
        response = client.post(
            "/api/auth/signup",
            json={"name": " Ada ", "email": "Ada@Example.com", "password": "s3cret-pass"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["tokenType"] == "bearer"
        assert data["profile"]["email"] == "ada@example.com"
        assert data["profile"]["name"] == "Ada"

    def test_duplicate_signup_conflicts(self, client, auth_headers):
        response = client.post(
            "/api/auth/signup",
            json={"name": "Ada", "email": "ada@example.com", "password": "other-pass"},
        )
        assert response.status_code == 409

    def test_short_password_rejected(self, client):
        response = client.post(
            "/api/auth/signup",
            json={"name": "Ada", "email": "ada@example.com", "password": "123"},
        )
        assert response.status_code == 422

    def test_signin_and_session(self, client, auth_headers):
        bad = client.post("/api/auth/signin", json={"email": "ada@example.com", "password": "wrong"})
        assert bad.status_code == 401

        good = client.post("/api/auth/signin", json={"email": "ada@example.com", "password": "s3cret-pass"})
        assert good.status_code == 200
        headers = {"Authorization": f"Bearer {good.json()['accessToken']}"}

        session = client.get("/api/auth/session", headers=headers)
        assert session.status_code == 200
        assert session.json()["name"] == "Ada"

    def test_signout_revokes_token(self, client, auth_headers):
        assert client.post("/api/auth/signout", headers=auth_headers).status_code == 204
        assert client.get("/api/auth/session", headers=auth_headers).status_code == 401


class TestMoodRoutes:

    def test_log_list_and_delete(self, client, auth_headers):
        created = log_mood(client, auth_headers, "😊", note="sunny walk")
        assert created["date"] == TODAY.isoformat()
        assert created["note"] == "sunny walk"

        listed = client.get("/api/moods", headers=auth_headers).json()
        assert [m["id"] for m in listed] == [created["id"]]

        response = client.delete(f"/api/moods/{created['id']}", headers=auth_headers)
        assert response.status_code == 204
        assert client.get("/api/moods", headers=auth_headers).json() == []

    def test_same_day_log_replaces_previous(self, client, auth_headers):
        log_mood(client, auth_headers, "😔")
        log_mood(client, auth_headers, "😄")

        listed = client.get("/api/moods", headers=auth_headers).json()
        assert len(listed) == 1
        assert listed[0]["emoji"] == "😄"

    def test_emoji_outside_palette_rejected(self, client, auth_headers):
        response = client.post("/api/moods", json={"emoji": "🍕"}, headers=auth_headers)
        assert response.status_code == 422

    def test_future_date_rejected(self, client, auth_headers):
        log_mood(client, auth_headers, "😊")
        future = (TODAY + timedelta(days=30)).isoformat()

        response = client.post("/api/moods", json={"emoji": "😊", "date": future}, headers=auth_headers)

        assert response.status_code == 422
        data = client.get("/api/stats/dashboard", headers=auth_headers).json()
        assert data["streakDays"] == 1
        assert data["today"]["emoji"] == "😊"

    def test_mood_for_date(self, client, auth_headers):
        log_mood(client, auth_headers, "😌", days_ago=1)
        yesterday = (TODAY - timedelta(days=1)).isoformat()

        assert client.get(f"/api/moods/by-date/{yesterday}", headers=auth_headers).json()["emoji"] == "😌"
        missing = client.get(f"/api/moods/by-date/{TODAY.isoformat()}", headers=auth_headers)
        assert missing.status_code == 404

    def test_delete_unknown_log(self, client, auth_headers):
        assert client.delete("/api/moods/999", headers=auth_headers).status_code == 404

    def test_storage_failure_returns_generic_error(self, client, auth_headers, tmp_path):
        broken = DatabaseManager(db_path=str(tmp_path / "missing" / "wellness.db"))
        app.dependency_overrides[get_mood_store] = lambda: MoodStore(broken)

        response = client.get("/api/moods", headers=auth_headers)

        assert response.status_code == 500
        assert response.json()["detail"] == "Something went wrong while saving your data. Please try again."


class TestDashboardStats:

    def test_empty_dashboard(self, client, auth_headers):
        data = client.get("/api/stats/dashboard", headers=auth_headers).json()
        assert data["streakDays"] == 0
        assert data["averageScore"] == 0
        assert data["improvementPercent"] == 0
        assert data["distribution"] == []
        assert data["today"] is None

    def test_streak_needs_today(self, client, auth_headers):
        log_mood(client, auth_headers, "😊", days_ago=1)
        log_mood(client, auth_headers, "😊", days_ago=2)

        data = client.get("/api/stats/dashboard", headers=auth_headers).json()
        assert data["streakDays"] == 0
        assert data["totalMoodLogs"] == 2

    def test_stats_for_window(self, client, auth_headers):
        log_mood(client, auth_headers, "😊")
        log_mood(client, auth_headers, "😢", days_ago=1)
        log_mood(client, auth_headers, "😭", days_ago=40)

        data = client.get("/api/stats/dashboard", params={"time_range": "7d"}, headers=auth_headers).json()

        assert data["timeRange"] == "7d"
        assert data["streakDays"] == 2
        assert data["entriesInRange"] == 2
        assert data["totalMoodLogs"] == 3
        assert data["averageScore"] == 5.0
        assert data["improvementPercent"] == -75
        assert data["today"]["emoji"] == "😊"
        assert {share["emoji"]: share["percentage"] for share in data["distribution"]} == {"😊": 50, "😢": 50}

    def test_unknown_time_range_rejected(self, client, auth_headers):
        response = client.get("/api/stats/dashboard", params={"time_range": "2w"}, headers=auth_headers)
        assert response.status_code == 422


class TestDiaryRoutes:

    def test_word_count_ignores_extra_whitespace(self, client, auth_headers):
        response = client.post(
            "/api/diary",
            json={"title": "Short", "content": "  Hello   world  "},
            headers=auth_headers,
        )
        assert response.status_code == 201
        assert response.json()["word_count"] == 2

    def test_search_and_stats(self, client, auth_headers):
        client.post("/api/diary", json={"title": "Beach", "content": "Swam in the sea"}, headers=auth_headers)
        client.post("/api/diary", json={"title": "Work", "content": "Long meeting day"}, headers=auth_headers)

        found = client.get("/api/diary", params={"search": "sea"}, headers=auth_headers).json()
        assert [entry["title"] for entry in found] == ["Beach"]

        stats = client.get("/api/diary/stats", headers=auth_headers).json()
        assert stats["totalEntries"] == 2
        assert stats["totalWords"] == 7
        assert stats["averageWords"] == 3.5
        assert stats["streakDays"] == 1

    def test_blank_title_rejected(self, client, auth_headers):
        response = client.post("/api/diary", json={"title": "   ", "content": "text"}, headers=auth_headers)
        assert response.status_code == 422

    def test_entries_are_private(self, client, auth_headers):
        entry = client.post("/api/diary", json={"title": "Mine", "content": "secret"}, headers=auth_headers).json()

        other = client.post(
            "/api/auth/signup",
            json={"name": "Grace", "email": "grace@example.com", "password": "another-pass"},
        ).json()
        other_headers = {"Authorization": f"Bearer {other['accessToken']}"}

        assert client.get("/api/diary", headers=other_headers).json() == []
        assert client.delete(f"/api/diary/{entry['id']}", headers=other_headers).status_code == 404


class TestChatRoutes:

    def test_exchange_is_stored_in_order(self, client, auth_headers):
        response = client.post("/api/chat/messages", json={"content": "I feel so stressed"}, headers=auth_headers)
        assert response.status_code == 201
        exchange = response.json()
        assert exchange["message"]["sender"] == "user"
        assert exchange["reply"]["sender"] == "ai"
        assert "breathing exercise" in exchange["reply"]["content"]

        history = client.get("/api/chat/messages", headers=auth_headers).json()
        assert [m["sender"] for m in history] == ["user", "ai"]

    def test_unmatched_message_gets_default_reply(self, client, auth_headers):
        exchange = client.post("/api/chat/messages", json={"content": "Hello"}, headers=auth_headers).json()
        assert exchange["reply"]["content"] == DEFAULT_RESPONSE


class TestInsightRoutes:

    def test_generate_summary(self, client, auth_headers, fake_gemini):
        log_mood(client, auth_headers, "😊")

        response = client.post("/api/summaries", json={"timeRange": "30d"}, headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["outcome"] == "parsed"
        assert data["moodLogsCount"] == 1
        assert data["diaryEntriesCount"] == 0
        assert len(data["recommendations"]) == 3
        assert "last 30 days" in fake_gemini.prompts[0]

        history = client.get("/api/summaries", headers=auth_headers).json()
        assert history[0]["id"] == data["summaryId"]
        assert history[0]["period"] == "30d"

    def test_summary_api_failure_still_answers(self, client, auth_headers, fake_gemini):
        fake_gemini.status_code = 500

        response = client.post("/api/summaries", json={}, headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["outcome"] == "fallback"
        assert data["summaryId"] is None
        assert data["error"]
        assert client.get("/api/summaries", headers=auth_headers).json() == []

    @pytest.mark.parametrize("body", ["<html>gateway</html>", ["not", "an", "object"]])
    def test_malformed_reply_still_answers(self, client, auth_headers, fake_gemini, body):
        fake_gemini.raw_response = body

        summary = client.post("/api/summaries", json={}, headers=auth_headers)
        recommendations = client.post("/api/recommendations", json={"source": "dashboard"}, headers=auth_headers)

        assert summary.status_code == 200
        assert summary.json()["outcome"] == "fallback"
        assert summary.json()["error"] == "The AI service returned a malformed reply"
        assert recommendations.status_code == 200
        assert recommendations.json()["outcome"] == "fallback"
        assert client.get("/api/summaries", headers=auth_headers).json() == []
        assert client.get("/api/recommendations", headers=auth_headers).json() == []

    def test_generate_recommendations(self, client, auth_headers, fake_gemini):
        fake_gemini.reply = '```json\n["Stretch for five minutes.", "Drink a glass of water."]\n```'

        response = client.post("/api/recommendations", json={"source": "dashboard"}, headers=auth_headers)

        data = response.json()
        assert data["recommendations"] == ["Stretch for five minutes.", "Drink a glass of water."]
        history = client.get("/api/recommendations", headers=auth_headers).json()
        assert history[0]["id"] == data["id"]
        assert history[0]["source"] == "dashboard"


class TestProfileRoutes:

    def test_update_profile(self, client, auth_headers):
        response = client.patch("/api/profile", json={"bio": "Tea enthusiast"}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["bio"] == "Tea enthusiast"
        assert response.json()["name"] == "Ada"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, client, auth_headers, name):
        response = client.patch("/api/profile", json={"name": name}, headers=auth_headers)
        assert response.status_code == 422

    def test_export_download(self, client, auth_headers):
        log_mood(client, auth_headers, "🥰", note="date night")
        client.post("/api/diary", json={"title": "Evening", "content": "Lovely dinner"}, headers=auth_headers)

        response = client.get("/api/profile/export", headers=auth_headers)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert 'filename="wellness-export-' in response.headers["content-disposition"]
        assert "Wellness Journal Export" in response.text
        assert "🥰 Loved - date night" in response.text
        assert "Evening" in response.text
