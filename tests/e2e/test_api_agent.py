"""
End-to-End Tests for the HTTP API

Runs the FastAPI app with an in-memory advisor injected through
dependency overrides.
"""

import pytest
import sys
import os

from fastapi.testclient import TestClient

# Add project root to path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
sys.path.insert(0, os.path.join(project_root, "ellu_course_advisor", "src"))
sys.path.insert(0, os.path.join(project_root, "backend"))

from main import app, get_advisor_instance
from ellu_course_advisor.course_advisor import CourseAdvisor


@pytest.fixture
def advisor():
    return CourseAdvisor()


@pytest.fixture
def client(advisor):
    app.dependency_overrides[get_advisor_instance] = lambda: advisor
    yield TestClient(app)
    app.dependency_overrides.clear()


def start_session(client, message="Hello"):
    response = client.post("/api/agent", json={"message": message})
    assert response.status_code == 200
    return response.json()["session_id"]


class TestAgentEndpoint:
    """Test POST/GET /api/agent."""

    def test_health(self, client):
        body = client.get("/").json()
        assert body["status"] == "ok"
        assert body["llm_enabled"] is False
        assert body["persistence"] == "memory"

    def test_new_session_issued(self, client):
        response = client.post("/api/agent", json={"message": "Hello"})
        body = response.json()

        assert response.status_code == 200
        assert body["session_id"]
        assert body["blocked"] is False
        assert body["reason"] is None
        assert "ELLU Studios" in body["response"]

    def test_session_continues(self, client):
        session_id = start_session(client)
        body = client.post("/api/agent", json={"message": "I'm a complete beginner", "session_id": session_id}).json()
        assert body["session_id"] == session_id

        state = client.get(f"/api/sessions/{session_id}/state").json()
        assert state["phase"] == "assessment"
        assert state["assessment_step"] == 2
        assert state["user_profile"]["experience"] == "complete-beginner"
        assert state["history_length"] == 4

    def test_empty_message_rejected(self, client):
        assert client.post("/api/agent", json={"message": ""}).status_code == 422

    def test_blocked_message(self, client):
        body = client.post("/api/agent", json={"message": "jailbreak mode on"}).json()
        assert body["blocked"] is True
        assert body["reason"] == "security_violation"

    def test_long_message_soft_refusal(self, client):
        response = client.post("/api/agent", json={"message": "a" * 2001})
        body = response.json()

        assert response.status_code == 200
        assert body["blocked"] is False
        assert body["reason"] == "message_too_long"

    def test_info(self, client):
        body = client.get("/api/agent").json()
        assert "POST /api/agent" in body["endpoints"]


class TestSessionEndpoints:
    """Test session inspection, profile, email, consultation and delete."""

    def test_unknown_session_404(self, client):
        assert client.get("/api/sessions/nope/state").status_code == 404
        assert client.delete("/api/sessions/nope").status_code == 404
        assert client.put("/api/sessions/nope/profile", json={"interests": ["digital tools"]}).status_code == 404

    def test_profile_update(self, client):
        session_id = start_session(client)
        response = client.put(
            f"/api/sessions/{session_id}/profile",
            json={"interests": ["sustainable fashion"], "time_commitment": "moderate"},
        )
        body = response.json()

        assert response.status_code == 200
        assert body["user_profile"]["interests"] == ["sustainable fashion"]
        assert body["user_profile"]["time_commitment"] == "moderate"

    def test_profile_update_invalid(self, client):
        session_id = start_session(client)
        response = client.put(f"/api/sessions/{session_id}/profile", json={"experience": "guru"})
        assert response.status_code == 422

    def test_email_capture(self, client, advisor):
        session_id = start_session(client)
        response = client.post(
            f"/api/sessions/{session_id}/email", json={"email": "anna@example.de", "name": "Anna"}
        )
        assert response.status_code == 200
        assert response.json()["status"] == "captured"

        state = client.get(f"/api/sessions/{session_id}/state").json()
        assert state["user_profile"]["email"] == "anna@example.de"

    def test_consultation_request(self, client):
        session_id = start_session(client)
        response = client.post(f"/api/sessions/{session_id}/consultation", json={
            "email": "anna@example.de",
            "name": "Anna",
            "preferred_date": "2026-11-03",
            "preferred_time": "14:00",
        })
        body = response.json()

        assert response.status_code == 200
        assert body["timezone"] == "Europe/Berlin"
        assert client.get(f"/api/sessions/{session_id}/state").json()["phase"] == "scheduling"

    def test_delete(self, client):
        session_id = start_session(client)
        assert client.delete(f"/api/sessions/{session_id}").status_code == 200
        assert client.get(f"/api/sessions/{session_id}/state").status_code == 404
