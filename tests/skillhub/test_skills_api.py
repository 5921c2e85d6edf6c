"""Integration tests for the Skills API endpoints."""

from __future__ import annotations

from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from skillhub.database import get_db
from skillhub.main import app
from skillhub.models.skill import Skill


def _add(client, headers, name="Go", proficiency="expert"):
    response = client.post(
        "/skills", json={"skill_name": name, "proficiency": proficiency}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()["skill"]


class TestScenario:
    """The register, login, add, list flow end to end."""

    def test_full_flow(self, client):
        """A new user starts with no skills and sees the one they add."""
        register = client.post(
            "/register", json={"username": "alice", "email": "a@x.com", "password": "pw1"}
        )
        assert register.status_code == 201
        alice_id = register.json()["user"]["id"]

        login = client.post("/login", json={"email": "a@x.com", "password": "pw1"})
        assert login.status_code == 200
        headers = {"Authorization": f"Bearer {login.json()['token']}"}

        listing = client.get("/skills", headers=headers)
        assert listing.status_code == 200
        assert listing.json() == []

        created = client.post(
            "/skills", json={"skill_name": "Go", "proficiency": "expert"}, headers=headers
        )
        assert created.status_code == 201
        skill = created.json()["skill"]
        assert created.json()["message"] == "Skill added successfully"
        assert skill["user_id"] == alice_id
        assert skill["skill_name"] == "Go"
        assert skill["proficiency"] == "expert"

        listing = client.get("/skills", headers=headers)
        assert listing.status_code == 200
        assert listing.json() == [skill]


class TestListSkills:
    """Tests for GET /skills."""

    def test_only_own_skills_listed(self, client, alice, bob):
        """Each user sees only their own skills."""
        _, alice_headers = alice
        _, bob_headers = bob
        _add(client, alice_headers, "Go")
        _add(client, bob_headers, "Rust")

        names = [s["skill_name"] for s in client.get("/skills", headers=alice_headers).json()]
        assert names == ["Go"]

    def test_requires_token(self, client):
        """No token is a 401."""
        assert client.get("/skills").status_code == 401

    def test_database_failure(self, client, alice):
        """A persistence failure is a 500."""
        _, headers = alice
        broken = MagicMock()
        broken.query.side_effect = OperationalError("SELECT", {}, Exception("db down"))
        app.dependency_overrides[get_db] = lambda: broken

        response = client.get("/skills", headers=headers)
        assert response.status_code == 500
        assert response.json() == {"error": "Error fetching skills"}


class TestAddSkill:
    """Tests for POST /skills."""

    def test_owner_comes_from_token(self, client, db, alice, bob):
        """A user_id in the body is ignored in favour of the caller's identity."""
        alice_user, alice_headers = alice
        bob_user, _ = bob
        response = client.post(
            "/skills",
            json={
                "skill_name": "Go",
                "proficiency": "expert",
                "user_id": bob_user["id"],
                "userId": bob_user["id"],
            },
            headers=alice_headers,
        )
        assert response.status_code == 201
        stored = db.query(Skill).filter(Skill.id == response.json()["skill"]["id"]).one()
        assert stored.user_id == alice_user["id"]

    def test_missing_proficiency(self, client, alice):
        """Missing fields are a 400."""
        _, headers = alice
        response = client.post("/skills", json={"skill_name": "Go"}, headers=headers)
        assert response.status_code == 400
        assert response.json() == {"error": "Please provide both skill name and proficiency"}

    def test_values_are_stripped(self, client, alice):
        """Surrounding whitespace is not stored."""
        _, headers = alice
        skill = _add(client, headers, "  Python ", " intermediate ")
        assert skill["skill_name"] == "Python"
        assert skill["proficiency"] == "intermediate"

    def test_proficiency_too_long(self, client, alice):
        """Over-long proficiency text is rejected."""
        _, headers = alice
        response = client.post(
            "/skills", json={"skill_name": "Go", "proficiency": "x" * 51}, headers=headers
        )
        assert response.status_code == 400

    def test_requires_token(self, client):
        """No token is a 401."""
        response = client.post("/skills", json={"skill_name": "Go", "proficiency": "expert"})
        assert response.status_code == 401


class TestUpdateSkill:
    """Tests for PUT /skills/{id}."""

    def test_update_success(self, client, alice):
        """The owner can rename a skill and change its proficiency."""
        _, headers = alice
        skill = _add(client, headers)
        response = client.put(
            f"/skills/{skill['id']}",
            json={"skill_name": "Golang", "proficiency": "advanced"},
            headers=headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Skill updated successfully"
        assert data["skill"]["id"] == skill["id"]
        assert data["skill"]["skill_name"] == "Golang"
        assert data["skill"]["proficiency"] == "advanced"
        assert data["skill"]["user_id"] == skill["user_id"]

    def test_update_missing_fields(self, client, alice):
        """Missing fields are a 400."""
        _, headers = alice
        skill = _add(client, headers)
        response = client.put(
            f"/skills/{skill['id']}", json={"proficiency": "advanced"}, headers=headers
        )
        assert response.status_code == 400

    def test_update_nonexistent(self, client, alice):
        """An unknown id is a 404."""
        _, headers = alice
        response = client.put(
            "/skills/9999", json={"skill_name": "Go", "proficiency": "expert"}, headers=headers
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Skill not found"}

    def test_update_other_users_skill(self, client, db, alice, bob):
        """Another user's skill is left untouched and the call is a 403."""
        _, alice_headers = alice
        _, bob_headers = bob
        skill = _add(client, alice_headers)

        response = client.put(
            f"/skills/{skill['id']}",
            json={"skill_name": "Hacked", "proficiency": "none"},
            headers=bob_headers,
        )
        assert response.status_code == 403
        stored = db.query(Skill).filter(Skill.id == skill["id"]).one()
        assert stored.skill_name == "Go"

    def test_update_non_integer_id(self, client, alice):
        """A non-numeric id is a 400."""
        _, headers = alice
        response = client.put(
            "/skills/abc", json={"skill_name": "Go", "proficiency": "expert"}, headers=headers
        )
        assert response.status_code == 400


class TestDeleteSkill:
    """Tests for DELETE /skills/{id}."""

    def test_delete_then_absent(self, client, alice):
        """A deleted skill disappears and a repeat delete is a 404."""
        _, headers = alice
        skill = _add(client, headers)

        response = client.delete(f"/skills/{skill['id']}", headers=headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Skill deleted successfully"}

        assert client.get("/skills", headers=headers).json() == []
        again = client.delete(f"/skills/{skill['id']}", headers=headers)
        assert again.status_code == 404

    def test_delete_other_users_skill(self, client, db, alice, bob):
        """Another user's skill survives and the call is a 403."""
        _, alice_headers = alice
        _, bob_headers = bob
        skill = _add(client, alice_headers)

        response = client.delete(f"/skills/{skill['id']}", headers=bob_headers)
        assert response.status_code == 403
        assert db.query(Skill).filter(Skill.id == skill["id"]).count() == 1

    def test_delete_requires_token(self, client):
        """No token is a 401."""
        assert client.delete("/skills/1").status_code == 401
