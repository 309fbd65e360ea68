from skillswap.core.config import settings
from tests.conftest import API, add_skill, register


def test_scenario_skill_is_approved_and_listed_for_owner(client, db):
    user = register(client, "a@x.com", "A", password="pw")
    skill = add_skill(client, user, "Cooking")

    assert skill["is_approved"] is True
    assert skill["user_id"] == user["id"]
    assert [s.id for s in db.skills.find_by_user_id(user["id"])] == [skill["id"]]


def test_list_skills_filters_by_user(client, alice, bob):
    cooking = add_skill(client, alice, "Cooking")
    add_skill(client, bob, "Guitar")

    response = client.get(f"{API}/skills", params={"user_id": alice["id"]})
    assert response.status_code == 200
    assert [skill["id"] for skill in response.json()["data"]] == [cooking["id"]]
    assert len(client.get(f"{API}/skills").json()["data"]) == 2


def test_duplicate_skill_is_rejected_case_insensitively(client, db, alice):
    add_skill(client, alice, "Cooking", "offered")
    response = client.post(
        f"{API}/skills", json={"name": "  cooking ", "type": "offered"}, headers=alice["headers"]
    )

    assert response.status_code == 400
    assert response.json()["error"] == "You already have this skill in your list"
    assert db.skills.count() == 1


def test_same_name_with_other_type_is_allowed(client, alice):
    add_skill(client, alice, "Cooking", "offered")
    add_skill(client, alice, "Cooking", "wanted")


def test_invalid_skill_type(client, alice):
    response = client.post(f"{API}/skills", json={"name": "Cooking", "type": "taught"}, headers=alice["headers"])
    assert response.status_code == 400


def test_blank_skill_name(client, alice):
    response = client.post(f"{API}/skills", json={"name": "  ", "type": "offered"}, headers=alice["headers"])
    assert response.status_code == 400


def test_only_owner_can_delete_skill(client, db, alice, bob):
    skill = add_skill(client, alice, "Cooking")

    response = client.delete(f"{API}/skills/{skill['id']}", headers=bob["headers"])
    assert response.status_code == 403
    assert db.skills.count() == 1

    response = client.delete(f"{API}/skills/{skill['id']}", headers=alice["headers"])
    assert response.status_code == 200
    assert db.skills.find_by_id(skill["id"]) is None

    assert client.delete(f"{API}/skills/{skill['id']}", headers=alice["headers"]).status_code == 404


def test_skills_wait_for_approval_when_policy_enabled(client, monkeypatch, alice, admin):
    monkeypatch.setattr(settings, "SKILLS_REQUIRE_APPROVAL", True)
    skill = add_skill(client, alice, "Cooking")

    assert skill["is_approved"] is False
    assert client.get(f"{API}/skills").json()["data"] == []
    own = client.get(f"{API}/skills/me", headers=alice["headers"]).json()["data"]
    assert [s["id"] for s in own] == [skill["id"]]

    pending = client.get(f"{API}/admin/skills", headers=admin["headers"]).json()["data"]
    assert [s["id"] for s in pending] == [skill["id"]]

    response = client.put(f"{API}/admin/skills/{skill['id']}", json={"action": "approve"}, headers=admin["headers"])
    assert response.status_code == 200
    assert response.json()["data"]["is_approved"] is True
    assert len(client.get(f"{API}/skills").json()["data"]) == 1
