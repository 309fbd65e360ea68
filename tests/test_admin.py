import pytest

from skillswap.core.config import settings
from tests.conftest import API, add_skill, login


def review_swap(client, admin, request_id, action):
    return client.put(f"{API}/admin/swap-requests/{request_id}", json={"action": action}, headers=admin["headers"])


def test_list_all_users_includes_banned(client, db, alice, bob, admin):
    db.users.update(bob["id"], is_banned=True)
    response = client.get(f"{API}/admin/users", headers=admin["headers"])
    assert response.status_code == 200
    assert response.json()["meta"]["count"] == 3


def test_ban_and_unban(client, alice, admin):
    response = client.post(f"{API}/admin/users/{alice['id']}/ban", headers=admin["headers"])
    assert response.status_code == 200
    assert response.json()["data"]["is_banned"] is True
    assert login(client, "alice@example.com").status_code == 401

    response = client.post(f"{API}/admin/users/{alice['id']}/unban", headers=admin["headers"])
    assert response.status_code == 200
    assert response.json()["data"]["is_banned"] is False
    assert login(client, "alice@example.com").status_code == 200


def test_admin_cannot_ban_or_delete_self(client, admin):
    assert client.post(f"{API}/admin/users/{admin['id']}/ban", headers=admin["headers"]).status_code == 400
    assert client.delete(f"{API}/admin/users/{admin['id']}", headers=admin["headers"]).status_code == 400


def test_ban_unknown_user(client, admin):
    assert client.post(f"{API}/admin/users/999/ban", headers=admin["headers"]).status_code == 404


def test_delete_user_removes_their_skills(client, db, alice, bob, admin):
    add_skill(client, alice, "Cooking")
    add_skill(client, bob, "Guitar")

    response = client.delete(f"{API}/admin/users/{alice['id']}", headers=admin["headers"])
    assert response.status_code == 200
    assert db.users.find_by_id(alice["id"]) is None
    assert [skill.name for skill in db.skills.all()] == ["Guitar"]


def test_reject_pending_skill_removes_it(client, db, monkeypatch, alice, admin):
    monkeypatch.setattr(settings, "SKILLS_REQUIRE_APPROVAL", True)
    skill = add_skill(client, alice, "Cooking")

    response = client.put(f"{API}/admin/skills/{skill['id']}", json={"action": "reject"}, headers=admin["headers"])
    assert response.status_code == 200
    assert response.json()["data"] is None
    assert db.skills.count() == 0


def test_skill_review_errors(client, alice, admin):
    skill = add_skill(client, alice, "Cooking")
    response = client.put(f"{API}/admin/skills/{skill['id']}", json={"action": "maybe"}, headers=admin["headers"])
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid action"
    assert client.put(f"{API}/admin/skills/999", json={"action": "approve"}, headers=admin["headers"]).status_code == 404


def test_list_all_swap_requests(client, carol, admin, swap):
    response = client.get(f"{API}/admin/swap-requests", headers=admin["headers"])
    assert [request["id"] for request in response.json()["data"]] == [swap["id"]]
    assert client.get(f"{API}/admin/swap-requests", headers=carol["headers"]).status_code == 403


@pytest.mark.parametrize("action, status", [("approve", "accepted"), ("reject", "rejected"), ("flag", "flagged")])
def test_review_pending_swap(client, admin, swap, action, status):
    response = review_swap(client, admin, swap["id"], action)
    assert response.status_code == 200
    assert response.json()["data"]["status"] == status


def test_flagged_swap_can_still_be_approved(client, admin, swap):
    review_swap(client, admin, swap["id"], "flag")
    assert review_swap(client, admin, swap["id"], "approve").json()["data"]["status"] == "accepted"


def test_completed_swap_can_be_flagged_but_not_approved(client, alice, bob, admin, swap):
    client.put(f"{API}/swap-requests/{swap['id']}", json={"status": "accepted"}, headers=alice["headers"])
    client.put(f"{API}/swap-requests/{swap['id']}", json={"status": "completed"}, headers=bob["headers"])

    response = review_swap(client, admin, swap["id"], "reject")
    assert response.status_code == 400
    assert response.json()["error"] == "Cannot reject a swap request that is completed"
    assert review_swap(client, admin, swap["id"], "flag").status_code == 200


def test_flagged_swap_participant_can_only_cancel(client, bob, admin, swap):
    review_swap(client, admin, swap["id"], "flag")
    url = f"{API}/swap-requests/{swap['id']}"
    assert client.put(url, json={"status": "accepted"}, headers=bob["headers"]).status_code == 400
    assert client.put(url, json={"status": "cancelled"}, headers=bob["headers"]).status_code == 200


def test_swap_review_errors(client, admin, swap):
    assert review_swap(client, admin, swap["id"], "delete").status_code == 400
    assert review_swap(client, admin, 999, "flag").status_code == 404


def test_admin_message_crud(client, db, alice, admin):
    response = client.post(
        f"{API}/admin/messages",
        json={"title": " Update ", "content": "New features", "type": "update"},
        headers=admin["headers"],
    )
    assert response.status_code == 201
    message = response.json()["data"]
    assert message["title"] == "Update"
    assert message["admin_id"] == admin["id"]
    assert message["is_active"] is True

    response = client.put(
        f"{API}/admin/messages/{message['id']}",
        json={"content": "Even newer", "title": None},
        headers=admin["headers"],
    )
    assert response.status_code == 200
    assert response.json()["data"]["content"] == "Even newer"
    assert response.json()["data"]["title"] == "Update"

    assert len(client.get(f"{API}/admin/messages", headers=admin["headers"]).json()["data"]) == 1
    assert client.get(f"{API}/admin/messages", headers=alice["headers"]).status_code == 403

    assert client.delete(f"{API}/admin/messages/{message['id']}", headers=admin["headers"]).status_code == 200
    assert db.admin_messages.count() == 0
    assert client.delete(f"{API}/admin/messages/{message['id']}", headers=admin["headers"]).status_code == 404


def test_admin_message_requires_title_and_content(client, admin):
    response = client.post(f"{API}/admin/messages", json={"title": "  ", "content": "x"}, headers=admin["headers"])
    assert response.status_code == 400
    assert response.json()["error"] == "Title and content are required"

    response = client.put(f"{API}/admin/messages/999", json={"title": "x"}, headers=admin["headers"])
    assert response.status_code == 404
