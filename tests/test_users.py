from tests.conftest import API, add_skill


def test_update_own_profile(client, alice):
    response = client.put(
        f"{API}/users/me",
        json={
            "bio": "Home cook",
            "location": "Lyon",
            "availability": ["weekends", "evenings", "weekends"],
            "is_public": False,
        },
        headers=alice["headers"],
    )

    assert response.status_code == 200
    user = response.json()["data"]
    assert user["bio"] == "Home cook"
    assert user["location"] == "Lyon"
    assert user["availability"] == ["weekends", "evenings"]
    assert user["is_public"] is False
    assert user["name"] == "Alice"


def test_update_profile_ignores_null_for_required_fields(client, alice):
    response = client.put(f"{API}/users/me", json={"name": None, "bio": "x"}, headers=alice["headers"])
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Alice"


def test_update_profile_rejects_unknown_availability(client, alice):
    response = client.put(f"{API}/users/me", json={"availability": ["always"]}, headers=alice["headers"])
    assert response.status_code == 400


def test_browse_lists_only_public_unbanned_users(client, db, alice, bob, carol):
    client.put(f"{API}/users/me", json={"is_public": False}, headers=bob["headers"])
    db.users.update(carol["id"], is_banned=True)

    response = client.get(f"{API}/users")
    assert response.status_code == 200
    assert [user["id"] for user in response.json()["data"]] == [alice["id"]]
    assert response.json()["meta"] == {"count": 1}


def test_browse_by_skill(client, alice, bob):
    add_skill(client, alice, "Italian Cooking")
    add_skill(client, bob, "Guitar")

    response = client.get(f"{API}/users", params={"skill": "cook"})
    assert [user["id"] for user in response.json()["data"]] == [alice["id"]]


def test_private_profile_hidden_from_others(client, alice, bob, admin):
    client.put(f"{API}/users/me", json={"is_public": False}, headers=alice["headers"])

    assert client.get(f"{API}/users/{alice['id']}", headers=bob["headers"]).status_code == 404
    assert client.get(f"{API}/users/{alice['id']}", headers=alice["headers"]).status_code == 200
    assert client.get(f"{API}/users/{alice['id']}", headers=admin["headers"]).status_code == 200


def test_unknown_user(client, alice):
    response = client.get(f"{API}/users/999", headers=alice["headers"])
    assert response.status_code == 404
    assert response.json()["error"] == "User not found"


def test_users_me_requires_auth(client):
    assert client.get(f"{API}/users/me").status_code == 401
