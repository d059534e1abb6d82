"""
Tests for action item endpoints.
"""


def test_action_lifecycle(client, make_user, make_reflection):
    """Test create, update, status change, complete and delete."""
    user = make_user("alice")
    reflection = make_reflection(user)

    response = client.post("/api/actions", json={"reflection_id": reflection.id, "action": "Write retro"})
    assert response.status_code == 201
    action = response.json()
    assert action["status"] == "Pending"
    assert action["priority"] == "Medium"

    response = client.put(
        f"/api/actions/{action['id']}",
        json={"action": "Write retro doc", "priority": "High", "status": "Pending"}
    )
    assert response.json()["priority"] == "High"

    response = client.patch(f"/api/actions/{action['id']}/status", json={"status": "Done"})
    assert response.json()["status"] == "Done"

    response = client.put(f"/api/actions/{action['id']}/status", json={"status": "Pending"})
    assert response.json()["status"] == "Pending"

    response = client.patch(f"/api/actions/{action['id']}/complete")
    assert response.json()["status"] == "Done"

    assert client.delete(f"/api/actions/{action['id']}").status_code == 200
    assert client.get(f"/api/actions/{action['id']}").status_code == 404


def test_invalid_status(client, make_user, make_reflection):
    user = make_user("alice")
    reflection = make_reflection(user)
    action_id = client.post(
        "/api/actions", json={"reflection_id": reflection.id, "action": "x"}
    ).json()["id"]

    response = client.patch(f"/api/actions/{action_id}/status", json={"status": "Someday"})
    assert response.status_code == 400


def test_action_requires_reflection(client):
    """Test that actions attach only to existing reflections."""
    response = client.post("/api/actions", json={"reflection_id": 77, "action": "x"})
    assert response.status_code == 404

    response = client.post("/api/actions", json={"reflection_id": 77, "action": ""})
    assert response.status_code == 400


def test_actions_listed_on_reflection(client, make_user, make_reflection):
    """Test actions show up on the reflection and its action list."""
    user = make_user("alice")
    reflection = make_reflection(user)
    for text in ("first", "second"):
        client.post("/api/actions", json={"reflection_id": reflection.id, "action": text})

    listed = client.get(f"/api/reflections/{reflection.id}/actions").json()
    assert [a["action"] for a in listed] == ["second", "first"]

    detail = client.get(f"/api/reflections/{reflection.id}").json()
    assert [a["action"] for a in detail["actions"]] == ["first", "second"]
