def _send(client, description="A landing page", contact="me@example.com"):
    response = client.post(
        "/api/messages",
        json={"projectDescription": description, "contactInfo": contact},
    )
    assert response.status_code == 201
    body = response.get_json()
    assert body["success"] is True
    return body["id"]


def test_visitors_can_leave_messages(client, admin_client):
    message_id = _send(client)

    messages = admin_client.get("/api/messages").get_json()

    assert len(messages) == 1
    assert messages[0]["id"] == message_id
    assert messages[0]["project_description"] == "A landing page"
    assert messages[0]["contact_info"] == "me@example.com"
    assert messages[0]["submitted_at"]


def test_snake_case_fields_are_accepted(client):
    response = client.post(
        "/api/messages",
        json={"project_description": "Logo", "contact_info": "@me"},
    )

    assert response.status_code == 201


def test_missing_fields_are_rejected(client):
    response = client.post("/api/messages", json={"projectDescription": "Only this"})

    assert response.status_code == 400


def test_listing_requires_admin(client):
    assert client.get("/api/messages").status_code == 401


def test_newest_message_first(client, admin_client):
    first = _send(client, description="first")
    second = _send(client, description="second")

    ids = [m["id"] for m in admin_client.get("/api/messages").get_json()]

    assert ids == [second, first]


def test_delete_removes_message(client, admin_client):
    keep = _send(client, description="keep")
    drop = _send(client, description="drop")

    response = admin_client.delete(f"/api/messages/{drop}")

    assert response.get_json() == {"message": "deleted", "changes": 1}
    assert [m["id"] for m in admin_client.get("/api/messages").get_json()] == [keep]


def test_delete_unknown_message_is_zero_changes(admin_client):
    response = admin_client.delete("/api/messages/12345")

    assert response.status_code == 200
    assert response.get_json() == {"message": "deleted", "changes": 0}
