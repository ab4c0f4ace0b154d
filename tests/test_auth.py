import logging


def test_login_success_omits_password(client, user):
    res = client.post("/api/login", json={"email": "alice@example.com", "password": "secret"})
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["message"] == "Login successful"
    assert body["data"] == {"id": user["id"], "name": "Alice", "email": "alice@example.com"}
    assert "password" not in body["data"]


def test_login_wrong_password(client, user):
    res = client.post("/api/login", json={"email": "alice@example.com", "password": "nope"})
    assert res.status_code == 401
    assert res.json() == {"success": False, "error": "Invalid email or password"}


def test_login_unknown_email(client):
    res = client.post("/api/login", json={"email": "nobody@example.com", "password": "secret"})
    assert res.status_code == 401


def test_login_accepts_form_body(client, user):
    res = client.post("/api/login", data={"email": "alice@example.com", "password": "secret"})
    assert res.status_code == 200
    assert res.json()["data"]["id"] == user["id"]


def test_login_missing_fields_never_touches_storage(broken_client):
    # Any query against the broken engine would turn into a 500
    for payload in ({}, {"email": "alice@example.com"}, {"password": "secret"}, {"email": "", "password": ""}):
        res = broken_client.post("/api/login", json=payload)
        assert res.status_code == 400
        assert res.json() == {"success": False, "error": "Email and password are required"}


def test_login_storage_failure(broken_client):
    res = broken_client.post("/api/login", json={"email": "alice@example.com", "password": "secret"})
    assert res.status_code == 500
    assert res.json()["success"] is False


def test_failed_login_is_logged(client, user, caplog):
    with caplog.at_level(logging.WARNING, logger="routes.auth"):
        client.post("/api/login", json={"email": "alice@example.com", "password": "nope"})
    assert "Failed login for alice@example.com" in caplog.text
