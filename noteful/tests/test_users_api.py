from __future__ import annotations

from flask.testing import FlaskClient

from noteful.infrastructure.container import Container

USERNAME = "exampleUser"
PASSWORD = "examplePass"
FULLNAME = "Example User"


def _register(client: FlaskClient, **body: object):
    return client.post("/api/users", json=body)


def test_create_user(client: FlaskClient, container: Container) -> None:
    response = _register(client, fullname=FULLNAME, username=USERNAME, password=PASSWORD)

    assert response.status_code == 201
    body = response.get_json()
    assert set(body) == {"id", "username", "fullname"}
    assert body["id"]
    assert body["username"] == USERNAME
    assert body["fullname"] == FULLNAME
    assert response.headers["Location"].endswith(f"/api/users/{body['id']}")

    stored = container.user_repository.find_by_username(USERNAME)
    assert stored is not None
    assert stored.id == body["id"]
    assert container.password_hasher.verify(PASSWORD, stored.password_hash)


def test_missing_username(client: FlaskClient) -> None:
    response = _register(client, fullname=FULLNAME, password=PASSWORD)

    assert response.status_code == 422
    assert response.get_json()["message"] == "Missing 'username' in request body"
    assert response.get_json()["location"] == "username"


def test_missing_password(client: FlaskClient) -> None:
    response = _register(client, fullname=FULLNAME, username=USERNAME)

    assert response.status_code == 422
    assert response.get_json()["message"] == "Missing 'password' in request body"


def test_non_string_fields(client: FlaskClient) -> None:
    for body in (
        {"fullname": FULLNAME, "username": 123, "password": PASSWORD},
        {"fullname": FULLNAME, "username": USERNAME, "password": 123},
    ):
        response = _register(client, **body)
        assert response.status_code == 422
        assert response.get_json()["message"] == "Incorrect field type: expected string"


def test_non_trimmed_fields(client: FlaskClient) -> None:
    for body in (
        {"fullname": FULLNAME, "username": " joe ", "password": PASSWORD},
        {"fullname": FULLNAME, "username": USERNAME, "password": " password "},
    ):
        response = _register(client, **body)
        assert response.status_code == 422
        assert response.get_json()["message"] == "Cannot start or end with whitespace"


def test_empty_username(client: FlaskClient) -> None:
    response = _register(client, fullname=FULLNAME, username="", password=PASSWORD)

    assert response.status_code == 422
    assert response.get_json()["reason"] == "ValidationError"
    assert response.get_json()["message"] == "Must be at least 1 characters long"


def test_short_password(client: FlaskClient) -> None:
    response = _register(client, fullname=FULLNAME, username=USERNAME, password="1")

    assert response.status_code == 422
    assert response.get_json()["reason"] == "ValidationError"
    assert response.get_json()["message"] == "Must be at least 8 characters long"


def test_long_password(client: FlaskClient) -> None:
    response = _register(client, fullname=FULLNAME, username=USERNAME, password="a" * 81)

    assert response.status_code == 422
    assert response.get_json()["reason"] == "ValidationError"
    assert response.get_json()["message"] == "Must be at most 72 characters long"


def test_duplicate_username(client: FlaskClient) -> None:
    first = _register(client, fullname=FULLNAME, username=USERNAME, password=PASSWORD)
    second = _register(client, fullname=FULLNAME, username=USERNAME, password=PASSWORD)

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.get_json()["message"] == "The username already exists"


def test_fullname_is_trimmed(client: FlaskClient) -> None:
    response = _register(client, fullname=" Example User ", username=USERNAME, password=PASSWORD)

    assert response.status_code == 201
    assert set(response.get_json()) == {"id", "fullname", "username"}
    assert response.get_json()["fullname"] == FULLNAME


def test_non_json_body_is_a_validation_error(client: FlaskClient) -> None:
    response = client.post("/api/users", data="username=joe", content_type="text/plain")

    assert response.status_code == 422
    assert response.get_json()["message"] == "Missing 'username' in request body"
