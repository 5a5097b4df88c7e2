import io
from datetime import datetime, timezone

import pytest


def register(client, username, email, password):
    return client.post("/register", json={"username": username, "email": email, "password": password})


def upload(client, headers, filename="a.txt", content=b"hello", content_type="text/plain"):
    return client.post("/upload", files={"file": (filename, io.BytesIO(content), content_type)}, headers=headers)


def test_read_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == "Server is running"


def test_create_user(client):
    response = register(client, "test", "test@example.com", "string")
    assert response.status_code == 201, response.text
    token = response.json()["token"]
    assert len(token) == 32
    assert token.isalnum()


def test_login_returns_token_that_authenticates(client):
    register(client, "bob", "bob@example.com", "secret")

    response = client.post("/login", json={"username": "bob", "password": "secret"})
    assert response.status_code == 200, response.text
    token = response.json()["token"]

    files = client.get("/files", headers={"Authorization": f"Bearer {token}"})
    assert files.status_code == 200
    assert files.json() == []


def test_every_login_issues_a_new_token(client):
    first = register(client, "bob", "bob@example.com", "secret").json()["token"]
    second = client.post("/login", json={"username": "bob", "password": "secret"}).json()["token"]

    assert first != second
    for token in (first, second):
        assert client.get("/files", headers={"Authorization": f"Bearer {token}"}).status_code == 200


def test_bare_token_header_is_accepted(client, user_token):
    response = client.get("/files", headers={"Authorization": user_token})
    assert response.status_code == 200


def test_upload_file(client, auth_headers):
    response = upload(client, auth_headers)

    assert response.status_code == 201, response.text
    data = response.json()
    assert data["detail"] == "File uploaded successfully"
    assert data["file"]["filename"] == "a.txt"
    assert data["file"]["visibility"] == "private"
    assert "public_url" not in data["file"]


def test_show_user_files(client, auth_headers):
    upload(client, auth_headers, "first.txt", b"1")
    upload(client, auth_headers, "second.txt", b"2")

    response = client.get("/files", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert [item["filename"] for item in data] == ["first.txt", "second.txt"]
    created_at = datetime.fromisoformat(data[0]["created_at"])
    assert created_at.tzinfo is not None
    assert abs((created_at - datetime.now(timezone.utc)).total_seconds()) < 60


def test_listed_file_matches_upload_response(client, auth_headers):
    uploaded = upload(client, auth_headers).json()["file"]

    listed = client.get("/files", headers=auth_headers).json()

    assert listed == [uploaded]


def test_files_of_other_users_are_not_listed(client, auth_headers):
    upload(client, auth_headers, "mine.txt", b"mine")
    other_token = register(client, "other", "other@example.com", "pw").json()["token"]

    response = client.get("/files", headers={"Authorization": f"Bearer {other_token}"})

    assert response.status_code == 200
    assert response.json() == []


def test_make_file_public(client, auth_headers):
    file_id = upload(client, auth_headers).json()["file"]["id"]

    response = client.post(f"/files/{file_id}/make_public", headers=auth_headers)

    assert response.status_code == 200, response.text
    data = response.json()
    assert data["id"] == file_id
    assert data["visibility"] == "public"
    assert data["public_url"] == f"/public/{file_id}"


def test_publishing_twice_keeps_the_same_url(client, auth_headers):
    file_id = upload(client, auth_headers).json()["file"]["id"]

    first = client.post(f"/files/{file_id}/make_public", headers=auth_headers).json()
    second = client.post(f"/files/{file_id}/make_public", headers=auth_headers)

    assert second.status_code == 200
    assert second.json()["public_url"] == first["public_url"]


@pytest.mark.parametrize("filename, content, media_type", [
    ("a.txt", b"hello", "text/plain"),
    ("image.png", b"\x89PNG\r\n\x1a\n", "image/png"),
    ("blob", b"\x00\x01\x02", "application/octet-stream"),
])
def test_serve_public_file(client, auth_headers, filename, content, media_type):
    file_id = upload(client, auth_headers, filename, content).json()["file"]["id"]
    public_url = client.post(f"/files/{file_id}/make_public", headers=auth_headers).json()["public_url"]

    response = client.get(public_url)

    assert response.status_code == 200
    assert response.content == content
    assert response.headers["content-type"].startswith(media_type)
    assert response.headers["cache-control"] == "public, max-age=31536000"


def test_download_user_file(client, auth_headers):
    file_id = upload(client, auth_headers, "report.txt", b"private bytes").json()["file"]["id"]

    response = client.get(f"/files/{file_id}/download", headers=auth_headers)

    assert response.status_code == 200
    assert response.content == b"private bytes"
    assert "attachment" in response.headers["content-disposition"]
    assert "report.txt" in response.headers["content-disposition"]


def test_alice_scenario(client):
    token = register(client, "alice", "a@x.com", "pw1").json()["token"]
    headers = {"Authorization": f"Bearer {token}"}

    record = upload(client, headers, "a.txt", b"hello").json()["file"]
    assert record["visibility"] == "private"

    listed = client.get("/files", headers=headers).json()
    assert [item["id"] for item in listed] == [record["id"]]

    assert client.get(f"/public/{record['id']}").status_code == 404

    published = client.post(f"/files/{record['id']}/make_public", headers=headers).json()
    assert published["visibility"] == "public"
    assert published["public_url"]

    response = client.get(published["public_url"])
    assert response.status_code == 200
    assert response.content == b"hello"

    listed = client.get("/files", headers=headers).json()
    assert listed[0]["public_url"] == published["public_url"]
