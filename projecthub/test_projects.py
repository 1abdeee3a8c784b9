"""
projecthub/test_projects.py

Project submission, token enforcement, and public browsing tests.

Run: pytest projecthub/test_projects.py -v
"""

from datetime import timedelta

import jwt

from conftest import auth_headers, register_user
from projecthub.auth_context import create_access_token
from projecthub.config import SECRET_KEY, ALGORITHM
from projecthub.models import Project, User


def submit(client, token, **fields):
    data = {"title": "Untitled", "description": "", "category": "misc"}
    data.update(fields)
    files = data.pop("files", None)
    return client.post("/api/projects", data=data, files=files, headers=auth_headers(token))


class TestTokenEnforcement:
    """Protected route behaviour for missing/invalid tokens."""

    def test_submit_without_token(self, client, store):
        response = client.post("/api/projects", data={"title": "Nope"})
        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Authentication required"}
        assert store.list_projects() == []

    def test_submit_with_garbled_token(self, client, store):
        response = submit(client, "not.a.token", title="Nope")
        assert response.status_code == 403
        assert response.json() == {"success": False, "message": "Invalid token"}
        assert store.list_projects() == []

    def test_submit_with_expired_token(self, client):
        user = User(name="Old", email="old@example.com", password_hash="x")
        expired = create_access_token(user, expires_delta=timedelta(seconds=-10))

        response = submit(client, expired, title="Late")
        assert response.status_code == 403

    def test_submit_with_token_signed_by_other_secret(self, client):
        forged = jwt.encode(
            {"id": "1", "email": "x@example.com", "role": "admin"},
            SECRET_KEY + "-forged",
            algorithm=ALGORITHM,
        )
        response = submit(client, forged, title="Forged")
        assert response.status_code == 403

    def test_submit_with_token_missing_claims(self, client):
        token = jwt.encode({"email": "x@example.com"}, SECRET_KEY, algorithm=ALGORITHM)
        response = submit(client, token, title="Partial")
        assert response.status_code == 403

    def test_non_bearer_scheme_is_missing_token(self, client, user_token):
        response = client.post(
            "/api/projects",
            data={"title": "Basic"},
            headers={"Authorization": f"Basic {user_token}"},
        )
        assert response.status_code == 401


class TestSubmitProject:
    """Test POST /api/projects."""

    def test_submit_creates_pending_project_owned_by_caller(self, client, store):
        registered = register_user(client, email="maker@example.com")

        response = submit(
            client,
            registered["token"],
            title="Robot Arm",
            description="A 3D-printed arm",
            category="engineering",
            tags="robotics, printing",
            video="https://example.com/v/1",
        )
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True

        project = body["project"]
        assert project["title"] == "Robot Arm"
        assert project["description"] == "A 3D-printed arm"
        assert project["category"] == "engineering"
        assert project["tags"] == ["robotics", "printing"]
        assert project["video"] == "https://example.com/v/1"
        assert project["status"] == "pending"
        assert project["userId"] == registered["user"]["id"]
        assert project["files"] == []
        assert project["id"]
        assert project["createdAt"]

        assert [p.id for p in store.list_projects()] == [project["id"]]

    def test_tags_are_trimmed_in_order(self, client, user_token):
        response = submit(client, user_token, tags="a, b, c")
        assert response.json()["project"]["tags"] == ["a", "b", "c"]

        response = submit(client, user_token, tags="  z ,y,, x  ")
        assert response.json()["project"]["tags"] == ["z", "y", "x"]

    def test_missing_tags_gives_empty_list(self, client, user_token):
        response = submit(client, user_token)
        assert response.json()["project"]["tags"] == []

    def test_files_are_written_to_upload_dir(self, client, user_token, upload_dir):
        assert not upload_dir.exists()

        response = submit(
            client,
            user_token,
            files=[
                ("files", ("notes.txt", b"hello", "text/plain")),
                ("files", ("diagram.png", b"\x89PNG", "image/png")),
            ],
        )
        assert response.status_code == 201
        stored = response.json()["project"]["files"]

        assert len(stored) == 2
        assert stored[0].endswith("-notes.txt")
        assert stored[1].endswith("-diagram.png")
        assert stored[0].split("-", 1)[0].isdigit()

        assert (upload_dir / stored[0]).read_bytes() == b"hello"
        assert (upload_dir / stored[1]).read_bytes() == b"\x89PNG"

    def test_project_ids_are_unique(self, client, user_token):
        ids = {submit(client, user_token, title=f"P{i}").json()["project"]["id"] for i in range(20)}
        assert len(ids) == 20


class TestBrowseProjects:
    """Test GET /api/projects and GET /api/projects/{id}."""

    def _seed(self, store):
        projects = [
            Project(title="art+x", category="art", tags=["x", "y"], user_id="u1"),
            Project(title="art only", category="art", tags=["y"], user_id="u1"),
            Project(title="x only", category="music", tags=["x"], user_id="u2"),
            Project(title="neither", category="music", tags=[], user_id="u2"),
        ]
        for p in projects:
            store.add_project(p)
        return projects

    def test_list_requires_no_auth_and_keeps_order(self, client, store):
        seeded = self._seed(store)
        response = client.get("/api/projects")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert [p["id"] for p in body["projects"]] == [p.id for p in seeded]

    def test_filter_by_category(self, client, store):
        self._seed(store)
        titles = [p["title"] for p in client.get("/api/projects", params={"category": "art"}).json()["projects"]]
        assert titles == ["art+x", "art only"]

    def test_filter_by_tag(self, client, store):
        self._seed(store)
        titles = [p["title"] for p in client.get("/api/projects", params={"tag": "x"}).json()["projects"]]
        assert titles == ["art+x", "x only"]

    def test_category_and_tag_combine_with_and(self, client, store):
        self._seed(store)
        response = client.get("/api/projects", params={"category": "art", "tag": "x"})
        titles = [p["title"] for p in response.json()["projects"]]
        assert titles == ["art+x"]

    def test_category_is_exact_match(self, client, store):
        self._seed(store)
        response = client.get("/api/projects", params={"category": "Art"})
        assert response.json()["projects"] == []

    def test_get_by_id(self, client, store):
        seeded = self._seed(store)
        response = client.get(f"/api/projects/{seeded[2].id}")
        assert response.status_code == 200
        assert response.json()["project"]["title"] == "x only"
        assert response.json()["project"]["userId"] == "u2"

    def test_get_unknown_id(self, client):
        response = client.get("/api/projects/does-not-exist")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Project not found"}


class TestServeUploads:
    """Test GET /uploads/{name}."""

    def test_uploaded_file_is_served(self, client, user_token):
        response = submit(client, user_token, files=[("files", ("readme.txt", b"contents", "text/plain"))])
        stored = response.json()["project"]["files"][0]

        download = client.get(f"/uploads/{stored}")
        assert download.status_code == 200
        assert download.content == b"contents"

    def test_missing_upload_dir_is_not_found(self, client, upload_dir):
        assert not upload_dir.exists()

        response = client.get("/uploads/nothing.txt")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "File not found"}

    def test_unknown_file_is_not_found(self, client, user_token):
        submit(client, user_token, files=[("files", ("a.txt", b"a", "text/plain"))])

        response = client.get("/uploads/other.txt")
        assert response.status_code == 404
