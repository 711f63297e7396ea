"""Shared fixtures: isolated storage, a fake backend and a recording navigator."""
import httpx
import pytest

API = "https://heatmap.test/api"

USER_JSON = {
    "id": 7,
    "github_id": 4242,
    "github_username": "alice",
    "email": None,
    "avatar_url": "https://avatars.example.com/alice.png",
    "name": "Alice",
    "bio": None,
    "public_profile": True,
    "created_at": "2024-01-01T00:00:00Z",
    "updated_at": "2024-06-01T00:00:00Z",
}


@pytest.fixture(autouse=True)
def isolated_storage(tmp_path, monkeypatch):
    """Point credential and settings files at a temp dir for every test."""
    monkeypatch.setattr(
        "docker_heatmap.storage.credentials.CREDENTIALS_FILE", tmp_path / "credentials.json"
    )
    monkeypatch.setattr(
        "docker_heatmap.storage.config.SETTINGS_FILE", tmp_path / "settings.json"
    )
    monkeypatch.delenv("DOCKER_HEATMAP_API_URL", raising=False)
    monkeypatch.delenv("DOCKER_HEATMAP_FRONTEND_URL", raising=False)
    return tmp_path


class FakeBackend:
    """Route table for ``httpx.MockTransport`` that records every request."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def on(self, method, path, status=200, json=None, exc=None, content=None, headers=None):
        self.routes[(method, path)] = (status, json, exc, content, headers)
        return self

    def calls(self, method, path):
        return [
            r for r in self.requests
            if r.method == method and r.url.path == f"/api{path}"
        ]

    def __call__(self, request):
        self.requests.append(request)
        path = request.url.path[len("/api"):]
        status, body, exc, content, headers = self.routes.get(
            (request.method, path), (404, {"error": "Not found"}, None, None, None)
        )
        if exc is not None:
            raise exc
        if content is not None:
            return httpx.Response(status, content=content, headers=headers)
        return httpx.Response(status, json=body, headers=headers)


class RecordingNavigator:
    def __init__(self):
        self.navigations = []
        self.reloads = []

    def navigate(self, target):
        self.navigations.append(target)

    def reload(self, target):
        self.reloads.append(target)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def make_client(backend):
    from docker_heatmap.api.client import HeatmapClient

    def factory(store):
        return HeatmapClient(store, base_url=API, transport=httpx.MockTransport(backend))

    return factory


@pytest.fixture
def user_json():
    return dict(USER_JSON)
