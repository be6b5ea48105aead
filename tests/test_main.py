import json

import httpx
import pytest
from fastapi.testclient import TestClient
from respx import MockRouter

from github_desk import config
from github_desk.main import app

BASE = config.BASE


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def test_healthz(client):
    assert client.get("/healthz").json() == {"ok": True}


def test_greet(client):
    assert client.get("/api/greet", params={"name": "Ada"}).json() == "Hello Ada, It's show time!"


def test_public_repositories(client, respx_mock: MockRouter):
    respx_mock.get(f"{BASE}/repositories").mock(return_value=httpx.Response(200, json=[{"id": 1}]))

    r = client.get("/api/repositories")

    assert r.status_code == 200
    assert r.json() == [{"id": 1}]


def test_public_gists(client, respx_mock: MockRouter):
    respx_mock.get(f"{BASE}/gists/public").mock(return_value=httpx.Response(200, json=[{"id": "g"}]))

    assert client.get("/api/gists/public").json() == [{"id": "g"}]


def test_user_repos_forwards_token_header(client, respx_mock: MockRouter):
    route = respx_mock.get(f"{BASE}/user/repos?type=private").mock(
        return_value=httpx.Response(200, json=[])
    )

    r = client.get("/api/user/repos", headers={"X-GitHub-Token": "tok"})

    assert r.status_code == 200
    assert route.calls.last.request.headers["authorization"] == "Bearer tok"


def test_user_gists_without_token_is_anonymous(client, respx_mock: MockRouter):
    route = respx_mock.get(f"{BASE}/gists").mock(
        return_value=httpx.Response(401, json={"message": "Requires authentication"})
    )

    r = client.get("/api/user/gists")

    assert r.status_code == 200
    assert r.json() == {"message": "Requires authentication"}
    assert "authorization" not in route.calls.last.request.headers


def test_more_information(client, respx_mock: MockRouter):
    url = f"{BASE}/repos/octocat/Hello-World/commits"
    respx_mock.get(url).mock(return_value=httpx.Response(200, json=[{"sha": "abc"}]))

    r = client.get("/api/more", params={"url": url}, headers={"X-GitHub-Token": "tok"})

    assert r.json() == [{"sha": "abc"}]


def test_gist_content_is_plain_text(client, respx_mock: MockRouter):
    url = "https://gist.githubusercontent.com/octocat/1/raw/a.txt"
    respx_mock.get(url).mock(return_value=httpx.Response(200, text="hello\nworld"))

    r = client.get("/api/gists/content", params={"url": url})

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    assert r.text == "hello\nworld"


def test_create_gist(client, respx_mock: MockRouter):
    route = respx_mock.post(f"{BASE}/gists").mock(return_value=httpx.Response(201, json={"id": "new"}))
    body = {"description": "d", "public": True, "files": {"a.txt": {"content": "x"}}}

    r = client.post("/api/gists", json=body, headers={"X-GitHub-Token": "tok"})

    assert r.status_code == 200
    assert r.json() == {"id": "new"}
    assert json.loads(route.calls.last.request.content) == body
    assert route.calls.last.request.headers["authorization"] == "Bearer tok"


def test_transport_error_maps_to_bad_gateway(client, respx_mock: MockRouter):
    respx_mock.get(f"{BASE}/repositories").mock(side_effect=httpx.ConnectError("connection refused"))

    r = client.get("/api/repositories")

    assert r.status_code == 502
    assert "connection refused" in r.json()["detail"]


def test_decode_error_maps_to_bad_gateway(client, respx_mock: MockRouter):
    respx_mock.get(f"{BASE}/gists/public").mock(return_value=httpx.Response(200, content=b"<html>"))

    r = client.get("/api/gists/public")

    assert r.status_code == 502
    assert "<html>" in r.json()["detail"]


def test_create_gist_rejects_non_mapping_files(client):
    r = client.post("/api/gists", json={"description": "d", "public": True, "files": ["a.txt"]})

    assert r.status_code == 422


def test_corrupt_content_encoding_maps_to_bad_gateway(client, respx_mock: MockRouter):
    respx_mock.get(f"{BASE}/repositories").mock(
        return_value=httpx.Response(
            200, stream=httpx.ByteStream(b"notgzip"), headers={"content-encoding": "gzip"}
        )
    )

    assert client.get("/api/repositories").status_code == 502
