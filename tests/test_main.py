import pytest
import requests
from fastapi.testclient import TestClient

import main
from fakes import FakeResponse, FakeSession, json_response


@pytest.fixture
def client():
    return TestClient(main.app)


@pytest.fixture
def fake_session(monkeypatch):
    def install(session):
        monkeypatch.setattr(main, "session", session)
        return session
    return install


def test_health(client):
    r = client.get("/health")

    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_home_page_has_input_and_empty_grid(client, monkeypatch):
    monkeypatch.setattr(main, "PROJECTS_DEFAULT_USERNAME", "")

    r = client.get("/")

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert 'id="githubUsername"' in r.text
    assert f'class="{main.THEME.grid_class}"></div>' in r.text


def test_grid_fragment_renders_projects(client, fake_session, octocat_repo):
    session = fake_session(FakeSession(json_response([octocat_repo])))

    r = client.get("/projects/grid", params={"username": "octocat"})

    assert r.status_code == 200
    assert "Hello-World" in r.text
    assert "<html" not in r.text
    assert session.calls == [
        (f"{main.PROJECTS_API_URL}?username=octocat", main.PROJECTS_REQUEST_TIMEOUT_SEC)
    ]


def test_grid_fragment_rejects_blank_username(client, fake_session):
    session = fake_session(FakeSession())

    r = client.get("/projects/grid", params={"username": "   "})

    assert r.status_code == 400
    assert r.json() == {"detail": "Please enter a GitHub username"}
    assert session.calls == []


@pytest.mark.parametrize("session", [
    FakeSession(FakeResponse(502, "Bad Gateway")),
    FakeSession(error=requests.ConnectionError("refused")),
])
def test_grid_fragment_failure_is_rendered_not_raised(client, fake_session, session):
    fake_session(session)

    r = client.get("/projects/grid", params={"username": "octocat"})

    assert r.status_code == 200
    assert "Failed to load projects. Please try again." in r.text


def test_projects_page_embeds_grid(client, fake_session, octocat_repo):
    fake_session(FakeSession(json_response([octocat_repo])))

    r = client.get("/projects", params={"username": "octocat"})

    assert r.status_code == 200
    assert 'id="projectsGrid"' in r.text
    assert "Hello-World" in r.text
    assert 'value="octocat"' in r.text


def test_projects_page_shows_notification_for_blank_username(client, fake_session, monkeypatch):
    monkeypatch.setattr(main, "PROJECTS_DEFAULT_USERNAME", "")
    session = fake_session(FakeSession())

    r = client.get("/projects")

    assert r.status_code == 200
    assert 'role="alert">Please enter a GitHub username</div>' in r.text
    assert session.calls == []


def test_home_page_shows_default_user_projects(client, fake_session, monkeypatch, octocat_repo):
    monkeypatch.setattr(main, "PROJECTS_DEFAULT_USERNAME", "HexSleeves")
    session = fake_session(FakeSession(json_response([octocat_repo])))

    r = client.get("/")

    assert r.status_code == 200
    assert 'value="HexSleeves"' in r.text
    assert "Hello-World" in r.text
    assert session.calls == [
        (f"{main.PROJECTS_API_URL}?username=HexSleeves", main.PROJECTS_REQUEST_TIMEOUT_SEC)
    ]


@pytest.mark.parametrize("params", [{}, {"username": "  "}])
def test_projects_page_falls_back_to_default_user(client, fake_session, monkeypatch, octocat_repo, params):
    monkeypatch.setattr(main, "PROJECTS_DEFAULT_USERNAME", "HexSleeves")
    session = fake_session(FakeSession(json_response([octocat_repo])))

    r = client.get("/projects", params=params)

    assert r.status_code == 200
    assert 'role="alert"' not in r.text
    assert "Hello-World" in r.text
    assert session.calls[0][0].endswith("?username=HexSleeves")


def test_explicit_username_wins_over_default(client, fake_session, monkeypatch, octocat_repo):
    monkeypatch.setattr(main, "PROJECTS_DEFAULT_USERNAME", "HexSleeves")
    session = fake_session(FakeSession(json_response([octocat_repo])))

    client.get("/projects", params={"username": "octocat"})

    assert session.calls[0][0].endswith("?username=octocat")
