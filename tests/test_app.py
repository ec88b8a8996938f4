"""
Tests for the FastAPI web application.
"""

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from contrib_calendar.app import app
from contrib_calendar.github_client import GitHubClientError


@pytest.fixture
def client():
    """Create a test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def user_payload():
    return {
        "login": "phototix",
        "name": "Photo Tix",
        "avatar_url": "https://avatars.githubusercontent.com/u/1",
        "bio": None,
        "public_repos": 12,
        "followers": 3,
        "following": 4,
        "public_gists": 2,
    }


@pytest.fixture
def mock_github(user_payload):
    """Patch the GitHub client used by the app."""
    with patch("contrib_calendar.app.GitHubClient") as mock_github_client:
        mock_instance = MagicMock()
        mock_instance.get_user.return_value = user_payload
        mock_github_client.return_value = mock_instance
        yield mock_instance


class TestHealthEndpoint:
    """Tests for the /health endpoint."""

    def test_health_returns_ok(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestStartup:
    """Tests for application startup."""

    def test_logging_configured_on_startup(self):
        with patch("contrib_calendar.app.configure_logging") as mock_configure:
            with TestClient(app):
                pass

        mock_configure.assert_called_once()

    def test_requests_without_startup_skip_logging_setup(self, client):
        with patch("contrib_calendar.app.configure_logging") as mock_configure:
            client.get("/health")

        mock_configure.assert_not_called()


class TestIndexPage:
    """Tests for the widget page."""

    def test_initial_load_uses_demo_user(self, client, mock_github):
        with patch("contrib_calendar.config.DEFAULT_USERNAME", "phototix"):
            response = client.get("/")

        assert response.status_code == 200
        mock_github.get_user.assert_called_once_with("phototix")
        assert 'id="resultsSection"' in response.text
        assert "Photo Tix" in response.text
        assert "No bio available" in response.text

    def test_submitted_username_is_trimmed(self, client, mock_github):
        response = client.get("/", params={"username": "  octocat  "})

        assert response.status_code == 200
        mock_github.get_user.assert_called_once_with("octocat")

    def test_blank_username_is_ignored(self, client, mock_github):
        response = client.get("/", params={"username": "   "})

        assert response.status_code == 200
        mock_github.get_user.assert_not_called()
        assert 'id="resultsSection"' not in response.text
        assert 'id="errorMessage"' not in response.text

    def test_lookup_failure_shows_error_and_hides_results(self, client, mock_github):
        mock_github.get_user.side_effect = GitHubClientError(
            "User not found or API rate limit exceeded"
        )

        response = client.get("/", params={"username": "ghost"})

        assert response.status_code == 200
        assert 'id="errorMessage"' in response.text
        assert "Please check the username and try again." in response.text
        assert 'id="resultsSection"' not in response.text

    def test_calendar_renders_data_cells(self, client, mock_github):
        response = client.get("/", params={"username": "phototix"})

        assert response.text.count('class="calendar-week"') >= 53
        assert "data-count=" in response.text

    @patch("contrib_calendar.app.validate_config")
    def test_config_error(self, mock_validate, client):
        mock_validate.side_effect = ValueError("Invalid configuration: GITHUB_TIMEOUT")

        response = client.get("/")

        assert response.status_code == 500
        assert "Configuration error" in response.json()["detail"]


class TestProfileEndpoint:
    """Tests for the /api/profile endpoint."""

    def test_returns_profile_calendar_and_stats(self, client, mock_github):
        response = client.get("/api/profile/phototix")

        assert response.status_code == 200
        data = response.json()
        assert data["profile"]["display_name"] == "Photo Tix"
        assert data["profile"]["bio"] == "No bio available"
        assert set(data["stats"]) == {
            "total",
            "longest_streak",
            "current_streak",
            "daily_average",
        }
        assert all(len(week) == 7 for week in data["calendar"]["weeks"])

    def test_lookup_failure_returns_502(self, client, mock_github):
        mock_github.get_user.side_effect = GitHubClientError(
            "User not found or API rate limit exceeded"
        )

        response = client.get("/api/profile/ghost")

        assert response.status_code == 502
        assert response.json()["detail"] == (
            "Error: User not found or API rate limit exceeded. "
            "Please check the username and try again."
        )


class TestActivityEndpoint:
    """Tests for the /api/activity endpoint."""

    def test_seeded_activity_is_reproducible(self, client):
        params = {"today": "2026-01-20", "seed": 7}

        first = client.get("/api/activity", params=params)
        second = client.get("/api/activity", params=params)

        assert first.status_code == 200
        assert first.json() == second.json()

    def test_activity_layout(self, client):
        response = client.get("/api/activity", params={"today": "2026-01-20", "seed": 7})

        data = response.json()
        weeks = data["calendar"]["weeks"]
        assert data["calendar"]["start"] == "2025-01-19"
        assert len(weeks) == 53
        assert weeks[0][0]["date"] is None
        assert weeks[-1][2]["date"] == "2026-01-20"

        counts = [cell["count"] for week in weeks for cell in week if cell["date"]]
        assert len(counts) == 366
        assert data["stats"]["total"] == sum(counts)

    def test_invalid_date_rejected(self, client):
        response = client.get("/api/activity", params={"today": "not-a-date"})
        assert response.status_code == 422
