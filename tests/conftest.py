"""Shared test fixtures for gcal tests.

This module provides common fixtures used across all test modules:
- A fixed "now" for date arithmetic
- Isolation from the user's settings file and logging setup
- Temporary auth directories with credentials and tokens
- Sample Calendar API payloads

Usage:
    def test_something(fixed_now, auth_settings):
        ...
"""

import json
import logging
from collections.abc import Generator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from gcal.config import AuthSettings
from gcal.logging_config import configure_structlog


# ─────────────────────────────────────────────────────────────────────────────
# Path Constants
# ─────────────────────────────────────────────────────────────────────────────

PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE_DIR = PROJECT_ROOT / "gcal"


# ─────────────────────────────────────────────────────────────────────────────
# Isolation
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point GCAL_CONFIG at a file that does not exist, so defaults apply."""
    path = tmp_path / "no-such-gcal.yaml"
    monkeypatch.setenv("GCAL_CONFIG", str(path))
    monkeypatch.delenv("GCAL_LOG_LEVEL", raising=False)
    monkeypatch.delenv("GCAL_LOG_FORMAT", raising=False)
    return path


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Undo setup_logging() calls made by command handlers."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield

    root.handlers[:] = handlers
    root.setLevel(level)
    configure_structlog()


# ─────────────────────────────────────────────────────────────────────────────
# Clock Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def fixed_now() -> datetime:
    """Friday 2024-03-15, mid-afternoon local time."""
    return datetime(2024, 3, 15, 14, 30, 12, 345678)


@pytest.fixture
def fixed_today(fixed_now: datetime) -> datetime:
    return datetime(2024, 3, 15)


# ─────────────────────────────────────────────────────────────────────────────
# Auth Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def client_secrets() -> dict:
    """Google installed-app client secrets document."""
    return {
        "installed": {
            "client_id": "1234-abc.apps.googleusercontent.com",
            "client_secret": "s3cr3t",
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": "https://oauth2.googleapis.com/token",
            "redirect_uris": ["http://localhost"],
        }
    }


@pytest.fixture
def auth_settings(tmp_path: Path, client_secrets: dict) -> AuthSettings:
    """AuthSettings rooted in a temp dir that already holds credentials.json."""
    auth_dir = tmp_path / "auth"
    auth_dir.mkdir()
    (auth_dir / "credentials.json").write_text(json.dumps(client_secrets))
    return AuthSettings(directory=str(auth_dir))


@pytest.fixture
def token_document() -> dict:
    """A stored token that is still valid for an hour."""
    expiry = datetime.now(timezone.utc) + timedelta(hours=1)
    return {
        "access_token": "ya29.valid",
        "token_type": "Bearer",
        "refresh_token": "1//refresh",
        "expiry": expiry.isoformat(),
    }


# ─────────────────────────────────────────────────────────────────────────────
# Calendar API Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def events_payload() -> dict:
    """Calendar v3 events.list response for owner alice@example.com."""
    return {
        "kind": "calendar#events",
        "summary": "alice@example.com",
        "timeZone": "UTC",
        "items": [
            {
                "id": "evt1",
                "summary": "Weekly sync",
                "start": {"dateTime": "2024-03-15T09:00:00Z"},
                "end": {"dateTime": "2024-03-15T09:30:00Z"},
                "attendees": [
                    {"email": "bob@example.com", "organizer": True, "responseStatus": "accepted"},
                    {"email": "alice@example.com", "self": True, "responseStatus": "accepted"},
                    {"email": "carol@partner.org", "responseStatus": "tentative"},
                ],
            },
            {
                "id": "evt2",
                "summary": "Company holiday",
                "start": {"date": "2024-03-15"},
                "end": {"date": "2024-03-16"},
            },
            {
                "id": "evt3",
                "summary": "Design review",
                "start": {"dateTime": "2024-03-18T13:30:00Z"},
                "end": {"dateTime": "2024-03-18T14:30:00Z"},
                "recurringEventId": "series1",
            },
        ],
    }
