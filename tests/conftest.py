"""Shared fixtures for checkpwn tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from checkpwn.hibp.client import BreachChecker

QWERTY_SHA1 = "B1B3773A05C0ED0176787A4F1574FF0075F7521E"


def make_response(status: int, text: str = "", headers: dict | None = None):
    """Build a mock aiohttp response usable as an async context manager."""
    response = MagicMock()
    response.status = status
    response.headers = headers or {}
    response.text = AsyncMock(return_value=text)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def make_session(responses: dict):
    """Mock session whose get() picks a response by URL fragment."""
    session = MagicMock()

    def _get(url, **kwargs):
        for fragment, response in responses.items():
            if fragment in url:
                return response
        raise AssertionError(f"Unexpected request to {url}")

    session.get = MagicMock(side_effect=_get)
    return session


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the real API key and config directory."""
    monkeypatch.delenv("HIBP_API_KEY", raising=False)
    monkeypatch.setenv("CHECKPWN_CONFIG_DIR", str(tmp_path / "config"))
    return tmp_path / "config"


@pytest.fixture
def checker():
    """BreachChecker with an API key and no rate limit delay."""
    return BreachChecker(api_key="test-api-key", rate_limit=0)


@pytest.fixture
def attach_session(checker):
    """Attach a mock session built from a URL->response mapping."""
    def _attach(responses: dict):
        session = make_session(responses)
        checker._ensure_session = AsyncMock(return_value=session)
        return session
    return _attach
