"""Pytest fixtures for tests."""

import json
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

from awtrixctl.client import DeviceClient
from awtrixctl.models import Settings

DEVICE_HOST = "192.168.1.100"


def build_response(
    status: int = 200,
    body: object = None,
    text: str | None = None,
    url: str = f"http://{DEVICE_HOST}/",
) -> requests.Response:
    """Create a real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.encoding = "utf-8"
    if text is not None:
        response._content = text.encode("utf-8")
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = b""
    return response


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    """Factory for canned device responses."""
    return build_response


@pytest.fixture
def mock_session():
    """A requests.Session double that answers every request with an empty 200."""
    session = MagicMock(spec=requests.Session)
    session.request.return_value = build_response()
    return session


@pytest.fixture
def client(mock_session):
    """A DeviceClient wired to the mock session."""
    return DeviceClient(DEVICE_HOST, session=mock_session, timeout=5.0)


@pytest.fixture
def settings_payload():
    """Settings as the device reports them."""
    return {
        "brightness": 120,
        "autoBrightness": False,
        "autoTransition": True,
        "appTime": 7,
        "transition": "Slide",
        "textColor": [255, 255, 255],
        "timeApp": {"format": 1, "showWeekday": True},
        "tempUnit": "C",
    }


@pytest.fixture
def settings_sample(settings_payload):
    """Settings model decoded from the device payload."""
    return Settings.model_validate(settings_payload)


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch) -> Path:
    """Point AWTRIX_CONFIG at a temp file and clear AWTRIX_DEVICE."""
    path = tmp_path / "awtrixctl" / "config.json"
    monkeypatch.setenv("AWTRIX_CONFIG", str(path))
    monkeypatch.delenv("AWTRIX_DEVICE", raising=False)
    return path
