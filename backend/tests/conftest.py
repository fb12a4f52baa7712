import os
import pytest
import requests
from unittest.mock import MagicMock, patch

# main.py reads its configuration at import time, before fixtures run
os.environ.setdefault("POLLINATIONS_BASE_URL", "http://text.test")
os.environ.setdefault("STATIC_DIR", "does-not-exist")


@pytest.fixture
def text_response():
    """Factory for fake requests responses carrying a text body."""

    def _make(body: str = "", ok: bool = True):
        resp = MagicMock()
        resp.content = body.encode("utf-8")
        if not ok:
            resp.raise_for_status.side_effect = requests.HTTPError("502 Bad Gateway")
        return resp

    return _make


@pytest.fixture
def mock_post():
    with patch("services.generation_client.requests.post") as m:
        yield m


@pytest.fixture
def mock_get():
    with patch("services.generation_client.requests.get") as m:
        yield m
