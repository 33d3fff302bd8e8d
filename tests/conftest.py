import os

import pytest
from PIL import Image

from worqhat import WorqHatClient


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep WORQHAT_* variables and stray .env files out of the tests."""
    for key in list(os.environ):
        if key.startswith("WORQHAT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def client():
    return WorqHatClient(api_key="test-api-key", max_retries=0, retry_delay=0)


@pytest.fixture
def make_image(tmp_path):
    """Write a PNG of the given size and return its path."""

    def _make(width: int, height: int, name: str = "image.png"):
        path = tmp_path / name
        Image.new("RGB", (width, height), color=(200, 30, 30)).save(path, format="PNG")
        return path

    return _make
