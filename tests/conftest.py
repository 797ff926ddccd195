"""Pytest fixtures for megaphone tests."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from megaphone.config import Config
from megaphone.connection import Connection


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the outer environment and the user's config files out of tests."""
    for name in ("MEGAPHONE_TOKEN", "MEGAPHONE_NETWORK_ID", "MEGAPHONE_API_BASE_URL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("megaphone.config.GLOBAL_CONFIG_PATH", tmp_path / "no-global" / "config")
    monkeypatch.setattr("megaphone.config.LOCAL_CONFIG_PATH", tmp_path / "no-local" / "config")


@pytest.fixture
def config() -> Config:
    """Create a config for the test network."""
    return Config(
        network_id="net-1",
        token="secret-token",
        api_base_url="https://cms.megaphone.fm/api",
    )


@pytest.fixture
def connection(config: Config):
    """Create a real connection; use with respx."""
    with Connection(config) as conn:
        yield conn


@pytest.fixture
def transport() -> MagicMock:
    """Create a mock transport returning a sample episode."""
    return MagicMock(return_value={"id": "56789", "title": "Test Episode"})


@pytest.fixture
def sample_episode() -> dict:
    """Create a sample episode payload as returned by the API."""
    return {
        "id": "56789",
        "podcastId": "12345",
        "title": "Test Episode",
        "pubdate": "2020-06-01T14:54:02.690Z",
        "preCount": 1,
        "externalId": "show_episode-12345",
    }
