import tempfile
from typing import Generator

import pytest
from click.testing import CliRunner

from netrouter import NullNetworkLogger, Router, RouterConfig


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    """Provide a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield tmp_dir


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("NETROUTER_BASE_URL", raising=False)
    monkeypatch.delenv("NETROUTER_TIMEOUT", raising=False)
    monkeypatch.delenv("NETROUTER_VERIFY_SSL", raising=False)
    monkeypatch.delenv("NETROUTER_FOLLOW_REDIRECTS", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
def config() -> RouterConfig:
    return RouterConfig(verify_ssl=False, timeout=5.0)


@pytest.fixture
def router(config: RouterConfig) -> Generator[Router, None, None]:
    with Router(network_logger=NullNetworkLogger(), config=config) as router:
        yield router
