"""Shared pytest fixtures for KICKOFF tests."""

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from kickoff.config.settings import Settings
from kickoff.utils.retry import RetryConfig

NODE_INDEX_URL = "https://nodejs.example/dist/index.json"
MANIFEST_URL = "https://templates.example/meta.json"


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """Keep configuration keys from the real environment out of tests."""
    for key in Settings.get_config_keys():
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary config file with sample values."""
    config_file = tmp_path / ".kickoff-config"
    config_file.write_text(
        """# KICKOFF Configuration
TEMPLATE_SOURCE="acme/starters/templates"
FETCH_TOOL="npx degit"
VERSION_MANAGER=fnm
FETCH_TIMEOUT_SECONDS=15
FETCH_MAX_RETRIES=2
RUNTIME_INSTALL_REQUIRED="true"
UPDATE_CHECK='false'
"""
    )
    return config_file


@pytest.fixture
def empty_config_file(tmp_path: Path) -> Path:
    """Create an empty config file."""
    config_file = tmp_path / ".kickoff-config"
    config_file.write_text("")
    return config_file


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch) -> Path:
    """A working directory that stops local config discovery at its .git."""
    project = tmp_path / "project"
    (project / ".git").mkdir(parents=True)
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def release_index() -> list[dict]:
    """A trimmed Node.js release index, newest first."""
    return [
        {
            "version": "v23.3.0",
            "date": "2024-11-20",
            "files": ["linux-x64", "osx-arm64-tar"],
            "npm": "10.9.0",
            "v8": "12.9.202.28",
            "lts": False,
            "security": False,
        },
        {
            "version": "v22.11.0",
            "date": "2024-10-29",
            "files": ["linux-x64", "osx-arm64-tar"],
            "npm": "10.9.0",
            "v8": "12.4.254.21",
            "lts": "Jod",
            "security": False,
        },
        {
            "version": "v20.18.0",
            "date": "2024-10-03",
            "files": ["linux-x64"],
            "npm": "10.8.2",
            "lts": "Iron",
            "security": True,
        },
    ]


@pytest.fixture
def template_manifest() -> list[dict]:
    """A template manifest in the upstream {name, desc} shape."""
    return [
        {"name": "vue-naive", "desc": "Vue 3 + Naive UI ✅"},
        {"name": "react-antd", "desc": "React + Ant Design"},
        {"name": "uni-app", "desc": "uni-app starter"},
    ]


@pytest.fixture
def no_delay_retry() -> RetryConfig:
    """One retry without any backoff sleep."""
    return RetryConfig(
        max_retries=1,
        base_delay_seconds=0.0,
        max_delay_seconds=0.0,
        jitter_factor=0.0,
    )


@pytest.fixture
def make_client() -> Callable[..., httpx.Client]:
    """Build an httpx.Client whose requests are answered by a handler.

    Usage:
        client = make_client(handler)
        client.requests  # list of every request seen
    """
    clients: list[httpx.Client] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = httpx.Client(transport=httpx.MockTransport(_record))
        client.requests = requests  # type: ignore[attr-defined]
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def catalog_client(make_client, release_index, template_manifest) -> httpx.Client:
    """Client serving the release index and the template manifest."""

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        if url == NODE_INDEX_URL:
            return httpx.Response(200, json=release_index)
        if url == MANIFEST_URL:
            return httpx.Response(200, json=template_manifest)
        return httpx.Response(404)

    return make_client(handler)


@pytest.fixture
def node_index_url() -> str:
    return NODE_INDEX_URL


@pytest.fixture
def manifest_url() -> str:
    return MANIFEST_URL
