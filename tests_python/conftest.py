"""Shared fixtures for the distribution helper test suite."""

from __future__ import annotations

import importlib
import sys
import typing as typ
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent
MODULE_DIR = REPO_ROOT / "scripts"

if str(MODULE_DIR) not in sys.path:
    sys.path.insert(0, str(MODULE_DIR))

from distribute_test_helpers import (  # noqa: E402 - needs MODULE_DIR on sys.path
    MemoryEnvironment,
    RecordingTransport,
    api_handler,
    service_account_json,
)

ClientFactory = Callable[..., tuple[httpx.Client, RecordingTransport]]


@pytest.fixture(scope="session")
def distribute_common() -> object:
    """Load the distribution helper package once for reuse across tests."""
    return importlib.import_module("distribute_common")


@pytest.fixture
def artefact_file(tmp_path: Path) -> Path:
    """Create a small APK inside ``tmp_path``."""
    path = tmp_path / "build" / "app-release.apk"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"mock file content")
    return path


@pytest.fixture
def action_inputs(artefact_file: Path) -> dict[str, str]:
    """Inputs for a run that uploads ``artefact_file`` and distributes it."""
    return {
        "serviceCredentialsFileContent": service_account_json(),
        "appId": "1:1234567890:android:abc123def456",
        "file": str(artefact_file),
        "groups": "testers",
    }


@pytest.fixture
def memory_env(action_inputs: dict[str, str]) -> MemoryEnvironment:
    """In-memory environment seeded with ``action_inputs``."""
    return MemoryEnvironment(action_inputs)


@pytest.fixture
def make_client() -> typ.Iterator[ClientFactory]:
    """Build ``httpx`` clients backed by a :class:`RecordingTransport`."""
    clients: list[httpx.Client] = []

    def _make(
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
    ) -> tuple[httpx.Client, RecordingTransport]:
        transport = RecordingTransport(handler or api_handler())
        client = httpx.Client(transport=transport)
        clients.append(client)
        return client, transport

    yield _make
    for client in clients:
        client.close()
