"""Pytest fixtures for integration tests.

This module provides fixtures for:
- Starting/stopping the FastAPI sherpa test server
- Generating client code from the sherpadoc the server publishes
- Creating httpx clients used as backends
"""

from __future__ import annotations

import importlib.util
import sys
import threading
import time
from typing import TYPE_CHECKING, Generator

import httpx
import pytest
import uvicorn

from sherpify import ClientSpec, GenerationProfile, generate_module, load_sherpadoc

from .server import app, store

if TYPE_CHECKING:
    from pathlib import Path
    from types import ModuleType

TEST_SERVER_HOST = "127.0.0.1"
TEST_SERVER_PORT = 18766


class ServerThread(threading.Thread):
    """Thread that runs uvicorn server."""

    def __init__(self) -> None:
        super().__init__(daemon=True)
        self.server: uvicorn.Server | None = None

    def run(self) -> None:
        config = uvicorn.Config(
            app,
            host=TEST_SERVER_HOST,
            port=TEST_SERVER_PORT,
            log_level="error",
        )
        self.server = uvicorn.Server(config)
        self.server.run()

    def stop(self) -> None:
        if self.server:
            self.server.should_exit = True


@pytest.fixture(scope="session")
def server() -> Generator[str, None, None]:
    """Start the test server and return the base URL of the sherpa API."""
    server_thread = ServerThread()
    server_thread.start()

    root_url = f"http://{TEST_SERVER_HOST}:{TEST_SERVER_PORT}"
    max_retries = 50
    for _ in range(max_retries):
        try:
            response = httpx.get(f"{root_url}/health", timeout=1.0)
            if response.status_code == 200:
                break
        except httpx.ConnectError:
            time.sleep(0.1)
    else:
        raise RuntimeError("Test server failed to start")

    yield f"{root_url}/store/"

    server_thread.stop()


@pytest.fixture(scope="session")
def generated_source(server: str) -> str:
    """Generate the client module from the sherpadoc served by the test server."""
    document = load_sherpadoc(f"{server}_docs")
    spec = ClientSpec(api_name="Store", base_url=server)
    return generate_module(spec, document, GenerationProfile.from_version("3.10"))


@pytest.fixture(scope="session")
def generated_client_module(generated_source: str, tmp_path_factory: pytest.TempPathFactory) -> ModuleType:
    """Import the generated client module."""
    path: Path = tmp_path_factory.mktemp("generated") / "store_client.py"
    path.write_text(generated_source, encoding="utf-8")

    spec = importlib.util.spec_from_file_location("store_client", path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load spec for {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules["store_client"] = module
    spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def reset_store() -> Generator[None, None, None]:
    """Reset the item store before each test."""
    store.reset()
    yield


@pytest.fixture
def sync_client() -> Generator[httpx.Client, None, None]:
    """Create a sync httpx client."""
    with httpx.Client() as client:
        yield client
