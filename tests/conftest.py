"""Shared fixtures for the hybrid-api test suite."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from hybrid_api.calculator_svc.main import app, create_app
from hybrid_api.calculator_svc.sdk import new_calculator_sdk

ENV_VARS = (
    "TARGET_SERVICES",
    "LOG_LEVEL",
    "LOG_FILE",
    "CALCULATOR_HOST",
    "CALCULATOR_PORT",
    "CALCULATOR_SERVICE_URL",
    "CALCULATOR_SDK_MODE",
    "CALCULATOR_SDK_TIMEOUT",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> pytest.MonkeyPatch:
    """Unset every setting and move into an empty directory (no ``.env``)."""
    for name in ENV_VARS:
        # setenv first so that teardown restores the variable to its
        # original state, including "unset".
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def fresh_client() -> TestClient:
    return TestClient(create_app())


@pytest.fixture
def remote_sdk(client: TestClient):
    """Remote SDK talking to the in-process app through the test client."""
    return new_calculator_sdk("remote", base_url=str(client.base_url), session=client)


@pytest.fixture
def local_sdk():
    return new_calculator_sdk("local")
