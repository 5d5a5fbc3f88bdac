"""HTTP tests for ``POST /calculator``."""

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from hybrid_api.calculator_svc.main import create_app


def test_multiply(client: TestClient) -> None:
    response = client.post("/calculator", json={"operation": "multiply", "a": 3, "b": 4})
    assert response.status_code == 200
    assert response.json() == {"result": 12}


@pytest.mark.parametrize(
    ("operation", "expected"),
    [("add", 12.5), ("subtract", 7.5), ("multiply", 25.0), ("divide", 4.0)],
)
def test_operations(client: TestClient, operation: str, expected: float) -> None:
    response = client.post("/calculator", json={"operation": operation, "a": 10, "b": 2.5})
    assert response.status_code == 200
    assert response.json()["result"] == expected


def test_divide_by_zero(client: TestClient) -> None:
    response = client.post("/calculator", json={"operation": "divide", "a": 10, "b": 0})
    assert response.status_code == 422
    assert response.json() == {"error": "division by zero is not allowed"}


def test_unknown_operation(client: TestClient) -> None:
    response = client.post("/calculator", json={"operation": "power", "a": 2, "b": 3})
    assert response.status_code == 422
    assert response.json() == {"error": "invalid operation specified"}


@pytest.mark.parametrize(
    "body",
    [
        {"operation": "add", "a": 1},
        {"a": 1, "b": 2},
        {"operation": "add", "a": "one", "b": 2},
        [],
    ],
)
def test_invalid_body(client: TestClient, body) -> None:
    response = client.post("/calculator", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request body"}


def test_non_json_body(fresh_client: TestClient) -> None:
    response = fresh_client.post(
        "/calculator",
        content=b"operation=add&a=1&b=2",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request body"}


def test_only_post_is_routed(client: TestClient) -> None:
    assert client.get("/calculator").status_code == 405


@pytest.mark.parametrize(("a", "expected"), [(1e308, float("inf")), (-1e308, float("-inf"))])
def test_overflow_is_written_as_infinity(client: TestClient, a: float, expected: float) -> None:
    response = client.post("/calculator", json={"operation": "multiply", "a": a, "b": 10})
    assert response.status_code == 200
    assert b"Infinity" in response.content
    assert response.json() == {"result": expected}


def test_create_app_leaves_logging_alone(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.RootLogger(logging.WARNING)
    with monkeypatch.context() as m:
        m.setattr(logging, "getLogger", lambda name=None: root)
        create_app()
    assert root.handlers == []
    assert root.level == logging.WARNING
