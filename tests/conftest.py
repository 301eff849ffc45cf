"""Shared fixtures: a fake Boundary controller served through httpx.MockTransport."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from boundary_cancel.config import ActionContext
from boundary_cancel.telemetry import get_system_logger

BASE_URL = "https://boundary.example.com"
SESSION_ID = "s_1234567890"
AUTH_METHOD_ID = "ampw_1234567890"


@dataclass
class FakeController:
    """Records every request and answers per endpoint.

    Responses default to success; override auth/read/cancel with an
    httpx.Response to simulate failures.
    """

    auth: httpx.Response = field(
        default_factory=lambda: httpx.Response(200, json={"attributes": {"token": "mock-token"}})
    )
    read: httpx.Response = field(default_factory=lambda: httpx.Response(200, json={"id": SESSION_ID, "version": 3}))
    cancel: httpx.Response = field(default_factory=lambda: httpx.Response(200, json={}))
    requests: list[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.raw_path.decode()
        if path.endswith(":authenticate"):
            return self.auth
        if path.endswith(":cancel"):
            return self.cancel
        if request.method == "GET" and "/v1/sessions/" in path:
            return self.read
        return httpx.Response(500, text="unexpected route")

    @property
    def paths(self) -> list[str]:
        return [r.url.raw_path.decode() for r in self.requests]

    def body(self, index: int) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


@pytest.fixture(autouse=True)
def quiet_system_logger(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep operational logs out of test output."""
    monkeypatch.setattr(get_system_logger(), "disabled", True)


@pytest.fixture
def controller() -> FakeController:
    """Fake controller answering success on every endpoint."""
    return FakeController()


@pytest.fixture
def http_client(controller: FakeController) -> httpx.AsyncClient:
    """AsyncClient routed to the fake controller."""
    return httpx.AsyncClient(transport=httpx.MockTransport(controller.handler))


@pytest.fixture
def context() -> ActionContext:
    """Context with credentials and controller address."""
    return ActionContext(
        secrets={"BASIC_USERNAME": "testuser", "BASIC_PASSWORD": "testpass"},
        environment={"ADDRESS": BASE_URL},
    )


@pytest.fixture
def params() -> dict[str, Any]:
    """Valid invocation parameters."""
    return {"sessionId": SESSION_ID, "authMethodId": AUTH_METHOD_ID}
