"""
Fixtures for integration tests.

Provides:
- A scripted gateway served through httpx.MockTransport
- Settings and an HTTP client pointed at it
- Environment for running the command line end to end
"""

from typing import AsyncGenerator, List, Optional, Sequence, Type, Union

import httpx
import pytest
import pytest_asyncio

from momo_collect.core.config import Settings
from momo_collect.infrastructure.clients import (
    HttpPaymentGatewayClient,
    create_http_client,
)

BASE_URL = "http://gateway.test/api"
API_KEY = "test-key"

StatusScript = Union[str, httpx.Response]


# =============================================================================
# Gateway Stub
# =============================================================================

class GatewayStub:
    """
    In-process stand-in for the payment gateway.

    Serves POST /collect/ and GET /transaction/{reference}/, records
    every request, and can fail the first few requests at the
    transport level.
    """

    def __init__(
        self,
        reference: str = "abc123",
        statuses: Sequence[StatusScript] = ("SUCCESSFUL",),
        collect_response: Optional[httpx.Response] = None,
    ):
        self.collect_response = collect_response or httpx.Response(
            200,
            json={
                "reference": reference,
                "status": "PENDING",
                "message": "Transaction initiated",
            },
        )
        self.statuses = list(statuses)
        self.transport_errors: List[Type[httpx.TransportError]] = []
        self.requests: List[httpx.Request] = []
        self._status_calls = 0

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def status_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "GET"]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.transport_errors:
            error_type = self.transport_errors.pop(0)
            raise error_type("simulated transport failure", request=request)

        path = request.url.path
        if request.method == "POST" and path == "/api/collect/":
            return self.collect_response

        if request.method == "GET" and path.startswith("/api/transaction/"):
            index = min(self._status_calls, len(self.statuses) - 1)
            self._status_calls += 1
            status = self.statuses[index]
            if isinstance(status, httpx.Response):
                return status
            return httpx.Response(200, json={"status": status})

        return httpx.Response(404, json={"message": "not found"})


# =============================================================================
# Client Fixtures
# =============================================================================

@pytest.fixture
def gateway_stub() -> GatewayStub:
    """A gateway that accepts the payment and settles it immediately."""
    return GatewayStub()


@pytest.fixture
def settings() -> Settings:
    """Settings pointed at the stub with no retry delay."""
    return Settings(
        _env_file=None,
        api_key=API_KEY,
        base_url=BASE_URL,
        max_retries=2,
        retry_wait=0,
        poll_interval=0.01,
        max_poll_attempts=5,
    )


@pytest_asyncio.fixture
async def http_client(
    settings: Settings,
    gateway_stub: GatewayStub,
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client routed to the gateway stub."""
    async with create_http_client(settings, transport=gateway_stub.transport) as client:
        yield client


@pytest.fixture
def gateway_client(
    http_client: httpx.AsyncClient,
    settings: Settings,
) -> HttpPaymentGatewayClient:
    """Gateway client under test."""
    return HttpPaymentGatewayClient(
        http_client,
        max_retries=settings.max_retries,
        retry_wait=settings.retry_wait,
    )


# =============================================================================
# Command Line Fixtures
# =============================================================================

@pytest.fixture
def cli_env(monkeypatch, tmp_path):
    """Environment for running main() against the stub."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("API_KEY", API_KEY)
    monkeypatch.setenv("BASE_URL", BASE_URL)
    monkeypatch.setenv("RETRY_WAIT", "0")
    monkeypatch.setenv("POLL_INTERVAL", "0.05")
    monkeypatch.setenv("MAX_POLL_ATTEMPTS", "5")
    monkeypatch.delenv("METRICS_FILE", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    return tmp_path


def answers(*values: str):
    """Build a prompt reader that returns the given answers in order."""
    remaining = list(values)

    def read(prompt: str) -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read
