from typing import Callable, Dict, List, Tuple

import httpx
import pytest

from n8n_mcp.n8n import N8nApiClient, ToolDispatcher
from n8n_mcp.settings import N8nSettings

HOST = "https://n8n.example.com"
API_KEY = "test-api-key"


class StubN8n:
    """Records outgoing requests and answers from a route table."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.routes: Dict[Tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def on(self, method: str, url: str, status_code: int = 200, **kwargs) -> None:
        self.routes[(method, url)] = lambda request: httpx.Response(status_code, **kwargs)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url).split("?", 1)[0]
        route = self.routes.get((request.method, url))
        if route is None:
            return httpx.Response(404, json={"message": f"no stub for {request.method} {url}"})
        return route(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings() -> N8nSettings:
    return N8nSettings(N8N_HOST_URL=HOST, N8N_API_KEY=API_KEY)


@pytest.fixture
def stub() -> StubN8n:
    return StubN8n()


@pytest.fixture
def client(settings: N8nSettings, stub: StubN8n) -> N8nApiClient:
    return N8nApiClient(settings, transport=httpx.MockTransport(stub.handler))


@pytest.fixture
def dispatcher(client: N8nApiClient) -> ToolDispatcher:
    return ToolDispatcher(client)
