"""Shared fixtures: a stubbed Signaturit API and a client wired to it."""

import json

import httpx
import pytest

from signaturit.client import SignaturitClient
from signaturit.config import Settings


class StubApi:
    """Records every request and answers from a (method, path) table."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: dict[tuple[str, str], tuple[int, str]] = {}

    def reply(self, method: str, path: str, status: int = 200, body: object = "") -> None:
        text = body if isinstance(body, str) else json.dumps(body)
        self._responses[(method, "/v3" + path)] = (status, text)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, text = self._responses.get(
            (request.method, request.url.path), (599, "no stub for this route")
        )
        return httpx.Response(status, text=text)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> object:
        return json.loads(self.last.content)


@pytest.fixture()
def settings() -> Settings:
    return Settings(secret_token="test-token", sandbox=False, trim_templates=False)


@pytest.fixture()
def api() -> StubApi:
    return StubApi()


@pytest.fixture()
def client(settings: Settings, api: StubApi):
    with SignaturitClient(settings, transport=httpx.MockTransport(api.handler)) as client:
        yield client
