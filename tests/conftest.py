"""Shared fixtures for plivoclient tests."""

import json

import httpx
import pytest

from plivoclient.rest.client import RestAPI

AUTH_ID = "MAXXXXXXXXXXXXXXXXXXXX"
AUTH_TOKEN = "tokenvalue"
ACCOUNT_URL = f"https://api.plivo.com/v1/Account/{AUTH_ID}"


class Recorder:
    """Collects requests sent through a MockTransport and replays canned responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: object = {"api_id": "api-1", "message": "ok"}
        self.raw: bytes | None = None
        self.exc: Exception | None = None

    def respond(self, body: object = None, status_code: int = 200, raw: bytes | None = None) -> None:
        self.body = body
        self.status_code = status_code
        self.raw = raw

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def api(recorder):
    client = RestAPI(AUTH_ID, AUTH_TOKEN, transport=httpx.MockTransport(recorder))
    yield client
    client.close()
