"""Shared fixtures: a Moki API answered by an in-memory transport."""

import json

import httpx
import pytest

from moki.config import MokiConfig
from moki.requests import MokiAPI

BASE_URL = "http://localhost:9292"
TENANT_ID = "abcd123-test"
API_KEY = "secret-key"
PREFIX = f"{BASE_URL}/rest/v1/api/tenants/{TENANT_ID}"

UDID = "abcd1234-1234-1234-1234-abcdef123456"
SERIAL = "ABCDEFGHIJ12"


class FakeMokiServer:
    """Records every request and answers with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: bytes = b"[]"

    def reply(self, content, status_code=200):
        if isinstance(content, bytes | str):
            self.body = content if isinstance(content, bytes) else content.encode()
        else:
            self.body = json.dumps(content).encode()
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            self.status_code,
            content=self.body,
            headers={"content-type": "application/json"},
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def config():
    return MokiConfig(base_url=BASE_URL, tenant_id=TENANT_ID, api_key=API_KEY)


@pytest.fixture
def server():
    return FakeMokiServer()


@pytest.fixture
def api(config, server):
    return MokiAPI(config, transport=server.transport)


@pytest.fixture
def moki_env(monkeypatch):
    monkeypatch.setenv("MOKI_API_URL", BASE_URL)
    monkeypatch.setenv("MOKI_TENANT_ID", TENANT_ID)
    monkeypatch.setenv("MOKI_API_KEY", API_KEY)
