"""Pytest configuration and shared fixtures for the Admina skill tests.

Every test runs with a fresh client singleton and test credentials. The
``upstream`` fixture serves a fake Admina API from an in-process aiohttp
application and points the client at it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from skills.admina.client import close_client, reset_client

API_KEY = "test-api-key"
ORG_ID = "test-org-id"
ORG_PATH = f"/api/v1/organizations/{ORG_ID}"


@dataclass
class RecordedRequest:
  method: str
  path: str
  query: list[tuple[str, str]]
  raw_query: str
  headers: dict[str, str]
  json: Any = None


@dataclass
class FakeAdmina:
  """Records every request and replies with canned responses."""

  requests: list[RecordedRequest] = field(default_factory=list)
  responses: dict[tuple[str, str], Callable[[], web.Response]] = field(default_factory=dict)

  def respond(self, method: str, endpoint: str, payload: Any = None, status: int = 200) -> None:
    """Register a JSON reply (or an empty one for None) for ``method`` on ``endpoint``.

    ``endpoint`` is relative to the organization, as passed to the client.
    """
    if payload is None:
      self.responses[(method, f"{ORG_PATH}{endpoint}")] = lambda: web.Response(status=status)
    else:
      self.responses[(method, f"{ORG_PATH}{endpoint}")] = lambda: web.json_response(payload, status=status)

  def respond_text(self, method: str, endpoint: str, text: str, status: int = 200) -> None:
    """Register a non-JSON reply."""
    self.responses[(method, f"{ORG_PATH}{endpoint}")] = lambda: web.Response(
      text=text, status=status, content_type="text/html"
    )

  def respond_bytes(self, method: str, endpoint: str, body: bytes, status: int = 200) -> None:
    """Register a reply with an arbitrary (possibly undecodable) body."""
    self.responses[(method, f"{ORG_PATH}{endpoint}")] = lambda: web.Response(body=body, status=status)

  @property
  def last(self) -> RecordedRequest:
    return self.requests[-1]

  async def handle(self, request: web.Request) -> web.Response:
    body = await request.json() if request.can_read_body else None
    self.requests.append(
      RecordedRequest(
        method=request.method,
        path=request.path,
        query=list(request.query.items()),
        raw_query=request.rel_url.raw_query_string,
        headers=dict(request.headers),
        json=body,
      )
    )
    factory = self.responses.get((request.method, request.path))
    if factory is None:
      return web.json_response({"ok": True})
    return factory()


@pytest.fixture(autouse=True)
def admina_env(monkeypatch):
  """Provide credentials and a clean client singleton for every test."""
  monkeypatch.setenv("ADMINA_API_KEY", API_KEY)
  monkeypatch.setenv("ADMINA_ORGANIZATION_ID", ORG_ID)
  monkeypatch.delenv("ADMINA_BASE_URL", raising=False)
  reset_client()
  yield
  reset_client()


@pytest_asyncio.fixture
async def upstream(monkeypatch):
  """Start a fake Admina API and point the shared client at it.

  Yields:
    FakeAdmina: The recorder/responder behind the server.
  """
  fake = FakeAdmina()
  app = web.Application()
  app.router.add_route("*", "/{tail:.*}", fake.handle)
  server = TestServer(app)
  await server.start_server()
  monkeypatch.setenv("ADMINA_BASE_URL", str(server.make_url("/api/v1")))
  reset_client()
  yield fake
  await close_client()
  await server.close()
