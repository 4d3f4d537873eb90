"""
Async HTTP client for the Admina API.

Uses aiohttp with bearer token auth. Every endpoint is nested under
/organizations/{organization_id}. Failures are raised as AdminaError; no
request is retried.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp
from yarl import URL

from ..config import DEFAULT_BASE_URL, load_settings
from ..errors import NON_HTTP_ERROR_ID, AdminaError, AdminaErrorKind, create_admina_error
from ..params import QueryInput, encode_query

log = logging.getLogger("skill.admina.client")

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


class AdminaClient:
  """Async HTTP client for the Admina API."""

  def __init__(self, api_key: str, organization_id: str, base_url: str = DEFAULT_BASE_URL) -> None:
    self._api_key = api_key
    self._organization_id = organization_id
    self._base_url = base_url.rstrip("/")
    self._session: aiohttp.ClientSession | None = None

  @property
  def organization_id(self) -> str:
    return self._organization_id

  @property
  def base_url(self) -> str:
    return self._base_url

  @property
  def is_connected(self) -> bool:
    return self._session is not None and not self._session.closed

  def _headers(self) -> dict[str, str]:
    return {
      "Accept": "application/json",
      "Content-Type": "application/json",
      "Authorization": f"Bearer {self._api_key}",
    }

  async def connect(self) -> aiohttp.ClientSession:
    """Create the aiohttp session, or return the open one."""
    if self._session is None or self._session.closed:
      self._session = aiohttp.ClientSession(headers=self._headers())
    return self._session

  async def close(self) -> None:
    """Close the aiohttp session."""
    if self._session and not self._session.closed:
      await self._session.close()
    self._session = None

  def build_url(self, endpoint: str, query: QueryInput = None) -> str:
    """Full request URL: base + /organizations/{id} + endpoint [+ ?query]."""
    url = f"{self._base_url}/organizations/{self._organization_id}{endpoint}"
    query_string = encode_query(query)
    if query_string:
      url = f"{url}?{query_string}"
    return url

  async def call(
    self,
    endpoint: str,
    query: QueryInput = None,
    method: str = "GET",
    body: Any = None,
  ) -> Any:
    """Send one request and return the parsed JSON payload unchanged.

    Args:
      endpoint: Path below /organizations/{organization_id} ("" for the root).
      query: Query params as (key, value) pairs or a flat mapping.
      method: GET, POST, PUT, PATCH or DELETE.
      body: JSON body; only sent for POST, PUT and PATCH.

    Raises:
      AdminaError: For any HTTP or transport failure.
    """
    method = method.upper()
    url = self.build_url(endpoint, query)
    kwargs: dict[str, Any] = {}
    if method in BODY_METHODS and body is not None:
      kwargs["json"] = body

    log.debug("%s %s", method, url)
    try:
      session = await self.connect()
      async with session.request(method, URL(url, encoded=True), **kwargs) as resp:
        if resp.status >= 400:
          raise create_admina_error(resp.status, await _read_error_payload(resp))
        return await resp.json(content_type=None)
    except AdminaError as exc:
      log.warning("Admina API %s %s failed: %d %s", method, endpoint or "/", exc.status, exc.error_id)
      raise
    except aiohttp.ClientResponseError as exc:
      log.warning("Admina API %s %s failed: %s", method, endpoint or "/", exc)
      raise create_admina_error(exc.status or None, None) from exc
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
      log.warning("Admina API %s %s failed without response: %s", method, endpoint or "/", exc)
      raise AdminaError(
        str(exc) or type(exc).__name__,
        500,
        {"errorId": NON_HTTP_ERROR_ID},
        AdminaErrorKind.GENERIC,
      ) from exc

  async def get(self, endpoint: str, query: QueryInput = None) -> Any:
    """GET request."""
    return await self.call(endpoint, query, "GET")

  async def post(self, endpoint: str, query: QueryInput = None, body: Any = None) -> Any:
    """POST request. The body defaults to an empty object."""
    return await self.call(endpoint, query, "POST", {} if body is None else body)

  async def put(self, endpoint: str, body: Any = None, query: QueryInput = None) -> Any:
    """PUT request. The body defaults to an empty object."""
    return await self.call(endpoint, query, "PUT", {} if body is None else body)

  async def patch(self, endpoint: str, body: Any = None, query: QueryInput = None) -> Any:
    """PATCH request. The body defaults to an empty object."""
    return await self.call(endpoint, query, "PATCH", {} if body is None else body)

  async def delete(self, endpoint: str, query: QueryInput = None) -> Any:
    """DELETE request."""
    return await self.call(endpoint, query, "DELETE")


async def _read_error_payload(resp: aiohttp.ClientResponse) -> dict[str, Any]:
  text = await resp.text(errors="replace")
  if not text:
    return {}
  try:
    payload = json.loads(text)
  except ValueError:
    return {"errorDetails": text}
  if isinstance(payload, dict):
    return payload
  return {"errorDetails": payload}


# ---------------------------------------------------------------------------
# Process-wide client
# ---------------------------------------------------------------------------

_client: AdminaClient | None = None


def get_client() -> AdminaClient:
  """Return the shared client, creating it from the environment on first use.

  Raises:
    AdminaConfigError: If the API key or organization id is not configured.
  """
  global _client
  if _client is None:
    settings = load_settings()
    _client = AdminaClient(settings.api_key, settings.organization_id, settings.base_url)
    log.info("Admina client initialized for organization %s", settings.organization_id)
  return _client


def set_client(client: AdminaClient | None) -> None:
  """Install a client instance (or None to clear it)."""
  global _client
  _client = client


def reset_client() -> None:
  """Forget the shared client so the next use re-reads configuration.

  The dropped client's session is not closed here; async callers should
  use close_client() instead.
  """
  global _client
  client, _client = _client, None
  if client is not None and client.is_connected:
    log.warning("Admina client reset with an open session; use close_client() to close it")


async def close_client() -> None:
  """Close the shared client's session and forget it."""
  global _client
  client, _client = _client, None
  if client is not None:
    await client.close()
