"""Integration tests for service, provisioning and organization tools."""

from __future__ import annotations

import json

import pytest

from skills.admina.handlers import dispatch_tool

ORG_PATH = "/api/v1/organizations/test-org-id"


@pytest.mark.asyncio
async def test_get_services(upstream):
  """Test the services list query."""
  upstream.respond("GET", "/services", {"items": [{"id": 1, "name": "Slack"}]})

  result = await dispatch_tool("get_services", {"keyword": "sla", "limit": 5})

  assert json.loads(result.content) == {"items": [{"id": 1, "name": "Slack"}]}
  assert upstream.last.query == [("limit", "5"), ("keyword", "sla")]


@pytest.mark.asyncio
async def test_get_service_accounts(upstream):
  """Test that service account filters are sent as query params."""
  await dispatch_tool(
    "get_service_accounts",
    {
      "serviceId": 3,
      "roles": ["admin"],
      "types": ["employee", "guest"],
      "includeDeleted": True,
      "alertType": "inactive_account",
    },
  )

  assert upstream.last.path == f"{ORG_PATH}/services/3/accounts"
  assert upstream.last.query == [
    ("roles", "admin"),
    ("types", "employee"),
    ("types", "guest"),
    ("includeDeleted", "true"),
    ("alertType", "inactive_account"),
  ]


@pytest.mark.asyncio
async def test_get_service_accounts_rejects_multiple_roles(upstream):
  """Test that roles accepts exactly one value."""
  result = await dispatch_tool("get_service_accounts", {"serviceId": 3, "roles": ["admin", "guest"]})

  assert result.is_error
  assert "roles" in result.content
  assert upstream.requests == []


@pytest.mark.asyncio
async def test_get_provisioning_meta(upstream):
  """Test the provisioning metadata path and default language."""
  await dispatch_tool("get_provisioning_meta", {"organizationId": 5, "workspaceId": 6})

  assert upstream.last.path == f"{ORG_PATH}/organizations/5/workspaces/6/provisioning-meta"
  assert upstream.last.query == [("lang", "ja")]


@pytest.mark.asyncio
async def test_create_service_account(upstream):
  """Test that account data is POSTed with lang in the query."""
  await dispatch_tool(
    "create_service_account",
    {
      "organizationId": 5,
      "workspaceId": 6,
      "lang": "en",
      "data": {"email": "taro@example.com", "groups": ["dev"]},
    },
  )

  assert upstream.last.method == "POST"
  assert upstream.last.path == f"{ORG_PATH}/organizations/5/workspaces/6/accounts"
  assert upstream.last.query == [("lang", "en")]
  assert upstream.last.json == {"data": {"email": "taro@example.com", "groups": ["dev"]}}


@pytest.mark.asyncio
async def test_get_organization_info(upstream):
  """Test that organization info is read from the organization root."""
  upstream.respond("GET", "", {"id": "test-org-id", "name": "Example Inc."})

  result = await dispatch_tool("get_organization_info", {})

  assert upstream.last.path == ORG_PATH
  assert json.loads(result.content) == {"id": "test-org-id", "name": "Example Inc."}


@pytest.mark.asyncio
async def test_server_error_is_reported(upstream):
  """Test that a 500 is surfaced with its default message."""
  upstream.respond("GET", "/services", {}, status=500)

  result = await dispatch_tool("get_services", {})

  assert result.is_error
  assert result.content == "Admina API error: Internal Server Error"
