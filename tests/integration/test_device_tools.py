"""Integration tests for device tools against a fake Admina API."""

from __future__ import annotations

import json

import pytest

from skills.admina.api import device_api
from skills.admina.errors import AdminaError, AdminaErrorKind
from skills.admina.handlers import dispatch_tool
from skills.admina.schemas import DeviceFilters, UpdateDevice

ORG_PATH = "/api/v1/organizations/test-org-id"

DEVICE_FIELDS = {
  "preset.asset_number": "PC-001",
  "preset.subtype": "laptop_pc",
  "preset.model_name": "ThinkPad X1",
  "custom.floor": "3F",
}


@pytest.mark.asyncio
async def test_get_devices_query(upstream):
  """Test that listing devices sends filters as query params and returns the payload."""
  payload = {"items": [{"id": 1, "status": "active"}], "meta": {"nextCursor": "abc"}}
  upstream.respond("GET", "/devices", payload)

  result = await dispatch_tool("get_devices", {"status": "active", "limit": 10, "locale": "en"})

  assert not result.is_error
  assert json.loads(result.content) == payload
  request = upstream.last
  assert request.method == "GET"
  assert request.path == f"{ORG_PATH}/devices"
  assert ("status", "active") in request.query
  assert ("limit", "10") in request.query
  assert ("locale", "en") in request.query


@pytest.mark.asyncio
async def test_get_devices_api_returns_payload_unchanged(upstream):
  """Test that the typed operation returns the upstream JSON verbatim."""
  payload = {"items": [], "meta": {"total": 0}}
  upstream.respond("GET", "/devices", payload)
  assert await device_api.get_devices(DeviceFilters(status="active", limit=10, locale="en")) == payload


@pytest.mark.asyncio
async def test_search_devices_splits_query_and_body(upstream):
  """Test that search sends paging in the query and filters in the body."""
  result = await dispatch_tool(
    "search_devices",
    {
      "limit": 20,
      "expands": ["relatedIdentity"],
      "type": "pc",
      "employeeStatus": "retired",
      "searchTerm": "X1",
    },
  )

  assert not result.is_error
  request = upstream.last
  assert request.method == "POST"
  assert request.path == f"{ORG_PATH}/devices/search"
  assert request.query == [("limit", "20"), ("expands", "relatedIdentity")]
  assert request.json == {"type": "pc", "employeeStatus": "retired", "searchTerm": "X1"}


@pytest.mark.asyncio
async def test_update_device_patch(upstream):
  """Test that updating a device PATCHes its path with fields and memo."""
  payload = {"id": 123, "fields": DEVICE_FIELDS, "memo": "x"}
  upstream.respond("PATCH", "/devices/123", payload)

  result = await dispatch_tool("update_device", {"deviceId": 123, "fields": DEVICE_FIELDS, "memo": "x"})

  assert not result.is_error
  assert json.loads(result.content) == payload
  request = upstream.last
  assert request.method == "PATCH"
  assert request.path == f"{ORG_PATH}/devices/123"
  assert request.json == {"fields": DEVICE_FIELDS, "memo": "x"}


@pytest.mark.asyncio
async def test_update_device_not_found(upstream):
  """Test that an upstream 404 raises a NotFound error from the operation."""
  upstream.respond("PATCH", "/devices/999", {"errorId": "device_not_found", "message": "Device not found"}, 404)
  params = UpdateDevice.model_validate({"deviceId": 999, "fields": DEVICE_FIELDS})

  with pytest.raises(AdminaError) as exc_info:
    await device_api.update_device(params)

  assert exc_info.value.kind is AdminaErrorKind.NOT_FOUND
  assert exc_info.value.status == 404


@pytest.mark.asyncio
async def test_not_found_tool_result(upstream):
  """Test that the tool reports an upstream 404 as an error result."""
  upstream.respond("PATCH", "/devices/999", {"errorId": "device_not_found", "message": "Device not found"}, 404)

  result = await dispatch_tool("update_device", {"deviceId": 999, "fields": DEVICE_FIELDS})

  assert result.is_error
  assert result.content == "Admina API error: Device not found"


@pytest.mark.asyncio
async def test_create_device(upstream):
  """Test that creating a device POSTs fields and memo."""
  result = await dispatch_tool("create_device", {"fields": DEVICE_FIELDS})

  assert not result.is_error
  assert upstream.last.method == "POST"
  assert upstream.last.path == f"{ORG_PATH}/devices"
  assert upstream.last.json == {"fields": DEVICE_FIELDS}


@pytest.mark.asyncio
async def test_update_device_meta_unassign(upstream):
  """Test that an explicit null peopleId is forwarded."""
  await dispatch_tool("update_device_meta", {"deviceId": 7, "status": "in_stock", "peopleId": None})

  assert upstream.last.method == "PATCH"
  assert upstream.last.path == f"{ORG_PATH}/devices/7/meta"
  assert upstream.last.json == {"status": "in_stock", "peopleId": None}


@pytest.mark.asyncio
async def test_device_custom_field_lifecycle(upstream):
  """Test list, create, update and delete of device custom fields."""
  await dispatch_tool("get_device_custom_fields", {})
  assert (upstream.last.method, upstream.last.path) == ("GET", f"{ORG_PATH}/fields/custom")

  await dispatch_tool(
    "create_device_custom_field",
    {
      "attributeName": "Floor",
      "attributeCode": "floor",
      "kind": "dropdown",
      "configuration": {"values": [{"id": "f3", "value": "3F"}]},
    },
  )
  assert upstream.last.method == "POST"
  assert upstream.last.json == {
    "attributeName": "Floor",
    "attributeCode": "floor",
    "kind": "dropdown",
    "configuration": {"values": [{"id": "f3", "value": "3F"}]},
  }

  await dispatch_tool("update_device_custom_field", {"customFieldId": 4, "visibleForType": ["pc"]})
  assert (upstream.last.method, upstream.last.path) == ("PATCH", f"{ORG_PATH}/fields/custom/4")
  assert upstream.last.json == {"visibleForType": ["pc"]}

  await dispatch_tool("delete_device_custom_field", {"customFieldId": 4})
  assert (upstream.last.method, upstream.last.path) == ("DELETE", f"{ORG_PATH}/fields/custom/4")


@pytest.mark.asyncio
async def test_invalid_input_makes_no_request(upstream):
  """Test that validation failures are reported before any request."""
  result = await dispatch_tool("get_devices", {"status": "lost"})

  assert result.is_error
  assert result.content.startswith("Invalid input:\nstatus:")
  assert upstream.requests == []


@pytest.mark.asyncio
async def test_missing_configuration_fails_before_network(upstream, monkeypatch):
  """Test that missing credentials fail the first call without contacting the API."""
  monkeypatch.delenv("ADMINA_ORGANIZATION_ID")

  result = await dispatch_tool("get_devices", {})

  assert result.is_error
  assert "ADMINA_ORGANIZATION_ID" in result.content
  assert upstream.requests == []
