"""
Device API wrappers: typed params in, upstream JSON out.
"""

from __future__ import annotations

from typing import Any

from ..client import get_client
from ..schemas.device import (
  SEARCH_QUERY_FIELDS,
  CreateDevice,
  CreateDeviceCustomField,
  DeleteDeviceCustomField,
  DeviceFilters,
  DeviceSearch,
  UpdateDevice,
  UpdateDeviceCustomField,
  UpdateDeviceMeta,
)

# ---------------------------------------------------------------------------
# Devices
# ---------------------------------------------------------------------------


async def get_devices(filters: DeviceFilters) -> Any:
  return await get_client().get("/devices", filters.to_query())


async def search_devices(search: DeviceSearch) -> Any:
  """POST /devices/search. Paging goes in the query, filters in the body."""
  query = search.to_query(include=SEARCH_QUERY_FIELDS)
  body = search.to_body(exclude=SEARCH_QUERY_FIELDS, exclude_none=True)
  return await get_client().post("/devices/search", query, body)


async def create_device(params: CreateDevice) -> Any:
  return await get_client().post("/devices", body=params.to_body(exclude_none=True))


async def update_device(params: UpdateDevice) -> Any:
  body = params.to_body(exclude={"device_id"}, exclude_none=True)
  return await get_client().patch(f"/devices/{params.device_id}", body)


async def update_device_meta(params: UpdateDeviceMeta) -> Any:
  """Only supplied keys are sent; an explicit null peopleId unassigns the device."""
  body = params.to_body(exclude={"device_id"})
  return await get_client().patch(f"/devices/{params.device_id}/meta", body)


# ---------------------------------------------------------------------------
# Device custom fields
# ---------------------------------------------------------------------------


async def get_device_custom_fields() -> Any:
  return await get_client().get("/fields/custom")


async def create_device_custom_field(params: CreateDeviceCustomField) -> Any:
  return await get_client().post("/fields/custom", body=params.to_body(exclude_none=True))


async def update_device_custom_field(params: UpdateDeviceCustomField) -> Any:
  body = params.to_body(exclude={"custom_field_id"})
  return await get_client().patch(f"/fields/custom/{params.custom_field_id}", body)


async def delete_device_custom_field(params: DeleteDeviceCustomField) -> Any:
  return await get_client().delete(f"/fields/custom/{params.custom_field_id}")
