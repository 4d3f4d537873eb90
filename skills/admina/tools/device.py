"""
Device tools.
"""

from __future__ import annotations

from mcp.types import Tool

from ..schemas import (
  CreateDevice,
  CreateDeviceCustomField,
  DeleteDeviceCustomField,
  DeviceFilters,
  DeviceSearch,
  EmptyParams,
  UpdateDevice,
  UpdateDeviceCustomField,
  UpdateDeviceMeta,
)

device_tools: list[Tool] = [
  Tool(
    name="get_devices",
    description=(
      "Return a list of devices. Can be filtered by the status, asset number, serial number, "
      "or identityId which can be obtained from the get_identities tool."
    ),
    inputSchema=DeviceFilters.model_json_schema(),
  ),
  Tool(
    name="search_devices",
    description=(
      "Search devices with a search term, advanced field filters, sorting and expansions. "
      "Returns a paginated list; pass the returned cursor to fetch the next page."
    ),
    inputSchema=DeviceSearch.model_json_schema(),
  ),
  Tool(
    name="create_device",
    description=(
      "Create a new device. preset.asset_number, preset.subtype and preset.model_name are required; "
      "custom fields are passed as custom.<attribute code> keys."
    ),
    inputSchema=CreateDevice.model_json_schema(),
  ),
  Tool(
    name="update_device",
    description="Update the field values of an existing device.",
    inputSchema=UpdateDevice.model_json_schema(),
  ),
  Tool(
    name="update_device_meta",
    description="Update a device's status, assignee, assignment dates or location.",
    inputSchema=UpdateDeviceMeta.model_json_schema(),
  ),
  Tool(
    name="get_device_custom_fields",
    description="Return the custom fields defined for devices.",
    inputSchema=EmptyParams.model_json_schema(),
  ),
  Tool(
    name="create_device_custom_field",
    description="Create a device custom field (text, number, date or dropdown).",
    inputSchema=CreateDeviceCustomField.model_json_schema(),
  ),
  Tool(
    name="update_device_custom_field",
    description="Update a device custom field's label, code, visibility or dropdown values.",
    inputSchema=UpdateDeviceCustomField.model_json_schema(),
  ),
  Tool(
    name="delete_device_custom_field",
    description="Delete a device custom field.",
    inputSchema=DeleteDeviceCustomField.model_json_schema(),
  ),
]
