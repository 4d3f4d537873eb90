"""
Device domain tool handlers.
"""

from __future__ import annotations

from typing import Any

from ..api import device_api
from ..helpers import ErrorCategory, ToolResult, format_json, log_and_format_error
from ..schemas.device import (
  CreateDevice,
  CreateDeviceCustomField,
  DeleteDeviceCustomField,
  DeviceFilters,
  DeviceSearch,
  UpdateDevice,
  UpdateDeviceCustomField,
  UpdateDeviceMeta,
)
from ..validation import parse_args


async def get_devices(args: dict[str, Any]) -> ToolResult:
  try:
    filters = parse_args(DeviceFilters, args)
    result = await device_api.get_devices(filters)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("get_devices", e, ErrorCategory.DEVICE)


async def search_devices(args: dict[str, Any]) -> ToolResult:
  try:
    search = parse_args(DeviceSearch, args)
    result = await device_api.search_devices(search)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("search_devices", e, ErrorCategory.DEVICE)


async def create_device(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(CreateDevice, args)
    result = await device_api.create_device(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("create_device", e, ErrorCategory.DEVICE)


async def update_device(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(UpdateDevice, args)
    result = await device_api.update_device(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("update_device", e, ErrorCategory.DEVICE)


async def update_device_meta(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(UpdateDeviceMeta, args)
    result = await device_api.update_device_meta(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("update_device_meta", e, ErrorCategory.DEVICE)


async def get_device_custom_fields(args: dict[str, Any]) -> ToolResult:
  try:
    result = await device_api.get_device_custom_fields()
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("get_device_custom_fields", e, ErrorCategory.DEVICE)


async def create_device_custom_field(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(CreateDeviceCustomField, args)
    result = await device_api.create_device_custom_field(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("create_device_custom_field", e, ErrorCategory.DEVICE)


async def update_device_custom_field(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(UpdateDeviceCustomField, args)
    result = await device_api.update_device_custom_field(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("update_device_custom_field", e, ErrorCategory.DEVICE)


async def delete_device_custom_field(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(DeleteDeviceCustomField, args)
    result = await device_api.delete_device_custom_field(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("delete_device_custom_field", e, ErrorCategory.DEVICE)
