"""
Service and provisioning domain tool handlers.
"""

from __future__ import annotations

from typing import Any

from ..api import service_api
from ..helpers import ErrorCategory, ToolResult, format_json, log_and_format_error
from ..schemas.service import CreateServiceAccount, ProvisioningMetaFilters, ServiceAccountFilters, ServiceFilters
from ..validation import parse_args


async def get_services(args: dict[str, Any]) -> ToolResult:
  try:
    filters = parse_args(ServiceFilters, args)
    result = await service_api.get_services(filters)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("get_services", e, ErrorCategory.SERVICE)


async def get_service_accounts(args: dict[str, Any]) -> ToolResult:
  try:
    filters = parse_args(ServiceAccountFilters, args)
    result = await service_api.get_service_accounts(filters)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("get_service_accounts", e, ErrorCategory.SERVICE)


async def get_provisioning_meta(args: dict[str, Any]) -> ToolResult:
  try:
    filters = parse_args(ProvisioningMetaFilters, args)
    result = await service_api.get_provisioning_meta(filters)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("get_provisioning_meta", e, ErrorCategory.SERVICE)


async def create_service_account(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(CreateServiceAccount, args)
    result = await service_api.create_service_account(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("create_service_account", e, ErrorCategory.SERVICE)
