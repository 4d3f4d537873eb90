"""
Tool handler dispatcher.
"""

from __future__ import annotations

from typing import Any

from ..helpers import ToolResult
from .device import (
  create_device,
  create_device_custom_field,
  delete_device_custom_field,
  get_device_custom_fields,
  get_devices,
  search_devices,
  update_device,
  update_device_custom_field,
  update_device_meta,
)
from .identity import (
  check_identity_management_type,
  create_identity,
  create_identity_custom_field,
  delete_identity,
  delete_identity_custom_field,
  get_identities,
  get_identities_stats,
  get_identity,
  get_identity_config,
  get_identity_custom_fields,
  get_identity_field_configuration,
  get_people_accounts,
  merge_identities,
  update_identity,
  update_identity_custom_field,
)
from .organization import get_organization_info
from .service import create_service_account, get_provisioning_meta, get_service_accounts, get_services

HANDLERS: dict[str, Any] = {
  # Devices
  "get_devices": get_devices,
  "search_devices": search_devices,
  "create_device": create_device,
  "update_device": update_device,
  "update_device_meta": update_device_meta,
  "get_device_custom_fields": get_device_custom_fields,
  "create_device_custom_field": create_device_custom_field,
  "update_device_custom_field": update_device_custom_field,
  "delete_device_custom_field": delete_device_custom_field,
  # Identities
  "get_identities": get_identities,
  "get_identity": get_identity,
  "create_identity": create_identity,
  "update_identity": update_identity,
  "delete_identity": delete_identity,
  "merge_identities": merge_identities,
  "check_identity_management_type": check_identity_management_type,
  "get_identities_stats": get_identities_stats,
  "get_identity_field_configuration": get_identity_field_configuration,
  "get_identity_config": get_identity_config,
  "get_identity_custom_fields": get_identity_custom_fields,
  "create_identity_custom_field": create_identity_custom_field,
  "update_identity_custom_field": update_identity_custom_field,
  "delete_identity_custom_field": delete_identity_custom_field,
  # People
  "get_people_accounts": get_people_accounts,
  # Services
  "get_services": get_services,
  "get_service_accounts": get_service_accounts,
  "get_provisioning_meta": get_provisioning_meta,
  "create_service_account": create_service_account,
  # Organization
  "get_organization_info": get_organization_info,
}


async def dispatch_tool(tool_name: str, args: dict[str, Any]) -> ToolResult:
  """Dispatch a tool call to the appropriate handler."""
  handler = HANDLERS.get(tool_name)
  if not handler:
    return ToolResult(
      content=f"Unknown tool: {tool_name}",
      is_error=True,
    )
  result: ToolResult = await handler(args)
  return result
