"""
Organization domain tool handlers.
"""

from __future__ import annotations

from typing import Any

from ..api import organization_api
from ..helpers import ErrorCategory, ToolResult, format_json, log_and_format_error


async def get_organization_info(args: dict[str, Any]) -> ToolResult:
  try:
    result = await organization_api.get_organization_info()
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("get_organization_info", e, ErrorCategory.ORGANIZATION)
