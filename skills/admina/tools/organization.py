"""
Organization tools.
"""

from __future__ import annotations

from mcp.types import Tool

from ..schemas import EmptyParams

organization_tools: list[Tool] = [
  Tool(
    name="get_organization_info",
    description="Return information about the configured organization.",
    inputSchema=EmptyParams.model_json_schema(),
  ),
]
