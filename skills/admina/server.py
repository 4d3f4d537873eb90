"""
MCP server for the Admina skill.

Uses the official `mcp` Python SDK. Handles tools/list and tools/call; a
failed tool call is reported to the host as an MCP tool error.
"""

from __future__ import annotations

import logging
from typing import Any

from mcp.server import Server
from mcp.types import TextContent, Tool

from .handlers import dispatch_tool
from .tools import ALL_TOOLS

log = logging.getLogger("skill.admina.server")


class ToolCallError(Exception):
  """Raised inside call_tool so the SDK marks the result with isError."""


def create_mcp_server() -> Server:
  """Create and configure the MCP server with all tool handlers."""
  server = Server("admina-skill")

  @server.list_tools()
  async def list_tools() -> list[Tool]:
    return ALL_TOOLS

  @server.call_tool()
  async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    args = arguments or {}
    log.debug("tools/call %s", name)
    result = await dispatch_tool(name, args)
    if result.is_error:
      raise ToolCallError(result.content)
    return [TextContent(type="text", text=result.content)]

  return server
