"""
Admina skill entry point: starts the MCP server on stdio.
"""

from __future__ import annotations

import asyncio
import logging
import sys

from mcp.server.stdio import stdio_server

from .client import close_client
from .config import LoggingSettings
from .server import create_mcp_server

logging.basicConfig(
  level=LoggingSettings().log_level.upper(),
  format="[%(name)s] %(levelname)s: %(message)s",
  stream=sys.stderr,
)

log = logging.getLogger("skill.admina")


async def main() -> None:
  """Start the MCP server."""
  server = create_mcp_server()
  log.info("Starting Admina MCP server")
  try:
    async with stdio_server() as (read_stream, write_stream):
      await server.run(read_stream, write_stream, server.create_initialization_options())
  finally:
    await close_client()


def run() -> None:
  asyncio.run(main())


if __name__ == "__main__":
  run()
