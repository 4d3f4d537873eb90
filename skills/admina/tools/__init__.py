"""
Admina tool definitions organized by domain.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .device import device_tools
from .identity import identity_tools
from .organization import organization_tools
from .service import service_tools

if TYPE_CHECKING:
  from mcp.types import Tool

ALL_TOOLS: list[Tool] = [
  *device_tools,
  *identity_tools,
  *service_tools,
  *organization_tools,
]
