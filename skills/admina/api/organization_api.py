"""
Organization API wrappers.
"""

from __future__ import annotations

from typing import Any

from ..client import get_client


async def get_organization_info() -> Any:
  """GET the organization root (/organizations/{id})."""
  return await get_client().get("")
