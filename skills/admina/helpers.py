"""
Shared formatting and error handling helpers for the Admina skill.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import AdminaConfigError, AdminaError, format_admina_error
from .validation import ValidationError

log = logging.getLogger("skill.admina.helpers")


# ---------------------------------------------------------------------------
# Tool result
# ---------------------------------------------------------------------------


@dataclass
class ToolResult:
  content: str
  is_error: bool = False


def format_json(data: Any) -> str:
  """Pretty-print an upstream payload for the tool response."""
  return json.dumps(data, indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class ErrorCategory(str, Enum):
  DEVICE = "DEVICE"
  IDENTITY = "IDENTITY"
  PEOPLE = "PEOPLE"
  SERVICE = "SERVICE"
  ORGANIZATION = "ORG"


def log_and_format_error(
  function_name: str,
  error: Exception,
  category: str | ErrorCategory | None = None,
) -> ToolResult:
  prefix = category.value if isinstance(category, ErrorCategory) else (category or "GEN")
  hash_val = sum(ord(c) for c in function_name) % 1000
  error_code = f"{prefix}-ERR-{hash_val:03d}"

  if isinstance(error, ValidationError):
    log.info("[ADMINA] Invalid input for %s - Code: %s - %s", function_name, error_code, error.errors)
    user_message = str(error)
  elif isinstance(error, AdminaError):
    log.error(
      "[ADMINA] Error in %s - Code: %s - status=%d kind=%s error_id=%s",
      function_name,
      error_code,
      error.status,
      error.kind.value,
      error.error_id,
    )
    user_message = format_admina_error(error)
  elif isinstance(error, AdminaConfigError):
    log.error("[ADMINA] Configuration error in %s - Code: %s - %s", function_name, error_code, error)
    user_message = str(error)
  else:
    log.exception("[ADMINA] Error in %s - Code: %s - %s", function_name, error_code, error)
    user_message = f"An error occurred (code: {error_code}). Check logs for details."

  return ToolResult(content=user_message, is_error=True)
