"""
Typed errors for the Admina API.

Every failed HTTP call is normalized into a single AdminaError tagged with
an AdminaErrorKind. The kind is derived from the HTTP status; the message
and errorId default per kind and are overridden by the upstream payload.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

NON_HTTP_ERROR_ID = "non_http_error"
GENERIC_ERROR_ID = "admina_api_error"


class AdminaErrorKind(str, Enum):
  INVALID_REQUEST = "invalid_request"
  AUTHENTICATION = "authentication"
  PERMISSION = "permission"
  NOT_FOUND = "not_found"
  REQUEST_TIMEOUT = "request_timeout"
  FEATURE_NOT_AVAILABLE = "feature_not_available"
  VALIDATION = "validation"
  SYSTEM = "system"
  TIMEOUT = "timeout"
  GENERIC = "generic"


# status -> (kind, default message, default errorId)
_STATUS_TABLE: dict[int, tuple[AdminaErrorKind, str, str]] = {
  400: (AdminaErrorKind.INVALID_REQUEST, "Validation Exception", "validation_exception"),
  401: (AdminaErrorKind.AUTHENTICATION, "Unauthorized", "unauthorized"),
  403: (AdminaErrorKind.PERMISSION, "Forbidden", "forbidden"),
  404: (AdminaErrorKind.NOT_FOUND, "Not found", "not_found"),
  408: (AdminaErrorKind.REQUEST_TIMEOUT, "Request timeout", "request_timeout"),
  418: (AdminaErrorKind.FEATURE_NOT_AVAILABLE, "Feature not available", "feature_not_available"),
  422: (AdminaErrorKind.VALIDATION, "Invalid query", "invalid_query"),
  500: (AdminaErrorKind.SYSTEM, "Internal Server Error", "internal_server_error"),
  504: (AdminaErrorKind.TIMEOUT, "Timeout error", "timeout_error"),
}


class AdminaConfigError(Exception):
  """Required configuration is missing or invalid."""

  pass


class AdminaError(Exception):
  """An Admina API call failed.

  Attributes:
    kind: Error category derived from the HTTP status.
    status: HTTP status of the failed call (500 for non-HTTP failures).
    error_id: Machine-readable error identifier.
    error_details: Optional structured details from the upstream payload.
    response: The upstream error payload, as received.
  """

  def __init__(
    self,
    message: str,
    status: int,
    response: dict[str, Any] | None = None,
    kind: AdminaErrorKind = AdminaErrorKind.GENERIC,
    error_id: str | None = None,
  ) -> None:
    super().__init__(message)
    self.message = message
    self.status = status
    self.kind = kind
    self.response: dict[str, Any] = response if response is not None else {}
    self.error_id = error_id or self.response.get("errorId") or GENERIC_ERROR_ID
    self.error_details: Any = self.response.get("errorDetails")

  def __repr__(self) -> str:
    return (
      f"AdminaError(kind={self.kind.value!r}, status={self.status}, "
      f"error_id={self.error_id!r}, message={self.message!r})"
    )


def _payload_message(response: dict[str, Any]) -> str | None:
  for key in ("message", "errorId"):
    value = response.get(key)
    if isinstance(value, str) and value:
      return value
  return None


def create_admina_error(status: int | None, response: dict[str, Any] | None = None) -> AdminaError:
  """Build the AdminaError matching an HTTP status and upstream payload."""
  if status is None:
    status = 500
  payload = response if isinstance(response, dict) else {}

  entry = _STATUS_TABLE.get(status)
  if entry is None:
    message = _payload_message(payload) or GENERIC_ERROR_ID
    return AdminaError(message, status, payload, AdminaErrorKind.GENERIC)

  kind, default_message, default_error_id = entry
  return AdminaError(
    _payload_message(payload) or default_message,
    status,
    payload,
    kind,
    error_id=payload.get("errorId") or default_error_id,
  )


def format_admina_error(error: AdminaError) -> str:
  """Render an AdminaError for display to a human."""
  text = f"Admina API error: {error.message}"
  if error.error_details:
    text += f"\nDetails: {json.dumps(error.error_details, indent=2, ensure_ascii=False)}"
  return text
