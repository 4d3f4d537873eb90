"""Unit tests for the Admina error taxonomy and formatting."""

from __future__ import annotations

import pytest

from skills.admina.errors import (
  GENERIC_ERROR_ID,
  AdminaError,
  AdminaErrorKind,
  create_admina_error,
  format_admina_error,
)


@pytest.mark.parametrize(
  ("status", "kind", "error_id"),
  [
    (400, AdminaErrorKind.INVALID_REQUEST, "validation_exception"),
    (401, AdminaErrorKind.AUTHENTICATION, "unauthorized"),
    (403, AdminaErrorKind.PERMISSION, "forbidden"),
    (404, AdminaErrorKind.NOT_FOUND, "not_found"),
    (408, AdminaErrorKind.REQUEST_TIMEOUT, "request_timeout"),
    (418, AdminaErrorKind.FEATURE_NOT_AVAILABLE, "feature_not_available"),
    (422, AdminaErrorKind.VALIDATION, "invalid_query"),
    (500, AdminaErrorKind.SYSTEM, "internal_server_error"),
    (504, AdminaErrorKind.TIMEOUT, "timeout_error"),
  ],
)
def test_known_status_maps_to_kind(status, kind, error_id):
  """Test that each known status maps to its kind and default errorId."""
  error = create_admina_error(status, {})
  assert isinstance(error, AdminaError)
  assert error.status == status
  assert error.kind is kind
  assert error.error_id == error_id


@pytest.mark.parametrize("status", [402, 409, 429, 502, 503])
def test_unknown_status_is_generic(status):
  """Test that unlisted statuses become generic errors keeping the status."""
  error = create_admina_error(status, {"message": "nope"})
  assert error.kind is AdminaErrorKind.GENERIC
  assert error.status == status
  assert error.message == "nope"
  assert error.error_id == GENERIC_ERROR_ID


def test_missing_status_defaults_to_500():
  """Test that an absent status is treated as a 500."""
  error = create_admina_error(None)
  assert error.status == 500
  assert error.kind is AdminaErrorKind.SYSTEM


def test_payload_overrides_defaults():
  """Test that the upstream message and errorId win over the defaults."""
  error = create_admina_error(404, {"errorId": "device_not_found", "message": "Device 12 does not exist"})
  assert error.error_id == "device_not_found"
  assert error.message == "Device 12 does not exist"


def test_error_id_used_as_message_without_message():
  """Test that the errorId becomes the message when no message is sent."""
  error = create_admina_error(403, {"errorId": "plan_limit"})
  assert error.message == "plan_limit"


def test_default_message_without_payload():
  """Test that the kind's default message is used for an empty payload."""
  error = create_admina_error(401, None)
  assert error.message == "Unauthorized"
  assert error.response == {}
  assert error.error_details is None


def test_format_without_details():
  """Test the one-line summary."""
  error = create_admina_error(404, {"message": "Identity not found"})
  assert format_admina_error(error) == "Admina API error: Identity not found"


def test_format_with_details():
  """Test that errorDetails are appended as pretty-printed JSON."""
  details = {"fields": [{"name": "preset.asset_number", "reason": "duplicate"}]}
  error = create_admina_error(422, {"message": "Invalid query", "errorDetails": details})
  text = format_admina_error(error)
  assert text.startswith("Admina API error: Invalid query\nDetails: {\n")
  assert '    {\n      "name": "preset.asset_number"' in text


def test_error_is_raisable():
  """Test that AdminaError behaves as a normal exception."""
  with pytest.raises(AdminaError) as exc_info:
    raise create_admina_error(504, {})
  assert str(exc_info.value) == "Timeout error"
  assert "kind='timeout'" in repr(exc_info.value)
