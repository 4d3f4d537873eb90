"""
Input validation for Admina tool arguments.

Tool arguments are validated against the tool's pydantic model before any
request is built. Failures are reported per field.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

M = TypeVar("M", bound=BaseModel)


class ValidationError(Exception):
  """Tool input did not match its schema."""

  def __init__(self, errors: list[tuple[str, str]]):
    self.errors = errors
    lines = "\n".join(f"{path}: {message}" for path, message in errors)
    super().__init__(f"Invalid input:\n{lines}")


def _path(loc: tuple[Any, ...]) -> str:
  return ".".join(str(part) for part in loc) or "(root)"


def parse_args(model: type[M], args: dict[str, Any] | None) -> M:
  """Validate raw tool arguments into ``model``.

  Raises:
    ValidationError: With one (path, message) entry per failing field.
  """
  try:
    return model.model_validate(args or {})
  except PydanticValidationError as exc:
    raise ValidationError([(_path(err["loc"]), err["msg"]) for err in exc.errors()]) from exc
