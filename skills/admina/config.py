"""
Environment-sourced configuration for the Admina skill.

All settings use the ADMINA_ prefix, e.g. ADMINA_API_KEY overrides api_key.
"""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import AdminaConfigError

DEFAULT_BASE_URL = "https://api.itmc.i.moneyforward.com/api/v1"


class LoggingSettings(BaseSettings):
  """Settings read at startup, before credentials are checked."""

  log_level: str = "INFO"

  model_config = SettingsConfigDict(env_prefix="ADMINA_", frozen=True)


class AdminaSettings(LoggingSettings):
  """Credentials and endpoint for the Admina API."""

  api_key: str = Field(min_length=1)
  organization_id: str = Field(min_length=1)
  base_url: str = DEFAULT_BASE_URL


def load_settings() -> AdminaSettings:
  """Read settings from the environment.

  Raises:
    AdminaConfigError: If ADMINA_API_KEY or ADMINA_ORGANIZATION_ID is
      missing or empty.
  """
  try:
    return AdminaSettings()
  except ValidationError as exc:
    missing = sorted({f"ADMINA_{str(err['loc'][0]).upper()}" for err in exc.errors() if err["loc"]})
    raise AdminaConfigError(
      f"Missing or invalid configuration: {', '.join(missing)}. "
      "ADMINA_API_KEY and ADMINA_ORGANIZATION_ID environment variables must be set."
    ) from exc
