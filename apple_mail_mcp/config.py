"""
Runtime configuration for the AppleScript bridge.

Values come from the environment at startup; nothing here is read per call.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

log = logging.getLogger("apple_mail.config")

ENV_PREFIX = "APPLE_MAIL_MCP_"


class BridgeConfig(BaseModel):
  osascript_path: str = "osascript"
  timeout_seconds: float = Field(default=60, gt=0)
  application: str = "Mail"
  log_level: str = "INFO"

  @field_validator("log_level")
  @classmethod
  def _known_level(cls, value: str) -> str:
    level = value.strip().upper()
    if level not in logging.getLevelNamesMapping():
      raise ValueError(f"unknown log level: {value}")
    return level

  @field_validator("application", "osascript_path")
  @classmethod
  def _not_blank(cls, value: str) -> str:
    if not value.strip():
      raise ValueError("must not be empty")
    return value.strip()


_ENV_FIELDS = {
  "OSASCRIPT": "osascript_path",
  "TIMEOUT": "timeout_seconds",
  "APPLICATION": "application",
  "LOG_LEVEL": "log_level",
}


def load_config(environ: Mapping[str, str] | None = None) -> BridgeConfig:
  """Build a BridgeConfig from APPLE_MAIL_MCP_* environment variables."""
  env = os.environ if environ is None else environ
  values: dict[str, str] = {}
  for suffix, field_name in _ENV_FIELDS.items():
    raw = env.get(ENV_PREFIX + suffix)
    if raw is not None and raw != "":
      values[field_name] = raw

  try:
    return BridgeConfig(**values)
  except ValidationError as e:
    raise ValueError(f"Invalid {ENV_PREFIX}* configuration: {e}") from e
