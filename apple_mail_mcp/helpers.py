"""
Shared formatting and error handling helpers.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import InvalidParameter, MailError, ScriptCreationFailed, ScriptExecutionFailed

log = logging.getLogger("apple_mail.helpers")


# ---------------------------------------------------------------------------
# Tool result
# ---------------------------------------------------------------------------


@dataclass
class ToolResult:
  content: str
  is_error: bool = False


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_json(value: Any) -> str:
  """Pretty-printed JSON with sorted keys. Byte-identical for equal input."""
  return json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False)


def format_result(value: Any) -> str:
  """Render an operation result: text verbatim, numbers as text, the rest as JSON."""
  if isinstance(value, str):
    return value
  if isinstance(value, bool):
    return "true" if value else "false"
  if isinstance(value, int):
    return str(value)
  return format_json(value)


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class ErrorCategory(str, Enum):
  ACCOUNT = "ACCOUNT"
  MAILBOX = "MAILBOX"
  MSG = "MSG"
  FLAG = "FLAG"
  SEND = "SEND"
  DRAFT = "DRAFT"
  ATTACH = "ATTACH"
  RULE = "RULE"
  SETTINGS = "SETTINGS"
  VALIDATION = "VALIDATION"
  SCRIPT = "SCRIPT"


def error_code(function_name: str, category: str | ErrorCategory | None = None) -> str:
  prefix = category.value if isinstance(category, ErrorCategory) else (category or "GEN")
  hash_val = sum(ord(c) for c in function_name) % 1000
  return f"{prefix}-ERR-{hash_val:03d}"


def log_and_format_error(
  function_name: str,
  error: Exception,
  category: str | ErrorCategory | None = None,
) -> ToolResult:
  """Log a failed tool call and turn it into an error envelope."""
  if isinstance(error, InvalidParameter):
    category = ErrorCategory.VALIDATION
  elif isinstance(error, (ScriptExecutionFailed, ScriptCreationFailed)) and category is None:
    category = ErrorCategory.SCRIPT
  code = error_code(function_name, category)

  if isinstance(error, MailError):
    log.error("[MCP] Error in %s - Code: %s - %s", function_name, code, error)
  else:
    log.exception("[MCP] Unexpected error in %s - Code: %s", function_name, code)

  message = str(error) or type(error).__name__
  return ToolResult(content=f"Error: {message}", is_error=True)
