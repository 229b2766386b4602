"""
Shared JSON-Schema fragments for tool parameters.
"""

from __future__ import annotations

from typing import Any


def string(description: str) -> dict[str, Any]:
  return {"type": "string", "description": description}


def integer(description: str) -> dict[str, Any]:
  return {"type": "integer", "description": description}


def boolean(description: str) -> dict[str, Any]:
  return {"type": "boolean", "description": description}


def string_array(description: str) -> dict[str, Any]:
  return {"type": "array", "items": {"type": "string"}, "description": description}


def obj(properties: dict[str, Any], required: list[str] | None = None) -> dict[str, Any]:
  schema: dict[str, Any] = {"type": "object", "properties": properties}
  if required:
    schema["required"] = required
  return schema


EMAIL_ID = string("The email ID")
MAILBOX = string("Mailbox name")
ACCOUNT = string("The mail account")


def message_params(**extra: dict[str, Any]) -> dict[str, Any]:
  """id/mailbox/account_name plus any extra properties, in that order."""
  return {"id": EMAIL_ID, "mailbox": MAILBOX, "account_name": ACCOUNT, **extra}
