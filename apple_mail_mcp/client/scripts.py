"""
AppleScript command builder.

Every user-supplied string goes through `escape_applescript` (via `quote`)
before it is interpolated into a script. Message ids are used unquoted by
Mail's object model, so they are checked with `validate_message_id` instead.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from ..errors import InvalidParameter

_MESSAGE_ID_RE = re.compile(r"^\d+$")

# Backslash must come first, otherwise the escapes added by the later
# replacements would be escaped a second time.
_ESCAPES = (
  ("\\", "\\\\"),
  ('"', '\\"'),
  ("\n", "\\n"),
  ("\r", "\\r"),
  ("\t", "\\t"),
)


def escape_applescript(text: str) -> str:
  """Escape text for embedding inside an AppleScript string literal."""
  for raw, escaped in _ESCAPES:
    text = text.replace(raw, escaped)
  return text


def quote(text: str) -> str:
  """Return text as a quoted AppleScript string literal."""
  return f'"{escape_applescript(text)}"'


def validate_message_id(message_id: str) -> str:
  message_id = message_id.strip()
  if not _MESSAGE_ID_RE.match(message_id):
    raise InvalidParameter(f"id must be a numeric message id, got: {message_id!r}")
  return message_id


def require_text(value: str, field: str) -> str:
  """Reject blank names that would address nothing in Mail."""
  if not value.strip():
    raise InvalidParameter(f"{field} must not be empty")
  return value


def tell_mail(body: str, application: str = "Mail") -> str:
  """Wrap script lines in a tell block for the Mail application."""
  lines = [f"tell application {quote(application)}"]
  for line in body.strip("\n").splitlines():
    lines.append(f"  {line}" if line else "")
  lines.append("end tell")
  return "\n".join(lines)


def account_ref(account_name: str) -> str:
  require_text(account_name, "account_name")
  return f"account {quote(account_name)}"


def mailbox_ref(mailbox: str, account_name: str) -> str:
  require_text(mailbox, "mailbox")
  return f"mailbox {quote(mailbox)} of {account_ref(account_name)}"


def message_ref(message_id: str, mailbox: str, account_name: str) -> str:
  return f"message id {validate_message_id(message_id)} of {mailbox_ref(mailbox, account_name)}"


def recipient_lines(addresses: Iterable[str], kind: str = "to") -> list[str]:
  """`make new ... recipient` lines for use inside a `tell <message>` block."""
  return [
    f"make new {kind} recipient at end of {kind} recipients with properties {{address:{quote(addr)}}}"
    for addr in addresses
  ]
