"""
Error types raised by the AppleScript bridge and the tool dispatcher.

Every one of them is caught in `handlers.dispatch_tool` and reported as an
error envelope; none of them should ever escape to the MCP transport.
"""

from __future__ import annotations


class MailError(Exception):
  """Base class for all Apple Mail bridge errors."""


class InvalidParameter(MailError):
  """Caller-supplied arguments are missing or malformed."""

  def __init__(self, message: str) -> None:
    super().__init__(message)
    self.message = message


class ScriptCreationFailed(MailError):
  """The AppleScript source could not be compiled or osascript could not start."""

  def __init__(self, detail: str | None = None) -> None:
    self.detail = detail
    super().__init__(f"Failed to create AppleScript: {detail}" if detail else "Failed to create AppleScript")


class ScriptExecutionFailed(MailError):
  """Mail rejected or failed the command."""

  def __init__(self, message: str, code: int) -> None:
    self.message = message
    self.code = code
    super().__init__(f"AppleScript error ({code}): {message}")
