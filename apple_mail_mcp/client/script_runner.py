"""
Serialized AppleScript execution through osascript.

One ScriptRunner is shared by every tool call in the process. Its lock makes
sure Mail only ever sees one command at a time; waiters are served in arrival
order. A command that has started always runs to completion or failure.
"""

from __future__ import annotations

import asyncio
import logging
import re
import subprocess
import time

from ..config import BridgeConfig
from ..errors import ScriptCreationFailed, ScriptExecutionFailed
from .parsers import ScriptOutputError, ScriptValue, as_list, as_records, as_text, parse_script_output
from .scripts import tell_mail

log = logging.getLogger("apple_mail.client.script")

# errAETimeout
TIMEOUT_ERROR_CODE = -1712
UNKNOWN_ERROR_CODE = -1

_ERROR_RE = re.compile(
  r"^(?:\d+:\d+:\s*)?(?P<kind>execution|syntax) error:\s*(?P<message>.*?)\s*\((?P<code>-?\d+)\)\s*$",
  re.DOTALL,
)


class ScriptRunner:
  """Runs AppleScript source against Mail, one script at a time."""

  def __init__(self, config: BridgeConfig | None = None) -> None:
    self.config = config or BridgeConfig()
    self._lock = asyncio.Lock()

  def tell(self, body: str) -> str:
    """Wrap script lines in a tell block for the configured application."""
    return tell_mail(body, self.config.application)

  async def run(self, source: str) -> str:
    """Execute a script and return its result as text."""
    return as_text(await self.execute(source))

  async def run_list(self, source: str) -> list[str]:
    """Execute a script whose result is a list of scalars."""
    return as_list(await self.execute(source))

  async def run_records(self, source: str) -> list[dict[str, str]]:
    """Execute a script whose result is a list of records."""
    return as_records(await self.execute(source))

  async def execute(self, source: str) -> ScriptValue:
    async with self._lock:
      started = time.monotonic()
      log.debug("Running AppleScript: %s", _summary(source))
      try:
        completed = await self._invoke_to_completion(source)
      finally:
        log.debug("AppleScript finished in %.2fs", time.monotonic() - started)

    if completed.returncode != 0:
      raise _error_from_stderr(completed.stderr or "")

    try:
      return parse_script_output(completed.stdout or "")
    except ScriptOutputError:
      log.warning("Could not parse AppleScript output, returning raw text")
      return (completed.stdout or "").rstrip("\n")

  async def _invoke_to_completion(self, source: str) -> subprocess.CompletedProcess[str]:
    """Run osascript in a worker thread and wait for it even if the caller is cancelled.

    The lock stays held until the process has exited, so a cancelled call
    never lets the next script start alongside one that is still running.
    """
    task = asyncio.ensure_future(asyncio.to_thread(self._invoke, source))
    cancelled = False
    while not task.done():
      try:
        await asyncio.wait({task})
      except asyncio.CancelledError:
        if not cancelled:
          log.info("Call cancelled, waiting for the running AppleScript to finish")
        cancelled = True

    if cancelled:
      if not task.cancelled():
        task.exception()
      raise asyncio.CancelledError
    return task.result()

  def _invoke(self, source: str) -> subprocess.CompletedProcess[str]:
    try:
      return subprocess.run(
        [self.config.osascript_path, "-s", "s", "-"],
        input=source,
        capture_output=True,
        text=True,
        timeout=self.config.timeout_seconds,
      )
    except FileNotFoundError as e:
      raise ScriptCreationFailed(f"{self.config.osascript_path} not found (requires macOS)") from e
    except subprocess.TimeoutExpired as e:
      log.warning("AppleScript timed out after %ss", self.config.timeout_seconds)
      raise ScriptExecutionFailed(
        f"AppleScript timed out after {self.config.timeout_seconds:g}s",
        TIMEOUT_ERROR_CODE,
      ) from e


def _error_from_stderr(stderr: str) -> ScriptCreationFailed | ScriptExecutionFailed:
  text = stderr.strip()
  m = _ERROR_RE.match(text)
  if not m:
    log.warning("AppleScript failed: %s", text or "(no output)")
    return ScriptExecutionFailed(text or "Unknown AppleScript error", UNKNOWN_ERROR_CODE)

  message = m.group("message") or "Unknown AppleScript error"
  if m.group("kind") == "syntax":
    log.warning("AppleScript did not compile: %s", message)
    return ScriptCreationFailed(message)

  code = int(m.group("code"))
  log.warning("AppleScript error (%d): %s", code, message)
  return ScriptExecutionFailed(message, code)


def _summary(source: str) -> str:
  lines = [line.strip() for line in source.splitlines() if line.strip()]
  # The first line is always the tell block, the second names the operation.
  return " | ".join(lines[:2])
