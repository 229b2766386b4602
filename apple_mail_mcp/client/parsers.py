"""
Parsing for osascript results.

The runner invokes osascript with `-s s`, so results come back in AppleScript
source form: `{"INBOX", "Sent"}`, `"text with \\"quotes\\""`, `42`, `true`,
`missing value`, `{name:"x", |id|:3}`, `date "Monday, 1 June 2026 at 10:00"`
or raw object specifiers such as `mailbox "INBOX" of account "Work"`.
"""

from __future__ import annotations

import logging
import re
from typing import Any

log = logging.getLogger("apple_mail.client.parsers")

ScriptValue = Any

_UNESCAPES = {"n": "\n", "r": "\r", "t": "\t", '"': '"', "\\": "\\"}
_NUMBER_RE = re.compile(r"^-?\d+(\.\d+)?([eE][+-]?\d+)?$")
_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_ ]*")


class ScriptOutputError(ValueError):
  pass


def unescape_applescript(text: str) -> str:
  """Inverse of `scripts.escape_applescript`."""
  out: list[str] = []
  i = 0
  while i < len(text):
    ch = text[i]
    if ch == "\\" and i + 1 < len(text) and text[i + 1] in _UNESCAPES:
      out.append(_UNESCAPES[text[i + 1]])
      i += 2
      continue
    out.append(ch)
    i += 1
  return "".join(out)


def parse_bool(text: str) -> bool:
  return text == "true"


def parse_int(text: str, default: int = 0) -> int:
  try:
    return int(text.strip())
  except ValueError:
    return default


# ---------------------------------------------------------------------------
# Source-form parser
# ---------------------------------------------------------------------------


class _Reader:
  def __init__(self, text: str) -> None:
    self.text = text
    self.pos = 0

  def peek(self) -> str:
    return self.text[self.pos] if self.pos < len(self.text) else ""

  def skip_ws(self) -> None:
    while self.pos < len(self.text) and self.text[self.pos] in " \t\r\n":
      self.pos += 1

  def expect(self, ch: str) -> None:
    self.skip_ws()
    if self.peek() != ch:
      raise ScriptOutputError(f"expected {ch!r} at {self.pos} in {self.text!r}")
    self.pos += 1

  def read_string(self) -> str:
    # Opening quote already checked by the caller.
    start = self.pos + 1
    i = start
    while i < len(self.text):
      ch = self.text[i]
      if ch == "\\":
        i += 2
        continue
      if ch == '"':
        self.pos = i + 1
        return unescape_applescript(self.text[start:i])
      i += 1
    raise ScriptOutputError(f"unterminated string in {self.text!r}")

  def read_raw(self) -> str:
    """Read an unquoted token up to the next top-level ',' or '}'."""
    start = self.pos
    depth = 0
    while self.pos < len(self.text):
      ch = self.text[self.pos]
      if ch == '"':
        self.read_string()
        continue
      if ch == "{":
        depth += 1
      elif ch == "}":
        if depth == 0:
          break
        depth -= 1
      elif ch == "," and depth == 0:
        break
      self.pos += 1
    return self.text[start : self.pos].strip()

  def read_value(self) -> ScriptValue:
    self.skip_ws()
    ch = self.peek()
    if ch == '"':
      return self.read_string()
    if ch == "{":
      return self.read_collection()
    return _scalar_from_raw(self.read_raw())

  def read_key(self) -> str | None:
    """Try to read a record key (`name:` or `|name|:`); rewind when absent."""
    self.skip_ws()
    start = self.pos
    if self.peek() == "|":
      end = self.text.find("|", self.pos + 1)
      if end < 0:
        return None
      key = self.text[self.pos + 1 : end]
      self.pos = end + 1
    else:
      m = _IDENT_RE.match(self.text, self.pos)
      if not m:
        return None
      key = m.group(0).strip()
      self.pos = m.end()
    self.skip_ws()
    if self.peek() == ":":
      self.pos += 1
      return key
    self.pos = start
    return None

  def read_collection(self) -> list[ScriptValue] | dict[str, ScriptValue]:
    self.expect("{")
    self.skip_ws()
    if self.peek() == "}":
      self.pos += 1
      return []

    items: list[ScriptValue] = []
    record: dict[str, ScriptValue] = {}
    is_record = False
    first = True
    while True:
      key = self.read_key()
      if first:
        is_record = key is not None
        first = False
      if is_record:
        if key is None:
          raise ScriptOutputError(f"mixed record/list in {self.text!r}")
        record[key] = self.read_value()
      else:
        items.append(self.read_value())
      self.skip_ws()
      ch = self.peek()
      if ch == ",":
        self.pos += 1
        continue
      if ch == "}":
        self.pos += 1
        break
      raise ScriptOutputError(f"unexpected {ch!r} at {self.pos} in {self.text!r}")
    return record if is_record else items


def _scalar_from_raw(raw: str) -> ScriptValue:
  if raw == "true":
    return True
  if raw == "false":
    return False
  if raw == "missing value":
    return None
  if _NUMBER_RE.match(raw):
    if "." in raw or "e" in raw or "E" in raw:
      return float(raw)
    return int(raw)
  if raw.startswith('date "') and raw.endswith('"'):
    return unescape_applescript(raw[6:-1])
  return raw


def parse_script_output(output: str) -> ScriptValue:
  """Parse one osascript `-s s` result. Empty output parses as None."""
  text = output[:-1] if output.endswith("\n") else output
  if not text.strip():
    return None
  reader = _Reader(text)
  value = reader.read_value()
  reader.skip_ws()
  if reader.pos < len(text):
    # Trailing text after a complete value: keep the whole thing as raw text.
    log.debug("Unparsed trailing output, keeping raw text: %r", text)
    return text.strip()
  return value


def as_text(value: ScriptValue) -> str:
  """Scalar view of a result, matching how Mail's text coercion reads."""
  if value is None or isinstance(value, (list, dict)):
    return ""
  if isinstance(value, bool):
    return "true" if value else "false"
  if isinstance(value, float) and value.is_integer():
    return str(int(value))
  return str(value)


def as_list(value: ScriptValue) -> list[str]:
  """List view of a result: one string per scalar item, order preserved."""
  if value is None:
    return []
  if isinstance(value, dict):
    return []
  if not isinstance(value, list):
    return [as_text(value)]
  return [as_text(item) for item in value if item is not None and not isinstance(item, (list, dict))]


def as_records(value: ScriptValue) -> list[dict[str, str]]:
  """Record-list view of a result: text values per record, non-records skipped."""
  if isinstance(value, dict):
    value = [value]
  if not isinstance(value, list):
    return []
  return [{key: as_text(item) for key, item in record.items()} for record in value if isinstance(record, dict)]
