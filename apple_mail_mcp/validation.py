"""
Argument coercion and validation against a tool's input schema.

Runs once at the dispatch boundary, before any AppleScript is built. Each
declared JSON-Schema type has one coercer; a coercer returns MISSING when
the value cannot be used as that type.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from .errors import InvalidParameter

if TYPE_CHECKING:
  from mcp.types import Tool


class _Missing:
  def __repr__(self) -> str:
    return "MISSING"


MISSING: Any = _Missing()

_INT_RE = re.compile(r"^[+-]?\d+$")


def coerce_string(value: Any) -> str:
  if isinstance(value, str):
    return value
  return MISSING


def coerce_integer(value: Any) -> int:
  if isinstance(value, bool):
    return MISSING
  if isinstance(value, int):
    return value
  if isinstance(value, float) and value.is_integer():
    return int(value)
  if isinstance(value, str) and _INT_RE.match(value.strip()):
    return int(value.strip())
  return MISSING


def coerce_boolean(value: Any) -> bool:
  if isinstance(value, bool):
    return value
  if value in ("true", "false"):
    return value == "true"
  return MISSING


def coerce_string_array(value: Any) -> list[str]:
  """Keep only the string elements; anything else is dropped."""
  if not isinstance(value, (list, tuple)):
    return MISSING
  return [item for item in value if isinstance(item, str)]


def coerce_object(value: Any) -> dict[str, Any]:
  if isinstance(value, dict):
    return value
  return MISSING


def coerce_any_array(value: Any) -> list[Any]:
  if isinstance(value, (list, tuple)):
    return list(value)
  return MISSING


COERCERS: dict[str, Callable[[Any], Any]] = {
  "string": coerce_string,
  "integer": coerce_integer,
  "boolean": coerce_boolean,
  "object": coerce_object,
}


def _coercer_for(prop: dict[str, Any]) -> Callable[[Any], Any]:
  kind = prop.get("type")
  if kind == "array":
    items = prop.get("items") or {}
    # Arrays of objects (rule conditions) are passed through for the api layer to check.
    if items.get("type") == "object":
      return coerce_any_array
    return coerce_string_array
  coercer = COERCERS.get(kind)
  if coercer is None:
    raise ValueError(f"Unsupported schema type: {kind!r}")
  return coercer


def required_message(required: list[str]) -> str:
  """'a is required', 'a and b are required', 'a, b, and c are required'."""
  if len(required) == 1:
    return f"{required[0]} is required"
  if len(required) == 2:
    return f"{required[0]} and {required[1]} are required"
  return f"{', '.join(required[:-1])}, and {required[-1]} are required"


def validate_arguments(tool: Tool, arguments: dict[str, Any] | None) -> dict[str, Any]:
  """Coerce arguments to the tool's declared types.

  Returns only declared parameters that coerced successfully. Raises
  InvalidParameter listing the tool's required fields when any required
  value is missing or of the wrong type. Empty strings and lists are
  present values; names where emptiness is meaningless are checked by the
  api layer. Optional values that fail coercion are treated as absent.
  """
  args = arguments or {}
  schema = tool.inputSchema if isinstance(tool.inputSchema, dict) else {}
  properties: dict[str, Any] = schema.get("properties") or {}
  required: list[str] = list(schema.get("required") or [])

  coerced: dict[str, Any] = {}
  invalid: list[str] = []
  for name, prop in properties.items():
    raw = args.get(name)
    value = MISSING if raw is None else _coercer_for(prop)(raw)
    if name in required and value is MISSING:
      invalid.append(name)
      continue
    if value is not MISSING:
      coerced[name] = value

  if invalid:
    raise InvalidParameter(f"{required_message(required)} (missing or invalid: {', '.join(invalid)})")
  return coerced
