"""Handler dispatch table: maps tool names to handler functions."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from ..errors import InvalidParameter
from ..helpers import ErrorCategory, ToolResult, log_and_format_error
from ..tools import TOOLS_BY_NAME
from ..validation import validate_arguments
from . import account, attachment, draft, flag, mailbox, message, rule, send, settings

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner

log = logging.getLogger("apple_mail.handlers")

Handler = Callable[["ScriptRunner", dict[str, Any]], Awaitable[ToolResult]]

DISPATCH: dict[str, Handler] = {}
CATEGORIES: dict[str, ErrorCategory] = {}

for mod in (account, mailbox, message, flag, send, draft, attachment, rule, settings):
  for name, fn in mod.HANDLERS.items():
    DISPATCH[name] = fn
    CATEGORIES[name] = mod.CATEGORY


async def dispatch_tool(name: str, arguments: dict[str, Any] | None, runner: ScriptRunner) -> ToolResult:
  """Validate arguments, run the tool's handler and wrap any failure as an error result."""
  try:
    tool = TOOLS_BY_NAME.get(name)
    handler = DISPATCH.get(name)
    if tool is None or handler is None:
      raise InvalidParameter(f"Unknown tool: {name}")

    args = validate_arguments(tool, arguments)
    log.debug("Calling %s with %s", name, sorted(args))
    return await handler(runner, args)
  except Exception as e:
    return log_and_format_error(name, e, CATEGORIES.get(name))
