"""
Attachment tool handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..api import attachment_api
from ..helpers import ErrorCategory, ToolResult, format_result

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner

CATEGORY = ErrorCategory.ATTACH


async def list_attachments(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  attachments = await attachment_api.list_attachments(runner, args["id"], args["mailbox"], args["account_name"])
  return ToolResult(content=format_result(attachments))


async def save_attachment(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  result = await attachment_api.save_attachment(
    runner,
    args["id"],
    args["mailbox"],
    args["account_name"],
    args["attachment_name"],
    args["save_path"],
  )
  return ToolResult(content=result)


HANDLERS = {
  "list_attachments": list_attachments,
  "save_attachment": save_attachment,
}
