"""
Mailbox tool handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..api import mailbox_api
from ..helpers import ErrorCategory, ToolResult, format_result

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner

CATEGORY = ErrorCategory.MAILBOX


async def list_mailboxes(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  mailboxes = await mailbox_api.list_mailboxes(runner, args.get("account_name"))
  return ToolResult(content=format_result(mailboxes))


async def create_mailbox(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await mailbox_api.create_mailbox(runner, args["name"], args["account_name"]))


async def delete_mailbox(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await mailbox_api.delete_mailbox(runner, args["name"], args["account_name"]))


async def get_unread_count(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  count = await mailbox_api.get_unread_count(runner, args.get("mailbox"), args.get("account_name"))
  return ToolResult(content=f"Unread count: {count}")


async def get_special_mailboxes(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=format_result(await mailbox_api.get_special_mailboxes(runner)))


async def import_mailbox(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await mailbox_api.import_mailbox(runner, args["path"]))


HANDLERS = {
  "list_mailboxes": list_mailboxes,
  "create_mailbox": create_mailbox,
  "delete_mailbox": delete_mailbox,
  "get_unread_count": get_unread_count,
  "get_special_mailboxes": get_special_mailboxes,
  "import_mailbox": import_mailbox,
}
