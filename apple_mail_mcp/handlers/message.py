"""
Message reading tool handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..api import message_api
from ..helpers import ErrorCategory, ToolResult, format_result

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner

CATEGORY = ErrorCategory.MSG


def _message_args(args: dict[str, Any]) -> tuple[str, str, str]:
  return args["id"], args["mailbox"], args["account_name"]


async def list_emails(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  emails = await message_api.list_emails(runner, args["mailbox"], args["account_name"], args.get("limit"))
  return ToolResult(content=format_result(emails))


async def get_email(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  email = await message_api.get_email(runner, *_message_args(args))
  return ToolResult(content=format_result(email))


async def search_emails(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  results = await message_api.search_emails(
    runner,
    args["query"],
    args["mailbox"],
    args["account_name"],
    args.get("limit"),
  )
  return ToolResult(content=format_result(results))


async def get_email_headers(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await message_api.get_email_headers(runner, *_message_args(args)))


async def get_email_source(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await message_api.get_email_source(runner, *_message_args(args)))


async def get_email_metadata(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  metadata = await message_api.get_email_metadata(runner, *_message_args(args))
  return ToolResult(content=format_result(metadata))


async def list_vip_senders(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=format_result(await message_api.list_vip_senders(runner)))


HANDLERS = {
  "list_emails": list_emails,
  "get_email": get_email,
  "search_emails": search_emails,
  "get_email_headers": get_email_headers,
  "get_email_source": get_email_source,
  "get_email_metadata": get_email_metadata,
  "list_vip_senders": list_vip_senders,
}
