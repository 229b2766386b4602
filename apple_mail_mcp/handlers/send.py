"""
Compose/send tool handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..api import send_api
from ..helpers import ErrorCategory, ToolResult

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner

CATEGORY = ErrorCategory.SEND


async def compose_email(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  result = await send_api.compose_email(
    runner,
    args["to"],
    args["subject"],
    args["body"],
    cc=args.get("cc"),
    bcc=args.get("bcc"),
  )
  return ToolResult(content=result)


async def reply_email(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  result = await send_api.reply_email(
    runner,
    args["id"],
    args["mailbox"],
    args["account_name"],
    args["body"],
    reply_all=args.get("reply_all", False),
  )
  return ToolResult(content=result)


async def forward_email(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  result = await send_api.forward_email(
    runner,
    args["id"],
    args["mailbox"],
    args["account_name"],
    args["to"],
    body=args.get("body"),
  )
  return ToolResult(content=result)


async def redirect_email(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  result = await send_api.redirect_email(runner, args["id"], args["mailbox"], args["account_name"], args["to"])
  return ToolResult(content=result)


async def open_mailto(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await send_api.open_mailto(runner, args["url"]))


HANDLERS = {
  "compose_email": compose_email,
  "reply_email": reply_email,
  "forward_email": forward_email,
  "redirect_email": redirect_email,
  "open_mailto": open_mailto,
}
