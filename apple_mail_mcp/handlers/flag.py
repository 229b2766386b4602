"""
Email action tool handlers (read/flag status, move, copy, delete, colors, junk).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..api import flag_api
from ..helpers import ErrorCategory, ToolResult

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner

CATEGORY = ErrorCategory.FLAG


def _message_args(args: dict[str, Any]) -> tuple[str, str, str]:
  return args["id"], args["mailbox"], args["account_name"]


async def mark_read(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await flag_api.mark_read(runner, *_message_args(args), args["read"]))


async def flag_email(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await flag_api.flag_email(runner, *_message_args(args), args["flagged"]))


async def move_email(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  result = await flag_api.move_email(
    runner,
    args["id"],
    args["from_mailbox"],
    args["to_mailbox"],
    args["account_name"],
  )
  return ToolResult(content=result)


async def copy_email(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  result = await flag_api.copy_email(
    runner,
    args["id"],
    args["from_mailbox"],
    args["to_mailbox"],
    args["account_name"],
  )
  return ToolResult(content=result)


async def delete_email(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await flag_api.delete_email(runner, *_message_args(args)))


async def set_flag_color(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await flag_api.set_flag_color(runner, *_message_args(args), args["color_index"]))


async def set_background_color(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await flag_api.set_background_color(runner, *_message_args(args), args["color"]))


async def mark_as_junk(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await flag_api.mark_as_junk(runner, *_message_args(args), args["is_junk"]))


HANDLERS = {
  "mark_read": mark_read,
  "flag_email": flag_email,
  "move_email": move_email,
  "copy_email": copy_email,
  "delete_email": delete_email,
  "set_flag_color": set_flag_color,
  "set_background_color": set_background_color,
  "mark_as_junk": mark_as_junk,
}
