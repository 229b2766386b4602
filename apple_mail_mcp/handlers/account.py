"""
Account tool handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..api import account_api
from ..helpers import ErrorCategory, ToolResult, format_result

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner

CATEGORY = ErrorCategory.ACCOUNT


async def list_accounts(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=format_result(await account_api.list_accounts(runner)))


async def get_account_info(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  info = await account_api.get_account_info(runner, args["account_name"])
  return ToolResult(content=format_result(info))


async def check_for_new_mail(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await account_api.check_for_new_mail(runner, args.get("account_name")))


async def synchronize_account(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await account_api.synchronize_account(runner, args["account_name"]))


HANDLERS = {
  "list_accounts": list_accounts,
  "get_account_info": get_account_info,
  "check_for_new_mail": check_for_new_mail,
  "synchronize_account": synchronize_account,
}
