"""
Mail rule tool handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..api import rule_api
from ..errors import InvalidParameter
from ..helpers import ErrorCategory, ToolResult, format_result

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner

CATEGORY = ErrorCategory.RULE


async def list_rules(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=format_result(await rule_api.list_rules(runner)))


async def enable_rule(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await rule_api.enable_rule(runner, args["name"], args["enabled"]))


async def get_rule_details(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=format_result(await rule_api.get_rule_details(runner, args["name"])))


async def create_rule(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  conditions = args.get("conditions") or []
  if any(not isinstance(c, dict) for c in conditions):
    raise InvalidParameter("conditions must be objects with header, qualifier, expression")
  result = await rule_api.create_rule(runner, args["name"], conditions, args.get("actions"))
  return ToolResult(content=result)


async def delete_rule(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await rule_api.delete_rule(runner, args["name"]))


HANDLERS = {
  "list_rules": list_rules,
  "enable_rule": enable_rule,
  "get_rule_details": get_rule_details,
  "create_rule": create_rule,
  "delete_rule": delete_rule,
}
