"""
Draft tool handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..api import draft_api
from ..helpers import ErrorCategory, ToolResult, format_result

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner

CATEGORY = ErrorCategory.DRAFT


async def list_drafts(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=format_result(await draft_api.list_drafts(runner, args["account_name"])))


async def create_draft(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await draft_api.create_draft(runner, args["to"], args["subject"], args["body"]))


HANDLERS = {
  "list_drafts": list_drafts,
  "create_draft": create_draft,
}
