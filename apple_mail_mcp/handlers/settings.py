"""
Signature, SMTP server, address and application tool handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..api import settings_api
from ..helpers import ErrorCategory, ToolResult, format_result

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner

CATEGORY = ErrorCategory.SETTINGS


async def list_signatures(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=format_result(await settings_api.list_signatures(runner)))


async def get_signature(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=format_result(await settings_api.get_signature(runner, args["name"])))


async def list_smtp_servers(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=format_result(await settings_api.list_smtp_servers(runner)))


async def extract_name_from_address(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await settings_api.extract_name_from_address(runner, args["address"]))


async def extract_address(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=await settings_api.extract_address(runner, args["address"]))


async def get_mail_app_info(runner: ScriptRunner, args: dict[str, Any]) -> ToolResult:
  return ToolResult(content=format_result(await settings_api.get_mail_app_info(runner)))


HANDLERS = {
  "list_signatures": list_signatures,
  "get_signature": get_signature,
  "list_smtp_servers": list_smtp_servers,
  "extract_name_from_address": extract_name_from_address,
  "extract_address": extract_address,
  "get_mail_app_info": get_mail_app_info,
}
