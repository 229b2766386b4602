"""
MCP server for Apple Mail.

Uses the official `mcp` Python SDK. Handles tools/list and tools/call over
stdio; every call goes through the dispatcher, which serializes AppleScript
execution on the shared runner.
"""

from __future__ import annotations

import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from .client.script_runner import ScriptRunner
from .config import BridgeConfig
from .handlers import dispatch_tool
from .tools import ALL_TOOLS

log = logging.getLogger("apple_mail.server")

SERVER_NAME = "apple-mail-mcp"


def create_mcp_server(runner: ScriptRunner) -> Server:
  """Create and configure the MCP server with all tool handlers."""
  server = Server(SERVER_NAME)

  @server.list_tools()
  async def list_tools() -> list[Tool]:
    return ALL_TOOLS

  # Argument checks happen in the dispatcher so failures come back as tool errors.
  @server.call_tool(validate_input=False)
  async def call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
    result = await dispatch_tool(name, arguments or {}, runner)
    return CallToolResult(
      content=[TextContent(type="text", text=result.content)],
      isError=result.is_error,
    )

  return server


async def run_server(config: BridgeConfig | None = None) -> None:
  """Run the MCP server on stdio."""
  runner = ScriptRunner(config)
  server = create_mcp_server(runner)
  log.info("Starting %s with %d tools (application: %s)", SERVER_NAME, len(ALL_TOOLS), runner.config.application)
  async with stdio_server() as (read_stream, write_stream):
    await server.run(read_stream, write_stream, server.create_initialization_options())
  log.info("%s stopped", SERVER_NAME)
