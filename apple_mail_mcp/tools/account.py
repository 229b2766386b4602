"""
Account tools (4 tools).
"""

from __future__ import annotations

from mcp.types import Tool

from ._schema import obj, string

account_tools: list[Tool] = [
  Tool(
    name="list_accounts",
    description="List all mail accounts configured in Apple Mail",
    inputSchema=obj({}),
  ),
  Tool(
    name="get_account_info",
    description="Get detailed information about a specific mail account",
    inputSchema=obj(
      {"account_name": string("The name of the mail account")},
      ["account_name"],
    ),
  ),
  Tool(
    name="check_for_new_mail",
    description="Trigger a check for new email",
    inputSchema=obj({"account_name": string("Account to check (optional, checks all if omitted)")}),
  ),
  Tool(
    name="synchronize_account",
    description="Synchronize an IMAP account with the server",
    inputSchema=obj({"account_name": string("Account to synchronize")}, ["account_name"]),
  ),
]
