"""
Draft tools (2 tools).
"""

from __future__ import annotations

from mcp.types import Tool

from ._schema import ACCOUNT, obj, string, string_array

draft_tools: list[Tool] = [
  Tool(
    name="list_drafts",
    description="List all draft emails",
    inputSchema=obj({"account_name": ACCOUNT}, ["account_name"]),
  ),
  Tool(
    name="create_draft",
    description="Create a new draft email",
    inputSchema=obj(
      {
        "to": string_array("Recipient email addresses"),
        "subject": string("Email subject"),
        "body": string("Email body content"),
      },
      ["to", "subject", "body"],
    ),
  ),
]
