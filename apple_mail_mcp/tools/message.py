"""
Message reading tools (7 tools).
"""

from __future__ import annotations

from mcp.types import Tool

from ._schema import ACCOUNT, integer, message_params, obj, string

message_tools: list[Tool] = [
  Tool(
    name="list_emails",
    description="List emails in a mailbox",
    inputSchema=obj(
      {
        "mailbox": string("Mailbox name (e.g., 'INBOX')"),
        "account_name": ACCOUNT,
        "limit": integer("Maximum number of emails to return (default: 50)"),
      },
      ["mailbox", "account_name"],
    ),
  ),
  Tool(
    name="get_email",
    description="Get full content of a specific email",
    inputSchema=obj(message_params(), ["id", "mailbox", "account_name"]),
  ),
  Tool(
    name="search_emails",
    description="Search emails by subject",
    inputSchema=obj(
      {
        "query": string("Search query"),
        "mailbox": string("Mailbox to search in"),
        "account_name": ACCOUNT,
        "limit": integer("Maximum results (default: 20)"),
      },
      ["query", "mailbox", "account_name"],
    ),
  ),
  Tool(
    name="get_email_headers",
    description="Get all headers of an email",
    inputSchema=obj(message_params(), ["id", "mailbox", "account_name"]),
  ),
  Tool(
    name="get_email_source",
    description="Get the raw source of an email",
    inputSchema=obj(message_params(), ["id", "mailbox", "account_name"]),
  ),
  Tool(
    name="get_email_metadata",
    description="Get email metadata (was forwarded, replied, redirected, size)",
    inputSchema=obj(message_params(), ["id", "mailbox", "account_name"]),
  ),
  Tool(
    name="list_vip_senders",
    description="List VIP senders",
    inputSchema=obj({}),
  ),
]
