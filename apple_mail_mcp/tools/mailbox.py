"""
Mailbox tools (6 tools).
"""

from __future__ import annotations

from mcp.types import Tool

from ._schema import obj, string

mailbox_tools: list[Tool] = [
  Tool(
    name="list_mailboxes",
    description="List all mailboxes (folders) for an account",
    inputSchema=obj(
      {"account_name": string("The name of the mail account (optional, lists all if omitted)")},
    ),
  ),
  Tool(
    name="create_mailbox",
    description="Create a new mailbox (folder) in an account",
    inputSchema=obj(
      {
        "name": string("Name of the new mailbox"),
        "account_name": string("The account to create the mailbox in"),
      },
      ["name", "account_name"],
    ),
  ),
  Tool(
    name="delete_mailbox",
    description="Delete a mailbox (folder) from an account",
    inputSchema=obj(
      {
        "name": string("Name of the mailbox to delete"),
        "account_name": string("The account containing the mailbox"),
      },
      ["name", "account_name"],
    ),
  ),
  Tool(
    name="get_unread_count",
    description="Get the number of unread emails",
    inputSchema=obj(
      {
        "mailbox": string("Mailbox name (optional)"),
        "account_name": string("Account name (optional)"),
      },
    ),
  ),
  Tool(
    name="get_special_mailboxes",
    description="Get special mailbox names (inbox, drafts, sent, trash, junk, outbox)",
    inputSchema=obj({}),
  ),
  Tool(
    name="import_mailbox",
    description="Import a mailbox from a file",
    inputSchema=obj({"path": string("Path to the mailbox file to import")}, ["path"]),
  ),
]
