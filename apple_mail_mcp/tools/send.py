"""
Compose/send tools (5 tools).
"""

from __future__ import annotations

from mcp.types import Tool

from ._schema import ACCOUNT, MAILBOX, boolean, obj, string, string_array

send_tools: list[Tool] = [
  Tool(
    name="compose_email",
    description="Compose and send a new email",
    inputSchema=obj(
      {
        "to": string_array("Recipient email addresses"),
        "subject": string("Email subject"),
        "body": string("Email body content"),
        "cc": string_array("CC recipients (optional)"),
        "bcc": string_array("BCC recipients (optional)"),
      },
      ["to", "subject", "body"],
    ),
  ),
  Tool(
    name="reply_email",
    description="Reply to an email",
    inputSchema=obj(
      {
        "id": string("The email ID to reply to"),
        "mailbox": MAILBOX,
        "account_name": ACCOUNT,
        "body": string("Reply content"),
        "reply_all": boolean("Reply to all recipients (default: false)"),
      },
      ["id", "mailbox", "account_name", "body"],
    ),
  ),
  Tool(
    name="forward_email",
    description="Forward an email",
    inputSchema=obj(
      {
        "id": string("The email ID to forward"),
        "mailbox": MAILBOX,
        "account_name": ACCOUNT,
        "to": string_array("Recipients to forward to"),
        "body": string("Optional message to add"),
      },
      ["id", "mailbox", "account_name", "to"],
    ),
  ),
  Tool(
    name="redirect_email",
    description="Redirect an email (keeps original sender, different from forward)",
    inputSchema=obj(
      {
        "id": string("The email ID"),
        "mailbox": MAILBOX,
        "account_name": ACCOUNT,
        "to": string_array("Recipients to redirect to"),
      },
      ["id", "mailbox", "account_name", "to"],
    ),
  ),
  Tool(
    name="open_mailto",
    description="Open a mailto URL to compose an email",
    inputSchema=obj(
      {"url": string("mailto URL (e.g., 'mailto:test@example.com?subject=Hello')")},
      ["url"],
    ),
  ),
]
