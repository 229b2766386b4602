"""
Email action tools (8 tools).
"""

from __future__ import annotations

from mcp.types import Tool

from ._schema import ACCOUNT, EMAIL_ID, boolean, integer, message_params, obj, string

_MESSAGE_REQUIRED = ["id", "mailbox", "account_name"]

flag_tools: list[Tool] = [
  Tool(
    name="mark_read",
    description="Mark an email as read or unread",
    inputSchema=obj(
      message_params(read=boolean("true=read, false=unread")),
      [*_MESSAGE_REQUIRED, "read"],
    ),
  ),
  Tool(
    name="flag_email",
    description="Flag or unflag an email",
    inputSchema=obj(
      message_params(flagged=boolean("true=flag, false=unflag")),
      [*_MESSAGE_REQUIRED, "flagged"],
    ),
  ),
  Tool(
    name="move_email",
    description="Move an email to another mailbox",
    inputSchema=obj(
      {
        "id": EMAIL_ID,
        "from_mailbox": string("Source mailbox"),
        "to_mailbox": string("Destination mailbox"),
        "account_name": ACCOUNT,
      },
      ["id", "from_mailbox", "to_mailbox", "account_name"],
    ),
  ),
  Tool(
    name="copy_email",
    description="Copy an email to another mailbox",
    inputSchema=obj(
      {
        "id": EMAIL_ID,
        "from_mailbox": string("Source mailbox"),
        "to_mailbox": string("Destination mailbox"),
        "account_name": ACCOUNT,
      },
      ["id", "from_mailbox", "to_mailbox", "account_name"],
    ),
  ),
  Tool(
    name="delete_email",
    description="Delete an email (move to trash)",
    inputSchema=obj(message_params(), _MESSAGE_REQUIRED),
  ),
  Tool(
    name="set_flag_color",
    description=(
      "Set the flag color of an email "
      "(0=red, 1=orange, 2=yellow, 3=green, 4=blue, 5=purple, 6=gray, -1=clear)"
    ),
    inputSchema=obj(
      message_params(color_index=integer("Flag color index (0-6, or -1 to clear)")),
      [*_MESSAGE_REQUIRED, "color_index"],
    ),
  ),
  Tool(
    name="set_background_color",
    description="Set the background color of an email (blue, gray, green, none, orange, purple, red, yellow)",
    inputSchema=obj(
      message_params(color=string("Background color: blue, gray, green, none, orange, purple, red, yellow")),
      [*_MESSAGE_REQUIRED, "color"],
    ),
  ),
  Tool(
    name="mark_as_junk",
    description="Mark an email as junk or not junk",
    inputSchema=obj(
      message_params(is_junk=boolean("true=junk, false=not junk")),
      [*_MESSAGE_REQUIRED, "is_junk"],
    ),
  ),
]
