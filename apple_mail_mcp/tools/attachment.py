"""
Attachment tools (2 tools).
"""

from __future__ import annotations

from mcp.types import Tool

from ._schema import message_params, obj, string

attachment_tools: list[Tool] = [
  Tool(
    name="list_attachments",
    description="List attachments of an email",
    inputSchema=obj(message_params(), ["id", "mailbox", "account_name"]),
  ),
  Tool(
    name="save_attachment",
    description="Save an email attachment to disk",
    inputSchema=obj(
      message_params(
        attachment_name=string("Name of the attachment to save"),
        save_path=string("Full path where to save the file"),
      ),
      ["id", "mailbox", "account_name", "attachment_name", "save_path"],
    ),
  ),
]
