"""
Apple Mail tool definitions organized by domain.

Each module exports a list of Tool objects that are combined into ALL_TOOLS.
The catalog is built once at import time and never changes afterwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .account import account_tools
from .attachment import attachment_tools
from .draft import draft_tools
from .flag import flag_tools
from .mailbox import mailbox_tools
from .message import message_tools
from .rule import rule_tools
from .send import send_tools
from .settings import settings_tools

if TYPE_CHECKING:
  from mcp.types import Tool

ALL_TOOLS: list[Tool] = [
  *account_tools,
  *mailbox_tools,
  *message_tools,
  *flag_tools,
  *send_tools,
  *draft_tools,
  *attachment_tools,
  *rule_tools,
  *settings_tools,
]

TOOLS_BY_NAME: dict[str, Tool] = {tool.name: tool for tool in ALL_TOOLS}
