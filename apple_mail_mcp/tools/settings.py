"""
Signature, SMTP server, address and application tools (6 tools).
"""

from __future__ import annotations

from mcp.types import Tool

from ._schema import obj, string

settings_tools: list[Tool] = [
  Tool(
    name="list_signatures",
    description="List all email signatures",
    inputSchema=obj({}),
  ),
  Tool(
    name="get_signature",
    description="Get the content of a signature",
    inputSchema=obj({"name": string("Name of the signature")}, ["name"]),
  ),
  Tool(
    name="list_smtp_servers",
    description="List all SMTP servers",
    inputSchema=obj({}),
  ),
  Tool(
    name="extract_name_from_address",
    description="Extract the name from a full email address (e.g., 'John Doe <john@example.com>' -> 'John Doe')",
    inputSchema=obj({"address": string("Full email address")}, ["address"]),
  ),
  Tool(
    name="extract_address",
    description=(
      "Extract the email address from a full address string "
      "(e.g., 'John Doe <john@example.com>' -> 'john@example.com')"
    ),
    inputSchema=obj({"address": string("Full email address")}, ["address"]),
  ),
  Tool(
    name="get_mail_app_info",
    description="Get Mail application information (version, fetch interval, background activity)",
    inputSchema=obj({}),
  ),
]
