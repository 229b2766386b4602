"""
Mail rule tools (5 tools).
"""

from __future__ import annotations

from mcp.types import Tool

from ._schema import boolean, obj, string

rule_tools: list[Tool] = [
  Tool(
    name="list_rules",
    description="List all mail rules",
    inputSchema=obj({}),
  ),
  Tool(
    name="enable_rule",
    description="Enable or disable a mail rule",
    inputSchema=obj(
      {
        "name": string("Name of the rule"),
        "enabled": boolean("true=enable, false=disable"),
      },
      ["name", "enabled"],
    ),
  ),
  Tool(
    name="get_rule_details",
    description="Get detailed information about a mail rule",
    inputSchema=obj({"name": string("Name of the rule")}, ["name"]),
  ),
  Tool(
    name="create_rule",
    description="Create a new mail rule",
    inputSchema=obj(
      {
        "name": string("Name of the rule"),
        "conditions": {
          "type": "array",
          "description": (
            "Array of conditions with header (from, to, cc, to_or_cc, subject, any_recipient, content), "
            "qualifier (contains, does_not_contain, begins_with, ends_with, equals) and expression"
          ),
          "items": {
            "type": "object",
            "properties": {
              "header": {"type": "string"},
              "qualifier": {"type": "string"},
              "expression": {"type": "string"},
            },
          },
        },
        "actions": {
          "type": "object",
          "description": (
            "Actions: move_message (mailbox name, with optional account_name), "
            "mark_read, mark_flagged, delete_message (booleans)"
          ),
        },
      },
      ["name"],
    ),
  ),
  Tool(
    name="delete_rule",
    description="Delete a mail rule",
    inputSchema=obj({"name": string("Name of the rule to delete")}, ["name"]),
  ),
]
