"""
Entry point for the Apple Mail MCP server.

Run with: python -m apple_mail_mcp               (MCP stdio mode)
          python -m apple_mail_mcp --list-tools  (print the tool catalog as JSON)
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys


def _print_tools() -> None:
  from .tools import ALL_TOOLS

  catalog = [tool.model_dump(mode="json", exclude_none=True) for tool in ALL_TOOLS]
  print(json.dumps(catalog, indent=2))


def main() -> None:
  from .config import load_config

  try:
    config = load_config()
  except ValueError as e:
    print(str(e), file=sys.stderr)
    sys.exit(2)

  # stdout carries the MCP protocol, so logs go to stderr.
  logging.basicConfig(
    level=config.log_level,
    format="[%(name)s] %(levelname)s: %(message)s",
    stream=sys.stderr,
  )

  if "--list-tools" in sys.argv[1:]:
    _print_tools()
    return

  from .server import run_server

  try:
    asyncio.run(run_server(config))
  except KeyboardInterrupt:
    pass


if __name__ == "__main__":
  main()
