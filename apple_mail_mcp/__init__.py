"""
Apple Mail MCP server: exposes Mail.app over the Model Context Protocol via AppleScript.
"""

__version__ = "0.1.0"
