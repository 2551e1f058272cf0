"""Command-line chat client that routes hosted-model tool calls to an MCP server."""

__version__ = "1.0.0"
