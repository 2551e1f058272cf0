from mcp_chat.cli import run

run()
