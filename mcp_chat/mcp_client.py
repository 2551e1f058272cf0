# mcp_chat/mcp_client.py
import os
import sys
from contextlib import AsyncExitStack
from typing import Any, List, Optional

import anyio
import structlog
from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client
from mcp.shared.exceptions import McpError
from mcp.types import CONNECTION_CLOSED, Implementation

from .config import MCPConfig
from .errors import ServerConnectionError, ToolInvocationError, TransportError
from .schema import ToolCall, ToolDescriptor, ToolResult

log = structlog.get_logger("mcp_chat.mcp")

_CLOSED = (anyio.ClosedResourceError, anyio.BrokenResourceError, anyio.EndOfStream)


def interpreter_for(server_path: str, platform: Optional[str] = None) -> str:
    """Pick the interpreter that runs a server script, by extension and platform."""
    platform = platform or sys.platform
    if server_path.endswith(".py"):
        return "python" if platform == "win32" else "python3"
    if server_path.endswith(".js"):
        return "node"
    raise ServerConnectionError("Server script must be a .js or .py file")


def _text_of(content: List[Any]) -> str:
    return "\n".join(c.text for c in content if getattr(c, "type", None) == "text")


class MCPClient:
    """Owns one MCP stdio server subprocess and the session on top of it.

    Use as ``async with MCPClient() as mcp: await mcp.connect(path)``; the
    session and the subprocess are torn down on every exit path.
    """

    def __init__(self, cfg: Optional[MCPConfig] = None):
        self.cfg = cfg or MCPConfig()
        self.session: Optional[ClientSession] = None
        self.tools: List[ToolDescriptor] = []
        self._stack: Optional[AsyncExitStack] = None

    async def __aenter__(self) -> "MCPClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.cleanup()

    async def connect(self, server_path: str) -> List[ToolDescriptor]:
        try:
            command = interpreter_for(server_path)
            params = StdioServerParameters(
                command=command,
                args=[server_path],
                env=dict(os.environ) if self.cfg.inherit_env else None,
            )
            log.info("mcp.connect", command=command, server=server_path)

            self._stack = AsyncExitStack()
            read, write = await self._stack.enter_async_context(stdio_client(params))
            session = await self._stack.enter_async_context(
                ClientSession(
                    read,
                    write,
                    client_info=Implementation(name=self.cfg.client_name, version=self.cfg.client_version),
                )
            )
            await session.initialize()
            self.session = session
            await self.refresh_tools()
        except Exception as e:
            log.error("mcp.connect_failed", server=server_path, error=repr(e))
            await self.cleanup()
            if isinstance(e, ServerConnectionError):
                raise
            raise ServerConnectionError(f"Failed to connect to MCP server {server_path}: {e}") from e
        return self.tools

    async def refresh_tools(self) -> List[ToolDescriptor]:
        if self.session is None:
            raise TransportError("MCP session not connected")
        result = await self.session.list_tools()
        self.tools = [
            ToolDescriptor(name=t.name, description=t.description or "", input_schema=t.inputSchema)
            for t in result.tools
        ]
        log.info("mcp.tools", tools=[t.name for t in self.tools])
        return self.tools

    async def call_tool(self, call: ToolCall) -> ToolResult:
        if self.session is None:
            raise TransportError("MCP session not connected")
        log.info("mcp.call_tool", tool=call.name, arguments=call.arguments)
        try:
            result = await self.session.call_tool(call.name, call.arguments)
        except McpError as e:
            if e.error.code == CONNECTION_CLOSED:
                raise TransportError(f"MCP connection closed during {call.name}") from e
            raise ToolInvocationError(call.name, e.error.message) from e
        except _CLOSED as e:
            raise TransportError(f"MCP process exited / pipe closed during {call.name}") from e

        text = _text_of(result.content)
        if result.isError:
            log.warning("mcp.tool_error", tool=call.name, error=text)
            raise ToolInvocationError(call.name, text or "tool reported an error")
        return ToolResult(content=text)

    async def cleanup(self) -> None:
        stack, self._stack = self._stack, None
        self.session = None
        if stack is None:
            return
        try:
            await stack.aclose()
        except Exception as e:
            log.warning("mcp.cleanup_error", error=repr(e))
        else:
            log.info("mcp.closed")
