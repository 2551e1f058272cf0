import asyncio, sys
from typing import Awaitable, Callable, List, Optional

import anyio
import structlog
from rich.console import Console
from rich.markup import escape

from .config import load_config
from .errors import ConfigurationError, ServerConnectionError, TransportError
from .llm import LLM
from .logsetup import setup_logging
from .mcp_client import MCPClient
from .orchestrator import Orchestrator, tool_trace

log = structlog.get_logger("mcp_chat.cli")

USAGE = "Usage: mcp-chat <path_to_server_script>"
BANNER = "\nMCP Client Started!\nType your queries or 'quit' to exit."


async def _read_stdin() -> str:
    return await anyio.to_thread.run_sync(input, "\nQuery: ")


async def chat_loop(orch, cons: Console, read_line: Optional[Callable[[], Awaitable[str]]] = None):
    """Read queries until ``quit`` (any case) or EOF and print each result.

    A failed query is reported and the loop carries on; a TransportError
    means the server is gone and is re-raised.
    """
    read_line = read_line or _read_stdin
    cons.print(BANNER)
    while True:
        try:
            q = (await read_line()).strip()
        except EOFError:
            break
        if not q:
            continue
        if q.lower() == "quit":
            break
        try:
            res = await orch.process_query(q)
        except TransportError:
            raise
        except Exception as e:
            log.error("query.failed", error=repr(e))
            cons.print(f"[red]Error:[/red] {escape(repr(e))}")
            continue
        for call in res.used_tools:
            cons.print(tool_trace(call), style="dim", markup=False)
        cons.print("\n" + res.final_text, markup=False)
        if res.errors:
            cons.print(f"[red]Errors:[/red] {escape(str(res.errors))}")


async def main(argv: Optional[List[str]] = None, cons: Optional[Console] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    cons = cons or Console()
    if not argv:
        cons.print(USAGE)
        return 0

    try:
        cfg = load_config()
    except ConfigurationError as e:
        cons.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        return 1
    setup_logging(cfg.log.level, cfg.log.fmt)

    llm = LLM(cfg.llm)
    try:
        async with MCPClient(cfg.mcp) as mcp:
            tools = await mcp.connect(argv[0])
            cons.print("Connected to server with tools:", [t.name for t in tools])
            await chat_loop(Orchestrator(llm, mcp), cons)
    except ServerConnectionError as e:
        cons.print(f"[red]Failed to connect to MCP server:[/red] {escape(str(e))}")
        return 1
    except TransportError as e:
        log.error("transport.closed", error=repr(e))
        cons.print(f"[red]Connection to MCP server lost:[/red] {escape(str(e))}")
        return 1
    return 0


def run():
    try:
        code = asyncio.run(main())
    except KeyboardInterrupt:
        code = 0
    sys.exit(code)


if __name__ == "__main__":
    run()
