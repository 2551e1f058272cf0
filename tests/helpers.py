from __future__ import annotations

from typing import Any, Dict, List, Optional

from mcp_chat.errors import ToolInvocationError
from mcp_chat.schema import ModelReply, TextPart, ToolCall, ToolDescriptor, ToolResult


class FakeLLM:
    """Scripted stand-in for mcp_chat.llm.LLM; records every call."""

    def __init__(self, replies: List[ModelReply]):
        self.replies = list(replies)
        self.calls: List[Dict[str, Any]] = []

    async def complete(self, messages, *, tools=None, system=None) -> ModelReply:
        self.calls.append({"messages": list(messages), "tools": tools, "system": system})
        return self.replies.pop(0)


class FakeMCP:
    """Scripted stand-in for mcp_chat.mcp_client.MCPClient."""

    def __init__(self, results: Optional[Dict[str, Any]] = None):
        self.tools = [
            ToolDescriptor(
                name="generate_person",
                description="Generate fake person data",
                input_schema={"type": "object", "properties": {"count": {"type": "integer"}}},
            )
        ]
        self.results = results or {}
        self.calls: List[ToolCall] = []

    async def call_tool(self, call: ToolCall) -> ToolResult:
        self.calls.append(call)
        outcome = self.results.get(call.name, "[]")
        if isinstance(outcome, Exception):
            raise outcome
        return ToolResult(content=outcome)


def text_reply(text: str) -> ModelReply:
    return ModelReply([TextPart(text)])


def tool_reply(*calls: ToolCall, preamble: Optional[str] = None) -> ModelReply:
    parts = [TextPart(preamble)] if preamble else []
    return ModelReply(parts + list(calls))


def tool_failure(name: str, message: str = "boom") -> ToolInvocationError:
    return ToolInvocationError(name, message)
