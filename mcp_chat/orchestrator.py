import json
from typing import List

import structlog

from .errors import ToolInvocationError
from .memory import Transcript
from .prompts import SYSTEM_PROMPT, build_query_prompt
from .schema import QueryResult, TextPart, ToolCall

log = structlog.get_logger("mcp_chat.orchestrator")


def tool_trace(call: ToolCall) -> str:
    return f"[Calling tool {call.name} with args {json.dumps(call.arguments)}]"


class Orchestrator:
    """Runs one query: model call, at most one round of tool calls, follow-up model calls.

    ``llm`` needs ``complete(messages, tools=..., system=...)`` returning a
    ModelReply; ``mcp`` needs ``tools`` and ``call_tool(ToolCall)``.
    """

    def __init__(self, llm, mcp, system_prompt: str = SYSTEM_PROMPT):
        self.llm = llm
        self.mcp = mcp
        self.system_prompt = system_prompt

    async def process_query(self, text: str) -> QueryResult:
        transcript = Transcript()
        transcript.add_user(build_query_prompt(text))

        reply = await self.llm.complete(
            transcript.as_params(),
            tools=self.mcp.tools,
            system=self.system_prompt,
        )

        final_text: List[str] = []
        used_tools: List[ToolCall] = []
        errors: List[str] = []

        for part in reply.parts:
            if isinstance(part, TextPart):
                final_text.append(part.text)
                continue

            used_tools.append(part)
            try:
                result = await self.mcp.call_tool(part)
                tool_text = result.content
            except ToolInvocationError as e:
                log.warning("query.tool_failed", tool=part.name, error=e.message)
                errors.append(str(e))
                tool_text = f"Tool '{part.name}' failed to return a result."

            transcript.add_user(tool_text)
            # follow-up is tool-free: one round of tool use per query
            follow_up = await self.llm.complete(transcript.as_params())
            final_text.append(follow_up.text)

        log.info("query.done", tool_calls=len(used_tools), errors=len(errors))
        return QueryResult(final_text="\n".join(final_text), used_tools=used_tools, errors=errors)
