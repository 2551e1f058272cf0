import json

import pytest

from mcp_chat.orchestrator import Orchestrator, tool_trace
from mcp_chat.prompts import SYSTEM_PROMPT
from mcp_chat.schema import ToolCall
from tests.helpers import FakeLLM, FakeMCP, text_reply, tool_failure, tool_reply

pytestmark = pytest.mark.anyio


async def test_plain_text_reply_makes_one_model_call_and_no_tool_call() -> None:
    llm = FakeLLM([text_reply("just text")])
    mcp = FakeMCP()

    res = await Orchestrator(llm, mcp).process_query("hello")

    assert res.final_text == "just text"
    assert len(llm.calls) == 1
    assert mcp.calls == []
    assert res.used_tools == [] and res.errors == []


async def test_first_call_carries_prompt_tools_and_system() -> None:
    llm = FakeLLM([text_reply("ok")])
    mcp = FakeMCP()

    await Orchestrator(llm, mcp).process_query("a dragon who is afraid of the dark")

    first = llm.calls[0]
    assert first["system"] == SYSTEM_PROMPT
    assert first["tools"] is mcp.tools
    assert len(first["messages"]) == 1
    assert first["messages"][0]["role"] == "user"
    assert "a dragon who is afraid of the dark" in first["messages"][0]["content"]
    assert "JSONL" in first["messages"][0]["content"]


async def test_tool_request_runs_one_tool_then_one_tool_free_follow_up() -> None:
    people = json.dumps([{"fullName": "Ada Lovelace"}] * 3)
    call = ToolCall(name="generate_person", arguments={"count": 3}, id="toolu_1")
    llm = FakeLLM([tool_reply(call), text_reply("final script")])
    mcp = FakeMCP({"generate_person": people})

    res = await Orchestrator(llm, mcp).process_query("hello")

    assert mcp.calls == [call]
    assert len(llm.calls) == 2
    follow_up = llm.calls[1]
    assert follow_up["tools"] is None and follow_up["system"] is None
    assert [m["role"] for m in follow_up["messages"]] == ["user", "user"]
    assert follow_up["messages"][1]["content"] == people
    assert res.final_text.endswith("final script")
    assert res.used_tools == [call]


async def test_multiple_tool_requests_are_processed_in_order_on_one_transcript() -> None:
    first = ToolCall(name="generate_person", arguments={"count": 1})
    second = ToolCall(name="generate_company", arguments={"count": 2})
    llm = FakeLLM([
        tool_reply(first, second, preamble="Let me look up some characters."),
        text_reply("after person"),
        text_reply("after company"),
    ])
    mcp = FakeMCP({"generate_person": "[1]", "generate_company": "[2]"})

    res = await Orchestrator(llm, mcp).process_query("hello")

    assert [c.name for c in mcp.calls] == ["generate_person", "generate_company"]
    assert len(llm.calls) == 3
    assert len(llm.calls[1]["messages"]) == 2
    assert [m["content"] for m in llm.calls[2]["messages"][1:]] == ["[1]", "[2]"]
    assert res.final_text == "Let me look up some characters.\nafter person\nafter company"


async def test_tool_failure_is_reported_to_the_model_as_opaque_text() -> None:
    call = ToolCall(name="generate_person", arguments={"count": 500})
    llm = FakeLLM([tool_reply(call), text_reply("recovered")])
    mcp = FakeMCP({"generate_person": tool_failure("generate_person", "count must be <= 100")})

    res = await Orchestrator(llm, mcp).process_query("hello")

    fed_back = llm.calls[1]["messages"][-1]["content"]
    assert fed_back == "Tool 'generate_person' failed to return a result."
    assert "500" not in fed_back
    assert res.final_text == "recovered"
    assert res.errors == ["generate_person: count must be <= 100"]


async def test_model_errors_propagate() -> None:
    class BrokenLLM:
        async def complete(self, messages, *, tools=None, system=None):
            raise RuntimeError("api down")

    with pytest.raises(RuntimeError, match="api down"):
        await Orchestrator(BrokenLLM(), FakeMCP()).process_query("hello")


async def test_each_query_starts_a_fresh_transcript() -> None:
    llm = FakeLLM([text_reply("one"), text_reply("two")])
    orch = Orchestrator(llm, FakeMCP())

    await orch.process_query("first")
    await orch.process_query("second")

    assert len(llm.calls[1]["messages"]) == 1
    assert "second" in llm.calls[1]["messages"][0]["content"]


def test_tool_trace_format() -> None:
    call = ToolCall(name="generate_person", arguments={"count": 3})
    assert tool_trace(call) == '[Calling tool generate_person with args {"count": 3}]'
