import json
from typing import Any, Dict, List, Optional, Sequence

import structlog
from anthropic import AsyncAnthropic
from openai import AsyncOpenAI

from .config import LLMConfig
from .errors import ConfigurationError
from .schema import ModelReply, TextPart, ToolCall, ToolDescriptor

log = structlog.get_logger("mcp_chat.llm")


def parse_anthropic(resp: Any) -> ModelReply:
    parts = []
    for block in resp.content:
        btype = getattr(block, "type", None)
        if btype == "text":
            parts.append(TextPart(block.text))
        elif btype == "tool_use":
            parts.append(ToolCall(name=block.name, arguments=dict(block.input or {}), id=block.id))
    return ModelReply(parts)


def parse_openai(resp: Any) -> ModelReply:
    msg = resp.choices[0].message
    parts = []
    if msg.content:
        parts.append(TextPart(msg.content))
    for tc in msg.tool_calls or []:
        # arguments arrive as a JSON string
        args = json.loads(tc.function.arguments or "{}")
        parts.append(ToolCall(name=tc.function.name, arguments=args, id=tc.id))
    return ModelReply(parts)


class LLM:
    """Async wrapper around the Anthropic Messages and OpenAI Chat Completions APIs."""

    def __init__(self, cfg: LLMConfig, client: Any = None):
        self.cfg = cfg
        self._client = client or self._make_client(cfg)

    @staticmethod
    def _make_client(cfg: LLMConfig):
        if cfg.provider == "anthropic":
            return AsyncAnthropic(api_key=cfg.api_key, max_retries=cfg.max_retries)
        if cfg.provider == "openai":
            return AsyncOpenAI(api_key=cfg.api_key, max_retries=cfg.max_retries)
        raise ConfigurationError(f"Unsupported LLM provider: {cfg.provider}")

    async def complete(
        self,
        messages: List[Dict[str, Any]],
        *,
        tools: Optional[Sequence[ToolDescriptor]] = None,
        system: Optional[str] = None,
    ) -> ModelReply:
        log.info(
            "llm.call",
            provider=self.cfg.provider,
            model=self.cfg.model,
            messages=len(messages),
            tools=len(tools or ()),
        )
        if self.cfg.provider == "openai":
            reply = await self._complete_openai(messages, tools, system)
        else:
            reply = await self._complete_anthropic(messages, tools, system)
        log.info("llm.reply", parts=len(reply.parts), tool_calls=len(reply.tool_calls))
        return reply

    async def _complete_anthropic(self, messages, tools, system) -> ModelReply:
        kwargs: Dict[str, Any] = {
            "model": self.cfg.model,
            "max_tokens": self.cfg.max_tokens,
            "messages": messages,
        }
        if system:
            kwargs["system"] = system
        if tools:
            kwargs["tools"] = [t.to_anthropic() for t in tools]
        resp = await self._client.messages.create(**kwargs)
        return parse_anthropic(resp)

    async def _complete_openai(self, messages, tools, system) -> ModelReply:
        msgs = ([{"role": "system", "content": system}] if system else []) + list(messages)
        kwargs: Dict[str, Any] = {
            "model": self.cfg.model,
            "max_tokens": self.cfg.max_tokens,
            "messages": msgs,
        }
        if tools:
            kwargs["tools"] = [t.to_openai() for t in tools]
        resp = await self._client.chat.completions.create(**kwargs)
        return parse_openai(resp)
