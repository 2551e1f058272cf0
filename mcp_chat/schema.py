from dataclasses import dataclass, field
from typing import Any, Literal, List, Dict, Optional, Union

Role = Literal["user", "assistant", "system"]


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    input_schema: Dict[str, Any]

    def to_anthropic(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description, "input_schema": self.input_schema}

    def to_openai(self) -> Dict[str, Any]:
        return {
            "type": "function",
            "function": {"name": self.name, "description": self.description, "parameters": self.input_schema},
        }


@dataclass
class Message:
    role: Role
    content: str

    def to_param(self) -> Dict[str, Any]:
        return {"role": self.role, "content": self.content}


@dataclass
class ToolCall:
    name: str
    arguments: Dict[str, Any] = field(default_factory=dict)
    id: Optional[str] = None     # vendor call id, when the API supplies one


@dataclass
class TextPart:
    text: str


ReplyPart = Union[TextPart, ToolCall]


@dataclass
class ModelReply:
    parts: List[ReplyPart] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(p.text for p in self.parts if isinstance(p, TextPart))

    @property
    def tool_calls(self) -> List[ToolCall]:
        return [p for p in self.parts if isinstance(p, ToolCall)]


@dataclass
class ToolResult:
    content: str


@dataclass
class QueryResult:
    final_text: str
    used_tools: List[ToolCall] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
