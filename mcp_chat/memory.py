from typing import Dict, List, Any
from .schema import Message


class Transcript:
    """Append-only message list for a single query; a new one is built per query."""

    def __init__(self):
        self.messages: List[Message] = []

    def add_user(self, text: str):
        self.messages.append(Message(role="user", content=text))

    def as_params(self) -> List[Dict[str, Any]]:
        return [m.to_param() for m in self.messages]