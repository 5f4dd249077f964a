"""Wire models for the chat completions endpoint."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..errors import ParsingError


class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str

    def to_dict(self) -> dict:
        return {"role": self.role.value, "content": self.content}

    @classmethod
    def from_dict(cls, data: dict) -> "ChatMessage":
        if not isinstance(data, dict):
            raise ParsingError(f"Expected a message object, got {type(data).__name__}")
        try:
            role = Role(data["role"])
            content = data["content"]
        except KeyError as exc:
            raise ParsingError(f"Message is missing field {exc}") from exc
        except ValueError as exc:
            raise ParsingError(f"Unknown message role: {data['role']!r}") from exc
        if not isinstance(content, str):
            raise ParsingError("Message content must be a string")
        return cls(role=role, content=content)

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role=Role.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "ChatMessage":
        return cls(role=Role.ASSISTANT, content=content)


@dataclass
class CompletionRequest:
    model: str
    messages: list  # list[ChatMessage]

    def to_dict(self) -> dict:
        return {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
        }


@dataclass
class Usage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "Usage":
        return cls(
            prompt_tokens=data.get("prompt_tokens", 0),
            completion_tokens=data.get("completion_tokens", 0),
            total_tokens=data.get("total_tokens", 0),
        )


@dataclass
class MessageChoice:
    message: ChatMessage
    index: int = 0
    finish_reason: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "MessageChoice":
        if not isinstance(data, dict) or "message" not in data:
            raise ParsingError("Choice is missing field 'message'")
        return cls(
            message=ChatMessage.from_dict(data["message"]),
            index=data.get("index", 0),
            finish_reason=data.get("finish_reason"),
        )


@dataclass
class CompletionResponse:
    message_choices: list = field(default_factory=list)  # list[MessageChoice]
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    usage: Optional[Usage] = None

    @classmethod
    def from_dict(cls, data: dict) -> "CompletionResponse":
        """Build a response from the decoded JSON body.

        The OpenAI endpoint names the list ``choices``; ``message_choices`` is
        accepted as an alternative key.
        """
        if not isinstance(data, dict):
            raise ParsingError(f"Expected a response object, got {type(data).__name__}")
        choices = data.get("choices", data.get("message_choices"))
        if not isinstance(choices, list):
            raise ParsingError("Response is missing the 'choices' list")
        usage = data.get("usage")
        return cls(
            message_choices=[MessageChoice.from_dict(c) for c in choices],
            id=data.get("id", ""),
            object=data.get("object", ""),
            created=data.get("created", 0),
            model=data.get("model", ""),
            usage=Usage.from_dict(usage) if isinstance(usage, dict) else None,
        )

    @property
    def first_message(self) -> ChatMessage:
        """Message of the first choice, the reply a conversation keeps."""
        if not self.message_choices:
            raise ParsingError("Response contains no message choices")
        return self.message_choices[0].message
