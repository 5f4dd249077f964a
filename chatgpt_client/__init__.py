"""Client for the OpenAI chat completions API with persistent conversations."""

from .client import ChatGPT
from .config import Config
from .conversation import Conversation
from .errors import ChatGPTError, ConfigError, ParsingError, TransportError
from .models.chat import (
    ChatMessage,
    CompletionRequest,
    CompletionResponse,
    MessageChoice,
    Role,
    Usage,
)

__all__ = [
    "ChatGPT",
    "ChatGPTError",
    "ChatMessage",
    "CompletionRequest",
    "CompletionResponse",
    "Config",
    "ConfigError",
    "Conversation",
    "MessageChoice",
    "ParsingError",
    "Role",
    "TransportError",
    "Usage",
]
