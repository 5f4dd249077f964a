from .chat import (
    ChatMessage,
    CompletionRequest,
    CompletionResponse,
    MessageChoice,
    Role,
    Usage,
)

__all__ = [
    "ChatMessage",
    "CompletionRequest",
    "CompletionResponse",
    "MessageChoice",
    "Role",
    "Usage",
]
