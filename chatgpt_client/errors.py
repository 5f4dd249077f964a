"""Exception types raised by the chat client."""


class ChatGPTError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(ChatGPTError):
    """Invalid client configuration, e.g. an API key that is not a valid header value."""


class TransportError(ChatGPTError):
    """Network failure or non-2xx HTTP status from the completions endpoint."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParsingError(ChatGPTError):
    """A response body or history file did not match the expected JSON shape."""
