"""File-based JSON storage for conversation history.

A history file is a plain JSON array of message objects, written and read
verbatim with no version field::

    [
      {"role": "system", "content": "You are a helpful assistant."},
      {"role": "user", "content": "Hello"},
      {"role": "assistant", "content": "Hi! How can I help?"}
    ]

Parent directories are never created and files are not locked.
"""

import json
import logging
from pathlib import Path

from ..errors import ParsingError
from ..models.chat import ChatMessage

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def dumps_history(history: list) -> str:
    """Serialize a list of ChatMessage to the history JSON text."""
    return json.dumps([m.to_dict() for m in history], ensure_ascii=False, indent=2)


def loads_history(text: str) -> list[ChatMessage]:
    """Parse history JSON text into a list of ChatMessage.

    Raises:
        ParsingError: If the text is not JSON or not an array of messages.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParsingError(f"History is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise ParsingError("History JSON must be an array of messages")
    return [ChatMessage.from_dict(item) for item in data]


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------

def read_history(path: str | Path) -> list[ChatMessage]:
    """Load a history file written by ``write_history``.

    Raises:
        ParsingError: If the file does not exist or its content is malformed.
        OSError: If the file exists but cannot be read.
    """
    path = Path(path)
    if not path.exists():
        raise ParsingError(f"Conversation history JSON file does not exist: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParsingError(f"History file is not valid UTF-8: {path}") from exc
    history = loads_history(text)
    logger.info("Restored %d messages from %s", len(history), path)
    return history


def write_history(path: str | Path, history: list) -> None:
    """Write history to ``path``, replacing any existing file.

    The old file is unlinked before the new one is created; this is not an
    atomic rename.
    """
    path = Path(path)
    if path.exists():
        path.unlink()
    path.write_text(dumps_history(history), encoding="utf-8")
    logger.info("Saved %d messages to %s", len(history), path)
