"""A single conversation session and its message history."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from .models.chat import ChatMessage, CompletionResponse, Role
from .storage.json_store import write_history

if TYPE_CHECKING:
    from .client import ChatGPT

logger = logging.getLogger(__name__)


class Conversation:
    """Stores a single conversation session.

    ``history`` holds every message sent and received, normally starting with
    the opening system message. It only grows: a failed ``send_message``
    leaves the user turn in place without a reply.

    Not safe for concurrent ``send_message`` calls; the caller serializes them.
    """

    def __init__(
        self,
        client: "ChatGPT",
        first_message: str = "",
        history: Optional[list] = None,
    ) -> None:
        self._client = client
        if history is None:
            history = [ChatMessage.system(first_message)]
        self.history: list[ChatMessage] = history

    @classmethod
    def with_history(cls, client: "ChatGPT", history: list) -> "Conversation":
        """Build a conversation from a pre-initialized history.

        The history is taken as-is: it may be empty or start with a
        non-system message.
        """
        return cls(client, history=list(history))

    def __len__(self) -> int:
        return len(self.history)

    @property
    def last_reply(self) -> str | None:
        """Content of the most recent assistant message, if any."""
        for message in reversed(self.history):
            if message.role is Role.ASSISTANT:
                return message.content
        return None

    async def send_message(self, message: str) -> CompletionResponse:
        """Send ``message`` with the full history and record the reply.

        Raises:
            TransportError: On network failure or a non-2xx status.
            ParsingError: If the response cannot be parsed or has no choices.
        """
        self.history.append(ChatMessage.user(message))
        response = await self._client.send_history(self.history)
        self.history.append(response.first_message)
        logger.debug("Conversation now holds %d messages", len(self.history))
        return response

    def save_history_json(self, path: str | Path) -> None:
        """Save the history to a JSON file that ``ChatGPT.restore_conversation`` reads.

        An existing file at ``path`` is replaced.
        """
        write_history(path, self.history)
