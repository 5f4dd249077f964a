"""Async client for the OpenAI chat completions endpoint."""

import copy
import logging
import re
from datetime import datetime
from pathlib import Path

import httpx

from .config import COMPLETIONS_URL, DEFAULT_MODEL, Config
from .conversation import Conversation
from .errors import ConfigError, ParsingError, TransportError
from .models.chat import ChatMessage, CompletionRequest, CompletionResponse
from .prompts import build_default_direction
from .storage.json_store import read_history

logger = logging.getLogger(__name__)

# Visible ASCII, space and horizontal tab.
_HEADER_VALUE_RE = re.compile(r"[\t\x20-\x7e]*")


class ChatGPT:
    """The client that operates the ChatGPT API.

    Holds only immutable transport configuration. ``clone()`` returns a
    handle that shares the same underlying ``httpx.AsyncClient``, so one
    client can serve any number of conversations.
    """

    def __init__(
        self,
        api_key: str,
        *,
        model: str = DEFAULT_MODEL,
        url: str = COMPLETIONS_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        authorization = f"Bearer {api_key}"
        if not _HEADER_VALUE_RE.fullmatch(authorization):
            raise ConfigError(
                "API key contains characters that are not allowed in an HTTP header value"
            )
        self._model = model
        self._url = url
        self._http = httpx.AsyncClient(
            headers={"Authorization": authorization},
            transport=transport,
            timeout=None,
        )

    @classmethod
    def from_config(cls, config: Config) -> "ChatGPT":
        return cls(
            config.require_api_key(),
            model=config.model,
            url=config.completions_url,
        )

    @property
    def model(self) -> str:
        return self._model

    @property
    def url(self) -> str:
        return self._url

    def clone(self) -> "ChatGPT":
        """Return a handle sharing this client's transport."""
        return copy.copy(self)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "ChatGPT":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Conversations
    # ------------------------------------------------------------------

    def new_conversation(self, now: datetime | None = None) -> Conversation:
        """Start a conversation opened by the dated default system message."""
        return self.new_conversation_directed(build_default_direction(now))

    def new_conversation_directed(self, direction_message: str) -> Conversation:
        """Start a conversation opened by a caller-supplied system message."""
        return Conversation(self.clone(), direction_message)

    def restore_conversation(self, path: str | Path) -> Conversation:
        """Restore a conversation saved with ``Conversation.save_history_json()``.

        Raises:
            ParsingError: If the file does not exist or is not a JSON array
                of messages.
            OSError: If the file cannot be read.
        """
        return Conversation.with_history(self.clone(), read_history(path))

    # ------------------------------------------------------------------
    # Completions
    # ------------------------------------------------------------------

    async def send_history(self, history: list) -> CompletionResponse:
        """Send the whole message history to the API.

        Most callers want a ``Conversation`` (see ``new_conversation()``),
        which keeps the history for them.

        Raises:
            TransportError: On network failure or a non-2xx status.
            ParsingError: If the body is not a completion response.
        """
        return await self._complete(CompletionRequest(model=self._model, messages=list(history)))

    async def send_simple_message(self, message: str) -> CompletionResponse:
        """Send a single user message without keeping any history."""
        return await self._complete(
            CompletionRequest(model=self._model, messages=[ChatMessage.user(message)])
        )

    async def _complete(self, request: CompletionRequest) -> CompletionResponse:
        logger.debug("POST %s (%d messages)", self._url, len(request.messages))
        try:
            response = await self._http.post(self._url, json=request.to_dict())
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("Completion request failed with HTTP %d", status)
            raise TransportError(
                f"Completion request failed with HTTP {status}", status_code=status
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Completion request failed: %s", exc)
            raise TransportError(f"Completion request failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise ParsingError(f"Completion response is not valid JSON: {exc}") from exc
        return CompletionResponse.from_dict(data)
