"""Configuration loaded from environment variables."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError

logger = logging.getLogger(__name__)

load_dotenv()

DEFAULT_MODEL = "gpt-3.5-turbo"
COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    # Bearer token sent on every request.
    api_key: str = ""

    # Model name placed in every completion request body.
    model: str = DEFAULT_MODEL

    # Fixed chat completions endpoint; override only for compatible proxies.
    completions_url: str = COMPLETIONS_URL

    # History file used by the CLI for restore-on-start and save-after-turn.
    history_file: Optional[Path] = None

    # Custom opening system message for new conversations. Empty means the
    # dated default message.
    system_message: str = ""

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        history_file = os.getenv("CHAT_HISTORY_FILE", "")
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if log_level not in LOG_LEVELS:
            logger.warning(
                "Unknown LOG_LEVEL %r, falling back to INFO (choose one of %s)",
                log_level,
                ", ".join(LOG_LEVELS),
            )
            log_level = "INFO"
        config = cls(
            api_key=os.getenv("OPENAI_API_KEY", ""),
            model=os.getenv("OPENAI_MODEL", DEFAULT_MODEL),
            completions_url=os.getenv("OPENAI_COMPLETIONS_URL", COMPLETIONS_URL),
            history_file=Path(history_file) if history_file else None,
            system_message=os.getenv("CHAT_SYSTEM_MESSAGE", ""),
            log_level=log_level,
        )
        logger.debug("Loaded config: model=%s url=%s", config.model, config.completions_url)
        return config

    def require_api_key(self) -> str:
        """Return the API key or raise ConfigError when it is unset."""
        if not self.api_key:
            raise ConfigError(
                "OPENAI_API_KEY is not set. Export it or add it to a .env file."
            )
        return self.api_key
