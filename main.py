#!/usr/bin/env python3
"""Interactive terminal chat against the OpenAI chat completions API.

Usage
-----
Put your key in a `.env` file (or export it), then run:

    python main.py [history.json]

When the history file exists the conversation is restored from it,
otherwise a new one is started. The history is saved after every answered
turn. Type `exit` or `quit` (or send EOF) to leave.

Environment variables:
  OPENAI_API_KEY          Required
  OPENAI_MODEL            Model name               (default: gpt-3.5-turbo)
  OPENAI_COMPLETIONS_URL  Completions endpoint     (default: OpenAI)
  CHAT_HISTORY_FILE       History file when no argument is given
  CHAT_SYSTEM_MESSAGE     Opening system message for new conversations
  LOG_LEVEL               Logging level            (default: INFO)
"""

import asyncio
import logging
import sys
from pathlib import Path

from chatgpt_client import ChatGPT, ChatGPTError, Config, Conversation

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {"exit", "quit"}


def open_conversation(client: ChatGPT, config: Config, history_file: Path | None) -> Conversation:
    """Restore the conversation from ``history_file`` or start a new one."""
    if history_file is not None and history_file.exists():
        return client.restore_conversation(history_file)
    if config.system_message:
        return client.new_conversation_directed(config.system_message)
    return client.new_conversation()


async def run_chat_loop(
    conversation: Conversation,
    history_file: Path | None,
    read_line=input,
    write=print,
) -> None:
    """Read user lines and print replies until EOF or an exit command."""
    while True:
        try:
            text = read_line("> ").strip()
        except EOFError:
            break
        if not text:
            continue
        if text.lower() in EXIT_COMMANDS:
            break

        try:
            await conversation.send_message(text)
        except ChatGPTError:
            logger.exception("Message could not be sent")
            continue

        write(conversation.last_reply)
        if history_file is not None:
            conversation.save_history_json(history_file)


async def amain(argv: list[str]) -> int:
    config = Config.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    history_file = Path(argv[0]) if argv else config.history_file

    try:
        client = ChatGPT.from_config(config)
    except ChatGPTError as exc:
        logger.error("%s", exc)
        return 1

    async with client:
        try:
            conversation = open_conversation(client, config, history_file)
        except (ChatGPTError, OSError) as exc:
            logger.error("Could not restore conversation: %s", exc)
            return 1
        logger.info("Model: %s", client.model)
        await run_chat_loop(conversation, history_file)
    return 0


def main() -> None:
    try:
        sys.exit(asyncio.run(amain(sys.argv[1:])))
    except KeyboardInterrupt:
        logger.info("Interrupted, stopping.")


if __name__ == "__main__":
    main()
