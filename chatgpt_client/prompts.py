"""Build the system message that opens a default conversation."""

from datetime import datetime

DEFAULT_DIRECTION = (
    "You are ChatGPT, an AI model developed by OpenAI. "
    "Answer as concisely as possible. Today is: {today}"
)


def build_default_direction(now: datetime | None = None) -> str:
    """Return the default system message stamped with the local date.

    Args:
        now: Moment to stamp into the message. Defaults to the current local
             time; pass a fixed value for deterministic output.
    """
    if now is None:
        now = datetime.now().astimezone()
    return DEFAULT_DIRECTION.format(today=now)
