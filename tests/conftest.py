"""Shared pytest fixtures."""

import json

import httpx
import pytest

from chatgpt_client.client import ChatGPT
from chatgpt_client.models.chat import ChatMessage

API_KEY = "sk-test-0123456789"


def completion_body(content: str = "Hi! How can I help?", role: str = "assistant") -> dict:
    """A chat completions response body in the OpenAI wire shape."""
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1677652288,
        "model": "gpt-3.5-turbo-0301",
        "choices": [
            {
                "index": 0,
                "message": {"role": role, "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 9, "completion_tokens": 12, "total_tokens": 21},
    }


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays a response."""

    def __init__(self, body=None, status_code: int = 200, error: Exception | None = None):
        self.body = completion_body() if body is None else body
        self.status_code = status_code
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def client(handler) -> ChatGPT:
    return ChatGPT(API_KEY, transport=httpx.MockTransport(handler))


@pytest.fixture
def sample_history() -> list[ChatMessage]:
    """A short exchange that starts with a system message."""
    return [
        ChatMessage.system("You are a helpful assistant."),
        ChatMessage.user("Hello"),
        ChatMessage.assistant("Hi! How can I help?"),
        ChatMessage.user("Wie spät ist es in Zürich?"),
    ]
