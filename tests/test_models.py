"""Tests for the wire models: ChatMessage and CompletionResponse."""

import pytest

from chatgpt_client.errors import ParsingError
from chatgpt_client.models.chat import (
    ChatMessage,
    CompletionRequest,
    CompletionResponse,
    Role,
)
from conftest import completion_body


# ---------------------------------------------------------------------------
# ChatMessage
# ---------------------------------------------------------------------------


class TestChatMessage:
    def test_to_dict_uses_lowercase_role(self):
        assert ChatMessage.user("Hello").to_dict() == {"role": "user", "content": "Hello"}

    def test_from_dict_parses_role(self):
        msg = ChatMessage.from_dict({"role": "assistant", "content": "Hi"})
        assert msg.role is Role.ASSISTANT
        assert msg.content == "Hi"

    def test_is_immutable(self):
        msg = ChatMessage.system("x")
        with pytest.raises(AttributeError):
            msg.content = "y"

    def test_unknown_role_raises_parsing_error(self):
        with pytest.raises(ParsingError, match="Unknown message role"):
            ChatMessage.from_dict({"role": "tool", "content": "x"})

    def test_missing_content_raises_parsing_error(self):
        with pytest.raises(ParsingError):
            ChatMessage.from_dict({"role": "user"})

    def test_non_string_content_raises_parsing_error(self):
        with pytest.raises(ParsingError):
            ChatMessage.from_dict({"role": "user", "content": 42})

    def test_non_object_raises_parsing_error(self):
        with pytest.raises(ParsingError):
            ChatMessage.from_dict(["user", "Hello"])


# ---------------------------------------------------------------------------
# CompletionRequest
# ---------------------------------------------------------------------------


class TestCompletionRequest:
    def test_to_dict_shape(self):
        request = CompletionRequest(
            model="gpt-3.5-turbo",
            messages=[ChatMessage.system("Be brief."), ChatMessage.user("2+2=?")],
        )
        assert request.to_dict() == {
            "model": "gpt-3.5-turbo",
            "messages": [
                {"role": "system", "content": "Be brief."},
                {"role": "user", "content": "2+2=?"},
            ],
        }


# ---------------------------------------------------------------------------
# CompletionResponse
# ---------------------------------------------------------------------------


class TestCompletionResponse:
    def test_parses_openai_body(self):
        response = CompletionResponse.from_dict(completion_body("4"))
        assert response.first_message == ChatMessage.assistant("4")
        assert response.message_choices[0].finish_reason == "stop"
        assert response.usage.total_tokens == 21
        assert response.model == "gpt-3.5-turbo-0301"

    def test_accepts_message_choices_key(self):
        data = {"message_choices": [{"message": {"role": "assistant", "content": "ok"}}]}
        response = CompletionResponse.from_dict(data)
        assert response.first_message.content == "ok"
        assert response.usage is None

    def test_keeps_choice_order(self):
        data = completion_body("first")
        data["choices"].append(
            {"index": 1, "message": {"role": "assistant", "content": "second"}}
        )
        response = CompletionResponse.from_dict(data)
        assert [c.message.content for c in response.message_choices] == ["first", "second"]

    def test_missing_choices_raises_parsing_error(self):
        with pytest.raises(ParsingError, match="choices"):
            CompletionResponse.from_dict({"error": {"message": "nope"}})

    def test_choice_without_message_raises_parsing_error(self):
        with pytest.raises(ParsingError):
            CompletionResponse.from_dict({"choices": [{"index": 0}]})

    def test_first_message_of_empty_response_raises(self):
        with pytest.raises(ParsingError, match="no message choices"):
            CompletionResponse.from_dict({"choices": []}).first_message
