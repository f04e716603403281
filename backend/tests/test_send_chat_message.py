"""
Tests for the SendChatMessage workflow.

Run with: pytest tests/test_send_chat_message.py -v
"""

import pytest
from conftest import USER_ID, run
from discoverzim.application.commands.chat import (
    ASSISTANT_FALLBACK,
    SendChatMessageCommand,
    SendChatMessageHandler,
)
from discoverzim.application.dto.chat import DEFAULT_CONVERSATION_TITLE
from discoverzim.domain.exceptions import AccessDeniedError, DomainValidationError
from discoverzim.infrastructure.functions import EdgeFunctionGateway
from discoverzim.infrastructure.persistence import ChatRepository


@pytest.fixture()
def handler(store):
    return SendChatMessageHandler(ChatRepository(store), EdgeFunctionGateway(store))


class TestSendChatMessage:
    def test_creates_conversation_lazily(self, handler, store):
        store.functions.responses["chat-assistant"] = {"message": "Try Victoria Falls!"}

        reply = run(handler.execute(SendChatMessageCommand(USER_ID, "Where should I go?")))

        assert reply.conversation.title == DEFAULT_CONVERSATION_TITLE
        assert reply.user_message.role == "user"
        assert reply.assistant_message.content == "Try Victoria Falls!"
        assert [m["role"] for m in store.rows("chat_messages")] == ["user", "assistant"]

    def test_sends_full_history_to_assistant(self, handler, store):
        store.functions.responses["chat-assistant"] = {"message": "Sure."}
        first = run(handler.execute(SendChatMessageCommand(USER_ID, "Hi")))

        run(handler.execute(SendChatMessageCommand(USER_ID, "And hotels?", first.conversation.id)))

        name, body = store.functions.calls[-1]
        assert name == "chat-assistant"
        assert body["messages"] == [
            {"role": "user", "content": "Hi"},
            {"role": "assistant", "content": "Sure."},
            {"role": "user", "content": "And hotels?"},
        ]

    def test_fallback_reply_when_assistant_fails(self, handler, store):
        store.functions.errors["chat-assistant"] = RuntimeError("function timed out")

        reply = run(handler.execute(SendChatMessageCommand(USER_ID, "Hello")))

        assert reply.assistant_message.content == ASSISTANT_FALLBACK

    def test_rejects_empty_message(self, handler):
        with pytest.raises(DomainValidationError):
            run(handler.execute(SendChatMessageCommand(USER_ID, "   ")))

    def test_rejects_someone_elses_conversation(self, handler, store):
        conversation = run(ChatRepository(store).create_conversation("someone-else"))

        with pytest.raises(AccessDeniedError):
            run(handler.execute(SendChatMessageCommand(USER_ID, "Hi", conversation.id)))
