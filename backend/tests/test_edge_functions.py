"""
Tests for EdgeFunctionGateway.

Run with: pytest tests/test_edge_functions.py -v
"""

import logging

from conftest import run
from fakes import FakeStore
from discoverzim.infrastructure.functions import EdgeFunctionGateway


class TestAssistant:
    def test_returns_message(self):
        store = FakeStore()
        store.functions.responses["chat-assistant"] = {"message": "Mhoro!"}

        reply = run(EdgeFunctionGateway(store).ask_assistant([{"role": "user", "content": "Hi"}]))

        assert reply == "Mhoro!"
        assert store.functions.calls == [
            ("chat-assistant", {"messages": [{"role": "user", "content": "Hi"}]})
        ]

    def test_decodes_raw_json_bytes(self):
        store = FakeStore()
        store.functions.responses["chat-assistant"] = b'{"message": "Hello"}'

        assert run(EdgeFunctionGateway(store).ask_assistant([])) == "Hello"

    def test_missing_message_is_none(self):
        store = FakeStore()
        store.functions.responses["chat-assistant"] = {"error": "quota"}

        assert run(EdgeFunctionGateway(store).ask_assistant([])) is None

    def test_failure_is_logged_and_none(self, caplog):
        store = FakeStore()
        store.functions.errors["chat-assistant"] = RuntimeError("relay error")

        with caplog.at_level(logging.ERROR):
            assert run(EdgeFunctionGateway(store).ask_assistant([])) is None

        assert "relay error" in caplog.text


class TestMail:
    def test_custom_function_name(self):
        store = FakeStore()
        gateway = EdgeFunctionGateway(store, email_function="mailer")

        assert run(gateway.send_booking_confirmation({"id": "b-1"})) is True
        assert store.functions.calls == [
            ("mailer", {"templateType": "bookingConfirmation", "bookingData": {"id": "b-1"}})
        ]

    def test_failure_is_false(self):
        store = FakeStore()
        store.functions.errors["send-email"] = RuntimeError("smtp down")

        assert run(EdgeFunctionGateway(store).send_booking_confirmation({"id": "b"})) is False
