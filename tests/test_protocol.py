"""Tests for JSON-RPC message classification."""

import pytest

from codzilla_mcp.server.protocol import (
    SESSION_ERROR_CODE,
    ClientNotification,
    ClientReply,
    LifecycleMessage,
    MalformedMessage,
    OperationCall,
    ResourceRead,
    UnsupportedRequest,
    bad_session_error,
    classify_message,
    decode_body,
    is_initialize_request,
    method_not_found,
)

INITIALIZE = {
    "jsonrpc": "2.0",
    "id": 1,
    "method": "initialize",
    "params": {
        "protocolVersion": "2025-03-26",
        "capabilities": {},
        "clientInfo": {"name": "test", "version": "0.1"},
    },
}


def _request(method: str, params: dict | None = None, id_: int = 7) -> dict:
    message = {"jsonrpc": "2.0", "id": id_, "method": method}
    if params is not None:
        message["params"] = params
    return message


class TestDecodeBody:
    def test_json(self):
        assert decode_body(b'{"a": 1}') == {"a": 1}

    @pytest.mark.parametrize("body", [b"", b"not json", b"\xff\xfe"])
    def test_not_json(self, body: bytes):
        assert decode_body(body) is None


class TestClassifyMessage:
    def test_initialize(self):
        message = classify_message(INITIALIZE)
        assert isinstance(message, LifecycleMessage)
        assert message.method == "initialize"
        assert message.request_id == 1

    def test_ping(self):
        assert isinstance(classify_message(_request("ping")), LifecycleMessage)

    def test_tool_call(self):
        message = classify_message(
            _request("tools/call", {"name": "get_components"})
        )
        assert message == OperationCall(
            method="tools/call", request_id=7, tool="get_components"
        )

    def test_tool_list(self):
        message = classify_message(_request("tools/list"))
        assert isinstance(message, OperationCall)
        assert message.tool is None

    def test_resource_read(self):
        message = classify_message(
            _request("resources/read", {"uri": "components://all"})
        )
        assert message == ResourceRead(
            method="resources/read", request_id=7, uri="components://all"
        )

    def test_notification(self):
        message = classify_message(
            {"jsonrpc": "2.0", "method": "notifications/initialized"}
        )
        assert message == ClientNotification(
            method="notifications/initialized"
        )

    def test_reply(self):
        message = classify_message({"jsonrpc": "2.0", "id": 3, "result": {}})
        assert message == ClientReply(request_id=3)

    def test_unsupported(self):
        message = classify_message(_request("prompts/list"))
        assert message == UnsupportedRequest(
            method="prompts/list", request_id=7
        )

    @pytest.mark.parametrize(
        "payload", [None, [], {"hello": "world"}, {"jsonrpc": "1.0"}]
    )
    def test_malformed(self, payload):
        assert isinstance(classify_message(payload), MalformedMessage)


class TestIsInitializeRequest:
    def test_valid(self):
        assert is_initialize_request(INITIALIZE)

    def test_missing_params(self):
        assert not is_initialize_request(_request("initialize"))

    def test_other_method(self):
        assert not is_initialize_request(_request("tools/list"))

    def test_batch_is_not_initialize(self):
        assert not is_initialize_request([INITIALIZE])

    def test_not_json(self):
        assert not is_initialize_request(None)


class TestErrorBodies:
    def test_method_not_found_names_method(self):
        body = method_not_found(
            UnsupportedRequest(method="prompts/list", request_id="abc")
        )
        assert body["id"] == "abc"
        assert body["error"]["code"] == -32601
        assert body["error"]["message"] == "Method not found: prompts/list"

    def test_bad_session_error(self):
        assert bad_session_error() == {
            "jsonrpc": "2.0",
            "error": {
                "code": SESSION_ERROR_CODE,
                "message": "Bad Request: No valid session ID provided",
            },
            "id": None,
        }
