"""Classification of inbound JSON-RPC messages.

Every message posted to a session is sorted into one variant before it is
forwarded, so routing is explicit and unsupported methods can be answered
without touching the session.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from mcp import types
from pydantic import ValidationError

JSONRPC_VERSION = "2.0"

# JSON-RPC error code used for missing or unknown sessions
SESSION_ERROR_CODE = -32000
BAD_SESSION_MESSAGE = "Bad Request: No valid session ID provided"
INVALID_SESSION_TEXT = "Invalid or missing session ID"

LIFECYCLE_METHODS = frozenset({"initialize", "ping"})
OPERATION_METHODS = frozenset({"tools/list", "tools/call"})
RESOURCE_METHODS = frozenset(
    {"resources/list", "resources/templates/list", "resources/read"}
)

RequestId = str | int


@dataclass(frozen=True)
class LifecycleMessage:
    """initialize or ping."""

    method: str
    request_id: RequestId
    params: dict[str, Any] | None = None


@dataclass(frozen=True)
class OperationCall:
    """tools/list or tools/call."""

    method: str
    request_id: RequestId
    tool: str | None = None


@dataclass(frozen=True)
class ResourceRead:
    """resources/list, resources/templates/list or resources/read."""

    method: str
    request_id: RequestId
    uri: str | None = None


@dataclass(frozen=True)
class ClientNotification:
    method: str


@dataclass(frozen=True)
class ClientReply:
    """Response or error answering a server-initiated request."""

    request_id: RequestId


@dataclass(frozen=True)
class UnsupportedRequest:
    method: str
    request_id: RequestId


@dataclass(frozen=True)
class MalformedMessage:
    reason: str


InboundMessage = (
    LifecycleMessage
    | OperationCall
    | ResourceRead
    | ClientNotification
    | ClientReply
    | UnsupportedRequest
    | MalformedMessage
)


def decode_body(body: bytes) -> Any:
    """Decode a request body, returning None when it is not JSON."""
    if not body:
        return None
    try:
        return json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None


def classify_message(payload: Any) -> InboundMessage:
    """Sort one decoded JSON-RPC message into its variant."""
    try:
        message = types.JSONRPCMessage.model_validate(payload).root
    except ValidationError as e:
        return MalformedMessage(reason=str(e))

    if isinstance(message, types.JSONRPCRequest):
        params = message.params or {}
        if message.method in LIFECYCLE_METHODS:
            return LifecycleMessage(
                method=message.method,
                request_id=message.id,
                params=message.params,
            )
        if message.method in OPERATION_METHODS:
            return OperationCall(
                method=message.method,
                request_id=message.id,
                tool=params.get("name"),
            )
        if message.method in RESOURCE_METHODS:
            return ResourceRead(
                method=message.method,
                request_id=message.id,
                uri=params.get("uri"),
            )
        return UnsupportedRequest(method=message.method, request_id=message.id)

    if isinstance(message, types.JSONRPCNotification):
        return ClientNotification(method=message.method)

    return ClientReply(request_id=message.id)


def is_initialize_request(payload: Any) -> bool:
    """True for a single, well-formed ``initialize`` request."""
    if isinstance(payload, list):
        return False
    message = classify_message(payload)
    if not isinstance(message, LifecycleMessage):
        return False
    if message.method != "initialize":
        return False
    try:
        types.InitializeRequestParams.model_validate(message.params or {})
    except ValidationError:
        return False
    return True


def method_not_found(message: UnsupportedRequest) -> dict[str, Any]:
    """JSON-RPC error body for a method no session handles."""
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": message.request_id,
        "error": {
            "code": types.METHOD_NOT_FOUND,
            "message": f"Method not found: {message.method}",
        },
    }


def bad_session_error() -> dict[str, Any]:
    """JSON-RPC error body for a POST without a usable session."""
    return {
        "jsonrpc": JSONRPC_VERSION,
        "error": {"code": SESSION_ERROR_CODE, "message": BAD_SESSION_MESSAGE},
        "id": None,
    }
