"""JSON-RPC 2.0 Wire Shapes

This module defines the dictionaries that go over the wire for each kind of
JSON-RPC 2.0 message, together with the standard error codes.

The shapes are plain TypedDicts: they describe exactly which keys the encoder
emits and which ones are optional. The typed envelopes in envelope.py produce
these dictionaries from their `to_dict()` methods.

The JSON-RPC 2.0 specification defines four types of messages:
1. Request - A call to a method that requires a response
2. Notification - A request without an id, no response is sent back
3. Success Response - A response containing the result of a method call
4. Error Response - A response indicating an error occurred

References:
    JSON-RPC 2.0 Specification: https://www.jsonrpc.org/specification
"""

from typing import Any, Literal

from typing_extensions import NotRequired, TypedDict

JSONRPC_VERSION: Literal["2.0"] = "2.0"
"""The only protocol version accepted by the codec."""

JsonRpcId = str | int | None
"""Plain python value of an encoded identifier."""


class JsonRpcNotification(TypedDict):
    """A JSON-RPC notification message.

    Fields:
        jsonrpc: Must be exactly "2.0"
        method: The name of the method to be invoked
        params: Optional parameters, omitted when absent
    """

    jsonrpc: Literal["2.0"]
    method: str
    params: NotRequired[Any]


class JsonRpcRequest(TypedDict):
    """A JSON-RPC request message.

    Fields:
        jsonrpc: Must be exactly "2.0"
        id: Request identifier that will be echoed back in the response.
            Omitted for notifications.
        method: The name of the method to be invoked
        params: Optional parameters, omitted when absent
    """

    jsonrpc: Literal["2.0"]
    id: NotRequired[str | int]
    method: str
    params: NotRequired[Any]


class JsonRpcError(TypedDict):
    """A JSON-RPC error object.

    Fields:
        code: The error code (see error code constants below)
        message: A short description of the error
        data: Optional additional error information
    """

    code: int
    message: str
    data: NotRequired[Any]


class JsonRpcResult(TypedDict):
    """A JSON-RPC success response message.

    Fields:
        jsonrpc: Must be exactly "2.0"
        id: The id from the original request, omitted when it had none
        result: The result of the method call
    """

    jsonrpc: Literal["2.0"]
    id: NotRequired[str | int | None]
    result: Any


class JsonRpcErrorResponse(TypedDict):
    """A JSON-RPC error response message.

    Fields:
        jsonrpc: Must be exactly "2.0"
        id: The id from the original request, omitted when it couldn't be determined
        error: The error that occurred
    """

    jsonrpc: Literal["2.0"]
    id: NotRequired[str | int | None]
    error: JsonRpcError


# Standard JSON-RPC 2.0 error codes
JSONRPC_PARSE_ERROR = -32700
"""Invalid JSON was received by the server."""

JSONRPC_INVALID_REQUEST = -32600
"""The JSON sent is not a valid Request object."""

JSONRPC_METHOD_NOT_FOUND = -32601
"""The method does not exist / is not available."""

JSONRPC_INVALID_PARAMS = -32602
"""Invalid method parameter(s)."""

JSONRPC_INTERNAL_ERROR = -32603
"""Internal JSON-RPC error."""

JSONRPC_SERVER_ERROR = -32000
"""Generic implementation-defined server error, used for errors with no code of their own."""
