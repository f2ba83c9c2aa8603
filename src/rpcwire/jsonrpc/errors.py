"""JSON-RPC Errors

This module provides everything related to failures in the codec:

1. `ErrorObject`, the structured error carried by a Response
2. `RpcErrorLike`, the capability any error value can implement to control
   how it shows up on the wire
3. `normalize`, which turns any error value into an `ErrorObject`
4. The exception hierarchy raised while decoding malformed input

Malformed input always raises a `CodecError`. Every `CodecError` is a
`JsonRpcException` carrying a protocol error code, so a server can answer
it with an error response without any translation:

    ```python
    try:
        req = Request.decode(body)
    except CodecError as e:
        reply = Response.failure(NULL_ID, e)
    ```
"""

import logging
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from pydantic import ValidationError

from . import _payload
from .messages import (
    JSONRPC_INTERNAL_ERROR,
    JSONRPC_INVALID_PARAMS,
    JSONRPC_INVALID_REQUEST,
    JSONRPC_PARSE_ERROR,
    JSONRPC_SERVER_ERROR,
    JsonRpcError,
)

logger = logging.getLogger(__name__)

E = TypeVar("E")


@runtime_checkable
class RpcErrorLike(Protocol):
    """Capability of errors that know their own JSON-RPC representation.

    Any object exposing these three attributes is copied verbatim by
    `normalize`. Exceptions raised by method handlers should implement it
    when they want a specific code or structured data in the response.

    Example:
        ```python
        class QuotaExceeded(Exception):
            code = -32010

            @property
            def message(self) -> str:
                return str(self)

            @property
            def data(self):
                return {"retryAfter": 30}
        ```
    """

    code: int
    message: str
    data: Any


@dataclass(frozen=True)
class ErrorObject(Generic[E]):
    """A JSON-RPC error object.

    The zero value (`code == 0` and an empty message) is the "no error"
    sentinel: a Response holding it encodes a `result` instead of an `error`.

    Args:
        code (int): The JSON-RPC error code
        message (str): A short description of the error
        data (E | None): Optional additional error information
    """

    code: int = 0
    message: str = ""
    data: E | None = None

    def __str__(self) -> str:
        return self.message

    def as_message(self) -> str:
        return self.message

    @property
    def is_empty(self) -> bool:
        return is_empty(self)

    def to_dict(self) -> JsonRpcError:
        """Convert to the wire representation.

        `data` is omitted when None. Exception data (see `normalize`) is
        rendered as its text, exceptions not being JSON values.
        """
        if self.data is None:
            return JsonRpcError(code=self.code, message=self.message)
        if isinstance(self.data, BaseException):
            data = str(self.data)
        else:
            data = _payload.dump(self.data)
        return JsonRpcError(code=self.code, message=self.message, data=data)

    @staticmethod
    def decode(raw: Any, data_type: Any = Any) -> "ErrorObject":
        """Decode the value of an `error` member.

        Args:
            raw (Any): The parsed JSON value
            data_type (Any): Type the `data` member is validated against

        Returns:
            ErrorObject: The decoded error

        Raises:
            InvalidMessageShape: If the value isn't a valid error object
        """
        try:
            err = _payload.validate(JsonRpcError, raw, strict=True)
            data = _payload.validate(data_type, err["data"]) if "data" in err else None
        except ValidationError as e:
            raise InvalidMessageShape(
                "invalid error object", data=_payload.error_details(e)
            ) from e
        return ErrorObject(code=err["code"], message=err["message"], data=data)


EMPTY_ERROR: ErrorObject[Any] = ErrorObject()
"""The "no error" sentinel."""


def is_empty(err: ErrorObject) -> bool:
    """True iff `err` is the "no error" sentinel."""
    return err.code == 0 and err.message == ""


def new_error(code: int, message: str, data: E | None = None) -> ErrorObject[E]:
    return ErrorObject(code=code, message=message, data=data)


def normalize(err: BaseException | RpcErrorLike) -> ErrorObject:
    """Convert any error value into an `ErrorObject`.

    Values implementing `RpcErrorLike` keep their code, message and data.
    Anything else is reported as a generic server error whose message is the
    error text and whose data is the error itself.

    Args:
        err (BaseException | RpcErrorLike): The error to convert

    Returns:
        ErrorObject: The structured error
    """
    if isinstance(err, ErrorObject):
        return err
    if isinstance(err, RpcErrorLike):
        return ErrorObject(code=err.code, message=err.message, data=err.data)
    logger.debug(
        "Wrapping unstructured error", extra={"errorType": type(err).__name__}
    )
    return ErrorObject(code=JSONRPC_SERVER_ERROR, message=str(err), data=err)


class JsonRpcException(Exception):
    """Exception raised for JSON-RPC specific errors.

    This exception class represents JSON-RPC protocol errors and can be
    converted to and from JSON-RPC error objects. It implements
    `RpcErrorLike`, so `normalize` keeps its code and data.

    Args:
        message (str): A human-readable error description
        code (int): The JSON-RPC error code (see messages.py for standard codes)
        data (Any): Optional additional error data

    Example:
        ```python
        try:
            resp = Response.decode(body)
        except JsonRpcException as e:
            print(f"RPC error {e.code}: {e}")
        ```
    """

    def __init__(self, message: str, code: int, data: Any = None):
        super(JsonRpcException, self).__init__(message)
        self.code = code
        self.data = data

    @property
    def message(self) -> str:
        return str(self)

    def to_err(self) -> ErrorObject:
        """Convert the exception to a JSON-RPC error object.

        Returns:
            ErrorObject: The error object for the JSON-RPC response
        """
        return ErrorObject(code=self.code, message=str(self), data=self.data)

    @staticmethod
    def from_error(err: ErrorObject) -> "JsonRpcException":
        """Create an exception from a JSON-RPC error object.

        Args:
            err (ErrorObject): The error object from a JSON-RPC response

        Returns:
            JsonRpcException: The corresponding exception
        """
        return JsonRpcException(err.message, err.code, err.data)


class CodecError(JsonRpcException, ValueError):
    """Base class of all malformed-input errors."""

    default_code = JSONRPC_INVALID_REQUEST

    def __init__(self, message: str, data: Any = None):
        super(CodecError, self).__init__(message, self.default_code, data)


class ParseError(CodecError):
    default_code = JSONRPC_PARSE_ERROR


class InvalidIdType(CodecError):
    """The id member is neither a string, an integer nor null."""


class InvalidVersion(CodecError):
    """The jsonrpc member is missing or isn't "2.0"."""


class InvalidMessageShape(CodecError):
    """The message matches none of the request, notification or response shapes."""


class MissingMethod(CodecError):
    pass


class MissingResultOrError(CodecError):
    pass


class InvalidParams(CodecError):
    default_code = JSONRPC_INVALID_PARAMS


class InvalidResult(CodecError):
    default_code = JSONRPC_INTERNAL_ERROR


class UnsupportedIdentifierTag(TypeError):
    """An Identifier holds a value outside of the string/integer/null union.

    This can only happen through a bug in the codec, never through input.
    """
