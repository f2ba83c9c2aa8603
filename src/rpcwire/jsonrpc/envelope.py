"""JSON-RPC Requests and Responses

Typed envelopes for the two message types that go over the wire. Both are
generic over their payload so decoding can validate it:

    ```python
    req = Request.decode(body, params_type=dict[str, int])
    resp = Response.success(req.id, sum(req.params.values()))
    transport.send(resp.to_json())
    ```

Encoding follows the field omission rules of JSON-RPC 2.0: a request
without an id is a notification and has no `id` member, absent params are
omitted, and a response carries either a `result` or an `error`, never both.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from . import _payload
from .discriminator import classify, peek
from .errors import (
    EMPTY_ERROR,
    ErrorObject,
    InvalidMessageShape,
    InvalidParams,
    InvalidResult,
    MissingMethod,
    MissingResultOrError,
    RpcErrorLike,
    is_empty,
    normalize,
)
from .identifier import NULL_ID, Identifier
from .messages import (
    JSONRPC_VERSION,
    JsonRpcErrorResponse,
    JsonRpcNotification,
    JsonRpcRequest,
    JsonRpcResult,
)

logger = logging.getLogger(__name__)

P = TypeVar("P")
R = TypeVar("R")
E = TypeVar("E")


def _to_identifier(id: Any) -> Identifier:
    if isinstance(id, Identifier):
        return id
    return Identifier.decode(id)


def _dumps(obj: Any) -> str:
    return json.dumps(obj, separators=(",", ":"))


@dataclass(frozen=True)
class Request(Generic[P]):
    """A JSON-RPC request, or a notification when its id is absent.

    Args:
        method (str): The name of the method to be invoked
        params (P | None): The parameters, omitted from the message when None
        id (Identifier): The request id. Plain strings and integers are
            converted. Defaults to the absent id.

    Raises:
        MissingMethod: If `method` is empty
    """

    method: str
    params: P | None = None
    id: Identifier = NULL_ID

    def __post_init__(self):
        if not isinstance(self.method, str) or not self.method:
            raise MissingMethod("missing method")
        object.__setattr__(self, "id", _to_identifier(self.id))

    @staticmethod
    def call(id: Identifier | str | int, method: str, params: Any = None) -> "Request":
        return Request(method=method, params=params, id=_to_identifier(id))

    @staticmethod
    def notify(method: str, params: Any = None) -> "Request":
        return Request(method=method, params=params)

    @property
    def is_notification(self) -> bool:
        return self.id.is_absent()

    def to_dict(self) -> JsonRpcRequest | JsonRpcNotification:
        if self.id.is_absent():
            msg: JsonRpcRequest | JsonRpcNotification = JsonRpcNotification(
                jsonrpc=JSONRPC_VERSION, method=self.method
            )
        else:
            msg = JsonRpcRequest(
                jsonrpc=JSONRPC_VERSION, id=self.id.encode(), method=self.method
            )
        if self.params is not None:
            msg["params"] = _payload.dump(self.params)
        return msg

    def to_json(self) -> str:
        """Encode the request as compact JSON text.

        Raises:
            UnsupportedIdentifierTag: If the id holds an unsupported value
        """
        return _dumps(self.to_dict())

    @staticmethod
    def decode(data: str | bytes | Mapping[str, Any], params_type: Any = Any) -> "Request":
        """Decode a request or a notification.

        Args:
            data (str | bytes | Mapping[str, Any]): JSON text, or an already
                parsed JSON object
            params_type (Any): Type the params are validated against.
                Defaults to no validation.

        Returns:
            Request: The decoded request. Its id is absent for notifications.

        Raises:
            ParseError: If `data` isn't valid JSON
            InvalidVersion: If the `jsonrpc` member is missing or isn't "2.0"
            InvalidIdType: If the id isn't a string, an integer or null
            MissingMethod: If the method is missing, empty or not a string
            InvalidParams: If the params don't fit `params_type`
        """
        obj = peek(data)
        id = Identifier.decode(obj.get("id"))

        method = obj.get("method")
        if not isinstance(method, str) or not method:
            raise MissingMethod("missing method")

        params = obj.get("params")
        if params is not None:
            try:
                params = _payload.validate(params_type, params)
            except ValidationError as e:
                raise InvalidParams(
                    f"invalid params for {method}", data=_payload.error_details(e)
                ) from e

        logger.debug("Decoded request", extra={"jsonRpcMsg": obj})
        return Request(method=method, params=params, id=id)


@dataclass(frozen=True)
class Response(Generic[R, E]):
    """A JSON-RPC response.

    A response holding the empty error sentinel is a success response and
    encodes its `result`. Any other error makes it an error response.

    Args:
        id (Identifier): The id of the request being answered
        result (R | None): The result of the method call
        error (ErrorObject[E]): The error, `EMPTY_ERROR` for success

    Raises:
        ValueError: If both a result and an error are given
    """

    id: Identifier = NULL_ID
    result: R | None = None
    error: ErrorObject[E] = EMPTY_ERROR

    def __post_init__(self):
        object.__setattr__(self, "id", _to_identifier(self.id))
        if not is_empty(self.error) and self.result is not None:
            raise ValueError("A response can't carry both a result and an error")

    @staticmethod
    def success(id: Identifier | str | int | None, result: Any) -> "Response":
        return Response(id=_to_identifier(id), result=result)

    @staticmethod
    def failure(
        id: Identifier | str | int | None, err: BaseException | RpcErrorLike
    ) -> "Response":
        """Build an error response from any error value.

        The error goes through `normalize`, so exceptions without a JSON-RPC
        representation are reported as generic server errors.
        """
        return Response(id=_to_identifier(id), error=normalize(err))

    @property
    def is_error(self) -> bool:
        return not is_empty(self.error)

    def to_dict(self) -> JsonRpcResult | JsonRpcErrorResponse:
        msg: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION}
        if not self.id.is_absent():
            msg["id"] = self.id.encode()
        if self.is_error:
            msg["error"] = self.error.to_dict()
        else:
            msg["result"] = _payload.dump(self.result)
        return msg  # type: ignore[return-value]

    def to_json(self) -> str:
        """Encode the response as compact JSON text.

        Raises:
            UnsupportedIdentifierTag: If the id holds an unsupported value
        """
        return _dumps(self.to_dict())

    @staticmethod
    def decode(
        data: str | bytes | Mapping[str, Any],
        result_type: Any = Any,
        error_data_type: Any = Any,
    ) -> "Response":
        """Decode a success or an error response.

        Args:
            data (str | bytes | Mapping[str, Any]): JSON text, or an already
                parsed JSON object
            result_type (Any): Type the result is validated against
            error_data_type (Any): Type the error data is validated against

        Returns:
            Response: The decoded response. `result` is None for error
                responses, `error` is `EMPTY_ERROR` for success responses.

        Raises:
            ParseError: If `data` isn't valid JSON
            InvalidVersion: If the `jsonrpc` member is missing or isn't "2.0"
            InvalidIdType: If the id isn't a string, an integer or null
            InvalidMessageShape: If both a result and an error are present,
                or the error object is malformed
            MissingResultOrError: If neither a result nor an error is present
            InvalidResult: If the result doesn't fit `result_type`
        """
        obj = peek(data)
        id = Identifier.decode(obj.get("id"))

        if "result" in obj and "error" in obj:
            raise InvalidMessageShape("response has both a result and an error")

        if "error" in obj:
            error = ErrorObject.decode(obj["error"], error_data_type)
            if is_empty(error):
                raise InvalidMessageShape("error object must have a code or a message")
            logger.debug("Decoded error response", extra={"jsonRpcMsg": obj})
            return Response(id=id, error=error)

        if "result" in obj:
            try:
                result = _payload.validate(result_type, obj["result"])
            except ValidationError as e:
                raise InvalidResult(
                    "invalid result", data=_payload.error_details(e)
                ) from e
            logger.debug("Decoded result response", extra={"jsonRpcMsg": obj})
            return Response(id=id, result=result)

        raise MissingResultOrError("missing result or error")


def decode_message(
    data: str | bytes | Mapping[str, Any],
    params_type: Any = Any,
    result_type: Any = Any,
    error_data_type: Any = Any,
) -> Request | Response:
    """Classify a message and decode it into the matching envelope.

    The JSON text is parsed only once.

    Args:
        data (str | bytes | Mapping[str, Any]): JSON text, or an already
            parsed JSON object
        params_type (Any): Type request params are validated against
        result_type (Any): Type response results are validated against
        error_data_type (Any): Type response error data is validated against

    Returns:
        Request | Response: A Request for requests and notifications, a
            Response otherwise

    Raises:
        CodecError: If the message is malformed, see `Request.decode`,
            `Response.decode` and `get_message_type`
    """
    obj = peek(data)
    if classify(obj).request_shaped:
        return Request.decode(obj, params_type)
    return Response.decode(obj, result_type, error_data_type)
