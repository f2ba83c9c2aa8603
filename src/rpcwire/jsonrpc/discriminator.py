"""JSON-RPC Message Classification

Incoming messages have to be classified before they can be decoded, since the
caller needs to know whether to decode a Request or a Response. This module
looks at which members a message has without decoding any of them:

1. `jsonrpc` must be exactly "2.0"
2. A message with a `method` member is a request (a notification when it
   has no id)
3. A message with an `error` member, or with a `result` and an `id`, is a
   response
4. Anything else is rejected

A message with a `method` next to a `result` or an `error` isn't valid
JSON-RPC 2.0. It is still classified as a request, with a warning.
"""

import enum
import json
import logging
from collections.abc import Mapping
from typing import Any

from .errors import InvalidMessageShape, InvalidVersion, ParseError
from .messages import JSONRPC_VERSION

logger = logging.getLogger(__name__)


class MessageKind(enum.Enum):
    REQUEST = "request"
    NOTIFICATION = "notification"
    RESPONSE = "response"

    @property
    def request_shaped(self) -> bool:
        """True for messages that decode into a Request."""
        return self is not MessageKind.RESPONSE


def load(data: str | bytes | Mapping[str, Any]) -> Mapping[str, Any]:
    """Parse a message into a mapping of its members.

    Already parsed mappings are returned as is.

    Raises:
        ParseError: If `data` isn't valid JSON
        InvalidMessageShape: If `data` isn't a JSON object
    """
    if isinstance(data, Mapping):
        return data

    try:
        obj = json.loads(data)
    except json.JSONDecodeError as e:
        raise ParseError(
            e.msg, data={"pos": e.pos, "lineno": e.lineno, "colno": e.colno}
        ) from e
    except UnicodeDecodeError as e:
        raise ParseError("message is not valid UTF-8", data={"pos": e.start}) from e
    except RecursionError as e:
        raise ParseError("message is nested too deeply") from e

    if not isinstance(obj, dict):
        raise InvalidMessageShape(
            "message must be a JSON object", data={"type": type(obj).__name__}
        )
    return obj


def peek(data: str | bytes | Mapping[str, Any]) -> Mapping[str, Any]:
    """Parse a message and check its protocol version.

    Returns:
        Mapping[str, Any]: The members of the message

    Raises:
        ParseError: If `data` isn't valid JSON
        InvalidMessageShape: If `data` isn't a JSON object
        InvalidVersion: If the `jsonrpc` member is missing or isn't "2.0"
    """
    obj = load(data)
    if obj.get("jsonrpc") != JSONRPC_VERSION:
        raise InvalidVersion(
            "invalid JSON-RPC version", data={"jsonrpc": obj.get("jsonrpc")}
        )
    return obj


def classify(obj: Mapping[str, Any]) -> MessageKind:
    """Classify the members of a message whose version was already checked.

    Raises:
        InvalidMessageShape: If the members match no kind of message
    """
    has_result = "result" in obj
    has_error = "error" in obj

    if "method" in obj:
        if has_result or has_error:
            logger.warning(
                "Message has both a method and a result or error, treating it as a request",
                extra={"jsonRpcMsg": obj},
            )
        if obj.get("id") is None:
            return MessageKind.NOTIFICATION
        return MessageKind.REQUEST

    if has_error and not has_result:
        return MessageKind.RESPONSE
    if has_result and not has_error and "id" in obj:
        return MessageKind.RESPONSE

    raise InvalidMessageShape("invalid message type")


def get_message_type(data: str | bytes | Mapping[str, Any]) -> MessageKind:
    """Classify a raw message.

    Args:
        data (str | bytes | Mapping[str, Any]): JSON text, or an already
            parsed JSON object

    Returns:
        MessageKind: The kind of the message

    Raises:
        ParseError: If `data` isn't valid JSON
        InvalidVersion: If the `jsonrpc` member is missing or isn't "2.0"
        InvalidMessageShape: If the message matches no kind of message
    """
    kind = classify(peek(data))
    logger.debug("Classified message as %s", kind.value)
    return kind
