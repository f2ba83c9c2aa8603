from .discriminator import MessageKind, classify, get_message_type, peek
from .envelope import Request, Response, decode_message
from .errors import (
    EMPTY_ERROR,
    CodecError,
    ErrorObject,
    InvalidIdType,
    InvalidMessageShape,
    InvalidParams,
    InvalidResult,
    InvalidVersion,
    JsonRpcException,
    MissingMethod,
    MissingResultOrError,
    ParseError,
    RpcErrorLike,
    UnsupportedIdentifierTag,
    is_empty,
    new_error,
    normalize,
)
from .identifier import NULL_ID, Identifier
from .messages import (
    JSONRPC_INTERNAL_ERROR,
    JSONRPC_INVALID_PARAMS,
    JSONRPC_INVALID_REQUEST,
    JSONRPC_METHOD_NOT_FOUND,
    JSONRPC_PARSE_ERROR,
    JSONRPC_SERVER_ERROR,
    JSONRPC_VERSION,
)

__all__ = (
    "MessageKind",
    "classify",
    "get_message_type",
    "peek",
    "Request",
    "Response",
    "decode_message",
    "EMPTY_ERROR",
    "CodecError",
    "ErrorObject",
    "InvalidIdType",
    "InvalidMessageShape",
    "InvalidParams",
    "InvalidResult",
    "InvalidVersion",
    "JsonRpcException",
    "MissingMethod",
    "MissingResultOrError",
    "ParseError",
    "RpcErrorLike",
    "UnsupportedIdentifierTag",
    "is_empty",
    "new_error",
    "normalize",
    "NULL_ID",
    "Identifier",
    "JSONRPC_INTERNAL_ERROR",
    "JSONRPC_INVALID_PARAMS",
    "JSONRPC_INVALID_REQUEST",
    "JSONRPC_METHOD_NOT_FOUND",
    "JSONRPC_PARSE_ERROR",
    "JSONRPC_SERVER_ERROR",
    "JSONRPC_VERSION",
)
