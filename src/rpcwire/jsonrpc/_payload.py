import functools
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_jsonable_python


@functools.lru_cache(maxsize=256)
def adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def validate(tp: Any, value: Any, *, strict: bool | None = None) -> Any:
    """Validate a decoded JSON value against `tp`.

    `Any` is passed through untouched so untyped envelopes never pay for a
    validation round.

    Raises:
        ValidationError: If the value doesn't fit `tp`
    """
    if tp is Any:
        return value
    return adapter(tp).validate_python(value, strict=strict)


def error_details(e: ValidationError) -> list[dict[str, Any]]:
    """JSON-safe rendition of a validation failure, used as error data."""
    return to_jsonable_python(e.errors(include_url=False, include_context=False))


def dump(value: Any) -> Any:
    """Convert a payload (pydantic model, dataclass, plain value) into JSON-ready python."""
    return to_jsonable_python(value)
