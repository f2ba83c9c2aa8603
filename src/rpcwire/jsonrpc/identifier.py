"""JSON-RPC Identifiers

A JSON-RPC id correlates a response with the request it answers. On the wire
it is a string, an integer or null; a request without any id is a
notification.

`Identifier` holds exactly one of those three values. Construction validates
the value, so an Identifier holding anything else can't be built through the
public interface.

Example:
    ```python
    Identifier(1).to_json()             # '1'
    Identifier.from_json('"abc"')       # Identifier(value='abc')
    Identifier.decode(None).is_absent() # True
    Identifier.decode(True)             # raises InvalidIdType
    ```
"""

import json
import math
from dataclasses import dataclass
from typing import Any, assert_never

from .errors import InvalidIdType, ParseError, UnsupportedIdentifierTag


def _check_value(value: Any) -> str | int | None:
    match value:
        case None | str():
            return value
        case int() if not isinstance(value, bool):
            return value
        case float() if math.isfinite(value) and value.is_integer():
            return int(value)
        case _:
            raise InvalidIdType(
                f"invalid id type: {type(value).__name__}", data={"id": repr(value)}
            )


@dataclass(frozen=True)
class Identifier:
    """A JSON-RPC request identifier.

    Two identifiers are equal when they hold the same kind of value and the
    same value: `Identifier("1") != Identifier(1)`.

    Args:
        value (str | int | None): The id. None means absent.

    Raises:
        InvalidIdType: If the value isn't a string, an integer or None
    """

    value: str | int | None = None

    def __post_init__(self):
        object.__setattr__(self, "value", _check_value(self.value))

    @staticmethod
    def absent() -> "Identifier":
        return NULL_ID

    def is_absent(self) -> bool:
        return self.value is None

    def render(self) -> str:
        """Textual form of the id, empty for an absent id."""
        match self.value:
            case None:
                return ""
            case str():
                return self.value
            case int() if not isinstance(self.value, bool):
                return str(self.value)
            case other:
                assert_never(other)

    def __str__(self) -> str:
        return self.render()

    def encode(self) -> str | int | None:
        """Convert to the JSON-ready python value.

        Returns:
            str | int | None: The value to put in the `id` member

        Raises:
            UnsupportedIdentifierTag: If the identifier was corrupted to hold
                another type of value
        """
        match self.value:
            case None | str():
                return self.value
            case int() if not isinstance(self.value, bool):
                return self.value
            case other:
                raise UnsupportedIdentifierTag(
                    f"unsupported identifier type: {type(other).__name__}"
                )

    def to_json(self) -> str:
        return json.dumps(self.encode())

    @staticmethod
    def decode(value: Any) -> "Identifier":
        """Build an identifier from an already parsed JSON value.

        Args:
            value (Any): The value of the `id` member

        Raises:
            InvalidIdType: If the value isn't a string, an integer-valued
                number or null
        """
        if value is None:
            return NULL_ID
        return Identifier(value)

    @staticmethod
    def from_json(data: str | bytes) -> "Identifier":
        """Build an identifier from JSON text.

        Raises:
            ParseError: If `data` isn't valid JSON
            InvalidIdType: If the JSON value has the wrong type
        """
        try:
            value = json.loads(data)
        except json.JSONDecodeError as e:
            raise ParseError(
                e.msg, data={"pos": e.pos, "lineno": e.lineno, "colno": e.colno}
            ) from e
        return Identifier.decode(value)


NULL_ID = Identifier()
"""The absent identifier."""
