"""Tests for JSON-RPC identifiers."""

import pytest

from rpcwire.jsonrpc import (
    JSONRPC_INVALID_REQUEST,
    NULL_ID,
    Identifier,
    InvalidIdType,
    ParseError,
    UnsupportedIdentifierTag,
)


def _corrupted(value) -> Identifier:
    """Identifier forced to hold a value outside of the supported union."""
    id = Identifier("placeholder")
    object.__setattr__(id, "value", value)
    return id


class TestIsAbsent:
    @pytest.mark.parametrize(
        "id, expected",
        [
            (Identifier(None), True),
            (NULL_ID, True),
            (Identifier.absent(), True),
            (Identifier("test"), False),
            (Identifier(123), False),
            (Identifier(""), False),
            (Identifier(0), False),
        ],
    )
    def test_is_absent(self, id, expected):
        assert id.is_absent() is expected


class TestRender:
    @pytest.mark.parametrize(
        "id, expected",
        [
            (Identifier("test"), "test"),
            (Identifier(123), "123"),
            (Identifier(-7), "-7"),
            (Identifier(None), ""),
        ],
    )
    def test_render(self, id, expected):
        assert id.render() == expected
        assert str(id) == expected

    def test_unsupported_value_fails_loudly(self):
        with pytest.raises(AssertionError):
            _corrupted(True).render()

        with pytest.raises(AssertionError):
            _corrupted(1.5).render()


class TestDecode:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ('"test"', Identifier("test")),
            ("123", Identifier(123)),
            ("-1", Identifier(-1)),
            ("null", Identifier(None)),
            ("1.0", Identifier(1)),
        ],
    )
    def test_from_json(self, text, expected):
        assert Identifier.from_json(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["true", "false", "[1,2,3]", '{"key":"value"}', "1.5", "NaN", "Infinity"],
    )
    def test_invalid_type(self, text):
        with pytest.raises(InvalidIdType) as exc:
            Identifier.from_json(text)
        assert exc.value.code == JSONRPC_INVALID_REQUEST
        assert "invalid id type" in str(exc.value)

    def test_decode_parsed_value(self):
        assert Identifier.decode("abc") == Identifier("abc")
        assert Identifier.decode(None) is NULL_ID

    def test_invalid_json(self):
        with pytest.raises(ParseError):
            Identifier.from_json("{")

    @pytest.mark.parametrize(
        "value, shown",
        [(True, "True"), ([1, 2, 3], "[1, 2, 3]"), ({"k": "v"}, "{'k': 'v'}"), (1.5, "1.5")],
    )
    def test_invalid_type_reports_value(self, value, shown):
        with pytest.raises(InvalidIdType) as exc:
            Identifier.decode(value)
        assert exc.value.data == {"id": shown}

    def test_constructor_validates(self):
        with pytest.raises(InvalidIdType):
            Identifier(True)
        with pytest.raises(InvalidIdType):
            Identifier([1])


class TestEncode:
    @pytest.mark.parametrize(
        "id, expected",
        [
            (Identifier("test"), '"test"'),
            (Identifier(123), "123"),
            (Identifier(None), "null"),
        ],
    )
    def test_to_json(self, id, expected):
        assert id.to_json() == expected

    def test_unsupported_value_is_recoverable(self):
        with pytest.raises(UnsupportedIdentifierTag):
            _corrupted(True).encode()

        with pytest.raises(TypeError):
            _corrupted({"k": "v"}).to_json()

    @pytest.mark.parametrize("value", ["a", "", 0, 42, -3, 2**63, None])
    def test_round_trip(self, value):
        id = Identifier(value)
        assert Identifier.from_json(id.to_json()) == id


class TestEquality:
    def test_same_kind_and_value(self):
        assert Identifier("1") == Identifier("1")
        assert Identifier(1) == Identifier(1)
        assert Identifier(None) == NULL_ID

    def test_string_and_integer_differ(self):
        assert Identifier("1") != Identifier(1)
        assert Identifier("") != NULL_ID

    def test_usable_as_key(self):
        pending = {Identifier(1): "first", Identifier("1"): "second"}
        assert pending[Identifier.from_json("1")] == "first"
        assert pending[Identifier.from_json('"1"')] == "second"
