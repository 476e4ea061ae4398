"""Tests for scmlex.serialization: mapping, JSON and CSV forms of a Token."""

from __future__ import annotations

import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from scmlex.errors import InvalidJsonError, InvalidMappingError, UnknownTokenKindError
from scmlex.serialization import from_dict, from_json, to_csv, to_dict, to_json
from scmlex.tokens import Token, TokenKind

tokens = st.builds(Token, st.sampled_from(list(TokenKind)), st.none() | st.text())


class TestRoundTrip:
    """Verify round-trip serialization for any token."""

    @given(tokens)
    def test_dict(self, token: Token) -> None:
        assert from_dict(to_dict(token)) == token

    @given(tokens)
    def test_json(self, token: Token) -> None:
        assert from_json(to_json(token)) == token

    def test_null_literal(self) -> None:
        token = Token(TokenKind.RPAREN, None)
        assert to_dict(token) == {"type": "rparen", "literal": None}
        assert from_json(to_json(token)) == token


class TestToDict:
    def test_shape(self) -> None:
        assert to_dict(Token(TokenKind.IDENTIFIER, "foo")) == {"type": "identifier", "literal": "foo"}


class TestFromDict:
    def test_kind_member_accepted(self) -> None:
        assert from_dict({"type": TokenKind.NUMBER, "literal": "1"}) == Token(TokenKind.NUMBER, "1")

    def test_extra_keys_ignored(self) -> None:
        token = from_dict({"type": "dot", "literal": ".", "line": 3})
        assert token == Token(TokenKind.DOT, ".")

    def test_op_proc_is_legal(self) -> None:
        assert from_dict({"type": "op_proc", "literal": "+"}).kind is TokenKind.OP_PROC

    @pytest.mark.parametrize("data", [{"type": "lparen"}, {"literal": "("}, {}])
    def test_missing_key(self, data: dict) -> None:
        with pytest.raises(InvalidMappingError):
            from_dict(data)

    def test_not_a_mapping(self) -> None:
        with pytest.raises(InvalidMappingError):
            from_dict(["lparen", "("])  # type: ignore[arg-type]

    def test_literal_must_be_text(self) -> None:
        with pytest.raises(InvalidMappingError):
            from_dict({"type": "number", "literal": 1})

    @pytest.mark.parametrize("kind", ["LPAREN", "paren", "", None, 3])
    def test_unknown_kind(self, kind: object) -> None:
        with pytest.raises(UnknownTokenKindError) as exc_info:
            from_dict({"type": kind, "literal": "("})
        assert exc_info.value.kind_name == kind


class TestJson:
    def test_compact_output(self) -> None:
        assert to_json(Token(TokenKind.IDENTIFIER, "foo")) == '{"type":"identifier","literal":"foo"}'

    def test_indent(self) -> None:
        text = to_json(Token(TokenKind.IDENTIFIER, "foo"), indent=2)
        assert "\n" in text
        assert json.loads(text) == {"type": "identifier", "literal": "foo"}

    def test_spaced_json_accepted(self) -> None:
        assert from_json('{ "type": "lparen", "literal": "(" }') == Token(TokenKind.LPAREN, "(")

    @pytest.mark.parametrize("text", ["", "{", "lparen", "{'type': 'lparen'}"])
    def test_unparseable(self, text: str) -> None:
        with pytest.raises(InvalidJsonError):
            from_json(text)

    @pytest.mark.parametrize("text", ["[]", "42", '"lparen"', '{"type":"lparen"}'])
    def test_not_a_token_mapping(self, text: str) -> None:
        with pytest.raises(InvalidJsonError):
            from_json(text)

    def test_deeply_nested(self) -> None:
        with pytest.raises(InvalidJsonError, match="Cannot parse token JSON"):
            from_json("[" * 100_000)

    def test_bad_literal_reported_as_json_error(self) -> None:
        with pytest.raises(InvalidJsonError):
            from_json('{"type":"number","literal":1}')

    def test_unknown_kind(self) -> None:
        with pytest.raises(UnknownTokenKindError):
            from_json('{"type":"keyword","literal":"if"}')


class TestCsv:
    def test_row(self) -> None:
        assert to_csv(Token(TokenKind.LPAREN, "(")) == '"lparen","("'

    def test_quotes_are_doubled(self) -> None:
        assert to_csv(Token(TokenKind.STRING, '"hi"')) == '"string","""hi"""'

    def test_null_literal_is_empty(self) -> None:
        assert to_csv(Token(TokenKind.RPAREN, None)) == '"rparen",""'
