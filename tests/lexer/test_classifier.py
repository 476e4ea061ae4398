"""Tests for the ordered classification pipeline."""

from __future__ import annotations

import pytest

from scmlex.lexer.classifier import Classifier, classify
from scmlex.lexer.classifiers.number import is_number
from scmlex.tokens import TokenKind


class TestDelimiters:
    @pytest.mark.parametrize(
        ("lexeme", "kind"),
        [
            ("(", TokenKind.LPAREN),
            (")", TokenKind.RPAREN),
            (".", TokenKind.DOT),
            ("'", TokenKind.QUOTATION),
            ("#(", TokenKind.VEC_LPAREN),
        ],
    )
    def test_delimiter(self, lexeme: str, kind: TokenKind) -> None:
        assert classify(lexeme) is kind

    def test_bar_is_illegal(self) -> None:
        assert classify("|") is TokenKind.ILLEGAL

    @pytest.mark.parametrize("lexeme", ["|foo|", "#|", "|#", "#u8("])
    def test_unsupported_syntax_is_illegal(self, lexeme: str) -> None:
        assert classify(lexeme) is TokenKind.ILLEGAL


class TestBooleans:
    @pytest.mark.parametrize("lexeme", ["#f", "#t", "#false", "#true"])
    def test_boolean(self, lexeme: str) -> None:
        assert classify(lexeme) is TokenKind.BOOLEAN

    @pytest.mark.parametrize("lexeme", ["#fa", "#tru", "#F", "#"])
    def test_not_boolean(self, lexeme: str) -> None:
        assert classify(lexeme) is not TokenKind.BOOLEAN


class TestCharacters:
    @pytest.mark.parametrize("lexeme", ["#\\a", "#\\Z", "#\\1", "#\\(", "#\\space", "#\\newline"])
    def test_character(self, lexeme: str) -> None:
        assert classify(lexeme) is TokenKind.CHARACTER

    @pytest.mark.parametrize("lexeme", ["#\\", "#\\ab", "#\\tab"])
    def test_not_character(self, lexeme: str) -> None:
        assert classify(lexeme) is TokenKind.ILLEGAL


class TestStrings:
    @pytest.mark.parametrize("lexeme", ['"foo"', '"bar-hoge"', '""', '"a b c"', r'"say \"hi\""'])
    def test_string(self, lexeme: str) -> None:
        assert classify(lexeme) is TokenKind.STRING

    @pytest.mark.parametrize("lexeme", ['"abc', 'abc"', '"a"b"', r'"abc\"'])
    def test_unbalanced_string_is_illegal(self, lexeme: str) -> None:
        assert classify(lexeme) is TokenKind.ILLEGAL


class TestNumbers:
    @pytest.mark.parametrize(
        "lexeme",
        ["123456", "0", "123456789012345678901234567890", "+42", "-7"],
    )
    def test_integer(self, lexeme: str) -> None:
        assert classify(lexeme) is TokenKind.NUMBER

    @pytest.mark.parametrize("lexeme", ["-3.14", "0.101", "+0.0001", "10.5"])
    def test_decimal(self, lexeme: str) -> None:
        assert classify(lexeme) is TokenKind.NUMBER

    @pytest.mark.parametrize("lexeme", ["1/2", "-2/3", "3.14/6.28", "0.9/0.001"])
    def test_rational(self, lexeme: str) -> None:
        assert classify(lexeme) is TokenKind.NUMBER

    @pytest.mark.parametrize("lexeme", ["1+2i", "-2+3i", "4-5i", "-6-7i", "2/3+4/5i"])
    def test_complex(self, lexeme: str) -> None:
        assert classify(lexeme) is TokenKind.NUMBER

    @pytest.mark.parametrize("lexeme", ["+8.9i", "-10.11i", "+i", "-i", "+1/2i"])
    def test_pure_imaginary(self, lexeme: str) -> None:
        assert classify(lexeme) is TokenKind.NUMBER

    @pytest.mark.parametrize("lexeme", ["007", "1.", ".5", "1e10", "123,456", "1/", "3i", "1+2"])
    def test_not_number(self, lexeme: str) -> None:
        assert not is_number(lexeme)
        assert classify(lexeme) is not TokenKind.NUMBER


class TestIdentifiers:
    @pytest.mark.parametrize(
        "lexeme",
        ["...", "+", "-", "+soup+", "<=?", "->string", "lambda", "if", "define", "V17a"],
    )
    def test_identifier(self, lexeme: str) -> None:
        assert classify(lexeme) is TokenKind.IDENTIFIER

    @pytest.mark.parametrize("lexeme", ["1abc", "#foo", "`", ",", ",@", "@x", "\"x"])
    def test_illegal(self, lexeme: str) -> None:
        assert classify(lexeme) is TokenKind.ILLEGAL


class TestPrecedence:
    """The first matching rule wins."""

    def test_dot_is_delimiter_not_identifier(self) -> None:
        assert classify(".") is TokenKind.DOT

    def test_signed_number_beats_identifier(self) -> None:
        assert classify("+5") is TokenKind.NUMBER
        assert classify("-i") is TokenKind.NUMBER

    def test_classifier_never_emits_op_proc(self) -> None:
        for lexeme in ["+", "-", "*", "/", "%", "<", "<=", ">", ">=", "="]:
            assert classify(lexeme) is not TokenKind.OP_PROC

    def test_percent_is_identifier(self) -> None:
        assert classify("%") is TokenKind.IDENTIFIER

    def test_rule_order(self) -> None:
        names = [name for name, _ in Classifier().rules()]
        assert names == ["delimiter", "boolean", "character", "string", "number", "identifier"]

    def test_rules_return_none_when_not_matching(self) -> None:
        for _, rule in Classifier().rules():
            assert rule("1abc") is None
