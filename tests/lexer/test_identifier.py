"""Tests for the R7RS identifier validator."""

from __future__ import annotations

import pytest

from scmlex.lexer.classifiers.identifier import is_identifier


class TestOrdinaryIdentifiers:
    """<initial> <subsequent>*"""

    @pytest.mark.parametrize(
        "lexeme",
        [
            "lambda",
            "q",
            "V17a",
            "a34kTMNs",
            "the-word-recursion-has-many-meanings",
            "list->vector",
            "set-car!",
            "null?",
            "<=?",
            "*",
            "/",
            "=",
            "_",
            "a.b",
            "x@y",
            "foo+",
        ],
    )
    def test_valid(self, lexeme: str) -> None:
        assert is_identifier(lexeme)

    @pytest.mark.parametrize("lexeme", ["foo#", "a|b", "x\"", "a,b", "x;y", "é"])
    def test_invalid_subsequent(self, lexeme: str) -> None:
        assert not is_identifier(lexeme)


class TestPeculiarIdentifiers:
    """Identifiers starting with +, - or ."""

    @pytest.mark.parametrize(
        "lexeme",
        ["+", "-", "...", "->string", "+soup+", "-@", "+a", "-.x", "+..", "..a", ".a1"],
    )
    def test_valid(self, lexeme: str) -> None:
        assert is_identifier(lexeme)

    @pytest.mark.parametrize("lexeme", ["+5", "-1a", "+.5", ".5", "-.1"])
    def test_digit_after_sign_or_dot(self, lexeme: str) -> None:
        assert not is_identifier(lexeme)

    def test_dot_alone(self) -> None:
        # The classifier turns "." into a dot token before asking.
        assert is_identifier(".")

    def test_sign_then_dot_alone(self) -> None:
        assert is_identifier("+.")


class TestInvalidFirstCharacter:
    @pytest.mark.parametrize("lexeme", ["", "1abc", "#foo", "|foo|", "\"x", "'a", "@x", "9"])
    def test_invalid(self, lexeme: str) -> None:
        assert not is_identifier(lexeme)
