"""Build nested lists from Scheme source using only peek_token/next_token."""

import sys
from pprint import pprint

from scmlex import EndOfStreamError, TokenKind, lexer


def parse_program(lex):
    program = []
    while True:
        try:
            program.append(parse_expression(lex))
        except EndOfStreamError:
            return program


def parse_expression(lex):
    if lex.peek_token().kind is TokenKind.LPAREN:
        return parse_list(lex)
    return lex.next_token().literal


def parse_list(lex):
    lex.next_token()  # skip lparen
    items = []
    while lex.peek_token().kind is not TokenKind.RPAREN:
        items.append(parse_expression(lex))
    lex.next_token()  # skip rparen
    return items


source = sys.stdin.read() if not sys.stdin.isatty() else "(define (sq x) (* x x)) (sq 3)"
pprint(parse_program(lexer(source)))
