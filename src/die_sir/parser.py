from __future__ import annotations

import logging

from .errors import InvalidOperator, UnableToParse
from .lexer import Lexer
from .models import Add, DieRoll, Divide, Expression, Literal, Multiply, Negate, Power, Subtract
from .tokens import END_TOKEN, Precedence, Token, TokenKind, precedence_of


logger = logging.getLogger(__name__)

_BINARY_NODES = {
    TokenKind.PLUS: (Add, Precedence.ADD_SUB),
    TokenKind.MINUS: (Subtract, Precedence.ADD_SUB),
    TokenKind.STAR: (Multiply, Precedence.MUL_DIV),
    TokenKind.SLASH: (Divide, Precedence.MUL_DIV),
    TokenKind.CARET: (Power, Precedence.POWER),
    TokenKind.DIE: (DieRoll, Precedence.DIE_ROLL),
}


def strip_whitespace(text: str) -> str:
    return "".join(text.split())


class Parser:
    """Precedence-climbing parser for dice arithmetic.

    A single instance can be reused for many expressions; ``parse`` resets the
    underlying lexer each time. Not safe for concurrent use.
    """

    def __init__(self, lexer: Lexer | None = None) -> None:
        self.lexer = lexer if lexer is not None else Lexer()
        self.current: Token = END_TOKEN

    def parse(self, text: str) -> Expression:
        self.lexer.set_expression(text)
        self._advance()

        node = self._climb(Precedence.BASE)
        if self.current.kind is not TokenKind.END:
            raise InvalidOperator(
                f"Unexpected {self.current} after a complete expression. Example: '(2d6 + 3) * 2'."
            )

        logger.debug("parsed %r into %r", text, node)
        return node

    def _advance(self) -> None:
        self.current = self.lexer.next_token()

    def _expect(self, kind: TokenKind) -> None:
        if self.current.kind is not kind:
            raise InvalidOperator(f"Expected {Token(kind)}, got {self.current}.")
        self._advance()

    def _primary(self) -> Expression:
        token = self.current

        if token.kind is TokenKind.NUMBER:
            self._advance()
            return Literal(token.value)

        if token.kind is TokenKind.MINUS:
            self._advance()
            return Negate(self._climb(Precedence.UNARY_NEGATE))

        if token.kind is TokenKind.LEFT_PAREN:
            self._advance()
            inner = self._climb(Precedence.BASE)
            self._expect(TokenKind.RIGHT_PAREN)
            # (a)(b) multiplies implicitly.
            if self.current.kind is TokenKind.LEFT_PAREN:
                return Multiply(inner, self._climb(Precedence.MUL_DIV))
            return inner

        raise UnableToParse(f"An expression cannot start with {token}. Example: '1d20 + 5'.")

    def _climb(self, min_precedence: Precedence) -> Expression:
        left = self._primary()

        while min_precedence < precedence_of(self.current.kind):
            if self.current.kind is TokenKind.END:
                break

            entry = _BINARY_NODES.get(self.current.kind)
            if entry is None:
                raise InvalidOperator(f"{self.current} is not a valid operator.")
            node_type, right_precedence = entry

            self._advance()
            right = self._climb(right_precedence)
            left = node_type(left, right)

        return left


def parse_expression(text: str) -> Expression:
    """Parse ``text`` (whitespace is ignored) with a fresh parser."""
    return Parser().parse(strip_whitespace(text))
