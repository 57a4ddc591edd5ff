from __future__ import annotations

from typing import Iterator

from .errors import InvalidCharacter, NumberOverflow
from .tokens import END_TOKEN, SINGLE_CHAR_TOKENS, Token, TokenKind


# Largest literal accepted (signed 128-bit).
MAX_LITERAL = 2**127 - 1
_MAX_LITERAL_DIGITS = len(str(MAX_LITERAL))


class Lexer:
    """Pull-based tokenizer over a whitespace-free expression.

    Not safe for concurrent use: one cursor is shared by every caller.
    """

    # Extension point: add "D" here (or pass die_markers=) to accept uppercase dice.
    DIE_MARKERS: frozenset[str] = frozenset({"d"})

    def __init__(self, text: str = "", die_markers: frozenset[str] | None = None) -> None:
        self.die_markers = self.DIE_MARKERS if die_markers is None else frozenset(die_markers)
        self.set_expression(text)

    def set_expression(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def next_token(self) -> Token:
        """Return the next token; END_TOKEN forever once the input is used up."""
        text = self._text
        if self._pos >= len(text):
            return END_TOKEN

        ch = text[self._pos]
        self._pos += 1

        if ch.isdigit() and ch.isascii():
            return self._number()

        kind = SINGLE_CHAR_TOKENS.get(ch)
        if kind is not None:
            return Token(kind)
        if ch in self.die_markers:
            return Token(TokenKind.DIE)

        raise InvalidCharacter(
            f"Unexpected character {ch!r} at position {self._pos - 1}. Example: '2d6 + 3'."
        )

    def _number(self) -> Token:
        text = self._text
        start = self._pos - 1
        while self._pos < len(text) and text[self._pos].isdigit() and text[self._pos].isascii():
            self._pos += 1

        # A literal directly followed by '(' is rejected here; only ')(' multiplies implicitly.
        if self._pos < len(text) and text[self._pos] == "(":
            raise InvalidCharacter(
                f"Number followed by '(' at position {self._pos}. Use an explicit '*', e.g. '3*(4)'."
            )

        digits = text[start : self._pos]
        # Length check first: int() refuses very long digit strings with a plain ValueError.
        significant = digits.lstrip("0") or "0"
        if len(significant) > _MAX_LITERAL_DIGITS or int(significant) > MAX_LITERAL:
            raise NumberOverflow(
                f"Literal of {len(significant)} digits exceeds the largest supported integer."
            )
        return Token(TokenKind.NUMBER, int(significant))

    def tokens(self) -> Iterator[Token]:
        """Lazily yield the remaining tokens, ending with a single END_TOKEN."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.END:
                return
