from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto


class TokenKind(Enum):
    NUMBER = auto()
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /
    CARET = auto()  # ^
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    DIE = auto()  # d
    END = auto()


class Precedence(IntEnum):
    BASE = 0
    ADD_SUB = 1
    MUL_DIV = 2
    POWER = 3
    DIE_ROLL = 4
    UNARY_NEGATE = 5


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: int | None = None

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return str(self.value)
        return _DISPLAY[self.kind]


END_TOKEN = Token(TokenKind.END)

SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}

_DISPLAY: dict[TokenKind, str] = {
    **{kind: f"'{ch}'" for ch, kind in SINGLE_CHAR_TOKENS.items()},
    TokenKind.DIE: "'d'",
    TokenKind.END: "end of input",
}

_PRECEDENCE: dict[TokenKind, Precedence] = {
    TokenKind.PLUS: Precedence.ADD_SUB,
    TokenKind.MINUS: Precedence.ADD_SUB,
    TokenKind.STAR: Precedence.MUL_DIV,
    TokenKind.SLASH: Precedence.MUL_DIV,
    TokenKind.CARET: Precedence.POWER,
    TokenKind.DIE: Precedence.DIE_ROLL,
}


def precedence_of(kind: TokenKind) -> Precedence:
    """Binding power of ``kind`` as a binary operator; BASE for non-operators."""
    return _PRECEDENCE.get(kind, Precedence.BASE)
