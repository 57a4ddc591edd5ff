from __future__ import annotations


class DiceError(ValueError):
    """User-facing expression errors (fail-fast, nothing is rolled)."""

    code: str = "DICE_ERROR"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"[{self.code}] {detail}")


class InvalidCharacter(DiceError):
    code = "INVALID_CHARACTER"


class NumberOverflow(DiceError):
    code = "NUMBER_OVERFLOW"


class UnableToParse(DiceError):
    code = "UNABLE_TO_PARSE"


class InvalidOperator(DiceError):
    code = "INVALID_OPERATOR"


class DivisionByZero(DiceError):
    code = "DIVISION_BY_ZERO"


class TooManyDice(DiceError):
    code = "TOO_MANY_DICE"
