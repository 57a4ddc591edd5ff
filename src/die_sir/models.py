from __future__ import annotations

from dataclasses import dataclass
from typing import Literal as LiteralType, TypeAlias


Sign: TypeAlias = LiteralType[1, -1]


# --- Expression tree -------------------------------------------------------


@dataclass(frozen=True)
class Literal:
    value: int


@dataclass(frozen=True)
class Add:
    left: Expression
    right: Expression


@dataclass(frozen=True)
class Subtract:
    left: Expression
    right: Expression


@dataclass(frozen=True)
class Multiply:
    left: Expression
    right: Expression


@dataclass(frozen=True)
class Divide:
    left: Expression
    right: Expression


@dataclass(frozen=True)
class Power:
    base: Expression
    exponent: Expression


@dataclass(frozen=True)
class Negate:
    operand: Expression


@dataclass(frozen=True)
class DieRoll:
    count: Expression
    sides: Expression


Expression: TypeAlias = Literal | Add | Subtract | Multiply | Divide | Power | Negate | DieRoll


# --- Evaluation results ----------------------------------------------------


@dataclass(frozen=True)
class RollRecord:
    sides: int
    value: int
    sign: Sign = 1


def format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class EvalOutcome:
    total: float
    is_calculation: bool
    rolls: tuple[RollRecord, ...] = ()

    @classmethod
    def number(cls, total: float) -> EvalOutcome:
        return cls(total=float(total), is_calculation=True)

    @property
    def dice_total(self) -> int:
        """Signed sum of every die that contributed to ``total``."""
        return sum(r.sign * r.value for r in self.rolls)

    @property
    def result_expression(self) -> str:
        """Human-readable breakdown, e.g. ``3d6 [4, 1, 6] + 2``."""
        if self.is_calculation or not self.rolls:
            return format_number(self.total)

        groups: dict[tuple[int, int], list[int]] = {}
        for r in self.rolls:
            groups.setdefault((r.sides, r.sign), []).append(r.value)

        chunks: list[str] = []
        for (sides, sign), values in groups.items():
            piece = f"{len(values)}d{sides} [{', '.join(map(str, values))}]"
            if not chunks:
                chunks.append(f"-{piece}" if sign < 0 else piece)
            else:
                chunks.append(f"- {piece}" if sign < 0 else f"+ {piece}")

        # Rounded so float error from "/" and "^" stays out of the rendering.
        constant = round(self.total - self.dice_total, 12)
        if constant > 0:
            chunks.append(f"+ {format_number(constant)}")
        elif constant < 0:
            chunks.append(f"- {format_number(-constant)}")

        return " ".join(chunks)

    def __str__(self) -> str:
        return self.result_expression
