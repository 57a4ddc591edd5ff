from __future__ import annotations

import logging
import math
import secrets
from typing import Protocol

from .config import Settings
from .errors import DivisionByZero, InvalidOperator, NumberOverflow, TooManyDice
from .models import (
    Add,
    DieRoll,
    Divide,
    EvalOutcome,
    Expression,
    Literal,
    Multiply,
    Negate,
    Power,
    RollRecord,
    Subtract,
)


logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def default_rng() -> RandomSource:
    return secrets.SystemRandom()


def _require_numbers(verb: str, *operands: EvalOutcome) -> None:
    if not all(o.is_calculation for o in operands):
        raise InvalidOperator(
            f"Cannot {verb} a dice-roll result directly. Only '+' and '-' combine dice, e.g. '2d6 + 3'."
        )


def _combine(left: EvalOutcome, right: EvalOutcome, total: float, flip_right: bool) -> EvalOutcome:
    right_rolls = right.rolls
    if flip_right:
        right_rolls = tuple(RollRecord(r.sides, r.value, -r.sign) for r in right_rolls)
    return EvalOutcome(
        total=total,
        is_calculation=left.is_calculation and right.is_calculation,
        rolls=left.rolls + right_rolls,
    )


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        raise NumberOverflow(f"{base:g} ^ {exponent:g} is too large to represent.") from None
    except ValueError:
        raise InvalidOperator(f"{base:g} ^ {exponent:g} is undefined.") from None


def _roll(count: EvalOutcome, sides: EvalOutcome, rng: RandomSource, settings: Settings) -> EvalOutcome:
    if not (count.is_calculation and sides.is_calculation):
        raise InvalidOperator(
            "Dice count and sides must be plain numbers, not dice results. Example: '(1+1)d6'."
        )
    if not (math.isfinite(count.total) and math.isfinite(sides.total)):
        raise NumberOverflow("Dice count and sides must be finite numbers.")

    n = int(count.total)
    s = int(sides.total)
    if n <= 0 or s <= 0:
        return EvalOutcome(total=0.0, is_calculation=False)

    if n > settings.max_dice:
        raise TooManyDice(f"Cannot roll {n} dice at once (limit {settings.max_dice}).")

    rolls = tuple(RollRecord(sides=s, value=rng.randint(1, s)) for _ in range(n))
    logger.debug("rolled %dd%d: %s", n, s, [r.value for r in rolls])
    return EvalOutcome(
        total=float(sum(r.value for r in rolls)),
        is_calculation=False,
        rolls=rolls,
    )


def evaluate_node(
    node: Expression,
    rng: RandomSource | None = None,
    settings: Settings | None = None,
) -> EvalOutcome:
    """Evaluate an expression tree, children first.

    ``rng`` supplies the dice draws (``secrets.SystemRandom`` when omitted);
    pass a seeded ``random.Random`` for reproducible results.
    """
    if rng is None:
        rng = default_rng()
    if settings is None:
        settings = Settings()
    return _eval(node, rng, settings)


def _eval(node: Expression, rng: RandomSource, settings: Settings) -> EvalOutcome:
    if isinstance(node, Literal):
        return EvalOutcome.number(node.value)

    if isinstance(node, Negate):
        operand = _eval(node.operand, rng, settings)
        _require_numbers("negate", operand)
        return EvalOutcome.number(-operand.total)

    if isinstance(node, DieRoll):
        count = _eval(node.count, rng, settings)
        sides = _eval(node.sides, rng, settings)
        return _roll(count, sides, rng, settings)

    if isinstance(node, Power):
        base = _eval(node.base, rng, settings)
        exponent = _eval(node.exponent, rng, settings)
        _require_numbers("raise to a power", base, exponent)
        return EvalOutcome.number(_power(base.total, exponent.total))

    if not isinstance(node, (Add, Subtract, Multiply, Divide)):
        raise TypeError(f"Unknown expression node: {node!r}")

    left = _eval(node.left, rng, settings)
    right = _eval(node.right, rng, settings)

    if isinstance(node, Add):
        return _combine(left, right, left.total + right.total, flip_right=False)
    if isinstance(node, Subtract):
        return _combine(left, right, left.total - right.total, flip_right=True)
    if isinstance(node, Multiply):
        _require_numbers("multiply", left, right)
        return EvalOutcome.number(left.total * right.total)

    _require_numbers("divide", left, right)
    if right.total == 0:
        raise DivisionByZero(f"Cannot divide {left.total:g} by zero.")
    return EvalOutcome.number(left.total / right.total)
