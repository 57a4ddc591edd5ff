from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from .config import Settings
from .errors import DiceError, UnableToParse
from .evaluator import RandomSource, default_rng, evaluate_node
from .models import EvalOutcome, format_number
from .parser import Parser, strip_whitespace


logger = logging.getLogger(__name__)


class DieSir:
    """Reusable dice roller: parse and evaluate one expression per ``roll`` call.

    The parser and its lexer buffer are kept between calls and reset at the
    start of each one. Instances are not safe for concurrent use; callers that
    share one across threads must provide their own locking.
    """

    def __init__(self, rng: RandomSource | None = None, settings: Settings | None = None) -> None:
        self.rng = rng if rng is not None else default_rng()
        self.settings = settings if settings is not None else Settings()
        self._parser = Parser()

    def roll(self, text: str) -> EvalOutcome:
        expr = strip_whitespace(text)
        try:
            node = self._parser.parse(expr)
            return evaluate_node(node, self.rng, self.settings)
        except RecursionError:
            raise UnableToParse("Expression is nested too deeply.") from None
        except DiceError as e:
            logger.info("rejected %r: %s", text, e)
            raise


def evaluate(text: str, rng: RandomSource | None = None, settings: Settings | None = None) -> EvalOutcome:
    """Evaluate a dice expression such as ``"2d6 + 3"``. Raises DiceError for invalid input."""
    return DieSir(rng=rng, settings=settings).roll(text)


def _now_utc_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def _explain(outcome: EvalOutcome) -> str:
    if outcome.is_calculation:
        return format_number(outcome.total)
    return f"{outcome.result_expression} => {format_number(outcome.total)}"


def roll_from_text(
    text: str,
    rng: RandomSource | None = None,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Parse, validate, then roll. Raises DiceError for invalid input."""

    if not text or not text.strip():
        raise UnableToParse("Empty input. Example: '2d6 + 3' or '(1d8 + 2d6) * 2'.")

    if rng is None:
        rng = default_rng()
    outcome = evaluate(text, rng=rng, settings=settings)

    return {
        "request_id": uuid.uuid4().hex,
        "timestamp": _now_utc_iso(),
        "input": text,
        "normalized_expression": strip_whitespace(text),
        "rng": {
            "source": type(rng).__name__,
            "nonce": str(uuid.uuid4()),
        },
        "is_calculation": outcome.is_calculation,
        "rolls": [{"sides": r.sides, "value": r.value, "sign": r.sign} for r in outcome.rolls],
        "total": outcome.total,
        "result_expression": outcome.result_expression,
        "explanation": _explain(outcome),
    }
