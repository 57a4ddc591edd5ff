from __future__ import annotations

from typing import Callable

from .config import configure_logging, load_settings
from .dice import DieSir
from .errors import DiceError
from .models import format_number


BANNER = """\
DieSir - Dice Rolling Calculator
Enter expressions like:
  2d6 + 3     (roll two 6-sided dice and add 3)
  1d20        (roll one 20-sided die)
  3d8 + 1d6   (roll three 8-sided dice and one 6-sided die)
  (2+3)(4)    (parenthesised groups multiply)
Enter 'q' to quit
"""


def repl(dice: DieSir, read: Callable[[str], str] = input, write: Callable[[str], None] = print) -> None:
    write(BANNER)
    while True:
        try:
            line = read("> ").strip()
        except EOFError:
            line = "q"

        if line.lower() == "q":
            write("Goodbye!")
            return
        if not line:
            continue

        try:
            outcome = dice.roll(line)
        except DiceError as e:
            write(f"Error: {e}\n")
            continue

        write(f"Result: {outcome.result_expression}")
        write(f"Total: {format_number(outcome.total)}\n")


def main() -> None:
    settings = load_settings()
    configure_logging(settings)
    repl(DieSir(settings=settings))


if __name__ == "__main__":
    main()
