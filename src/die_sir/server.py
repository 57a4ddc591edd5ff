from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .config import configure_logging, load_settings
from .dice import DiceError, roll_from_text


mcp = FastMCP("die-sir")


@mcp.tool()
def roll_dice(text: str):
    """Evaluate a dice arithmetic expression such as '2d6 + 3' or '(2+3)(4)'.

    Input: text (string)
    Output: structured JSON with the total, every die rolled and a breakdown

    Raises a hard error (exception) on invalid input.
    """

    try:
        return roll_from_text(text, settings=load_settings())
    except DiceError as e:
        # Fail-fast: surface stable error codes in the message.
        raise ValueError(str(e)) from None


def run() -> None:
    configure_logging(load_settings())
    mcp.run()


if __name__ == "__main__":
    run()
