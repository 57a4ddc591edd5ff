import pytest

from die_sir.server import roll_dice


def test_roll_dice_tool_returns_record():
    record = roll_dice("(2+3)(4)")

    assert record["total"] == 20.0
    assert record["is_calculation"] is True
    assert record["rolls"] == []


def test_roll_dice_tool_rolls():
    record = roll_dice("4d6 + 1")

    assert len(record["rolls"]) == 4
    assert record["total"] == sum(r["value"] for r in record["rolls"]) + 1


@pytest.mark.parametrize(
    ("text", "prefix"),
    [
        ("3(4)", "[INVALID_CHARACTER]"),
        ("10/0", "[DIVISION_BY_ZERO]"),
        ("2d6*2", "[INVALID_OPERATOR]"),
    ],
)
def test_roll_dice_tool_rejections(text, prefix):
    with pytest.raises(ValueError) as exc:
        roll_dice(text)
    assert str(exc.value).startswith(prefix)
