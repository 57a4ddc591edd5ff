import pytest

from die_sir.models import Add, DieRoll, Divide, Literal, Multiply, Negate, Power, Subtract
from die_sir.parser import parse_expression


@pytest.mark.parametrize(
    ("text", "tree"),
    [
        ("42", Literal(42)),
        ("2d6+3", Add(DieRoll(Literal(2), Literal(6)), Literal(3))),
        ("2 d 6 + 3", Add(DieRoll(Literal(2), Literal(6)), Literal(3))),
        ("1+2*3", Add(Literal(1), Multiply(Literal(2), Literal(3)))),
        ("10-2-3", Subtract(Subtract(Literal(10), Literal(2)), Literal(3))),
        ("8/4/2", Divide(Divide(Literal(8), Literal(4)), Literal(2))),
        ("2*3^2", Multiply(Literal(2), Power(Literal(3), Literal(2)))),
        ("-2^2", Power(Negate(Literal(2)), Literal(2))),
        ("-(2^2)", Negate(Power(Literal(2), Literal(2)))),
        ("(1+1)d6", DieRoll(Add(Literal(1), Literal(1)), Literal(6))),
        ("2d6*2", Multiply(DieRoll(Literal(2), Literal(6)), Literal(2))),
        ("-1d6", DieRoll(Negate(Literal(1)), Literal(6))),
        (
            "(1d8 + 2d6) * 2",
            Multiply(
                Add(DieRoll(Literal(1), Literal(8)), DieRoll(Literal(2), Literal(6))),
                Literal(2),
            ),
        ),
    ],
)
def test_parse_acceptance(text, tree):
    assert parse_expression(text) == tree


@pytest.mark.parametrize(
    ("text", "tree"),
    [
        ("(2+3)(4)", Multiply(Add(Literal(2), Literal(3)), Literal(4))),
        ("(3)(4)", Multiply(Literal(3), Literal(4))),
        ("(2)(3)(4)", Multiply(Literal(2), Multiply(Literal(3), Literal(4)))),
        ("(2d6)(3)", Multiply(DieRoll(Literal(2), Literal(6)), Literal(3))),
    ],
)
def test_parenthesised_groups_multiply_implicitly(text, tree):
    assert parse_expression(text) == tree


def test_zero_padded_literal():
    assert parse_expression("0" * 5000 + "1d6") == DieRoll(Literal(1), Literal(6))
