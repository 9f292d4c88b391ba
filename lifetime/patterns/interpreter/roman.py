"""Roman numeral interpreter built from terminal expressions."""

from abc import ABC
from typing import List, Optional


class Context:
    """Input still to be read and the value decoded so far."""

    def __init__(self, text: str):
        self.input = text
        self.output = 0


class Expression(ABC):
    """Terminal expression for one decimal digit position.

    Subclasses set the symbols for one, four, five and nine at their
    position. Positions without such a symbol leave it as None.
    """

    one: str = ""
    four: Optional[str] = None
    five: Optional[str] = None
    nine: Optional[str] = None
    multiplier: int = 1

    def interpret(self, context: Context):
        if not context.input:
            return

        if self.nine and context.input.startswith(self.nine):
            context.output += 9 * self.multiplier
            context.input = context.input[2:]
        elif self.four and context.input.startswith(self.four):
            context.output += 4 * self.multiplier
            context.input = context.input[2:]
        elif self.five and context.input.startswith(self.five):
            context.output += 5 * self.multiplier
            context.input = context.input[1:]

        while self.one and context.input.startswith(self.one):
            context.output += self.multiplier
            context.input = context.input[1:]


class ThousandExpression(Expression):
    one = "M"
    multiplier = 1000


class HundredExpression(Expression):
    one = "C"
    four = "CD"
    five = "D"
    nine = "CM"
    multiplier = 100


class TenExpression(Expression):
    one = "X"
    four = "XL"
    five = "L"
    nine = "XC"
    multiplier = 10


class OneExpression(Expression):
    one = "I"
    four = "IV"
    five = "V"
    nine = "IX"
    multiplier = 1


def build_parse_tree() -> List[Expression]:
    return [
        ThousandExpression(),
        HundredExpression(),
        TenExpression(),
        OneExpression(),
    ]


def decode(roman: str) -> int:
    """
    Convert a Roman numeral to an integer.

    Raises:
        ValueError: If part of the numeral cannot be interpreted
    """
    context = Context(roman)
    for expression in build_parse_tree():
        expression.interpret(context)

    if context.input:
        raise ValueError(f"Cannot interpret '{context.input}' in Roman numeral '{roman}'")

    return context.output
