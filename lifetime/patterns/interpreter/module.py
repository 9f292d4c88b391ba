"""Interpreter demo - converting Roman numerals to decimals."""

from lifetime.core import Demo

from .roman import decode


class InterpreterDemo(Demo):

    @property
    def name(self) -> str:
        return "interpreter"

    @property
    def display_name(self) -> str:
        return "Interpreter"

    @property
    def description(self) -> str:
        return (
            "Given a language, define a representation for its grammar along with an "
            "interpreter that uses the representation to interpret sentences"
        )

    @property
    def category(self) -> str:
        return "behavioral"

    @property
    def participants(self):
        return {
            "AbstractExpression": ["Expression"],
            "TerminalExpression": [
                "ThousandExpression", "HundredExpression", "TenExpression", "OneExpression",
            ],
            "Context": ["Context"],
        }

    def get_config_schema(self):
        return {
            "numerals": {
                "type": "list",
                "default": ["MCMXXVIII"],
                "description": "Roman numerals to interpret",
            },
        }

    def compute(self):
        for roman in self.setting("numerals"):
            print(f"{roman} = {decode(roman)}")
