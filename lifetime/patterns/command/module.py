"""Command demo - a calculator with undo and redo."""

from lifetime.core import Demo

from .calculator import User


class CommandDemo(Demo):

    @property
    def name(self) -> str:
        return "command"

    @property
    def display_name(self) -> str:
        return "Command"

    @property
    def description(self) -> str:
        return (
            "Encapsulate a request as an object, letting you parameterize clients with "
            "different requests, queue or log requests, and support undoable operations"
        )

    @property
    def category(self) -> str:
        return "behavioral"

    @property
    def participants(self):
        return {
            "Command": ["Command"],
            "ConcreteCommand": ["CalculatorCommand"],
            "Invoker": ["User"],
            "Receiver": ["Calculator"],
        }

    def compute(self):
        user = User()

        # User presses calculator buttons
        user.compute("+", 100)
        user.compute("-", 50)
        user.compute("*", 10)
        user.compute("/", 2)

        user.undo(4)
        user.redo(3)

        return user
