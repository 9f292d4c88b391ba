"""A calculator with undoable commands."""

import logging
from abc import ABC, abstractmethod
from typing import List

logger = logging.getLogger(__name__)

OPERATORS = ("+", "-", "*", "/")

_INVERSE = {"+": "-", "-": "+", "*": "/", "/": "*"}


def inverse_operator(operator: str) -> str:
    """Return the operator that undoes the given one."""
    try:
        return _INVERSE[operator]
    except KeyError:
        raise ValueError(f"Invalid operator: {operator!r}") from None


class Calculator:
    """Receiver: knows how to perform the arithmetic."""

    def __init__(self):
        self.current = 0

    def operation(self, operator: str, operand: int) -> int:
        if operator == "+":
            self.current += operand
        elif operator == "-":
            self.current -= operand
        elif operator == "*":
            self.current *= operand
        elif operator == "/":
            # Truncate toward zero
            self.current = int(self.current / operand)
        else:
            raise ValueError(f"Invalid operator: {operator!r}")

        print(f"Current value = {self.current:>3} (following {operator} {operand})")
        return self.current


class Command(ABC):
    @abstractmethod
    def execute(self):
        pass

    @abstractmethod
    def unexecute(self):
        pass


class CalculatorCommand(Command):
    """Binds an operator and operand to a calculator."""

    def __init__(self, calculator: Calculator, operator: str, operand: int):
        self.calculator = calculator
        self.operator = operator
        self.operand = operand

    def execute(self):
        self.calculator.operation(self.operator, self.operand)

    def unexecute(self):
        self.calculator.operation(inverse_operator(self.operator), self.operand)


class User:
    """Invoker: runs commands and keeps the undo/redo history."""

    def __init__(self, calculator: Calculator = None):
        self.calculator = calculator or Calculator()
        self._commands: List[Command] = []
        self._current = 0

    def compute(self, operator: str, operand: int):
        command = CalculatorCommand(self.calculator, operator, operand)
        command.execute()

        # A new command discards anything that could have been redone
        del self._commands[self._current:]
        self._commands.append(command)
        self._current += 1

    def undo(self, levels: int):
        print(f"\n---- Undo {levels} levels ")
        for _ in range(levels):
            if self._current > 0:
                self._current -= 1
                self._commands[self._current].unexecute()
            else:
                logger.debug("Nothing left to undo")

    def redo(self, levels: int):
        print(f"\n---- Redo {levels} levels ")
        for _ in range(levels):
            if self._current < len(self._commands):
                self._commands[self._current].execute()
                self._current += 1
            else:
                logger.debug("Nothing left to redo")

    @property
    def history_size(self) -> int:
        return len(self._commands)
