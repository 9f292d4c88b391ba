"""A sales prospect whose state can be saved and restored."""

from dataclasses import dataclass
from typing import Optional


def _format_number(value) -> str:
    """Whole floats print without a trailing .0, e.g. 25000.0 -> 25000."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Memento:
    """Snapshot of a SalesProspect."""
    name: str
    phone: str
    budget: float


class SalesProspect:
    """Originator. Every assignment is echoed to the console."""

    def __init__(self):
        self._name = None
        self._phone = None
        self._budget = None

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = value
        print(f"Name:  {value}")

    @property
    def phone(self) -> str:
        return self._phone

    @phone.setter
    def phone(self, value: str):
        self._phone = value
        print(f"Phone: {value}")

    @property
    def budget(self) -> float:
        return self._budget

    @budget.setter
    def budget(self, value: float):
        self._budget = value
        print(f"Budget: {_format_number(value)}")

    def save_memento(self) -> Memento:
        print("\nSaving state --\n")
        return Memento(self._name, self._phone, self._budget)

    def restore_memento(self, memento: Memento):
        print("\nRestoring state --\n")
        self.name = memento.name
        self.phone = memento.phone
        self.budget = memento.budget


class ProspectMemory:
    """Caretaker. Holds a memento without looking inside it."""

    def __init__(self):
        self.memento: Optional[Memento] = None
