"""Memento demo - saving and restoring a sales prospect."""

from lifetime.core import Demo

from .prospect import ProspectMemory, SalesProspect


class MementoDemo(Demo):

    @property
    def name(self) -> str:
        return "memento"

    @property
    def display_name(self) -> str:
        return "Memento"

    @property
    def description(self) -> str:
        return (
            "Without violating encapsulation, capture and externalize an object's "
            "internal state so that the object can be restored to this state later"
        )

    @property
    def category(self) -> str:
        return "behavioral"

    @property
    def participants(self):
        return {
            "Memento": ["Memento"],
            "Originator": ["SalesProspect"],
            "Caretaker": ["ProspectMemory"],
        }

    def compute(self):
        prospect = SalesProspect()
        prospect.name = "Noel van Halen"
        prospect.phone = "(412) 256-0990"
        prospect.budget = 25000.0

        memory = ProspectMemory()
        memory.memento = prospect.save_memento()

        # Continue changing originator
        prospect.name = "Leo Welch"
        prospect.phone = "(310) 209-7111"
        prospect.budget = 1000000.0

        prospect.restore_memento(memory.memento)
        return prospect
