"""Adapter demo - compounds reading from a legacy chemical databank."""

from lifetime.core import Demo

from .chemicals import Compound, RichCompound


class AdapterDemo(Demo):

    @property
    def name(self) -> str:
        return "adapter"

    @property
    def display_name(self) -> str:
        return "Adapter"

    @property
    def description(self) -> str:
        return (
            "Convert the interface of a class into another interface clients expect, "
            "letting classes with incompatible interfaces work together"
        )

    @property
    def category(self) -> str:
        return "structural"

    @property
    def participants(self):
        return {
            "Target": ["Compound"],
            "Adapter": ["RichCompound"],
            "Adaptee": ["ChemicalDatabank"],
        }

    def compute(self):
        # Non-adapted chemical compound
        Compound("Unknown").display()

        for chemical in ("Water", "Benzene", "Ethanol"):
            RichCompound(chemical).display()
