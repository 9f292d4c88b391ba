"""Composite demo - a picture built from lines, circles and groups."""

from lifetime.core import Demo

from .drawing import CompositeElement, PrimitiveElement


class CompositeDemo(Demo):

    @property
    def name(self) -> str:
        return "composite"

    @property
    def display_name(self) -> str:
        return "Composite"

    @property
    def description(self) -> str:
        return (
            "Compose objects into tree structures to represent part-whole hierarchies, "
            "treating individual objects and compositions uniformly"
        )

    @property
    def category(self) -> str:
        return "structural"

    @property
    def participants(self):
        return {
            "Component": ["DrawingElement"],
            "Leaf": ["PrimitiveElement"],
            "Composite": ["CompositeElement"],
        }

    def compute(self):
        root = CompositeElement("Picture")
        root.add(PrimitiveElement("Red Line"))
        root.add(PrimitiveElement("Blue Circle"))
        root.add(PrimitiveElement("Green Box"))

        branch = CompositeElement("Two Circles")
        branch.add(PrimitiveElement("Black Circle"))
        branch.add(PrimitiveElement("White Circle"))
        root.add(branch)

        # Add and remove a PrimitiveElement
        line = PrimitiveElement("Yellow Line")
        root.add(line)
        root.remove(line)

        root.display(1)
