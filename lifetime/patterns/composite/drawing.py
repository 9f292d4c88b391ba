"""A drawing made of primitive and composite elements."""

from abc import ABC, abstractmethod
from typing import List


class DrawingElement(ABC):
    """Component: the common interface of leaves and branches."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def add(self, element: "DrawingElement"):
        pass

    @abstractmethod
    def remove(self, element: "DrawingElement"):
        pass

    @abstractmethod
    def display(self, indent: int):
        pass


class PrimitiveElement(DrawingElement):
    """Leaf element; has no children."""

    def add(self, element: DrawingElement):
        print("Cannot add to a PrimitiveElement")

    def remove(self, element: DrawingElement):
        print("Cannot remove from a PrimitiveElement")

    def display(self, indent: int):
        print(f"{'-' * indent} {self.name}")


class CompositeElement(DrawingElement):
    """Branch element holding child elements."""

    def __init__(self, name: str):
        super().__init__(name)
        self.elements: List[DrawingElement] = []

    def add(self, element: DrawingElement):
        self.elements.append(element)

    def remove(self, element: DrawingElement):
        self.elements.remove(element)

    def display(self, indent: int):
        print(f"{'-' * indent}+ {self.name}")
        for element in self.elements:
            element.display(indent + 2)
