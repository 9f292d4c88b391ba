"""Visitor demo - raises and extra vacation for every employee."""

from lifetime.core import Demo

from .employees import Clerk, Director, Employees, IncomeVisitor, President, VacationVisitor


class VisitorDemo(Demo):

    @property
    def name(self) -> str:
        return "visitor"

    @property
    def display_name(self) -> str:
        return "Visitor"

    @property
    def description(self) -> str:
        return (
            "Represent an operation to be performed on the elements of an object "
            "structure without changing the classes of the elements"
        )

    @property
    def category(self) -> str:
        return "behavioral"

    @property
    def participants(self):
        return {
            "Visitor": ["Visitor"],
            "ConcreteVisitor": ["IncomeVisitor", "VacationVisitor"],
            "Element": ["Element"],
            "ConcreteElement": ["Employee"],
            "ObjectStructure": ["Employees"],
        }

    def compute(self):
        employees = Employees()
        employees.attach(Clerk())
        employees.attach(Director())
        employees.attach(President())

        employees.accept(IncomeVisitor())
        employees.accept(VacationVisitor())

        return employees
