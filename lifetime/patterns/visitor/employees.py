"""Employees visited by HR operations."""

from abc import ABC, abstractmethod
from typing import List

from lifetime.formatting import format_currency


class Visitor(ABC):
    @abstractmethod
    def visit(self, element: "Element"):
        pass


class Element(ABC):
    @abstractmethod
    def accept(self, visitor: Visitor):
        pass


class Employee(Element):
    def __init__(self, name: str, income: float, vacation_days: int):
        self.name = name
        self.income = income
        self.vacation_days = vacation_days

    def accept(self, visitor: Visitor):
        visitor.visit(self)


class Clerk(Employee):
    def __init__(self):
        super().__init__("Hank", 25000.0, 14)


class Director(Employee):
    def __init__(self):
        super().__init__("Elly", 35000.0, 16)


class President(Employee):
    def __init__(self):
        super().__init__("Dick", 45000.0, 21)


class IncomeVisitor(Visitor):
    """Gives a 10% pay raise."""

    def visit(self, element: Element):
        element.income *= 1.10
        print(
            f"{type(element).__name__} {element.name}'s new income: "
            f"{format_currency(element.income)}"
        )


class VacationVisitor(Visitor):
    """Gives 3 extra vacation days."""

    def visit(self, element: Element):
        element.vacation_days += 3
        print(f"{type(element).__name__} {element.name}'s new vacation days: {element.vacation_days}")


class Employees:
    """Object structure."""

    def __init__(self):
        self._employees: List[Employee] = []

    def attach(self, employee: Employee):
        self._employees.append(employee)

    def detach(self, employee: Employee):
        self._employees.remove(employee)

    def accept(self, visitor: Visitor):
        for employee in self._employees:
            employee.accept(visitor)
        print()

    def __iter__(self):
        return iter(self._employees)
