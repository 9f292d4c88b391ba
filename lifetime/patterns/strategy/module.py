"""Strategy demo - sorting students with interchangeable algorithms."""

from lifetime.core import Demo

from .sorting import SortedList, get_strategy


class StrategyDemo(Demo):

    @property
    def name(self) -> str:
        return "strategy"

    @property
    def display_name(self) -> str:
        return "Strategy"

    @property
    def description(self) -> str:
        return (
            "Define a family of algorithms, encapsulate each one, and make them "
            "interchangeable"
        )

    @property
    def category(self) -> str:
        return "behavioral"

    @property
    def participants(self):
        return {
            "Strategy": ["SortStrategy"],
            "ConcreteStrategy": ["QuickSort", "ShellSort", "MergeSort"],
            "Context": ["SortedList"],
        }

    def get_config_schema(self):
        return {
            "students": {
                "type": "list",
                "default": ["Samuel", "Jimmy", "Sandra", "Vivek", "Anna"],
                "description": "Names to sort",
            },
            "strategies": {
                "type": "list",
                "default": ["quick", "shell", "merge"],
                "description": "Strategies applied in order",
            },
        }

    def compute(self):
        students = SortedList()
        for name in self.setting("students"):
            students.add(name)

        for strategy in self.setting("strategies"):
            students.set_sort_strategy(get_strategy(strategy))
            students.sort()
