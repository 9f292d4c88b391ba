"""Iterator demo - stepping through a collection of items."""

from lifetime.core import Demo

from .collection import Collection, Item


class IteratorDemo(Demo):

    @property
    def name(self) -> str:
        return "iterator"

    @property
    def display_name(self) -> str:
        return "Iterator"

    @property
    def description(self) -> str:
        return (
            "Provide a way to access the elements of an aggregate object sequentially "
            "without exposing its underlying representation"
        )

    @property
    def category(self) -> str:
        return "behavioral"

    @property
    def participants(self):
        return {
            "Iterator": ["Iterator"],
            "Aggregate": ["Collection"],
        }

    def get_config_schema(self):
        return {
            "size": {"type": "int", "default": 9, "description": "Number of items"},
            "step": {"type": "int", "default": 2, "description": "Iterator step"},
        }

    def compute(self):
        collection = Collection()
        for i in range(self.setting("size")):
            collection.add(Item(f"Item {i}"))

        iterator = collection.create_iterator(step=self.setting("step"))

        print("Iterating over collection:")

        item = iterator.first()
        while not iterator.is_done:
            print(item.name)
            item = iterator.next()
