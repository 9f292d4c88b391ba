"""Flyweight demo - a document sharing one object per character."""

from lifetime.core import Demo

from .characters import CharacterFactory


class FlyweightDemo(Demo):
    """A few Character objects are shared by every position of a document."""

    @property
    def name(self) -> str:
        return "flyweight"

    @property
    def display_name(self) -> str:
        return "Flyweight"

    @property
    def description(self) -> str:
        return "Use sharing to support large numbers of fine-grained objects efficiently"

    @property
    def category(self) -> str:
        return "structural"

    @property
    def participants(self):
        return {
            "Flyweight": ["Character"],
            "FlyweightFactory": ["CharacterFactory"],
        }

    def get_config_schema(self):
        return {
            "document": {
                "type": "str",
                "default": "AAZZBBZB",
                "description": "Uppercase text to render",
            },
            "point_size": {
                "type": "int",
                "default": 10,
                "description": "Point size before the first character",
            },
        }

    def compute(self):
        factory = CharacterFactory()

        # extrinsic state
        point_size = self.setting("point_size")

        for symbol in self.setting("document"):
            point_size += 1
            factory.get_character(symbol).display(point_size)

        return factory
