"""Prototype demo - cloning user-defined colors."""

from lifetime.core import Demo

from .colors import Color, ColorManager

STANDARD_COLORS = {
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
}

PERSONAL_COLORS = {
    "angry": (255, 54, 0),
    "peace": (128, 211, 128),
    "flame": (211, 34, 20),
}


class PrototypeDemo(Demo):
    """New Color objects are created by copying pre-existing ones."""

    @property
    def name(self) -> str:
        return "prototype"

    @property
    def display_name(self) -> str:
        return "Prototype"

    @property
    def description(self) -> str:
        return (
            "Specify the kinds of objects to create using a prototypical instance, "
            "and create new objects by copying this prototype"
        )

    @property
    def category(self) -> str:
        return "creational"

    @property
    def participants(self):
        return {
            "Prototype": ["ColorPrototype"],
            "ConcretePrototype": ["Color"],
            "Client": ["ColorManager"],
        }

    def get_config_schema(self):
        return {
            "clone": {
                "type": "list",
                "default": ["red", "peace", "flame"],
                "description": "Colors the user clones",
            },
        }

    def compute(self):
        manager = ColorManager()

        for name, rgb in {**STANDARD_COLORS, **PERSONAL_COLORS}.items():
            manager[name] = Color(*rgb)

        return [manager[name].clone() for name in self.setting("clone")]
