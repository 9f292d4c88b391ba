"""Colors created by cloning registered prototypes."""

import copy
import logging
from abc import ABC, abstractmethod
from typing import Dict

logger = logging.getLogger(__name__)


class ColorPrototype(ABC):
    """Declares the cloning interface."""

    @abstractmethod
    def clone(self) -> "ColorPrototype":
        pass


class Color(ColorPrototype):
    def __init__(self, red: int, green: int, blue: int):
        self.red = red
        self.green = green
        self.blue = blue

    def clone(self) -> "Color":
        """Create a shallow copy."""
        print(f"Cloning color RGB: {self.red:>3},{self.green:>3},{self.blue:>3}")
        return copy.copy(self)

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return (self.red, self.green, self.blue) == (other.red, other.green, other.blue)

    def __repr__(self):
        return f"Color({self.red}, {self.green}, {self.blue})"


class ColorManager:
    """Prototype manager keyed by color name."""

    def __init__(self):
        self._colors: Dict[str, ColorPrototype] = {}

    def __getitem__(self, key: str) -> ColorPrototype:
        return self._colors[key]

    def __setitem__(self, key: str, value: ColorPrototype):
        if key in self._colors:
            raise KeyError(f"Color '{key}' is already registered")
        self._colors[key] = value
        logger.debug(f"Registered color prototype: {key}")

    def __contains__(self, key: str) -> bool:
        return key in self._colors

    def __len__(self) -> int:
        return len(self._colors)
