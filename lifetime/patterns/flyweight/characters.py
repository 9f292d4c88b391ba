"""Shared character glyphs for a text document."""

import logging
import string
from typing import Dict, NamedTuple

logger = logging.getLogger(__name__)


class GlyphMetrics(NamedTuple):
    width: int
    height: int
    ascent: int
    descent: int


DEFAULT_METRICS = GlyphMetrics(width=100, height=100, ascent=70, descent=0)

_METRICS: Dict[str, GlyphMetrics] = {
    "A": GlyphMetrics(width=120, height=100, ascent=70, descent=0),
    "B": GlyphMetrics(width=140, height=100, ascent=72, descent=0),
    "Z": GlyphMetrics(width=100, height=100, ascent=68, descent=0),
}


class Character:
    """Flyweight. Symbol and metrics are intrinsic; point size is extrinsic."""

    def __init__(self, symbol: str, metrics: GlyphMetrics):
        self.symbol = symbol
        self.width = metrics.width
        self.height = metrics.height
        self.ascent = metrics.ascent
        self.descent = metrics.descent

    def display(self, point_size: int):
        print(f"\t{self.symbol} (point size {point_size})")


class CharacterFactory:
    """Creates characters on first use and shares them afterwards."""

    def __init__(self):
        self._characters: Dict[str, Character] = {}

    def get_character(self, key: str) -> Character:
        character = self._characters.get(key)
        if character is None:
            if key not in string.ascii_uppercase or len(key) != 1:
                raise ValueError(f"No glyph for character {key!r}")
            logger.debug(f"Creating flyweight for {key}")
            character = Character(key, _METRICS.get(key, DEFAULT_METRICS))
            self._characters[key] = character
        return character

    def __len__(self) -> int:
        return len(self._characters)
