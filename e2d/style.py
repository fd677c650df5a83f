"""Colours and fonts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_RED_SHIFT = 16
_GREEN_SHIFT = 8
_BLUE_SHIFT = 0


@dataclass
class Color:
    """An RGBA colour with components in the range 0..1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @staticmethod
    def from_rgb(rgb: int, alpha: float = 1.0) -> Color:
        """Build a colour from a 0xRRGGBB integer."""
        return Color(
            ((rgb >> _RED_SHIFT) & 0xFF) / 255.0,
            ((rgb >> _GREEN_SHIFT) & 0xFF) / 255.0,
            ((rgb >> _BLUE_SHIFT) & 0xFF) / 255.0,
            float(alpha),
        )


class FontWeight(IntEnum):
    Thin = 100
    ExtraLight = 200
    Light = 300
    Normal = 400
    Medium = 500
    Bold = 700
    ExtraBold = 800
    Black = 900
    ExtraBlack = 950


@dataclass
class Font:
    """A font description."""

    family: str = ""
    size: float = 22
    weight: int = FontWeight.Normal
    italic: bool = False