"""Bitmap font glyphs and left-to-right placement of text."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from tilequest.rectmath import Rect

GLYPH_DIRECTORY = "UI/FontSpilt/"


class Align(Enum):
    """Vertical placement of a glyph within its line."""

    MIDDLE = "middle"
    TOP = "top"
    BOTTOM = "bottom"


def dest_rect(
    align: Align, left: int, top: int, bottom: int, width: int, height: int
) -> Rect:
    """Rectangle for a glyph of the given size placed in the line from top to bottom."""
    if align is Align.BOTTOM:
        upper, lower = bottom - height, bottom
    elif align is Align.MIDDLE:
        middle = top + ((bottom - top) >> 1)
        half = height >> 1
        upper, lower = middle - half, middle + half
    else:
        upper, lower = top, top + height
    return Rect(left, upper, left + width, lower)


def glyph_path(bitmap: str) -> str:
    """Path of the bitmap file holding a glyph."""
    return f"{GLYPH_DIRECTORY}{bitmap}.bmp"


def default_glyph_specs() -> list[tuple[str, str, Align]]:
    """The characters of the game font with their bitmap names and alignment."""
    specs: list[tuple[str, str, Align]] = []
    specs += [(c, c, Align.BOTTOM) for c in "0123456789"]
    specs += [(chr(code), chr(code), Align.BOTTOM) for code in range(65, 91)]
    specs += [(chr(code), "s" + chr(code), Align.BOTTOM) for code in range(97, 123)]
    specs += [(c, c, Align.BOTTOM) for c in "#$%&@"]
    specs += [
        (" ", "_Blank", Align.BOTTOM),
        ("+", "+", Align.MIDDLE),
        ("-", "-", Align.MIDDLE),
        ("*", "_Star", Align.TOP),
        ("/", "_Slash", Align.MIDDLE),
        ("=", "_Equal", Align.MIDDLE),
        ("<", "_Less", Align.MIDDLE),
        (">", "_Large", Align.MIDDLE),
        ("~", "~", Align.MIDDLE),
        (".", "_Period", Align.BOTTOM),
        (",", "_Comma", Align.BOTTOM),
        ("!", "_Exc", Align.MIDDLE),
        ("?", "_Que", Align.BOTTOM),
        (":", "_Colon", Align.MIDDLE),
        (";", "_Semi", Align.MIDDLE),
        ("_", "_", Align.BOTTOM),
        ('"', "_Quote", Align.TOP),
        ("(", "_ParL", Align.MIDDLE),
        (")", "_ParR", Align.MIDDLE),
        ("[", "_SqbL", Align.MIDDLE),
        ("]", "_SqbR", Align.MIDDLE),
    ]
    return specs


@dataclass
class Glyph:
    """One character image of a bitmap font."""

    path: str
    base_width: int
    base_height: int
    align: Align = Align.BOTTOM
    scale_x: float = 1.0
    scale_y: float = 1.0
    width: int = field(init=False)
    height: int = field(init=False)

    def __post_init__(self) -> None:
        self.width = int(self.base_width * self.scale_x)
        self.height = int(self.base_height * self.scale_y)

    def set_scale(self, x: float, y: float) -> None:
        """Scale the glyph relative to its bitmap size."""
        self.scale_x = x
        self.scale_y = y
        self.width = int(self.base_width * x)
        self.height = int(self.base_height * y)

    def place(self, left: int, top: int, bottom: int) -> Rect:
        """Rectangle the glyph occupies when drawn at ``left`` in a line."""
        return dest_rect(self.align, left, top, bottom, self.width, self.height)


class GlyphTable:
    """Glyphs of a font, keyed by character."""

    def __init__(self) -> None:
        self.glyphs: dict[str, Glyph] = {}

    def insert(
        self,
        char: str,
        bitmap: str,
        width: int,
        height: int,
        align: Align = Align.BOTTOM,
    ) -> Glyph:
        """Add or replace the glyph for ``char`` drawn from bitmap ``bitmap``."""
        if len(char) != 1:
            raise ValueError(f"a glyph stands for one character, not {char!r}")
        glyph = Glyph(glyph_path(bitmap), width, height, align)
        self.glyphs[char] = glyph
        return glyph

    def get(self, char: str) -> Optional[Glyph]:
        """Glyph for ``char``, or None."""
        return self.glyphs.get(char)

    def font_width(self, char: str) -> int:
        """Width of the glyph for ``char``, or 0 when the font lacks it."""
        glyph = self.glyphs.get(char)
        return glyph.width if glyph is not None else 0

    def layout(self, text: str, rect: Rect) -> list[tuple[str, Rect]]:
        """Place ``text`` left to right in ``rect``, skipping unknown characters.

        Placement stops once the pen has moved past the right edge.
        """
        placed: list[tuple[str, Rect]] = []
        left = rect.left
        for char in text:
            glyph = self.glyphs.get(char)
            if glyph is None:
                continue
            placed.append((char, glyph.place(left, rect.top, rect.bottom)))
            left += glyph.width
            if left > rect.right:
                break
        return placed

    def __contains__(self, char: object) -> bool:
        return char in self.glyphs

    def __len__(self) -> int:
        return len(self.glyphs)