"""Text built from a fixed-grid character sheet starting at the space character."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from tilequest.rectmath import Point, Rect, create_rect

FIRST_CHAR = 32


@dataclass(frozen=True)
class GlyphPlacement:
    """A character, its rectangle on the sheet and where it goes in the text image."""

    char: str
    source: Rect
    dest: Rect


@dataclass
class TextLayout:
    """Size of a rendered text image and the placement of each character."""

    width: int
    height: int
    placements: list[GlyphPlacement] = field(default_factory=list)


class TextSheet:
    """A bitmap font sheet of ``rows`` by ``columns`` equal character frames."""

    def __init__(
        self, width: int, height: int, rows: int, columns: int, color_key: int = 0
    ) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError("a text sheet needs at least one row and one column")
        self.width = width
        self.height = height
        self.rows = rows
        self.columns = columns
        self.color_key = color_key
        self.frame_width = width // columns
        self.frame_height = height // rows
        self.frame_count = rows * columns
        self.frames: list[Rect] = [
            Rect(
                column * self.frame_width,
                row * self.frame_height,
                (column + 1) * self.frame_width,
                (row + 1) * self.frame_height,
            )
            for row in range(rows)
            for column in range(columns)
        ]

    def frame_rect(self, char: str) -> Rect:
        """Sheet rectangle of ``char``; the first frame for characters not on the sheet."""
        frame = ord(char) - FIRST_CHAR
        if frame < 0 or frame >= self.frame_count:
            return self.frames[0]
        return self.frames[frame]

    def layout(
        self, text: str, max_chars_in_row: int, row_interval: int = 0
    ) -> TextLayout:
        """Lay ``text`` out in rows of at most ``max_chars_in_row`` characters."""
        if max_chars_in_row <= 0:
            raise ValueError("rows must hold at least one character")
        length = len(text)
        if length <= max_chars_in_row:
            columns, rows = length, 1
        else:
            columns, rows = max_chars_in_row, math.ceil(length / max_chars_in_row)
        fw, fh = self.frame_width, self.frame_height
        layout = TextLayout(columns * fw, (fh + row_interval) * rows)
        for index, char in enumerate(text):
            row, column = divmod(index, max_chars_in_row)
            if row == 0:
                top, bottom = 0, fh
            else:
                top = row * (fh + row_interval)
                bottom = (row + 1) * (fh + row_interval)
            dest = Rect(column * fw, top, (column + 1) * fw, bottom)
            layout.placements.append(GlyphPlacement(char, self.frame_rect(char), dest))
        return layout

    def single(self, char: str) -> GlyphPlacement:
        """Placement of one character filling an image of a single frame."""
        return GlyphPlacement(
            char, self.frame_rect(char), Rect(0, 0, self.frame_width, self.frame_height)
        )


class TextLabel:
    """A piece of text kept laid out on a sheet, rebuilt only when it changes."""

    def __init__(
        self,
        sheet: TextSheet,
        max_chars_in_row: int,
        row_interval: int = 0,
        text: str = "",
    ) -> None:
        self.sheet = sheet
        self.max_chars_in_row = max_chars_in_row
        self.row_interval = row_interval
        self.text = ""
        self.layout: Optional[TextLayout] = None
        self.width = 0
        self.height = 0
        if text:
            self.update_string(text)

    def update_string(self, text: str) -> bool:
        """Set the text; return True and lay it out again when it changed."""
        if text == self.text and self.layout is not None:
            return False
        if text == self.text:
            return False
        self.text = text
        self.layout = self.sheet.layout(text, self.max_chars_in_row, self.row_interval)
        self.width = self.layout.width
        self.height = self.layout.height
        return True

    def dest_rect(self, x: float, y: float) -> Rect:
        """Rectangle of the text image centred on ``x``, ``y``."""
        return create_rect(Point(int(x), int(y)), self.width, self.height)