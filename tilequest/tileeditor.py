"""Palette editor for naming tiles of a sheet and setting their type and obstacle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

from tilequest.rectmath import Grid, Point, Rect, create_rect
from tilequest.tile import Tile, TileSheetInfo, TileSource, create_tile

PALETTE_ROWS = 10
PALETTE_COLUMNS = 10
PALETTE_SLOTS = PALETTE_ROWS * PALETTE_COLUMNS

NAME_INPUT_LIMIT = 20
NUMBER_INPUT_LIMIT = 3


class SettingMode(Enum):
    """What the typed input is applied to."""

    NONE = ""
    TILE_NAME = "Set: TileName"
    SHEET_NAME = "Set: TileSheet"
    TILE_TYPE = "Set: Type"
    TILE_OBSTACLE = "Set: Obstacle"


@dataclass
class TileSlot:
    """A cell of the palette, optionally holding a tile."""

    rect: Rect
    tile: Optional[Tile] = None
    source: Optional[TileSource] = None


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


class TileEditor:
    """Shows every tile of one sheet in pages of a 10 by 10 palette."""

    def __init__(
        self,
        slot_size: int,
        rows: int,
        columns: int,
        sheet_name: str,
        paths: Sequence[str],
        screen_size: tuple[int, int],
    ) -> None:
        if not paths:
            raise ValueError("a tile sheet needs at least one bitmap path")
        if slot_size <= 0:
            raise ValueError("slot size must be positive")
        self.slot_size = slot_size
        self.sheet_rows = rows
        self.sheet_columns = columns
        self.paths = list(paths)
        self.sheet = TileSheetInfo(sheet_name, frame_count=len(self.paths))
        self.width = PALETTE_COLUMNS * slot_size
        self.height = PALETTE_ROWS * slot_size
        screen_w, screen_h = screen_size
        self.draw_rect = create_rect(
            Point(screen_w // 2, screen_h // 2), self.width, self.height
        )
        self.tile_count = rows * columns
        self.max_page = self.tile_count // PALETTE_SLOTS
        self.current_page = 0
        self.selected_page = 0
        self.selected_row = 0
        self.selected_column = 0
        self.mode = SettingMode.NONE
        self.guide = ""
        self.input_buffer = ""
        self.pages: list[list[list[TileSlot]]] = [
            [
                [self._slot_rect_slot(r, c) for c in range(PALETTE_COLUMNS)]
                for r in range(PALETTE_ROWS)
            ]
            for _ in range(self.max_page + 1)
        ]
        for index, slot in zip(range(self.tile_count), self._flat_slots()):
            name = f"{self.sheet.name}{index}"
            source = TileSource(Grid(*divmod(index, columns)), self.sheet, name=name)
            slot.source = source
            slot.tile = create_tile(Grid(0, 0), slot.rect, source, source.name)

    def _slot_rect_slot(self, row: int, column: int) -> TileSlot:
        left = self.draw_rect.left
        top = self.draw_rect.top
        size = self.slot_size
        return TileSlot(
            Rect(
                column * size + left,
                row * size + top,
                (column + 1) * size + left,
                (row + 1) * size + top,
            )
        )

    def _flat_slots(self) -> Iterator[TileSlot]:
        for page in self.pages:
            for row in page:
                yield from row

    def slot(self, page: int, row: int, column: int) -> TileSlot:
        """The palette slot at ``page``, ``row``, ``column``."""
        if not 0 <= page <= self.max_page:
            raise IndexError(f"page {page} out of range 0..{self.max_page}")
        if not (0 <= row < PALETTE_ROWS and 0 <= column < PALETTE_COLUMNS):
            raise IndexError(f"slot {row}, {column} is outside the palette")
        return self.pages[page][row][column]

    @property
    def selected_slot(self) -> TileSlot:
        """The slot currently selected."""
        return self.slot(self.selected_page, self.selected_row, self.selected_column)

    def _clamp(self, value: int, limit: int) -> int:
        # Negative positions wrap around as unsigned values and land on the last cell.
        if value < 0 or value >= limit:
            return limit - 1
        return value

    def row_at(self, y: int) -> int:
        """Palette row under screen coordinate ``y``."""
        return self._clamp(
            _trunc_div(y - self.draw_rect.top, self.slot_size), PALETTE_ROWS
        )

    def column_at(self, x: int) -> int:
        """Palette column under screen coordinate ``x``."""
        return self._clamp(
            _trunc_div(x - self.draw_rect.left, self.slot_size), PALETTE_COLUMNS
        )

    def select_at(self, x: int, y: int) -> bool:
        """Select the tile under a click on the current page; False on an empty slot."""
        row = self.row_at(y)
        column = self.column_at(x)
        if self.pages[self.current_page][row][column].tile is None:
            return False
        self.selected_row = row
        self.selected_column = column
        self.selected_page = self.current_page
        return True

    def return_to_default_mode(self) -> None:
        """Leave any setting mode and clear guide and input."""
        self.mode = SettingMode.NONE
        self.guide = ""
        self.input_buffer = ""

    def next_page(self) -> int:
        """Show the next palette page, wrapping to the first; return its index."""
        self.return_to_default_mode()
        self.current_page = 0 if self.current_page == self.max_page else self.current_page + 1
        return self.current_page

    def set_mode(self, mode: SettingMode) -> None:
        """Switch the setting mode, clearing the input."""
        self.mode = mode
        self.guide = mode.value
        self.input_buffer = ""

    def type_input(self, text: str) -> str:
        """Append typed characters allowed by the mode; return the buffer."""
        if self.mode in (SettingMode.TILE_NAME, SettingMode.SHEET_NAME):
            limit = NAME_INPUT_LIMIT
            allowed = text
        elif self.mode in (SettingMode.TILE_TYPE, SettingMode.TILE_OBSTACLE):
            limit = NUMBER_INPUT_LIMIT
            allowed = "".join(c for c in text if c.isdigit())
        else:
            return self.input_buffer
        for char in allowed:
            if len(self.input_buffer) >= limit:
                break
            self.input_buffer += char
        return self.input_buffer

    def backspace(self) -> str:
        """Drop the last typed character; return the buffer."""
        self.input_buffer = self.input_buffer[:-1]
        return self.input_buffer

    def _target_source(self) -> TileSource:
        slot = self.pages[self.current_page][self.selected_row][self.selected_column]
        if slot.source is None:
            raise LookupError("the selected slot holds no tile")
        return slot.source

    def _number(self) -> int:
        if not self.input_buffer:
            raise ValueError("no number has been typed")
        return int(self.input_buffer)

    def commit(self) -> None:
        """Apply the typed input to the selected tile or to the sheet."""
        if self.mode is SettingMode.TILE_NAME:
            self._target_source().name = self.input_buffer
        elif self.mode is SettingMode.SHEET_NAME:
            self.sheet.name = self.input_buffer
        elif self.mode is SettingMode.TILE_TYPE:
            self._target_source().tile_type = self._number()
        elif self.mode is SettingMode.TILE_OBSTACLE:
            self._target_source().obstacle = self._number()

    def format_tiles(self) -> str:
        """Tile definitions of the palette in the tile file format."""
        parts: list[str] = []
        for slot in self._flat_slots():
            if slot.tile is None or slot.source is None:
                break
            source = slot.source
            parts.append(
                "*TILEDATA\n"
                "{\n"
                f'\t*TILENAME\t"{source.name}"\n'
                f'\t*REFTILESHEET\t"{self.sheet.name}"\n'
                f"\t*REFPOSITION\t{source.grid.row}\t{source.grid.column}\n"
                f"\t*TILETYPE\t{source.tile_type}\n"
                f"\t*TILEOBSTACLE\t{source.obstacle}\n"
                "}\n"
            )
        return "".join(parts)

    def format_sheet(self) -> str:
        """The sheet description in the tile sheet file format."""
        lines = [
            "*TILESHEETDATA\n",
            "{\n",
            f'\t*TILESHEET\t"{self.sheet.name}"\n',
            "\t*FILEPATHGROUP\n",
            "\t{\n",
        ]
        lines += [f'\t\t*FILEPATH\t"{path}"\n' for path in self.paths]
        lines += [
            "\t}\n",
            f"\t*SHEETSIZE\t{self.sheet_rows}\t{self.sheet_columns}\n",
            "}\n\n",
        ]
        return "".join(lines)

    def save_tiles(self, path: Union[str, Path]) -> None:
        """Write the tile definitions to ``path``."""
        self.return_to_default_mode()
        Path(path).write_text(self.format_tiles(), encoding="utf-8")
        self.guide = "Save Tiles Suceed"

    def save_sheet(self, path: Union[str, Path]) -> None:
        """Write the sheet description to ``path``."""
        self.return_to_default_mode()
        Path(path).write_text(self.format_sheet(), encoding="utf-8")
        self.guide = "Save TileSheet Suceed"