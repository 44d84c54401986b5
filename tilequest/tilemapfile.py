"""Reading tile maps from their text file format."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping, Optional, Union

from tilequest.rectmath import Grid
from tilequest.tile import TileSource
from tilequest.tilemap import TileMap

_LEXEME_PATTERN = re.compile(r'"([^"]*)"|([{}])|([^\s{}"]+)')

TileLookup = Union[Callable[[str], Optional[TileSource]], Mapping[str, TileSource]]


@dataclass
class TileRef:
    """A named tile placed at a cell."""

    name: str = ""
    row: int = 0
    column: int = 0


@dataclass(frozen=True)
class _Lexeme:
    text: str
    quoted: bool


class _Cursor:
    def __init__(self, text: str) -> None:
        self._lexemes = [
            _Lexeme(m.group(1), True) if m.group(1) is not None
            else _Lexeme(m.group(2) or m.group(3), False)
            for m in _LEXEME_PATTERN.finditer(text)
        ]
        self._pos = 0

    def find(self, keyword: str) -> None:
        while self._pos < len(self._lexemes):
            lexeme = self._lexemes[self._pos]
            self._pos += 1
            if not lexeme.quoted and lexeme.text == keyword:
                return
        raise ValueError(f"missing {keyword!r} in tile map data")

    def find_in_block(self, keyword: str) -> bool:
        while self._pos < len(self._lexemes):
            lexeme = self._lexemes[self._pos]
            self._pos += 1
            if not lexeme.quoted:
                if lexeme.text == "}":
                    return False
                if lexeme.text == keyword:
                    return True
        return False

    def next_text(self) -> str:
        if self._pos >= len(self._lexemes):
            raise ValueError("unexpected end of tile map data")
        lexeme = self._lexemes[self._pos]
        self._pos += 1
        return lexeme.text

    def next_int(self) -> int:
        text = self.next_text()
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"expected a number, got {text!r}") from None


@dataclass
class TileMapData:
    """Contents of a tile map file."""

    map_name: str = ""
    cell_width: int = 0
    cell_height: int = 0
    rows: int = 0
    columns: int = 0
    tiles: list[TileRef] = field(default_factory=list)

    @classmethod
    def loads(cls, text: str) -> TileMapData:
        """Parse tile map text."""
        cursor = _Cursor(text)
        data = cls()
        cursor.find("*MAPNAME")
        data.map_name = cursor.next_text()
        cursor.find("{")
        cursor.find("*CELLWIDTH")
        data.cell_width = cursor.next_int()
        cursor.find("*CELLHEIGHT")
        data.cell_height = cursor.next_int()
        cursor.find("*MAPROW")
        data.rows = cursor.next_int()
        cursor.find("*MAPCOLUMN")
        data.columns = cursor.next_int()
        cursor.find("*TILEDATA")
        cursor.find("{")
        while cursor.find_in_block("*TILENAME"):
            name = cursor.next_text()
            cursor.find("*TILEPOS")
            row = cursor.next_int()
            column = cursor.next_int()
            data.tiles.append(TileRef(name, row, column))
        return data

    @classmethod
    def load(cls, path: Union[str, Path]) -> TileMapData:
        """Read and parse a tile map file."""
        return cls.loads(Path(path).read_text(encoding="utf-8"))

    def create_map(self, lookup: TileLookup) -> TileMap:
        """Build a map, resolving tile names to sources through ``lookup``."""
        find = lookup.get if isinstance(lookup, Mapping) else lookup
        tilemap = TileMap(self.rows, self.columns, self.cell_width)
        for ref in self.tiles:
            source = find(ref.name)
            if source is None:
                raise LookupError(f"unknown tile {ref.name!r}")
            tilemap.set_tile(Grid(ref.row, ref.column), source)
        return tilemap