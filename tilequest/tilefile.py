"""Reading tile definitions from their text file format."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

_LEXEME = re.compile(r'"([^"]*)"|([{}])|([^\s{}"]+)')

UNKNOWN = "_UnKnown_"


@dataclass
class TileData:
    """One tile definition: its name, where it sits on a sheet, type and obstacle."""

    tile_name: str = UNKNOWN
    ref_tile_sheet: str = UNKNOWN
    ref_row: int = 0
    ref_column: int = 0
    tile_type: int = 0
    tile_obstacle: int = 0


@dataclass(frozen=True)
class _Piece:
    text: str
    quoted: bool

    def is_word(self, word: str) -> bool:
        return not self.quoted and self.text == word


def _split(text: str) -> list[_Piece]:
    return [
        _Piece(m.group(1), True)
        if m.group(1) is not None
        else _Piece(m.group(2) or m.group(3), False)
        for m in _LEXEME.finditer(text)
    ]


class _Block:
    """Sequential reader over the pieces of one braced block."""

    def __init__(self, pieces: list[_Piece]) -> None:
        self._pieces = pieces
        self._pos = 0

    def find(self, keyword: str) -> None:
        while self._pos < len(self._pieces):
            piece = self._pieces[self._pos]
            self._pos += 1
            if piece.is_word(keyword):
                return
        raise ValueError(f"missing {keyword!r} in tile data block")

    def text(self) -> str:
        if self._pos >= len(self._pieces):
            raise ValueError("unexpected end of tile data block")
        piece = self._pieces[self._pos]
        self._pos += 1
        return piece.text

    def number(self) -> int:
        value = self.text()
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"expected a number, got {value!r}") from None


def _blocks(pieces: list[_Piece]) -> list[list[_Piece]]:
    blocks: list[list[_Piece]] = []
    stream = iter(pieces)
    for piece in stream:
        if not piece.is_word("*TILEDATA"):
            continue
        for opener in stream:
            if opener.is_word("{"):
                break
        else:
            raise ValueError("tile data block has no opening brace")
        body: list[_Piece] = []
        depth = 1
        for inner in stream:
            if inner.is_word("{"):
                depth += 1
            elif inner.is_word("}"):
                depth -= 1
                if depth == 0:
                    break
            body.append(inner)
        else:
            raise ValueError("tile data block has no closing brace")
        blocks.append(body)
    return blocks


def _parse_block(pieces: list[_Piece]) -> TileData:
    block = _Block(pieces)
    data = TileData()
    block.find("*TILENAME")
    data.tile_name = block.text()
    block.find("*REFTILESHEET")
    data.ref_tile_sheet = block.text()
    block.find("*REFPOSITION")
    data.ref_row = block.number()
    data.ref_column = block.number()
    block.find("*TILETYPE")
    data.tile_type = block.number()
    block.find("*TILEOBSTACLE")
    data.tile_obstacle = block.number()
    return data


def parse_tile_data(text: str) -> dict[str, TileData]:
    """Parse tile definitions, keyed by tile name in file order."""
    result: dict[str, TileData] = {}
    for body in _blocks(_split(text)):
        data = _parse_block(body)
        result[data.tile_name] = data
    return result


def load_tile_data(path: Union[str, Path]) -> dict[str, TileData]:
    """Read and parse a tile definition file."""
    return parse_tile_data(Path(path).read_text(encoding="utf-8"))