"""A rectangular grid of tiles with placement, lookup and text export."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from tilequest.rectmath import EMPTY_RECT, Circle, Grid, Point, Rect
from tilequest.tile import TILE_UPDATE_RATE, DynamicTile, StaticTile, Tile, TileSource


@dataclass
class MapSpan:
    """Inclusive range of rows and columns covered by an area of a map."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0


def grid_coord(grid: Grid, cell_width: int, cell_height: int) -> Rect:
    """Pixel rectangle of ``grid`` in a grid of cells of the given size."""
    left = cell_width * grid.column
    top = cell_height * grid.row
    return Rect(left, top, left + cell_width, top + cell_height)


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(int(value)) // divisor
    return quotient if value >= 0 else -quotient


class TileMap:
    """A map of ``rows`` by ``columns`` square cells, each holding at most one tile."""

    def __init__(
        self, rows: int, columns: int, cell_length: int, name: str = "UnKnown"
    ) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError("a tile map needs at least one row and one column")
        if cell_length <= 0:
            raise ValueError("cell length must be positive")
        self.name = name
        self.rows = rows
        self.columns = columns
        self.cell_length = cell_length
        self.tiles: list[list[Optional[Tile]]] = [
            [None] * columns for _ in range(rows)
        ]

    @property
    def width(self) -> int:
        """Map width in pixels."""
        return self.columns * self.cell_length

    @property
    def height(self) -> int:
        """Map height in pixels."""
        return self.rows * self.cell_length

    @property
    def map_rect(self) -> Rect:
        """Rectangle covering the whole map."""
        return Rect(0, 0, self.width, self.height)

    @property
    def tile_count(self) -> int:
        """Number of cells in the map."""
        return self.rows * self.columns

    def grid_rect(self, grid: Grid) -> Rect:
        """Pixel rectangle of a cell, or an empty rectangle when it lies off the map."""
        if grid.column > self.columns or grid.row > self.rows:
            return EMPTY_RECT
        return grid_coord(grid, self.cell_length, self.cell_length)

    def span_rect(self, top_left: Grid, bottom_right: Grid) -> Rect:
        """Pixel rectangle covering the cells from ``top_left`` to ``bottom_right``."""
        cell = self.cell_length
        return Rect(
            top_left.column * cell,
            top_left.row * cell,
            (bottom_right.column + 1) * cell,
            (bottom_right.row + 1) * cell,
        )

    def grid_center(self, grid: Grid) -> Point:
        """Center of the tile placed at ``grid``."""
        tile = self.get_tile(grid.row, grid.column)
        if tile is None:
            raise LookupError(f"no tile at row {grid.row}, column {grid.column}")
        return tile.center()

    def get_tile(self, row: int, column: int) -> Optional[Tile]:
        """Tile at a cell, or None when the cell is empty or off the map."""
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            return None
        return self.tiles[row][column]

    def set_tile(
        self,
        grid: Grid,
        source: TileSource,
        tile_type: Optional[int] = None,
        obstacle: Optional[int] = None,
    ) -> Optional[Tile]:
        """Place a tile made from ``source`` at ``grid`` and return it.

        Without a type and obstacle level the source's own are used, and a cell
        already holding a tile of the same source is left as it is. Cells off the
        map are ignored and give None.
        """
        if source is None:
            raise ValueError("a tile needs a tile source")
        if not (0 <= grid.row < self.rows and 0 <= grid.column < self.columns):
            return None
        current = self.tiles[grid.row][grid.column]
        keep_attributes = tile_type is None and obstacle is None
        if keep_attributes and current is not None and current.source is source:
            return current
        rect = self.grid_rect(grid)
        tile: Tile
        if source.multi:
            tile = DynamicTile(
                grid, rect, source, tile_type, obstacle, rate=TILE_UPDATE_RATE
            )
        else:
            tile = StaticTile(grid, rect, source, tile_type, obstacle)
        self.tiles[grid.row][grid.column] = tile
        return tile

    def set_row(
        self, row: int, source: TileSource, tile_type: int, obstacle: int
    ) -> None:
        """Fill one row with tiles of ``source``."""
        if not 0 <= row < self.rows:
            return
        for column in range(self.columns):
            self.set_tile(Grid(row, column), source, tile_type, obstacle)

    def set_column(
        self, column: int, source: TileSource, tile_type: int, obstacle: int
    ) -> None:
        """Fill one column with tiles of ``source``."""
        if not 0 <= column < self.columns:
            return
        for row in range(self.rows):
            self.set_tile(Grid(row, column), source, tile_type, obstacle)

    def set_all(self, source: TileSource, tile_type: int, obstacle: int) -> None:
        """Fill every cell with tiles of ``source``."""
        for row in range(self.rows):
            for column in range(self.columns):
                self.set_tile(Grid(row, column), source, tile_type, obstacle)

    def set_edge(self, source: TileSource, tile_type: int, obstacle: int) -> None:
        """Fill the outer border of the map with tiles of ``source``."""
        self.set_row(0, source, tile_type, obstacle)
        self.set_row(self.rows - 1, source, tile_type, obstacle)
        self.set_column(0, source, tile_type, obstacle)
        self.set_column(self.columns - 1, source, tile_type, obstacle)

    def rect_span(self, rect: Rect) -> MapSpan:
        """Cells covered by ``rect``, clamped to the map."""
        cell = self.cell_length
        left = max(_trunc_div(rect.left, cell), 0)
        top = max(_trunc_div(rect.top, cell), 0)
        right = _trunc_div(rect.right, cell)
        bottom = _trunc_div(rect.bottom, cell)
        if right < 0 or right > self.columns - 1:
            right = self.columns - 1
        if bottom < 0 or bottom > self.rows - 1:
            bottom = self.rows - 1
        return MapSpan(left, top, right, bottom)

    def circle_span(self, circle: Circle) -> MapSpan:
        """Cells covered by the bounding box of ``circle``."""
        cx, cy, r = circle.center.x, circle.center.y, circle.radius
        return self.rect_span(Rect(int(cx - r), int(cy - r), int(cx + r), int(cy + r)))

    def tile_at_point(self, x: float, y: float) -> Optional[Tile]:
        """Tile under a pixel position, or None off the map or on an empty cell."""
        if x < 0 or y < 0:
            return None
        column = int(x // self.cell_length)
        row = int(y // self.cell_length)
        if column >= self.columns or row >= self.rows:
            return None
        return self.tiles[row][column]

    def grid_at(self, x: int, y: int) -> Optional[Grid]:
        """Cell holding a pixel position, or None when it is beyond the map."""
        row = _trunc_div(y, self.cell_length)
        column = _trunc_div(x, self.cell_length)
        if row < 0 or column < 0 or row > self.rows or column > self.columns:
            return None
        return Grid(row, column)

    def mark_obstacle(self, rect: Rect) -> None:
        """Flag every tile under ``rect`` as holding an obstacle."""
        span = self.rect_span(rect)
        for row in range(span.top, span.bottom + 1):
            for column in range(span.left, span.right + 1):
                tile = self.tiles[row][column]
                if tile is not None:
                    tile.mark_obstacle()

    def dumps(self) -> str:
        """The map in its text file format."""
        lines = [
            "*MAPNAME",
            f'\t"{self.name}"',
            "{",
            f"\t*CELLWIDTH\t{self.cell_length}",
            f"\t*CELLHEIGHT\t{self.cell_length}",
            f"\t*MAPROW\t{self.rows}",
            f"\t*MAPCOLUMN\t{self.columns}",
            "\t*TILEDATA",
            "{",
        ]
        for row, cells in enumerate(self.tiles):
            for column, tile in enumerate(cells):
                if tile is not None:
                    lines.append(f'\t*TILENAME\t"{tile.name}"')
                    lines.append(f"\t*TILEPOS\t{row}\t{column}")
                    lines.append("")
        lines.append("}")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def save(self, path: Union[str, Path]) -> None:
        """Write the map to ``path`` in its text file format."""
        Path(path).write_text(self.dumps(), encoding="utf-8")