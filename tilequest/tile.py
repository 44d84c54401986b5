"""Map tiles: static and animated cells backed by a tile source."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from tilequest.rectmath import Grid, Point, Rect, rect_center

TILE_UPDATE_RATE = 0.75


@dataclass
class TileSheetInfo:
    """What a tile needs to know about the sheet its image comes from."""

    name: str
    frame_count: int = 1


@dataclass(eq=False)
class TileSource:
    """Description of a tile kind: its sheet position, type and obstacle level."""

    grid: Grid
    sheet: TileSheetInfo
    tile_type: int = 0
    obstacle: int = 0
    name: str = "unDefine"
    multi: bool = field(init=False)

    def __post_init__(self) -> None:
        self.multi = self.sheet.frame_count > 1


class Tile:
    """A tile placed at a grid cell of a map."""

    def __init__(
        self,
        grid: Grid,
        rect: Rect,
        source: TileSource,
        tile_type: Optional[int] = None,
        obstacle: Optional[int] = None,
    ) -> None:
        self.grid = grid
        self.rect = rect
        self.source = source
        self.id = (grid.row << 16) | grid.column
        self.tile_type = source.tile_type if tile_type is None else tile_type
        self.obstacle_level = source.obstacle if obstacle is None else obstacle
        self.includes_obstacle = bool(self.obstacle_level)

    @property
    def name(self) -> str:
        """Name of the tile's source."""
        return self.source.name

    @property
    def sheet_name(self) -> str:
        """Name of the sheet the tile's image comes from."""
        return self.source.sheet.name

    def center(self) -> Point:
        """Center of the tile's rectangle."""
        return rect_center(self.rect)

    def mark_obstacle(self) -> None:
        """Flag the tile as holding an obstacle."""
        self.includes_obstacle = True

    def frame_index(self) -> int:
        """Index of the sheet frame the tile shows."""
        return 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.grid!r}, {self.name!r})"


class StaticTile(Tile):
    """A tile that always shows its first frame."""


class DynamicTile(Tile):
    """A tile cycling through the frames of its sheet at a fixed rate."""

    def __init__(
        self,
        grid: Grid,
        rect: Rect,
        source: TileSource,
        tile_type: Optional[int] = None,
        obstacle: Optional[int] = None,
        rate: float = TILE_UPDATE_RATE,
    ) -> None:
        super().__init__(grid, rect, source, tile_type, obstacle)
        self.rate = rate
        self.index = 0
        self.max_index = source.sheet.frame_count
        self._last: Optional[float] = None

    def update(self, now: float) -> bool:
        """Advance the frame if ``rate`` seconds passed since the last step."""
        if self._last is None:
            self._last = now
            return False
        if now - self._last < self.rate:
            return False
        self._last = now
        self.index += 1
        if self.index >= self.max_index:
            self.index = 0
        return True

    def frame_index(self) -> int:
        return self.index


def create_tile(
    grid: Grid, rect: Rect, source: TileSource, name: str = "UnKnown"
) -> Tile:
    """Build a static or animated tile for ``source``, naming the source ``name``."""
    if source is None:
        raise ValueError("a tile needs a tile source")
    tile: Tile
    if source.multi:
        tile = DynamicTile(grid, rect, source, rate=TILE_UPDATE_RATE)
    else:
        tile = StaticTile(grid, rect, source)
    source.name = name
    return tile