"""Frame rectangles of sprite animations: single strips and multi-row sheets."""

from __future__ import annotations

from typing import Optional

from tilequest.rectmath import Point, Rect, create_rect, rect_height, rect_width


class SequenceFrames:
    """Source rectangles of an animation laid out as one horizontal strip."""

    def __init__(
        self,
        width: int,
        height: int,
        max_frame: int,
        hscale: float = 1.0,
        vscale: float = 1.0,
        cell_width: Optional[int] = None,
        cell_height: Optional[int] = None,
    ) -> None:
        if max_frame <= 0:
            raise ValueError("an animation needs at least one frame")
        self.width = width
        self.height = height
        self.max_frame = max_frame
        self.hscale = hscale
        self.vscale = vscale
        self.cell_width = width // max_frame if cell_width is None else cell_width
        self.cell_height = height if cell_height is None else cell_height
        self.rects: list[Rect] = [self.source_rect(i) for i in range(max_frame)]

    def source_rect(self, frame: int) -> Rect:
        """Default strip rectangle of ``frame``."""
        return Rect(
            self.cell_width * frame,
            0,
            self.cell_width * (frame + 1),
            self.cell_height,
        )

    def _check(self, index: int) -> None:
        if not 0 <= index < self.max_frame:
            raise IndexError(f"frame {index} out of range 0..{self.max_frame - 1}")

    def set_source_rect(self, index: int, rect: Rect) -> None:
        """Use ``rect`` as the source of frame ``index``."""
        self._check(index)
        self.rects[index] = rect

    def frame_rect(self, frame: int) -> Rect:
        """Current source rectangle of ``frame``."""
        self._check(frame)
        return self.rects[frame]

    def dest_rect(self, point: Point, frame: int, scaled: bool = False) -> Rect:
        """Rectangle centred on ``point`` to draw ``frame`` into."""
        source = self.frame_rect(frame)
        width = rect_width(source)
        height = rect_height(source)
        if scaled:
            return create_rect(point, int(width * self.hscale), int(height * self.vscale))
        return create_rect(point, width, height)

    def __len__(self) -> int:
        return self.max_frame


class SpriteSheet:
    """A grid of animation frames; each row is one animation."""

    def __init__(
        self,
        width: int,
        height: int,
        rows: int,
        columns: int,
        hscale: float = 1.0,
        vscale: float = 1.0,
    ) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError("a sprite sheet needs at least one row and one column")
        self.width = width
        self.height = height
        self.rows = rows
        self.columns = columns
        self.cell_height = height // rows
        self.cell_width = width // columns
        self.animations: list[SequenceFrames] = []
        for row in range(rows):
            frames = SequenceFrames(
                width,
                self.cell_height,
                columns,
                hscale,
                vscale,
                cell_width=self.cell_width,
                cell_height=self.cell_height,
            )
            for column in range(columns):
                frames.set_source_rect(column, self.source_rect(row, column))
            self.animations.append(frames)

    def source_rect(self, row: int, column: int) -> Rect:
        """Sheet rectangle of the cell at ``row``, ``column``."""
        return Rect(
            self.cell_width * column,
            self.cell_height * row,
            self.cell_width * (column + 1),
            self.cell_height * (row + 1),
        )

    def row(self, index: int) -> SequenceFrames:
        """The animation in row ``index``."""
        if not 0 <= index < self.rows:
            raise IndexError(f"row {index} out of range 0..{self.rows - 1}")
        return self.animations[index]