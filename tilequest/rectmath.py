"""Rectangle, point and circle helpers plus a hierarchy of scalable rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterator, Optional


@dataclass(frozen=True, slots=True)
class Point:
    """A point in pixel coordinates."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle; right and bottom are exclusive edges."""

    left: int
    top: int
    right: int
    bottom: int


@dataclass(frozen=True, slots=True)
class Circle:
    """A circle given by its center and radius."""

    center: Point
    radius: float


@dataclass(frozen=True, slots=True)
class Grid:
    """A cell position in a grid of rows and columns."""

    row: int = 0
    column: int = 0


EMPTY_RECT = Rect(0, 0, 0, 0)


def rect_width(rect: Rect) -> int:
    """Width of ``rect``."""
    return rect.right - rect.left


def rect_height(rect: Rect) -> int:
    """Height of ``rect``."""
    return rect.bottom - rect.top


def rect_oblique(rect: Rect) -> int:
    """Length of the diagonal of ``rect``, truncated to an integer."""
    width = rect_width(rect)
    height = rect_height(rect)
    return int(math.sqrt(width * width + height * height))


def rect_center(rect: Rect) -> Point:
    """Integer center of ``rect``."""
    return Point(
        rect.left + ((rect.right - rect.left) >> 1),
        rect.top + ((rect.bottom - rect.top) >> 1),
    )


def circle_in_rect(rect: Rect) -> Circle:
    """The circle centred on ``rect`` whose diameter is its diagonal."""
    return Circle(rect_center(rect), float(rect_oblique(rect) >> 1))


def create_rect(center: Point, width: int, height: int) -> Rect:
    """A rectangle of the given size centred on ``center``."""
    half_w = int(width) >> 1
    half_h = int(height) >> 1
    cx = int(center.x)
    cy = int(center.y)
    return Rect(cx - half_w, cy - half_h, cx + half_w, cy + half_h)


def scaled_rect(rect: Rect, scale_x: float, scale_y: float) -> Rect:
    """``rect`` scaled about its center."""
    width = int(rect_width(rect) * scale_x)
    height = int(rect_height(rect) * scale_y)
    return create_rect(rect_center(rect), width, height)


def calculate_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def same_rect(a: Rect, b: Rect) -> bool:
    """Whether two rectangles have the same edges."""
    return (a.left, a.top, a.right, a.bottom) == (b.left, b.top, b.right, b.bottom)


def half_rect(rect: Rect) -> Rect:
    """The upper half of ``rect``."""
    return replace(rect, bottom=(rect_height(rect) >> 1) + rect.top)


@dataclass
class RectRelate:
    """A rectangle kept at a fixed offset from a moving anchor point."""

    offset_x: int = 0
    offset_y: int = 0
    width: int = 0
    height: int = 0
    rect: Optional[Rect] = None

    def __post_init__(self) -> None:
        if self.rect is None:
            self.rect = create_rect(Point(0, 0), self.width, self.height)

    def update_rect(self, point: Point) -> Rect:
        """Recentre the rectangle relative to ``point`` and return it."""
        x = int(point.x)
        y = int(point.y)
        self.rect = create_rect(
            Point(x - self.offset_x, y - self.offset_y), self.width, self.height
        )
        return self.rect


@dataclass(eq=False)
class RectNode:
    """A named rectangle whose children keep their layout when it is rescaled."""

    rect: Rect = EMPTY_RECT
    name: str = "temp"
    origin: Rect = field(init=False)
    width: int = field(init=False, default=0)
    height: int = field(init=False, default=0)
    offset_x: int = field(init=False, default=0)
    offset_y: int = field(init=False, default=0)
    children: list[RectNode] = field(init=False, default_factory=list)
    parent: Optional[RectNode] = field(init=False, default=None, repr=False)

    def __post_init__(self) -> None:
        self.origin = self.rect
        self._measure()

    def _measure(self) -> None:
        self.width = rect_width(self.rect)
        self.height = rect_height(self.rect)
        if self.parent is not None:
            self.offset_x = self.rect.left - self.parent.rect.left
            self.offset_y = self.rect.top - self.parent.rect.top

    def add_node(self, node: RectNode) -> RectNode:
        """Attach ``node`` as a child and record its offset from this node."""
        node.parent = self
        node._measure()
        self.children.append(node)
        return node

    def add_child(self, rect: Rect, name: str = "tempsub") -> RectNode:
        """Create a child node from ``rect`` and attach it."""
        return self.add_node(RectNode(rect, name))

    def find_rect(self, name: str) -> Rect:
        """Current rectangle of the direct child called ``name``, or an empty one."""
        for child in self.children:
            if child.name == name:
                return child.rect
        return EMPTY_RECT

    def traverse(self) -> Iterator[Rect]:
        """Yield descendants' rectangles, each child after its own subtree."""
        for child in self.children:
            if child.children:
                yield from child.traverse()
            yield child.rect

    def transform(
        self, hscale: float, vscale: float, offset_x: int, offset_y: int
    ) -> None:
        """Scale and move this node and, keeping their layout, its children."""
        if self.parent is None:
            left = self.origin.left + offset_x
            top = self.origin.top + offset_y
        else:
            left = int(self.offset_x * hscale + self.parent.rect.left)
            top = int(self.offset_y * vscale + self.parent.rect.top)
        self.rect = Rect(
            left,
            top,
            int(left + self.width * hscale),
            int(top + self.height * vscale),
        )
        for child in self.children:
            child.transform(hscale, vscale, offset_x, offset_y)

    def transform_to(self, rect: Rect) -> None:
        """Fit this node onto ``rect``, scaling its children to match."""
        if self.width == 0 or self.height == 0:
            raise ValueError(f"cannot scale empty rectangle node {self.name!r}")
        offset_x = rect.left - self.origin.left
        offset_y = rect.top - self.origin.top
        hscale = rect_width(rect) / self.width
        vscale = rect_height(rect) / self.height
        self.transform(hscale, vscale, offset_x, offset_y)

    def children_rects(self) -> list[Rect]:
        """Current rectangles of the direct children, in order."""
        return [child.rect for child in self.children]

    def clear_children(self) -> None:
        """Detach all children."""
        for child in self.children:
            child.parent = None
        self.children.clear()