"""Links between scenes: areas that send the player to another scene."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Hashable, Iterator, Optional

from tilequest.rectmath import (
    Point,
    Rect,
    rect_center,
    rect_height,
    rect_width,
    same_rect,
)

Scene = Hashable

# Extra distance, in pixels, between a link's destination area and the arrival point.
ARRIVAL_MARGIN = 50


class Direction(Enum):
    """Direction in which a link is entered."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class LinkShape(Enum):
    """Shape of a link's trigger area."""

    RECT = "rect"
    LINE = "line"


_REVERSE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def reverse_direction(direction: Direction) -> Direction:
    """The opposite of ``direction``."""
    return _REVERSE[direction]


def _contains(outer: Rect, inner: Rect) -> bool:
    return (
        outer.left <= inner.left
        and outer.top <= inner.top
        and inner.right <= outer.right
        and inner.bottom <= outer.bottom
    )


def _overlaps(a: Rect, b: Rect) -> bool:
    return a.left < b.right and b.left < a.right and a.top < b.bottom and b.top < a.bottom


class LinkRegistry:
    """The set of scene links currently known to the game, in creation order."""

    def __init__(self) -> None:
        self._links: list[RectSceneLink] = []

    def add(self, link: RectSceneLink) -> RectSceneLink:
        """Register ``link``."""
        self._links.append(link)
        return link

    def remove(self, link: RectSceneLink) -> None:
        """Forget ``link``; raises ValueError when it is not registered."""
        self._links.remove(link)

    def in_scene(self, scene: Scene) -> list[RectSceneLink]:
        """Links that start in ``scene``."""
        return [link for link in self._links if link.current_scene == scene]

    def clear_scene(
        self, scene: Scene, keep: Optional[RectSceneLink] = None
    ) -> list[RectSceneLink]:
        """Remove the links that start in ``scene``, except ``keep``; return them."""
        removed = [
            link
            for link in self._links
            if link.current_scene == scene and link is not keep
        ]
        self._links = [link for link in self._links if link not in removed]
        return removed

    def __iter__(self) -> Iterator[RectSceneLink]:
        return iter(list(self._links))

    def __len__(self) -> int:
        return len(self._links)

    def __contains__(self, link: object) -> bool:
        return any(link is item for item in self._links)


class RectSceneLink:
    """A rectangular entrance in one scene leading to an area of another."""

    shape = LinkShape.RECT

    def __init__(
        self,
        entrance: Rect,
        current_scene: Scene,
        dest_scene: Scene,
        dest: Rect,
        direction: Direction = Direction.UP,
        registry: Optional[LinkRegistry] = None,
    ) -> None:
        self.entrance = entrance
        self.current_scene = current_scene
        self.dest_scene = dest_scene
        self.dest = dest
        self.direction = direction
        self.active = True
        self.has_opposite = True
        self.registry = registry
        if registry is not None:
            registry.add(self)

    def activate(self) -> None:
        """Let the link be used."""
        self.active = True

    def deactivate(self) -> None:
        """Stop the link from being used."""
        self.active = False

    def create_opposite(self, active: bool) -> Optional[RectSceneLink]:
        """The link leading back from the destination, or None if this is one."""
        if not self.has_opposite:
            return None
        link = RectSceneLink(
            self.dest,
            self.dest_scene,
            self.current_scene,
            self.entrance,
            reverse_direction(self.direction),
            self.registry,
        )
        link.active = active
        link.has_opposite = False
        return link

    def dest_position(self) -> Point:
        """Where an object arrives: beside the destination, away from the entry side."""
        width = rect_width(self.dest) + ARRIVAL_MARGIN
        height = rect_height(self.dest) + ARRIVAL_MARGIN
        dest = self.dest
        if self.direction is Direction.DOWN:
            shifted = replace(dest, top=dest.top + height, bottom=dest.bottom + height)
        elif self.direction is Direction.LEFT:
            shifted = replace(dest, left=dest.left - width, right=dest.right - width)
        elif self.direction is Direction.RIGHT:
            shifted = replace(dest, left=dest.left + width, right=dest.right + width)
        else:
            shifted = replace(dest, top=dest.top - height, bottom=dest.bottom - height)
        return rect_center(shifted)

    def involved_in(self, rect: Rect) -> bool:
        """Whether the entrance lies wholly inside ``rect``."""
        return _contains(rect, self.entrance)

    def is_touched_by(self, rect: Optional[Rect]) -> bool:
        """Whether an object's collision rectangle overlaps the entrance."""
        if rect is None:
            return False
        return _overlaps(rect, self.entrance)

    def same_as(self, other: RectSceneLink) -> bool:
        """Whether ``other`` has the same shape, scenes and destination."""
        return (
            self.shape is other.shape
            and self.dest_scene == other.dest_scene
            and self.current_scene == other.current_scene
            and same_rect(self.dest, other.dest)
        )

    def __repr__(self) -> str:
        return (
            f"RectSceneLink({self.entrance!r}, {self.current_scene!r} -> "
            f"{self.dest_scene!r}, {self.dest!r}, {self.direction.name})"
        )