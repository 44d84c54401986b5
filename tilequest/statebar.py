"""Layout of the player's HP/MP state bar and of small HP bars above units."""

from __future__ import annotations

from dataclasses import dataclass, replace

from tilequest.rectmath import Rect, RectNode, rect_width

HP_BAR_RECT = Rect(58, 16, 195, 37)
MP_BAR_RECT = Rect(58, 32, 190, 48)
LITTLE_HP_BAR_RECT = Rect(10, 10, 390, 40)

Size = tuple[int, int]


@dataclass(frozen=True)
class BarPlacement:
    """Where a filled bar goes on screen and which part of its bitmap to show."""

    dest: Rect
    source: Rect


def _ratio(current: float, maximum: float) -> float:
    if maximum == 0:
        raise ValueError("maximum value of a bar must not be zero")
    return float(current) / float(maximum)


def _fill(slot: Rect, bar_size: Size, ratio: float) -> BarPlacement:
    dest = replace(slot, right=slot.left + int(rect_width(slot) * ratio))
    source = Rect(0, 0, int(bar_size[0] * ratio), bar_size[1])
    return BarPlacement(dest, source)


class StateBar:
    """The HP and MP bars inside their frame, scaled to a screen area."""

    def __init__(
        self,
        frame_size: Size,
        hp_bar_size: Size,
        mp_bar_size: Size,
        screen_size: Size,
    ) -> None:
        self.hp_bar_size = hp_bar_size
        self.mp_bar_size = mp_bar_size
        self.frame = RectNode(Rect(0, 0, frame_size[0], frame_size[1]), "FrameWork")
        self.frame.add_child(HP_BAR_RECT, "HPBar")
        self.frame.add_child(MP_BAR_RECT, "MPBar")
        width, height = screen_size
        self.draw_rect = self.frame.rect
        self.set_draw_rect(
            Rect(
                int(width * 0.01),
                int(height * 0.01),
                int(width * 0.3),
                int(height * 0.25),
            )
        )

    def set_draw_rect(self, rect: Rect) -> None:
        """Place the frame on ``rect``, scaling the bar slots with it."""
        self.draw_rect = rect
        self.frame.transform_to(rect)

    def layout(
        self, cur_hp: float, max_hp: float, cur_mp: float, max_mp: float
    ) -> tuple[BarPlacement, BarPlacement]:
        """HP and MP bar placements for the given values."""
        hp_slot, mp_slot = self.frame.children_rects()
        hp = _fill(hp_slot, self.hp_bar_size, _ratio(cur_hp, max_hp))
        mp = _fill(mp_slot, self.mp_bar_size, _ratio(cur_mp, max_mp))
        return hp, mp


class LittleHPBar:
    """A small HP bar drawn in an arbitrary rectangle, e.g. above a monster."""

    def __init__(self, frame_size: Size, bar_size: Size) -> None:
        self.bar_size = bar_size
        self.frame = RectNode(Rect(0, 0, frame_size[0], frame_size[1]), "FrameWork")
        self.frame.add_child(LITTLE_HP_BAR_RECT, "HPBar")

    def update_draw_rect(self, rect: Rect) -> None:
        """Fit the frame onto ``rect``."""
        self.frame.transform_to(rect)

    def layout(self, cur_hp: float, max_hp: float, rect: Rect) -> BarPlacement:
        """HP bar placement when the frame is drawn in ``rect``."""
        ratio = _ratio(cur_hp, max_hp)
        self.update_draw_rect(rect)
        return _fill(self.frame.children[0].rect, self.bar_size, ratio)