"""Column and row layouts that stretch relative-sized children into the available space.

A child with a negative implicit size along the layout direction is
relative-sized: the absolute value is its stretch proportion. Children with a
non-negative implicit size keep their size along the layout direction.

Without a default size the relative-sized children share the space left after
the fixed-sized ones and the spacing. With a default size each relative-sized
child gets ``default_size * proportion`` and the layout's implicit size is set
to fit all children.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator, Optional

_MISMATCH_TOLERANCE = 0.0001


def _round_half_up(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0.0:
        return float(math.floor(value + 0.5))
    return float(math.ceil(value - 0.5))


@dataclass(eq=False)
class LayoutItem:
    """A rectangular item that a layout can position and resize."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    implicit_width: float = 0.0
    implicit_height: float = 0.0
    visible: bool = True


@dataclass(eq=False)
class StretchLayoutBase(LayoutItem, ABC):
    """Common part of StretchColumn and StretchRow."""

    spacing: int = 0
    default_size: int = 0
    left_margin: int = 0
    right_margin: int = 0
    children: list[LayoutItem] = field(default_factory=list)

    def add_child(self, item: LayoutItem) -> LayoutItem:
        """Append a child item and return it."""
        self.children.append(item)
        return item

    def _visible_children(self) -> Iterator[LayoutItem]:
        return (child for child in self.children if child is not None and child.visible)

    def layout(self) -> None:
        """Position and resize all visible children."""
        if self.default_size > 0:
            self._layout_with_default_size()
        else:
            self._layout_with_proportions()

    @abstractmethod
    def _layout_with_proportions(self) -> None:
        """Distribute the limited space among relative-sized children."""

    @abstractmethod
    def _layout_with_default_size(self) -> None:
        """Size relative-sized children by the default size and fit the implicit size."""


@dataclass(eq=False)
class StretchColumn(StretchLayoutBase):
    """Positions its children top to bottom and sets their width to fill the layout."""

    def _layout_with_proportions(self) -> None:
        if not self.children or self.height <= 0:
            return
        visible = list(self._visible_children())
        available = float(self.height)
        proportion_sum = 0.0
        for child in visible:
            if child.implicit_height >= 0:
                available -= child.height
            else:
                proportion_sum += -child.implicit_height
        available -= self.spacing * (len(visible) - 1)

        content_width = int(self.width - self.left_margin - self.right_margin)
        last_stretch: Optional[LayoutItem] = None
        current_y = 0.0
        for child in visible:
            if current_y > 0:
                current_y += self.spacing
            child.y = current_y
            if child.implicit_height < 0:
                share = -child.implicit_height / proportion_sum
                child.height = _round_half_up(available * share)
                last_stretch = child
            child.x = self.left_margin
            child.width = content_width
            current_y += child.height

        if last_stretch is not None:
            missing = self.height - current_y
            if missing > _MISMATCH_TOLERANCE:
                last_stretch.height += missing

    def _layout_with_default_size(self) -> None:
        if not self.children:
            return
        content_width = int(self.width - self.left_margin - self.right_margin)
        current_y = 0.0
        for child in self._visible_children():
            if current_y > 0:
                current_y += self.spacing
            child.y = current_y
            if child.implicit_height < 0:
                child.height = self.default_size * -child.implicit_height
            child.x = self.left_margin
            child.width = content_width
            current_y += child.height
        self.implicit_height = current_y


@dataclass(eq=False)
class StretchRow(StretchLayoutBase):
    """Positions its children left to right and sets their height to fill the layout."""

    def _layout_with_proportions(self) -> None:
        if not self.children or self.width <= 0:
            return
        visible = list(self._visible_children())
        available = float(self.width - self.left_margin - self.right_margin)
        proportion_sum = 0.0
        for child in visible:
            if child.implicit_width >= 0:
                available -= child.width
            else:
                proportion_sum += -child.implicit_width
        available -= self.spacing * (len(visible) - 1)

        layout_height = int(self.height)
        last_stretch: Optional[LayoutItem] = None
        current_x = float(self.left_margin)
        for child in visible:
            if current_x > 0:
                current_x += self.spacing
            child.x = current_x
            if child.implicit_width < 0:
                share = -child.implicit_width / proportion_sum
                child.width = _round_half_up(available * share)
                last_stretch = child
            child.height = layout_height
            current_x += child.width
        current_x += self.right_margin

        if last_stretch is not None:
            missing = self.width - current_x
            if missing > _MISMATCH_TOLERANCE:
                last_stretch.width += missing

    def _layout_with_default_size(self) -> None:
        if not self.children:
            return
        layout_height = int(self.height)
        current_x = float(self.left_margin)
        for child in self._visible_children():
            if current_x > 0:
                current_x += self.spacing
            child.x = current_x
            if child.implicit_width < 0:
                child.width = self.default_size * -child.implicit_width
            child.height = layout_height
            current_x += child.width
        current_x += self.right_margin
        self.implicit_width = current_x