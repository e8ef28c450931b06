"""A set of single-colored points placed relative to an item's size."""

from __future__ import annotations

from dataclasses import dataclass, field

from quickshapes.color import Color


@dataclass
class PointsItem:
    """Points whose positions are fractions of the item's width and height."""

    width: float = 0.0
    height: float = 0.0
    color: Color = field(default_factory=lambda: Color.from_name("blue"))
    point_size: float = 3.0
    x_positions: list[float] = field(default_factory=list)
    y_positions: list[float] = field(default_factory=list)
    device_pixel_ratio: float = 1.0
    visible: bool = True

    @property
    def scaled_point_size(self) -> float:
        return self.point_size * self.device_pixel_ratio

    def vertices(self) -> list[tuple[float, float]]:
        """Point positions in item coordinates; extra coordinates in the longer list are ignored.

        Empty when the item is hidden.
        """
        if not self.visible:
            return []
        return [
            (self.width * x, self.height * y)
            for x, y in zip(self.x_positions, self.y_positions)
        ]