"""Points colored by a gamma-corrected HSV fade between two colors."""

from __future__ import annotations

from dataclasses import dataclass, field

from quickshapes.circles import ColoredVertex
from quickshapes.color import Color


def _hsva(color: Color, other: Color) -> tuple[float, float, float, float]:
    """Alpha-weighted HSV components; an achromatic color borrows the other's hue."""
    alpha = color.alpha_f()
    saturation = color.saturation_f() * alpha
    hue_source = color if saturation > 0.0 else other
    hue = hue_source.hue_f() * alpha
    value = color.value_f() * alpha
    return hue, saturation, value, alpha


@dataclass
class ColoredPointsItem:
    """Points at fractional positions, each colored between color1 and color2.

    A color value of 0 gives color1, 1 gives color2; values in between are
    raised to ``gamma`` and fade through HSV space.
    """

    width: float = 0.0
    height: float = 0.0
    color1: Color = field(default_factory=lambda: Color.from_name("blue"))
    color2: Color = field(default_factory=lambda: Color.from_name("white"))
    point_size: float = 3.0
    gamma: float = 1.0
    x_positions: list[float] = field(default_factory=list)
    y_positions: list[float] = field(default_factory=list)
    color_values: list[float] = field(default_factory=list)
    device_pixel_ratio: float = 1.0
    visible: bool = True

    @property
    def scaled_point_size(self) -> float:
        return self.point_size * self.device_pixel_ratio

    def _color_at(self, ratio: float) -> Color:
        h1, s1, v1, a1 = _hsva(self.color1, self.color2)
        h2, s2, v2, a2 = _hsva(self.color2, self.color1)
        c = ratio ** self.gamma
        c_inv = 1.0 - c
        hue = h1 * c_inv + h2 * c
        if hue < 0.0:
            hue = -1.0
        return Color.from_hsv_f(
            hue,
            s1 * c_inv + s2 * c,
            v1 * c_inv + v2 * c,
            a1 * c_inv + a2 * c,
        )

    def vertices(self) -> list[ColoredVertex]:
        """Colored points in item coordinates; empty when the item is hidden.

        Raises ValueError if there are fewer color values than points.
        """
        if not self.visible:
            return []
        positions = list(zip(self.x_positions, self.y_positions))
        if len(self.color_values) < len(positions):
            raise ValueError(
                f"{len(positions)} points need as many color values, "
                f"got {len(self.color_values)}"
            )
        result = []
        for (x, y), ratio in zip(positions, self.color_values):
            color = self._color_at(ratio)
            result.append(
                ColoredVertex(
                    self.width * x,
                    self.height * y,
                    color.red,
                    color.green,
                    color.blue,
                    color.alpha,
                )
            )
        return result