"""Irregular circles: filled, outlined and two-colored outlines from a list of radii."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import NamedTuple, Sequence

from quickshapes.color import Color

INTERPOLATION_FACTOR = 4


class ColoredVertex(NamedTuple):
    x: float
    y: float
    r: int
    g: int
    b: int
    a: int


def _premultiplied(color: Color) -> tuple[int, int, int, int]:
    alpha = color.alpha_f()
    return (
        int(color.red * alpha),
        int(color.green * alpha),
        int(color.blue * alpha),
        color.alpha,
    )


def interpolated_outline(radii: Sequence[float], item_radius: float) -> list[tuple[float, float]]:
    """Points around (item_radius, item_radius), starting at the bottom, anti-clockwise.

    Each relative radius is linearly interpolated towards the next one in
    INTERPOLATION_FACTOR steps.
    """
    count = len(radii)
    if count < 3:
        raise ValueError("at least 3 radii are required")
    total = count * INTERPOLATION_FACTOR
    points = []
    for i, radius in enumerate(radii):
        following = radii[(i + 1) % count]
        for j in range(INTERPOLATION_FACTOR):
            pos = j / INTERPOLATION_FACTOR
            current = (1 - pos) * radius + pos * following
            angle = 2 * math.pi * ((i * INTERPOLATION_FACTOR + j) / total)
            x = current * item_radius * math.sin(angle)
            y = current * item_radius * math.cos(angle)
            points.append((item_radius + x, item_radius + y))
    return points


def _drawable(visible: bool, radii: Sequence[float]) -> bool:
    return visible and len(radii) >= 3


@dataclass
class IrregularCircleItem:
    """A filled irregular circle, drawn as a triangle fan from the center."""

    width: float = 0.0
    height: float = 0.0
    inner_color: Color = field(default_factory=lambda: Color.from_name("red"))
    outer_color: Color = field(default_factory=lambda: Color.from_name("blue"))
    radii: list[float] = field(default_factory=list)
    visible: bool = True

    def vertices(self) -> list[ColoredVertex]:
        """Fan vertices: center, the outline, then the first outline point again.

        Empty when hidden or when fewer than 3 radii are set.
        """
        if not _drawable(self.visible, self.radii):
            return []
        inner = self.inner_color
        center = ColoredVertex(
            self.width / 2, self.height / 2, inner.red, inner.green, inner.blue, inner.alpha
        )
        r, g, b, a = _premultiplied(self.outer_color)
        outline = [
            ColoredVertex(x, y, r, g, b, a)
            for x, y in interpolated_outline(self.radii, self.width / 2.0)
        ]
        return [center, *outline, outline[0]]


@dataclass
class IrregularCircleOutline:
    """A single-colored line loop around an irregular circle."""

    width: float = 0.0
    height: float = 0.0
    color: Color = field(default_factory=lambda: Color.from_name("red"))
    radii: list[float] = field(default_factory=list)
    line_width: float = 2.0
    device_pixel_ratio: float = 1.0
    visible: bool = True

    @property
    def scaled_line_width(self) -> float:
        return self.line_width * self.device_pixel_ratio

    def vertices(self) -> list[tuple[float, float]]:
        """Line loop points; empty when hidden or when fewer than 3 radii are set."""
        if not _drawable(self.visible, self.radii):
            return []
        return interpolated_outline(self.radii, self.width / 2.0)


@dataclass
class IrregularCircleOutlineTwoColored:
    """A line loop whose color alternates every three vertices."""

    width: float = 0.0
    height: float = 0.0
    first_color: Color = field(default_factory=lambda: Color.from_name("red"))
    second_color: Color = field(default_factory=lambda: Color.from_name("blue"))
    radii: list[float] = field(default_factory=list)
    line_width: float = 2.0
    device_pixel_ratio: float = 1.0
    visible: bool = True

    @property
    def scaled_line_width(self) -> float:
        return self.line_width * self.device_pixel_ratio

    def vertices(self) -> list[ColoredVertex]:
        """Colored line loop points; empty when hidden or when fewer than 3 radii are set."""
        if not _drawable(self.visible, self.radii):
            return []
        first = _premultiplied(self.first_color)
        second = _premultiplied(self.second_color)
        return [
            ColoredVertex(x, y, *(second if (index // 3) % 2 else first))
            for index, (x, y) in enumerate(interpolated_outline(self.radii, self.width / 2.0))
        ]