"""RGBA colors with HSV access, and conversion of color matrices to pixel rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

_NAMED_COLORS: dict[str, tuple[int, int, int, int]] = {
    "black": (0, 0, 0, 255),
    "white": (255, 255, 255, 255),
    "red": (255, 0, 0, 255),
    "green": (0, 128, 0, 255),
    "lime": (0, 255, 0, 255),
    "blue": (0, 0, 255, 255),
    "yellow": (255, 255, 0, 255),
    "cyan": (0, 255, 255, 255),
    "magenta": (255, 0, 255, 255),
    "gray": (128, 128, 128, 255),
    "grey": (128, 128, 128, 255),
    "orange": (255, 165, 0, 255),
    "transparent": (0, 0, 0, 0),
}


def _check_unit(name: str, value: float) -> float:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be within [0, 1], got {value!r}")
    return float(value)


def _to_byte(value: float) -> int:
    return int(round(value * 255))


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA color."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"{name} must be an int within [0, 255], got {value!r}")

    @classmethod
    def from_name(cls, name: str) -> Color:
        """Parse a color name or a '#rgb', '#rrggbb' or '#aarrggbb' string."""
        text = name.strip().lower()
        if text in _NAMED_COLORS:
            return cls(*_NAMED_COLORS[text])
        if not text.startswith("#"):
            raise ValueError(f"unknown color name: {name!r}")
        digits = text[1:]
        try:
            int(digits, 16)
        except ValueError:
            raise ValueError(f"invalid color: {name!r}") from None
        if len(digits) == 3:
            r, g, b = (int(d * 2, 16) for d in digits)
            return cls(r, g, b)
        if len(digits) == 6:
            return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
        if len(digits) == 8:
            return cls(
                int(digits[2:4], 16),
                int(digits[4:6], 16),
                int(digits[6:8], 16),
                int(digits[0:2], 16),
            )
        raise ValueError(f"invalid color: {name!r}")

    @classmethod
    def from_hsv_f(cls, h: float, s: float, v: float, a: float = 1.0) -> Color:
        """Build a color from HSV components in [0, 1]; a hue of -1 means achromatic."""
        s = _check_unit("saturation", s)
        v = _check_unit("value", v)
        a = _check_unit("alpha", a)
        if h == -1.0 or s == 0.0:
            if h != -1.0:
                _check_unit("hue", h)
            gray = _to_byte(v)
            return cls(gray, gray, gray, _to_byte(a))
        h = _check_unit("hue", h)
        sector_pos = (h * 6.0) % 6.0
        sector = int(sector_pos)
        frac = sector_pos - sector
        p = v * (1.0 - s)
        q = v * (1.0 - s * frac)
        t = v * (1.0 - s * (1.0 - frac))
        r, g, b = (
            (v, t, p),
            (q, v, p),
            (p, v, t),
            (p, q, v),
            (t, p, v),
            (v, p, q),
        )[sector]
        return cls(_to_byte(r), _to_byte(g), _to_byte(b), _to_byte(a))

    @classmethod
    def from_rgb_f(cls, r: float, g: float, b: float, a: float = 1.0) -> Color:
        """Build a color from RGBA components in [0, 1]."""
        return cls(
            _to_byte(_check_unit("red", r)),
            _to_byte(_check_unit("green", g)),
            _to_byte(_check_unit("blue", b)),
            _to_byte(_check_unit("alpha", a)),
        )

    def hue_f(self) -> float:
        """Hue in [0, 1), or -1.0 for achromatic colors."""
        high = max(self.red, self.green, self.blue)
        low = min(self.red, self.green, self.blue)
        delta = high - low
        if delta == 0:
            return -1.0
        if high == self.red:
            hue = ((self.green - self.blue) / delta) % 6.0
        elif high == self.green:
            hue = (self.blue - self.red) / delta + 2.0
        else:
            hue = (self.red - self.green) / delta + 4.0
        return hue / 6.0

    def saturation_f(self) -> float:
        high = max(self.red, self.green, self.blue)
        if high == 0:
            return 0.0
        return (high - min(self.red, self.green, self.blue)) / high

    def value_f(self) -> float:
        return max(self.red, self.green, self.blue) / 255.0

    def alpha_f(self) -> float:
        return self.alpha / 255.0

    def rgba(self) -> int:
        """The color packed as a 32-bit 0xAARRGGBB integer."""
        return (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue


def _opaque_rgb(r: float, g: float, b: float) -> int:
    return 0xFF000000 | (int(r * 255) << 16) | (int(g * 255) << 8) | int(b * 255)


def hsv_matrix_to_image(matrix: Sequence[Iterable[Sequence[float]]]) -> list[list[int]]:
    """Convert rows of (h, s, v) triples into rows of opaque 0xAARRGGBB pixels."""
    return [
        [Color.from_hsv_f(h, s, v).rgba() | 0xFF000000 for h, s, v in row]
        for row in matrix
    ]


def rgb_matrix_to_image(matrix: Sequence[Iterable[Sequence[float]]]) -> list[list[int]]:
    """Convert rows of (r, g, b) triples in [0, 1] into rows of opaque pixels."""
    return [[_opaque_rgb(r, g, b) for r, g, b in row] for row in matrix]