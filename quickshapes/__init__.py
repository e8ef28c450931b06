"""Vertex geometry, stretch layouts, kinetic scrolling and touch handling for custom UI items."""

__version__ = "0.1.0"

__all__ = [
    "circles",
    "color",
    "colored_points",
    "curves",
    "kinetic",
    "points",
    "stretch",
    "touch_area",
    "touch_event",
]