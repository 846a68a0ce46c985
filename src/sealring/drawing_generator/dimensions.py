"""
Dimension lines for seal ring drawings.

A dimension is a straight line between two points with open arrowheads at
both ends and a label at its midpoint:

- Horizontal dimensions place the label above (positive offset) or below
  (negative offset) the line, by half the text offset.
- Vertical dimensions shift the label sideways by the full text offset and
  rotate it to read along the line.

Arrowheads are two short strokes at each end, splayed by the arrow
half-angle from the line direction, so dimensions drawn at any angle get
correctly oriented arrows.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .constants import (
    ARROW_HALF_ANGLE,
    ARROW_SIZE,
    DEFAULT_TEXT_OFFSET,
    FONT_FAMILY,
    LABEL_FONT_SIZE,
    LINE_COLOR,
    THIN_LINE_WIDTH,
)
from .svg_utils import escape

ORIENTATIONS = ("horizontal", "vertical")


@dataclass(frozen=True)
class DimensionStyle:
    """Styling for dimension lines."""
    arrow_size: float = ARROW_SIZE
    arrow_half_angle: float = ARROW_HALF_ANGLE  # degrees
    line_color: str = LINE_COLOR
    line_width: float = THIN_LINE_WIDTH
    font_family: str = FONT_FAMILY
    font_size: float = LABEL_FONT_SIZE


@dataclass(frozen=True)
class LinearDimension:
    """
    A single annotated dimension.

    Attributes:
        start: First end point (view coordinates)
        end: Second end point (view coordinates)
        label: Text shown at the midpoint (e.g. "ID 9.8mm ±0.15mm")
        text_offset: Label distance from the line
        orientation: "horizontal" or "vertical"
    """
    start: tuple[float, float]
    end: tuple[float, float]
    label: str
    text_offset: float = DEFAULT_TEXT_OFFSET
    orientation: str = "horizontal"

    def __post_init__(self):
        if self.orientation not in ORIENTATIONS:
            raise ValueError(f"orientation must be one of {ORIENTATIONS}, got {self.orientation!r}")

    @property
    def midpoint(self) -> tuple[float, float]:
        return ((self.start[0] + self.end[0]) / 2, (self.start[1] + self.end[1]) / 2)

    @property
    def text_position(self) -> tuple[float, float]:
        mid_x, mid_y = self.midpoint
        if self.orientation == "vertical":
            return (mid_x + self.text_offset, mid_y)
        return (mid_x, mid_y - self.text_offset / 2)


def _unit(angle: float) -> np.ndarray:
    return np.array([math.cos(angle), math.sin(angle)])


def arrowhead_strokes(
    start: tuple[float, float],
    end: tuple[float, float],
    size: float = ARROW_SIZE,
    half_angle: float = ARROW_HALF_ANGLE,
) -> tuple[list[tuple[float, float]], list[tuple[float, float]]]:
    """
    Barb end points of the arrowheads at ``start`` and ``end``.

    Returns:
        (start_barbs, end_barbs), each a pair of (x, y) points; the arrow
        tips are ``start`` and ``end`` themselves.
    """
    p1 = np.asarray(start, dtype=float)
    p2 = np.asarray(end, dtype=float)
    dx, dy = p2 - p1
    angle = math.atan2(dy, dx)
    spread = math.radians(half_angle)

    start_barbs = [p1 + size * _unit(angle + spread), p1 + size * _unit(angle - spread)]
    end_barbs = [p2 - size * _unit(angle + spread), p2 - size * _unit(angle - spread)]

    def as_points(barbs):
        return [(float(x), float(y)) for x, y in barbs]

    return as_points(start_barbs), as_points(end_barbs)


def render_dimension_svg(dim: LinearDimension, style: DimensionStyle | None = None) -> str:
    """Render a dimension as an SVG group."""
    if style is None:
        style = DimensionStyle()

    (x1, y1), (x2, y2) = dim.start, dim.end
    start_barbs, end_barbs = arrowhead_strokes(
        dim.start, dim.end, style.arrow_size, style.arrow_half_angle
    )
    tx, ty = dim.text_position

    parts = [
        f'<g class="dimension" stroke="{style.line_color}" stroke-width="{style.line_width}">',
        f'<line x1="{x1:.2f}" y1="{y1:.2f}" x2="{x2:.2f}" y2="{y2:.2f}"/>',
    ]
    for (tip_x, tip_y), barbs in (((x1, y1), start_barbs), ((x2, y2), end_barbs)):
        d = " ".join(f"M{tip_x:.2f},{tip_y:.2f} L{bx:.2f},{by:.2f}" for bx, by in barbs)
        parts.append(f'<path class="arrowhead" d="{d}" fill="none"/>')

    transform = f' transform="rotate(-90, {tx:.2f}, {ty:.2f})"' if dim.orientation == "vertical" else ""
    parts.append(
        f'<text x="{tx:.2f}" y="{ty:.2f}" text-anchor="middle" dominant-baseline="middle" '
        f'stroke="none" fill="{style.line_color}" font-family="{style.font_family}" '
        f'font-size="{style.font_size:g}"{transform}>{escape(dim.label)}</text>'
    )
    parts.append("</g>")
    return "\n".join(parts)


def draw_dimension(
    p1: tuple[float, float],
    p2: tuple[float, float],
    label: str,
    text_offset: float = DEFAULT_TEXT_OFFSET,
    orientation: str = "horizontal",
    style: DimensionStyle | None = None,
) -> str:
    """Shorthand for rendering a LinearDimension."""
    return render_dimension_svg(LinearDimension(p1, p2, label, text_offset, orientation), style)
