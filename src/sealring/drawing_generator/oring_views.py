"""
O-ring views: front view and cross-section view.

Both views share the visual band computed by ``scale_oring`` so the ring in
the front view and the cord in the section view have the same drawn
thickness.
"""

from __future__ import annotations

from ..parts import ORingGeometry
from .constants import (
    CAPTION_FONT_SIZE,
    CAPTION_OFFSET,
    CENTERLINE_DASH,
    CENTERLINE_WIDTH,
    HATCH_ID,
    LINE_COLOR,
    ORING_SECTION_HEIGHT,
    OUTLINE_WIDTH,
    THIN_LINE_WIDTH,
)
from .dimensions import draw_dimension
from .scaling import scale_oring
from .svg_utils import path_data, svg_circle, svg_line, svg_text
from .tolerance import format_dimtol

CENTERLINE_OVERHANG = 40.0


def render_oring_front_view(
    geometry: ORingGeometry | None,
    center: tuple[float, float],
    scale: float = 1.0,
    unit: str = "mm",
) -> str:
    """
    Two concentric circles with centerlines and the ID dimension.

    Returns an empty string when ``geometry`` is None.
    """
    if geometry is None:
        return ""

    cx, cy = center
    ring = scale_oring(geometry, scale)
    inner, outer = ring.inner_radius, ring.outer_radius
    reach = outer + CENTERLINE_OVERHANG * scale

    parts = [
        '<g class="view oring-front">',
        svg_line(cx - reach, cy, cx + reach, cy, CENTERLINE_WIDTH, dash=CENTERLINE_DASH),
        svg_line(cx, cy - reach, cx, cy + reach, CENTERLINE_WIDTH, dash=CENTERLINE_DASH),
        svg_circle(cx, cy, outer, OUTLINE_WIDTH),
        svg_circle(cx, cy, inner, OUTLINE_WIDTH),
        draw_dimension(
            (cx - inner, cy),
            (cx + inner, cy),
            f"ID {format_dimtol(geometry.inner_diameter, unit)}",
            text_offset=20 * scale,
        ),
        svg_text(cx, cy + outer + CAPTION_OFFSET * scale, "FRONT VIEW (O-RING)",
                 CAPTION_FONT_SIZE * scale, bold=True),
        "</g>",
    ]
    return "\n".join(parts)


def render_oring_section_view(
    geometry: ORingGeometry | None,
    center: tuple[float, float],
    scale: float = 1.0,
    unit: str = "mm",
) -> str:
    """
    Cross-section of the cord: two hatched round ends joined by side lines.

    Returns an empty string when ``geometry`` is None.
    """
    if geometry is None:
        return ""

    cx, cy = center
    width = scale_oring(geometry, scale).band
    half_w = width / 2
    half_h = ORING_SECTION_HEIGHT * scale / 2
    top, bottom = cy - half_h, cy + half_h

    parts = ['<g class="view oring-section">']
    for end_y in (top, bottom):
        parts.append(svg_circle(cx, end_y, half_w, OUTLINE_WIDTH, fill=f"url(#{HATCH_ID})"))
    for side_x in (cx - half_w, cx + half_w):
        parts.append(
            f'<path d="{path_data([(side_x, top), (side_x, bottom)])}" '
            f'stroke="{LINE_COLOR}" stroke-width="{THIN_LINE_WIDTH}" fill="none"/>'
        )
    parts.append(
        draw_dimension(
            (cx - half_w, cy),
            (cx + half_w, cy),
            f"W {format_dimtol(geometry.cross_section, unit)}",
            text_offset=30 * scale,
        )
    )
    parts.append(svg_text(cx, bottom + CAPTION_OFFSET * scale, "SECTION VIEW (O-RING)",
                          CAPTION_FONT_SIZE * scale, bold=True))
    parts.append("</g>")
    return "\n".join(parts)
