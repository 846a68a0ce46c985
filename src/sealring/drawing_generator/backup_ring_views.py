"""
Backup ring views: front view and side (shape) view.

The side view body depends on the ring's construction:

- Endless: a hatched solid section.
- Spiral: the same section with an "A" reference arrow and a "Detail A"
  inset showing the diagonal spiral cut.
- Bias Cut: two hatched trapezoids meeting at the angled cut, with a dashed
  reference line and the cut angle.

Body renderers are looked up by Shape, so every shape must have an entry in
``SIDE_BODY_RENDERERS``.
"""

from __future__ import annotations

from collections.abc import Callable

from ..parts import BackupRingGeometry, Shape
from .constants import (
    ARROW_MARKER_ID,
    BACKUP_SIDE_HEIGHT,
    BACKUP_SIDE_WIDTH,
    CAPTION_FONT_SIZE,
    CAPTION_OFFSET,
    CENTERLINE_DASH,
    CENTERLINE_WIDTH,
    HATCH_ID,
    LABEL_FONT_SIZE,
    LINE_COLOR,
    OUTLINE_WIDTH,
    THIN_LINE_WIDTH,
)
from .dimensions import draw_dimension
from .scaling import scale_backup_ring
from .svg_utils import escape, path_data, svg_circle, svg_line, svg_rect, svg_text
from .tolerance import format_dimtol

# Spiral cut annotation shown in the Detail A inset
SPIRAL_DETAIL_LABEL = "30°±5°"

CENTERLINE_OVERHANG = 30.0
DETAIL_A_OFFSET = 100.0

SideBodyRenderer = Callable[[BackupRingGeometry, float, float, float, str], list[str]]


def spiral_detail_label(geometry: BackupRingGeometry, use_record_angle: bool = False) -> str:
    """
    Spiral cut angle annotation.

    The standard 30°±5° is shown unless ``use_record_angle`` is set and the
    record carries its own angle.
    """
    angle = geometry.cut_angle
    if use_record_angle and angle is not None and angle.nominal:
        return format_dimtol(angle, "°")
    return SPIRAL_DETAIL_LABEL


def render_backup_ring_front_view(
    geometry: BackupRingGeometry | None,
    center: tuple[float, float],
    scale: float = 1.0,
    unit: str = "mm",
) -> str:
    """
    Two concentric circles with centerlines and the bore (φd) dimension.

    Spiral rings get a break in the ring at the top: a short masked arc with
    a diagonal line through the gap. Returns an empty string when
    ``geometry`` is None.
    """
    if geometry is None:
        return ""

    cx, cy = center
    ring = scale_backup_ring(geometry, scale)
    inner, outer = ring.inner_radius, ring.outer_radius
    reach = outer + CENTERLINE_OVERHANG * scale

    parts = [
        '<g class="view backup-front">',
        svg_line(cx - reach, cy, cx + reach, cy, CENTERLINE_WIDTH, dash=CENTERLINE_DASH),
        svg_line(cx, cy - reach, cx, cy + reach, CENTERLINE_WIDTH, dash=CENTERLINE_DASH),
        svg_circle(cx, cy, outer, OUTLINE_WIDTH),
        svg_circle(cx, cy, inner, OUTLINE_WIDTH),
        draw_dimension(
            (cx - inner, cy),
            (cx + inner, cy),
            f"φd {format_dimtol(geometry.inner_diameter, unit)}",
            text_offset=20 * scale,
        ),
    ]

    if geometry.shape is Shape.SPIRAL:
        parts.extend([
            '<g class="spiral-break">',
            svg_line(cx, cy - outer - 2, cx, cy - inner + 2, 8, stroke="#FFFFFF"),
            svg_line(cx - 3, cy - outer - 1, cx + 3, cy - inner + 1, 1.5),
            "</g>",
        ])
        caption = "FRONT VIEW (SPIRAL)"
    else:
        caption = "FRONT VIEW (BACKUP RING)"

    parts.append(svg_text(cx, cy + outer + CAPTION_OFFSET * scale, caption,
                          CAPTION_FONT_SIZE * scale, bold=True))
    parts.append("</g>")
    return "\n".join(parts)


def _hatched_path(points: list[tuple[float, float]]) -> str:
    return (
        f'<path class="cut-face" d="{path_data(points, closed=True)}" '
        f'fill="url(#{HATCH_ID})" stroke="{LINE_COLOR}" stroke-width="{OUTLINE_WIDTH}"/>'
    )


def _solid_body(cx: float, cy: float, scale: float) -> str:
    width = BACKUP_SIDE_WIDTH * scale
    height = BACKUP_SIDE_HEIGHT * scale
    return svg_rect(cx - width / 2, cy - height / 2, width, height,
                    OUTLINE_WIDTH, fill=f"url(#{HATCH_ID})")


def _caption(cx: float, cy: float, scale: float, text: str) -> str:
    bottom = cy + BACKUP_SIDE_HEIGHT * scale / 2
    return svg_text(cx, bottom + CAPTION_OFFSET * scale, text, CAPTION_FONT_SIZE * scale, bold=True)


def _endless_body(geometry: BackupRingGeometry, cx: float, cy: float,
                  scale: float, detail_label: str) -> list[str]:
    return [_solid_body(cx, cy, scale), _caption(cx, cy, scale, "SIDE VIEW (ENDLESS)")]


def _spiral_body(geometry: BackupRingGeometry, cx: float, cy: float,
                 scale: float, detail_label: str) -> list[str]:
    width = BACKUP_SIDE_WIDTH * scale
    arrow_start = cx + width + 5 * scale
    arrow_end = cx + width / 2 + 5 * scale

    parts = [
        _solid_body(cx, cy, scale),
        _caption(cx, cy, scale, "SIDE VIEW (SPIRAL)"),
        '<g class="detail-reference">',
        svg_text(cx + width + 10 * scale, cy + 5 * scale, "A", 16 * scale, anchor="start", bold=True),
        f'<path d="{path_data([(arrow_start, cy), (arrow_end, cy)])}" stroke="{LINE_COLOR}" '
        f'stroke-width="{THIN_LINE_WIDTH}" fill="none" marker-end="url(#{ARROW_MARKER_ID})"/>',
        "</g>",
    ]

    # Detail A inset, drawn in its own unit box and scaled with the view
    dx = cx + DETAIL_A_OFFSET * scale
    parts.extend([
        f'<g class="detail-a" transform="translate({dx:.2f}, {cy:.2f}) scale({scale:g})">',
        svg_rect(-30, -60, 60, 120, OUTLINE_WIDTH, fill="#FFFFFF"),
        svg_line(-30, 20, 30, -15, OUTLINE_WIDTH),
        svg_line(-30, 20, 10, 20, CENTERLINE_WIDTH, dash="4,2"),
        f'<path d="M-5,20 A 25,25 0 0,1 -8,14" fill="none" stroke="{LINE_COLOR}" '
        f'stroke-width="{THIN_LINE_WIDTH}"/>',
        f'<text class="detail-angle" x="5" y="15" text-anchor="start" font-size="{LABEL_FONT_SIZE}">'
        f'{escape(detail_label)}</text>',
        svg_text(0, 80, "DETAIL A", CAPTION_FONT_SIZE, bold=True),
        "</g>",
    ])
    return parts


def _bias_cut_body(geometry: BackupRingGeometry, cx: float, cy: float,
                   scale: float, detail_label: str) -> list[str]:
    half_w = BACKUP_SIDE_WIDTH * scale / 2
    half_h = BACKUP_SIDE_HEIGHT * scale / 2
    left, right = cx - half_w, cx + half_w
    top, bottom = cy - half_h, cy + half_h

    angle_text = format_dimtol(geometry.effective_cut_angle(), "°")
    return [
        _hatched_path([(left, top), (right, top), (right, cy - 10 * scale), (left, cy + 10 * scale)]),
        _hatched_path([(left, cy + 20 * scale), (right, cy), (right, bottom), (left, bottom)]),
        svg_line(right, cy, right + 30 * scale, cy, CENTERLINE_WIDTH, dash="2,2"),
        f'<text class="cut-angle" x="{cx + 2 * half_w + 10 * scale:.2f}" y="{cy + 20 * scale:.2f}" '
        f'text-anchor="start" font-size="{LABEL_FONT_SIZE}">{escape(angle_text)}</text>',
        _caption(cx, cy, scale, "BIAS CUT"),
    ]


SIDE_BODY_RENDERERS: dict[Shape, SideBodyRenderer] = {
    Shape.ENDLESS: _endless_body,
    Shape.SPIRAL: _spiral_body,
    Shape.BIAS_CUT: _bias_cut_body,
}


def render_backup_ring_side_view(
    geometry: BackupRingGeometry | None,
    center: tuple[float, float],
    scale: float = 1.0,
    unit: str = "mm",
    detail_label: str = SPIRAL_DETAIL_LABEL,
) -> str:
    """
    Side view with the thickness (T) dimension above a shape-specific body.

    Args:
        geometry: Backup ring to draw; None renders nothing
        center: View center in view-canvas coordinates
        scale: View scale factor
        unit: Length unit for the T label
        detail_label: Angle annotation of the spiral Detail A inset
    """
    if geometry is None:
        return ""

    cx, cy = center
    half_w = BACKUP_SIDE_WIDTH * scale / 2
    dim_y = cy - BACKUP_SIDE_HEIGHT * scale / 2 - 20 * scale
    body = SIDE_BODY_RENDERERS[geometry.shape]

    parts = [
        f'<g class="view backup-side" data-shape="{geometry.shape.name.lower()}">',
        draw_dimension(
            (cx - half_w, dim_y),
            (cx + half_w, dim_y),
            f"T {format_dimtol(geometry.thickness, unit)}",
            text_offset=50 * scale,
        ),
        *body(geometry, cx, cy, scale, detail_label),
        "</g>",
    ]
    return "\n".join(parts)
