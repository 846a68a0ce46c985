"""Shared SVG element helpers used across the drawing modules."""

from __future__ import annotations

from xml.sax.saxutils import escape as _xml_escape

from .constants import FONT_FAMILY, LINE_COLOR


def escape(text: object) -> str:
    """Escape XML special characters (including quotes, for attributes)."""
    return _xml_escape(str(text), {'"': "&quot;"})


def svg_line(x1: float, y1: float, x2: float, y2: float,
             stroke_width: float = 1, stroke: str = LINE_COLOR, dash: str | None = None) -> str:
    dash_attr = f' stroke-dasharray="{dash}"' if dash else ""
    return (
        f'<line x1="{x1:.2f}" y1="{y1:.2f}" x2="{x2:.2f}" y2="{y2:.2f}" '
        f'stroke="{stroke}" stroke-width="{stroke_width}"{dash_attr}/>'
    )


def svg_circle(cx: float, cy: float, r: float, stroke_width: float = 2, fill: str = "none") -> str:
    return (
        f'<circle cx="{cx:.2f}" cy="{cy:.2f}" r="{r:.2f}" fill="{fill}" '
        f'stroke="{LINE_COLOR}" stroke-width="{stroke_width}"/>'
    )


def svg_rect(x: float, y: float, width: float, height: float,
             stroke_width: float = 1, fill: str = "none", stroke: str = LINE_COLOR) -> str:
    return (
        f'<rect x="{x:.2f}" y="{y:.2f}" width="{width:.2f}" height="{height:.2f}" '
        f'fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width}"/>'
    )


def svg_text(x: float, y: float, text: object, font_size: float = 12,
             anchor: str = "middle", bold: bool = False, transform: str = "") -> str:
    """Text element; ``text`` is escaped here."""
    weight = ' font-weight="bold"' if bold else ""
    transform_attr = f' transform="{transform}"' if transform else ""
    return (
        f'<text x="{x:.2f}" y="{y:.2f}" text-anchor="{anchor}" '
        f'font-family="{FONT_FAMILY}" font-size="{font_size:g}"{weight}{transform_attr}>'
        f'{escape(text)}</text>'
    )


def path_data(points: list[tuple[float, float]], closed: bool = False) -> str:
    """Polyline path data "M x,y L x,y ..." for ``points``."""
    head, *rest = points
    d = f"M{head[0]:.2f},{head[1]:.2f}" + "".join(f" L{x:.2f},{y:.2f}" for x, y in rest)
    return d + " Z" if closed else d
