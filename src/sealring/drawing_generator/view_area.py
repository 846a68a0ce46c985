"""
ViewArea: a named rectangular region of the drawing sheet.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import LINE_COLOR


@dataclass(frozen=True)
class ViewArea:
    """
    Rectangular region on the sheet.

    Attributes:
        x: Left edge (sheet units from sheet left)
        y: Top edge (sheet units from sheet top)
        width: Width of the region
        height: Height of the region
    """
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def anchored_bottom_right(cls, sheet_width: float, sheet_height: float,
                              width: float, height: float, inset: float) -> ViewArea:
        """A width x height region ``inset`` units in from the bottom right corner."""
        return cls(sheet_width - inset - width, sheet_height - inset - height, width, height)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def inset(self, margin: float) -> ViewArea:
        """Return a new ViewArea inset by the given margin on all sides."""
        return ViewArea(
            x=self.x + margin,
            y=self.y + margin,
            width=self.width - 2 * margin,
            height=self.height - 2 * margin,
        )

    def fit_transform(self, content_width: float, content_height: float) -> tuple[float, float, float]:
        """
        Uniform scale and offset placing a content box centered in this area.

        Returns:
            (scale, offset_x, offset_y)
        """
        scale = min(self.width / content_width, self.height / content_height)
        offset_x = self.x + (self.width - content_width * scale) / 2
        offset_y = self.y + (self.height - content_height * scale) / 2
        return scale, offset_x, offset_y

    def svg_rect(self, stroke: str = LINE_COLOR, stroke_width: float = 1,
                 fill: str = "none") -> str:
        """Generate an SVG rect element for this area."""
        return (f'<rect x="{self.x:g}" y="{self.y:g}" width="{self.width:g}" '
                f'height="{self.height:g}" fill="{fill}" stroke="{stroke}" '
                f'stroke-width="{stroke_width}"/>')
