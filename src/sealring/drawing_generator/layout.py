"""
Declarative sheet layouts.

Each part type maps to a SheetLayout naming the views to draw (with their
center and scale on the view canvas) and the part table shown above them.
The sheet itself is divided into named regions; the view canvas is fitted
into the "views" region with a uniform scale.

Adding a new part type combination means adding a layout entry here, not
re-deriving coordinates in the composer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..parts import PartType
from .constants import (
    MARGIN,
    SHEET_HEIGHT,
    SHEET_WIDTH,
    TITLE_Y,
    VIEW_CANVAS_HEIGHT,
    VIEW_CANVAS_WIDTH,
)
from .view_area import ViewArea

# Views share one sheet at reduced size when two part families are drawn
COMPOSITE_VIEW_SCALE = 0.6


class ViewKind(Enum):
    ORING_FRONT = "oring_front"
    ORING_SECTION = "oring_section"
    BACKUP_RING_FRONT = "backup_ring_front"
    BACKUP_RING_SIDE = "backup_ring_side"


class TableKind(Enum):
    COMPOSITE_BOM = "composite_bom"
    BACKUP_RING_DIMENSIONS = "backup_ring_dimensions"


@dataclass(frozen=True)
class ViewPlacement:
    """One view on the view canvas."""
    kind: ViewKind
    center: tuple[float, float]
    scale: float = 1.0


@dataclass(frozen=True)
class SheetLayout:
    """Views and part table of one part type."""
    views: tuple[ViewPlacement, ...]
    table: TableKind | None = None


SHEET_LAYOUTS: dict[PartType, SheetLayout] = {
    PartType.ORING: SheetLayout(
        views=(
            ViewPlacement(ViewKind.ORING_FRONT, (250, 250)),
            ViewPlacement(ViewKind.ORING_SECTION, (550, 250)),
        ),
    ),
    PartType.BACKUP_RING: SheetLayout(
        views=(
            ViewPlacement(ViewKind.BACKUP_RING_FRONT, (200, 250)),
            ViewPlacement(ViewKind.BACKUP_RING_SIDE, (520, 250)),
        ),
        table=TableKind.BACKUP_RING_DIMENSIONS,
    ),
    PartType.COMPOSITE: SheetLayout(
        views=(
            # O-ring on the left half, backup ring on the right half
            ViewPlacement(ViewKind.ORING_FRONT, (150, 300), COMPOSITE_VIEW_SCALE),
            ViewPlacement(ViewKind.ORING_SECTION, (300, 300), COMPOSITE_VIEW_SCALE),
            ViewPlacement(ViewKind.BACKUP_RING_FRONT, (500, 300), COMPOSITE_VIEW_SCALE),
            ViewPlacement(ViewKind.BACKUP_RING_SIDE, (650, 300), COMPOSITE_VIEW_SCALE),
        ),
        table=TableKind.COMPOSITE_BOM,
    ),
}


@dataclass(frozen=True)
class SheetRegions:
    """
    Named regions of the drawing sheet.

    Attributes:
        sheet: The whole sheet
        border: Border rule, inset from the sheet edge
        title: Band holding the centered sheet title
        views: Region the view canvas is fitted into
    """
    sheet: ViewArea
    border: ViewArea
    title: ViewArea
    views: ViewArea

    @classmethod
    def default(cls) -> SheetRegions:
        sheet = ViewArea(0, 0, SHEET_WIDTH, SHEET_HEIGHT)
        return cls(
            sheet=sheet,
            border=sheet.inset(MARGIN),
            title=ViewArea(0, TITLE_Y - 30, SHEET_WIDTH, 40),
            views=sheet,
        )

    def canvas_transform(self) -> str:
        """SVG transform mapping view-canvas coordinates into the views region."""
        scale, dx, dy = self.views.fit_transform(VIEW_CANVAS_WIDTH, VIEW_CANVAS_HEIGHT)
        return f"translate({dx:.2f}, {dy:.2f}) scale({scale:.5f})"


def layout_for(part_type: PartType) -> SheetLayout:
    return SHEET_LAYOUTS[part_type]
