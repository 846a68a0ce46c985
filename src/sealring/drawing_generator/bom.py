"""
Part tables drawn on the view canvas.

- CompositeBOMTable: bill of materials of a composite set (one row per
  component ring).
- BackupRingDimensionTable: P/N, φD, φd and T of a standalone backup ring.

Grid lines are drawn explicitly (outer rectangle plus every row and column
divider) so the tables survive SVG-to-PDF conversion unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..parts import BackupRingGeometry, CompositeDetails, ORingGeometry, PartRecord
from .constants import HEADER_FILL, LABEL_FONT_SIZE, THIN_LINE_WIDTH, VIEW_CANVAS_WIDTH
from .svg_utils import svg_line, svg_rect, svg_text
from .tolerance import format_dimtol

ORING_TYPE_LABEL = "O-Ring"
BACKUP_RING_TYPE_LABEL = "Backup Ring"


@dataclass(frozen=True)
class BOMRow:
    """One component line of the composite bill of materials."""
    item_number: int
    part_no: str
    type_label: str
    dimensions: str
    material: str

    @property
    def values(self) -> list[str]:
        return [str(self.item_number), self.part_no, self.type_label, self.dimensions, self.material]


def oring_dimension_summary(geometry: ORingGeometry | None, unit: str = "mm") -> str:
    """"ID <tol>, W <tol>" for the BOM dimension column."""
    if geometry is None:
        return ""
    return (f"ID {format_dimtol(geometry.inner_diameter, unit)}, "
            f"W {format_dimtol(geometry.cross_section, unit)}")


def backup_ring_dimension_summary(geometry: BackupRingGeometry | None, unit: str = "mm") -> str:
    """"φD <tol>, φd <tol>, T <tol>" for the BOM dimension column."""
    if geometry is None:
        return ""
    return (f"φD {format_dimtol(geometry.outer_diameter, unit)}, "
            f"φd {format_dimtol(geometry.inner_diameter, unit)}, "
            f"T {format_dimtol(geometry.thickness, unit)}")


def build_bom_rows(record: PartRecord, unit: str = "mm") -> list[BOMRow]:
    """The two component rows (O-ring first, backup ring second) of a composite record."""
    details = record.composite or CompositeDetails()
    oring_material = f"{details.oring_material} / {details.oring_hardness}"
    return [
        BOMRow(1, details.oring_part_no, ORING_TYPE_LABEL,
               oring_dimension_summary(record.oring, unit), oring_material),
        BOMRow(2, details.backup_ring_part_no, BACKUP_RING_TYPE_LABEL,
               backup_ring_dimension_summary(record.backup_ring, unit), details.backup_ring_material),
    ]


class CompositeBOMTable:
    """
    Five-column component table centered at the top of the view canvas.

    Columns: No., P/N, TYPE, DIMENSIONS, MATERIAL / HARDNESS
    """

    columns = [
        ("No.", 30),
        ("P/N", 100),
        ("TYPE", 80),
        ("DIMENSIONS", 200),
        ("MATERIAL / HARDNESS", 150),
    ]

    def __init__(self, rows: list[BOMRow], top: float = 60, row_height: float = 30):
        self.rows = rows
        self.top = top
        self.row_height = row_height

    @property
    def total_width(self) -> float:
        return sum(width for _, width in self.columns)

    @property
    def total_height(self) -> float:
        return self.row_height * (len(self.rows) + 1)

    @property
    def left(self) -> float:
        return (VIEW_CANVAS_WIDTH - self.total_width) / 2

    def column_edges(self) -> list[float]:
        """x of every column boundary, left edge first."""
        edges = [self.left]
        for _, width in self.columns:
            edges.append(edges[-1] + width)
        return edges

    def generate_svg(self) -> str:
        x, y = self.left, self.top
        edges = self.column_edges()
        rh = self.row_height

        parts = ['<g class="bom-table">',
                 svg_rect(x, y, self.total_width, rh, 0, fill=HEADER_FILL, stroke="none")]

        parts.append('<g class="bom-header">')
        for (name, width), col_x in zip(self.columns, edges, strict=False):
            parts.append(svg_text(col_x + width / 2, y + rh * 0.65, name, LABEL_FONT_SIZE, bold=True))
        parts.append("</g>")

        for row_index, row in enumerate(self.rows, start=1):
            text_y = y + rh * row_index + rh * 0.65
            parts.append(f'<g class="bom-row" data-item="{row.item_number}">')
            for col_index, ((_, width), col_x, value) in enumerate(
                zip(self.columns, edges, row.values, strict=False)
            ):
                # Dimension summaries are long; left-align them
                if col_index == 3:
                    parts.append(svg_text(col_x + 10, text_y, value, 11, anchor="start"))
                else:
                    parts.append(svg_text(col_x + width / 2, text_y, value, 11))
            parts.append("</g>")

        parts.append(svg_rect(x, y, self.total_width, self.total_height, THIN_LINE_WIDTH))
        for row_index in range(1, len(self.rows) + 1):
            row_y = y + rh * row_index
            parts.append(svg_line(x, row_y, x + self.total_width, row_y, THIN_LINE_WIDTH))
        for col_x in edges[1:-1]:
            parts.append(svg_line(col_x, y, col_x, y + self.total_height, THIN_LINE_WIDTH))

        parts.append("</g>")
        return "\n".join(parts)


class BackupRingDimensionTable:
    """Four-column dimension table (P/N, φD, φd, T) at the top right of the view canvas."""

    columns = [("P/N", 110), ("φD", 70), ("φd", 70), ("T", 70)]

    def __init__(self, part_no: str, geometry: BackupRingGeometry | None,
                 origin: tuple[float, float] = (450, 50),
                 header_height: float = 25, row_height: float = 35):
        self.part_no = part_no
        self.geometry = geometry
        self.origin = origin
        self.header_height = header_height
        self.row_height = row_height

    def values(self, unit: str = "") -> list[str]:
        geometry = self.geometry
        if geometry is None:
            return [self.part_no, "", "", ""]
        return [
            self.part_no,
            format_dimtol(geometry.outer_diameter, unit),
            format_dimtol(geometry.inner_diameter, unit),
            format_dimtol(geometry.thickness, unit),
        ]

    def generate_svg(self) -> str:
        x, y = self.origin
        width = sum(w for _, w in self.columns)
        height = self.header_height + self.row_height
        header_y = y + self.header_height * 0.65
        value_y = y + self.header_height + self.row_height * 0.6

        parts = ['<g class="dimension-table">',
                 svg_rect(x, y, width, self.header_height, 0, fill=HEADER_FILL, stroke="none")]

        col_x = x
        for (name, col_width), value in zip(self.columns, self.values(), strict=True):
            parts.append(svg_text(col_x + col_width / 2, header_y, name, LABEL_FONT_SIZE, bold=True))
            parts.append(svg_text(col_x + col_width / 2, value_y, value, LABEL_FONT_SIZE))
            if col_x > x:
                parts.append(svg_line(col_x, y, col_x, y + height, THIN_LINE_WIDTH))
            col_x += col_width

        parts.append(svg_rect(x, y, width, height, THIN_LINE_WIDTH))
        parts.append(svg_line(x, y + self.header_height, x + width, y + self.header_height, THIN_LINE_WIDTH))
        parts.append("</g>")
        return "\n".join(parts)
