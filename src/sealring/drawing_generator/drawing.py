"""
Sheet composition and export for seal ring drawings.

SealDrawing lays out one part record on a single A4-landscape sheet:

- border rule, centered title and creation date
- the part table (backup ring dimension table or composite BOM)
- the views selected by the part type's layout
- the notes block (bottom left) and title block (bottom right)

Composition is a pure function of the record; exporting writes the SVG
document, or converts it to a one-page PDF with svglib + reportlab.
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from reportlab.graphics import renderPDF
from reportlab.lib.pagesizes import A4, landscape
from reportlab.pdfgen import canvas
from svglib.svglib import svg2rlg

from ..config import DrawingConfig
from ..exceptions import DrawingDataError, ExportError
from ..history import DrawingHistory
from ..parts import PartRecord
from ..validation import validate_part_record
from .backup_ring_views import (
    render_backup_ring_front_view,
    render_backup_ring_side_view,
    spiral_detail_label,
)
from .bom import BackupRingDimensionTable, CompositeBOMTable, build_bom_rows
from .constants import (
    ARROW_MARKER_ID,
    DATE_STAMP_X,
    DATE_STAMP_Y,
    FONT_FAMILY,
    HATCH_ID,
    LINE_COLOR,
    OUTLINE_WIDTH,
    SHEET_HEIGHT,
    SHEET_HEIGHT_MM,
    SHEET_WIDTH,
    SHEET_WIDTH_MM,
    TITLE_Y,
)
from .layout import SheetLayout, SheetRegions, TableKind, ViewKind, ViewPlacement, layout_for
from .notes import NotesBlock, build_notes
from .oring_views import render_oring_front_view, render_oring_section_view
from .svg_utils import escape
from .title_block import TitleBlock, TitleBlockInfo

logger = logging.getLogger(__name__)


@dataclass
class SealDrawing:
    """
    Drawing sheet for one part record.

    Attributes:
        record: Part to draw (not modified)
        config: Unit, notes and Detail A settings
    """
    record: PartRecord
    config: DrawingConfig = field(default_factory=DrawingConfig)

    _svg_content: str = field(default="", init=False, repr=False)
    _regions: SheetRegions = field(default_factory=SheetRegions.default, init=False, repr=False)

    @property
    def layout(self) -> SheetLayout:
        return layout_for(self.record.part_type)

    def _view_renderers(self) -> dict[ViewKind, Callable[[ViewPlacement], str]]:
        record, unit = self.record, self.config.unit
        detail_label = ""
        if record.backup_ring is not None:
            detail_label = spiral_detail_label(record.backup_ring, self.config.detail_a_uses_record_angle)
        return {
            ViewKind.ORING_FRONT: lambda p: render_oring_front_view(
                record.oring, p.center, p.scale, unit),
            ViewKind.ORING_SECTION: lambda p: render_oring_section_view(
                record.oring, p.center, p.scale, unit),
            ViewKind.BACKUP_RING_FRONT: lambda p: render_backup_ring_front_view(
                record.backup_ring, p.center, p.scale, unit),
            ViewKind.BACKUP_RING_SIDE: lambda p: render_backup_ring_side_view(
                record.backup_ring, p.center, p.scale, unit, detail_label),
        }

    def _create_views(self) -> str:
        renderers = self._view_renderers()
        parts = []
        for placement in self.layout.views:
            svg = renderers[placement.kind](placement)
            if not svg:
                logger.debug("Skipping %s view: geometry missing", placement.kind.value)
                continue
            parts.append(svg)
        return "\n".join(parts)

    def _create_table(self) -> str:
        table = self.layout.table
        if table is TableKind.COMPOSITE_BOM:
            return CompositeBOMTable(build_bom_rows(self.record, self.config.unit)).generate_svg()
        if table is TableKind.BACKUP_RING_DIMENSIONS:
            return BackupRingDimensionTable(self.record.metadata.part_no, self.record.backup_ring).generate_svg()
        return ""

    def _create_view_canvas(self) -> str:
        return "\n".join([
            f'<g id="view-canvas" transform="{self._regions.canvas_transform()}">',
            self._create_table(),
            self._create_views(),
            "</g>",
        ])

    def _create_border(self) -> str:
        return self._regions.border.svg_rect(stroke_width=OUTLINE_WIDTH)

    def _create_title(self) -> str:
        cx, _ = self._regions.title.center
        title = f"[ {self.record.part_type.display_title} ]"
        width = len(title) * 13
        return (
            f'<g class="sheet-title">\n'
            f'<text x="{cx:.2f}" y="{TITLE_Y}" text-anchor="middle" font-size="24" '
            f'font-weight="bold" letter-spacing="3">{escape(title)}</text>\n'
            f'<line x1="{cx - width / 2:.2f}" y1="{TITLE_Y + 5}" x2="{cx + width / 2:.2f}" '
            f'y2="{TITLE_Y + 5}" stroke="{LINE_COLOR}" stroke-width="1.5"/>\n'
            f'</g>'
        )

    def _create_date_stamp(self) -> str:
        return (
            f'<text class="date-stamp" x="{DATE_STAMP_X}" y="{DATE_STAMP_Y}" font-size="14">'
            f'Created: {escape(self.record.metadata.created_date)}</text>'
        )

    def _create_notes(self) -> str:
        notes = build_notes(
            self.record,
            unit=self.config.unit,
            tolerance_note=self.config.tolerance_grade_note,
            use_record_angle=self.config.detail_a_uses_record_angle,
        )
        return NotesBlock(notes).generate_svg()

    def _create_title_block(self) -> str:
        info = TitleBlockInfo.from_record(self.record, self.config.default_company_name)
        return TitleBlock(info).generate_svg()

    def generate(self) -> str:
        """Generate the complete sheet as an SVG document."""
        svg_header = f'''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg"
     width="{SHEET_WIDTH_MM}mm" height="{SHEET_HEIGHT_MM}mm"
     viewBox="0 0 {SHEET_WIDTH} {SHEET_HEIGHT}">
<defs>
  <pattern id="{HATCH_ID}" patternUnits="userSpaceOnUse" width="4" height="4">
    <path d="M-1,1 l2,-2 M0,4 l4,-4 M3,5 l2,-2" stroke="{LINE_COLOR}" stroke-width="0.5"/>
  </pattern>
  <marker id="{ARROW_MARKER_ID}" markerWidth="10" markerHeight="10" refX="9" refY="3"
          orient="auto" markerUnits="strokeWidth">
    <path d="M0,0 L0,6 L9,3 z" fill="{LINE_COLOR}"/>
  </marker>
</defs>
<rect x="0" y="0" width="{SHEET_WIDTH}" height="{SHEET_HEIGHT}" fill="white"/>
<g id="sheet" font-family="{FONT_FAMILY}" fill="{LINE_COLOR}">
'''
        svg_content = [
            self._create_border(),
            self._create_title(),
            self._create_date_stamp(),
            self._create_view_canvas(),
            self._create_notes(),
            self._create_title_block(),
        ]
        svg_footer = "\n</g>\n</svg>\n"

        self._svg_content = svg_header + "\n".join(svg_content) + svg_footer
        return self._svg_content

    def export_svg(self, filepath: str | Path) -> Path:
        """Write the sheet as an SVG file."""
        if not self._svg_content:
            self.generate()

        path = Path(filepath)
        path.write_text(self._svg_content, encoding="utf-8")
        logger.info("Exported SVG: %s", path)
        return path

    def export_pdf(self, filepath: str | Path) -> Path:
        """Write the sheet as a single-page A4 landscape PDF."""
        if not self._svg_content:
            self.generate()

        path = Path(filepath)
        # svglib reads from a file path
        with tempfile.NamedTemporaryFile(mode="w", suffix=".svg",
                                         encoding="utf-8", delete=False) as tmp:
            tmp.write(self._svg_content)
            tmp_path = tmp.name

        try:
            drawing = svg2rlg(tmp_path)
            if drawing is None:
                raise ExportError("Failed to parse generated SVG")

            page_width, page_height = landscape(A4)
            scale = min(page_width / drawing.width, page_height / drawing.height)
            drawing.width *= scale
            drawing.height *= scale
            drawing.scale(scale, scale)

            pdf = canvas.Canvas(str(path), pagesize=(page_width, page_height))
            pdf.setTitle(self.record.metadata.drawing_no)
            renderPDF.draw(
                drawing, pdf,
                (page_width - drawing.width) / 2,
                (page_height - drawing.height) / 2,
            )
            pdf.showPage()
            pdf.save()
        finally:
            os.unlink(tmp_path)

        logger.info("Exported PDF: %s", path)
        return path


@dataclass(frozen=True)
class ExportResult:
    """Files written by export_drawing and the record as stored in history."""
    pdf_path: Path
    svg_path: Path | None
    record: PartRecord


def drawing_file_stem(drawing_no: str) -> str:
    """File name stem for a drawing number (path separators replaced)."""
    return re.sub(r'[\\/:*?"<>|\s]+', "_", drawing_no.strip())


def export_drawing(
    record: PartRecord,
    output_dir: str | Path,
    config: DrawingConfig | None = None,
    history: DrawingHistory | None = None,
    write_svg: bool = False,
) -> ExportResult:
    """
    Validate, draw and export ``record`` as ``<drawingNo>.pdf``.

    The record is appended to ``history`` only after every file has been
    written; a failed export leaves the history untouched.

    Raises:
        DrawingDataError: if the record is incomplete
        ExportError: if writing the SVG or PDF fails
    """
    config = config or DrawingConfig()
    validate_part_record(record)
    stem = drawing_file_stem(record.metadata.drawing_no)
    if not stem:
        raise DrawingDataError(["Drawing number is required for export"])

    out = Path(output_dir)
    drawing = SealDrawing(record, config)
    drawing.generate()

    svg_path = None
    try:
        out.mkdir(parents=True, exist_ok=True)
        if write_svg:
            svg_path = drawing.export_svg(out / f"{stem}.svg")
        pdf_path = drawing.export_pdf(out / f"{stem}.pdf")
    except Exception as e:
        # no partial exports
        if svg_path is not None:
            svg_path.unlink(missing_ok=True)
        if isinstance(e, ExportError):
            raise
        raise ExportError(f"Export of drawing {record.metadata.drawing_no} failed: {e}") from e

    stored = history.append(record) if history is not None else record
    return ExportResult(pdf_path=pdf_path, svg_path=svg_path, record=stored)
