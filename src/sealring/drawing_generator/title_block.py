"""
Title block for seal ring drawings.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..parts import PartRecord, PartType
from .constants import (
    HEADER_FILL,
    LABEL_FONT_SIZE,
    OUTLINE_WIDTH,
    SHEET_HEIGHT,
    SHEET_WIDTH,
    THIN_LINE_WIDTH,
    TITLE_BLOCK_INSET,
    TITLE_BLOCK_LABEL_WIDTH,
    TITLE_BLOCK_ROW_HEIGHT,
    TITLE_BLOCK_WIDTH,
)
from .svg_utils import svg_line, svg_rect, svg_text
from .view_area import ViewArea

SEE_TABLE = "See table"


@dataclass(frozen=True)
class TitleBlockInfo:
    """Information displayed in the title block."""
    drawing_number: str = ""
    part_name: str = ""
    part_number: str = ""
    customer_code: str = ""
    material: str = ""
    company_name: str = ""

    @classmethod
    def from_record(cls, record: PartRecord, default_company_name: str = "") -> TitleBlockInfo:
        """Title block contents of ``record``; composite sets refer to the BOM for materials."""
        meta = record.metadata
        if record.part_type is PartType.COMPOSITE:
            material = SEE_TABLE
        else:
            material = f"{meta.material} / {meta.hardness}"
        return cls(
            drawing_number=meta.drawing_no,
            part_name=record.part_type.part_name,
            part_number=meta.part_no,
            customer_code=meta.customer_code,
            material=material,
            company_name=meta.company_name or default_company_name,
        )

    @property
    def rows(self) -> list[tuple[str, str]]:
        return [
            ("DWG No.", self.drawing_number),
            ("PART NAME", self.part_name),
            ("PART No.", self.part_number),
            ("CUSTOMER", self.customer_code),
            ("MATERIAL / HARDNESS", self.material),
            ("COMPANY", self.company_name),
        ]


@dataclass(frozen=True)
class TitleBlock:
    """
    Two-column title block anchored at the bottom right corner of the sheet.

    Each row is a shaded label cell and a value cell; the drawing number row
    is printed bold.
    """
    info: TitleBlockInfo

    @property
    def area(self) -> ViewArea:
        return ViewArea.anchored_bottom_right(
            SHEET_WIDTH, SHEET_HEIGHT,
            TITLE_BLOCK_WIDTH, TITLE_BLOCK_ROW_HEIGHT * len(self.info.rows),
            TITLE_BLOCK_INSET,
        )

    def generate_svg(self) -> str:
        area = self.area
        rh = TITLE_BLOCK_ROW_HEIGHT
        value_x = area.x + TITLE_BLOCK_LABEL_WIDTH

        parts = ['<g class="title-block">',
                 svg_rect(area.x, area.y, TITLE_BLOCK_LABEL_WIDTH, area.height, 0,
                          fill=HEADER_FILL, stroke="none")]

        for i, (label, value) in enumerate(self.info.rows):
            row_y = area.y + i * rh
            text_y = row_y + rh * 0.65
            if i > 0:
                parts.append(svg_line(area.x, row_y, area.right, row_y, THIN_LINE_WIDTH))
            parts.append(svg_text(area.x + 6, text_y, label, 11, anchor="start", bold=True))
            is_number = i == 0
            parts.append(svg_text(value_x + 6, text_y, value,
                                  LABEL_FONT_SIZE + 3 if is_number else LABEL_FONT_SIZE,
                                  anchor="start", bold=is_number))

        parts.append(svg_line(value_x, area.y, value_x, area.bottom, THIN_LINE_WIDTH))
        parts.append(area.svg_rect(stroke_width=OUTLINE_WIDTH))
        parts.append("</g>")
        return "\n".join(parts)
