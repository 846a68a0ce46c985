"""
General notes for seal ring drawings.

Builds the note list for a record and renders it as a numbered block at
the bottom left of the sheet.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import DEFAULT_TOLERANCE_NOTE
from ..parts import PartRecord, PartType, Shape
from .backup_ring_views import spiral_detail_label
from .constants import LABEL_FONT_SIZE, NOTES_BOTTOM, NOTES_LINE_HEIGHT, NOTES_X
from .svg_utils import svg_text
from .tolerance import format_dimtol


def shape_notes(record: PartRecord, use_record_angle: bool = False) -> list[str]:
    """Cut-angle / shape notes for records that include a backup ring."""
    geometry = record.backup_ring
    if geometry is None or not record.shows_backup_ring:
        return []

    composite = record.part_type is PartType.COMPOSITE
    suffix = " (backup ring)" if composite else ""

    if geometry.shape is Shape.BIAS_CUT:
        return [f"Bias cut angle: {format_dimtol(geometry.effective_cut_angle(), '°')}{suffix}"]
    if geometry.shape is Shape.SPIRAL:
        return [f"Spiral angle: {spiral_detail_label(geometry, use_record_angle)}{suffix}"]
    if not composite:
        return ["Shape: Endless"]
    return []


def build_notes(
    record: PartRecord,
    unit: str = "mm",
    tolerance_note: str = DEFAULT_TOLERANCE_NOTE,
    use_record_angle: bool = False,
) -> list[str]:
    """
    Notes printed on the sheet, in order.

    1. Dimension unit
    2. General tolerance grade
    3. The record's free-text note (if any)
    4. Shape specific angle notes (if any)
    """
    notes = [f"Dimensions in {unit}.", tolerance_note]
    if record.metadata.note.strip():
        notes.append(record.metadata.note.strip())
    notes.extend(shape_notes(record, use_record_angle))
    return notes


@dataclass(frozen=True)
class NotesBlock:
    """Numbered notes list growing upward from a fixed baseline."""
    notes: list[str]
    x: float = NOTES_X
    bottom: float = NOTES_BOTTOM
    line_height: float = NOTES_LINE_HEIGHT

    @property
    def top(self) -> float:
        return self.bottom - self.line_height * (len(self.notes) + 1)

    def generate_svg(self) -> str:
        y = self.top
        parts = ['<g class="notes">',
                 svg_text(self.x, y, "NOTES", LABEL_FONT_SIZE + 2, anchor="start", bold=True)]
        for i, note in enumerate(self.notes, start=1):
            parts.append(svg_text(self.x, y + i * self.line_height, f"{i}. {note}",
                                  LABEL_FONT_SIZE, anchor="start"))
        parts.append("</g>")
        return "\n".join(parts)
