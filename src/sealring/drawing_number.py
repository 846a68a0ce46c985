"""Drawing number convention: ``YYYYMMDD_<type>_<sequence>``."""

from __future__ import annotations

from datetime import date

from .parts import PartType


def type_code(part_type: PartType | str) -> str:
    """"OR" for O-rings, "BR" for backup rings and composite sets."""
    return "OR" if PartType.parse(part_type) is PartType.ORING else "BR"


def generate_drawing_no(part_type: PartType | str, sequence: int, today: date | None = None) -> str:
    """
    Build a drawing number such as ``20240315_OR_0001``.

    Args:
        part_type: Part family of the drawing
        sequence: Running number, zero-padded to four digits
        today: Date stamp (defaults to the current date)
    """
    if sequence < 0:
        raise ValueError(f"sequence must not be negative, got {sequence}")
    today = today or date.today()
    return f"{today:%Y%m%d}_{type_code(part_type)}_{sequence:04d}"
