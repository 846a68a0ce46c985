"""
Input validation for part records.

This is the gate in front of the drawing engine: renderers assume the
geometry they are given is complete and only defend against it being
absent altogether.
"""

from __future__ import annotations

from .exceptions import DrawingDataError
from .parts import BackupRingGeometry, DimTol, ORingGeometry, PartRecord, PartType


def _check_dimension(dim: DimTol, label: str, problems: list[str], positive: bool = True) -> None:
    if dim.nominal is None:
        problems.append(f"{label} is required")
    elif positive and dim.nominal <= 0:
        problems.append(f"{label} must be greater than zero")
    if dim.tol_plus < 0 or dim.tol_minus < 0:
        problems.append(f"{label} tolerances must not be negative")


def _check_oring(geometry: ORingGeometry | None, problems: list[str]) -> None:
    if geometry is None:
        problems.append("O-ring dimensions are required")
        return
    _check_dimension(geometry.inner_diameter, "O-ring ID", problems)
    _check_dimension(geometry.cross_section, "O-ring W", problems)


def _check_backup_ring(geometry: BackupRingGeometry | None, problems: list[str]) -> None:
    if geometry is None:
        problems.append("Backup ring dimensions are required")
        return
    _check_dimension(geometry.outer_diameter, "Backup ring OD", problems)
    _check_dimension(geometry.inner_diameter, "Backup ring ID", problems)
    _check_dimension(geometry.thickness, "Backup ring T", problems)

    od, bore = geometry.outer_diameter.nominal, geometry.inner_diameter.nominal
    if od is not None and bore is not None and od <= bore:
        problems.append("Backup ring OD must be larger than ID")

    if geometry.shape.has_cut and geometry.cut_angle is not None:
        angle = geometry.cut_angle
        if angle.nominal is not None and not 0 <= angle.nominal < 90:
            problems.append("Cut angle must be between 0 and 90 degrees")
        if angle.tol_plus < 0 or angle.tol_minus < 0:
            problems.append("Cut angle tolerances must not be negative")


def find_problems(record: PartRecord) -> list[str]:
    """Return every validation problem of ``record`` (empty when valid)."""
    problems: list[str] = []

    if not record.metadata.part_no.strip():
        problems.append("Part number is required")

    if record.shows_oring:
        _check_oring(record.oring, problems)
    if record.shows_backup_ring:
        _check_backup_ring(record.backup_ring, problems)

    if record.part_type is PartType.COMPOSITE:
        details = record.composite
        if details is None:
            problems.append("Composite component details are required")
        else:
            if not details.oring_part_no.strip():
                problems.append("O-ring component part number is required")
            if not details.backup_ring_part_no.strip():
                problems.append("Backup ring component part number is required")

    return problems


def validate_part_record(record: PartRecord) -> None:
    """
    Raise DrawingDataError if ``record`` is not ready to be drawn.

    Raises:
        DrawingDataError: listing all problems found
    """
    problems = find_problems(record)
    if problems:
        raise DrawingDataError(problems)
