"""
Standard part presets.

JIS B 2401 P/G series O-rings and common backup ring sizes, plus the
material grades offered on the input form.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .parts import BackupRingGeometry, DimTol, ORingGeometry, PartRecord, PartType, Shape

MATERIALS = [
    "NBR-70-1 (Type 1A)",
    "NBR-90-1 (Type 1B)",
    "FKM-70 (Type 4D)",
    "VMQ-50 (Silicone)",
    "EPDM-70",
]


@dataclass(frozen=True)
class DimensionPreset:
    """A named set of standard dimensions."""
    code: str
    description: str
    part_type: PartType
    oring: ORingGeometry | None = None
    backup_ring: BackupRingGeometry | None = None


def _oring(inner: float, inner_tol: float, width: float, width_tol: float) -> ORingGeometry:
    return ORingGeometry(DimTol.symmetric(inner, inner_tol), DimTol.symmetric(width, width_tol))


def _bias_cut(od: float, od_tol: float, bore: float, bore_tol: float,
              t: float, t_tol: float) -> BackupRingGeometry:
    return BackupRingGeometry(
        outer_diameter=DimTol.symmetric(od, od_tol),
        inner_diameter=DimTol.symmetric(bore, bore_tol),
        thickness=DimTol.symmetric(t, t_tol),
        shape=Shape.BIAS_CUT,
        cut_angle=DimTol.symmetric(30, 5),
    )


PRESETS: list[DimensionPreset] = [
    DimensionPreset("P-10", "JIS P-10 Standard O-Ring", PartType.ORING,
                    oring=_oring(9.8, 0.15, 1.9, 0.08)),
    DimensionPreset("P-20", "JIS P-20 Standard O-Ring", PartType.ORING,
                    oring=_oring(19.8, 0.20, 2.4, 0.09)),
    DimensionPreset("G-30", "JIS G-30 Standard O-Ring", PartType.ORING,
                    oring=_oring(29.4, 0.29, 3.1, 0.10)),
    DimensionPreset("BR-T1", "Standard T1 Backup Ring", PartType.BACKUP_RING,
                    backup_ring=_bias_cut(35.0, 0.05, 30.0, 0.05, 1.5, 0.1)),
    DimensionPreset("BR-T2", "Heavy Duty T2 Backup Ring", PartType.BACKUP_RING,
                    backup_ring=_bias_cut(55.0, 0.1, 45.0, 0.1, 2.0, 0.1)),
]


def get_preset(code: str) -> DimensionPreset:
    """Look up a preset by code (case-insensitive)."""
    for preset in PRESETS:
        if preset.code.lower() == code.strip().lower():
            return preset
    raise KeyError(f"Unknown preset: {code}")


def apply_preset(record: PartRecord, code: str) -> PartRecord:
    """
    Return a copy of ``record`` with the preset's part type and dimensions.

    Geometry the preset does not define is kept from ``record``.
    """
    preset = get_preset(code)
    return replace(
        record,
        part_type=preset.part_type,
        oring=preset.oring or record.oring,
        backup_ring=preset.backup_ring or record.backup_ring,
    )
