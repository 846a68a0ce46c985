"""
Part records for seal ring drawings.

A part record is the single input to the drawing engine. It describes one
O-ring, one backup ring, or a composite set of both, together with the
metadata shown in the title block.

Dimensions are stored as nominal value plus an asymmetric tolerance band.
A nominal of ``None`` means "not entered yet"; it is distinct from zero and
is rejected by validation before a record reaches the drawing engine.

Records serialize to the camelCase JSON layout used by the drawing history
(``to_dict`` / ``from_dict``).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any


# Default cut angles (degrees) used when a cut shape has no angle entered
DEFAULT_BIAS_CUT_ANGLE = 22.0
DEFAULT_SPIRAL_ANGLE = 30.0
DEFAULT_SPIRAL_ANGLE_TOL = 5.0


class PartType(Enum):
    """Part families that can be drawn."""
    ORING = "O-Ring"
    BACKUP_RING = "Backup Ring"
    COMPOSITE = "Composite"

    @classmethod
    def parse(cls, value: str | PartType) -> PartType:
        """Parse a part type from its value or name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        key = _normalize_key(str(value))
        for member in cls:
            if key in (_normalize_key(member.value), _normalize_key(member.name)):
                return member
        raise ValueError(f"Unknown part type: {value!r}")

    @property
    def display_title(self) -> str:
        """Sheet heading for this part type."""
        return {
            PartType.ORING: "O-RING",
            PartType.BACKUP_RING: "BACKUP RING",
            PartType.COMPOSITE: "COMPOSITE SET DELIVERY DRAWING",
        }[self]

    @property
    def part_name(self) -> str:
        """Part name shown in the title block."""
        if self is PartType.COMPOSITE:
            return "O-Ring + Backup Ring Set"
        return self.value


class Shape(Enum):
    """Backup ring construction styles."""
    ENDLESS = "Endless"
    SPIRAL = "Spiral"
    BIAS_CUT = "Bias Cut"

    @classmethod
    def parse(cls, value: str | Shape) -> Shape:
        """Parse a shape from "Bias Cut", "BiasCut", "bias-cut", "BIAS_CUT", ..."""
        if isinstance(value, cls):
            return value
        key = _normalize_key(str(value))
        for member in cls:
            if key in (_normalize_key(member.value), _normalize_key(member.name)):
                return member
        raise ValueError(f"Unknown backup ring shape: {value!r}")

    @property
    def has_cut(self) -> bool:
        """Whether the ring is cut (and therefore carries a cut angle)."""
        return self is not Shape.ENDLESS


def _normalize_key(text: str) -> str:
    return "".join(ch for ch in text.lower() if ch.isalnum())


@dataclass(frozen=True)
class DimTol:
    """
    A nominal dimension with plus/minus tolerances.

    Attributes:
        nominal: Nominal value, or None while the value is still being entered
        tol_plus: Upper deviation (non-negative)
        tol_minus: Lower deviation (non-negative, stored as a magnitude)
    """
    nominal: float | None = None
    tol_plus: float = 0.0
    tol_minus: float = 0.0

    @classmethod
    def symmetric(cls, nominal: float | None, tol: float = 0.0) -> DimTol:
        """Build a dimension with an equal plus/minus band."""
        return cls(nominal, tol, tol)

    @property
    def is_set(self) -> bool:
        return self.nominal is not None

    @property
    def value(self) -> float:
        """Nominal value with "not entered" read as zero."""
        return 0.0 if self.nominal is None else float(self.nominal)

    def to_dict(self, prefix: str) -> dict[str, Any]:
        return {
            prefix: self.nominal,
            f"{prefix}TolPlus": self.tol_plus,
            f"{prefix}TolMinus": self.tol_minus,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], prefix: str) -> DimTol:
        """
        Read ``<prefix>``, ``<prefix>TolPlus`` and ``<prefix>TolMinus``.

        Older history entries stored a single symmetric ``<prefix>Tol``; it
        fills whichever side is missing.
        """
        legacy = data.get(f"{prefix}Tol")
        plus = data.get(f"{prefix}TolPlus", legacy)
        minus = data.get(f"{prefix}TolMinus", legacy)
        return cls(
            nominal=_to_float(data.get(prefix)),
            tol_plus=_to_float(plus) or 0.0,
            tol_minus=_to_float(minus) or 0.0,
        )


def _to_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return float(value)


def _mapping(data: dict[str, Any], key: str) -> dict[str, Any] | None:
    value = data.get(key)
    if not value:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"{key} must be a mapping, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class ORingGeometry:
    """O-ring inner diameter (ID) and cross-section width (W)."""
    inner_diameter: DimTol = field(default_factory=DimTol)
    cross_section: DimTol = field(default_factory=DimTol)

    def to_dict(self) -> dict[str, Any]:
        return {**self.inner_diameter.to_dict("id"), **self.cross_section.to_dict("w")}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ORingGeometry:
        return cls(
            inner_diameter=DimTol.from_dict(data, "id"),
            cross_section=DimTol.from_dict(data, "w"),
        )


@dataclass(frozen=True)
class BackupRingGeometry:
    """
    Backup ring dimensions and cut shape.

    ``cut_angle`` is only drawn for cut shapes; when it is unset the shape
    default applies (see ``effective_cut_angle``).
    """
    outer_diameter: DimTol = field(default_factory=DimTol)
    inner_diameter: DimTol = field(default_factory=DimTol)
    thickness: DimTol = field(default_factory=DimTol)
    shape: Shape = Shape.BIAS_CUT
    cut_angle: DimTol | None = None

    @property
    def radial_width(self) -> float:
        """(OD - ID) / 2 with unset values read as zero."""
        return (self.outer_diameter.value - self.inner_diameter.value) / 2

    def effective_cut_angle(self) -> DimTol | None:
        """Configured cut angle, or the default for the shape."""
        if not self.shape.has_cut:
            return None
        if self.cut_angle is not None and self.cut_angle.nominal:
            return self.cut_angle
        if self.shape is Shape.SPIRAL:
            return DimTol.symmetric(DEFAULT_SPIRAL_ANGLE, DEFAULT_SPIRAL_ANGLE_TOL)
        tol = self.cut_angle or DimTol()
        return DimTol(DEFAULT_BIAS_CUT_ANGLE, tol.tol_plus, tol.tol_minus)

    def to_dict(self) -> dict[str, Any]:
        data = {
            **self.outer_diameter.to_dict("od"),
            **self.inner_diameter.to_dict("id"),
            **self.thickness.to_dict("t"),
            "shape": self.shape.value,
        }
        if self.cut_angle is not None:
            data.update(self.cut_angle.to_dict("angle"))
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BackupRingGeometry:
        # Entries saved without an angle load with the bias-cut default
        angle = DimTol.from_dict(data, "angle")
        if angle.nominal is None:
            angle = DimTol(DEFAULT_BIAS_CUT_ANGLE, angle.tol_plus, angle.tol_minus)
        return cls(
            outer_diameter=DimTol.from_dict(data, "od"),
            inner_diameter=DimTol.from_dict(data, "id"),
            thickness=DimTol.from_dict(data, "t"),
            shape=Shape.parse(data.get("shape", Shape.BIAS_CUT)),
            cut_angle=angle,
        )


@dataclass(frozen=True)
class CompositeDetails:
    """Per-component part numbers and materials of a composite set."""
    oring_part_no: str = ""
    oring_material: str = ""
    oring_hardness: str = ""
    backup_ring_part_no: str = ""
    backup_ring_material: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "oRingPartNo": self.oring_part_no,
            "oRingMaterial": self.oring_material,
            "oRingHardness": self.oring_hardness,
            "backupRingPartNo": self.backup_ring_part_no,
            "backupRingMaterial": self.backup_ring_material,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CompositeDetails:
        return cls(
            oring_part_no=str(data.get("oRingPartNo", "")),
            oring_material=str(data.get("oRingMaterial", "")),
            oring_hardness=str(data.get("oRingHardness", "")),
            backup_ring_part_no=str(data.get("backupRingPartNo", "")),
            backup_ring_material=str(data.get("backupRingMaterial", "")),
        )


@dataclass(frozen=True)
class PartMetadata:
    """Title block and notes information."""
    drawing_no: str = ""
    part_no: str = ""
    customer_code: str = ""
    company_name: str = ""
    material: str = ""
    hardness: str = ""
    note: str = ""
    created_at: str = ""

    def __post_init__(self):
        if not self.created_at:
            object.__setattr__(self, "created_at", datetime.now().isoformat(timespec="seconds"))

    @property
    def created_date(self) -> str:
        """Date part of the ISO creation timestamp."""
        return self.created_at.split("T")[0]


@dataclass(frozen=True)
class PartRecord:
    """
    Everything needed to draw one sheet.

    Attributes:
        part_type: Which part family the sheet shows
        metadata: Title block data and free-text note
        oring: O-ring geometry (O-Ring and Composite records)
        backup_ring: Backup ring geometry (Backup Ring and Composite records)
        composite: Component part numbers/materials (Composite records)
        record_id: History identifier, assigned when the record is saved
    """
    part_type: PartType
    metadata: PartMetadata = field(default_factory=PartMetadata)
    oring: ORingGeometry | None = None
    backup_ring: BackupRingGeometry | None = None
    composite: CompositeDetails | None = None
    record_id: str = ""

    def __post_init__(self):
        if not isinstance(self.part_type, PartType):
            object.__setattr__(self, "part_type", PartType.parse(self.part_type))

    @property
    def shows_oring(self) -> bool:
        return self.part_type in (PartType.ORING, PartType.COMPOSITE)

    @property
    def shows_backup_ring(self) -> bool:
        return self.part_type in (PartType.BACKUP_RING, PartType.COMPOSITE)

    def with_id(self, record_id: str) -> PartRecord:
        return replace(self, record_id=record_id)

    def to_dict(self) -> dict[str, Any]:
        meta = self.metadata
        data: dict[str, Any] = {
            "id": self.record_id,
            "drawingNo": meta.drawing_no,
            "companyName": meta.company_name,
            "partType": self.part_type.value,
            "partNo": meta.part_no,
            "customerCode": meta.customer_code,
            "material": meta.material,
            "hardness": meta.hardness,
            "note": meta.note,
            "createdAt": meta.created_at,
        }
        if self.oring is not None:
            data["oRingDims"] = self.oring.to_dict()
        if self.backup_ring is not None:
            data["backupRingDims"] = self.backup_ring.to_dict()
        if self.composite is not None:
            data["compositeDetails"] = self.composite.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PartRecord:
        """Build a record from the history/record-file layout."""
        oring = _mapping(data, "oRingDims")
        backup = _mapping(data, "backupRingDims")
        composite = _mapping(data, "compositeDetails")
        return cls(
            part_type=PartType.parse(data.get("partType", PartType.ORING)),
            metadata=PartMetadata(
                drawing_no=str(data.get("drawingNo", "")),
                part_no=str(data.get("partNo", "")),
                customer_code=str(data.get("customerCode", "")),
                company_name=str(data.get("companyName", "")),
                material=str(data.get("material", "")),
                hardness=str(data.get("hardness", "")),
                note=str(data.get("note", "") or ""),
                created_at=str(data.get("createdAt", "") or ""),
            ),
            oring=ORingGeometry.from_dict(oring) if oring else None,
            backup_ring=BackupRingGeometry.from_dict(backup) if backup else None,
            composite=CompositeDetails.from_dict(composite) if composite else None,
            record_id=str(data.get("id", "") or ""),
        )
