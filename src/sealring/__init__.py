"""
sealring - delivery drawings for O-rings and backup rings.

Turns a part record (O-ring, backup ring, or a composite set of both) into
a single A4 landscape drawing sheet, exported as SVG or PDF.

Usage:
    from sealring import PartRecord, SealDrawing, apply_preset

    record = apply_preset(PartRecord(PartType.ORING), "P-10")
    SealDrawing(record).export_pdf("P-10.pdf")
"""

from .config import DrawingConfig
from .drawing_generator import SealDrawing, export_drawing
from .drawing_number import generate_drawing_no
from .exceptions import ConfigError, DrawingDataError, ExportError, HistoryError, SealRingError
from .history import DrawingHistory
from .parts import (
    BackupRingGeometry,
    CompositeDetails,
    DimTol,
    ORingGeometry,
    PartMetadata,
    PartRecord,
    PartType,
    Shape,
)
from .presets import MATERIALS, PRESETS, apply_preset, get_preset
from .validation import validate_part_record

__all__ = [
    # Part records
    'PartRecord',
    'PartMetadata',
    'PartType',
    'Shape',
    'DimTol',
    'ORingGeometry',
    'BackupRingGeometry',
    'CompositeDetails',
    # Drawing
    'SealDrawing',
    'export_drawing',
    'DrawingConfig',
    'DrawingHistory',
    # Helpers
    'validate_part_record',
    'generate_drawing_no',
    'apply_preset',
    'get_preset',
    'PRESETS',
    'MATERIALS',
    # Errors
    'SealRingError',
    'DrawingDataError',
    'ConfigError',
    'ExportError',
    'HistoryError',
]
