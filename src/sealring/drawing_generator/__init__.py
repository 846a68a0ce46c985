"""
Drawing Generator Module

Generates seal ring delivery drawings as SVG, with PDF export.

Features:
- O-ring front and cross-section views
- Backup ring front and side views (endless, spiral, bias cut)
- Composite set sheet with bill of materials
- Title block and general notes
- A4 landscape format

Usage:
    from sealring.drawing_generator import SealDrawing

    drawing = SealDrawing(record)
    svg = drawing.generate()
    drawing.export_pdf("20240315_OR_0001.pdf")
"""

from .backup_ring_views import render_backup_ring_front_view, render_backup_ring_side_view
from .bom import BackupRingDimensionTable, BOMRow, CompositeBOMTable, build_bom_rows
from .constants import SHEET_HEIGHT, SHEET_HEIGHT_MM, SHEET_WIDTH, SHEET_WIDTH_MM
from .dimensions import LinearDimension, draw_dimension
from .drawing import ExportResult, SealDrawing, export_drawing
from .layout import SHEET_LAYOUTS, SheetLayout, SheetRegions, ViewKind
from .oring_views import render_oring_front_view, render_oring_section_view
from .scaling import scale_backup_ring, scale_oring
from .title_block import TitleBlock, TitleBlockInfo
from .tolerance import format_dimtol, format_tolerance
from .view_area import ViewArea

__all__ = [
    # Main classes
    'SealDrawing',
    'ExportResult',
    'ViewArea',
    'TitleBlock',
    'TitleBlockInfo',
    'SheetLayout',
    'SheetRegions',
    'ViewKind',
    # Tables
    'BOMRow',
    'CompositeBOMTable',
    'BackupRingDimensionTable',
    'LinearDimension',
    # Functions
    'export_drawing',
    'build_bom_rows',
    'draw_dimension',
    'format_tolerance',
    'format_dimtol',
    'scale_oring',
    'scale_backup_ring',
    'render_oring_front_view',
    'render_oring_section_view',
    'render_backup_ring_front_view',
    'render_backup_ring_side_view',
    # Constants
    'SHEET_WIDTH',
    'SHEET_HEIGHT',
    'SHEET_WIDTH_MM',
    'SHEET_HEIGHT_MM',
    'SHEET_LAYOUTS',
]
