"""Shared part records and SVG helpers for the sealring tests."""

import xml.etree.ElementTree as ET

import pytest

from sealring.parts import (
    BackupRingGeometry,
    CompositeDetails,
    DimTol,
    ORingGeometry,
    PartMetadata,
    PartRecord,
    PartType,
    Shape,
)

SVG_NS = "{http://www.w3.org/2000/svg}"


def parse_fragment(svg: str) -> ET.Element:
    """Parse an SVG fragment (one or more sibling elements) under a dummy root."""
    return ET.fromstring(f"<root>{svg}</root>")


def parse_sheet(svg: str) -> ET.Element:
    """Parse a complete SVG document."""
    return ET.fromstring(svg.encode("utf-8"))


def local_name(element: ET.Element) -> str:
    return element.tag.replace(SVG_NS, "")


def find_all(root: ET.Element, tag: str | None = None, cls: str | None = None) -> list[ET.Element]:
    """Elements below ``root`` with the given tag and/or class token."""
    found = []
    for element in root.iter():
        if tag is not None and local_name(element) != tag:
            continue
        if cls is not None and cls not in element.get("class", "").split():
            continue
        found.append(element)
    return found


def texts(root: ET.Element) -> list[str]:
    """Content of every text element below ``root``."""
    return [element.text or "" for element in find_all(root, "text")]


def _metadata(**overrides) -> PartMetadata:
    values = dict(
        drawing_no="20240315_OR_0001",
        part_no="OR-P10-001",
        customer_code="C-100",
        company_name="ACME Seals",
        material="NBR-70-1 (Type 1A)",
        hardness="Hs70",
        created_at="2024-03-15T10:00:00",
    )
    values.update(overrides)
    return PartMetadata(**values)


def _backup_ring(shape: Shape, angle: DimTol | None) -> BackupRingGeometry:
    return BackupRingGeometry(
        outer_diameter=DimTol.symmetric(35.0, 0.05),
        inner_diameter=DimTol.symmetric(30.0, 0.05),
        thickness=DimTol.symmetric(1.5, 0.1),
        shape=shape,
        cut_angle=angle,
    )


@pytest.fixture
def oring_geometry() -> ORingGeometry:
    return ORingGeometry(DimTol.symmetric(9.8, 0.15), DimTol.symmetric(1.9, 0.08))


@pytest.fixture
def bias_cut_geometry() -> BackupRingGeometry:
    return _backup_ring(Shape.BIAS_CUT, DimTol.symmetric(30, 5))


@pytest.fixture
def spiral_geometry() -> BackupRingGeometry:
    # Deliberately not the standard 30°±5°
    return _backup_ring(Shape.SPIRAL, DimTol.symmetric(45, 2))


@pytest.fixture
def endless_geometry() -> BackupRingGeometry:
    return _backup_ring(Shape.ENDLESS, None)


@pytest.fixture
def oring_record(oring_geometry) -> PartRecord:
    return PartRecord(PartType.ORING, _metadata(), oring=oring_geometry)


@pytest.fixture
def bias_cut_record(bias_cut_geometry) -> PartRecord:
    return PartRecord(
        PartType.BACKUP_RING,
        _metadata(drawing_no="20240315_BR_0002", part_no="BR-T1-001", hardness="Hs90"),
        backup_ring=bias_cut_geometry,
    )


@pytest.fixture
def spiral_record(spiral_geometry) -> PartRecord:
    return PartRecord(
        PartType.BACKUP_RING,
        _metadata(drawing_no="20240315_BR_0003", part_no="BR-SP-001"),
        backup_ring=spiral_geometry,
    )


@pytest.fixture
def composite_record(spiral_geometry) -> PartRecord:
    return PartRecord(
        PartType.COMPOSITE,
        _metadata(drawing_no="20240315_BR_0004", part_no="SET-001", material="", hardness=""),
        oring=ORingGeometry(DimTol.symmetric(20.0, 0.2), DimTol.symmetric(2.4, 0.09)),
        backup_ring=spiral_geometry,
        composite=CompositeDetails(
            oring_part_no="OR-001",
            oring_material="NBR-70-1 (Type 1A)",
            oring_hardness="Hs70",
            backup_ring_part_no="BR-001",
            backup_ring_material="PTFE",
        ),
    )
