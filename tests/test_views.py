"""
Tests for O-ring and backup ring views.

Tests cover:
- O-ring front and section views (circles, dimensions, captions)
- Backup ring front view, including the spiral break
- Backup ring side view bodies for each shape
- Detail A annotation of spiral rings
"""

import pytest

from conftest import find_all, parse_fragment, texts
from sealring.drawing_generator.backup_ring_views import (
    SIDE_BODY_RENDERERS,
    SPIRAL_DETAIL_LABEL,
    render_backup_ring_front_view,
    render_backup_ring_side_view,
    spiral_detail_label,
)
from sealring.drawing_generator.oring_views import (
    render_oring_front_view,
    render_oring_section_view,
)
from sealring.parts import BackupRingGeometry, DimTol, Shape

CENTER = (250, 250)


def _radii(root) -> list[float]:
    return sorted(float(c.get("r")) for c in find_all(root, "circle"))


# =============================================================================
# O-RING VIEWS
# =============================================================================


class TestORingFrontView:
    """Tests for render_oring_front_view()."""

    def test_group(self, oring_geometry):
        root = parse_fragment(render_oring_front_view(oring_geometry, CENTER))
        assert len(find_all(root, "g", "oring-front")) == 1

    def test_concentric_circles(self, oring_geometry):
        root = parse_fragment(render_oring_front_view(oring_geometry, CENTER))
        assert _radii(root) == pytest.approx([100.0, 140.0])
        for circle in find_all(root, "circle"):
            assert float(circle.get("cx")) == pytest.approx(250)
            assert float(circle.get("cy")) == pytest.approx(250)

    def test_centerlines_dashed(self, oring_geometry):
        root = parse_fragment(render_oring_front_view(oring_geometry, CENTER))
        dashed = [line for line in find_all(root, "line") if line.get("stroke-dasharray")]
        assert len(dashed) == 2

    def test_id_label(self, oring_geometry):
        root = parse_fragment(render_oring_front_view(oring_geometry, CENTER))
        assert "ID 9.8mm ±0.15mm" in texts(root)
        assert "FRONT VIEW (O-RING)" in texts(root)

    def test_unit_string(self, oring_geometry):
        root = parse_fragment(render_oring_front_view(oring_geometry, CENTER, unit=""))
        assert "ID 9.8 ±0.15" in texts(root)

    def test_reduced_scale(self, oring_geometry):
        root = parse_fragment(render_oring_front_view(oring_geometry, CENTER, scale=0.6))
        assert _radii(root) == pytest.approx([60.0, 84.0])

    def test_missing_geometry(self):
        assert render_oring_front_view(None, CENTER) == ""


class TestORingSectionView:
    """Tests for render_oring_section_view()."""

    def test_hatched_round_ends(self, oring_geometry):
        root = parse_fragment(render_oring_section_view(oring_geometry, (550, 250)))
        circles = find_all(root, "circle")
        assert len(circles) == 2
        assert sorted(float(c.get("cy")) for c in circles) == pytest.approx([200, 300])
        assert all(float(c.get("r")) == pytest.approx(20) for c in circles)
        assert all(c.get("fill") == "url(#hatch)" for c in circles)

    def test_width_label(self, oring_geometry):
        root = parse_fragment(render_oring_section_view(oring_geometry, (550, 250)))
        assert "W 1.9mm ±0.08mm" in texts(root)
        assert "SECTION VIEW (O-RING)" in texts(root)

    def test_side_lines(self, oring_geometry):
        root = parse_fragment(render_oring_section_view(oring_geometry, (550, 250)))
        side_paths = [p for p in find_all(root, "path") if "arrowhead" not in p.get("class", "")]
        assert len(side_paths) == 2

    def test_missing_geometry(self):
        assert render_oring_section_view(None, (550, 250)) == ""


# =============================================================================
# BACKUP RING VIEWS
# =============================================================================


class TestBackupRingFrontView:
    """Tests for render_backup_ring_front_view()."""

    def test_bore_label(self, bias_cut_geometry):
        root = parse_fragment(render_backup_ring_front_view(bias_cut_geometry, CENTER))
        assert "φd 30mm ±0.05mm" in texts(root)
        assert "FRONT VIEW (BACKUP RING)" in texts(root)

    def test_circles(self, bias_cut_geometry):
        root = parse_fragment(render_backup_ring_front_view(bias_cut_geometry, CENTER))
        assert _radii(root) == pytest.approx([80.0, 80.0 + 2.5 / 30 * 320], abs=0.01)

    def test_no_break_for_bias_cut(self, bias_cut_geometry):
        root = parse_fragment(render_backup_ring_front_view(bias_cut_geometry, CENTER))
        assert find_all(root, "g", "spiral-break") == []

    def test_spiral_break(self, spiral_geometry):
        root = parse_fragment(render_backup_ring_front_view(spiral_geometry, CENTER))
        breaks = find_all(root, "g", "spiral-break")
        assert len(breaks) == 1
        mask, cut = find_all(breaks[0], "line")
        assert mask.get("stroke") == "#FFFFFF"
        assert cut.get("x1") != cut.get("x2")
        assert "FRONT VIEW (SPIRAL)" in texts(root)

    def test_missing_geometry(self):
        assert render_backup_ring_front_view(None, CENTER) == ""


class TestBackupRingSideView:
    """Tests for render_backup_ring_side_view()."""

    def test_body_for_every_shape(self):
        assert set(SIDE_BODY_RENDERERS) == set(Shape)

    def test_thickness_label(self, bias_cut_geometry):
        root = parse_fragment(render_backup_ring_side_view(bias_cut_geometry, (520, 250)))
        assert "T 1.5mm ±0.1mm" in texts(root)

    def test_shape_attribute(self, bias_cut_geometry):
        root = parse_fragment(render_backup_ring_side_view(bias_cut_geometry, (520, 250)))
        view = find_all(root, "g", "backup-side")[0]
        assert view.get("data-shape") == "bias_cut"

    def test_bias_cut_trapezoids(self, bias_cut_geometry):
        root = parse_fragment(render_backup_ring_side_view(bias_cut_geometry, (520, 250)))
        faces = find_all(root, "path", "cut-face")
        assert len(faces) == 2
        assert all(face.get("d").endswith("Z") for face in faces)
        assert all(face.get("fill") == "url(#hatch)" for face in faces)

    def test_bias_cut_angle_label(self, bias_cut_geometry):
        root = parse_fragment(render_backup_ring_side_view(bias_cut_geometry, (520, 250)))
        angle = find_all(root, "text", "cut-angle")
        assert [t.text for t in angle] == ["30° ±5°"]
        assert "BIAS CUT" in texts(root)

    def test_bias_cut_default_angle(self):
        geometry = BackupRingGeometry(DimTol(35), DimTol(30), DimTol(1.5), Shape.BIAS_CUT)
        root = parse_fragment(render_backup_ring_side_view(geometry, (520, 250)))
        assert find_all(root, "text", "cut-angle")[0].text == "22°"

    def test_endless_body(self, endless_geometry):
        root = parse_fragment(render_backup_ring_side_view(endless_geometry, (520, 250)))
        assert "SIDE VIEW (ENDLESS)" in texts(root)
        rects = find_all(root, "rect")
        assert len(rects) == 1
        assert rects[0].get("fill") == "url(#hatch)"
        assert find_all(root, "path", "cut-face") == []
        assert find_all(root, "g", "detail-a") == []

    def test_spiral_detail_a(self, spiral_geometry):
        root = parse_fragment(render_backup_ring_side_view(spiral_geometry, (520, 250)))
        assert "SIDE VIEW (SPIRAL)" in texts(root)
        assert "DETAIL A" in texts(root)
        assert len(find_all(root, "g", "detail-reference")) == 1
        detail = find_all(root, "g", "detail-a")
        assert len(detail) == 1
        assert detail[0].get("transform").startswith("translate(620.00, 250.00)")

    def test_spiral_detail_shows_standard_angle(self, spiral_geometry):
        """The record's own 45° ±2° is not shown by default."""
        root = parse_fragment(render_backup_ring_side_view(spiral_geometry, (520, 250)))
        labels = [t.text for t in find_all(root, "text", "detail-angle")]
        assert labels == ["30°±5°"]

    def test_spiral_detail_custom_label(self, spiral_geometry):
        root = parse_fragment(
            render_backup_ring_side_view(spiral_geometry, (520, 250), detail_label="45° ±2°")
        )
        assert [t.text for t in find_all(root, "text", "detail-angle")] == ["45° ±2°"]

    def test_missing_geometry(self):
        assert render_backup_ring_side_view(None, (520, 250)) == ""


class TestSpiralDetailLabel:
    """Tests for spiral_detail_label()."""

    def test_standard_label(self, spiral_geometry):
        assert spiral_detail_label(spiral_geometry) == SPIRAL_DETAIL_LABEL == "30°±5°"

    def test_record_angle(self, spiral_geometry):
        assert spiral_detail_label(spiral_geometry, use_record_angle=True) == "45° ±2°"

    def test_record_angle_missing(self, endless_geometry):
        assert spiral_detail_label(endless_geometry, use_record_angle=True) == SPIRAL_DETAIL_LABEL
