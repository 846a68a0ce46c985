"""
Visual scaling of ring geometry.

Real seal dimensions span two orders of magnitude (a 2 mm O-ring and a
200 mm backup ring share the same sheet layout), so views are not drawn to
scale. Every ring is drawn with a fixed inner radius; the radial band is
proportional to the real band/diameter ratio and clamped to a legible
range:

    band = clamp(radial_size / diameter * base_radius * multiplier,
                 min_band * scale, max_band * scale)

``scale`` shrinks the whole view (1.0 for a single part per sheet, 0.6 when
two part families share the sheet).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from ..parts import BackupRingGeometry, ORingGeometry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RingScaleProfile:
    """
    Family-specific constants of the band formula (values at scale 1.0).

    Attributes:
        base_radius: Inner radius of the front view
        multiplier: Exaggeration applied to the band/diameter ratio
        min_band: Smallest band drawn
        max_band: Largest band drawn
    """
    base_radius: float
    multiplier: float
    min_band: float
    max_band: float


ORING_PROFILE = RingScaleProfile(base_radius=100.0, multiplier=3.0, min_band=15.0, max_band=40.0)
BACKUP_RING_PROFILE = RingScaleProfile(base_radius=80.0, multiplier=4.0, min_band=10.0, max_band=30.0)


@dataclass(frozen=True)
class VisualRing:
    """Drawn size of a ring front view."""
    inner_radius: float
    band: float
    scale: float

    @property
    def outer_radius(self) -> float:
        return self.inner_radius + self.band


def scale_ring(
    radial_size: float,
    diameter: float,
    profile: RingScaleProfile,
    scale: float = 1.0,
) -> VisualRing:
    """
    Map a real radial size/diameter pair onto a clamped visual band.

    A zero diameter is replaced by 1 so degenerate input still draws.
    """
    if not diameter:
        logger.debug("Zero diameter in ring scaling; using 1 as denominator")
        diameter = 1.0

    base_radius = profile.base_radius * scale
    raw_band = radial_size / diameter * base_radius * profile.multiplier
    band = float(np.clip(raw_band, profile.min_band * scale, profile.max_band * scale))
    return VisualRing(inner_radius=base_radius, band=band, scale=scale)


def scale_oring(geometry: ORingGeometry, scale: float = 1.0) -> VisualRing:
    """Front view ring of an O-ring; ``band`` doubles as the section width."""
    return scale_ring(
        geometry.cross_section.value,
        geometry.inner_diameter.value,
        ORING_PROFILE,
        scale,
    )


def scale_backup_ring(geometry: BackupRingGeometry, scale: float = 1.0) -> VisualRing:
    """Front view ring of a backup ring, banded by (OD - ID) / 2."""
    return scale_ring(
        geometry.radial_width,
        geometry.inner_diameter.value,
        BACKUP_RING_PROFILE,
        scale,
    )
