"""
Exception hierarchy for sealring.

The drawing core itself never raises for a syntactically valid part record;
these exceptions belong to the layers around it (validation, config,
history and export).
"""


class SealRingError(Exception):
    """Base class for all sealring errors."""


class DrawingDataError(SealRingError, ValueError):
    """
    A part record failed validation.

    Attributes:
        problems: Every problem found, in the order they were detected.
    """

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems) or "invalid drawing data")


class ConfigError(SealRingError):
    """The YAML configuration could not be loaded."""


class HistoryError(SealRingError):
    """A history entry could not be found or decoded."""


class ExportError(SealRingError):
    """Writing the drawing to SVG or PDF failed."""
