"""Marker configuration: every tolerance the engine uses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MarkerConfig:
    """Tunables shared by the sector classifier and the features.

    Coordinates are assumed to be normalised by the drawing tool to roughly
    -1..1, so the slops below are absolute distances on that scale.
    """

    # Sector partition
    axis_slop: float = 0.02  # half-width of the band counted as on an axis
    origin_slop: float = 0.05  # half-width of the square counted as origin
    relaxed_origin_slop: float = 0.1  # where odd curves must meet

    # Slope at the ends of a line
    slope_threshold: float = 4.0  # width/height ratio beyond which an end is flat or steep
    slope_sample_points: int = 5

    # Symmetry between mirrored sections
    symmetry_tolerance: float = 0.4  # relative size difference

    def __post_init__(self) -> None:
        if self.axis_slop <= 0 or self.origin_slop <= 0 or self.relaxed_origin_slop <= 0:
            raise ValueError("Sector slops must be positive")
        # Axis strips must not poke out of the origin box, or the partition has gaps
        if self.origin_slop < self.axis_slop:
            raise ValueError(
                f"origin_slop ({self.origin_slop}) must be at least axis_slop ({self.axis_slop})"
            )
        if self.slope_sample_points < 2:
            raise ValueError("slope_sample_points must be at least 2")


DEFAULT_CONFIG = MarkerConfig()
