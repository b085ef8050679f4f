"""
Path Sampler
============
Dense, uniformly sampled rendition of a finished route for plotting and
export.

Each leg (start → wp[0], …, wp[n-1] → end) contributes exactly
``points_per_leg`` points at fractions i / (points_per_leg - 1), so both
leg endpoints are present and the output has (n + 1) · points_per_leg
points. The altitude follows the per-leg sine profile from ``geomath``,
not the altitudes stored on the route points.

Read-only with respect to the route. Degenerate legs (coincident or
antipodal endpoints) are sampled with the guarded fallback and logged,
so the only failure is an empty path when allocation fails.
"""

import logging
import numpy as np
from dataclasses import dataclass
from typing import Iterator, List

from .config import EARTH_RADIUS_KM
from .engine import TrajectoryData
from .geomath import Coordinates, degeneracy, distance, interpolate_many

logger = logging.getLogger(__name__)


@dataclass
class SampledPath:
    """Sampled points as parallel arrays, each of shape (N,)."""
    latitude: np.ndarray
    longitude: np.ndarray
    altitude: np.ndarray
    leg_index: np.ndarray     # leg each point belongs to (0 = first leg)
    radius: float = EARTH_RADIUS_KM   # km, sphere the path was sampled on

    def __len__(self) -> int:
        return len(self.latitude)

    def __iter__(self) -> Iterator[Coordinates]:
        for lat, lon, alt in zip(self.latitude, self.longitude, self.altitude):
            yield Coordinates(float(lat), float(lon), float(alt))

    def __getitem__(self, idx: int) -> Coordinates:
        return Coordinates(float(self.latitude[idx]), float(self.longitude[idx]),
                           float(self.altitude[idx]))

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def points(self) -> List[Coordinates]:
        return list(self)

    def as_array(self) -> np.ndarray:
        """Shape (N, 3) array of [lat, lon, alt]."""
        return np.column_stack([self.latitude, self.longitude, self.altitude])

    def cumulative_distance(self) -> np.ndarray:
        """Ground distance (km) from the first point to each point."""
        if self.is_empty:
            return np.zeros(0)
        pts = self.points()
        steps = [distance(a, b, self.radius) for a, b in zip(pts[:-1], pts[1:])]
        return np.concatenate([[0.0], np.cumsum(steps)])

    @classmethod
    def empty(cls, radius: float = EARTH_RADIUS_KM) -> "SampledPath":
        return cls(np.zeros(0), np.zeros(0), np.zeros(0), np.zeros(0, dtype=int), radius)


def sample_path(route: TrajectoryData) -> SampledPath:
    """
    Sample every leg of ``route``.

    Never raises for degenerate legs. Returns an empty ``SampledPath`` if
    the buffers cannot be allocated; callers must check ``is_empty``.
    """
    config = route.config
    n = config.points_per_leg
    legs = route.legs()
    fractions = np.arange(n) / (n - 1)

    try:
        buffer = np.empty((len(legs) * n, 3))
        leg_index = np.repeat(np.arange(len(legs)), n)
    except MemoryError:
        logger.warning("Could not allocate %d path points", len(legs) * n)
        return SampledPath.empty(config.earth_radius_km)

    for k, (a, b) in enumerate(legs):
        reason = degeneracy(a, b)
        if reason:
            logger.warning("Leg %d endpoints are %s; using fallback points", k, reason)
        buffer[k * n:(k + 1) * n] = interpolate_many(
            a, b, fractions,
            max_altitude=config.max_path_altitude,
            strict=False,
        )

    return SampledPath(
        latitude=buffer[:, 0],
        longitude=buffer[:, 1],
        altitude=buffer[:, 2],
        leg_index=leg_index,
        radius=config.earth_radius_km,
    )
