"""
Engine Configuration
====================
Physical constants and engine options for the trajectory calculator.

The module-level constants are the defaults; an ``EngineConfig`` carries
them into the engine so alternate planets, units or larger routes can be
modelled without touching the algorithms.
"""

from dataclasses import dataclass
from enum import Enum


# ── Physical constants ────────────────────────────────────────────────────
EARTH_RADIUS_KM    = 6371.0      # km  (mean spherical Earth)
GRAVITY            = 9.81        # m/s²
MAX_PATH_ALTITUDE  = 10000.0     # m   apex of the sampled altitude profile

# ── Route limits ──────────────────────────────────────────────────────────
MAX_WAYPOINTS      = 10
POINTS_PER_LEG     = 100

# ── Numeric floors ────────────────────────────────────────────────────────
MIN_TURN_RADIUS    = 0.1         # m
MIN_SPEED_FRACTION = 0.1         # departure speed never below 10% of approach


class FirstLegPolicy(Enum):
    """How the leg into the first waypoint is treated during a rebuild.

    UNACCOUNTED keeps the historical behaviour: the first waypoint is a
    pass-through whose computed fields stay zero and whose leg is left out
    of the totals, and the second waypoint is measured from the route start.
    The cruise speed carries through the pass-through unchanged, so a
    single-waypoint route flies its final leg at the cruise speed rather
    than at the zero departure speed stored on the waypoint.

    ACCOUNTED computes every waypoint from its predecessor.
    """
    UNACCOUNTED = "unaccounted"
    ACCOUNTED = "accounted"


@dataclass(frozen=True)
class EngineConfig:
    """
    Named constants and behaviour switches for the trajectory engine.

    ``strict`` selects the error model: when True, capacity overflow,
    non-positive speeds and degenerate great circles raise
    ``TrajectoryError`` subclasses. When False the engine runs in the
    permissive compatibility mode (silent drop, numeric floors).
    """
    earth_radius_km: float = EARTH_RADIUS_KM
    gravity: float = GRAVITY
    max_waypoints: int = MAX_WAYPOINTS
    max_path_altitude: float = MAX_PATH_ALTITUDE
    points_per_leg: int = POINTS_PER_LEG
    min_turn_radius: float = MIN_TURN_RADIUS
    min_speed_fraction: float = MIN_SPEED_FRACTION
    strict: bool = True
    first_leg: FirstLegPolicy = FirstLegPolicy.UNACCOUNTED

    def __post_init__(self):
        if self.earth_radius_km <= 0:
            raise ValueError(f"earth_radius_km must be positive, got {self.earth_radius_km}")
        if self.gravity <= 0:
            raise ValueError(f"gravity must be positive, got {self.gravity}")
        if self.max_waypoints < 0:
            raise ValueError(f"max_waypoints must be >= 0, got {self.max_waypoints}")
        if self.points_per_leg < 2:
            raise ValueError(
                f"points_per_leg must be at least 2 to include both leg "
                f"endpoints, got {self.points_per_leg}"
            )
        if self.min_turn_radius <= 0:
            raise ValueError(f"min_turn_radius must be positive, got {self.min_turn_radius}")
        if not 0.0 <= self.min_speed_fraction <= 1.0:
            raise ValueError(
                f"min_speed_fraction must lie in [0, 1], got {self.min_speed_fraction}"
            )
        if not isinstance(self.first_leg, FirstLegPolicy):
            raise ValueError(
                f"Unknown first-leg policy '{self.first_leg}'. "
                f"Available: {[p.value for p in FirstLegPolicy]}"
            )

    @classmethod
    def permissive(cls, **overrides) -> "EngineConfig":
        """Compatibility configuration: silent drops and numeric floors."""
        return cls(strict=False, **overrides)


DEFAULT_CONFIG = EngineConfig()
