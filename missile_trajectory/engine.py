"""
Trajectory Engine
=================
Owns the route (start, end, ordered waypoints) and computes per-waypoint
effects and whole-route totals.

Consistency model:
  - ``TrajectoryData`` is an immutable snapshot.
  - ``append_waypoint`` returns a new snapshot: append, then a full
    ``rebuild`` from scratch. Totals are never patched incrementally, so
    they always equal the sum over start → wp[0] → … → wp[n-1] → end.

Per-waypoint model (closed form, no integration):
  - time      = leg distance / approach speed
  - departure = approach · cos(|turn| · Cd), floored at 10% of approach
  - fuel      = time · normal burn + (|turn| / max turn rate) · turn burn
  - g-force   = v² / (r · g), with r = v / ω_max
"""

import logging
import math
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence, Tuple

from .config import (
    DEFAULT_CONFIG, EngineConfig, FirstLegPolicy,
    GRAVITY, MIN_SPEED_FRACTION, MIN_TURN_RADIUS,
)
from .errors import CapacityExceeded, DegenerateGreatCircle, FuelExhausted, NonPositiveSpeed
from .geomath import Coordinates, bearing, degeneracy, distance, travel_time
from .profile import MissileAttributes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Waypoint:
    """
    A route point with the turn requested there and the figures computed
    for the leg that reaches it.

    Computed fields are zero until a rebuild fills them in.
    ``leg_accounted`` is False when the leg into this waypoint was not
    computed and is excluded from the route totals.
    """
    position: Coordinates
    turn_angle: float = 0.0              # deg
    approach_speed: float = 0.0          # m/s
    departure_speed: float = 0.0         # m/s
    time_to_reach: float = 0.0           # s
    distance_from_previous: float = 0.0  # km
    bearing_from_previous: float = 0.0   # deg
    fuel_consumed: float = 0.0           # kg
    g_force: float = 0.0                 # g
    leg_accounted: bool = False

    def cleared(self) -> "Waypoint":
        """Copy keeping only position and turn angle."""
        return Waypoint(position=self.position, turn_angle=self.turn_angle)


@dataclass(frozen=True)
class TrajectoryData:
    """Immutable route snapshot with its totals."""
    start: Coordinates
    end: Coordinates
    missile: MissileAttributes
    waypoints: Tuple[Waypoint, ...] = ()
    total_distance: float = 0.0       # km
    total_travel_time: float = 0.0    # s
    initial_bearing: float = 0.0      # deg
    current_speed: float = 0.0        # m/s
    remaining_fuel: float = 0.0       # kg, never negative
    fuel_shortfall: float = 0.0       # kg demanded beyond the fuel load
    config: EngineConfig = field(default=DEFAULT_CONFIG, repr=False)

    @property
    def waypoint_count(self) -> int:
        return len(self.waypoints)

    @property
    def capacity(self) -> int:
        return self.config.max_waypoints

    @property
    def is_full(self) -> bool:
        return self.waypoint_count >= self.capacity

    @property
    def fuel_exhausted(self) -> bool:
        """True when the route burns more fuel than the missile carries."""
        return self.fuel_shortfall > 0.0

    @property
    def fuel_used(self) -> float:
        """Fuel burned over the whole route (kg), including any shortfall."""
        return self.missile.fuel - self.remaining_fuel + self.fuel_shortfall

    def points(self) -> List[Coordinates]:
        """Route points in traversal order: start, waypoints, end."""
        return [self.start] + [wp.position for wp in self.waypoints] + [self.end]

    def legs(self) -> List[Tuple[Coordinates, Coordinates]]:
        """Consecutive (from, to) pairs along the route."""
        pts = self.points()
        return list(zip(pts[:-1], pts[1:]))

    def leg_speeds(self) -> List[float]:
        """
        Cruise speed (m/s) on each leg, matching ``legs()``.

        Legs into unaccounted waypoints carry the speed in effect before
        them.
        """
        speeds = []
        running = self.missile.speed
        for wp in self.waypoints:
            if wp.leg_accounted:
                speeds.append(wp.approach_speed)
                running = wp.departure_speed
            else:
                speeds.append(running)
        speeds.append(self.current_speed)
        return speeds

    def require_fuel(self) -> "TrajectoryData":
        """Return self, or raise ``FuelExhausted`` if the route runs dry."""
        if self.fuel_exhausted:
            raise FuelExhausted(self.fuel_shortfall, self.missile.fuel)
        return self

    def summary(self) -> str:
        """Human-readable summary string."""
        fuel_state = "EXHAUSTED" if self.fuel_exhausted else "OK"
        lines = [
            f"╔══════════════════════════════════════════════════════╗",
            f"║  ROUTE SUMMARY — {self.waypoint_count:>2d} waypoint(s){'':<22s} ║",
            f"╠══════════════════════════════════════════════════════╣",
            f"║  Start        : {self.start.latitude:>10.4f}, {self.start.longitude:>10.4f}{'':<13s} ║",
            f"║  End          : {self.end.latitude:>10.4f}, {self.end.longitude:>10.4f}{'':<13s} ║",
            f"║  Weight/speed : {self.missile.weight:>10.1f} kg @ {self.missile.speed:>8.1f} m/s{'':<5s} ║",
            f"╠══════════════════════════════════════════════════════╣",
            f"║  Distance     : {self.total_distance:>10.2f} km{'':<23s} ║",
            f"║  Travel time  : {self.total_travel_time:>10.2f} s{'':<24s} ║",
            f"║  Bearing      : {self.initial_bearing:>10.2f} °{'':<24s} ║",
            f"║  Final speed  : {self.current_speed:>10.2f} m/s{'':<22s} ║",
            f"║  Fuel left    : {self.remaining_fuel:>10.2f} kg  [{fuel_state:<9s}]{'':<9s} ║",
            f"╚══════════════════════════════════════════════════════╝",
        ]
        return '\n'.join(lines)


# ══════════════════════════════════════════════════════════════════════════
#  Closed-form turn models
# ══════════════════════════════════════════════════════════════════════════

def turn_effect(speed: float, turn_angle: float, drag_coefficient: float,
                min_fraction: float = MIN_SPEED_FRACTION) -> float:
    """
    Speed after a turn of ``turn_angle`` degrees.

    speed' = speed · cos(|θ| · Cd), never below ``min_fraction · speed``.
    """
    if turn_angle == 0:
        return speed
    factor = math.cos(abs(math.radians(turn_angle)) * drag_coefficient)
    return max(speed * factor, min_fraction * speed)


def g_force(speed: float, turn_radius: float, gravity: float = GRAVITY,
            min_radius: float = MIN_TURN_RADIUS) -> float:
    """Centripetal load in g: v² / (r · g), with r floored at ``min_radius``."""
    radius = max(turn_radius, min_radius)
    return speed * speed / (radius * gravity)


# ══════════════════════════════════════════════════════════════════════════
#  Leg helpers
# ══════════════════════════════════════════════════════════════════════════

def _leg_time(distance_km: float, speed: float, config: EngineConfig,
              context: str) -> float:
    if speed <= 0:
        if config.strict:
            raise NonPositiveSpeed(speed, context)
        return math.inf
    return travel_time(distance_km * 1000.0, speed)


def _check_flown_legs(route: TrajectoryData) -> None:
    """
    Raise ``DegenerateGreatCircle`` for any zero-length leg actually flown
    (start → wp[0] → … → end).

    Bookkeeping legs of the first-leg policy (start → wp[1]) are not
    flown and are not checked. Antipodal legs pass: distance and bearing
    are defined for them, only interpolation needs a fallback.
    """
    for a, b in route.legs():
        if degeneracy(a, b) == "coincident":
            raise DegenerateGreatCircle(a, b, "coincident")


def _previous_point(route: TrajectoryData, index: int,
                    computed: Sequence[Waypoint]) -> Optional[Tuple[Coordinates, float]]:
    """(position, speed) the leg into ``index`` starts from, or None if skipped."""
    if route.config.first_leg is FirstLegPolicy.UNACCOUNTED:
        # Historical convention: waypoint 0 is a pass-through and
        # waypoint 1 is measured from the route start.
        if index == 0:
            return None
        if index == 1:
            return route.start, route.missile.speed
    elif index == 0:
        return route.start, route.missile.speed
    prev = computed[index - 1]
    return prev.position, prev.departure_speed


def compute_waypoint_effect(route: TrajectoryData, index: int,
                            computed: Optional[Sequence[Waypoint]] = None) -> Waypoint:
    """
    Compute the leg into waypoint ``index`` and the turn made there.

    Parameters
    ----------
    route : TrajectoryData
        Route holding the waypoint.
    index : int
        Zero-based waypoint index.
    computed : sequence of Waypoint, optional
        Waypoints before ``index`` as already computed in this rebuild.
        Defaults to ``route.waypoints``.

    Returns
    -------
    Waypoint
        Copy of the waypoint with its computed fields filled in, or with
        them zeroed and ``leg_accounted=False`` when the first-leg policy
        skips it.
    """
    if not 0 <= index < route.waypoint_count:
        raise IndexError(f"Waypoint index {index} out of range "
                         f"for {route.waypoint_count} waypoint(s)")
    if computed is None:
        computed = route.waypoints

    waypoint = route.waypoints[index].cleared()
    previous = _previous_point(route, index, computed)
    if previous is None:
        return waypoint

    prev_point, approach = previous
    missile = route.missile
    config = route.config

    leg_km = distance(prev_point, waypoint.position, config.earth_radius_km)
    time_s = _leg_time(leg_km, approach, config, f"leg into waypoint {index + 1}")

    turn_time = abs(waypoint.turn_angle) / missile.max_turn_rate
    fuel = time_s * missile.fuel_consumption_normal + turn_time * missile.fuel_consumption_turn

    turn_radius = approach / math.radians(missile.max_turn_rate)

    return replace(
        waypoint,
        approach_speed=approach,
        departure_speed=turn_effect(approach, waypoint.turn_angle,
                                    missile.drag_coefficient,
                                    config.min_speed_fraction),
        time_to_reach=time_s,
        distance_from_previous=leg_km,
        bearing_from_previous=bearing(prev_point, waypoint.position),
        fuel_consumed=fuel,
        g_force=g_force(approach, turn_radius, config.gravity, config.min_turn_radius),
        leg_accounted=True,
    )


# ══════════════════════════════════════════════════════════════════════════
#  Route operations
# ══════════════════════════════════════════════════════════════════════════

def rebuild(route: TrajectoryData) -> TrajectoryData:
    """
    Recompute every waypoint and all totals from scratch.

    Fuel exhaustion never aborts the rebuild: ``remaining_fuel`` is
    floored at zero and the excess demand is kept in ``fuel_shortfall``.
    """
    missile = route.missile
    config = route.config
    if config.strict:
        _check_flown_legs(route)

    first_target = route.waypoints[0].position if route.waypoints else route.end
    initial_bearing = bearing(route.start, first_target)

    total_distance = 0.0
    total_time = 0.0
    fuel_left = missile.fuel
    speed = missile.speed

    computed: List[Waypoint] = []
    for i in range(route.waypoint_count):
        wp = compute_waypoint_effect(route, i, computed)
        computed.append(wp)
        if not wp.leg_accounted:
            continue
        total_distance += wp.distance_from_previous
        total_time += wp.time_to_reach
        fuel_left -= wp.fuel_consumed
        speed = wp.departure_speed

    # Final leg: straight, no turn, normal burn only
    last_point = computed[-1].position if computed else route.start
    final_km = distance(last_point, route.end, config.earth_radius_km)
    final_time = _leg_time(final_km, speed, config, "final leg")

    total_distance += final_km
    total_time += final_time
    fuel_left -= final_time * missile.fuel_consumption_normal

    shortfall = max(0.0, -fuel_left)
    if shortfall > 0:
        logger.info("Route needs %.2f kg beyond the %.2f kg fuel load",
                    shortfall, missile.fuel)

    logger.debug("Rebuilt route: %d waypoint(s), %.3f km, %.3f s, %.3f kg left",
                 len(computed), total_distance, total_time, max(fuel_left, 0.0))

    return replace(
        route,
        waypoints=tuple(computed),
        total_distance=total_distance,
        total_travel_time=total_time,
        initial_bearing=initial_bearing,
        current_speed=speed,
        remaining_fuel=max(fuel_left, 0.0),
        fuel_shortfall=shortfall,
    )


def create_route(start: Coordinates, end: Coordinates,
                 missile: MissileAttributes,
                 config: Optional[EngineConfig] = None) -> TrajectoryData:
    """
    Build the zero-waypoint route from start to end.

    Physical defaults are applied to ``missile`` once, here.
    """
    config = config or DEFAULT_CONFIG
    missile = missile.with_defaults()
    if config.strict and missile.speed <= 0:
        raise NonPositiveSpeed(missile.speed, "missile cruise speed")

    route = TrajectoryData(start=start, end=end, missile=missile, config=config)
    return rebuild(route)


def append_waypoint(route: TrajectoryData, position: Coordinates,
                    turn_angle: float = 0.0) -> TrajectoryData:
    """
    New snapshot with a waypoint appended and everything rebuilt.

    At capacity, strict mode raises ``CapacityExceeded``; permissive mode
    drops the waypoint and returns ``route`` unchanged.
    """
    if route.is_full:
        if route.config.strict:
            raise CapacityExceeded(route.capacity)
        logger.warning("Route holds %d waypoints (capacity); dropping waypoint at "
                       "(%.6f, %.6f)", route.waypoint_count,
                       position.latitude, position.longitude)
        return route

    extended = replace(route, waypoints=route.waypoints + (Waypoint(position, turn_angle),))
    return rebuild(extended)
