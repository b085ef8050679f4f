"""
Result Serialization
====================
Renders a finished route for the web front end and the console:

  - ``route_to_dict`` / ``write_json``: JSON document with the route
    totals, start/end, missile attributes, the waypoint list with all
    computed fields, and the sampled path. Keys are camelCase, numbers
    are rounded to 6 decimals.
  - ``format_report``: plain-text report, 2 decimals.
"""

import json
import os
from typing import Optional

from .engine import TrajectoryData, Waypoint
from .geomath import Coordinates
from .profile import MissileAttributes
from .sampler import SampledPath, sample_path


PRECISION = 6


def _num(value: float) -> float:
    return round(float(value), PRECISION)


def coordinates_to_dict(point: Coordinates) -> dict:
    return {
        'latitude': _num(point.latitude),
        'longitude': _num(point.longitude),
        'altitude': _num(point.altitude),
    }


def missile_to_dict(missile: MissileAttributes) -> dict:
    return {
        'weight': _num(missile.weight),
        'speed': _num(missile.speed),
        'fuel': _num(missile.fuel),
        'burnRate': _num(missile.burn_rate),
        'thrust': _num(missile.thrust),
        'maxAcceleration': _num(missile.max_acceleration),
        'maxDeceleration': _num(missile.max_deceleration),
        'maxTurnRate': _num(missile.max_turn_rate),
        'dragCoefficient': _num(missile.drag_coefficient),
    }


def waypoint_to_dict(waypoint: Waypoint) -> dict:
    return {
        'position': coordinates_to_dict(waypoint.position),
        'turnAngle': _num(waypoint.turn_angle),
        'approachSpeed': _num(waypoint.approach_speed),
        'departureSpeed': _num(waypoint.departure_speed),
        'timeToReach': _num(waypoint.time_to_reach),
        'distanceFromPrevious': _num(waypoint.distance_from_previous),
        'bearingFromPrevious': _num(waypoint.bearing_from_previous),
        'fuelConsumed': _num(waypoint.fuel_consumed),
        'gForce': _num(waypoint.g_force),
        'legAccounted': waypoint.leg_accounted,
    }


def route_to_dict(route: TrajectoryData, path: Optional[SampledPath] = None) -> dict:
    """
    JSON-ready dict of the route. ``path`` defaults to ``sample_path(route)``.
    """
    if path is None:
        path = sample_path(route)
    return {
        'totalDistance': _num(route.total_distance),
        'totalTravelTime': _num(route.total_travel_time),
        'initialBearing': _num(route.initial_bearing),
        'currentSpeed': _num(route.current_speed),
        'remainingFuel': _num(route.remaining_fuel),
        'fuelExhausted': route.fuel_exhausted,
        'start': coordinates_to_dict(route.start),
        'end': coordinates_to_dict(route.end),
        'missile': missile_to_dict(route.missile),
        'waypoints': [waypoint_to_dict(wp) for wp in route.waypoints],
        'path': [coordinates_to_dict(p) for p in path],
    }


def write_json(route: TrajectoryData, destination: str,
               path: Optional[SampledPath] = None) -> str:
    """Write the route document to ``destination``; returns the path written."""
    directory = os.path.dirname(destination)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(destination, 'w', encoding='utf-8') as fh:
        # allow_nan keeps permissive-mode infinities as Infinity tokens
        json.dump(route_to_dict(route, path), fh, indent=2, allow_nan=True)
        fh.write('\n')
    return destination


def format_report(route: TrajectoryData) -> str:
    """Console report of totals followed by one block per waypoint."""
    lines = [
        f"Total distance: {route.total_distance:.2f} km",
        f"Total travel time: {route.total_travel_time:.2f} seconds",
        f"Initial bearing: {route.initial_bearing:.2f} degrees",
        f"Remaining fuel: {route.remaining_fuel:.2f} kg",
        f"Final speed: {route.current_speed:.2f} m/s",
        f"Fuel endurance: {route.missile.endurance:.2f} seconds",
        f"Thrust-to-weight: {route.missile.thrust_to_weight:.2f}",
        "",
        f"Waypoints: {route.waypoint_count}",
    ]
    for i, wp in enumerate(route.waypoints, start=1):
        pos = wp.position
        lines.append(f"Waypoint {i}:" + ("" if wp.leg_accounted else " (leg not accounted)"))
        lines.extend([
            f"  Position: {pos.latitude:.6f}, {pos.longitude:.6f}, {pos.altitude:.6f}",
            f"  Turn angle: {wp.turn_angle:.2f} degrees",
            f"  Approach speed: {wp.approach_speed:.2f} m/s",
            f"  Departure speed: {wp.departure_speed:.2f} m/s",
            f"  G-force: {wp.g_force:.2f} g",
            f"  Distance from previous: {wp.distance_from_previous:.2f} km",
            f"  Time to reach: {wp.time_to_reach:.2f} seconds",
            f"  Fuel consumed: {wp.fuel_consumed:.2f} kg",
        ])
    return '\n'.join(lines)
