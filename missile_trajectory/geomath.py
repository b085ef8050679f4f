"""
Great-Circle Geometry
=====================
Spherical-Earth primitives used by the trajectory engine and path sampler:

  - Haversine distance (km)
  - Initial bearing (degrees, [0, 360))
  - Travel time from distance and speed
  - Spherical linear interpolation along the great circle, combined with
    a sinusoidal altitude profile that peaks at mid-leg
  - Signed heading change at a waypoint

All angles at the interface are in degrees; all trigonometry is done
in radians internally.
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional

from .config import EARTH_RADIUS_KM, MAX_PATH_ALTITUDE
from .errors import DegenerateGreatCircle


# Angular separations (rad) below this, or within this of π, have no
# unique great circle for interpolation.
ANGLE_EPSILON = 1e-12


@dataclass(frozen=True)
class Coordinates:
    """Geographic point. Latitude/longitude in degrees, altitude in metres."""
    latitude: float
    longitude: float
    altitude: float = 0.0

    def as_array(self) -> np.ndarray:
        """[lat, lon, alt] as a float array."""
        return np.array([self.latitude, self.longitude, self.altitude], dtype=float)


def distance(a: Coordinates, b: Coordinates,
             radius: float = EARTH_RADIUS_KM) -> float:
    """
    Great-circle distance (km) between two points, Haversine formula.
    Altitude is ignored.
    """
    lat1, lon1 = np.radians(a.latitude), np.radians(a.longitude)
    lat2, lon2 = np.radians(b.latitude), np.radians(b.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = np.sin(dlat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2) ** 2
    # Rounding can push h a hair past 1 for antipodal points
    h = min(max(h, 0.0), 1.0)
    c = 2 * np.arctan2(np.sqrt(h), np.sqrt(1 - h))
    return float(radius * c)


def bearing(a: Coordinates, b: Coordinates) -> float:
    """
    Initial compass heading (degrees, [0, 360)) from a toward b.

    For coincident points the result is 0 and carries no meaning.
    """
    lat1, lon1 = np.radians(a.latitude), np.radians(a.longitude)
    lat2, lon2 = np.radians(b.latitude), np.radians(b.longitude)
    dlon = lon2 - lon1

    y = np.sin(dlon) * np.cos(lat2)
    x = np.cos(lat1) * np.sin(lat2) - np.sin(lat1) * np.cos(lat2) * np.cos(dlon)
    theta = float(np.degrees(np.arctan2(y, x)))
    result = (theta + 360.0) % 360.0
    # (-tiny + 360) % 360 rounds to exactly 360.0
    return 0.0 if result >= 360.0 else result


def travel_time(distance_m: float, speed: float) -> float:
    """Seconds to cover ``distance_m`` metres at ``speed`` m/s (speed > 0)."""
    return distance_m / speed


def turn_angle(previous: Coordinates, at: Coordinates,
               following: Coordinates) -> float:
    """
    Signed heading change (degrees, (-180, 180]) when passing through ``at``.

    Positive values turn right (clockwise), negative values turn left.
    The inbound heading is the final bearing of the previous→at leg.
    """
    inbound = (bearing(at, previous) + 180.0) % 360.0
    outbound = bearing(at, following)
    delta = (outbound - inbound) % 360.0
    if delta > 180.0:
        delta -= 360.0
    return delta


def _angular_separation(a: Coordinates, b: Coordinates) -> float:
    return distance(a, b, radius=1.0)


def degeneracy(a: Coordinates, b: Coordinates) -> Optional[str]:
    """
    'coincident' or 'antipodal' when a and b have no unique great circle,
    otherwise None.
    """
    d = _angular_separation(a, b)
    if d < ANGLE_EPSILON:
        return "coincident"
    if abs(np.sin(d)) < ANGLE_EPSILON:
        return "antipodal"
    return None


def check_great_circle(a: Coordinates, b: Coordinates,
                       strict: bool = True) -> Optional[str]:
    """Like ``degeneracy`` but raises ``DegenerateGreatCircle`` when strict."""
    reason = degeneracy(a, b)
    if reason and strict:
        raise DegenerateGreatCircle(a, b, reason)
    return reason


def interpolate_many(a: Coordinates, b: Coordinates, fractions,
                     max_altitude: float = MAX_PATH_ALTITUDE,
                     strict: bool = False) -> np.ndarray:
    """
    Vectorised great-circle interpolation.

    Parameters
    ----------
    a, b : Coordinates
        Leg endpoints.
    fractions : array-like
        Positions along the leg, 0 at ``a`` and 1 at ``b``.
    max_altitude : float
        Apex of the altitude profile ``max_altitude · sin(f·π)`` (m).
    strict : bool
        Raise ``DegenerateGreatCircle`` for coincident/antipodal endpoints
        instead of falling back.

    Returns
    -------
    np.ndarray
        Shape (N, 3) array of [lat, lon, alt].
    """
    f = np.atleast_1d(np.asarray(fractions, dtype=float))
    altitude = max_altitude * np.sin(f * np.pi)

    degenerate = check_great_circle(a, b, strict)

    if degenerate == "coincident":
        lat = np.full_like(f, a.latitude)
        lon = np.full_like(f, a.longitude)
        return np.column_stack([lat, lon, altitude])
    if degenerate == "antipodal":
        # No preferred great circle: hold a for the first half, b after
        first_half = f < 0.5
        lat = np.where(first_half, a.latitude, b.latitude)
        lon = np.where(first_half, a.longitude, b.longitude)
        return np.column_stack([lat, lon, altitude])

    d = _angular_separation(a, b)
    lat1, lon1 = np.radians(a.latitude), np.radians(a.longitude)
    lat2, lon2 = np.radians(b.latitude), np.radians(b.longitude)

    wa = np.sin((1 - f) * d) / np.sin(d)
    wb = np.sin(f * d) / np.sin(d)

    x = wa * np.cos(lat1) * np.cos(lon1) + wb * np.cos(lat2) * np.cos(lon2)
    y = wa * np.cos(lat1) * np.sin(lon1) + wb * np.cos(lat2) * np.sin(lon2)
    z = wa * np.sin(lat1) + wb * np.sin(lat2)

    lat = np.degrees(np.arctan2(z, np.sqrt(x * x + y * y)))
    lon = np.degrees(np.arctan2(y, x))
    return np.column_stack([lat, lon, altitude])


def interpolate(a: Coordinates, b: Coordinates, fraction: float,
                max_altitude: float = MAX_PATH_ALTITUDE,
                strict: bool = False) -> Coordinates:
    """
    Point at ``fraction`` of the way from a to b along the great circle.

    Altitude follows ``max_altitude · sin(fraction·π)``: zero at both ends,
    ``max_altitude`` at the midpoint. Degenerate legs fall back to a
    (see ``interpolate_many``) unless ``strict`` is set.
    """
    lat, lon, alt = interpolate_many(a, b, [fraction], max_altitude, strict)[0]
    return Coordinates(float(lat), float(lon), float(alt))
