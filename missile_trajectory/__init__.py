"""
Missile Trajectory Calculator
=============================
Computes a cruise flight path between two geographic points for a powered
vehicle with simple aerodynamic and fuel properties, optionally routed
through up to ten ordered waypoints:
  - Great-circle distance, bearing and interpolation (spherical Earth)
  - Speed loss, fuel burn and g-force at each waypoint turn
  - Route totals rebuilt from scratch on every change
  - Dense sampled path with a sinusoidal altitude profile for plotting

Outputs: console report, JSON document for the web map, CSV flight log
and matplotlib figures.
"""

from .config import EngineConfig, FirstLegPolicy, DEFAULT_CONFIG
from .errors import (
    TrajectoryError, CapacityExceeded, NonPositiveSpeed,
    DegenerateGreatCircle, FuelExhausted,
)
from .geomath import (
    Coordinates, distance, bearing, travel_time,
    interpolate, interpolate_many, turn_angle,
)
from .profile import MissileAttributes
from .engine import (
    Waypoint, TrajectoryData,
    create_route, append_waypoint, rebuild, compute_waypoint_effect,
    turn_effect, g_force,
)
from .sampler import SampledPath, sample_path
from .parser import parse_waypoints
from .serializer import route_to_dict, write_json, format_report
from .flight_log import FlightLogEntry, build_flight_log, write_flight_log_csv
from .visualization import (
    plot_ground_track, plot_altitude_profile, plot_dashboard,
    create_flight_animation,
)

__version__ = "1.0.0"
__all__ = [
    'EngineConfig', 'FirstLegPolicy', 'DEFAULT_CONFIG',
    'TrajectoryError', 'CapacityExceeded', 'NonPositiveSpeed',
    'DegenerateGreatCircle', 'FuelExhausted',
    'Coordinates', 'distance', 'bearing', 'travel_time',
    'interpolate', 'interpolate_many', 'turn_angle',
    'MissileAttributes',
    'Waypoint', 'TrajectoryData',
    'create_route', 'append_waypoint', 'rebuild', 'compute_waypoint_effect',
    'turn_effect', 'g_force',
    'SampledPath', 'sample_path',
    'parse_waypoints',
    'route_to_dict', 'write_json', 'format_report',
    'FlightLogEntry', 'build_flight_log', 'write_flight_log_csv',
    'plot_ground_track', 'plot_altitude_profile', 'plot_dashboard',
    'create_flight_animation',
]
