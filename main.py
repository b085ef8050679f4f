#!/usr/bin/env python3
"""
═══════════════════════════════════════════════════════════════════════════════
  MISSILE TRAJECTORY CALCULATOR — Main Runner
═══════════════════════════════════════════════════════════════════════════════

  Computes a route and writes its results:
    1. Route from start to end with the missile profile
    2. Waypoints appended in order (each append rebuilds the route)
    3. Console report of totals and per-waypoint figures
    4. JSON document (route + sampled path) for the web map
    5. Optional CSV flight log and plots

  Usage:
    python main.py START_LAT START_LON START_ALT END_LAT END_LON END_ALT \\
                   WEIGHT SPEED OUTPUT [WAYPOINTS]

    WAYPOINTS format: lat,lon,alt,angle|lat,lon,alt,angle|...

    python main.py 0 0 0 0 1 0 1000 300 out.json
    python main.py 28.6 77.2 0 19.1 72.9 0 1500 680 out.json "23,75,0,30" \\
                   --log-csv log.csv --plots outputs
═══════════════════════════════════════════════════════════════════════════════
"""

import argparse
import logging
import os
import sys
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from missile_trajectory.config import EngineConfig, FirstLegPolicy
from missile_trajectory.errors import TrajectoryError
from missile_trajectory.geomath import Coordinates
from missile_trajectory.profile import MissileAttributes
from missile_trajectory.engine import create_route, append_waypoint
from missile_trajectory.sampler import sample_path
from missile_trajectory.parser import parse_waypoints
from missile_trajectory.serializer import write_json, format_report
from missile_trajectory.flight_log import build_flight_log, write_flight_log_csv, LOG_MODES


def banner():
    print("""
╔═══════════════════════════════════════════════════════════════════════╗
║                                                                       ║
║     MISSILE TRAJECTORY CALCULATOR                                     ║
║     ─────────────────────────────────────────────────────             ║
║     Great circle · Turn losses · Fuel burn · G-load                  ║
║                                                                       ║
╚═══════════════════════════════════════════════════════════════════════╝
""")


def section(title):
    print(f"\n{'─'*60}")
    print(f"  {title}")
    print(f"{'─'*60}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute a missile cruise trajectory through optional waypoints.",
    )
    for name in ('start_lat', 'start_lon', 'start_alt',
                 'end_lat', 'end_lon', 'end_alt'):
        parser.add_argument(name, type=float)
    parser.add_argument('weight', type=float, help='launch weight (kg)')
    parser.add_argument('speed', type=float, help='cruise speed (m/s)')
    parser.add_argument('output', help='JSON output file')
    parser.add_argument('waypoints', nargs='?', default='',
                        help='lat,lon,alt,angle|lat,lon,alt,angle|...')
    parser.add_argument('--permissive', action='store_true',
                        help='drop extra waypoints and apply numeric floors instead of failing')
    parser.add_argument('--account-first-leg', action='store_true',
                        help='compute and count the leg into the first waypoint')
    parser.add_argument('--log-csv', metavar='PATH',
                        help='write a CSV flight log')
    parser.add_argument('--log-interval', type=float, default=1.0,
                        help='flight log spacing (default: 1.0)')
    parser.add_argument('--log-mode', choices=LOG_MODES, default='seconds',
                        help='flight log spacing unit (default: seconds)')
    parser.add_argument('--plots', metavar='DIR',
                        help='save ground track, altitude profile and dashboard plots')
    parser.add_argument('--quiet', action='store_true', help='skip banner and sections')
    parser.add_argument('--verbose', action='store_true', help='debug logging')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )
    start_time = time.time()

    config = EngineConfig(
        strict=not args.permissive,
        first_leg=(FirstLegPolicy.ACCOUNTED if args.account_first_leg
                   else FirstLegPolicy.UNACCOUNTED),
    )
    start = Coordinates(args.start_lat, args.start_lon, args.start_alt)
    end = Coordinates(args.end_lat, args.end_lon, args.end_alt)
    missile = MissileAttributes.from_weight_and_speed(args.weight, args.speed)

    if not args.quiet:
        banner()
        section("ROUTE")

    try:
        route = create_route(start, end, missile, config)
        for position, angle in parse_waypoints(args.waypoints, config.max_waypoints):
            route = append_waypoint(route, position, angle)
        path = sample_path(route)
    except TrajectoryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(format_report(route))
    if route.fuel_exhausted:
        print(f"\n  ! Fuel exhausted: route needs {route.fuel_shortfall:.2f} kg "
              f"more than the {route.missile.fuel:.2f} kg load")

    if not args.quiet:
        section("OUTPUT")
    write_json(route, args.output, path)
    print(f"  ✓ Saved: {args.output} ({len(path)} path points)")

    if args.log_csv:
        entries = build_flight_log(route, path, args.log_interval, args.log_mode)
        write_flight_log_csv(entries, args.log_csv)
        print(f"  ✓ Saved: {args.log_csv} ({len(entries)} rows)")

    if args.plots:
        from missile_trajectory.visualization import (
            plot_ground_track, plot_altitude_profile, plot_dashboard,
            ensure_output_dir,
        )
        import matplotlib.pyplot as plt

        out = ensure_output_dir(args.plots)
        for name, plot in (('01_ground_track.png', plot_ground_track),
                           ('02_altitude_profile.png', plot_altitude_profile),
                           ('03_dashboard.png', plot_dashboard)):
            fig = plot(route, path, save_path=f'{out}/{name}')
            plt.close(fig)
            print(f"  ✓ Saved: {out}/{name}")

    if not args.quiet:
        print(f"\n  Total runtime: {time.time() - start_time:.2f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
