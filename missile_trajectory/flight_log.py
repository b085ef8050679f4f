"""
Flight Log
==========
Time-stamped log of the missile's progress along the sampled path, for
export as CSV.

The sampled path is flown point to point at each leg's cruise speed.
A row is kept whenever the chosen quantity (elapsed seconds, or metres
flown) has advanced by at least ``interval`` since the last kept row;
the first and last samples are always kept.
"""

import csv
import os
import numpy as np
from dataclasses import dataclass
from typing import List

from .engine import TrajectoryData
from .sampler import SampledPath


LOG_MODES = ('seconds', 'meters')
CSV_HEADER = ['time', 'lat', 'lng', 'alt', 'speed', 'eta', 'dist']


@dataclass
class FlightLogEntry:
    """One log row. Units: s, deg, m, m/s, s, m."""
    time: float
    latitude: float
    longitude: float
    altitude: float
    speed: float
    eta: float
    distance: float


def build_flight_log(route: TrajectoryData, path: SampledPath,
                     interval: float = 1.0,
                     mode: str = 'seconds') -> List[FlightLogEntry]:
    """
    Parameters
    ----------
    route : TrajectoryData
        Route the path was sampled from (supplies leg speeds).
    path : SampledPath
        Output of ``sample_path(route)``.
    interval : float
        Minimum spacing between kept rows, in ``mode`` units.
    mode : str
        'seconds' or 'meters'.

    Returns
    -------
    list of FlightLogEntry
        Empty when the path is empty.
    """
    if mode not in LOG_MODES:
        raise ValueError(f"Unknown log mode '{mode}'. Available: {list(LOG_MODES)}")
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval}")
    if path.is_empty:
        return []

    leg_speeds = np.asarray(route.leg_speeds(), dtype=float)
    speed = leg_speeds[path.leg_index]

    dist_m = path.cumulative_distance() * 1000.0
    step_m = np.diff(dist_m, prepend=0.0)
    with np.errstate(divide='ignore', invalid='ignore'):
        step_t = np.where(step_m > 0, step_m / speed, 0.0)
    elapsed = np.cumsum(step_t)
    total_time = elapsed[-1]

    tracked = elapsed if mode == 'seconds' else dist_m

    keep = [0]
    last_value = tracked[0]
    for i in range(1, len(path)):
        if tracked[i] - last_value >= interval:
            keep.append(i)
            last_value = tracked[i]
    if keep[-1] != len(path) - 1:
        keep.append(len(path) - 1)

    return [
        FlightLogEntry(
            time=float(elapsed[i]),
            latitude=float(path.latitude[i]),
            longitude=float(path.longitude[i]),
            altitude=float(path.altitude[i]),
            speed=float(speed[i]),
            eta=float(max(0.0, total_time - elapsed[i])),
            distance=float(dist_m[i]),
        )
        for i in keep
    ]


def write_flight_log_csv(entries: List[FlightLogEntry], destination: str) -> str:
    """Write log rows as CSV; returns the path written."""
    directory = os.path.dirname(destination)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(destination, 'w', newline='', encoding='utf-8') as fh:
        writer = csv.writer(fh)
        writer.writerow(CSV_HEADER)
        for e in entries:
            writer.writerow([
                f"{e.time:.2f}", f"{e.latitude:.6f}", f"{e.longitude:.6f}",
                f"{e.altitude:.1f}", f"{e.speed:.2f}", f"{e.eta:.1f}",
                f"{e.distance:.1f}",
            ])
    return destination
