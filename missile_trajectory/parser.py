"""
Waypoint String Parser
======================
Reads waypoints given on the command line as

    lat,lon,alt,turn|lat,lon,alt,turn|...

Parsing is greedy from the left: it stops at the first record that does
not begin with four comma-separated numbers, and once ``max_waypoints``
records have been read. Text after the fourth number of a record is
ignored.
"""

import re
from typing import List, Optional, Tuple

from .config import MAX_WAYPOINTS
from .geomath import Coordinates


RECORD_SEPARATOR = '|'

_NUMBER = r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf(?:inity)?|nan)'
_RECORD = re.compile(
    r'\s*({n}),\s*({n}),\s*({n}),\s*({n})'.format(n=_NUMBER),
    re.IGNORECASE,
)


def parse_record(record: str) -> Optional[Tuple[Coordinates, float]]:
    """One ``lat,lon,alt,turn`` record, or None if it does not parse."""
    match = _RECORD.match(record)
    if match is None:
        return None
    lat, lon, alt, turn = (float(g) for g in match.groups())
    return Coordinates(lat, lon, alt), turn


def parse_waypoints(text: Optional[str],
                    max_waypoints: int = MAX_WAYPOINTS) -> List[Tuple[Coordinates, float]]:
    """
    Parse a waypoint string into (position, turn angle) pairs.

    Returns an empty list for None or an empty string.
    """
    waypoints = []
    if not text:
        return waypoints

    for record in text.split(RECORD_SEPARATOR):
        if len(waypoints) >= max_waypoints:
            break
        parsed = parse_record(record)
        if parsed is None:
            break
        waypoints.append(parsed)
    return waypoints
