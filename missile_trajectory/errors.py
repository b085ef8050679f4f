"""
Trajectory Errors
=================
Exceptions raised by the engine in strict mode.

All derive from ``TrajectoryError`` (itself a ``ValueError``) so callers
can catch the whole family in one place.
"""


class TrajectoryError(ValueError):
    """Base class for route computation errors."""


class CapacityExceeded(TrajectoryError):
    """A waypoint was appended to a route already holding its maximum."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Route already holds the maximum of {capacity} waypoints")


class NonPositiveSpeed(TrajectoryError):
    """A leg would be flown at zero or negative speed."""

    def __init__(self, speed: float, context: str = "route"):
        self.speed = speed
        super().__init__(f"Speed must be positive for {context}, got {speed} m/s")


class DegenerateGreatCircle(TrajectoryError):
    """Two points do not define a unique great circle (coincident or antipodal)."""

    def __init__(self, a, b, reason: str = "coincident"):
        self.a = a
        self.b = b
        self.reason = reason
        super().__init__(
            f"No unique great circle between ({a.latitude:.6f}, {a.longitude:.6f}) "
            f"and ({b.latitude:.6f}, {b.longitude:.6f}): points are {reason}"
        )


class FuelExhausted(TrajectoryError):
    """The route needs more fuel than the missile carries."""

    def __init__(self, shortfall: float, available: float):
        self.shortfall = shortfall
        self.available = available
        super().__init__(
            f"Route needs {shortfall:.2f} kg more fuel than the "
            f"{available:.2f} kg available"
        )
