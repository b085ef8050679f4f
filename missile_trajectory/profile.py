"""
Missile Profile
===============
Physical and fuel properties of the vehicle flying the route.

Raw inputs are weight (kg) and cruise speed (m/s). From these:
  - fuel      = 0.7 × weight          (70% of launch mass is propellant)
  - burn rate = fuel / 60 s           (full burn in one minute)
  - thrust    = 30 × weight           (N)

Aerodynamic and fuel-rate fields that are unset (≤ 0) receive fixed
defaults when a route is created.
"""

from dataclasses import dataclass, replace

from .config import GRAVITY


# ── Derivation factors ────────────────────────────────────────────────────
FUEL_FRACTION        = 0.7      # fuel mass / launch mass
FULL_BURN_TIME       = 60.0     # s
THRUST_PER_KG        = 30.0     # N/kg

# ── Physical defaults ─────────────────────────────────────────────────────
DEFAULT_MAX_ACCELERATION = 30.0     # m/s²
DEFAULT_MAX_DECELERATION = 50.0     # m/s²
DEFAULT_MAX_TURN_RATE    = 20.0     # deg/s
DEFAULT_DRAG_COEFFICIENT = 0.1      # dimensionless
TURN_CONSUMPTION_FACTOR  = 2.0      # turn burn = 2 × normal burn


@dataclass(frozen=True)
class MissileAttributes:
    """
    Vehicle properties. Units: kg, m/s, kg/s, N, m/s², deg/s.
    """
    weight: float
    speed: float
    fuel: float = 0.0
    burn_rate: float = 0.0
    thrust: float = 0.0
    max_acceleration: float = 0.0
    max_deceleration: float = 0.0
    max_turn_rate: float = 0.0
    drag_coefficient: float = 0.0
    fuel_consumption_normal: float = 0.0
    fuel_consumption_turn: float = 0.0

    @classmethod
    def from_weight_and_speed(cls, weight: float, speed: float) -> "MissileAttributes":
        """Derive fuel, burn rate and thrust from launch weight."""
        fuel = weight * FUEL_FRACTION
        return cls(
            weight=weight,
            speed=speed,
            fuel=fuel,
            burn_rate=fuel / FULL_BURN_TIME,
            thrust=weight * THRUST_PER_KG,
        )

    def with_defaults(self) -> "MissileAttributes":
        """
        Copy with every unset (≤ 0) physics or fuel-rate field defaulted.

        Idempotent: fields already positive are left untouched.
        """
        updates = {}
        if self.max_acceleration <= 0:
            updates['max_acceleration'] = DEFAULT_MAX_ACCELERATION
        if self.max_deceleration <= 0:
            updates['max_deceleration'] = DEFAULT_MAX_DECELERATION
        if self.max_turn_rate <= 0:
            updates['max_turn_rate'] = DEFAULT_MAX_TURN_RATE
        if self.drag_coefficient <= 0:
            updates['drag_coefficient'] = DEFAULT_DRAG_COEFFICIENT
        if self.fuel_consumption_normal <= 0:
            updates['fuel_consumption_normal'] = self.burn_rate
        if self.fuel_consumption_turn <= 0:
            updates['fuel_consumption_turn'] = self.burn_rate * TURN_CONSUMPTION_FACTOR
        return replace(self, **updates) if updates else self

    @property
    def thrust_to_weight(self) -> float:
        """Thrust over launch weight force (dimensionless)."""
        return self.thrust / (self.weight * GRAVITY) if self.weight > 0 else 0.0

    @property
    def endurance(self) -> float:
        """Seconds of straight flight the fuel load supports."""
        if self.fuel_consumption_normal <= 0:
            return float('inf')
        return self.fuel / self.fuel_consumption_normal
