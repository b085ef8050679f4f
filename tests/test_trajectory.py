"""
Unit Tests for the Trajectory Core
==================================
Geometry, missile profile, engine and path sampler.
Run: python -m pytest tests/ -v
"""

import sys
import os
import logging
import math
import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from missile_trajectory.config import EngineConfig, FirstLegPolicy, MAX_WAYPOINTS
from missile_trajectory.errors import (
    TrajectoryError, CapacityExceeded, NonPositiveSpeed,
    DegenerateGreatCircle, FuelExhausted,
)
from missile_trajectory.geomath import (
    Coordinates, distance, bearing, travel_time,
    interpolate, interpolate_many, turn_angle, degeneracy,
)
from missile_trajectory.profile import MissileAttributes
from missile_trajectory.engine import (
    Waypoint, create_route, append_waypoint, rebuild,
    compute_waypoint_effect, turn_effect, g_force,
)
from missile_trajectory.sampler import SampledPath, sample_path


ORIGIN = Coordinates(0.0, 0.0, 0.0)
ONE_DEG_EAST = Coordinates(0.0, 1.0, 0.0)
ONE_DEG_KM = 6371.0 * math.pi / 180.0

ACCOUNTED = EngineConfig(first_leg=FirstLegPolicy.ACCOUNTED)


def standard_missile():
    return MissileAttributes.from_weight_and_speed(1000.0, 300.0)


def random_points(n, seed=7):
    rng = np.random.default_rng(seed)
    lats = rng.uniform(-89.0, 89.0, n)
    lons = rng.uniform(-180.0, 180.0, n)
    return [Coordinates(float(a), float(o)) for a, o in zip(lats, lons)]


class TestGeoMath:
    """Great-circle primitives."""

    def test_distance_to_self_is_zero(self):
        for p in random_points(20):
            assert distance(p, p) == 0.0

    def test_distance_symmetric(self):
        pts = random_points(20)
        for a, b in zip(pts[:-1], pts[1:]):
            assert distance(a, b) == distance(b, a)

    def test_one_degree_on_equator(self):
        assert distance(ORIGIN, ONE_DEG_EAST) == pytest.approx(111.19, abs=0.01)

    def test_distance_scales_with_radius(self):
        d1 = distance(ORIGIN, ONE_DEG_EAST)
        d2 = distance(ORIGIN, ONE_DEG_EAST, radius=2 * 6371.0)
        assert d2 == pytest.approx(2 * d1)

    def test_antipodal_distance_is_half_circumference(self):
        d = distance(ORIGIN, Coordinates(0.0, 180.0))
        assert d == pytest.approx(math.pi * 6371.0)

    def test_cardinal_bearings(self):
        assert bearing(ORIGIN, Coordinates(1.0, 0.0)) == pytest.approx(0.0, abs=1e-9)
        assert bearing(ORIGIN, ONE_DEG_EAST) == pytest.approx(90.0)
        assert bearing(ORIGIN, Coordinates(-1.0, 0.0)) == pytest.approx(180.0)
        assert bearing(ORIGIN, Coordinates(0.0, -1.0)) == pytest.approx(270.0)

    def test_bearing_range(self):
        pts = random_points(60, seed=11)
        for a in pts[:10]:
            for b in pts[10:]:
                assert 0.0 <= bearing(a, b) < 360.0

    def test_travel_time(self):
        assert travel_time(3000.0, 300.0) == pytest.approx(10.0)

    def test_interpolate_endpoints(self):
        a, b = Coordinates(10.0, 20.0), Coordinates(-5.0, 40.0)
        p0 = interpolate(a, b, 0.0)
        p1 = interpolate(a, b, 1.0)
        assert p0.latitude == pytest.approx(a.latitude, abs=1e-9)
        assert p0.longitude == pytest.approx(a.longitude, abs=1e-9)
        assert p1.latitude == pytest.approx(b.latitude, abs=1e-9)
        assert p1.longitude == pytest.approx(b.longitude, abs=1e-9)
        assert p0.altitude == pytest.approx(0.0, abs=1e-9)
        assert p1.altitude == pytest.approx(0.0, abs=1e-9)

    def test_interpolate_midpoint_altitude_peaks(self):
        mid = interpolate(ORIGIN, Coordinates(0.0, 10.0), 0.5)
        assert mid.altitude == pytest.approx(10000.0)
        assert mid.latitude == pytest.approx(0.0, abs=1e-9)
        assert mid.longitude == pytest.approx(5.0)

    def test_interpolated_point_lies_on_great_circle(self):
        a, b = Coordinates(40.0, -74.0), Coordinates(51.5, -0.1)
        p = interpolate(a, b, 0.3)
        total = distance(a, b)
        assert distance(a, p) == pytest.approx(0.3 * total, rel=1e-6)
        assert distance(p, b) == pytest.approx(0.7 * total, rel=1e-6)

    def test_interpolate_coincident_falls_back_to_start(self):
        a = Coordinates(12.0, 34.0, 500.0)
        p = interpolate(a, a, 0.5)
        assert (p.latitude, p.longitude) == (12.0, 34.0)
        assert p.altitude == pytest.approx(10000.0)

    def test_interpolate_coincident_strict_raises(self):
        a = Coordinates(12.0, 34.0)
        with pytest.raises(DegenerateGreatCircle):
            interpolate(a, a, 0.5, strict=True)

    def test_interpolate_antipodal(self):
        b = Coordinates(0.0, 180.0)
        assert degeneracy(ORIGIN, b) == "antipodal"
        with pytest.raises(DegenerateGreatCircle):
            interpolate(ORIGIN, b, 0.5, strict=True)
        fallback = interpolate_many(ORIGIN, b, [0.25, 0.75])
        assert fallback[0, 1] == 0.0
        assert fallback[1, 1] == 180.0

    def test_interpolate_many_shape(self):
        pts = interpolate_many(ORIGIN, ONE_DEG_EAST, np.linspace(0, 1, 7))
        assert pts.shape == (7, 3)
        assert np.all(np.diff(pts[:, 1]) > 0)

    def test_turn_angle_signs(self):
        assert turn_angle(ORIGIN, ONE_DEG_EAST, Coordinates(0.0, 2.0)) == pytest.approx(0.0, abs=1e-9)
        assert turn_angle(ORIGIN, ONE_DEG_EAST, Coordinates(1.0, 1.0)) == pytest.approx(-90.0, abs=1e-6)
        assert turn_angle(ORIGIN, ONE_DEG_EAST, Coordinates(-1.0, 1.0)) == pytest.approx(90.0, abs=1e-6)


class TestMissileProfile:
    """Derived values and defaults."""

    def test_derived_from_weight(self):
        m = standard_missile()
        assert m.fuel == pytest.approx(700.0)
        assert m.burn_rate == pytest.approx(700.0 / 60.0)
        assert m.thrust == pytest.approx(30000.0)

    def test_defaults_applied(self):
        m = standard_missile().with_defaults()
        assert m.max_acceleration == 30.0
        assert m.max_deceleration == 50.0
        assert m.max_turn_rate == 20.0
        assert m.drag_coefficient == 0.1
        assert m.fuel_consumption_normal == pytest.approx(m.burn_rate)
        assert m.fuel_consumption_turn == pytest.approx(2 * m.burn_rate)

    def test_defaults_idempotent(self):
        once = standard_missile().with_defaults()
        assert once.with_defaults() == once

    def test_explicit_values_kept(self):
        m = MissileAttributes(weight=500.0, speed=250.0, fuel=100.0, burn_rate=2.0,
                              max_turn_rate=45.0, drag_coefficient=-1.0).with_defaults()
        assert m.max_turn_rate == 45.0
        assert m.drag_coefficient == 0.1
        assert m.fuel_consumption_normal == 2.0

    def test_endurance(self):
        m = standard_missile().with_defaults()
        assert m.endurance == pytest.approx(60.0)


class TestTurnModels:
    """Closed-form turn speed loss and g-force."""

    def test_no_turn_keeps_speed(self):
        for drag in [0.0, 0.1, 1.0, 10.0]:
            assert turn_effect(250.0, 0.0, drag) == 250.0

    def test_turn_effect_floor(self):
        for angle in np.linspace(-360, 360, 37):
            for drag in [0.05, 0.1, 0.5, 1.0, 3.0]:
                assert turn_effect(200.0, angle, drag) >= 0.1 * 200.0

    def test_large_turn_hits_floor(self):
        assert turn_effect(100.0, 170.0, 1.0) == pytest.approx(10.0)

    def test_turn_direction_irrelevant(self):
        assert turn_effect(300.0, -45.0, 0.1) == turn_effect(300.0, 45.0, 0.1)

    def test_ninety_degree_turn(self):
        expected = 300.0 * math.cos(math.pi / 2 * 0.1)
        assert turn_effect(300.0, 90.0, 0.1) == pytest.approx(expected)
        assert expected == pytest.approx(0.9877 * 300.0, rel=1e-4)

    def test_g_force(self):
        assert g_force(100.0, 1000.0) == pytest.approx(10000.0 / (1000.0 * 9.81))

    def test_g_force_radius_floor(self):
        assert g_force(100.0, 0.0) == pytest.approx(10000.0 / (0.1 * 9.81))


class TestRouteCreation:
    """Zero-waypoint routes."""

    def test_reference_scenario(self):
        route = create_route(ORIGIN, ONE_DEG_EAST, standard_missile())
        assert route.total_distance == pytest.approx(111.19, abs=0.01)
        assert route.total_travel_time == pytest.approx(370.6, abs=0.1)
        assert route.remaining_fuel == 0.0
        assert route.fuel_exhausted
        assert route.initial_bearing == pytest.approx(90.0)
        assert route.current_speed == 300.0

    def test_totals_match_formulas(self):
        start, end = Coordinates(10.0, 10.0), Coordinates(10.05, 10.05)
        route = create_route(start, end, standard_missile())
        d = distance(start, end)
        assert route.total_distance == pytest.approx(d)
        assert route.total_travel_time == pytest.approx(d * 1000 / 300.0)
        burn = route.total_travel_time * route.missile.fuel_consumption_normal
        assert route.remaining_fuel == pytest.approx(max(0.0, 700.0 - burn))
        assert not route.fuel_exhausted

    def test_shortfall_recorded(self):
        route = create_route(ORIGIN, ONE_DEG_EAST, standard_missile())
        burn = route.total_travel_time * route.missile.fuel_consumption_normal
        assert route.fuel_shortfall == pytest.approx(burn - 700.0)
        assert route.fuel_used == pytest.approx(burn)
        with pytest.raises(FuelExhausted):
            route.require_fuel()

    def test_defaults_applied_at_creation(self):
        route = create_route(ORIGIN, ONE_DEG_EAST, standard_missile())
        assert route.missile.max_turn_rate == 20.0
        assert route.missile.fuel_consumption_turn == pytest.approx(700.0 / 30.0)

    def test_zero_speed_strict_raises(self):
        with pytest.raises(NonPositiveSpeed):
            create_route(ORIGIN, ONE_DEG_EAST, MissileAttributes.from_weight_and_speed(1000.0, 0.0))

    def test_zero_speed_permissive_is_infinite(self):
        route = create_route(ORIGIN, ONE_DEG_EAST,
                             MissileAttributes.from_weight_and_speed(1000.0, 0.0),
                             EngineConfig.permissive())
        assert math.isinf(route.total_travel_time)
        assert route.remaining_fuel == 0.0

    def test_coincident_endpoints(self):
        with pytest.raises(DegenerateGreatCircle):
            create_route(ORIGIN, ORIGIN, standard_missile())
        route = create_route(ORIGIN, ORIGIN, standard_missile(), EngineConfig.permissive())
        assert route.total_distance == 0.0
        assert route.total_travel_time == 0.0
        assert route.remaining_fuel == pytest.approx(700.0)

    def test_errors_share_base_class(self):
        for exc in (CapacityExceeded, NonPositiveSpeed, DegenerateGreatCircle, FuelExhausted):
            assert issubclass(exc, TrajectoryError)
            assert issubclass(exc, ValueError)

    def test_custom_radius_config(self):
        big = EngineConfig(earth_radius_km=2 * 6371.0)
        route = create_route(ORIGIN, ONE_DEG_EAST, standard_missile(), big)
        assert route.total_distance == pytest.approx(2 * ONE_DEG_KM)

    def test_invalid_config_rejected(self):
        with pytest.raises(ValueError):
            EngineConfig(points_per_leg=1)
        with pytest.raises(ValueError):
            EngineConfig(gravity=0.0)


class TestWaypoints:
    """Appending waypoints and the full rebuild."""

    def test_append_returns_new_snapshot(self):
        route = create_route(ORIGIN, Coordinates(0.0, 2.0), standard_missile())
        extended = append_waypoint(route, ONE_DEG_EAST, 30.0)
        assert route.waypoint_count == 0
        assert extended.waypoint_count == 1
        assert extended.waypoints[0].position == ONE_DEG_EAST
        assert extended.waypoints[0].turn_angle == 30.0

    def test_first_waypoint_unaccounted_by_default(self):
        end = Coordinates(1.0, 1.0)
        route = append_waypoint(create_route(ORIGIN, end, standard_missile()),
                                ONE_DEG_EAST, 90.0)
        wp = route.waypoints[0]
        assert not wp.leg_accounted
        assert wp.approach_speed == 0.0
        assert wp.departure_speed == 0.0
        assert wp.distance_from_previous == 0.0
        assert wp.fuel_consumed == 0.0
        # Only the final leg is counted, flown at the cruise speed
        assert route.total_distance == pytest.approx(distance(ONE_DEG_EAST, end))
        assert route.total_travel_time == pytest.approx(distance(ONE_DEG_EAST, end) * 1000 / 300.0)
        assert route.current_speed == 300.0
        assert route.initial_bearing == pytest.approx(90.0)

    def test_second_waypoint_measured_from_start_by_default(self):
        wp2 = Coordinates(0.0, 2.0)
        route = create_route(ORIGIN, Coordinates(0.0, 3.0), standard_missile())
        route = append_waypoint(route, ONE_DEG_EAST, 10.0)
        route = append_waypoint(route, wp2, 20.0)
        second = route.waypoints[1]
        assert second.leg_accounted
        assert second.distance_from_previous == pytest.approx(distance(ORIGIN, wp2))
        assert second.approach_speed == 300.0

    def test_single_waypoint_ninety_degree_turn(self):
        end = Coordinates(1.0, 1.0)
        route = create_route(ORIGIN, end, standard_missile(), ACCOUNTED)
        route = append_waypoint(route, ONE_DEG_EAST, 90.0)
        wp = route.waypoints[0]
        assert wp.leg_accounted
        assert wp.approach_speed == 300.0
        assert wp.departure_speed == pytest.approx(wp.approach_speed * math.cos(math.pi / 2 * 0.1))
        assert wp.distance_from_previous == pytest.approx(ONE_DEG_KM)
        assert wp.bearing_from_previous == pytest.approx(90.0)
        assert wp.time_to_reach == pytest.approx(ONE_DEG_KM * 1000 / 300.0)

        burn = route.missile.fuel_consumption_normal
        expected_fuel = wp.time_to_reach * burn + (90.0 / 20.0) * 2 * burn
        assert wp.fuel_consumed == pytest.approx(expected_fuel)

        radius = 300.0 / math.radians(20.0)
        assert wp.g_force == pytest.approx(300.0 ** 2 / (radius * 9.81))

        final_km = distance(ONE_DEG_EAST, end)
        assert route.total_distance == pytest.approx(ONE_DEG_KM + final_km)
        assert route.total_travel_time == pytest.approx(
            wp.time_to_reach + final_km * 1000 / wp.departure_speed)
        assert route.current_speed == pytest.approx(wp.departure_speed)

    def test_speed_chains_through_waypoints(self):
        route = create_route(ORIGIN, Coordinates(0.0, 4.0), standard_missile(), ACCOUNTED)
        for lon in (1.0, 2.0, 3.0):
            route = append_waypoint(route, Coordinates(0.0, lon), 45.0)
        wps = route.waypoints
        for prev, nxt in zip(wps[:-1], wps[1:]):
            assert nxt.approach_speed == pytest.approx(prev.departure_speed)
        assert wps[-1].departure_speed < wps[0].approach_speed

    def test_totals_equal_sum_of_legs(self):
        route = create_route(Coordinates(10.0, 10.0), Coordinates(10.3, 10.3),
                             standard_missile(), ACCOUNTED)
        for i in range(1, 5):
            route = append_waypoint(route, Coordinates(10.0 + 0.05 * i, 10.0 + 0.07 * i), 15.0 * i)
        final_km = distance(route.waypoints[-1].position, route.end)
        final_t = final_km * 1000 / route.waypoints[-1].departure_speed
        assert route.total_distance == pytest.approx(
            sum(wp.distance_from_previous for wp in route.waypoints) + final_km)
        assert route.total_travel_time == pytest.approx(
            sum(wp.time_to_reach for wp in route.waypoints) + final_t)

    def test_rebuild_is_deterministic(self):
        route = create_route(ORIGIN, Coordinates(0.0, 3.0), standard_missile())
        route = append_waypoint(route, ONE_DEG_EAST, 10.0)
        route = append_waypoint(route, Coordinates(0.5, 2.0), -25.0)
        assert rebuild(route) == route

    def test_compute_effect_index_checked(self):
        route = create_route(ORIGIN, ONE_DEG_EAST, standard_missile())
        with pytest.raises(IndexError):
            compute_waypoint_effect(route, 0)

    def test_leg_speeds(self):
        route = create_route(ORIGIN, Coordinates(0.0, 3.0), standard_missile(), ACCOUNTED)
        route = append_waypoint(route, ONE_DEG_EAST, 60.0)
        speeds = route.leg_speeds()
        assert len(speeds) == len(route.legs()) == 2
        assert speeds[0] == 300.0
        assert speeds[1] == pytest.approx(route.waypoints[0].departure_speed)


class TestCapacity:
    """Bounded waypoint list."""

    def _full_route(self, config):
        route = create_route(ORIGIN, Coordinates(0.0, 2.0), standard_missile(), config)
        for i in range(1, MAX_WAYPOINTS + 1):
            route = append_waypoint(route, Coordinates(0.0, 0.1 * i), 5.0)
        return route

    def test_eleventh_waypoint_strict(self):
        route = self._full_route(EngineConfig())
        assert route.waypoint_count == 10
        assert route.is_full
        extra = Coordinates(1.0, 1.5)
        with pytest.raises(CapacityExceeded):
            append_waypoint(route, extra, 10.0)
        assert route.waypoint_count == 10
        assert all(wp.position != extra for wp in route.waypoints)

    def test_eleventh_waypoint_permissive(self):
        route = self._full_route(EngineConfig.permissive())
        extra = Coordinates(1.0, 1.5)
        after = append_waypoint(route, extra, 10.0)
        assert after is route
        assert after.waypoint_count == 10
        assert all(wp.position != extra for wp in after.waypoints)

    def test_configurable_capacity(self):
        route = create_route(ORIGIN, Coordinates(0.0, 2.0), standard_missile(),
                             EngineConfig(max_waypoints=2))
        route = append_waypoint(route, Coordinates(0.0, 0.5))
        route = append_waypoint(route, ONE_DEG_EAST)
        with pytest.raises(CapacityExceeded):
            append_waypoint(route, Coordinates(0.0, 1.5))


class TestFlownLegs:
    """Strict validation of the legs actually flown."""

    def test_waypoint_on_start_rejected(self):
        route = create_route(ORIGIN, Coordinates(0.0, 2.0), standard_missile())
        with pytest.raises(DegenerateGreatCircle):
            append_waypoint(route, ORIGIN, 0.0)
        assert route.waypoint_count == 0

    def test_waypoint_on_start_permissive_samples(self):
        route = create_route(ORIGIN, Coordinates(0.0, 2.0), standard_missile(),
                             EngineConfig.permissive())
        route = append_waypoint(route, ORIGIN, 0.0)
        path = sample_path(route)
        assert len(path) == 200
        assert np.all(path.latitude[:100] == 0.0)
        assert np.all(path.longitude[:100] == 0.0)

    def test_repeated_waypoint_rejected(self):
        # wp[1] is measured from the start, but wp[0] -> wp[1] is still flown
        route = create_route(ORIGIN, Coordinates(0.0, 3.0), standard_missile())
        route = append_waypoint(route, ONE_DEG_EAST, 10.0)
        with pytest.raises(DegenerateGreatCircle):
            append_waypoint(route, ONE_DEG_EAST, 10.0)

    def test_coincident_first_leg_rejected_when_accounted(self):
        route = create_route(ORIGIN, Coordinates(0.0, 2.0), standard_missile(), ACCOUNTED)
        with pytest.raises(DegenerateGreatCircle):
            append_waypoint(route, ORIGIN, 0.0)

    def test_loop_back_through_start(self):
        end = Coordinates(0.0, 2.0)
        route = create_route(ORIGIN, end, standard_missile())
        route = append_waypoint(route, ONE_DEG_EAST, 180.0)
        route = append_waypoint(route, ORIGIN, 180.0)
        back = route.waypoints[1]
        assert back.leg_accounted
        assert back.distance_from_previous == 0.0
        assert back.time_to_reach == 0.0
        assert route.total_distance == pytest.approx(distance(ORIGIN, end))
        assert len(sample_path(route)) == 300

    def test_antipodal_leg_accepted(self, caplog):
        far = Coordinates(0.0, 180.0)
        route = create_route(ORIGIN, far, standard_missile())
        assert route.total_distance == pytest.approx(math.pi * 6371.0)
        with caplog.at_level(logging.WARNING, logger='missile_trajectory.sampler'):
            path = sample_path(route)
        assert len(path) == 100
        assert path[0].longitude == 0.0
        assert path[-1].longitude == 180.0
        assert "antipodal" in caplog.text


class TestPathSampler:
    """Dense path for rendering."""

    def test_length_and_endpoints(self):
        start, end = Coordinates(10.0, 20.0), Coordinates(12.0, 25.0)
        route = create_route(start, end, standard_missile())
        route = append_waypoint(route, Coordinates(11.0, 22.0), 10.0)
        route = append_waypoint(route, Coordinates(11.5, 24.0), -15.0)
        path = sample_path(route)
        assert len(path) == (route.waypoint_count + 1) * 100
        assert path[0].latitude == pytest.approx(start.latitude, abs=1e-9)
        assert path[0].longitude == pytest.approx(start.longitude, abs=1e-9)
        assert path[-1].latitude == pytest.approx(end.latitude, abs=1e-9)
        assert path[-1].longitude == pytest.approx(end.longitude, abs=1e-9)

    def test_leg_boundaries_hit_waypoints(self):
        wp = Coordinates(0.5, 0.5)
        route = append_waypoint(create_route(ORIGIN, ONE_DEG_EAST, standard_missile()), wp, 0.0)
        path = sample_path(route)
        assert path[99].latitude == pytest.approx(wp.latitude, abs=1e-9)
        assert path[100].longitude == pytest.approx(wp.longitude, abs=1e-9)
        assert np.count_nonzero(path.leg_index == 0) == 100
        assert np.count_nonzero(path.leg_index == 1) == 100

    def test_altitude_profile_per_leg(self):
        route = create_route(ORIGIN, ONE_DEG_EAST, standard_missile())
        path = sample_path(route)
        assert path.altitude[0] == pytest.approx(0.0, abs=1e-9)
        assert path.altitude[-1] == pytest.approx(0.0, abs=1e-9)
        assert path.altitude.max() <= 10000.0
        assert path.altitude.max() > 9990.0

    def test_points_per_leg_configurable(self):
        route = create_route(ORIGIN, ONE_DEG_EAST, standard_missile(),
                             EngineConfig(points_per_leg=10))
        assert len(sample_path(route)) == 10

    def test_iteration_yields_coordinates(self):
        path = sample_path(create_route(ORIGIN, ONE_DEG_EAST, standard_missile()))
        points = path.points()
        assert len(points) == 100
        assert all(isinstance(p, Coordinates) for p in points)
        assert path.as_array().shape == (100, 3)

    def test_cumulative_distance(self):
        route = create_route(ORIGIN, ONE_DEG_EAST, standard_missile())
        dist = sample_path(route).cumulative_distance()
        assert dist[0] == 0.0
        assert np.all(np.diff(dist) >= 0)
        assert dist[-1] == pytest.approx(route.total_distance, rel=1e-6)

    def test_cumulative_distance_uses_configured_radius(self):
        route = create_route(ORIGIN, ONE_DEG_EAST, standard_missile(),
                             EngineConfig(earth_radius_km=2 * 6371.0))
        path = sample_path(route)
        assert path.radius == 2 * 6371.0
        assert path.cumulative_distance()[-1] == pytest.approx(2 * ONE_DEG_KM, rel=1e-6)

    def test_allocation_failure_returns_empty(self, monkeypatch):
        route = create_route(ORIGIN, ONE_DEG_EAST, standard_missile())

        def no_memory(*args, **kwargs):
            raise MemoryError

        monkeypatch.setattr(np, 'empty', no_memory)
        path = sample_path(route)
        assert isinstance(path, SampledPath)
        assert len(path) == 0
        assert path.is_empty


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
