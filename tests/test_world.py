"""Tests for goids.world."""

import math
from datetime import timedelta

import numpy as np
import pytest

from config import goids as config
from goids import Cohesion, FlockSnapshot, World
from goids.steering import MAX_FORCE
from goids.vector import angle_to_vector, is_finite

from .conftest import make_goid


def world_state(world):
    return (
        np.array([g.position for g in world.goids]),
        np.array([g.velocity for g in world.goids]),
    )


class TestConstruction:
    def test_empty_world_rejected(self):
        with pytest.raises(ValueError):
            World([])

    @pytest.mark.parametrize("setting", [
        {"reference_tick": 0.0},
        {"reference_tick": -0.01},
        {"max_dt": math.nan},
        {"max_dt": 0.0},
        {"max_dt": math.inf},
    ])
    def test_invalid_time_settings_rejected(self, setting):
        with pytest.raises(ValueError):
            World([make_goid(0.0, 0.0, 0.01, 0.0)], time_scaled=True, **setting)

    def test_defaults_come_from_config(self, trio_world):
        assert [b.name for b in trio_world.behaviors] == list(config.SIMULATION["behaviors"])
        assert trio_world.time_scaled is config.SIMULATION["time_scaled"]
        assert trio_world.tick == 0

    def test_len_and_iter(self, trio_world):
        assert len(trio_world) == 3
        assert list(trio_world) == trio_world.goids


class TestExampleScenario:
    def test_first_goid_turns_toward_centroid(self, trio_world):
        trio_world.step(0.016)
        goid = trio_world.goids[0]
        assert goid.velocity[1] > 0.0
        assert goid.speed() == pytest.approx(1.0, rel=1e-6)
        np.testing.assert_allclose(goid.velocity, [1.0, MAX_FORCE], rtol=1e-6, atol=1e-9)

    def test_tick_counter(self, trio_world):
        trio_world.step(0.0)
        trio_world.step(0.0)
        assert trio_world.tick == 2


class TestInvariants:
    def test_speed_conservation(self, scattered_world):
        for _ in range(100):
            before = [g.speed() for g in scattered_world.goids]
            scattered_world.step(0.016)
            after = [g.speed() for g in scattered_world.goids]
            assert after == pytest.approx(before, rel=1e-6)

    @pytest.mark.parametrize("time_scaled", [False, True])
    @pytest.mark.parametrize("dt", [0.0, 0.016, -1.0, 1e9, math.nan, math.inf])
    def test_state_stays_finite(self, scattered_world, time_scaled, dt):
        scattered_world.time_scaled = time_scaled
        for _ in range(20):
            scattered_world.step(dt)
            for goid in scattered_world.goids:
                assert is_finite(goid.position)
                assert is_finite(goid.velocity)

    def test_original_roster_stays_finite(self):
        world = World.populate(config.get_preset_config("original"), seed=1)
        for _ in range(50):
            world.step(0.01)
        positions, velocities = world_state(world)
        assert np.all(np.isfinite(positions))
        assert np.all(np.isfinite(velocities))

    def test_single_goid_keeps_direction(self):
        world = World([make_goid(0.3, -0.2, *angle_to_vector(37.0, 0.01))])
        for _ in range(10):
            world.step(0.016)
        goid = world.goids[0]
        assert goid.heading() == pytest.approx(37.0, abs=1e-3)
        assert goid.speed() == pytest.approx(0.01, rel=1e-5)

    @pytest.mark.parametrize("speed", [MAX_FORCE, MAX_FORCE / 2])
    def test_goid_no_faster_than_max_force(self, speed):
        world = World([make_goid(0.0, 0.0, speed, 0.0)])
        for _ in range(5):
            world.step(0.01)
            goid = world.goids[0]
            assert goid.speed() == pytest.approx(speed, rel=1e-6)
            assert goid.heading() == 0.0
        assert goid.x == pytest.approx(5 * speed, rel=1e-5)

    @pytest.mark.parametrize("speed", [MAX_FORCE, MAX_FORCE / 2])
    def test_slow_goids_in_a_flock_keep_speed(self, speed):
        world = World([
            make_goid(0.0, 0.0, speed, 0.0),
            make_goid(1.0, 0.5, 0.0, -speed),
            make_goid(-0.5, 2.0, -speed, 0.0),
        ])
        for _ in range(20):
            before = [g.speed() for g in world.goids]
            world.step(0.01)
            assert [g.speed() for g in world.goids] == pytest.approx(before, rel=1e-6)

    def test_single_goid_keeps_direction_excluding_self(self):
        world = World(
            [make_goid(0.0, 0.0, 0.0, 0.02)],
            behaviors=[Cohesion(include_self=False)],
        )
        world.step(0.016)
        goid = world.goids[0]
        assert goid.heading() == pytest.approx(90.0)
        np.testing.assert_allclose(goid.position, [0.0, 0.02], rtol=1e-6)

    def test_determinism(self):
        def run():
            world = World([
                make_goid(0.0, 0.0, 0.01, 0.0),
                make_goid(0.5, 0.2, 0.0, 0.02),
                make_goid(-0.3, 0.9, -0.015, 0.005),
            ])
            for dt in [0.016, 0.0, 0.033, 0.016] * 25:
                world.step(dt)
            return world_state(world)

        first, second = run(), run()
        assert np.array_equal(first[0], second[0])
        assert np.array_equal(first[1], second[1])


class TestTickIsolation:
    def test_behaviors_share_start_of_tick_snapshot(self, trio_world):
        seen = []

        def recorder(index, snapshot):
            seen.append((index, snapshot, snapshot.positions.copy()))
            return np.zeros(2, dtype=np.float32)

        start_positions = world_state(trio_world)[0]
        trio_world.behaviors = [recorder]
        trio_world.step(0.0)

        assert [index for index, _, _ in seen] == [0, 1, 2]
        assert len({id(snapshot) for _, snapshot, _ in seen}) == 1
        for _, _, positions in seen:
            assert np.array_equal(positions, start_positions)

    def test_step_matches_precomputed_steering(self, scattered_world):
        snapshot = scattered_world.snapshot()
        expected = [scattered_world.steering(i, snapshot) for i in range(len(scattered_world))]
        copies = [(g.position.copy(), g.velocity.copy()) for g in scattered_world.goids]

        scattered_world.step(0.0)

        for goid, accel, (position, velocity) in zip(scattered_world.goids, expected, copies):
            speed = np.float32(np.hypot(*velocity.astype(np.float64)))
            turned = velocity + accel
            turned = (turned / np.float32(np.hypot(*turned.astype(np.float64)))) * speed
            np.testing.assert_allclose(goid.velocity, turned, rtol=1e-5, atol=1e-9)
            np.testing.assert_allclose(goid.position, position + goid.velocity, rtol=1e-5, atol=1e-9)

    def test_no_behaviors_keeps_velocity(self, trio_world):
        trio_world.behaviors = []
        trio_world.step(0.0)
        for goid in trio_world.goids:
            np.testing.assert_allclose(goid.velocity, [1.0, 0.0])


class TestTimeScaling:
    def make_world(self):
        return World(
            [make_goid(0.0, 0.0, 0.01, 0.0)],
            behaviors=[],
            time_scaled=True,
            reference_tick=0.01,
            max_dt=0.05,
        )

    def test_fixed_step_ignores_dt(self, trio_world):
        trio_world.behaviors = []
        trio_world.step(10.0)
        assert trio_world.goids[0].position.tolist() == [1.0, 0.0]

    def test_dt_scales_advance(self):
        world = self.make_world()
        world.step(0.02)
        assert world.goids[0].x == pytest.approx(0.02, rel=1e-5)

    def test_dt_is_capped(self):
        world = self.make_world()
        world.step(1.0)
        assert world.goids[0].x == pytest.approx(0.05, rel=1e-5)

    @pytest.mark.parametrize("dt", [0.0, -0.5, math.nan])
    def test_invalid_dt_does_not_move(self, dt):
        world = self.make_world()
        world.step(dt)
        assert world.goids[0].x == 0.0

    def test_accepts_timedelta(self):
        world = self.make_world()
        world.step(timedelta(milliseconds=30))
        assert world.goids[0].x == pytest.approx(0.03, rel=1e-5)


class TestSnapshot:
    def test_arrays_are_read_only(self, trio_world):
        snapshot = trio_world.snapshot()
        with pytest.raises(ValueError):
            snapshot.positions[0, 0] = 5.0
        with pytest.raises(ValueError):
            snapshot.centroid[0] = 5.0

    def test_snapshot_does_not_follow_later_ticks(self, trio_world):
        snapshot = trio_world.snapshot()
        trio_world.step(0.0)
        assert snapshot.positions[0].tolist() == [0.0, 0.0]
        assert snapshot.tick == 0

    def test_render_fields(self, trio_world):
        snapshot = trio_world.snapshot()
        assert isinstance(snapshot, FlockSnapshot)
        assert snapshot.count == 3
        assert snapshot.headings.tolist() == [0.0, 0.0, 0.0]
        assert snapshot.colors.shape == (3, 4)
        assert snapshot.mean_speed() == pytest.approx(1.0)
        np.testing.assert_allclose(snapshot.mean_velocity, [1.0, 0.0])


class TestPopulate:
    def test_original_roster_size(self):
        world = World.populate(config.get_preset_config("original"), seed=0)
        assert len(world) == 203

    def test_fixed_goids_come_first(self):
        world = World.populate(config.get_preset_config("original"), seed=0)
        first, second, third = world.goids[:3]
        assert first.heading() == pytest.approx(0.0)
        assert second.heading() == pytest.approx(90.0)
        assert second.position.tolist() == [0.0, 0.5]
        assert abs(third.heading()) == pytest.approx(180.0)
        assert first.color == config.PALETTE["opaque_blue"]
        assert all(g.color[3] == 1.0 for g in world.goids)

    def test_group_speed_ramp(self):
        world = World.populate(config.get_preset_config("original"), seed=0)
        ramp = world.goids[3:103]
        assert ramp[0].speed() == pytest.approx(0.01, rel=1e-5)
        assert ramp[99].speed() == pytest.approx(0.01 + 0.0001 * 99, rel=1e-5)
        assert all(g.speed() == pytest.approx(0.02, rel=1e-5) for g in world.goids[103:])

    def test_group_colors_from_palette(self):
        world = World.populate(config.get_preset_config("swarm"), seed=0)
        allowed = {config.PALETTE["green"], config.PALETTE["red"]}
        assert {g.color for g in world.goids} <= allowed

    def test_seed_is_reproducible(self):
        preset = config.get_preset_config("swarm")
        a = World.populate(preset, seed=42)
        b = World.populate(preset, seed=42)
        assert np.array_equal(world_state(a)[1], world_state(b)[1])

    def test_empty_roster_rejected(self):
        with pytest.raises(ValueError):
            World.populate({"fixed": [], "groups": []}, seed=0)

    def test_kwargs_reach_world(self):
        world = World.populate(config.get_preset_config("trio"), seed=0, time_scaled=True)
        assert world.time_scaled is True
