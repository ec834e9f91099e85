"""
Tests for the Boid entity.

Covers:
- spawn: seeded placement ranges and reproducibility
- get_neighbors: self exclusion, view distance, field of view, order
- separate / align / cohese: accumulation and empty-list no-ops
- move: integration order, clamps, derived pose
- constrain: toroidal wrap per axis
- update: full tick on a lone boid
"""

import math

import numpy as np
import pytest

from boids import Boid
from boids.boid import DEFAULT_FOV


# =============================================================================
# SPAWN
# =============================================================================

class TestSpawn:

    def test_position_range(self, rng):
        """Positions fall in [-0.5, 1.5) times each extent."""
        for _ in range(200):
            boid = Boid.spawn(rng)
            lo = -0.5 * boid.extents
            hi = 1.5 * boid.extents
            assert np.all(boid.position >= lo)
            assert np.all(boid.position < hi)

    def test_velocity_range(self, rng):
        for _ in range(200):
            boid = Boid.spawn(rng)
            assert np.all(boid.velocity >= -0.05)
            assert np.all(boid.velocity < 0.15)

    def test_acceleration_starts_at_zero(self, rng):
        np.testing.assert_array_equal(Boid.spawn(rng).acceleration, np.zeros(3))

    def test_same_seed_same_boid(self):
        a = Boid.spawn(np.random.default_rng(42))
        b = Boid.spawn(np.random.default_rng(42))
        np.testing.assert_array_equal(a.position, b.position)
        np.testing.assert_array_equal(a.velocity, b.velocity)

    def test_writes_into_given_storage(self, rng):
        storage = np.zeros((2, 3))
        boid = Boid.spawn(rng, position=storage[1])
        np.testing.assert_array_equal(storage[1], boid.position)
        assert np.any(storage[1] != 0.0)

    def test_defaults(self):
        boid = Boid()
        assert boid.max_force == 0.4
        assert boid.max_speed == 0.6
        assert (boid.width, boid.height, boid.depth) == (80.0, 50.0, 50.0)
        assert boid.view_distance == 15.0


# =============================================================================
# NEIGHBORS
# =============================================================================

class TestGetNeighbors:

    def test_never_includes_self(self, make_boid):
        me = make_boid(velocity=(1.0, 0.0, 0.0))
        twin = make_boid(velocity=(1.0, 0.0, 0.0))
        assert me.get_neighbors([me, twin]) == [twin]

    def test_view_distance_is_exclusive(self, make_boid):
        me = make_boid(velocity=(1.0, 0.0, 0.0))
        inside = make_boid(position=(14.9, 0.0, 0.0))
        edge = make_boid(position=(15.0, 0.0, 0.0))
        assert me.get_neighbors([inside, edge]) == [inside]

    def test_field_of_view(self, make_boid):
        """Boids directly behind fall outside the default 0.8*pi cone."""
        me = make_boid(velocity=(1.0, 0.0, 0.0))
        ahead = make_boid(position=(5.0, 0.0, 0.0))
        beside = make_boid(position=(0.0, 5.0, 0.0))
        behind = make_boid(position=(-5.0, 0.0, 0.0))
        assert me.get_neighbors([ahead, beside, behind]) == [ahead, beside]

    def test_narrow_fov(self, make_boid):
        me = make_boid(velocity=(1.0, 0.0, 0.0))
        beside = make_boid(position=(0.0, 5.0, 0.0))
        assert me.get_neighbors([beside], fov=math.pi / 4) == []

    def test_stationary_boid_sees_all_around(self, make_boid):
        """Zero velocity makes every angle pi/2, which is inside 0.8*pi."""
        me = make_boid()
        others = [make_boid(position=p) for p in [(1, 0, 0), (-1, 0, 0), (0, 0, -3)]]
        assert me.get_neighbors(others, DEFAULT_FOV) == others

    def test_preserves_input_order(self, make_boid):
        me = make_boid()
        others = [make_boid(position=(float(i), 1.0, 0.0)) for i in range(5, 0, -1)]
        assert me.get_neighbors(others) == others


# =============================================================================
# STEERING
# =============================================================================

class TestSteeringMethods:

    @pytest.mark.parametrize("rule", ["separate", "align", "cohese"])
    def test_empty_neighbors_is_noop(self, make_boid, rule):
        boid = make_boid(acceleration=(0.01, -0.02, 0.03))
        before = boid.acceleration.copy()
        getattr(boid, rule)([], 1.0)
        np.testing.assert_array_equal(boid.acceleration, before)

    def test_stationary_pair(self, make_boid):
        """Two resting boids 1 apart: align adds nothing, separate splits them."""
        a = make_boid(position=(0.0, 0.0, 0.0))
        b = make_boid(position=(1.0, 0.0, 0.0))

        neighbors = a.get_neighbors([a, b])
        assert neighbors == [b]

        a.align(neighbors, 4 * 0.006)
        np.testing.assert_array_equal(a.acceleration, np.zeros(3))

        a.separate(neighbors, 0.2 * 0.006)
        assert a.acceleration[0] < 0
        assert a.acceleration[1] == 0.0 and a.acceleration[2] == 0.0

        b.separate(b.get_neighbors([a, b]), 0.2 * 0.006)
        assert b.acceleration[0] > 0

    def test_rules_accumulate(self, make_boid):
        """Each rule adds on top of what is already in the accumulator."""
        boid = make_boid(acceleration=(0.5, 0.0, 0.0))
        other = make_boid(position=(0.0, 3.0, 0.0))
        boid.cohese([other], 0.1)
        np.testing.assert_allclose(boid.acceleration, [0.5, 0.3, 0.0])

    def test_methods_return_accumulator(self, make_boid):
        boid = make_boid()
        other = make_boid(position=(0.0, 3.0, 0.0))
        assert boid.separate([other], 0.1) is boid.acceleration


# =============================================================================
# MOVE
# =============================================================================

class TestMove:

    def test_position_uses_pre_update_velocity(self, make_boid):
        boid = make_boid(velocity=(0.3, 0.0, 0.0), acceleration=(0.1, 0.0, 0.0))
        boid.move()
        np.testing.assert_allclose(boid.position, [0.3, 0.0, 0.0])
        np.testing.assert_allclose(boid.velocity, [0.4, 0.0, 0.0])

    def test_velocity_clamped_before_integration(self, make_boid):
        boid = make_boid(velocity=(3.0, 4.0, 0.0))
        boid.move()
        np.testing.assert_allclose(boid.position, [0.36, 0.48, 0.0])

    def test_acceleration_clamped(self, make_boid):
        boid = make_boid(acceleration=(0.0, 0.0, 2.0))
        boid.move()
        np.testing.assert_allclose(boid.acceleration, [0.0, 0.0, 0.4])
        np.testing.assert_allclose(boid.velocity, [0.0, 0.0, 0.4])

    def test_speed_limit_holds_after_move(self, make_boid):
        """Velocity plus acceleration never leaves move() above max_speed."""
        boid = make_boid(velocity=(0.6, 0.0, 0.0), acceleration=(0.4, 0.0, 0.0))
        boid.move()
        assert np.linalg.norm(boid.velocity) == pytest.approx(0.6)
        assert np.linalg.norm(boid.acceleration) <= 0.4

    def test_pose_faces_away_from_acceleration(self, make_boid):
        """The pose looks at position - acceleration."""
        boid = make_boid(acceleration=(0.2, 0.0, 0.0))
        boid.move()
        np.testing.assert_allclose(boid.pose.forward, [-1.0, 0.0, 0.0], atol=1e-12)

    def test_pose_tracks_position(self, make_boid):
        boid = make_boid(velocity=(0.1, 0.2, 0.3))
        boid.move()
        np.testing.assert_array_equal(boid.pose.position, boid.position)


# =============================================================================
# CONSTRAIN
# =============================================================================

class TestConstrain:

    def test_wraps_past_positive_x(self, make_boid):
        boid = make_boid(position=(100.0, 0.0, 0.0))
        boid.constrain(80, 50)
        assert boid.position[0] == -80.0

    def test_wraps_past_negative_y(self, make_boid):
        boid = make_boid(position=(0.0, -50.5, 0.0))
        boid.constrain(80, 50)
        assert boid.position[1] == 50.0

    def test_depth_uses_instance_field(self, make_boid):
        boid = make_boid(position=(0.0, 0.0, 30.0), depth=20.0)
        boid.constrain(80, 50)
        assert boid.position[2] == -20.0

    def test_inside_untouched(self, make_boid):
        boid = make_boid(position=(80.0, -50.0, 49.9))
        boid.constrain(80, 50)
        np.testing.assert_array_equal(boid.position, [80.0, -50.0, 49.9])

    def test_defaults_to_instance_bounds(self, make_boid):
        boid = make_boid(position=(81.0, 0.0, 0.0))
        boid.constrain()
        assert boid.position[0] == -80.0


# =============================================================================
# UPDATE
# =============================================================================

class TestUpdate:

    def test_lone_boid_only_integrates_velocity(self, make_boid):
        boid = make_boid(position=(1.0, 2.0, 3.0), velocity=(0.1, -0.1, 0.05))
        neighbors = boid.update([boid])
        assert neighbors == []
        np.testing.assert_allclose(boid.position, [1.1, 1.9, 3.05])
        np.testing.assert_allclose(boid.velocity, [0.1, -0.1, 0.05])
        np.testing.assert_array_equal(boid.acceleration, np.zeros(3))

    def test_rule_weights(self, make_boid):
        """update() applies 0.2x, 4x and 3x of the base strength in order."""
        me = make_boid(velocity=(0.0, 0.1, 0.0))
        other = make_boid(position=(0.0, 3.0, 0.0), velocity=(0.0, 0.2, 0.0))

        expected = make_boid(velocity=(0.0, 0.1, 0.0))
        expected.separate([other], 0.2 * 0.01)
        expected.align([other], 4 * 0.01)
        expected.cohese([other], 3 * 0.01)
        expected.move()

        me.update([me, other], strength=0.01)
        np.testing.assert_allclose(me.acceleration, expected.acceleration)
        np.testing.assert_allclose(me.velocity, expected.velocity)

    def test_acceleration_carries_over_by_default(self, make_boid):
        boid = make_boid(acceleration=(0.1, 0.0, 0.0))
        boid.update([boid])
        np.testing.assert_allclose(boid.acceleration, [0.1, 0.0, 0.0])

    def test_reset_acceleration(self, make_boid):
        boid = make_boid(acceleration=(0.1, 0.0, 0.0), reset_acceleration=True)
        boid.update([boid])
        np.testing.assert_array_equal(boid.acceleration, np.zeros(3))
        np.testing.assert_array_equal(boid.velocity, np.zeros(3))
