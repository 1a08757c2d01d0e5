"""Unit tests for the coordinate module."""

import pytest

from pathfinder.coordinate import (
    Coordinate,
    difference,
    generate_around,
    generate_within_radius,
)


class TestCoordinate:
    """Tests for the Coordinate value type."""

    def test_equality_is_component_wise(self):
        """Coordinates with equal x and y are equal."""
        assert Coordinate(1, 2) == Coordinate(1, 2)
        assert Coordinate(1, 2) != Coordinate(2, 1)

    def test_ordering_uses_sum(self):
        """Ordering compares x + y."""
        assert Coordinate(0, 5) > Coordinate(2, 2)
        assert Coordinate(-1, 1) < Coordinate(1, 0)
        assert Coordinate(3, 0) <= Coordinate(0, 3)
        assert Coordinate(3, 0) >= Coordinate(0, 3)

    def test_hashable(self):
        """Coordinates can be used in sets."""
        assert len({Coordinate(1, 1), Coordinate(1, 1), Coordinate(0, 1)}) == 2

    def test_immutable(self):
        """Coordinates cannot be modified."""
        c = Coordinate(1, 1)
        with pytest.raises(AttributeError):
            c.x = 5

    def test_out_of_int16_range(self):
        """Values outside int16 are rejected."""
        with pytest.raises(ValueError):
            Coordinate(40000, 0)
        with pytest.raises(ValueError):
            Coordinate(0, -40000)

    def test_add(self):
        """Adding coordinates adds components."""
        assert Coordinate(1, 2) + Coordinate(3, -4) == Coordinate(4, -2)

    def test_random_in_range(self, rng):
        """Random coordinates stay inside int16."""
        for _ in range(50):
            c = Coordinate.random(rng)
            assert -32768 <= c.x <= 32767
            assert -32768 <= c.y <= 32767


class TestDifference:
    """Tests for difference()."""

    def test_absolute_difference(self):
        """Difference is absolute on both axes."""
        assert difference(Coordinate(0, 0), Coordinate(3, -4)) == (3, 4)
        assert difference(Coordinate(3, -4), Coordinate(0, 0)) == (3, 4)

    def test_method_matches_function(self):
        """Coordinate.diff delegates to difference."""
        a, b = Coordinate(10, 2), Coordinate(-5, 7)
        assert a.diff(b) == difference(a, b) == (15, 5)


class TestGenerateWithinRadius:
    """Tests for generate_within_radius()."""

    def test_both_radius_draws_in_bounds(self, recording_rng):
        """The primary and secondary distances always fall in [min, max)."""
        center = Coordinate(0, 0)
        for _ in range(200):
            recording_rng.calls.clear()
            generate_within_radius(center, 5, 20, recording_rng)
            (r_start, r_stop, r), (a_start, a_stop, angle), (r2_start, r2_stop, r2) = (
                recording_rng.calls
            )
            assert (r_start, r_stop) == (5, 20)
            assert (r2_start, r2_stop) == (5, 20)
            assert 5 <= r < 20
            assert 5 <= r2 < 20
            assert (a_start, a_stop) == (0, 360)
            assert 0 <= angle < 360

    def test_point_within_bounds(self, rng):
        """Generated points stay within the combined reach of both draws."""
        center = Coordinate(100, 100)
        for _ in range(200):
            c = generate_within_radius(center, 0, 10, rng)
            assert abs(c.x - center.x) < 10
            assert center.y - 20 < c.y < center.y + 10

    def test_exact_placement(self, scripted_rng):
        """Distance and angle place x; the second draw lowers y."""
        c = generate_within_radius(Coordinate(5, 5), 0, 20, scripted_rng([10, 0, 3]))
        assert c == Coordinate(15, 2)

        c = generate_within_radius(Coordinate(5, 5), 0, 20, scripted_rng([10, 90, 3]))
        assert c == Coordinate(5, 12)

    def test_vertical_bias(self, rng):
        """With a fixed distance, y never ends up below the center."""
        center = Coordinate(0, 0)
        for _ in range(200):
            c = generate_within_radius(center, 10, 11, rng)
            assert c.y <= center.y
            assert -10 <= c.x <= 10

    def test_saturates_to_int16(self, scripted_rng):
        """Points past the int16 range are clamped."""
        c = generate_within_radius(
            Coordinate(32760, 0), 0, 20, scripted_rng([10, 0, 0])
        )
        assert c.x == 32767

    def test_empty_range_raises(self):
        """A range with min >= max cannot be sampled."""
        with pytest.raises(ValueError):
            generate_within_radius(Coordinate(0, 0), 5, 5)


class TestGenerateAround:
    """Tests for generate_around()."""

    def test_draws_from_zero_to_radius(self, recording_rng):
        """Both distance draws cover [0, radius)."""
        generate_around(Coordinate(0, 0), 8, recording_rng)
        assert recording_rng.calls[0][:2] == (0, 8)
        assert recording_rng.calls[2][:2] == (0, 8)

    def test_matches_full_form(self, scripted_rng):
        """It is generate_within_radius with a zero minimum."""
        center = Coordinate(5, 5)
        assert generate_around(center, 20, scripted_rng([10, 0, 3])) == (
            generate_within_radius(center, 0, 20, scripted_rng([10, 0, 3]))
        )
