"""Unit tests for path winding direction.

Tests cover:
- Clockwise and counter-clockwise classification (y-down)
- UNDEFINED for fewer than 3 commands
- Zero area resolving to CLOCKWISE
- Control points being ignored
- Interior MOVE detection
- Cache invalidation on mutation
"""

import pytest

from vectorpath.domain import Command, Direction, Path, Path2i
from vectorpath.exceptions import PathInvariantError


def _triangle_cw() -> Path:
    return Path(
        [
            Command.move((0, 0)),
            Command.line((10, 0)),
            Command.line((10, 10)),
            Command.close(),
        ]
    )


def _triangle_ccw() -> Path:
    return Path(
        [
            Command.move((0, 0)),
            Command.line((0, 10)),
            Command.line((10, 10)),
            Command.close(),
        ]
    )


class TestClassification:
    """Tests for direction classification."""

    def test_clockwise(self):
        """Right turns in y-down coordinates are clockwise."""
        assert _triangle_cw().direction() is Direction.CLOCKWISE

    def test_counter_clockwise(self):
        """Left turns in y-down coordinates are counter-clockwise."""
        assert _triangle_ccw().direction() is Direction.COUNTER_CLOCKWISE

    def test_open_path(self):
        """An open path is classified without the closing edge."""
        path = Path([Command.move((0, 0)), Command.line((0, 10)), Command.line((10, 10))])
        assert path.direction() is Direction.COUNTER_CLOCKWISE

    @pytest.mark.parametrize("count", [0, 1, 2])
    def test_undefined_for_short_paths(self, count):
        """Fewer than 3 commands give UNDEFINED."""
        commands = [Command.move((0, 0)), Command.line((10, 0))][:count]
        assert Path(commands).direction() is Direction.UNDEFINED

    def test_zero_area_is_clockwise(self):
        """Exactly zero signed area resolves to CLOCKWISE, not UNDEFINED."""
        path = Path([Command.move((0, 0)), Command.line((5, 5)), Command.line((10, 10))])
        assert path.direction() is Direction.CLOCKWISE

    def test_control_points_ignored(self):
        """Only on-curve points take part in the sum."""
        straight = _triangle_ccw()
        curved = Path(
            [
                Command.move((0, 0)),
                Command.cubic((100, -100), (100, 100), (0, 10)),
                Command.quadratic((-50, 50), (10, 10)),
                Command.close(),
            ]
        )
        assert curved.direction() is straight.direction()

    def test_close_uses_first_point(self):
        """The closing edge runs from the previous point back to the start."""
        path = Path(
            [
                Command.move((10, 0)),
                Command.line((20, 0)),
                Command.line((20, 10)),
                Command.close(),
            ]
        )
        # cross(10,0 -> 20,0) = 0, cross(20,0 -> 20,10) = 200,
        # cross(20,10 -> 10,0) = -100: total 100
        assert path.direction() is Direction.CLOCKWISE

    def test_integer_path(self):
        """Integer paths sum in integers."""
        path = Path2i(_triangle_ccw().commands)
        assert path.direction() is Direction.COUNTER_CLOCKWISE

    def test_interior_move_is_invariant_violation(self):
        """A MOVE after the first command is a programming error."""
        path = Path(
            [
                Command.move((0, 0)),
                Command.line((10, 0)),
                Command.move((10, 10)),
            ]
        )
        with pytest.raises(PathInvariantError, match="MOVE"):
            path.direction()

    def test_segment_after_close(self):
        """A CLOSE in the middle continues from the start point."""
        path = Path(
            [
                Command.move((0, 0)),
                Command.line((10, 0)),
                Command.line((10, 10)),
                Command.close(),
                Command.line((0, 10)),
            ]
        )
        # CLOSE ends at (0, 0), so the last edge contributes cross((0,0), (0,10)) = 0.
        assert path.direction() is Direction.CLOCKWISE


class TestReversal:
    """Reversal flips a defined direction."""

    @pytest.mark.parametrize("factory", [_triangle_cw, _triangle_ccw])
    def test_reversed_direction_is_opposite(self, factory):
        """p.reversed().direction() is the opposite of p.direction()."""
        path = factory()
        assert path.reversed().direction() is path.direction().opposite()

    def test_opposite_of_undefined(self):
        """UNDEFINED has no opposite."""
        assert Direction.UNDEFINED.opposite() is Direction.UNDEFINED


class TestCache:
    """Tests for the generation-checked direction cache."""

    def test_cache_invalidated_by_builder(self):
        """A builder call after direction() is reflected in the next query."""
        path = Path()
        path.move_to((0, 0))
        path.line_to((10, 0))
        assert path.direction() is Direction.UNDEFINED
        path.line_to((10, 10))
        assert path.direction() is Direction.CLOCKWISE

    def test_cache_invalidated_by_reverse(self):
        """reverse() after direction() flips the next answer."""
        path = _triangle_cw()
        assert path.direction() is Direction.CLOCKWISE
        path.reverse()
        assert path.direction() is Direction.COUNTER_CLOCKWISE

    def test_cache_invalidated_by_set_and_reset(self):
        """set() and reset() invalidate the cached direction."""
        path = _triangle_cw()
        assert path.direction() is Direction.CLOCKWISE
        path.set(_triangle_ccw().commands)
        assert path.direction() is Direction.COUNTER_CLOCKWISE
        path.reset()
        assert path.direction() is Direction.UNDEFINED

    def test_cache_invalidated_by_item_assignment(self):
        """Replacing a command invalidates the cached direction."""
        path = _triangle_cw()
        assert path.direction() is Direction.CLOCKWISE
        path[1] = Command.line((0, 10))
        path[2] = Command.line((10, 10))
        assert path.direction() is Direction.COUNTER_CLOCKWISE

    def test_repeated_query_stable(self):
        """Querying twice without mutation gives the same answer."""
        path = _triangle_ccw()
        assert path.direction() is path.direction()
