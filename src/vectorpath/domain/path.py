"""Path: an ordered sequence of drawing commands.

The command order is the traversal order and is the geometry itself.
Besides the builder operations a path answers three derived queries:
- bounds(): axis-aligned rectangle around on-curve and control points
- direction(): winding direction from the signed area of on-curve points
- reverse()/reversed(): same shape traced in the opposite direction

A path holds a single subpath: move_to() discards everything before it.
"""

import math
from collections.abc import Iterable, Iterator
from enum import Enum, auto
from itertools import islice, pairwise

from vectorpath.domain.command import Command, CommandKind
from vectorpath.domain.vector import PointLike, Rect, Vector2
from vectorpath.exceptions import EmptyPathError, PathInvariantError


class Direction(Enum):
    """Winding direction of a path.

    Classified in a y-down coordinate system, so a path that turns right
    on screen is CLOCKWISE. In y-up systems such as font units the visual
    sense is flipped.
    """

    UNDEFINED = auto()
    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()

    def opposite(self) -> "Direction":
        """Return the direction of the reversed path (UNDEFINED stays UNDEFINED)."""
        if self is Direction.CLOCKWISE:
            return Direction.COUNTER_CLOCKWISE
        if self is Direction.COUNTER_CLOCKWISE:
            return Direction.CLOCKWISE
        return self


# Point roles folded into bounds() per command kind.
_BOUNDS_ROLES: dict[CommandKind, tuple[str, ...]] = {
    CommandKind.CUBIC: ("control2", "control1", "point"),
    CommandKind.QUADRATIC: ("control1", "point"),
    CommandKind.MOVE: ("point",),
    CommandKind.LINE: ("point",),
    CommandKind.CLOSE: (),
}

_SEGMENT_KINDS = (CommandKind.LINE, CommandKind.QUADRATIC, CommandKind.CUBIC)

_MISSING = object()


class Path:
    """A 2D vector path.

    The path exclusively owns its command list. Commands are exposed as a
    read-only tuple; every mutation goes through the builder operations,
    set(), reset(), item assignment or reverse(), each of which bumps an
    internal generation counter used to invalidate the cached direction.

    Attributes:
        scalar: Numeric type of the coordinates; scalar() is its zero.
            The builders convert every coordinate with scalar(). Commands
            given to the constructor, set() or item assignment are stored
            as they are.
    """

    default_scalar: type = float

    def __init__(
        self,
        commands: Iterable[Command] | None = None,
        *,
        scalar: type | None = None,
    ) -> None:
        """Initialize the path.

        Args:
            commands: Initial commands, stored as given (no normalization)
            scalar: Coordinate type (defaults to the class default_scalar)
        """
        self.scalar = scalar if scalar is not None else self.default_scalar
        self._commands: list[Command] = list(commands) if commands is not None else []
        self._generation = 0
        self._direction_cache: tuple[int, Direction] | None = None

    # Mutators

    def _touch(self) -> None:
        self._generation += 1

    def set(self, commands: Iterable[Command]) -> None:
        """Replace all commands."""
        self._commands = list(commands)
        self._touch()

    def reset(self) -> None:
        """Remove all commands."""
        self._commands.clear()
        self._touch()

    def __setitem__(self, index: int, command: Command) -> None:
        self._commands[index] = command
        self._touch()

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._commands == other._commands

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._commands!r})"

    # Attributes

    @property
    def commands(self) -> tuple[Command, ...]:
        return tuple(self._commands)

    @property
    def generation(self) -> int:
        """Counter bumped on every mutation."""
        return self._generation

    def is_empty(self) -> bool:
        return not self._commands

    def size(self) -> int:
        return len(self._commands)

    def is_closed(self) -> bool:
        """Check if the last command is CLOSE."""
        return bool(self._commands) and self._commands[-1].kind is CommandKind.CLOSE

    def bounds(self) -> Rect:
        """Calculate the axis-aligned bounds of the path.

        Covers every on-curve point and every control point. This is the
        hull of the control polygon, not the tight bounds of the curves.
        An empty path yields a zero-sized rectangle at the origin.

        Returns:
            Rect from the minimum corner to the maximum corner
        """
        min_x = min_y = math.inf
        max_x = max_y = -math.inf

        for command in self._commands:
            for role in _BOUNDS_ROLES[command.kind]:
                point = getattr(command, role)
                if point.x < min_x:
                    min_x = point.x
                if point.y < min_y:
                    min_y = point.y
                if point.x > max_x:
                    max_x = point.x
                if point.y > max_y:
                    max_y = point.y

        zero = self.scalar()
        if min_x == math.inf:
            min_x = zero
        if min_y == math.inf:
            min_y = zero
        if max_x == -math.inf:
            max_x = zero
        if max_y == -math.inf:
            max_y = zero
        return Rect(Vector2(min_x, min_y), Vector2(max_x, max_y))

    # Adding commands

    def close(self) -> None:
        """Close the path unless the last command already is CLOSE.

        Raises:
            EmptyPathError: If the path has no commands
        """
        if not self._commands:
            raise EmptyPathError("close")
        if self._commands[-1].kind is not CommandKind.CLOSE:
            self._commands.append(Command.close())
            self._touch()

    def move_to(self, point: PointLike) -> None:
        """Discard all commands and start a new path at point."""
        self._commands = [Command.move(self._convert(point))]
        self._touch()

    def line_to(self, point: PointLike) -> None:
        """Append a line to point; an empty path starts at point instead."""
        if not self._commands:
            self.move_to(point)
            return
        self._append(Command.line(self._convert(point)))

    def quadratic_to(self, control: PointLike, point: PointLike) -> None:
        """Append a quadratic curve; an empty path starts at point instead."""
        if not self._commands:
            self.move_to(point)
            return
        self._append(Command.quadratic(self._convert(control), self._convert(point)))

    def cubic_to(
        self, control1: PointLike, control2: PointLike, point: PointLike
    ) -> None:
        """Append a cubic curve; an empty path starts at point instead."""
        if not self._commands:
            self.move_to(point)
            return
        self._append(
            Command.cubic(
                self._convert(control1), self._convert(control2), self._convert(point)
            )
        )

    def _convert(self, point: PointLike) -> Vector2:
        vector = Vector2.coerce(point)
        return Vector2(self.scalar(vector.x), self.scalar(vector.y))

    def _append(self, command: Command) -> None:
        self._commands.append(command)
        self._touch()
        # Reaching the start point closes the path.
        if command.point == self._commands[0].point:
            self.close()

    # Direction

    def direction(self) -> Direction:
        """Classify the winding direction of the path.

        Uses the shoelace sum over on-curve points only; control points do
        not participate. A zero sum resolves to CLOCKWISE.

        Returns:
            UNDEFINED for fewer than 3 commands, otherwise the winding

        Raises:
            PathInvariantError: If a MOVE command appears after the first
        """
        cached = self._direction_cache
        if cached is not None and cached[0] == self._generation:
            return cached[1]

        result = self._compute_direction()
        self._direction_cache = (self._generation, result)
        return result

    def _compute_direction(self) -> Direction:
        if len(self._commands) < 3:
            return Direction.UNDEFINED

        start = self._commands[0].point
        if start is None:
            raise PathInvariantError("Path must begin with an on-curve command")

        total = self.scalar()
        for index, (prev, curr) in enumerate(pairwise(self._commands), start=1):
            prev_point = start if prev.kind is CommandKind.CLOSE else prev.point
            if curr.kind in _SEGMENT_KINDS:
                total += prev_point.cross(curr.point)
            elif curr.kind is CommandKind.CLOSE:
                total += prev_point.cross(start)
            else:
                raise PathInvariantError(
                    f"Unexpected {curr.kind.name} command at index {index}"
                )

        return Direction.COUNTER_CLOCKWISE if total < 0 else Direction.CLOCKWISE

    def reverse(self) -> "Path":
        """Reverse the traversal order in place, keeping the shape.

        The first command stays a MOVE and a trailing CLOSE stays last.
        Points are collected in role order, reversed, and handed back to
        the reordered command kinds, so a cubic P0 (C1, C2) P3 becomes
        P3 (C2, C1) P0.

        Returns:
            This path, for chaining

        Raises:
            PathInvariantError: If points and commands do not match up
        """
        if not self._commands:
            return self

        points = [point for command in self._commands for point in command.points()]
        kinds = [command.kind for command in self._commands]

        end = len(kinds) - 1 if kinds[-1] is CommandKind.CLOSE else len(kinds)
        if end > 1:
            kinds[1:end] = kinds[end - 1:0:-1]
        points.reverse()

        remaining = iter(points)
        rebuilt = []
        for kind in kinds:
            taken = list(islice(remaining, kind.arity))
            if len(taken) != kind.arity:
                raise PathInvariantError(
                    f"Ran out of points while reversing {kind.name} command"
                )
            rebuilt.append(Command.from_points(kind, taken))
        if next(remaining, _MISSING) is not _MISSING:
            raise PathInvariantError("Points left over after reversing path")

        self._commands = rebuilt
        self._touch()
        return self

    def reversed(self) -> "Path":
        """Return a reversed copy, leaving this path unchanged."""
        return self.copy().reverse()

    def copy(self) -> "Path":
        """Return an independent copy of the path."""
        return type(self)(self._commands, scalar=self.scalar)

    __copy__ = copy

    # Element access

    def __getitem__(self, index: int) -> Command:
        return self._commands[index]

    @property
    def first(self) -> Command:
        if not self._commands:
            raise EmptyPathError("access first command")
        return self._commands[0]

    @property
    def last(self) -> Command:
        if not self._commands:
            raise EmptyPathError("access last command")
        return self._commands[-1]

    # Iteration

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __reversed__(self) -> Iterator[Command]:
        return reversed(self._commands)

    def __len__(self) -> int:
        return len(self._commands)


class Path2i(Path):
    """Path with integer coordinates."""

    default_scalar = int


class Path2f(Path):
    """Path with floating point coordinates.

    Python has a single float type, so this matches Path2d.
    """

    default_scalar = float


class Path2d(Path):
    """Path with double precision coordinates."""

    default_scalar = float
