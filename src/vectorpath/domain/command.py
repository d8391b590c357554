"""Drawing commands that make up a path.

A command is one drawing instruction with the points it needs:
- MOVE and LINE carry an on-curve point
- QUADRATIC carries one control point and an on-curve point
- CUBIC carries two control points and an on-curve point
- CLOSE carries nothing; it implicitly ends at the path's first point
"""

from dataclasses import dataclass
from enum import Enum, auto

from vectorpath.domain.vector import PointLike, Vector2
from vectorpath.exceptions import CommandError


class CommandKind(Enum):
    """Kind of a drawing command."""

    MOVE = auto()
    LINE = auto()
    QUADRATIC = auto()
    CUBIC = auto()
    CLOSE = auto()

    @property
    def arity(self) -> int:
        """Number of points a command of this kind carries."""
        return _ARITY[self]


_ARITY = {
    CommandKind.MOVE: 1,
    CommandKind.LINE: 1,
    CommandKind.QUADRATIC: 2,
    CommandKind.CUBIC: 3,
    CommandKind.CLOSE: 0,
}


@dataclass(frozen=True, slots=True)
class Command:
    """A single drawing command.

    Immutable value type; equality compares the kind and every point.
    Use the class constructors (move, line, quadratic, cubic, close)
    rather than passing fields by hand.

    Attributes:
        kind: Command kind
        point: On-curve end point (None for CLOSE)
        control1: First control point (QUADRATIC and CUBIC only)
        control2: Second control point (CUBIC only)
    """

    kind: CommandKind
    point: Vector2 | None = None
    control1: Vector2 | None = None
    control2: Vector2 | None = None

    def __post_init__(self) -> None:
        needs_point = self.kind is not CommandKind.CLOSE
        needs_control1 = self.kind in (CommandKind.QUADRATIC, CommandKind.CUBIC)
        needs_control2 = self.kind is CommandKind.CUBIC

        for name, needed in (
            ("point", needs_point),
            ("control1", needs_control1),
            ("control2", needs_control2),
        ):
            value = getattr(self, name)
            if needed and value is None:
                raise CommandError(self.kind.name, f"missing {name}")
            if not needed and value is not None:
                raise CommandError(self.kind.name, f"unexpected {name}")
            if value is not None and not isinstance(value, Vector2):
                object.__setattr__(self, name, Vector2.coerce(value))

    @classmethod
    def move(cls, point: PointLike) -> "Command":
        return cls(CommandKind.MOVE, point=Vector2.coerce(point))

    @classmethod
    def line(cls, point: PointLike) -> "Command":
        return cls(CommandKind.LINE, point=Vector2.coerce(point))

    @classmethod
    def quadratic(cls, control: PointLike, point: PointLike) -> "Command":
        return cls(
            CommandKind.QUADRATIC,
            point=Vector2.coerce(point),
            control1=Vector2.coerce(control),
        )

    @classmethod
    def cubic(
        cls, control1: PointLike, control2: PointLike, point: PointLike
    ) -> "Command":
        return cls(
            CommandKind.CUBIC,
            point=Vector2.coerce(point),
            control1=Vector2.coerce(control1),
            control2=Vector2.coerce(control2),
        )

    @classmethod
    def close(cls) -> "Command":
        return cls(CommandKind.CLOSE)

    @classmethod
    def from_points(cls, kind: CommandKind, points: list[Vector2]) -> "Command":
        """Build a command of kind from its points in role order.

        Role order is control1, control2, point; only the roles the kind
        carries are present.

        Args:
            kind: Command kind
            points: Exactly kind.arity points

        Returns:
            Command instance

        Raises:
            CommandError: If the number of points does not match the kind
        """
        if len(points) != kind.arity:
            raise CommandError(
                kind.name, f"expected {kind.arity} points, got {len(points)}"
            )
        if kind is CommandKind.CUBIC:
            return cls.cubic(points[0], points[1], points[2])
        if kind is CommandKind.QUADRATIC:
            return cls.quadratic(points[0], points[1])
        if kind is CommandKind.CLOSE:
            return cls.close()
        return cls(kind, point=points[0])

    @property
    def control(self) -> Vector2 | None:
        """Control point of a quadratic command (alias of control1)."""
        return self.control1

    @property
    def arity(self) -> int:
        return self.kind.arity

    def points(self) -> list[Vector2]:
        """Return the command's points in role order (control1, control2, point)."""
        if self.kind is CommandKind.CUBIC:
            return [self.control1, self.control2, self.point]  # type: ignore[list-item]
        if self.kind is CommandKind.QUADRATIC:
            return [self.control1, self.point]  # type: ignore[list-item]
        if self.kind is CommandKind.CLOSE:
            return []
        return [self.point]  # type: ignore[list-item]
