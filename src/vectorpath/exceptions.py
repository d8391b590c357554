"""Exception hierarchy for Vectorpath."""


class VectorPathError(Exception):
    """Base exception for all Vectorpath errors."""

    pass


class PathError(VectorPathError):
    """Errors related to path construction or path invariants."""

    pass


class EmptyPathError(PathError, IndexError):
    """Operation needs at least one command but the path is empty."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation} on an empty path")


class PathInvariantError(PathError):
    """Internal consistency of a path was violated."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class CommandError(PathError, ValueError):
    """A command was built with the wrong points for its kind."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"Invalid {kind} command: {reason}")


class FontError(VectorPathError):
    """Errors related to reading font outlines."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(FontError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")
