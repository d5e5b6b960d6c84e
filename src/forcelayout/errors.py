"""Exception classes for forcelayout.

Load-time problems are fatal and reported through the LoadError family.
Numeric degeneracies during simulation (coincident nodes, zero-length
links) are never raised; the engine resolves them to zero force.
"""

from __future__ import annotations


class ForceLayoutError(Exception):
    """Base exception for forcelayout errors."""

    pass


class ConfigError(ForceLayoutError, ValueError):
    """Raised when a configuration value is out of range."""

    def __init__(self, field: str, value: object, expected: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending config field
            value: Invalid value
            expected: Description of what was expected
        """
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid config '{field}': expected {expected}, got {value!r}")


class LoadError(ForceLayoutError):
    """Base class for errors raised while building a graph from input."""

    def __init__(self, reason: str, line: int | None = None) -> None:
        """Initialize load error.

        Args:
            reason: Reason for failure
            line: 1-based input line where the problem was found, if known
        """
        self.reason = reason
        self.line = line
        where = f" (line {line})" if line is not None else ""
        super().__init__(f"Failed to load graph{where}: {reason}")


class MalformedInputError(LoadError):
    """Raised when a count, coordinate or index token is missing or not numeric."""

    pass


class InvalidReferenceError(LoadError):
    """Raised when a link refers to a node that does not exist."""

    def __init__(self, index: object, node_count: int, line: int | None = None) -> None:
        """Initialize invalid reference error.

        Args:
            index: Offending node reference (1-based index from input)
            node_count: Number of nodes available
            line: 1-based input line, if known
        """
        self.index = index
        self.node_count = node_count
        super().__init__(
            f"link references node {index!r}, valid range is [1, {node_count}]",
            line=line,
        )


class SelfLoopError(MalformedInputError):
    """Raised when a link connects a node to itself."""

    pass


class GraphDestroyedError(ForceLayoutError):
    """Raised when a graph is used after it has been torn down."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation}: graph has been destroyed")
