"""Exceptions raised by the shortest-path and Steiner tree code."""

from typing import Iterable, List


class SteinerError(Exception):
    """Base exception for steiner_approx."""
    pass


class InvalidArgumentError(SteinerError, ValueError):
    """Bad caller input (empty targets, unknown vertices, bad edges)."""
    pass


class GraphFormatError(SteinerError, ValueError):
    """Malformed graph document."""
    pass


class ConfigurationError(SteinerError, ValueError):
    """Configuration-related errors."""
    pass


class PathReconstructionError(SteinerError, RuntimeError):
    """Next-hop matrix or graph is inconsistent with a computed path.

    Not recoverable by the caller.
    """
    pass


class TargetUnreachableError(SteinerError):
    """Some targets cannot be connected to the partial tree."""

    def __init__(self, targets: Iterable[int], connected: Iterable[int]):
        self.targets: List[int] = sorted(targets)
        self.connected: List[int] = sorted(connected)
        super().__init__(
            f"Targets {self.targets} are unreachable from vertices {self.connected}"
        )
