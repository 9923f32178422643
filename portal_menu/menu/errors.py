from __future__ import annotations

from typing import Sequence


class ConfigurationError(ValueError):
    """Raised when a menu cannot be composed from the given inputs."""

    def __init__(self, message: str, *, unresolved: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.unresolved = list(unresolved)


class DuplicateRouteNameWarning(UserWarning):
    """A route name appeared more than once; the first occurrence was kept."""
