"""Error types raised while resolving and invoking lifecycle hooks."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from specifications.types import LifecycleKind


class SpecificationError(Exception):
    """Base class for errors raised by the specifications package."""


class ResolutionError(SpecificationError, TypeError):
    """Raised when a specification class cannot be resolved (developer error)."""

    def __init__(self, target: Any, reason: str, level: type | None = None) -> None:
        self.target = target
        self.reason = reason
        self.level = level

        name = getattr(target, "__qualname__", repr(target))
        message = f"Cannot resolve lifecycle hooks for {name}: {reason}"
        if level is not None and level is not target:
            message += f" (declared on {level.__qualname__})"

        super().__init__(message)


class LifecycleFailures(ExceptionGroup):
    """Raised when more than one hook of a single lifecycle chain failed.

    Exceptions are ordered by the hooks' position in the chain.
    """

    def __new__(
        cls,
        message: str,
        exceptions: Sequence[Exception],
        kind: LifecycleKind | None = None,
    ) -> LifecycleFailures:
        group = super().__new__(cls, message, exceptions)
        group.kind = kind
        return group

    def __init__(
        self,
        message: str,
        exceptions: Sequence[Exception],
        kind: LifecycleKind | None = None,
    ) -> None:
        super().__init__(message, exceptions)

    def derive(self, excs: Sequence[Exception]) -> LifecycleFailures:
        return LifecycleFailures(self.message, excs, self.kind)


__all__ = ["LifecycleFailures", "ResolutionError", "SpecificationError"]
