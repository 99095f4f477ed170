from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator

from specifications.types import LifecycleKind


LIFECYCLE_CONTEXT: ContextVar[LifecycleContext | None] = ContextVar(
    "lifecycle_context", default=None
)


@dataclass(frozen=True, slots=True)
class LifecycleContext:
    """Context for the lifecycle hook currently being invoked.

    Attributes
    ----------
    unit
        Specification instance the hook runs against.
    kind
        Lifecycle phase being driven.
    hook_name
        Qualified name of the hook, e.g. ``a_connected_client.establish``.
    """

    unit: Any
    kind: LifecycleKind
    hook_name: str


def current_lifecycle() -> LifecycleContext | None:
    return LIFECYCLE_CONTEXT.get()


@contextmanager
def lifecycle_context_scope(ctx: LifecycleContext) -> Iterator[None]:
    token = LIFECYCLE_CONTEXT.set(ctx)
    try:
        yield
    finally:
        LIFECYCLE_CONTEXT.reset(token)


__all__ = [
    "LIFECYCLE_CONTEXT",
    "LifecycleContext",
    "current_lifecycle",
    "lifecycle_context_scope",
]
