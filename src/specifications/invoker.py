"""Invocation of lifecycle chains against a specification unit.

Every hook of a chain is started in order, root-most context first, before
any of them is awaited. Async hooks therefore begin in chain order and may
overlap. The returned coroutine completes once all of them have finished.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any

from specifications.context import LifecycleContext, lifecycle_context_scope
from specifications.errors import LifecycleFailures
from specifications.registry import LifecycleRegistry, get_registry
from specifications.types import LifecycleKind


logger = logging.getLogger(__name__)


async def _await(awaitable: Any) -> Any:
    return await awaitable


def _start(result: Any) -> asyncio.Future[Any]:
    """Schedule an awaitable hook result without suspending the caller."""
    if asyncio.isfuture(result):
        return result
    if not asyncio.iscoroutine(result):
        result = _await(result)
    # Runs the body up to its first await right now, in chain order.
    return asyncio.Task(result, loop=asyncio.get_running_loop(), eager_start=True)


def _raise_failures(
    kind: LifecycleKind,
    failures: list[tuple[int, BaseException]],
    failure_mode: str,
) -> None:
    errors = [exc for _, exc in sorted(failures, key=lambda item: item[0])]

    # Cancellation and interpreter exits are not hook failures.
    for exc in errors:
        if not isinstance(exc, Exception):
            raise exc

    if len(errors) == 1:
        raise errors[0]

    if failure_mode == "first":
        first, *rest = errors
        for other in rest:
            first.add_note(f"Another {kind.value} hook also failed: {other!r}")
        raise first

    raise LifecycleFailures(f"{len(errors)} {kind.value} hooks failed", errors, kind)


async def invoke(
    kind: LifecycleKind,
    unit: Any,
    *,
    registry: LifecycleRegistry | None = None,
) -> None:
    """Invoke the ``kind`` chain of ``unit`` and wait for all of it.

    Args:
        kind: Lifecycle phase to drive.
        unit: Specification instance.
        registry: Registry to resolve chains from. Defaults to the global one.

    Raises:
        ResolutionError: If the unit's class cannot be resolved.
        LifecycleFailures: If several hooks failed in ``"aggregate"`` mode.
        Exception: The hook's own error when a single hook failed, or the
            first one in ``"first"`` mode.
    """
    if registry is None:
        registry = get_registry()
    chain = registry.get_chains(type(unit))[kind]
    if not chain:
        return

    logger.debug("Invoking %d %s hook(s) on %s", len(chain), kind.value, type(unit).__qualname__)

    pending: list[tuple[int, asyncio.Future[Any]]] = []
    failures: list[tuple[int, BaseException]] = []

    for position, hook in enumerate(chain):
        ctx = LifecycleContext(unit=unit, kind=kind, hook_name=hook.__qualname__)
        with lifecycle_context_scope(ctx):
            try:
                result = hook(unit)
                if inspect.isawaitable(result):
                    pending.append((position, _start(result)))
            except BaseException as exc:
                # Hooks after a synchronous failure are not started; the
                # started ones are still joined before it is re-raised.
                failures.append((position, exc))
                break

    if pending:
        outcomes = await asyncio.gather(*(future for _, future in pending), return_exceptions=True)
        for (position, _), outcome in zip(pending, outcomes):
            if isinstance(outcome, BaseException):
                failures.append((position, outcome))

    if failures:
        _raise_failures(kind, failures, registry.config.failure_mode)


async def establish(unit: Any, *, registry: LifecycleRegistry | None = None) -> None:
    """Run every ``establish`` hook of ``unit``, root-most context first."""
    await invoke(LifecycleKind.ESTABLISH, unit, registry=registry)


async def because(unit: Any, *, registry: LifecycleRegistry | None = None) -> None:
    """Run every ``because`` hook of ``unit``, root-most context first."""
    await invoke(LifecycleKind.BECAUSE, unit, registry=registry)


async def destroy(unit: Any, *, registry: LifecycleRegistry | None = None) -> None:
    """Run every ``destroy`` hook of ``unit``, root-most context first."""
    await invoke(LifecycleKind.DESTROY, unit, registry=registry)


__all__ = ["because", "destroy", "establish", "invoke"]
