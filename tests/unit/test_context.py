"""Tests for specifications.context module."""

import asyncio

import pytest

from specifications import LifecycleKind, Specification, because, current_lifecycle, establish
from specifications.context import LifecycleContext, lifecycle_context_scope


def test_no_context_outside_invocation():
    assert current_lifecycle() is None


def test_scope_sets_and_resets():
    ctx = LifecycleContext(unit=object(), kind=LifecycleKind.DESTROY, hook_name="x.destroy")

    with lifecycle_context_scope(ctx):
        assert current_lifecycle() is ctx

    assert current_lifecycle() is None


def test_sync_hooks_see_their_context(registry):
    seen = []

    class a_context(Specification):
        def establish(self):
            seen.append(current_lifecycle())

    class when_observed(a_context):
        def establish(self):
            seen.append(current_lifecycle())

    unit = when_observed()
    asyncio.run(establish(unit, registry=registry))

    assert [ctx.unit for ctx in seen] == [unit, unit]
    assert [ctx.kind for ctx in seen] == [LifecycleKind.ESTABLISH] * 2
    assert seen[0].hook_name.endswith("a_context.establish")
    assert seen[1].hook_name.endswith("when_observed.establish")
    assert current_lifecycle() is None


def test_async_hooks_keep_context_across_awaits(registry):
    seen = []

    class a_context(Specification):
        async def because(self):
            await asyncio.sleep(0.01)
            seen.append(current_lifecycle().hook_name)

    class when_observed(a_context):
        async def because(self):
            await asyncio.sleep(0)
            seen.append(current_lifecycle().hook_name)

    asyncio.run(because(when_observed(), registry=registry))

    assert [name.rsplit(".", 2)[-2] for name in seen] == ["when_observed", "a_context"]


def test_context_is_immutable():
    ctx = LifecycleContext(unit=None, kind=LifecycleKind.BECAUSE, hook_name="h")

    with pytest.raises(AttributeError):
        ctx.kind = LifecycleKind.DESTROY
