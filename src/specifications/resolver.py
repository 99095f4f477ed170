"""Method chain resolution over a specification's class hierarchy."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from specifications.errors import ResolutionError
from specifications.specification import Specification
from specifications.types import LifecycleKind


Hook = Callable[[Any], Any]


def ancestor_chain(concrete_type: Any) -> list[type]:
    """Return the levels between ``Specification`` and ``concrete_type``.

    Levels are ordered root-most first: the class's MRO without
    ``Specification`` and ``object``, reversed. With several bases the
    rightmost one comes first. ``Specification`` itself has no levels.

    Raises:
        ResolutionError: If ``concrete_type`` is not a Specification subclass.
    """
    if not isinstance(concrete_type, type):
        raise ResolutionError(concrete_type, "not a class")
    if not issubclass(concrete_type, Specification):
        raise ResolutionError(concrete_type, "not a subclass of Specification")

    levels = [level for level in concrete_type.__mro__ if level not in (Specification, object)]
    levels.reverse()
    return levels


def _declared_hook(level: type, name: str, target: type) -> Hook | None:
    try:
        attr = vars(level).get(name)
    except TypeError as exc:
        raise ResolutionError(target, f"cannot inspect namespace: {exc}", level) from exc

    if attr is None:
        return None
    # Not instance members.
    if isinstance(attr, (staticmethod, classmethod)):
        return None
    if not inspect.isfunction(attr):
        raise ResolutionError(
            target, f"{name!r} must be a method, got {type(attr).__name__}", level
        )

    try:
        signature = inspect.signature(attr)
    except (TypeError, ValueError) as exc:
        raise ResolutionError(target, f"cannot read signature of {name!r}: {exc}", level) from exc

    required = [
        param
        for param in list(signature.parameters.values())[1:]
        if param.default is inspect.Parameter.empty
        and param.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    ]
    if not signature.parameters or required:
        raise ResolutionError(target, f"{name!r} must take no arguments besides self", level)
    return attr


def resolve_chain(
    concrete_type: type,
    kind: LifecycleKind,
    *,
    allow_private: bool = True,
) -> tuple[Hook, ...]:
    """Collect the ``kind`` hooks declared on each level, root-most first.

    Only a level's own declaration counts, so an override never yields the
    inherited hook twice. Both ``establish`` and ``_establish`` are accepted
    when ``allow_private`` is set, but a level may declare only one of them.

    Raises:
        ResolutionError: If the class or one of its hooks is malformed.
    """
    hooks: list[Hook] = []
    for level in ancestor_chain(concrete_type):
        hook = _declared_hook(level, kind.value, concrete_type)
        if allow_private:
            private = _declared_hook(level, kind.private_name, concrete_type)
            if hook is not None and private is not None:
                raise ResolutionError(
                    concrete_type,
                    f"both {kind.value!r} and {kind.private_name!r} are declared",
                    level,
                )
            hook = hook or private
        if hook is not None:
            hooks.append(hook)
    return tuple(hooks)


__all__ = ["Hook", "ancestor_chain", "resolve_chain"]
