"""Configuration loaded from ``[tool.specifications]`` in pyproject.toml."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


logger = logging.getLogger(__name__)

PYPROJECT_NAME = "pyproject.toml"
ENV_PREFIX = "SPECIFICATIONS_"


class SpecificationsConfig(BaseModel):
    """Settings for lifecycle resolution and invocation.

    Attributes
    ----------
    failure_mode
        ``"aggregate"`` re-raises a lone failure unchanged and groups several
        into :class:`~specifications.errors.LifecycleFailures`. ``"first"``
        re-raises the first failure in chain order with the others attached
        as notes.
    allow_private_hooks
        Also pick up ``_establish``/``_because``/``_destroy`` declarations.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    failure_mode: Literal["aggregate", "first"] = "aggregate"
    allow_private_hooks: bool = True


DEFAULT_CONFIG = SpecificationsConfig()


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest pyproject.toml at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT_NAME
        if candidate.is_file():
            return candidate
    return None


def _read_tool_table(path: Path) -> dict[str, Any]:
    with path.open("rb") as fh:
        data = tomllib.load(fh)
    table = data.get("tool", {}).get("specifications", {})
    return {key.replace("-", "_"): value for key, value in table.items()}


def _read_env() -> dict[str, Any]:
    values: dict[str, Any] = {}
    for field_name in SpecificationsConfig.model_fields:
        raw = os.environ.get(f"{ENV_PREFIX}{field_name.upper()}")
        if raw is not None:
            values[field_name] = raw
    return values


def load_config(start: Path | str | None = None) -> SpecificationsConfig:
    """Load configuration from the nearest pyproject.toml and the environment.

    Environment variables (``SPECIFICATIONS_FAILURE_MODE``,
    ``SPECIFICATIONS_ALLOW_PRIVATE_HOOKS``) override file values.

    Raises:
        pydantic.ValidationError: If a value is invalid.
    """
    if isinstance(start, str):
        start = Path(start)

    values: dict[str, Any] = {}
    pyproject = find_pyproject(start)
    if pyproject is not None:
        values.update(_read_tool_table(pyproject))
        logger.debug("Loaded [tool.specifications] from %s", pyproject)
    values.update(_read_env())

    if not values:
        return DEFAULT_CONFIG
    return SpecificationsConfig.model_validate(values)


__all__ = ["DEFAULT_CONFIG", "SpecificationsConfig", "find_pyproject", "load_config"]
