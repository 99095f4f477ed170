"""Shared fixtures for unit tests."""

import pytest

from specifications import LifecycleRegistry, SpecificationsConfig


@pytest.fixture
def registry() -> LifecycleRegistry:
    """Provide an empty registry so every test resolves from scratch."""
    return LifecycleRegistry(SpecificationsConfig())


@pytest.fixture
def first_failure_registry() -> LifecycleRegistry:
    """Provide an empty registry that reports only the first failure."""
    return LifecycleRegistry(SpecificationsConfig(failure_mode="first"))


@pytest.fixture
def log() -> list[str]:
    """Shared call log appended to by hooks."""
    return []
