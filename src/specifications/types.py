"""Shared types for the specifications package."""

from enum import Enum


class LifecycleKind(Enum):
    """Lifecycle phase of a specification unit.

    The value is the reserved hook name looked up on each class level.
    """

    ESTABLISH = "establish"  # Arrange the context
    BECAUSE = "because"  # Perform the action under test
    DESTROY = "destroy"  # Tear the context down

    @property
    def private_name(self) -> str:
        return f"_{self.value}"
