"""Process-wide cache of resolved lifecycle chains, keyed by class."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from specifications.config import DEFAULT_CONFIG, SpecificationsConfig, load_config
from specifications.resolver import Hook, resolve_chain
from specifications.types import LifecycleKind


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LifecycleChains:
    """The three method chains of one concrete specification class.

    Attributes
    ----------
    establish
        Setup hooks, root-most context first.
    because
        Action hooks, root-most context first.
    destroy
        Teardown hooks, root-most context first.
    """

    establish: tuple[Hook, ...] = ()
    because: tuple[Hook, ...] = ()
    destroy: tuple[Hook, ...] = ()

    def __getitem__(self, kind: LifecycleKind) -> tuple[Hook, ...]:
        return getattr(self, kind.value)


class LifecycleRegistry:
    """Resolves each class's chains once and serves them from then on.

    Entries are never invalidated. A class whose resolution fails is not
    stored, so the error is raised again on every lookup.
    """

    def __init__(self, config: SpecificationsConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self._chains: dict[type, LifecycleChains] = {}
        self._lock = threading.Lock()

    def get_chains(self, concrete_type: type) -> LifecycleChains:
        """Return the chains for ``concrete_type``, resolving them on first use.

        Raises:
            ResolutionError: If the class cannot be resolved.
        """
        chains = self._chains.get(concrete_type)
        if chains is not None:
            return chains

        with self._lock:
            chains = self._chains.get(concrete_type)
            if chains is None:
                chains = self._resolve(concrete_type)
                self._chains[concrete_type] = chains
        return chains

    def _resolve(self, concrete_type: type) -> LifecycleChains:
        resolved = {
            kind.value: resolve_chain(
                concrete_type, kind, allow_private=self.config.allow_private_hooks
            )
            for kind in LifecycleKind
        }
        chains = LifecycleChains(**resolved)
        logger.debug(
            "Resolved lifecycle chains for %s: establish=%d because=%d destroy=%d",
            concrete_type.__qualname__,
            len(chains.establish),
            len(chains.because),
            len(chains.destroy),
        )
        return chains

    def __contains__(self, concrete_type: object) -> bool:
        return concrete_type in self._chains

    def __len__(self) -> int:
        return len(self._chains)


_registry: LifecycleRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> LifecycleRegistry:
    """Get the global lifecycle registry, creating it from config on first use."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = LifecycleRegistry(load_config())
    return _registry


__all__ = ["LifecycleChains", "LifecycleRegistry", "get_registry"]
