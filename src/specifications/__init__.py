"""Specifications - lifecycle resolution for behavior specifications.

Resolves the ``establish``, ``because`` and ``destroy`` hooks declared along a
specification's class hierarchy and invokes them from the most general
context down to the concrete specification.
"""

from .config import DEFAULT_CONFIG, SpecificationsConfig, load_config
from .context import LifecycleContext, current_lifecycle
from .errors import LifecycleFailures, ResolutionError, SpecificationError
from .invoker import because, destroy, establish, invoke
from .registry import LifecycleChains, LifecycleRegistry, get_registry
from .resolver import resolve_chain
from .specification import Specification
from .types import LifecycleKind
from .version import __version__


__all__ = [
    # Core
    "Specification",
    "LifecycleKind",
    "establish",
    "because",
    "destroy",
    "invoke",
    # Resolution
    "resolve_chain",
    "LifecycleChains",
    "LifecycleRegistry",
    "get_registry",
    # Context
    "LifecycleContext",
    "current_lifecycle",
    # Errors
    "SpecificationError",
    "ResolutionError",
    "LifecycleFailures",
    # Config
    "DEFAULT_CONFIG",
    "SpecificationsConfig",
    "load_config",
    "__version__",
]
