"""Root marker class for behavior specifications."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from specifications.registry import LifecycleChains


class Specification:
    """Base class every specification and reusable context derives from.

    Subclasses declare any of ``establish``, ``because`` and ``destroy``
    (sync or async, no arguments). Hooks run from the most general context
    down to the concrete specification::

        class a_connected_client(Specification):
            async def establish(self):
                self.client = await connect()

        class when_sending_a_message(a_connected_client):
            async def because(self):
                self.reply = await self.client.send("ping")

    This class is never scanned for hooks itself.
    """

    @classmethod
    def lifecycle_chains(cls) -> LifecycleChains:
        """Return the cached lifecycle chains for this class."""
        from specifications.registry import get_registry

        return get_registry().get_chains(cls)


__all__ = ["Specification"]
