"""Datastore interface consumed by the dashboard.

Concrete stores inherit from Datastore and implement the two read
operations. Lifecycle hooks default to no-ops.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from permissions_dashboard.models import NamespaceDefinition


class Datastore(ABC):
    """Base class for all datastores the dashboard can read from."""

    async def initialize(self) -> None:
        """Prepare the store (called during app startup)."""

    async def close(self) -> None:
        """Release resources (called during app shutdown)."""

    @abstractmethod
    async def is_ready(self) -> bool:
        """Report whether the store has been migrated and can be queried."""

    @abstractmethod
    async def list_namespaces(self) -> Sequence[NamespaceDefinition]:
        """Return every namespace definition in store order."""
