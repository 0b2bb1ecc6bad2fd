"""In-memory datastore."""

import asyncio
from collections.abc import Iterable, Sequence

from permissions_dashboard.datastore.base import Datastore
from permissions_dashboard.models import NamespaceDefinition


class InMemoryDatastore(Datastore):
    """Keeps the migration flag and namespace definitions in process memory.

    Access is serialized with an asyncio.Lock. Reads return copies so a
    caller never observes a later write through a list it already holds.
    """

    def __init__(self, migrated: bool = False, namespaces: Iterable[NamespaceDefinition] = ()):
        self._migrated = migrated
        self._namespaces: list[NamespaceDefinition] = list(namespaces)
        self._lock = asyncio.Lock()

    async def is_ready(self) -> bool:
        async with self._lock:
            return self._migrated

    async def list_namespaces(self) -> Sequence[NamespaceDefinition]:
        async with self._lock:
            return list(self._namespaces)

    async def migrate(self) -> None:
        """Mark the store as migrated."""
        async with self._lock:
            self._migrated = True

    async def write_namespaces(self, definitions: Iterable[NamespaceDefinition]) -> None:
        """Replace or append definitions, keyed by name.

        Existing definitions keep their position; new names are appended.
        """
        async with self._lock:
            positions = {definition.name: index for index, definition in enumerate(self._namespaces)}
            for definition in definitions:
                if definition.name in positions:
                    self._namespaces[positions[definition.name]] = definition
                else:
                    positions[definition.name] = len(self._namespaces)
                    self._namespaces.append(definition)
