"""Datastore backed by a JSON file.

The file is re-read on every call so edits show up on the next page load.
Expected layout:

    {
        "migrated": true,
        "namespaces": [
            {"name": "user", "relations": []},
            {"name": "resource", "relations": [{"name": "reader", "allowed_types": ["user"]}]}
        ]
    }

A missing file means the store has not been migrated yet.
"""

import asyncio
import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from permissions_dashboard.datastore.base import Datastore
from permissions_dashboard.exceptions import DatastoreException
from permissions_dashboard.logging_config import get_logger, log_with_context
from permissions_dashboard.models import NamespaceDefinition

logger = get_logger(__name__)


class StoreFile(BaseModel):
    """Contents of the store file."""

    migrated: bool = False
    namespaces: list[NamespaceDefinition] = Field(default_factory=list)


class JsonFileDatastore(Datastore):
    """Reads readiness and namespace definitions from a JSON file."""

    def __init__(self, path: Path):
        self.path = path

    async def initialize(self) -> None:
        log_with_context(
            logger,
            "info",
            "Using JSON file datastore",
            file_path=str(self.path),
            exists=self.path.exists(),
            event_type="datastore_config",
        )

    async def is_ready(self) -> bool:
        store = await asyncio.to_thread(self._load)
        return store is not None and store.migrated

    async def list_namespaces(self) -> Sequence[NamespaceDefinition]:
        store = await asyncio.to_thread(self._load)
        if store is None:
            return []
        return store.namespaces

    def _load(self) -> StoreFile | None:
        """Read and validate the store file.

        Returns:
            Parsed store contents, or None if the file does not exist

        Raises:
            DatastoreException: If the file is unreadable or invalid
        """
        if not self.path.exists():
            return None

        details: dict[str, Any] = {"file_path": str(self.path)}
        try:
            content = self.path.read_text(encoding="utf-8")
            data = json.loads(content)
        except (OSError, UnicodeDecodeError) as e:
            raise DatastoreException(f"Cannot read datastore file: {e}", details=details) from e
        except json.JSONDecodeError as e:
            raise DatastoreException(f"Datastore file contains invalid JSON: {e}", details=details) from e

        if not isinstance(data, dict):
            raise DatastoreException("Datastore file must contain a JSON object", details=details)

        try:
            return StoreFile.model_validate(data)
        except ValidationError as e:
            details["errors"] = e.error_count()
            raise DatastoreException(f"Datastore file has an invalid layout: {e}", details=details) from e
