"""Builds the datastore selected by settings."""

from permissions_dashboard.config import Settings
from permissions_dashboard.datastore.base import Datastore
from permissions_dashboard.datastore.json_file import JsonFileDatastore
from permissions_dashboard.datastore.memory import InMemoryDatastore
from permissions_dashboard.exceptions import ConfigurationException


def build_datastore(settings: Settings) -> Datastore:
    """Create the file-backed store when DATASTORE_FILE is set, else an empty in-memory store.

    Raises:
        ConfigurationException: If DATASTORE_FILE points at a directory
    """
    if settings.datastore_file is None:
        return InMemoryDatastore()

    if settings.datastore_file.is_dir():
        raise ConfigurationException(
            "datastore_file must be a file, not a directory",
            details={"file_path": str(settings.datastore_file)},
        )
    return JsonFileDatastore(settings.datastore_file)
