"""Datastores the dashboard reads permission schemas from."""

from permissions_dashboard.datastore.base import Datastore
from permissions_dashboard.datastore.factory import build_datastore
from permissions_dashboard.datastore.json_file import JsonFileDatastore
from permissions_dashboard.datastore.memory import InMemoryDatastore

__all__ = [
    "Datastore",
    "InMemoryDatastore",
    "JsonFileDatastore",
    "build_datastore",
]
