"""Unit tests for datastores."""

import json

import pytest

from permissions_dashboard.config import Settings
from permissions_dashboard.datastore import InMemoryDatastore, JsonFileDatastore, build_datastore
from permissions_dashboard.exceptions import ConfigurationException, DatastoreException
from permissions_dashboard.models import NamespaceDefinition, Relation

# InMemoryDatastore Tests


@pytest.mark.asyncio
async def test_memory_datastore_starts_unmigrated():
    datastore = InMemoryDatastore()
    await datastore.initialize()

    assert await datastore.is_ready() is False
    assert await datastore.list_namespaces() == []


@pytest.mark.asyncio
async def test_memory_datastore_migrate():
    datastore = InMemoryDatastore()

    await datastore.migrate()

    assert await datastore.is_ready() is True


@pytest.mark.asyncio
async def test_memory_datastore_write_replaces_by_name(sample_namespaces):
    """Rewriting a namespace keeps its position; new names are appended."""
    datastore = InMemoryDatastore(migrated=True, namespaces=sample_namespaces)
    updated_user = NamespaceDefinition(name="user", relations=[Relation(name="friend", allowed_types=["user"])])

    await datastore.write_namespaces([updated_user, NamespaceDefinition(name="document")])

    listed = await datastore.list_namespaces()
    assert [definition.name for definition in listed] == ["user", "resource", "document"]
    assert listed[0] == updated_user


@pytest.mark.asyncio
async def test_memory_datastore_returns_copies(sample_datastore):
    listed = await sample_datastore.list_namespaces()
    listed.clear()

    assert len(await sample_datastore.list_namespaces()) == 2


# JsonFileDatastore Tests


def write_store(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.mark.asyncio
async def test_json_datastore_missing_file_is_not_ready(tmp_path):
    datastore = JsonFileDatastore(tmp_path / "store.json")

    assert await datastore.is_ready() is False
    assert await datastore.list_namespaces() == []


@pytest.mark.asyncio
async def test_json_datastore_reads_namespaces(tmp_path):
    path = tmp_path / "store.json"
    write_store(
        path,
        {
            "migrated": True,
            "namespaces": [
                {"name": "user"},
                {"name": "resource", "relations": [{"name": "reader", "allowed_types": ["user"]}]},
            ],
        },
    )
    datastore = JsonFileDatastore(path)

    assert await datastore.is_ready() is True
    listed = await datastore.list_namespaces()
    assert [definition.name for definition in listed] == ["user", "resource"]
    assert listed[1].relations[0].allowed_types == ["user"]


@pytest.mark.asyncio
async def test_json_datastore_unmigrated_flag(tmp_path):
    path = tmp_path / "store.json"
    write_store(path, {"migrated": False})

    assert await JsonFileDatastore(path).is_ready() is False


@pytest.mark.asyncio
async def test_json_datastore_rereads_file(tmp_path):
    """Edits to the file are visible on the next call."""
    path = tmp_path / "store.json"
    write_store(path, {"migrated": True, "namespaces": []})
    datastore = JsonFileDatastore(path)
    assert await datastore.list_namespaces() == []

    write_store(path, {"migrated": True, "namespaces": [{"name": "widget"}]})

    assert [definition.name for definition in await datastore.list_namespaces()] == ["widget"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps(["not", "an", "object"]),
        json.dumps({"migrated": True, "namespaces": [{"relations": []}]}),
    ],
)
async def test_json_datastore_invalid_file(tmp_path, content):
    path = tmp_path / "store.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(DatastoreException) as exc_info:
        await JsonFileDatastore(path).is_ready()

    assert exc_info.value.details["file_path"] == str(path)


# build_datastore Tests


def test_build_datastore_defaults_to_memory():
    assert isinstance(build_datastore(Settings(_env_file=None)), InMemoryDatastore)


def test_build_datastore_with_file(tmp_path):
    datastore = build_datastore(Settings(_env_file=None, datastore_file=tmp_path / "store.json"))

    assert isinstance(datastore, JsonFileDatastore)
    assert datastore.path == tmp_path / "store.json"


def test_build_datastore_rejects_directory(tmp_path):
    with pytest.raises(ConfigurationException):
        build_datastore(Settings(_env_file=None, datastore_file=tmp_path))
