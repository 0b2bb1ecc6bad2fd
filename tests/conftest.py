"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from permissions_dashboard.config import Settings
from permissions_dashboard.core.app_factory import create_app
from permissions_dashboard.datastore import InMemoryDatastore
from permissions_dashboard.models import NamespaceDefinition, Relation


@pytest.fixture
def resource_source():
    """Expected schema source for the sample `resource` namespace."""
    return (
        "definition resource {\n"
        "\trelation reader: user\n"
        "\trelation writer: user\n"
        "\n"
        "\tpermission write = writer\n"
        "\tpermission view = reader + write\n"
        "}"
    )


@pytest.fixture
def test_settings():
    """Settings with recognisable display values and no .env lookup."""
    return Settings(
        _env_file=None,
        dashboard_host="127.0.0.1",
        dashboard_port=8080,
        grpc_addr="grpc.example.com:50051",
        grpc_no_tls=True,
        datastore_engine="postgres",
    )


@pytest.fixture
def user_namespace():
    return NamespaceDefinition(name="user")


@pytest.fixture
def resource_namespace():
    return NamespaceDefinition(
        name="resource",
        relations=[
            Relation(name="reader", allowed_types=["user"]),
            Relation(name="writer", allowed_types=["user"]),
            Relation(name="write", expression="writer"),
            Relation(name="view", expression="reader + write"),
        ],
    )


@pytest.fixture
def sample_namespaces(user_namespace, resource_namespace):
    """The onboarding sample schema: `user` and `resource`."""
    return [user_namespace, resource_namespace]


@pytest.fixture
def unmigrated_datastore():
    return InMemoryDatastore()


@pytest.fixture
def empty_datastore():
    return InMemoryDatastore(migrated=True)


@pytest.fixture
def sample_datastore(sample_namespaces):
    return InMemoryDatastore(migrated=True, namespaces=sample_namespaces)


@pytest.fixture
def make_client(test_settings):
    """Build a TestClient (with lifespan) around a given datastore."""
    clients = []

    def _make(datastore, settings=None, generator=None, raise_server_exceptions=True):
        app = create_app(settings or test_settings, datastore=datastore, generator=generator)
        client = TestClient(app, raise_server_exceptions=raise_server_exceptions)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
