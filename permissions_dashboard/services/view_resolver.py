"""Resolves the store's current state into the dashboard view model."""

from collections.abc import Sequence

from permissions_dashboard.datastore import Datastore
from permissions_dashboard.exceptions import StoreQueryFailedException, StoreUnavailableException
from permissions_dashboard.logging_config import get_logger, log_with_context
from permissions_dashboard.models import NamespaceDefinition, ViewModel
from permissions_dashboard.protocols import SourceGeneratorProtocol

logger = get_logger(__name__)

SAMPLE_SCHEMA_NAMESPACES = frozenset({"user", "resource"})
SCHEMA_BLOCK_SEPARATOR = "\n\n"


def generate_source_or_default(
    generator: SourceGeneratorProtocol,
    definition: NamespaceDefinition,
    default: str = "",
) -> str:
    """Generate source for one definition, falling back to `default` on failure.

    The failure is logged and never propagated; one unprintable definition
    leaves an empty block in the schema text.

    Args:
        generator: Source generator
        definition: Namespace definition to print
        default: Text used when generation fails

    Returns:
        Generated source, or `default` if the generator raised
    """
    try:
        return generator.generate_source(definition)
    except Exception as e:
        log_with_context(
            logger,
            "warning",
            "Failed to generate schema source for namespace",
            namespace=definition.name,
            error=str(e),
            error_type=type(e).__name__,
            event_type="source_generation_failed",
        )
        return default


def has_sample_schema(definitions: Sequence[NamespaceDefinition]) -> bool:
    """Whether both sample namespaces (`user` and `resource`) are present, matched exactly."""
    return SAMPLE_SCHEMA_NAMESPACES <= {definition.name for definition in definitions}


class ViewResolver:
    """Builds a fresh ViewModel from the store on every call.

    Holds only references to its collaborators, so one instance is shared
    across concurrent requests.
    """

    def __init__(self, datastore: Datastore, generator: SourceGeneratorProtocol):
        self.datastore = datastore
        self.generator = generator

    async def resolve(self) -> ViewModel:
        """Query the store and build the view model.

        Returns:
            ViewModel for the current store state

        Raises:
            StoreUnavailableException: If the readiness check fails
            StoreQueryFailedException: If listing namespaces fails
        """
        try:
            is_ready = await self.datastore.is_ready()
        except Exception as e:
            raise StoreUnavailableException(
                details={"operation": "is_ready", "error": str(e), "error_type": type(e).__name__}
            ) from e

        if not is_ready:
            return ViewModel(is_ready=False)

        try:
            definitions = await self.datastore.list_namespaces()
        except Exception as e:
            raise StoreQueryFailedException(
                details={"operation": "list_namespaces", "error": str(e), "error_type": type(e).__name__}
            ) from e

        schema_text = SCHEMA_BLOCK_SEPARATOR.join(
            generate_source_or_default(self.generator, definition) for definition in definitions
        )

        log_with_context(
            logger,
            "debug",
            "Resolved dashboard view",
            namespace_count=len(definitions),
            event_type="view_resolved",
        )

        return ViewModel(
            is_ready=True,
            is_empty=schema_text == "",
            schema_text=schema_text,
            has_sample_schema=has_sample_schema(definitions),
        )
