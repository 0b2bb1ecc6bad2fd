"""Protocol definitions for dependency injection."""

from typing import Protocol

from permissions_dashboard.models import NamespaceDefinition


class SourceGeneratorProtocol(Protocol):
    """Protocol for schema source generators.

    This protocol defines the interface the view resolver uses to turn a
    namespace definition back into schema text, allowing other generators
    to be injected and easier testing.
    """

    def generate_source(self, definition: NamespaceDefinition) -> str:
        """Render one namespace definition as schema source.

        Args:
            definition: Namespace definition returned by the store

        Returns:
            Schema source text

        Raises:
            SourceGenerationFailedException: If the definition cannot be printed
        """
        ...
