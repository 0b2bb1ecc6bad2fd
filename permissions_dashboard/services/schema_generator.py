"""Schema source generation for namespace definitions."""

from permissions_dashboard.exceptions import SourceGenerationFailedException
from permissions_dashboard.models import NamespaceDefinition, Relation

INDENT = "\t"


class SchemaSourceGenerator:
    """Prints namespace definitions in the schema language.

    Example output:

        definition resource {
            relation reader: user
            relation writer: user

            permission view = reader + writer
        }
    """

    def generate_source(self, definition: NamespaceDefinition) -> str:
        """Render one namespace definition as schema source.

        Args:
            definition: Namespace definition returned by the store

        Returns:
            Schema source text without a trailing newline

        Raises:
            SourceGenerationFailedException: If the name is empty or an entry
                is not exactly one of relation or permission
        """
        if not definition.name.strip():
            raise SourceGenerationFailedException("Namespace definition has no name")

        if not definition.relations:
            return f"definition {definition.name} {{}}"

        lines = [f"definition {definition.name} {{"]
        previous: Relation | None = None
        for relation in definition.relations:
            line = self._render_relation(definition.name, relation)
            if previous is not None and previous.is_permission != relation.is_permission:
                lines.append("")
            lines.append(f"{INDENT}{line}")
            previous = relation
        lines.append("}")
        return "\n".join(lines)

    @staticmethod
    def _render_relation(namespace: str, relation: Relation) -> str:
        details = {"namespace": namespace, "relation": relation.name}

        if not relation.name.strip():
            raise SourceGenerationFailedException("Relation has no name", details=details)

        if relation.allowed_types and relation.expression is not None:
            raise SourceGenerationFailedException(
                f"Relation '{relation.name}' has both allowed types and an expression",
                details=details,
            )

        if relation.expression is not None:
            expression = relation.expression.strip()
            if not expression:
                raise SourceGenerationFailedException(
                    f"Permission '{relation.name}' has an empty expression",
                    details=details,
                )
            return f"permission {relation.name} = {expression}"

        if not relation.allowed_types:
            raise SourceGenerationFailedException(
                f"Relation '{relation.name}' has neither allowed types nor an expression",
                details=details,
            )
        return f"relation {relation.name}: {' | '.join(relation.allowed_types)}"
