"""Pydantic models for namespace definitions as returned by the store."""

from pydantic import BaseModel, ConfigDict, Field


class Relation(BaseModel):
    """One entry of a namespace definition.

    An entry with allowed_types is a relation, an entry with an expression is
    a permission. The store does not enforce that exactly one is set; the
    source generator rejects entries that break the rule.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    allowed_types: list[str] = Field(default_factory=list, description="Subject types, e.g. 'user' or 'group#member'")
    expression: str | None = Field(default=None, description="Permission expression, e.g. 'reader + write'")

    @property
    def is_permission(self) -> bool:
        return self.expression is not None


class NamespaceDefinition(BaseModel):
    """One schema object type, e.g. `user` or `resource`."""

    model_config = ConfigDict(frozen=True)

    name: str
    relations: list[Relation] = Field(default_factory=list)
