"""Pydantic models for the dashboard page."""

from pydantic import BaseModel, ConfigDict, model_validator


class DashboardArgs(BaseModel):
    """Display values rendered into the page's example commands."""

    model_config = ConfigDict(frozen=True)

    grpc_addr: str
    grpc_no_tls: bool = False
    datastore_engine: str


class ViewModel(BaseModel):
    """Render input for the dashboard page, built fresh for every request."""

    model_config = ConfigDict(frozen=True)

    is_ready: bool = False
    is_empty: bool = False
    schema_text: str = ""
    has_sample_schema: bool = False

    @model_validator(mode="after")
    def check_view_state(self) -> "ViewModel":
        """Reject combinations that cannot come out of a store query."""
        if not self.is_ready and (self.is_empty or self.has_sample_schema or self.schema_text):
            raise ValueError("a store that is not ready has no schema")
        if self.is_empty and self.schema_text:
            raise ValueError("an empty view cannot carry schema text")
        return self
