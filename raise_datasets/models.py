"""Pydantic models for data structures."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DatasetQuery(BaseModel):
    """Normalized listing query. Build it through ``normalize_query``."""

    model_config = ConfigDict(frozen=True)

    search: str = Field(default="", description="Trimmed search text; empty means no filter")
    page: int = Field(default=1, ge=1, description="1-based page number")
    per_page: int = Field(default=10, ge=1, le=50, description="Items per page")

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def take(self) -> int:
        return self.per_page


class DatasetItem(BaseModel):
    """Normalized marketplace dataset for display."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    title: str = ""
    description: str = ""
    organization: str = ""
    link: str = ""


class DatasetPage(BaseModel):
    """One page of normalized datasets."""

    model_config = ConfigDict(frozen=True)

    items: list[DatasetItem] = Field(default_factory=list)
    page: int
    per_page: int
    total: int | None = None
    has_more: bool = False

    def to_response(self) -> dict[str, Any]:
        """Serialize for the wire; ``total`` is left out when unknown."""
        payload = self.model_dump(mode="json")
        if self.total is None:
            payload.pop("total")
        return payload
