"""Pagination metadata and the paginated response envelope."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

ItemT = TypeVar("ItemT")

PAGINATION_FIELDS = ("page", "per_page", "count", "total_count", "offset")


class PaginationMetadata(BaseModel):
    """Position of one page within the full result set.

    The API flattens these fields into the top level of every paginated
    response, next to the item array.
    """

    page: int = Field(..., ge=1, description="1-indexed page number")
    per_page: int = Field(..., gt=0, description="Requested page size")
    count: int = Field(..., ge=0, description="Items on this page")
    total_count: int | None = Field(None, ge=0, description="Items across all pages, if known")
    offset: int = Field(0, ge=0, description="Items before this page")

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="after")
    def validate_within_total(self) -> PaginationMetadata:
        """Validate count + offset does not run past total_count."""
        if self.total_count is not None and self.count + self.offset > self.total_count:
            raise ValueError(
                f"count + offset ({self.count} + {self.offset}) exceeds total_count "
                f"({self.total_count})"
            )
        return self

    @property
    def is_last(self) -> bool:
        """True if the server reports no items beyond this page."""
        if self.total_count is None:
            return False
        return self.count + self.offset >= self.total_count


class Page(BaseModel, Generic[ItemT]):
    """One paginated response: metadata plus a batch of items.

    Subclasses name the JSON array holding their items via ``items_key``.
    Validation accepts the flat wire format and regroups the pagination
    fields into :attr:`pagination`. A body without the item array fails
    validation.
    """

    items_key: ClassVar[str] = "items"

    pagination: PaginationMetadata
    items: list[ItemT]

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def unflatten(cls, data: Any) -> Any:
        """Group top-level pagination fields and pick the item array."""
        if not isinstance(data, dict) or "pagination" in data:
            return data
        skip = {*PAGINATION_FIELDS, cls.items_key, "items"}
        regrouped = {k: v for k, v in data.items() if k not in skip}
        regrouped["pagination"] = {k: data[k] for k in PAGINATION_FIELDS if k in data}
        if cls.items_key in data:
            regrouped["items"] = data[cls.items_key]
        return regrouped

    def to_wire(self) -> dict[str, Any]:
        """Serialize back to the flat wire format."""
        body = self.model_dump(mode="json", exclude={"pagination", "items"})
        body.update(self.pagination.model_dump(mode="json"))
        body[self.items_key] = [
            item.model_dump(mode="json") if isinstance(item, BaseModel) else item
            for item in self.items
        ]
        return body


__all__ = ["PAGINATION_FIELDS", "Page", "PaginationMetadata"]
