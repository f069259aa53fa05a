from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Generic, TypeVar

T = TypeVar("T")


class DisplayModel(BaseModel):
    """Base for records handed to the dashboard.

    Serialised with camelCase keys. Backing fields that keep persistence
    keys for a later write declare an explicit ``_``-prefixed alias.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PaginatedResponse(DisplayModel, Generic[T]):
    items: list[T]
    total: int
    page: int = 1
    page_size: int = 50


class ErrorResponse(BaseModel):
    detail: str
    error_code: str | None = None


class HealthResponse(BaseModel):
    status: str
    version: str
