"""Shared base classes for API response models."""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ApiModel(BaseModel):
    """Immutable snapshot of an API payload; unknown fields are kept"""
    model_config = ConfigDict(frozen=True, extra="allow", coerce_numbers_to_str=True)


class Page(ApiModel, Generic[T]):
    """Paginated envelope returned by list endpoints"""
    results: List[T] = Field(default_factory=list)
    count: int = 0
    next: Optional[str] = None
    previous: Optional[str] = None
