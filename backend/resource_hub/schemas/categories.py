from typing import ClassVar
from pydantic import Field

from resource_hub.schemas._base import ApiModel, PartialUpdate, UtcDatetime

class CategoryCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=255)
    icon: str | None = Field(None, max_length=255)


class CategoryUpdate(PartialUpdate):
    not_null_fields: ClassVar[tuple[str, ...]] = ("name",)

    name: str | None = Field(None, min_length=1, max_length=255)
    icon: str | None = Field(None, max_length=255)


class CategoryOut(ApiModel):
    id: int
    name: str
    icon: str | None = None
    created_at: UtcDatetime
    updated_at: UtcDatetime
