from typing import ClassVar
from pydantic import Field

from resource_hub.schemas._base import ApiModel, PartialUpdate, UtcDatetime


class ResourceCreate(ApiModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    category_id: int
    read_time: int | None = Field(None, ge=0)


class ResourceUpdate(PartialUpdate):
    not_null_fields: ClassVar[tuple[str, ...]] = ("title", "category_id", "read_time")

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    category_id: int | None = None
    read_time: int | None = Field(None, ge=0)


class ResourceMove(ApiModel):
    category_id: int


class ResourceOut(ApiModel):
    id: int
    title: str
    description: str | None = None
    category_id: int
    read_time: int | None = None
    created_at: UtcDatetime
    updated_at: UtcDatetime
