from typing import Annotated, ClassVar
from pydantic import Field

from resource_hub.schemas._base import ApiModel, PartialUpdate, UtcDatetime

HexColor = Annotated[str, Field(pattern=r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")]


class ThemeCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=255)
    primary_color: HexColor
    background_color: HexColor
    surface_color: HexColor
    border_color: HexColor
    text_color: HexColor
    logo_url: str | None = Field(None, max_length=1024)
    is_active: bool = False


class ThemeUpdate(PartialUpdate):
    not_null_fields: ClassVar[tuple[str, ...]] = (
        "name",
        "primary_color",
        "background_color",
        "surface_color",
        "border_color",
        "text_color",
        "is_active",
    )

    name: str | None = Field(None, min_length=1, max_length=255)
    primary_color: HexColor | None = None
    background_color: HexColor | None = None
    surface_color: HexColor | None = None
    border_color: HexColor | None = None
    text_color: HexColor | None = None
    logo_url: str | None = Field(None, max_length=1024)
    is_active: bool | None = None


class ThemeOut(ApiModel):
    id: int
    name: str
    primary_color: str
    background_color: str
    surface_color: str
    border_color: str
    text_color: str
    logo_url: str | None = None
    is_active: bool
    created_at: UtcDatetime
    updated_at: UtcDatetime
