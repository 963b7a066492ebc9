"""Content block payloads.

``content`` is a tagged union keyed by the block's ``blockType``: each block
type has its own model below, and :func:`validate_content` picks the model,
validates the raw payload and returns the normalized JSON that gets stored.
"""
from typing import Any, ClassVar, Literal

from pydantic import Field, ValidationError, model_validator

from resource_hub.db.models.content_block import BlockType
from resource_hub.schemas._base import ApiModel, PartialUpdate, UtcDatetime


class ChecklistItem(ApiModel):
    id: str
    text: str
    checked: bool = False


class ChecklistContent(ApiModel):
    items: list[ChecklistItem]


class AlertContent(ApiModel):
    content: str
    type: Literal["warning", "info", "success", "error"] | None = None


class TextContent(ApiModel):
    content: str


class CopyableTextContent(TextContent):
    pass


class FileDownloadContent(ApiModel):
    filename: str
    filesize: str | None = None
    url: str | None = None


class LinkItem(ApiModel):
    url: str
    text: str


class LinkContent(ApiModel):
    links: list[LinkItem]


class VideoContent(ApiModel):
    embed_url: str | None = None
    thumbnail_url: str | None = None
    title: str | None = None
    duration: str | None = None


class CustomContent(ApiModel):
    content: str
    html: bool = False


CONTENT_MODELS: dict[BlockType, type[ApiModel]] = {
    BlockType.checklist: ChecklistContent,
    BlockType.alert: AlertContent,
    BlockType.text: TextContent,
    BlockType.copyable_text: CopyableTextContent,
    BlockType.file_download: FileDownloadContent,
    BlockType.link: LinkContent,
    BlockType.video: VideoContent,
    BlockType.custom: CustomContent,
}


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "content"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def validate_content(block_type: BlockType | str, content: Any) -> dict[str, Any]:
    """Validate ``content`` against the model of ``block_type``.

    Raises ValueError when the block type is unknown or the payload does not
    match; returns the payload as stored (camelCase keys, unset optionals dropped).
    """
    try:
        bt = BlockType(block_type)
    except ValueError:
        raise ValueError(f"unknown blockType '{block_type}'") from None
    model = CONTENT_MODELS[bt]
    try:
        parsed = model.model_validate(content)
    except ValidationError as exc:
        raise ValueError(f"content does not match blockType '{bt.value}': {_describe(exc)}") from None
    return parsed.model_dump(by_alias=True, exclude_none=True)


class BlockCreate(ApiModel):
    resource_id: int
    block_type: BlockType
    title: str | None = Field(None, max_length=255)
    description: str | None = None
    content: dict[str, Any]
    # appended after the last block when omitted
    order: int | None = Field(None, ge=0)

    @model_validator(mode="after")
    def _check_content(self):
        self.content = validate_content(self.block_type, self.content)
        return self


class BlockUpdate(PartialUpdate):
    not_null_fields: ClassVar[tuple[str, ...]] = ("resource_id", "block_type", "content", "order")

    resource_id: int | None = None
    block_type: BlockType | None = None
    title: str | None = Field(None, max_length=255)
    description: str | None = None
    content: dict[str, Any] | None = None
    order: int | None = Field(None, ge=0)

    @model_validator(mode="after")
    def _check_content(self):
        # a lone content patch is checked against the stored blockType in crud
        if self.block_type is not None and self.content is not None:
            self.content = validate_content(self.block_type, self.content)
        return self


class BlockReorder(ApiModel):
    block_ids: list[int]


class BlockOut(ApiModel):
    id: int
    resource_id: int
    block_type: str
    title: str | None = None
    description: str | None = None
    content: dict[str, Any]
    order: int
    created_at: UtcDatetime
    updated_at: UtcDatetime
