from enum import Enum
from sqlalchemy import String, Text, Integer, ForeignKey, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resource_hub.db.base import Base
from resource_hub.db.models._mixins import TimestampMixin

class BlockType(str, Enum):
    checklist = "checklist"
    alert = "alert"
    text = "text"
    copyable_text = "copyableText"
    file_download = "fileDownload"
    link = "link"
    video = "video"
    custom = "custom"

class ContentBlock(Base, TimestampMixin):
    __tablename__ = "content_block"
    # no unique constraint on (resource_id, order): partial reorders may leave duplicates
    __table_args__ = (Index("ix_content_block_resource_order", "resource_id", "order"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    resource_id: Mapped[int] = mapped_column(ForeignKey("resource.id", ondelete="CASCADE"), index=True)
    block_type: Mapped[str] = mapped_column(String(50))
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[dict] = mapped_column(JSON, default=dict)
    order: Mapped[int] = mapped_column(Integer, default=0)

    resource = relationship("Resource", back_populates="blocks")
