from sqlalchemy import String, Text, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from resource_hub.db.base import Base
from resource_hub.db.models._mixins import TimestampMixin

class Resource(Base, TimestampMixin):
    __tablename__ = "resource"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category_id: Mapped[int] = mapped_column(ForeignKey("category.id", ondelete="CASCADE"), index=True)
    read_time: Mapped[int] = mapped_column(Integer, default=5)  # minutes

    category = relationship("Category", back_populates="resources")
    blocks = relationship("ContentBlock", back_populates="resource", passive_deletes=True)
