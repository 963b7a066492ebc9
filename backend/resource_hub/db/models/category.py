from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resource_hub.db.base import Base
from resource_hub.db.models._mixins import TimestampMixin

class Category(Base, TimestampMixin):
    __tablename__ = "category"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    icon: Mapped[str | None] = mapped_column(String(255), nullable=True)  # lucide icon name, e.g. "CheckCircle"

    resources = relationship("Resource", back_populates="category", passive_deletes=True)
