from sqlalchemy import String, Boolean, Index, text
from sqlalchemy.orm import Mapped, mapped_column

from resource_hub.db.base import Base
from resource_hub.db.models._mixins import TimestampMixin

class ThemeSettings(Base, TimestampMixin):
    __tablename__ = "theme_settings"
    __table_args__ = (
        # at most one row may have is_active = true
        Index(
            "uq_theme_settings_single_active",
            "is_active",
            unique=True,
            postgresql_where=text("is_active"),
            sqlite_where=text("is_active"),
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    primary_color: Mapped[str] = mapped_column(String(7))
    background_color: Mapped[str] = mapped_column(String(7))
    surface_color: Mapped[str] = mapped_column(String(7))
    border_color: Mapped[str] = mapped_column(String(7))
    text_color: Mapped[str] = mapped_column(String(7))
    logo_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=False, index=True)
