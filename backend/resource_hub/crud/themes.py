"""Theme settings, with at most one theme active at any time.

Every path that makes a theme active first deactivates all the others in the
same transaction.
"""
from sqlalchemy.orm import Session

from resource_hub.core.logging import logger
from resource_hub.db.models._mixins import utcnow
from resource_hub.db.models.theme_settings import ThemeSettings
from resource_hub.db.transaction import transactional
from resource_hub.schemas.themes import ThemeCreate, ThemeUpdate


def list_themes(db: Session):
    return db.query(ThemeSettings).order_by(ThemeSettings.id).all()


def get_theme(db: Session, theme_id: int) -> ThemeSettings | None:
    return db.query(ThemeSettings).filter(ThemeSettings.id == theme_id).one_or_none()


def get_active_theme(db: Session) -> ThemeSettings | None:
    return (
        db.query(ThemeSettings)
        .filter(ThemeSettings.is_active.is_(True))
        .order_by(ThemeSettings.id)
        .first()
    )


def deactivate_all(db: Session) -> int:
    """Flag every active theme inactive, without committing. Returns how many changed."""
    now = utcnow()
    active = db.query(ThemeSettings).filter(ThemeSettings.is_active.is_(True)).all()
    for t in active:
        t.is_active = False
        t.updated_at = now
    db.flush()
    return len(active)


def create_theme(db: Session, data: ThemeCreate) -> ThemeSettings:
    with transactional(db):
        if data.is_active:
            deactivate_all(db)
        t = ThemeSettings(
            name=data.name.strip(),
            primary_color=data.primary_color,
            background_color=data.background_color,
            surface_color=data.surface_color,
            border_color=data.border_color,
            text_color=data.text_color,
            logo_url=data.logo_url or None,
            is_active=data.is_active,
        )
        db.add(t)
    db.refresh(t)
    if t.is_active:
        logger.info("theme_activated", theme_id=t.id, via="create")
    return t


def update_theme(db: Session, theme_id: int, data: ThemeUpdate) -> ThemeSettings | None:
    t = get_theme(db, theme_id)
    if t is None:
        return None
    changes = data.changes()
    activating = not t.is_active and changes.get("is_active", False)
    with transactional(db):
        if activating:
            deactivate_all(db)
        for field, value in changes.items():
            setattr(t, field, value)
        t.updated_at = utcnow()
    db.refresh(t)
    if activating:
        logger.info("theme_activated", theme_id=t.id, via="update")
    return t


def set_active_theme(db: Session, theme_id: int) -> ThemeSettings | None:
    t = get_theme(db, theme_id)
    if t is None:
        return None
    with transactional(db):
        deactivate_all(db)
        t.is_active = True
        t.updated_at = utcnow()
    db.refresh(t)
    logger.info("theme_activated", theme_id=t.id, via="activate")
    return t


def delete_theme(db: Session, t: ThemeSettings) -> bool:
    """Delete an inactive theme. The active theme is refused and left untouched."""
    if t.is_active:
        logger.info("theme_delete_refused", theme_id=t.id)
        return False
    db.delete(t)
    db.commit()
    return True
