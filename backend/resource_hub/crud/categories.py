from sqlalchemy.orm import Session

from resource_hub.core.logging import logger
from resource_hub.db.models._mixins import utcnow
from resource_hub.db.models.category import Category
from resource_hub.db.models.resource import Resource
from resource_hub.db.transaction import transactional
from resource_hub.crud.resources import delete_resource_cascade
from resource_hub.schemas.categories import CategoryCreate, CategoryUpdate


def list_categories(db: Session):
    return db.query(Category).order_by(Category.id).all()


def get_category(db: Session, category_id: int) -> Category | None:
    return db.query(Category).filter(Category.id == category_id).one_or_none()


def category_exists(db: Session, category_id: int) -> bool:
    return db.query(Category.id).filter(Category.id == category_id).first() is not None


def create_category(db: Session, data: CategoryCreate) -> Category:
    c = Category(name=data.name.strip(), icon=data.icon or None)
    db.add(c)
    db.commit()
    db.refresh(c)
    return c


def update_category(db: Session, category_id: int, data: CategoryUpdate) -> Category | None:
    c = get_category(db, category_id)
    if c is None:
        return None
    for field, value in data.changes().items():
        setattr(c, field, value)
    c.updated_at = utcnow()
    db.commit()
    db.refresh(c)
    return c


def delete_category(db: Session, category_id: int) -> bool:
    """Delete a category with all of its resources and their blocks.

    Blocks go first, then resources, then the category, in one transaction.
    """
    c = get_category(db, category_id)
    if c is None:
        return False
    with transactional(db):
        resources = db.query(Resource).filter(Resource.category_id == c.id).order_by(Resource.id).all()
        blocks = 0
        for r in resources:
            blocks += delete_resource_cascade(db, r)
        db.delete(c)
    logger.info("category_deleted", category_id=category_id, resources=len(resources), blocks=blocks)
    return True
