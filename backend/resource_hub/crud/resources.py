from sqlalchemy import or_
from sqlalchemy.orm import Session

from resource_hub.core.config import settings
from resource_hub.core.logging import logger
from resource_hub.db.models._mixins import utcnow
from resource_hub.db.models.resource import Resource
from resource_hub.db.models.content_block import ContentBlock
from resource_hub.db.transaction import transactional
from resource_hub.schemas.resources import ResourceCreate, ResourceUpdate


def list_resources(db: Session, category_id: int | None = None, q: str | None = None):
    qry = db.query(Resource)
    if category_id is not None:
        qry = qry.filter(Resource.category_id == category_id)
    if q and q.strip():
        q_like = f"%{q.strip()}%"
        qry = qry.filter(or_(Resource.title.ilike(q_like), Resource.description.ilike(q_like)))
    return qry.order_by(Resource.id).all()


def get_resource(db: Session, resource_id: int) -> Resource | None:
    return db.query(Resource).filter(Resource.id == resource_id).one_or_none()


def resource_exists(db: Session, resource_id: int) -> bool:
    return db.query(Resource.id).filter(Resource.id == resource_id).first() is not None


def create_resource(db: Session, data: ResourceCreate) -> Resource:
    r = Resource(
        title=data.title.strip(),
        description=data.description or None,
        category_id=data.category_id,
        read_time=data.read_time or settings.DEFAULT_READ_TIME,
    )
    db.add(r)
    db.commit()
    db.refresh(r)
    return r


def update_resource(db: Session, resource_id: int, data: ResourceUpdate) -> Resource | None:
    r = get_resource(db, resource_id)
    if r is None:
        return None
    changes = data.changes()
    if "read_time" in changes:
        changes["read_time"] = changes["read_time"] or settings.DEFAULT_READ_TIME
    for field, value in changes.items():
        setattr(r, field, value)
    r.updated_at = utcnow()
    db.commit()
    db.refresh(r)
    return r


def reassign_resource(db: Session, resource_id: int, new_category_id: int) -> Resource | None:
    """Move a resource to another category; only category_id and updated_at change.

    The target category is not checked here, callers validate it first.
    """
    r = get_resource(db, resource_id)
    if r is None:
        return None
    old_category_id = r.category_id
    r.category_id = new_category_id
    r.updated_at = utcnow()
    db.commit()
    db.refresh(r)
    logger.info("resource_reassigned", resource_id=r.id, from_category=old_category_id, to_category=new_category_id)
    return r


def delete_resource_cascade(db: Session, r: Resource) -> int:
    """Delete the blocks of ``r`` and then ``r`` itself, without committing.

    Returns the number of blocks removed.
    """
    blocks = db.query(ContentBlock).filter(ContentBlock.resource_id == r.id).all()
    for b in blocks:
        db.delete(b)
    db.flush()
    db.delete(r)
    db.flush()
    return len(blocks)


def delete_resource(db: Session, resource_id: int) -> bool:
    r = get_resource(db, resource_id)
    if r is None:
        return False
    with transactional(db):
        blocks = delete_resource_cascade(db, r)
    logger.info("resource_deleted", resource_id=resource_id, blocks=blocks)
    return True
