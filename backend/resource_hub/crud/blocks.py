from sqlalchemy import func
from sqlalchemy.orm import Session

from resource_hub.core.logging import logger
from resource_hub.db.models._mixins import utcnow
from resource_hub.db.models.content_block import BlockType, ContentBlock
from resource_hub.db.transaction import transactional
from resource_hub.schemas.blocks import BlockCreate, BlockUpdate, validate_content


def list_blocks(db: Session, resource_id: int):
    return (
        db.query(ContentBlock)
        .filter(ContentBlock.resource_id == resource_id)
        .order_by(ContentBlock.order, ContentBlock.id)
        .all()
    )


def get_block(db: Session, block_id: int) -> ContentBlock | None:
    return db.query(ContentBlock).filter(ContentBlock.id == block_id).one_or_none()


def count_blocks(db: Session, resource_id: int) -> int:
    return db.query(func.count(ContentBlock.id)).filter(ContentBlock.resource_id == resource_id).scalar() or 0


def create_block(db: Session, data: BlockCreate) -> ContentBlock:
    order = data.order if data.order is not None else count_blocks(db, data.resource_id)
    b = ContentBlock(
        resource_id=data.resource_id,
        block_type=data.block_type.value,
        title=data.title or None,
        description=data.description or None,
        content=data.content,
        order=order,
    )
    db.add(b)
    db.commit()
    db.refresh(b)
    return b


def update_block(db: Session, block_id: int, data: BlockUpdate) -> ContentBlock | None:
    """Apply a partial update.

    Raises ValueError when the resulting content does not fit the resulting blockType.
    """
    b = get_block(db, block_id)
    if b is None:
        return None
    changes = data.changes()
    if "block_type" in changes:
        changes["block_type"] = BlockType(changes["block_type"]).value
    if "block_type" in changes or "content" in changes:
        changes["content"] = validate_content(
            changes.get("block_type", b.block_type),
            changes.get("content", b.content),
        )
    for field, value in changes.items():
        setattr(b, field, value)
    b.updated_at = utcnow()
    db.commit()
    db.refresh(b)
    return b


def delete_block(db: Session, block_id: int) -> bool:
    b = get_block(db, block_id)
    if b is None:
        return False
    db.delete(b)
    db.commit()
    return True


def reorder_blocks(db: Session, resource_id: int, block_ids: list[int]) -> list[ContentBlock]:
    """Set ``order = index`` for every listed block that belongs to ``resource_id``.

    Ids of other resources and unknown ids are skipped. Blocks left out of
    ``block_ids`` keep their current order, so gaps or duplicates may remain.
    Returns the blocks that were updated, sorted by their new order.
    """
    by_id = {b.id: b for b in list_blocks(db, resource_id)}
    updated: dict[int, ContentBlock] = {}
    with transactional(db):
        now = utcnow()
        for index, block_id in enumerate(block_ids):
            b = by_id.get(block_id)
            if b is None:
                continue
            b.order = index
            b.updated_at = now
            updated[b.id] = b
    for b in updated.values():
        db.refresh(b)
    skipped = len(block_ids) - len(updated)
    if skipped:
        logger.warning("reorder_ids_skipped", resource_id=resource_id, skipped=skipped)
    return sorted(updated.values(), key=lambda b: (b.order, b.id))
