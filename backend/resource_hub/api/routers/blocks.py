from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from resource_hub.core.deps import get_db, require_editor
from resource_hub.schemas.blocks import BlockCreate, BlockOut, BlockUpdate
from resource_hub.crud.resources import resource_exists
from resource_hub.crud.blocks import get_block, create_block, update_block, delete_block

router = APIRouter()


@router.get("/{block_id}", response_model=BlockOut)
def get_block_endpoint(block_id: int, db: Session = Depends(get_db)):
    b = get_block(db, block_id)
    if not b:
        raise HTTPException(status_code=404, detail="Content block not found")
    return b


@router.post("", response_model=BlockOut, status_code=status.HTTP_201_CREATED)
def post_block(data: BlockCreate, db: Session = Depends(get_db), _user=Depends(require_editor)):
    if not resource_exists(db, data.resource_id):
        raise HTTPException(status_code=400, detail=f"Resource {data.resource_id} not found")
    return create_block(db, data)


@router.put("/{block_id}", response_model=BlockOut)
def put_block(
    block_id: int,
    data: BlockUpdate,
    db: Session = Depends(get_db),
    _user=Depends(require_editor),
):
    if data.resource_id is not None and not resource_exists(db, data.resource_id):
        raise HTTPException(status_code=400, detail=f"Resource {data.resource_id} not found")
    try:
        b = update_block(db, block_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not b:
        raise HTTPException(status_code=404, detail="Content block not found")
    return b


@router.delete("/{block_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_block_endpoint(block_id: int, db: Session = Depends(get_db), _user=Depends(require_editor)):
    if not delete_block(db, block_id):
        raise HTTPException(status_code=404, detail="Content block not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
