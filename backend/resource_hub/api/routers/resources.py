from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from resource_hub.core.deps import get_db, require_editor
from resource_hub.schemas.resources import ResourceCreate, ResourceMove, ResourceOut, ResourceUpdate
from resource_hub.schemas.blocks import BlockOut, BlockReorder
from resource_hub.crud.categories import category_exists
from resource_hub.crud.resources import (
    list_resources,
    get_resource,
    create_resource,
    update_resource,
    reassign_resource,
    delete_resource,
)
from resource_hub.crud.blocks import list_blocks, reorder_blocks

router = APIRouter()


@router.get("", response_model=list[ResourceOut])
def get_resources(
    category_id: int | None = Query(None, alias="categoryId"),
    q: str | None = Query(None, max_length=200),
    db: Session = Depends(get_db),
):
    return list_resources(db, category_id=category_id, q=q)


@router.get("/{resource_id}", response_model=ResourceOut)
def get_resource_endpoint(resource_id: int, db: Session = Depends(get_db)):
    r = get_resource(db, resource_id)
    if not r:
        raise HTTPException(status_code=404, detail="Resource not found")
    return r


@router.post("", response_model=ResourceOut, status_code=status.HTTP_201_CREATED)
def post_resource(data: ResourceCreate, db: Session = Depends(get_db), _user=Depends(require_editor)):
    if not category_exists(db, data.category_id):
        raise HTTPException(status_code=400, detail=f"Category {data.category_id} not found")
    return create_resource(db, data)


@router.put("/{resource_id}", response_model=ResourceOut)
def put_resource(
    resource_id: int,
    data: ResourceUpdate,
    db: Session = Depends(get_db),
    _user=Depends(require_editor),
):
    if data.category_id is not None and not category_exists(db, data.category_id):
        raise HTTPException(status_code=400, detail=f"Category {data.category_id} not found")
    r = update_resource(db, resource_id, data)
    if not r:
        raise HTTPException(status_code=404, detail="Resource not found")
    return r


@router.patch("/{resource_id}", response_model=ResourceOut)
def patch_resource_category(
    resource_id: int,
    data: ResourceMove,
    db: Session = Depends(get_db),
    _user=Depends(require_editor),
):
    if not get_resource(db, resource_id):
        raise HTTPException(status_code=404, detail="Resource not found")
    if not category_exists(db, data.category_id):
        raise HTTPException(status_code=404, detail=f"Category {data.category_id} not found")
    return reassign_resource(db, resource_id, data.category_id)


@router.delete("/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_resource_endpoint(resource_id: int, db: Session = Depends(get_db), _user=Depends(require_editor)):
    if not delete_resource(db, resource_id):
        raise HTTPException(status_code=404, detail="Resource not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{resource_id}/blocks", response_model=list[BlockOut])
def get_resource_blocks(resource_id: int, db: Session = Depends(get_db)):
    return list_blocks(db, resource_id)


@router.post("/{resource_id}/blocks/reorder", response_model=list[BlockOut])
def post_reorder_blocks(
    resource_id: int,
    data: BlockReorder,
    db: Session = Depends(get_db),
    _user=Depends(require_editor),
):
    return reorder_blocks(db, resource_id, data.block_ids)
