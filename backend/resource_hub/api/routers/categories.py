from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from resource_hub.core.deps import get_db, require_editor
from resource_hub.schemas.categories import CategoryCreate, CategoryOut, CategoryUpdate
from resource_hub.crud.categories import (
    list_categories,
    get_category,
    create_category,
    update_category,
    delete_category,
)

router = APIRouter()


@router.get("", response_model=list[CategoryOut])
def get_categories(db: Session = Depends(get_db)):
    return list_categories(db)


@router.get("/{category_id}", response_model=CategoryOut)
def get_category_endpoint(category_id: int, db: Session = Depends(get_db)):
    c = get_category(db, category_id)
    if not c:
        raise HTTPException(status_code=404, detail="Category not found")
    return c


@router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def post_category(data: CategoryCreate, db: Session = Depends(get_db), _user=Depends(require_editor)):
    return create_category(db, data)


@router.put("/{category_id}", response_model=CategoryOut)
def put_category(
    category_id: int,
    data: CategoryUpdate,
    db: Session = Depends(get_db),
    _user=Depends(require_editor),
):
    c = update_category(db, category_id, data)
    if not c:
        raise HTTPException(status_code=404, detail="Category not found")
    return c


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category_endpoint(category_id: int, db: Session = Depends(get_db), _user=Depends(require_editor)):
    if not delete_category(db, category_id):
        raise HTTPException(status_code=404, detail="Category not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
