from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from resource_hub.core.deps import get_db, require_editor
from resource_hub.schemas.themes import ThemeCreate, ThemeOut, ThemeUpdate
from resource_hub.crud.themes import (
    list_themes,
    get_theme,
    get_active_theme,
    create_theme,
    update_theme,
    set_active_theme,
    delete_theme,
)

router = APIRouter()


@router.get("", response_model=list[ThemeOut])
def get_themes(db: Session = Depends(get_db)):
    return list_themes(db)


# declared before /{theme_id} so "active" is not parsed as an id
@router.get("/active", response_model=ThemeOut)
def get_active(db: Session = Depends(get_db)):
    t = get_active_theme(db)
    if not t:
        raise HTTPException(status_code=404, detail="No active theme found")
    return t


@router.get("/{theme_id}", response_model=ThemeOut)
def get_theme_endpoint(theme_id: int, db: Session = Depends(get_db)):
    t = get_theme(db, theme_id)
    if not t:
        raise HTTPException(status_code=404, detail="Theme not found")
    return t


@router.post("", response_model=ThemeOut, status_code=status.HTTP_201_CREATED)
def post_theme(data: ThemeCreate, db: Session = Depends(get_db), _user=Depends(require_editor)):
    return create_theme(db, data)


@router.put("/{theme_id}", response_model=ThemeOut)
def put_theme(
    theme_id: int,
    data: ThemeUpdate,
    db: Session = Depends(get_db),
    _user=Depends(require_editor),
):
    t = update_theme(db, theme_id, data)
    if not t:
        raise HTTPException(status_code=404, detail="Theme not found")
    return t


@router.delete("/{theme_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_theme_endpoint(theme_id: int, db: Session = Depends(get_db), _user=Depends(require_editor)):
    t = get_theme(db, theme_id)
    if not t:
        raise HTTPException(status_code=404, detail="Theme not found")
    if not delete_theme(db, t):
        raise HTTPException(status_code=409, detail="Theme is currently active")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{theme_id}/activate", response_model=ThemeOut)
def activate_theme(theme_id: int, db: Session = Depends(get_db), _user=Depends(require_editor)):
    t = set_active_theme(db, theme_id)
    if not t:
        raise HTTPException(status_code=404, detail="Theme not found")
    return t
