import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import update, delete
from sqlmodel import Session, select, col, or_
from typing import Optional, List
from app.api.deps import get_db, admin_required, TokenUser
from app.models.menu import MenuItem
from app.schemas.menu import MenuItemResponse, MenuItemCreate, MenuItemUpdate

router = APIRouter(prefix="/api/menu", tags=["menu"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[MenuItemResponse])
def list_menu(db: Session = Depends(get_db)):
    """Всё меню, без фильтров и пагинации"""
    return db.exec(select(MenuItem).order_by(MenuItem.id)).all()


@router.get("/search", response_model=List[MenuItemResponse])
def search_menu(
    q: Optional[str] = Query(None, description="Search keyword (name or category)"),
    db: Session = Depends(get_db)
):
    """Поиск по названию или категории, без учёта регистра"""
    if not q or not q.strip():
        raise HTTPException(status_code=400, detail="Search query required")

    search = f"%{q.strip()}%"
    stmt = select(MenuItem).where(
        or_(col(MenuItem.name).ilike(search), col(MenuItem.category).ilike(search))
    ).order_by(MenuItem.id)
    return db.exec(stmt).all()


@router.post("")
def create_menu_item(
    data: MenuItemCreate,
    db: Session = Depends(get_db),
    admin: TokenUser = Depends(admin_required)
):
    item = MenuItem(**data.model_dump())
    db.add(item)
    db.commit()
    db.refresh(item)

    logger.info("Menu item %s created by admin %s", item.id, admin.id)
    return {"id": item.id}


@router.put("/{item_id}")
def update_menu_item(
    item_id: int,
    data: MenuItemUpdate,
    db: Session = Depends(get_db),
    admin: TokenUser = Depends(admin_required)
):
    # UPDATE по id без проверки существования
    update_data = data.model_dump(exclude_unset=True)
    if not update_data:
        raise HTTPException(status_code=400, detail="No fields to update")

    db.execute(update(MenuItem).where(MenuItem.id == item_id).values(**update_data))
    db.commit()

    logger.info("Menu item %s updated by admin %s", item_id, admin.id)
    return {"message": "Menu item updated"}


@router.delete("/{item_id}")
def delete_menu_item(
    item_id: int,
    db: Session = Depends(get_db),
    admin: TokenUser = Depends(admin_required)
):
    # Несуществующий id тоже считается успехом
    db.execute(delete(MenuItem).where(MenuItem.id == item_id))
    db.commit()

    logger.info("Menu item %s deleted by admin %s", item_id, admin.id)
    return {"message": "Menu item deleted"}
