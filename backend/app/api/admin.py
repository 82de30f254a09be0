import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, select
from typing import List
from datetime import datetime, timezone
from app.api.auth import UserResponse
from app.api.deps import get_db, admin_required, TokenUser
from app.models.user import User
from app.models.order import Order
from app.schemas.order import OrderResponse, OrderStatusUpdate

router = APIRouter(prefix="/api/admin", tags=["admin"])
logger = logging.getLogger(__name__)


def set_disabled(db: Session, user_id: int, disabled: bool) -> User:
    user = db.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    user.disabled = disabled
    user.updated_at = datetime.now(timezone.utc)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@router.get("/users", response_model=List[UserResponse])
def list_users(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    _: TokenUser = Depends(admin_required)
):
    """Список пользователей (только для админа)"""
    return db.exec(select(User).order_by(User.id).offset(skip).limit(limit)).all()


@router.put("/disable/{user_id}")
def disable_user(
    user_id: int,
    db: Session = Depends(get_db),
    admin: TokenUser = Depends(admin_required)
):
    set_disabled(db, user_id, True)
    logger.info("User %s disabled by admin %s", user_id, admin.id)
    return {"message": "User disabled successfully"}


@router.put("/enable/{user_id}")
def enable_user(
    user_id: int,
    db: Session = Depends(get_db),
    admin: TokenUser = Depends(admin_required)
):
    set_disabled(db, user_id, False)
    logger.info("User %s enabled by admin %s", user_id, admin.id)
    return {"message": "User enabled successfully"}


@router.patch("/orders/{order_id}", response_model=OrderResponse)
def update_order_status(
    order_id: int,
    data: OrderStatusUpdate,
    db: Session = Depends(get_db),
    admin: TokenUser = Depends(admin_required)
):
    """Обновить статус заказа (админ)"""
    order = db.get(Order, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")

    order.status = data.status
    order.updated_at = datetime.now(timezone.utc)

    db.add(order)
    db.commit()
    db.refresh(order)

    logger.info("Order %s set to %s by admin %s", order_id, data.status.value, admin.id)
    return order
