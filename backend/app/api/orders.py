from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List
from app.api.deps import get_db, get_current_user, TokenUser
from app.models.user import User
from app.schemas.order import OrderCreate, OrderResponse
from app.services.orders import create_order, list_user_orders

router = APIRouter(prefix="/api/orders", tags=["orders"])


def ensure_owner_or_admin(current_user: TokenUser, user_id: int) -> None:
    if current_user.id != user_id and not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access to another user's orders is not allowed"
        )


@router.post("")
def place_order(
    data: OrderCreate,
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user)
):
    """Оформить заказ (по умолчанию на текущего пользователя)"""
    user_id = data.user_id if data.user_id is not None else current_user.id
    ensure_owner_or_admin(current_user, user_id)
    if not db.get(User, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    order = create_order(db, data, user_id)
    return {"message": "Order placed successfully", "orderId": order.id}


@router.get("/{user_id}", response_model=List[OrderResponse])
def get_user_orders(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user)
):
    """Заказы пользователя: свои или любые для админа"""
    ensure_owner_or_admin(current_user, user_id)
    return list_user_orders(db, user_id)
