from decimal import Decimal
import logging
from fastapi import HTTPException
from sqlmodel import Session, select
from app.models.menu import MenuItem
from app.models.order import Order, OrderItem, OrderStatus
from app.schemas.order import OrderCreate

logger = logging.getLogger(__name__)


def menu_total(db: Session, data: OrderCreate) -> Decimal:
    """Проверить позиции и посчитать сумму по ценам меню"""
    total = Decimal("0")
    for item_data in data.items:
        product = db.get(MenuItem, item_data.product_id)
        if not product:
            raise HTTPException(status_code=400, detail=f"Menu item {item_data.product_id} not found")
        total += product.price * item_data.quantity
    return total


def create_order(db: Session, data: OrderCreate, user_id: int) -> Order:
    """Создание заказа вместе с позициями в одной транзакции"""
    expected = menu_total(db, data)
    # Сумму не пересчитываем, только фиксируем расхождение
    if expected != data.total_cost:
        logger.warning(
            "Order total mismatch for user %s: client sent %s, menu prices give %s",
            user_id, data.total_cost, expected
        )

    order = Order(
        user_id=user_id,
        total_cost=data.total_cost,
        status=OrderStatus.PENDING,
        delivery_method=data.delivery_method,
        payment_method=data.payment_method,
    )

    try:
        db.add(order)
        db.flush()

        for item_data in data.items:
            db.add(OrderItem(
                order_id=order.id,
                product_id=item_data.product_id,
                quantity=item_data.quantity,
            ))

        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(order)
    logger.info("Order %s placed by user %s (%d items)", order.id, user_id, len(data.items))
    return order


def list_user_orders(db: Session, user_id: int) -> list[Order]:
    stmt = select(Order).where(Order.user_id == user_id).order_by(Order.created_at.desc(), Order.id.desc())
    return list(db.exec(stmt).all())
