"""
Order SQLAlchemy model.

This is the ORM model for database persistence. Pure SQLAlchemy with no business logic.
Business logic lives in domain.entities.order.Order.
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from order_service.domain.value_objects.order_id import MAX_ORDER_ID_LENGTH
from order_service.domain.value_objects.order_status import OrderStatus
from order_service.infrastructure.adapters.outbound.persistence.postgresql.models.base import Base

_STATUS_VALUES = ", ".join(f"'{status.value}'" for status in OrderStatus)


class OrderModel(Base):
    """
    Order row.

    Attributes:
        id: Order identifier (client supplied or UUID4 string)
        status: Lowercase status token (created, processing, shipped, delivered)
        created_at: When the order was created
        updated_at: When the status last changed
    """

    __tablename__ = "orders"
    __table_args__ = (
        CheckConstraint(f"status IN ({_STATUS_VALUES})", name="status_valid"),
        CheckConstraint("updated_at >= created_at", name="updated_after_created"),
    )

    id: Mapped[str] = mapped_column(
        String(MAX_ORDER_ID_LENGTH),
        primary_key=True,
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"OrderModel(id={self.id}, status={self.status})"
