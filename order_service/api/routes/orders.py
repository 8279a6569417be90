"""
Order API routes.

This module provides RESTful API endpoints for order tracking:
- POST /api/v1/orders - Create new order
- GET /api/v1/orders/{order_id} - Get order status
- PATCH /api/v1/orders/{order_id}/status - Advance order to its next status
"""

from typing import Optional

from fastapi import APIRouter, Body, status

from order_service.api.dependencies import (
    CreateOrderDep,
    GetOrderStatusDep,
    UpdateOrderStatusDep,
)
from order_service.application.dto.order_dto import (
    CreateOrderInput,
    CreateOrderOutput,
    OrderStatusOutput,
    UpdateOrderStatusOutput,
)

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post(
    "",
    response_model=CreateOrderOutput,
    status_code=status.HTTP_201_CREATED,
)
async def create_order(
    use_case: CreateOrderDep,
    order_data: Optional[CreateOrderInput] = Body(None),
) -> CreateOrderOutput:
    """
    Create a new order in status `created`.

    The request body is optional. When `id` is omitted the service
    generates one.

    **Example**:
    ```
    POST /api/v1/orders
    {"id": "order-42"}
    ```

    **Errors**:
    - `400 Bad Request`: Supplied id is blank
    - `503 Service Unavailable`: Store or broker unavailable
    """
    return await use_case.execute(order_data)


@router.get("/{order_id}", response_model=OrderStatusOutput)
async def get_order(order_id: str, use_case: GetOrderStatusDep) -> OrderStatusOutput:
    """
    Get an order's current status.

    **Returns**: Status, timestamps, and whether the order can still advance.

    **Errors**:
    - `404 Not Found`: Order doesn't exist
    """
    return await use_case.execute(order_id)


@router.patch("/{order_id}/status", response_model=UpdateOrderStatusOutput)
async def advance_order_status(
    order_id: str, use_case: UpdateOrderStatusDep
) -> UpdateOrderStatusOutput:
    """
    Advance an order one step: created, processing, shipped, delivered.

    The target status is not chosen by the caller.

    **Errors**:
    - `400 Bad Request`: Order is already delivered
    - `404 Not Found`: Order doesn't exist
    - `409 Conflict`: Another request advanced the order first
    """
    return await use_case.execute(order_id)
