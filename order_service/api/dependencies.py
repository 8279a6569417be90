"""
FastAPI dependencies.

This module provides:
- Access to the container built at startup
- Use case providers for the order routes
"""

from typing import Annotated

from fastapi import Depends, Request

from order_service.application.use_cases.orders import (
    CreateOrderUseCase,
    GetOrderStatusUseCase,
    UpdateOrderStatusUseCase,
)
from order_service.infrastructure.config.container import Container


def get_container(request: Request) -> Container:
    """
    Dependency to get the application container.

    The container is created once by the lifespan and stored in app.state.
    Tests override this dependency with a container built from in-memory
    adapters.
    """
    return request.app.state.container


def get_create_order_use_case(
    container: Container = Depends(get_container),
) -> CreateOrderUseCase:
    return container.create_order


def get_order_status_use_case(
    container: Container = Depends(get_container),
) -> GetOrderStatusUseCase:
    return container.get_order_status


def get_update_order_status_use_case(
    container: Container = Depends(get_container),
) -> UpdateOrderStatusUseCase:
    return container.update_order_status


# Type aliases for cleaner route signatures
ContainerDep = Annotated[Container, Depends(get_container)]
CreateOrderDep = Annotated[CreateOrderUseCase, Depends(get_create_order_use_case)]
GetOrderStatusDep = Annotated[GetOrderStatusUseCase, Depends(get_order_status_use_case)]
UpdateOrderStatusDep = Annotated[
    UpdateOrderStatusUseCase, Depends(get_update_order_status_use_case)
]
