"""Order API views.

Exposes ``OrderService`` via HTTP using a DRF ViewSet.  The service is
a coroutine; the view drives it with ``async_to_sync``.  Placement
failures are translated into client-error responses; the view never
swallows generic exceptions.
"""

from __future__ import annotations

from typing import Dict, Type

from asgiref.sync import async_to_sync
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.orders.dtos import PlaceOrderDTO
from modules.orders.exceptions import (
    CustomerNotFound,
    InsufficientStock,
    NoProductsFound,
    OrderNotFound,
    OrderPlacementError,
    ProductsNotFound,
    ProductsSoldOut,
)
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import OrderSerializer, PlaceOrderSerializer
from modules.orders.services import OrderService
from modules.products.dtos import ProductQuantityDTO
from modules.products.repositories.django_repository import ProductDjangoRepository

PLACEMENT_ERROR_STATUS: Dict[Type[OrderPlacementError], int] = {
    CustomerNotFound: status.HTTP_404_NOT_FOUND,
    NoProductsFound: status.HTTP_404_NOT_FOUND,
    ProductsNotFound: status.HTTP_404_NOT_FOUND,
    ProductsSoldOut: status.HTTP_409_CONFLICT,
    InsufficientStock: status.HTTP_409_CONFLICT,
}


class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` with injected repositories (DIP).
    All ORM access goes through the service/repository layer.
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            customer_repository=CustomerDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/"""
        serializer = PlaceOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        dto = PlaceOrderDTO(
            customer_id=str(data["customer_id"]),
            items=[
                ProductQuantityDTO(
                    id=str(item["product_id"]),
                    quantity=item["quantity"],
                )
                for item in data["items"]
            ],
        )

        try:
            order = async_to_sync(self._service.place_order)(dto)
        except OrderPlacementError as exc:
            return Response(
                {"detail": str(exc)},
                status=PLACEMENT_ERROR_STATUS.get(
                    type(exc), status.HTTP_400_BAD_REQUEST
                ),
            )

        out = OrderSerializer(order)
        return Response(out.data, status=status.HTTP_201_CREATED)

    # ------------------------------------------------------------------
    # Retrieve
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        try:
            order = async_to_sync(self._service.get_order)(str(pk))
        except OrderNotFound:
            return Response(
                {"detail": "Order not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        serializer = OrderSerializer(order)
        return Response(serializer.data)
