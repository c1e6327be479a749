"""Customer API views.

Exposes ``CustomerService`` via HTTP using a DRF ViewSet.  The service
is a coroutine; the view drives it with ``async_to_sync``.
"""

from __future__ import annotations

from asgiref.sync import async_to_sync
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.customers.dtos import CreateCustomerDTO
from modules.customers.exceptions import CustomerAlreadyExists
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CreateCustomerSerializer, CustomerSerializer
from modules.customers.services import CustomerService


class CustomerViewSet(GenericViewSet):
    """ViewSet for customer registration."""

    queryset = Customer.objects.all()
    serializer_class = CustomerSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        serializer = CreateCustomerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        dto = CreateCustomerDTO(**serializer.validated_data)
        try:
            customer = async_to_sync(self._service.create_customer)(dto)
        except CustomerAlreadyExists as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_409_CONFLICT,
            )

        out = CustomerSerializer(customer)
        return Response(out.data, status=status.HTTP_201_CREATED)
