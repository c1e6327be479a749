"""Product API views.

Exposes ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions.
"""

from __future__ import annotations

from asgiref.sync import async_to_sync
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import CreateProductDTO
from modules.products.exceptions import ProductAlreadyExists
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import CreateProductSerializer, ProductSerializer
from modules.products.services import ProductService


class ProductViewSet(GenericViewSet):
    """ViewSet for catalog registration.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        serializer = CreateProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            dto = CreateProductDTO(**serializer.validated_data)
        except PydanticValidationError as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            product = async_to_sync(self._service.create_product)(dto)
        except ProductAlreadyExists as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_409_CONFLICT,
            )

        out = ProductSerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)
