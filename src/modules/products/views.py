"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Input is validated with Pydantic DTOs before it reaches the service;
domain outcomes are translated into HTTP status codes here:

- absent product            -> 404
- SKU collision             -> 409
- insufficient stock        -> 409
- malformed / missing input -> 400

The view never swallows generic exceptions.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import ProductInputDTO, StockQuantityDTO
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService, StockDecreaseStatus

NOT_FOUND_BODY = {"detail": "Product not found."}


def _not_found() -> Response:
    return Response(NOT_FOUND_BODY, status=status.HTTP_404_NOT_FOUND)


def _bad_request(exc: Exception) -> Response:
    return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD and stock operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.  PATCH is deliberately not routed,
    updates always replace the whole product.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    pagination_class = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # Input parsing
    # ------------------------------------------------------------------

    @staticmethod
    def _product_input(data: Any) -> ProductInputDTO:
        if not isinstance(data, dict):
            raise ValueError("Request body must be a JSON object.")
        payload: Dict[str, Any] = {
            "name": data.get("name"),
            "price": data.get("price"),
            "quantity": data.get("quantity"),
            "description": data.get("description"),
            "sku": data.get("sku"),
        }
        return ProductInputDTO(**payload)

    @staticmethod
    def _quantity_param(request: Request) -> int:
        return StockQuantityDTO(quantity=request.query_params.get("quantity")).quantity

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /products"""
        products = self._service.list_products()
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /products/{pk}"""
        product = self._service.get_product(pk) if pk is not None else None
        if product is None:
            return _not_found()
        return Response(ProductSerializer(product).data)

    @action(detail=False, methods=["get"], url_path=r"sku/(?P<sku>[^/]+)")
    def by_sku(self, request: Request, sku: str | None = None) -> Response:
        """GET /products/sku/{sku}"""
        product = self._service.get_product_by_sku(sku) if sku else None
        if product is None:
            return _not_found()
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /products"""
        try:
            dto = self._product_input(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return _bad_request(exc)

        try:
            product = self._service.create_product(dto)
        except ProductAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        out = ProductSerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /products/{pk}"""
        try:
            dto = self._product_input(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return _bad_request(exc)

        if pk is None:
            return _not_found()
        try:
            product = self._service.update_product(pk, dto)
        except ProductAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)
        except ProductNotFound:
            # deleted between the locked read and the write
            return _not_found()
        if product is None:
            return _not_found()

        return Response(ProductSerializer(product).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /products/{pk}"""
        if pk is None or not self._service.delete_product(pk):
            return _not_found()
        return Response(status=status.HTTP_200_OK)

    # ------------------------------------------------------------------
    # Stock
    # ------------------------------------------------------------------

    @action(detail=True, methods=["get"], url_path="check-stock")
    def check_stock(self, request: Request, pk: str | None = None) -> Response:
        """GET /products/{pk}/check-stock?quantity=N

        Responds with a bare JSON boolean; an unknown product is ``false``.
        """
        try:
            quantity = self._quantity_param(request)
        except (PydanticValidationError, ValueError) as exc:
            return _bad_request(exc)
        available = pk is not None and self._service.check_stock(pk, quantity)
        return Response(available)

    @action(detail=True, methods=["post"], url_path="decrease-stock")
    def decrease_stock(self, request: Request, pk: str | None = None) -> Response:
        """POST /products/{pk}/decrease-stock?quantity=N"""
        try:
            quantity = self._quantity_param(request)
        except (PydanticValidationError, ValueError) as exc:
            return _bad_request(exc)

        if pk is None:
            return _not_found()
        try:
            result = self._service.try_decrease_stock(pk, quantity)
        except ValueError as exc:
            return _bad_request(exc)

        if result.status is StockDecreaseStatus.NOT_FOUND:
            return _not_found()
        if result.status is StockDecreaseStatus.INSUFFICIENT_STOCK:
            return Response(
                {
                    "detail": "Insufficient stock.",
                    "available": result.product.quantity,
                    "requested": quantity,
                },
                status=status.HTTP_409_CONFLICT,
            )
        return Response(ProductSerializer(result.product).data)
