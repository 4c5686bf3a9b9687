"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Request bodies and query strings are validated into Pydantic DTOs;
domain exceptions are translated into DRF exceptions, which the
project exception handler renders in the standard error format.
"""

from __future__ import annotations

from typing import Any, Dict, Type, TypeVar

from django.http import QueryDict
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.pagination import (
    InvalidSortSpecification,
    PageRequest,
    parse_sort_spec,
)
from modules.products.dtos import (
    MAX_BIGINT,
    PriceRangeQuery,
    ProductPageQuery,
    ProductRequestDto,
    ProductResponseDto,
)
from modules.products.exceptions import ProductNotFound
from modules.products.mappers import ProductRequestDtoMapper, ProductResponseDtoMapper
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    ProductRequestSerializer,
    ProductResponseSerializer,
)
from modules.products.services import ProductService

DtoT = TypeVar("DtoT", bound=BaseModel)

PAGE_PARAMETERS = [
    OpenApiParameter("count", OpenApiTypes.INT, description="Page size.", default=20),
    OpenApiParameter("page", OpenApiTypes.INT, description="Zero-based page.", default=0),
    OpenApiParameter(
        "sortBy",
        OpenApiTypes.STR,
        description='Sort spec, e.g. "price:desc;name:asc". Direction defaults to desc.',
        default="id",
    ),
]

PRICE_RANGE_PARAMETERS = [
    OpenApiParameter("from", OpenApiTypes.DECIMAL, required=True),
    OpenApiParameter("to", OpenApiTypes.DECIMAL, required=True),
    *PAGE_PARAMETERS,
]


def _validate(dto_class: Type[DtoT], data: Any) -> DtoT:
    """Validate ``data`` into ``dto_class`` or raise a DRF ``ValidationError``."""
    if isinstance(data, QueryDict):
        data = data.dict()
    try:
        return dto_class.model_validate(data)
    except PydanticValidationError as exc:
        errors: Dict[str, list] = {}
        for error in exc.errors(include_url=False):
            attr = ".".join(str(part) for part in error["loc"]) or "non_field_errors"
            errors.setdefault(attr, []).append(error["msg"])
        raise ValidationError(errors) from exc


def _page_request(query: ProductPageQuery) -> PageRequest:
    try:
        sort = parse_sort_spec(query.sort_by)
    except InvalidSortSpecification as exc:
        raise ValidationError({"sortBy": [str(exc)]}) from exc
    return PageRequest.of(query.page, query.count, sort)


def _product_id(pk: str) -> int | None:
    """Path id as an int, or ``None`` when no stored product can have it."""
    value = int(pk)
    return value if 0 < value <= MAX_BIGINT else None


def _render(dto: ProductResponseDto) -> Dict[str, Any]:
    return dto.model_dump(mode="json")


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductResponseSerializer
    pagination_class = None
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())
        self._request_mapper = ProductRequestDtoMapper()
        self._response_mapper = ProductResponseDtoMapper()

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Create new product",
        request=ProductRequestSerializer,
        responses={201: ProductResponseSerializer},
    )
    def create(self, request: Request) -> Response:
        """POST /products"""
        dto = _validate(ProductRequestDto, request.data)
        product = self._service.save(self._request_mapper.map_to_model(dto))
        out = self._response_mapper.map_to_dto(product)
        return Response(_render(out), status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Update product by id",
        request=ProductRequestSerializer,
        responses={200: ProductResponseSerializer},
    )
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /products/{pk}

        Upsert: the path id always wins over anything in the body, and a
        missing product is created under that id.
        """
        dto = _validate(ProductRequestDto, request.data)
        product = self._request_mapper.map_to_model(dto)
        product_id = _product_id(pk)
        if product_id is None:
            raise ValidationError(
                {"id": [f"Product id must be between 1 and {MAX_BIGINT}."]}
            )
        product.id = product_id
        product = self._service.save(product)
        return Response(_render(self._response_mapper.map_to_dto(product)))

    @extend_schema(summary="Delete product by id", responses={204: None})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /products/{pk}"""
        product_id = _product_id(pk)
        if product_id is not None:
            self._service.delete_by_id(product_id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Retrieve / List
    # ------------------------------------------------------------------

    @extend_schema(summary="Get product by id")
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /products/{pk}"""
        product_id = _product_id(pk)
        if product_id is None:
            raise NotFound(f"Product {pk} not found.")
        try:
            product = self._service.find_by_id(product_id)
        except ProductNotFound as exc:
            raise NotFound(str(exc)) from exc
        return Response(_render(self._response_mapper.map_to_dto(product)))

    @extend_schema(
        summary="Get all products sorted",
        parameters=PAGE_PARAMETERS,
        responses=ProductResponseSerializer(many=True),
    )
    def list(self, request: Request) -> Response:
        """GET /products?count=&page=&sortBy="""
        query = _validate(ProductPageQuery, request.query_params)
        page_request = _page_request(query)
        try:
            products = self._service.find_all(page_request)
        except InvalidSortSpecification as exc:
            raise ValidationError({"sortBy": [str(exc)]}) from exc
        return Response([_render(dto) for dto in self._response_mapper.map_all(products)])

    @extend_schema(
        summary="Get products in price range",
        parameters=PRICE_RANGE_PARAMETERS,
        responses=ProductResponseSerializer(many=True),
    )
    @action(detail=False, methods=["get"], url_path="by-price")
    def by_price(self, request: Request) -> Response:
        """GET /products/by-price?from=&to=&count=&page=&sortBy=

        ``sortBy`` is validated, but the range is returned whole in
        id order: ``count`` and ``page`` are not applied here.
        """
        query = _validate(PriceRangeQuery, request.query_params)
        # TODO: pass the page request to the range query once clients stop
        # relying on receiving the full range in one response.
        _page_request(query)
        products = self._service.find_all_by_price_between(
            query.price_from, query.price_to
        )
        return Response([_render(dto) for dto in self._response_mapper.map_all(products)])
