"""DTO mapping adapters for the Product resource."""

from __future__ import annotations

from modules.core.mappers import RequestDtoMapper, ResponseDtoMapper
from modules.products.dtos import ProductRequestDto, ProductResponseDto
from modules.products.models import Product


class ProductRequestDtoMapper(RequestDtoMapper[ProductRequestDto, Product]):
    def map_to_model(self, dto: ProductRequestDto) -> Product:
        return Product(name=dto.name, price=dto.price)


class ProductResponseDtoMapper(ResponseDtoMapper[ProductResponseDto, Product]):
    def map_to_dto(self, model: Product) -> ProductResponseDto:
        return ProductResponseDto(id=model.id, name=model.name, price=model.price)
