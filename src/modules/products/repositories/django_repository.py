"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising, and the Service Layer decides how to translate a
missing entity into an API response.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.core.pagination import InvalidSortSpecification, PageRequest
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

SORTABLE_FIELDS = frozenset({"id", "name", "price"})


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key, or ``None``."""
        return Product.objects.filter(pk=id).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """List products with optional Django ORM look-ups.

        Examples of valid filters::

            {"name__icontains": "widget"}
            {"price__lte": Decimal("10.00")}
        """
        queryset = Product.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist a product.

        Without an id this inserts; with an id Django updates the row and
        inserts it under that id when no row matched.
        """
        entity.save()
        logger.info("product.saved", product_id=entity.id)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` if none existed.
        """
        deleted, _ = Product.objects.filter(pk=id).delete()
        return deleted > 0

    def find_by_price_between(
        self, price_from: Decimal, price_to: Decimal
    ) -> List[Product]:
        return self.list({"price__gte": price_from, "price__lte": price_to})

    def find_page(self, page_request: PageRequest) -> List[Product]:
        unknown = [o.field for o in page_request.sort if o.field not in SORTABLE_FIELDS]
        if unknown:
            raise InvalidSortSpecification(
                f"Cannot sort by {', '.join(unknown)}. "
                f"Sortable fields: {', '.join(sorted(SORTABLE_FIELDS))}."
            )
        queryset = Product.objects.all()
        if page_request.sort:
            queryset = queryset.order_by(*page_request.orderings())
        start = page_request.offset
        return list(queryset[start : start + page_request.size])
