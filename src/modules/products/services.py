"""Product service layer (Use Cases).

Thin persistence service for the Product aggregate, delegating storage
to the injected ``IProductRepository``.  ``save`` is an upsert: callers
decide whether a product is new by leaving ``id`` unset.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.core.pagination import PageRequest
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, product: Product) -> Product:
        """Insert a product without an id, or overwrite the one with its id."""
        is_new = product.id is None
        product = self._repo.save(product)
        logger.info(
            "product.created" if is_new else "product.upserted",
            product_id=product.id,
        )
        return product

    @transaction.atomic
    def delete_by_id(self, id: int) -> None:
        """Delete a product; deleting a missing id is a no-op."""
        if self._repo.delete(id):
            logger.info("product.deleted", product_id=id)
        else:
            logger.warning("product.delete_missing", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_id(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.retrieved", product_id=id)
        return product

    def find_all_by_price_between(
        self, price_from: Decimal, price_to: Decimal
    ) -> List[Product]:
        products = self._repo.find_by_price_between(price_from, price_to)
        logger.info(
            "product.listed_by_price",
            price_from=str(price_from),
            price_to=str(price_to),
            count=len(products),
        )
        return products

    def find_all(self, page_request: Optional[PageRequest] = None) -> List[Product]:
        """Return one page of products, or every product without a page request."""
        if page_request is None:
            products = self._repo.list()
        else:
            products = self._repo.find_page(page_request)
        logger.info("product.listed", count=len(products))
        return products
