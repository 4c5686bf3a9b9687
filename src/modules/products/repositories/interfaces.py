"""Product repository interface.

Extends ``IRepository[Product]`` with the range and paged look-ups
used by the listing endpoints.
"""

from __future__ import annotations

from abc import abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.core.pagination import PageRequest
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def find_by_price_between(
        self, price_from: Decimal, price_to: Decimal
    ) -> List[Product]:
        """Products whose price lies in ``[price_from, price_to]``."""

    @abstractmethod
    def find_page(self, page_request: PageRequest) -> List[Product]:
        """One page of products ordered by ``page_request.sort``.

        Raises:
            InvalidSortSpecification: if a sort field is not sortable.
        """
