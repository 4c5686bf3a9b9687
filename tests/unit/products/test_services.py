"""Unit tests for ProductService.

Covers:
- save: insert and upsert delegate to the repository.
- find_by_id: happy path, not found.
- delete_by_id: existing and missing ids.
- find_all / find_all_by_price_between: delegation to repository.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.core.pagination import Direction, PageRequest, SortOrder
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


# ===========================================================================
# save
# ===========================================================================


class TestSave:
    def test_new_product_is_passed_to_repository(self, service, mock_repo):
        def _assign_id(product):
            product.id = 1
            return product

        mock_repo.save.side_effect = _assign_id
        product = Product(name="Widget", price=Decimal("19.99"))

        saved = service.save(product)

        mock_repo.save.assert_called_once_with(product)
        assert saved.id == 1

    def test_product_with_id_is_saved_without_lookup(self, service, mock_repo):
        mock_repo.save.side_effect = lambda p: p
        product = Product(id=42, name="Widget", price=Decimal("19.99"))

        saved = service.save(product)

        assert saved.id == 42
        mock_repo.get_by_id.assert_not_called()


# ===========================================================================
# find_by_id
# ===========================================================================


class TestFindById:
    def test_success(self, service, mock_repo):
        existing = Product(id=3, name="Widget", price=Decimal("1.00"))
        mock_repo.get_by_id.return_value = existing

        assert service.find_by_id(3) is existing
        mock_repo.get_by_id.assert_called_once_with(3)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound, match="404"):
            service.find_by_id(404)


# ===========================================================================
# delete_by_id
# ===========================================================================


class TestDeleteById:
    def test_delegates_to_repository(self, service, mock_repo):
        mock_repo.delete.return_value = True

        service.delete_by_id(5)

        mock_repo.delete.assert_called_once_with(5)

    def test_missing_id_does_not_raise(self, service, mock_repo):
        mock_repo.delete.return_value = False

        service.delete_by_id(5)

        mock_repo.delete.assert_called_once_with(5)


# ===========================================================================
# Listings
# ===========================================================================


class TestFindAll:
    def test_with_page_request_uses_find_page(self, service, mock_repo):
        page = PageRequest.of(1, 10, [SortOrder("price", Direction.ASC)])
        mock_repo.find_page.return_value = []

        service.find_all(page)

        mock_repo.find_page.assert_called_once_with(page)
        mock_repo.list.assert_not_called()

    def test_without_page_request_lists_everything(self, service, mock_repo):
        products = [Product(id=1, name="A", price=Decimal("1.00"))]
        mock_repo.list.return_value = products

        assert service.find_all() == products
        mock_repo.find_page.assert_not_called()


class TestFindAllByPriceBetween:
    def test_delegates_bounds(self, service, mock_repo):
        mock_repo.find_by_price_between.return_value = []

        service.find_all_by_price_between(Decimal("1"), Decimal("5"))

        mock_repo.find_by_price_between.assert_called_once_with(
            Decimal("1"), Decimal("5")
        )
