"""Product DTOs for the API boundary.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``ProductRequestDto``: body of create and update requests.
- ``ProductResponseDto``: product representation returned to clients.
- ``ProductPageQuery``: paging/sorting query parameters.
- ``PriceRangeQuery``: paging/sorting plus a ``from``/``to`` price range.
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Match the storage format of ``Product``.
NAME_MAX_LENGTH = 255
PRICE_MAX_DIGITS = 19
PRICE_DECIMAL_PLACES = 2
PRICE_QUANTUM = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)

# Largest value a signed 64-bit database integer can hold.
MAX_BIGINT = 2**63 - 1


# ---------------------------------------------------------------------------
# Body DTOs
# ---------------------------------------------------------------------------


class ProductRequestDto(BaseModel):
    """Fields a client may set on a product.

    Any ``id`` in the body is ignored: new products get a server-assigned
    id and updates take the id from the URL.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(max_length=NAME_MAX_LENGTH)
    price: Decimal = Field(
        max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )

    @field_validator("price")
    @classmethod
    def price_to_storage_scale(cls, v: Decimal) -> Decimal:
        """Pad to two places so responses match the stored value (``10.5`` -> ``10.50``)."""
        return v.quantize(PRICE_QUANTUM)


class ProductResponseDto(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: Decimal


# ---------------------------------------------------------------------------
# Query DTOs
# ---------------------------------------------------------------------------


def _default_page_size() -> int:
    return settings.DEFAULT_PAGE_SIZE


class ProductPageQuery(BaseModel):
    """``?count=&page=&sortBy=`` for product listings."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    count: int = Field(default_factory=_default_page_size, ge=1)
    page: int = Field(default=0, ge=0)
    sort_by: str = Field(default="id", alias="sortBy", min_length=1)

    @field_validator("count")
    @classmethod
    def count_within_max_page_size(cls, v: int) -> int:
        if v > settings.MAX_PAGE_SIZE:
            raise ValueError(f"count must not exceed {settings.MAX_PAGE_SIZE}.")
        return v

    @model_validator(mode="after")
    def page_end_fits_database_integer(self) -> ProductPageQuery:
        if (self.page + 1) * self.count > MAX_BIGINT:
            raise ValueError("page is out of range.")
        return self


class PriceRangeQuery(ProductPageQuery):
    """``?from=&to=`` inclusive price bounds plus the listing parameters."""

    price_from: Decimal = Field(alias="from")
    price_to: Decimal = Field(alias="to")
