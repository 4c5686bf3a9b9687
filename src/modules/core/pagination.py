"""Sorting and paging primitives shared by list endpoints.

Provides:
- ``Direction``: ascending / descending sort direction.
- ``SortOrder``: a single ``(field, direction)`` pair.
- ``PageRequest``: page number, page size and sort orders for a slice.
- ``parse_sort_spec``: parses ``"field:direction;field:direction"`` strings.

A segment without a direction sorts descending, so ``"id"`` yields
``(id, DESC)`` and ``"name:asc;price"`` yields ``(name, ASC), (price, DESC)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

FIELD_SEPARATOR = ";"
DIRECTION_SEPARATOR = ":"


class InvalidSortSpecification(ValueError):
    """The ``sortBy`` value cannot be turned into sort orders."""


class Direction(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def from_token(cls, token: str) -> Direction:
        """Parse a direction token.

        Only ``ASC``/``DESC`` and their lowercase forms are recognised.
        """
        if token in _DIRECTION_TOKENS:
            return _DIRECTION_TOKENS[token]
        raise InvalidSortSpecification(
            f"Invalid sort direction '{token}'. Use one of: asc, desc."
        )


_DIRECTION_TOKENS = {
    "ASC": Direction.ASC,
    "asc": Direction.ASC,
    "DESC": Direction.DESC,
    "desc": Direction.DESC,
}


@dataclass(frozen=True)
class SortOrder:
    field: str
    direction: Direction = Direction.DESC

    def to_ordering(self) -> str:
        """Django ``order_by`` expression, e.g. ``"-price"``."""
        prefix = "-" if self.direction is Direction.DESC else ""
        return f"{prefix}{self.field}"


@dataclass(frozen=True)
class PageRequest:
    """A bounded, ordered slice of a result set (zero-based ``page``)."""

    page: int = 0
    size: int = 20
    sort: Tuple[SortOrder, ...] = ()

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("Page index must not be less than zero.")
        if self.size < 1:
            raise ValueError("Page size must not be less than one.")

    @classmethod
    def of(cls, page: int, size: int, sort: Iterable[SortOrder] = ()) -> PageRequest:
        return cls(page=page, size=size, sort=tuple(sort))

    @property
    def offset(self) -> int:
        return self.page * self.size

    def orderings(self) -> List[str]:
        return [order.to_ordering() for order in self.sort]


def parse_sort_spec(sort_by: str) -> Tuple[SortOrder, ...]:
    """Parse a sort specification into an ordered tuple of ``SortOrder``.

    Each ``;``-separated segment is inspected on its own: ``field:direction``
    uses the given direction, a bare ``field`` defaults to descending.

    Raises:
        InvalidSortSpecification: on an empty field or unknown direction.
    """
    if DIRECTION_SEPARATOR not in sort_by:
        return (SortOrder(_clean_field(sort_by), Direction.DESC),)

    orders: List[SortOrder] = []
    for segment in sort_by.split(FIELD_SEPARATOR):
        if not segment.strip():
            continue
        if DIRECTION_SEPARATOR in segment:
            parts = segment.split(DIRECTION_SEPARATOR)
            orders.append(
                SortOrder(_clean_field(parts[0]), Direction.from_token(parts[1].strip()))
            )
        else:
            orders.append(SortOrder(_clean_field(segment), Direction.DESC))
    return tuple(orders)


def _clean_field(name: str) -> str:
    name = name.strip()
    if not name:
        raise InvalidSortSpecification("Sort field must not be empty.")
    return name
