"""Generic DTO mapper contracts.

The API layer converts between wire DTOs and domain models through these
adapters, so views never copy fields by hand.

- ``RequestDtoMapper[D, M]``: request DTO ``D`` -> model ``M``.
- ``ResponseDtoMapper[D, M]``: model ``M`` -> response DTO ``D``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, TypeVar

D = TypeVar("D")
M = TypeVar("M")


class RequestDtoMapper(ABC, Generic[D, M]):
    @abstractmethod
    def map_to_model(self, dto: D) -> M:
        """Build an unsaved model from a request DTO."""


class ResponseDtoMapper(ABC, Generic[D, M]):
    @abstractmethod
    def map_to_dto(self, model: M) -> D:
        """Build a response DTO from a model instance."""

    def map_all(self, models: Iterable[M]) -> List[D]:
        return [self.map_to_dto(model) for model in models]
