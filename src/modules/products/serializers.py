"""Product DRF serializers.

Used to describe request and response bodies in the OpenAPI schema.
Request validation and response rendering go through the Pydantic DTOs
in ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.dtos import PRICE_DECIMAL_PLACES, PRICE_MAX_DIGITS


class ProductRequestSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    price = serializers.DecimalField(
        max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )


class ProductResponseSerializer(ProductRequestSerializer):
    id = serializers.IntegerField(read_only=True)
