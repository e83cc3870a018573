"""Product DRF serializers.

Describe the camelCase wire format for the OpenAPI schema.  Payloads are
parsed into ``ProductDTO``; these serializers never touch the database.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.categories.serializers import CategorySerializer


class ProductSerializer(serializers.Serializer):
    """Product resource as exchanged over HTTP."""

    productId = serializers.IntegerField(required=False, allow_null=True)
    productTitle = serializers.CharField()
    imageUrl = serializers.CharField()
    sku = serializers.CharField()
    priceUnit = serializers.FloatField()
    quantity = serializers.IntegerField()
    category = CategorySerializer()


class ProductCollectionSerializer(serializers.Serializer):
    collection = ProductSerializer(many=True)
