"""Category DRF serializers.

Describe the camelCase wire format for the OpenAPI schema.  Parsing and
validation of payloads go through ``CategoryDTO``; these serializers are
never used to write to the database.
"""

from __future__ import annotations

from rest_framework import serializers


class CategorySerializer(serializers.Serializer):
    """Category resource as exchanged over HTTP."""

    categoryId = serializers.IntegerField(required=False, allow_null=True)
    categoryTitle = serializers.CharField()
    imageUrl = serializers.CharField(required=False, allow_null=True)
    parentCategory = serializers.DictField(required=False, allow_null=True, read_only=True)
    subCategories = serializers.ListField(required=False, allow_null=True, read_only=True)


class CategoryCollectionSerializer(serializers.Serializer):
    collection = CategorySerializer(many=True)
