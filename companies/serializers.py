"""
Companies app serializers

One serializer per endpoint shape: create payload, list projection,
verified-company option, and full detail.
"""
from rest_framework import serializers
from .models import Company


class CompanyCreateSerializer(serializers.ModelSerializer):
    """
    Serializer for creating a Company.

    Only ``name`` is required; the store assigns ``id``.
    """

    class Meta:
        model = Company
        fields = ['id', 'name', 'email', 'contact', 'website']
        read_only_fields = ['id']
        extra_kwargs = {
            'email': {'required': False},
            'contact': {'required': False},
            'website': {'required': False},
        }


class CompanyListSerializer(serializers.ModelSerializer):
    """Projection used by the public company listing."""

    class Meta:
        model = Company
        fields = ['id', 'name', 'logo_url', 'industry']
        read_only_fields = fields


class CompanyOptionSerializer(serializers.ModelSerializer):

    class Meta:
        model = Company
        fields = ['id', 'name', 'industry', 'logo_url', 'verification_status']
        read_only_fields = fields


class CompanyDetailSerializer(serializers.ModelSerializer):

    class Meta:
        model = Company
        fields = [
            'id',
            'name',
            'email',
            'contact',
            'website',
            'logo_url',
            'industry',
            'verification_status',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields
