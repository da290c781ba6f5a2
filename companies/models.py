"""
Companies app models

Company model for employers referenced by job postings.
"""
import uuid

from django.db import models


class Company(models.Model):
    """
    Store a hiring company.

    Companies are created through the API and later verified by MIS staff;
    only verified companies are offered when creating job postings.
    """

    class VerificationStatus(models.TextChoices):
        PENDING = 'pending', 'Pending'
        VERIFIED = 'verified', 'Verified'
        REJECTED = 'rejected', 'Rejected'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    email = models.EmailField(blank=True)
    contact = models.CharField(max_length=50, blank=True)
    website = models.CharField(max_length=255, blank=True)
    logo_url = models.URLField(blank=True, null=True)
    industry = models.CharField(max_length=100, blank=True, null=True)
    verification_status = models.CharField(
        max_length=20,
        choices=VerificationStatus.choices,
        default=VerificationStatus.PENDING,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name

    class Meta:
        verbose_name = 'Company'
        verbose_name_plural = 'Companies'
        ordering = ['name']
