"""
Profiles app models

CandidateProfile model for storing a candidate's headline and location.
"""
from django.conf import settings
from django.db import models


class CandidateProfile(models.Model):
    """
    Profile model for candidates.

    Work experiences hang off the candidate user; the profile must exist
    before experiences can be written, and its updated_at is bumped on every
    experience change.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='candidate_profile',
    )
    headline = models.CharField(max_length=255, blank=True)
    location = models.CharField(max_length=255, blank=True)
    bio = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Profile for {self.user.username}"

    class Meta:
        verbose_name = 'Candidate Profile'
        verbose_name_plural = 'Candidate Profiles'
