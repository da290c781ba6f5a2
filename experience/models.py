"""
Experience app models

WorkExperience and Accomplishment rows owned by a candidate user.

An accomplishment either belongs to one work experience or, when
``work_experience`` is null, stands on its own in the candidate's profile.
"""
import uuid

from django.conf import settings
from django.db import models


class EmploymentType(models.TextChoices):
    FULL_TIME = 'full_time', 'Full time'
    PART_TIME = 'part_time', 'Part time'
    CONTRACT = 'contract', 'Contract'
    INTERNSHIP = 'internship', 'Internship'
    FREELANCE = 'freelance', 'Freelance'
    VOLUNTEER = 'volunteer', 'Volunteer'


class WorkExperience(models.Model):
    """
    One position held by a candidate.

    ``end_date`` stays null while ``is_current`` is true.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    candidate = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='work_experiences',
    )
    title = models.CharField(max_length=255)
    company = models.CharField(max_length=255)
    employment_type = models.CharField(max_length=20, choices=EmploymentType.choices)
    is_current = models.BooleanField(default=False)
    start_date = models.DateField(null=True, blank=True)
    end_date = models.DateField(null=True, blank=True)
    location = models.CharField(max_length=255, null=True, blank=True)
    description = models.TextField(null=True, blank=True)
    job_source = models.CharField(max_length=255, null=True, blank=True)
    skill_ids = models.JSONField(default=list, blank=True)
    media_url = models.URLField(max_length=500, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.title} at {self.company}"

    class Meta:
        verbose_name = 'Work Experience'
        verbose_name_plural = 'Work Experiences'
        ordering = ['-is_current', '-start_date', 'created_at']


class Accomplishment(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    candidate = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='accomplishments',
    )
    work_experience = models.ForeignKey(
        WorkExperience,
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name='accomplishments',
    )
    title = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    # Submission order within the parent (or among standalone accomplishments)
    position = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.title

    class Meta:
        verbose_name = 'Accomplishment'
        verbose_name_plural = 'Accomplishments'
        ordering = ['position', 'created_at']
