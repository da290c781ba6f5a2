"""
Accounts app models

Custom User model extending AbstractUser with role-based access.
"""
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Custom user model with a role.

    Extends Django's AbstractUser to add:
    - role: Distinguish between candidates, employers and MIS staff
    """

    CANDIDATE = 'CANDIDATE'
    EMPLOYER = 'EMPLOYER'
    MIS = 'MIS'

    ROLE_CHOICES = [
        (CANDIDATE, 'Candidate'),
        (EMPLOYER, 'Employer'),
        (MIS, 'MIS'),
    ]

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=CANDIDATE,
    )

    def __str__(self):
        return f"{self.username} ({self.role})"

    @property
    def is_candidate(self) -> bool:
        return self.role == self.CANDIDATE

    @property
    def is_mis(self) -> bool:
        return self.role == self.MIS

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'
