"""
Jobs app models

JobPosting model for vacancies created by MIS staff and listed publicly
once published.
"""
import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone


class JobPosting(models.Model):
    """
    Store a job vacancy.

    A posting starts as a draft; only published postings appear in the
    public listing. ``published_at`` is stamped the first time the posting
    is published.
    """

    class JobType(models.TextChoices):
        FULL_TIME = 'full_time', 'Full time'
        PART_TIME = 'part_time', 'Part time'
        CONTRACT = 'contract', 'Contract'
        INTERNSHIP = 'internship', 'Internship'
        FREELANCE = 'freelance', 'Freelance'

    class ExperienceLevel(models.TextChoices):
        ENTRY = 'entry', 'Entry'
        JUNIOR = 'junior', 'Junior'
        MID = 'mid', 'Mid'
        SENIOR = 'senior', 'Senior'
        LEAD = 'lead', 'Lead'
        PRINCIPAL = 'principal', 'Principal'

    class RemoteType(models.TextChoices):
        REMOTE = 'remote', 'Remote'
        HYBRID = 'hybrid', 'Hybrid'
        ONSITE = 'onsite', 'Onsite'

    class SalaryType(models.TextChoices):
        ANNUAL = 'annual', 'Annual'
        MONTHLY = 'monthly', 'Monthly'
        WEEKLY = 'weekly', 'Weekly'
        DAILY = 'daily', 'Daily'
        HOURLY = 'hourly', 'Hourly'

    class Status(models.TextChoices):
        DRAFT = 'draft', 'Draft'
        PUBLISHED = 'published', 'Published'
        PAUSED = 'paused', 'Paused'
        CLOSED = 'closed', 'Closed'
        ARCHIVED = 'archived', 'Archived'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='job_postings',
    )
    company = models.ForeignKey(
        'companies.Company',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='job_postings',
    )
    title = models.CharField(max_length=200)
    description = models.TextField()
    requirements = models.TextField(blank=True)
    responsibilities = models.TextField(blank=True)
    benefits = models.TextField(blank=True)
    job_type = models.CharField(max_length=20, choices=JobType.choices, default=JobType.FULL_TIME)
    experience_level = models.CharField(
        max_length=20,
        choices=ExperienceLevel.choices,
        default=ExperienceLevel.MID,
    )
    location = models.CharField(max_length=255, blank=True)
    remote_type = models.CharField(max_length=20, choices=RemoteType.choices, default=RemoteType.ONSITE)
    salary_min = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    salary_max = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    currency = models.CharField(max_length=3, default='USD')
    salary_type = models.CharField(max_length=20, choices=SalaryType.choices, default=SalaryType.ANNUAL)
    application_deadline = models.DateField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.DRAFT)
    published_at = models.DateTimeField(null=True, blank=True)
    priority_level = models.PositiveSmallIntegerField(default=0)
    views_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        company = self.company.name if self.company_id else "Unknown Company"
        return f"{self.title} at {company}"

    def set_status(self, status: str) -> None:
        """Change status, stamping published_at on first publication."""
        self.status = status
        if status == self.Status.PUBLISHED and self.published_at is None:
            self.published_at = timezone.now()

    class Meta:
        verbose_name = 'Job Posting'
        verbose_name_plural = 'Job Postings'
        ordering = ['-created_at']
