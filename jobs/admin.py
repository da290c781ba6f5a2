from django.contrib import admin
from .models import JobPosting


@admin.register(JobPosting)
class JobPostingAdmin(admin.ModelAdmin):
    """Admin interface for JobPosting."""

    list_display = ['title', 'company', 'status', 'job_type', 'created_by', 'published_at', 'created_at']
    list_filter = ['status', 'job_type', 'remote_type', 'experience_level', 'created_at']
    search_fields = ['title', 'company__name', 'created_by__username', 'location', 'description']
    readonly_fields = ['id', 'published_at', 'views_count', 'created_at', 'updated_at']

    fieldsets = (
        ('Basic Info', {
            'fields': ('id', 'created_by', 'company', 'title', 'status', 'priority_level')
        }),
        ('Content', {
            'fields': ('description', 'requirements', 'responsibilities', 'benefits')
        }),
        ('Details', {
            'fields': ('job_type', 'experience_level', 'location', 'remote_type', 'application_deadline')
        }),
        ('Salary', {
            'fields': ('salary_min', 'salary_max', 'currency', 'salary_type'),
            'classes': ('collapse',),
        }),
        ('Metadata', {
            'fields': ('published_at', 'views_count', 'created_at', 'updated_at')
        }),
    )
