from django.contrib import admin
from .models import Company


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    """Admin interface for Company."""

    list_display = ['name', 'industry', 'email', 'verification_status', 'created_at']
    list_filter = ['verification_status', 'industry']
    search_fields = ['name', 'email', 'website']
    readonly_fields = ['id', 'created_at', 'updated_at']

    fieldsets = (
        ('Basic Info', {
            'fields': ('id', 'name', 'industry', 'logo_url')
        }),
        ('Contact', {
            'fields': ('email', 'contact', 'website')
        }),
        ('Verification', {
            'fields': ('verification_status',)
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at')
        }),
    )
