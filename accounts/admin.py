from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from profiles.models import CandidateProfile

from .models import User


class CandidateProfileInline(admin.StackedInline):
    model = CandidateProfile
    can_delete = False
    extra = 0


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Django's user admin with the role and candidate profile attached."""

    list_display = ['username', 'email', 'role', 'is_active', 'last_login']
    list_filter = ['role', 'is_active', 'is_staff']
    inlines = [CandidateProfileInline]

    fieldsets = BaseUserAdmin.fieldsets + (('Access', {'fields': ('role',)}),)
    add_fieldsets = BaseUserAdmin.add_fieldsets + (('Access', {'fields': ('role',)}),)
