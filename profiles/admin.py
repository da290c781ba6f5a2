from django.contrib import admin
from .models import CandidateProfile


@admin.register(CandidateProfile)
class CandidateProfileAdmin(admin.ModelAdmin):
    list_display = ['user', 'headline', 'experience_count', 'updated_at']
    search_fields = ['user__username', 'headline', 'location']
    readonly_fields = ['created_at', 'updated_at']

    @admin.display(description='Experiences')
    def experience_count(self, obj):
        return obj.user.work_experiences.count()
