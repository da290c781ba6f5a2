from django.contrib import admin
from .models import Accomplishment, WorkExperience


class AccomplishmentInline(admin.TabularInline):
    model = Accomplishment
    fields = ['title', 'description', 'position']
    extra = 0


@admin.register(WorkExperience)
class WorkExperienceAdmin(admin.ModelAdmin):
    """Admin interface for WorkExperience."""

    list_display = ['title', 'company', 'candidate', 'employment_type', 'is_current', 'start_date', 'end_date']
    list_filter = ['employment_type', 'is_current']
    search_fields = ['title', 'company', 'candidate__username', 'candidate__email']
    readonly_fields = ['id', 'created_at', 'updated_at']
    inlines = [AccomplishmentInline]

    def save_formset(self, request, form, formset, change):
        """Inline accomplishments belong to the experience's candidate."""
        instances = formset.save(commit=False)
        for obj in formset.deleted_objects:
            obj.delete()
        for instance in instances:
            if isinstance(instance, Accomplishment) and instance.candidate_id is None:
                instance.candidate = form.instance.candidate
            instance.save()
        formset.save_m2m()


@admin.register(Accomplishment)
class AccomplishmentAdmin(admin.ModelAdmin):
    list_display = ['title', 'candidate', 'work_experience', 'position', 'created_at']
    search_fields = ['title', 'candidate__username']
    readonly_fields = ['id', 'created_at', 'updated_at']
