"""
Experience app serializers

Input serializers describe the accepted request bodies; model serializers
render stored experiences. Field-level rules (required titles, employment
types, date order) live in ExperienceService so they apply to every caller.
"""
from rest_framework import serializers
from .models import Accomplishment, WorkExperience


class AccomplishmentInputSerializer(serializers.Serializer):
    id = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    title = serializers.CharField(allow_blank=True, max_length=255)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    temp_work_experience_index = serializers.IntegerField(required=False, allow_null=True)


class WorkExperienceInputSerializer(serializers.Serializer):
    """
    Body of a single work experience.

    Dates are accepted as text (``YYYY-MM-DD``, ``YYYY-MM`` or an ISO
    datetime) and checked by the service.
    """

    id = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    title = serializers.CharField(allow_blank=True, max_length=255)
    company = serializers.CharField(allow_blank=True, max_length=255)
    employment_type = serializers.CharField(allow_blank=True, max_length=20)
    is_current = serializers.BooleanField(default=False)
    start_date = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    end_date = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    location = serializers.CharField(required=False, allow_null=True, allow_blank=True, max_length=255)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    job_source = serializers.CharField(required=False, allow_null=True, allow_blank=True, max_length=255)
    skill_ids = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    media_url = serializers.URLField(required=False, allow_null=True, allow_blank=True, max_length=500)
    accomplishments = AccomplishmentInputSerializer(many=True, required=False)


class ExperienceUpdateSerializer(serializers.Serializer):
    """
    Body of a full experience edit: every work experience plus top-level
    accomplishments linked by ``temp_work_experience_index``.
    """

    work_experiences = WorkExperienceInputSerializer(many=True, required=False)
    accomplishments = AccomplishmentInputSerializer(many=True, required=False)


class AccomplishmentSerializer(serializers.ModelSerializer):

    class Meta:
        model = Accomplishment
        fields = [
            'id',
            'work_experience',
            'title',
            'description',
            'position',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class WorkExperienceSerializer(serializers.ModelSerializer):
    """Stored work experience with its accomplishments."""

    accomplishments = AccomplishmentSerializer(many=True, read_only=True)

    class Meta:
        model = WorkExperience
        fields = [
            'id',
            'title',
            'company',
            'employment_type',
            'is_current',
            'start_date',
            'end_date',
            'location',
            'description',
            'job_source',
            'skill_ids',
            'media_url',
            'accomplishments',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields
