"""
Jobs app serializers

Serializers for JobPosting model.
"""
from rest_framework import serializers

from companies.models import Company
from companies.serializers import CompanyListSerializer
from .models import JobPosting


class JobPostingSerializer(serializers.ModelSerializer):
    """
    Serializer for JobPosting.

    The creator is set from the request; the company is referenced by id
    and rendered as its listing projection.
    """

    company_id = serializers.PrimaryKeyRelatedField(
        source='company',
        queryset=Company.objects.all(),
        required=False,
        allow_null=True,
    )
    company = CompanyListSerializer(read_only=True)

    class Meta:
        model = JobPosting
        fields = [
            'id',
            'created_by',
            'company_id',
            'company',
            'title',
            'description',
            'requirements',
            'responsibilities',
            'benefits',
            'job_type',
            'experience_level',
            'location',
            'remote_type',
            'salary_min',
            'salary_max',
            'currency',
            'salary_type',
            'application_deadline',
            'status',
            'published_at',
            'priority_level',
            'views_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = [
            'id',
            'created_by',
            'published_at',
            'views_count',
            'created_at',
            'updated_at',
        ]
        extra_kwargs = {
            'title': {'min_length': 5},
            'description': {'min_length': 50, 'max_length': 10000},
            'priority_level': {'max_value': 10},
        }

    def validate_currency(self, value):
        if len(value) != 3 or not value.isalpha():
            raise serializers.ValidationError('Currency must be a 3-letter code.')
        return value.upper()

    def validate(self, attrs):
        """
        Ensure the salary range is ordered.
        """
        salary_min = attrs.get('salary_min')
        salary_max = attrs.get('salary_max')

        # When updating, fall back to existing values if not supplied
        if self.instance:
            salary_min = salary_min if 'salary_min' in attrs else self.instance.salary_min
            salary_max = salary_max if 'salary_max' in attrs else self.instance.salary_max

        if salary_min is not None and salary_max is not None and salary_max < salary_min:
            raise serializers.ValidationError(
                'Maximum salary must be greater than or equal to minimum salary.'
            )

        return attrs

    def create(self, validated_data):
        status = validated_data.pop('status', JobPosting.Status.DRAFT)
        job = JobPosting(**validated_data)
        job.set_status(status)
        job.save()
        return job

    def update(self, instance, validated_data):
        status = validated_data.pop('status', None)
        if status:
            instance.set_status(status)
        return super().update(instance, validated_data)


class JobStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=JobPosting.Status.choices)
