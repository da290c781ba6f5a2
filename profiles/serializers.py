"""
Profiles app serializers
"""
from rest_framework import serializers
from .models import CandidateProfile


class CandidateProfileSerializer(serializers.ModelSerializer):
    """
    Candidate profile with counts of the candidate's stored experience.

    The owning user always comes from the request.
    """

    username = serializers.CharField(source='user.username', read_only=True)
    work_experiences_count = serializers.SerializerMethodField()
    accomplishments_count = serializers.SerializerMethodField()

    class Meta:
        model = CandidateProfile
        fields = [
            'id',
            'username',
            'headline',
            'location',
            'bio',
            'work_experiences_count',
            'accomplishments_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'headline': {'max_length': 255},
        }

    def get_work_experiences_count(self, obj) -> int:
        return obj.user.work_experiences.count()

    def get_accomplishments_count(self, obj) -> int:
        return obj.user.accomplishments.count()
