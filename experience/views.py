"""
Experience app views

Endpoints for reading and editing the authenticated candidate's work
experiences.
"""
from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsCandidate

from .aggregates import ExperienceUpdateData, WorkExperienceData
from .serializers import (
    AccomplishmentSerializer,
    ExperienceUpdateSerializer,
    WorkExperienceInputSerializer,
    WorkExperienceSerializer,
)
from .services import ExperienceService


class ExperienceView(APIView):
    """
    Read or replace all of the candidate's experiences.

    GET /api/experience/ - Work experiences and standalone accomplishments
    PUT /api/experience/ - Replace everything with the submitted aggregate
    """

    permission_classes = [IsAuthenticated, IsCandidate]

    def get(self, request):
        experiences = ExperienceService.get_experiences(request.user)
        return Response({
            'success': True,
            'data': {
                'work_experiences': WorkExperienceSerializer(experiences['work_experiences'], many=True).data,
                'accomplishments': AccomplishmentSerializer(experiences['accomplishments'], many=True).data,
            },
        })

    def put(self, request):
        serializer = ExperienceUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        aggregate = ExperienceUpdateData.from_payload(serializer.validated_data)
        persisted = ExperienceService.submit(request.user, aggregate)

        return Response({
            'success': True,
            'message': 'Work experience updated successfully',
            'data': {
                'work_experiences_count': len(persisted.work_experience_ids),
                'accomplishments_count': persisted.accomplishments_count,
                'updated_at': timezone.now(),
                **persisted.as_dict(),
            },
        })


class ExperienceAddView(APIView):
    """
    POST /api/experience/add/ - Add one work experience with accomplishments
    """

    permission_classes = [IsAuthenticated, IsCandidate]

    def post(self, request):
        serializer = WorkExperienceInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = WorkExperienceData.from_payload(serializer.validated_data)
        experience = ExperienceService.add_experience(request.user, data)

        return Response(
            {
                'success': True,
                'message': 'Experience added successfully',
                'data': {
                    'id': str(experience.id),
                    'accomplishments_count': len(data.accomplishments),
                    'created_at': experience.created_at,
                },
            },
            status=status.HTTP_201_CREATED,
        )


class ExperienceDetailView(APIView):
    """
    GET /api/experience/{id}/ - Retrieve one experience
    PUT /api/experience/{id}/ - Update it and replace its accomplishments
    DELETE /api/experience/{id}/ - Delete it with its accomplishments
    """

    permission_classes = [IsAuthenticated, IsCandidate]

    def get(self, request, experience_id):
        experience = ExperienceService.get_experience(request.user, experience_id)
        return Response({
            'success': True,
            'data': WorkExperienceSerializer(experience).data,
        })

    def put(self, request, experience_id):
        serializer = WorkExperienceInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = WorkExperienceData.from_payload(serializer.validated_data)
        experience = ExperienceService.update_experience(request.user, experience_id, data)

        return Response({
            'success': True,
            'message': 'Experience updated successfully',
            'data': {
                'id': str(experience.id),
                'accomplishments_count': len(data.accomplishments),
                'updated_at': experience.updated_at,
            },
        })

    def delete(self, request, experience_id):
        ExperienceService.delete_experience(request.user, experience_id)
        return Response({
            'success': True,
            'message': 'Experience deleted successfully',
        })
