"""
Jobs app views

ViewSet for JobPosting management.
"""
import logging

from django.conf import settings
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import IsMisUser

from .models import JobPosting
from .serializers import JobPostingSerializer, JobStatusSerializer

logger = logging.getLogger(__name__)


class JobPostingPagination(PageNumberPagination):
    page_size = settings.JOBS_PAGE_SIZE
    page_size_query_param = 'limit'
    max_page_size = settings.JOBS_MAX_PAGE_SIZE


class JobPostingViewSet(viewsets.ModelViewSet):
    """
    ViewSet for JobPosting.

    - POST: Create a job posting (MIS only)
    - GET: List the current MIS user's postings, paginated
    - GET {id}: Retrieve a posting
    - PUT/PATCH {id}: Update a posting
    - DELETE {id}: Delete a posting
    - PATCH {id}/status/: Change only the status
    - GET public/: Published postings, open to everyone
    """

    serializer_class = JobPostingSerializer
    pagination_class = JobPostingPagination
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def get_permissions(self):
        if self.action == 'public':
            return [AllowAny()]
        return [IsAuthenticated(), IsMisUser()]

    def get_queryset(self):
        """
        Published postings for the public listing; otherwise only the
        current user's postings.
        """
        queryset = JobPosting.objects.select_related('company')
        if self.action == 'public':
            return queryset.filter(status=JobPosting.Status.PUBLISHED).order_by(
                '-priority_level', '-published_at'
            )
        return queryset.filter(created_by=self.request.user).order_by('-created_at')

    def perform_create(self, serializer):
        """Automatically set creator from request."""
        job = serializer.save(created_by=self.request.user)
        logger.info("Job %s created by user %s with status %s", job.id, self.request.user.pk, job.status)

    @action(detail=False, methods=['get'], authentication_classes=[])
    def public(self, request):
        """
        GET /api/jobs/public/
        """
        queryset = self.get_queryset()
        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = self.get_serializer(page, many=True)
            return self.get_paginated_response(serializer.data)
        serializer = self.get_serializer(queryset, many=True)
        return Response(serializer.data)

    @action(detail=True, methods=['patch'], url_path='status')
    def update_status(self, request, pk=None):
        """
        PATCH /api/jobs/{id}/status/
        """
        job = self.get_object()
        status_serializer = JobStatusSerializer(data=request.data)
        status_serializer.is_valid(raise_exception=True)

        job.set_status(status_serializer.validated_data['status'])
        job.save(update_fields=['status', 'published_at', 'updated_at'])
        logger.info("Job %s status changed to %s", job.id, job.status)

        return Response({
            'success': True,
            'message': 'Job status updated successfully',
            'data': self.get_serializer(job).data,
        })
