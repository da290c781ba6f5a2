"""
Profiles app views

ViewSet for CandidateProfile management.
"""
from rest_framework import mixins, viewsets
from rest_framework.permissions import IsAuthenticated

from accounts.models import User
from accounts.permissions import IsCandidate
from jobboard.exceptions import ValidationError

from .models import CandidateProfile
from .serializers import CandidateProfileSerializer


class CandidateProfileViewSet(
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.ListModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for CandidateProfile.

    - Candidates create, read and update their own profile
    - MIS users can list and read all profiles
    """

    serializer_class = CandidateProfileSerializer

    def get_permissions(self):
        if self.action in ('create', 'update', 'partial_update'):
            return [IsAuthenticated(), IsCandidate()]
        return [IsAuthenticated()]

    def get_queryset(self):
        """
        Filter queryset based on user role.
        - MIS users see all profiles
        - Everyone else sees only their own profile
        """
        queryset = CandidateProfile.objects.select_related('user').order_by('id')
        if self.request.user.role == User.MIS:
            return queryset
        return queryset.filter(user=self.request.user)

    def perform_create(self, serializer):
        """Automatically set user from request."""
        if CandidateProfile.objects.filter(user=self.request.user).exists():
            raise ValidationError('Candidate profile already exists')
        serializer.save(user=self.request.user)
