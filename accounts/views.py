"""
Accounts app views
"""
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .models import User
from .permissions import IsAdminOrSelf, IsMisUser
from .serializers import UserSerializer


class UserViewSet(viewsets.ModelViewSet):
    """
    User accounts.

    MIS staff list, create and manage every account. Everyone else only
    reaches their own record, through ``/api/users/me/`` or its id.
    """

    serializer_class = UserSerializer

    def get_queryset(self):
        queryset = User.objects.select_related('candidate_profile').order_by('username')
        user = self.request.user
        if user.is_staff or user.role == User.MIS:
            return queryset
        return queryset.filter(pk=user.pk)

    def get_permissions(self):
        if self.action in ('list', 'create', 'destroy'):
            return [IsAuthenticated(), IsMisUser()]
        if self.action == 'me':
            return [IsAuthenticated()]
        return [IsAuthenticated(), IsAdminOrSelf()]

    @action(detail=False, methods=['get'])
    def me(self, request):
        """
        GET /api/users/me/
        """
        return Response(self.get_serializer(request.user).data)
