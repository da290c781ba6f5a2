"""
Project-level API views.
"""
from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .health import probe_database


@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def database_health(request):
    """
    Report whether the database is reachable.

    GET /api/health/db/
    """
    probe = probe_database()
    response_status = status.HTTP_200_OK if probe.success else status.HTTP_500_INTERNAL_SERVER_ERROR
    return Response(probe.as_envelope(), status=response_status)
