"""
Companies app views

Create and list companies, fetch one company, and list verified companies
for job creation.
"""
import logging

from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsMisOrEmployer
from jobboard.exceptions import ValidationError

from .models import Company
from .serializers import (
    CompanyCreateSerializer,
    CompanyDetailSerializer,
    CompanyListSerializer,
    CompanyOptionSerializer,
)

logger = logging.getLogger(__name__)

MAX_SEARCH_LIMIT = 100


class CompanyListCreateView(generics.ListCreateAPIView):
    """
    List or create companies.

    - GET /api/companies/: id, name, logo_url and industry, sorted by name
    - POST /api/companies/: create a company from name, email, contact, website
    """

    permission_classes = [AllowAny]
    pagination_class = None

    def get_queryset(self):
        return Company.objects.only('id', 'name', 'logo_url', 'industry').order_by('name')

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return CompanyCreateSerializer
        return CompanyListSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        company = serializer.save()
        logger.info("Created company %s (%s)", company.id, company.name)
        return Response(serializer.data, status=status.HTTP_200_OK)


class CompanyDetailView(generics.RetrieveAPIView):
    """
    GET /api/companies/{id}/ - Retrieve one company
    """

    serializer_class = CompanyDetailSerializer
    permission_classes = [IsAuthenticated]
    queryset = Company.objects.all()


class VerifiedCompanyListView(APIView):
    """
    Verified companies offered when creating job postings.

    GET /api/companies/verified/?q=<name fragment>&limit=<n>
    """

    permission_classes = [IsAuthenticated, IsMisOrEmployer]

    def get(self, request):
        queryset = Company.objects.filter(
            verification_status=Company.VerificationStatus.VERIFIED
        ).order_by('name')

        query = request.query_params.get('q', '').strip()
        if query:
            queryset = queryset.filter(name__icontains=query)

        limit = request.query_params.get('limit')
        if limit is not None:
            try:
                limit = int(limit)
            except ValueError:
                raise ValidationError('limit must be an integer')
            if limit < 1 or limit > MAX_SEARCH_LIMIT:
                raise ValidationError(f'limit must be between 1 and {MAX_SEARCH_LIMIT}')
            queryset = queryset[:limit]

        companies = CompanyOptionSerializer(queryset, many=True).data
        body = {'success': True, 'data': companies}
        if not companies:
            body['message'] = 'No verified companies found'
        return Response(body)
