import uuid
from unittest import mock

from django.db import OperationalError
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.models import User
from companies.models import Company


class CompanyListCreateViewTests(APITestCase):
    """Company creation and listing."""

    def setUp(self) -> None:
        self.url = reverse('company-list')

    def test_create_returns_stored_company(self) -> None:
        payload = {
            'name': 'Acme Corp',
            'email': 'hr@acme.example',
            'contact': '+1 555 0100',
            'website': 'acme.example',
        }

        response = self.client.post(self.url, payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        for field, value in payload.items():
            self.assertEqual(response.data[field], value)
        company = Company.objects.get(id=response.data['id'])
        self.assertEqual(company.name, 'Acme Corp')
        self.assertEqual(company.verification_status, Company.VerificationStatus.PENDING)

    def test_create_with_name_only(self) -> None:
        response = self.client.post(self.url, {'name': 'Solo Ltd'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['email'], '')
        self.assertEqual(Company.objects.count(), 1)

    def test_create_without_name_is_rejected(self) -> None:
        response = self.client.post(self.url, {'email': 'hr@acme.example'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'Validation failed')
        self.assertEqual(response.data['details'], ['name: This field is required.'])
        self.assertFalse(Company.objects.exists())

    def test_store_failure_returns_500(self) -> None:
        with mock.patch.object(Company, 'save', side_effect=OperationalError('connection refused')):
            response = self.client.post(self.url, {'name': 'Acme Corp'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data['error'], 'Failed to persist changes')

    def test_list_is_empty_without_companies(self) -> None:
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [])

    def test_list_is_sorted_by_name(self) -> None:
        Company.objects.create(name='Zeta Labs', industry='Biotech')
        Company.objects.create(name='Alpha Works', logo_url='https://cdn.example/alpha.png')

        response = self.client.get(self.url)

        self.assertEqual([company['name'] for company in response.data], ['Alpha Works', 'Zeta Labs'])
        self.assertEqual(set(response.data[0]), {'id', 'name', 'logo_url', 'industry'})
        self.assertEqual(response.data[1]['industry'], 'Biotech')


class VerifiedCompanyListViewTests(APITestCase):

    def setUp(self) -> None:
        self.url = reverse('company-verified')
        self.employer = User.objects.create_user(username='employer', password='pw', role=User.EMPLOYER)
        self.client.force_authenticate(self.employer)
        for name in ['Globex', 'Initech', 'Globe Travel']:
            Company.objects.create(name=name, verification_status=Company.VerificationStatus.VERIFIED)
        Company.objects.create(name='Global Pending', verification_status=Company.VerificationStatus.PENDING)

    def test_only_verified_companies_are_listed(self) -> None:
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['success'])
        self.assertEqual(
            [company['name'] for company in response.data['data']],
            ['Globe Travel', 'Globex', 'Initech'],
        )

    def test_search_and_limit(self) -> None:
        response = self.client.get(self.url, {'q': 'glob', 'limit': 1})

        self.assertEqual([company['name'] for company in response.data['data']], ['Globe Travel'])

    def test_no_match_includes_message(self) -> None:
        response = self.client.get(self.url, {'q': 'nothing'})

        self.assertEqual(response.data['data'], [])
        self.assertEqual(response.data['message'], 'No verified companies found')

    def test_limit_out_of_range_is_rejected(self) -> None:
        for limit in ['0', '101', 'ten']:
            response = self.client.get(self.url, {'limit': limit})
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_candidates_are_forbidden(self) -> None:
        candidate = User.objects.create_user(username='candidate', password='pw')
        self.client.force_authenticate(candidate)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class CompanyDetailViewTests(APITestCase):

    def setUp(self) -> None:
        self.user = User.objects.create_user(username='viewer', password='pw')
        self.client.force_authenticate(self.user)

    def test_retrieve_company(self) -> None:
        company = Company.objects.create(name='Acme', email='hr@acme.example')

        response = self.client.get(reverse('company-detail', args=[company.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['email'], 'hr@acme.example')

    def test_unknown_company_returns_404(self) -> None:
        response = self.client.get(reverse('company-detail', args=[uuid.uuid4()]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertIn('error', response.data)
