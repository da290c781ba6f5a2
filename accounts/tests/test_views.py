from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.models import User
from profiles.models import CandidateProfile


class UserViewSetTests(APITestCase):

    def setUp(self) -> None:
        self.user = User.objects.create_user(username='candidate', password='pw')
        self.client.force_authenticate(self.user)

    def test_me_returns_current_user(self) -> None:
        CandidateProfile.objects.create(user=self.user)

        response = self.client.get(reverse('user-me'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['username'], 'candidate')
        self.assertEqual(response.data['role'], User.CANDIDATE)
        self.assertTrue(response.data['has_candidate_profile'])
        self.assertNotIn('password', response.data)

    def test_users_cannot_promote_themselves(self) -> None:
        response = self.client.patch(
            reverse('user-detail', args=[self.user.pk]),
            {'role': User.MIS},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['details'], ['role: Only MIS staff can change a role.'])
        self.user.refresh_from_db()
        self.assertEqual(self.user.role, User.CANDIDATE)

    def test_mis_user_can_change_role(self) -> None:
        mis = User.objects.create_user(username='mis', password='pw', role=User.MIS)
        self.client.force_authenticate(mis)

        response = self.client.patch(
            reverse('user-detail', args=[self.user.pk]),
            {'role': User.EMPLOYER},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertEqual(self.user.role, User.EMPLOYER)

    def test_users_cannot_read_other_accounts(self) -> None:
        other = User.objects.create_user(username='other', password='pw')

        response = self.client.get(reverse('user-detail', args=[other.pk]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_only_mis_users_list_accounts(self) -> None:
        self.assertEqual(self.client.get(reverse('user-list')).status_code, status.HTTP_403_FORBIDDEN)

        mis = User.objects.create_user(username='mis', password='pw', role=User.MIS)
        self.client.force_authenticate(mis)
        response = self.client.get(reverse('user-list'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([user['username'] for user in response.data], ['candidate', 'mis'])
