from datetime import date
from unittest import mock

from django.db import DatabaseError
from django.test import TestCase

from accounts.models import User
from experience.aggregates import (
    AccomplishmentData,
    ExperienceIndex,
    ExperienceUpdateData,
    WorkExperienceData,
)
from experience.models import Accomplishment, WorkExperience
from experience.services import ExperienceService
from jobboard.exceptions import NotFoundError, PersistError, ValidationError
from profiles.models import CandidateProfile


def make_experience(**overrides) -> WorkExperienceData:
    values = {
        'title': 'Backend Engineer',
        'company': 'Acme',
        'employment_type': 'full_time',
        'start_date': date(2021, 1, 1),
        'end_date': date(2022, 6, 30),
    }
    values.update(overrides)
    return WorkExperienceData(**values)


class ValidateWorkExperienceTests(TestCase):

    def test_valid_experience_has_no_errors(self) -> None:
        self.assertEqual(ExperienceService.validate_work_experience(make_experience()), [])

    def test_required_fields_are_reported_with_position(self) -> None:
        errors = ExperienceService.validate_work_experience(
            make_experience(title=' ', company='', employment_type=''), number=2
        )
        self.assertEqual(errors, [
            'Experience 2: Job title is required',
            'Experience 2: Company name is required',
            'Experience 2: Employment type is required',
        ])

    def test_unknown_employment_type_is_rejected(self) -> None:
        errors = ExperienceService.validate_work_experience(make_experience(employment_type='gig'))
        self.assertEqual(len(errors), 1)
        self.assertTrue(errors[0].startswith('Invalid employment type'))

    def test_unparseable_dates_are_rejected(self) -> None:
        errors = ExperienceService.validate_work_experience(
            make_experience(start_date='soon', end_date='later')
        )
        self.assertIn('Invalid start date', errors)
        self.assertIn('Invalid end date', errors)

    def test_end_date_before_start_date(self) -> None:
        errors = ExperienceService.validate_work_experience(
            make_experience(start_date=date(2023, 5, 1), end_date=date(2023, 1, 1))
        )
        self.assertEqual(errors, ['End date cannot be before start date'])

    def test_current_position_must_not_have_end_date(self) -> None:
        errors = ExperienceService.validate_work_experience(make_experience(is_current=True))
        self.assertEqual(errors, ['End date should be empty when the position is current'])

        current = make_experience(is_current=True, end_date=None)
        self.assertEqual(ExperienceService.validate_work_experience(current), [])

    def test_missing_start_date_is_allowed(self) -> None:
        self.assertEqual(
            ExperienceService.validate_work_experience(make_experience(start_date=None)),
            [],
        )

    def test_nested_accomplishment_needs_title(self) -> None:
        experience = make_experience(accomplishments=[AccomplishmentData(title='')])
        self.assertEqual(
            ExperienceService.validate_work_experience(experience, number=1),
            ['Experience 1: Accomplishment 1: Title is required'],
        )


class ExperienceServiceTestCase(TestCase):

    def setUp(self) -> None:
        self.user = User.objects.create_user(username='candidate', password='pw')
        self.profile = CandidateProfile.objects.create(user=self.user, headline='Engineer')

    def submit(self, work_experiences=None, accomplishments=None):
        aggregate = ExperienceUpdateData(
            work_experiences=work_experiences or [],
            accomplishments=accomplishments or [],
        )
        return ExperienceService.submit(self.user, aggregate)


class SubmitTests(ExperienceServiceTestCase):
    """Replacing the whole experience aggregate."""

    def test_submit_persists_in_submission_order(self) -> None:
        persisted = self.submit(
            work_experiences=[
                make_experience(
                    title='First',
                    accomplishments=[AccomplishmentData(title='A'), AccomplishmentData(title='B')],
                ),
                make_experience(title='Second'),
            ],
            accomplishments=[
                AccomplishmentData(title='Linked', work_experience_index=ExperienceIndex(1)),
                AccomplishmentData(title='Standalone'),
            ],
        )

        self.assertEqual(len(persisted.work_experience_ids), 2)
        first = WorkExperience.objects.get(id=persisted.work_experience_ids[0])
        second = WorkExperience.objects.get(id=persisted.work_experience_ids[1])
        self.assertEqual(first.title, 'First')
        self.assertEqual(second.title, 'Second')

        nested = [
            Accomplishment.objects.get(id=acc_id).title
            for acc_id in persisted.nested_accomplishment_ids[0]
        ]
        self.assertEqual(nested, ['A', 'B'])
        self.assertEqual(persisted.nested_accomplishment_ids[1], [])

        linked = Accomplishment.objects.get(id=persisted.accomplishment_ids[0])
        standalone = Accomplishment.objects.get(id=persisted.accomplishment_ids[1])
        self.assertEqual(linked.work_experience_id, second.id)
        self.assertIsNone(standalone.work_experience_id)
        self.assertEqual(persisted.accomplishments_count, 4)

    def test_linked_accomplishments_follow_nested_ones(self) -> None:
        persisted = self.submit(
            work_experiences=[make_experience(accomplishments=[AccomplishmentData(title='Nested')])],
            accomplishments=[AccomplishmentData(title='Linked', work_experience_index=ExperienceIndex(0))],
        )

        experience = WorkExperience.objects.get(id=persisted.work_experience_ids[0])
        titles = list(experience.accomplishments.values_list('title', flat=True))
        self.assertEqual(titles, ['Nested', 'Linked'])

    def test_submit_replaces_previous_experiences(self) -> None:
        self.submit(work_experiences=[make_experience(title='Old')])
        self.submit(work_experiences=[make_experience(title='New')])

        titles = list(WorkExperience.objects.filter(candidate=self.user).values_list('title', flat=True))
        self.assertEqual(titles, ['New'])

    def test_current_position_is_stored_without_end_date(self) -> None:
        persisted = self.submit(work_experiences=[make_experience(is_current=True, end_date=None)])

        experience = WorkExperience.objects.get(id=persisted.work_experience_ids[0])
        self.assertTrue(experience.is_current)
        self.assertIsNone(experience.end_date)

    def test_invalid_aggregate_writes_nothing(self) -> None:
        self.submit(work_experiences=[make_experience(title='Kept')])

        with self.assertRaises(ValidationError) as ctx:
            self.submit(work_experiences=[make_experience(), make_experience(company='')])

        self.assertEqual(ctx.exception.details, ['Experience 2: Company name is required'])
        self.assertEqual(
            list(WorkExperience.objects.values_list('title', flat=True)),
            ['Kept'],
        )

    def test_missing_profile_raises_not_found(self) -> None:
        self.profile.delete()

        with self.assertRaises(NotFoundError):
            self.submit(work_experiences=[make_experience()])
        self.assertFalse(WorkExperience.objects.exists())

    def test_store_failure_rolls_back_everything(self) -> None:
        self.submit(
            work_experiences=[make_experience(title='Kept')],
            accomplishments=[AccomplishmentData(title='Kept accomplishment')],
        )

        with mock.patch(
            'experience.services.Accomplishment.objects.create',
            side_effect=DatabaseError('disk I/O error'),
        ):
            with self.assertRaises(PersistError) as ctx:
                self.submit(
                    work_experiences=[make_experience(title='Replacement')],
                    accomplishments=[AccomplishmentData(title='Never stored')],
                )

        self.assertEqual(ctx.exception.details, ['disk I/O error'])
        self.assertEqual(list(WorkExperience.objects.values_list('title', flat=True)), ['Kept'])
        self.assertEqual(
            list(Accomplishment.objects.values_list('title', flat=True)),
            ['Kept accomplishment'],
        )


class SingleExperienceTests(ExperienceServiceTestCase):

    def test_add_experience_creates_accomplishments(self) -> None:
        experience = ExperienceService.add_experience(
            self.user,
            make_experience(accomplishments=[AccomplishmentData(title='Shipped v2')]),
        )

        self.assertEqual(experience.candidate, self.user)
        self.assertEqual(list(experience.accomplishments.values_list('title', flat=True)), ['Shipped v2'])

    def test_add_experience_validates(self) -> None:
        with self.assertRaises(ValidationError):
            ExperienceService.add_experience(self.user, make_experience(title=''))
        self.assertFalse(WorkExperience.objects.exists())

    def test_update_experience_replaces_accomplishments(self) -> None:
        experience = ExperienceService.add_experience(
            self.user,
            make_experience(accomplishments=[AccomplishmentData(title='Old')]),
        )

        updated = ExperienceService.update_experience(
            self.user,
            experience.id,
            make_experience(title='Staff Engineer', accomplishments=[AccomplishmentData(title='New')]),
        )

        self.assertEqual(updated.title, 'Staff Engineer')
        self.assertEqual(
            list(Accomplishment.objects.filter(work_experience=updated).values_list('title', flat=True)),
            ['New'],
        )

    def test_other_candidates_experience_is_not_found(self) -> None:
        other = User.objects.create_user(username='other', password='pw')
        CandidateProfile.objects.create(user=other)
        experience = ExperienceService.add_experience(other, make_experience())

        with self.assertRaises(NotFoundError):
            ExperienceService.get_experience(self.user, experience.id)
        with self.assertRaises(NotFoundError):
            ExperienceService.delete_experience(self.user, experience.id)

    def test_delete_experience_removes_accomplishments(self) -> None:
        experience = ExperienceService.add_experience(
            self.user,
            make_experience(accomplishments=[AccomplishmentData(title='Gone')]),
        )

        ExperienceService.delete_experience(self.user, experience.id)

        self.assertFalse(WorkExperience.objects.exists())
        self.assertFalse(Accomplishment.objects.exists())

    def test_get_experiences_orders_current_first(self) -> None:
        self.submit(
            work_experiences=[
                make_experience(title='Older', start_date=date(2015, 1, 1), end_date=date(2016, 1, 1)),
                make_experience(title='Current', is_current=True, start_date=date(2020, 1, 1), end_date=None),
                make_experience(title='Recent', start_date=date(2018, 1, 1), end_date=date(2019, 12, 31)),
            ],
            accomplishments=[AccomplishmentData(title='Award')],
        )

        experiences = ExperienceService.get_experiences(self.user)

        self.assertEqual(
            [experience.title for experience in experiences['work_experiences']],
            ['Current', 'Recent', 'Older'],
        )
        self.assertEqual([acc.title for acc in experiences['accomplishments']], ['Award'])
