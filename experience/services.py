"""
Experience Service Layer
Handles validation and persistence of work experiences and accomplishments.
"""
import logging
from datetime import date
from typing import Dict, List, Optional

from django.db import DatabaseError, transaction

from jobboard.exceptions import NotFoundError, PersistError, ValidationError
from profiles.models import CandidateProfile

from .aggregates import AccomplishmentData, ExperienceUpdateData, PersistedIds, WorkExperienceData
from .models import Accomplishment, EmploymentType, WorkExperience

logger = logging.getLogger(__name__)


class ExperienceService:
    """Service for managing a candidate's work experiences with validation."""

    VALID_EMPLOYMENT_TYPES = list(EmploymentType.values)

    @staticmethod
    def validate_work_experience(experience: WorkExperienceData, number: Optional[int] = None) -> List[str]:
        """
        Check one work experience and its nested accomplishments.

        Args:
            experience: Experience to check
            number: 1-based position used to prefix messages, if any

        Returns:
            List of error messages; empty when the experience is valid
        """
        prefix = f"Experience {number}: " if number is not None else ''
        errors = []

        # Required fields
        if not (experience.title or '').strip():
            errors.append(f"{prefix}Job title is required")
        if not (experience.company or '').strip():
            errors.append(f"{prefix}Company name is required")

        employment_type = (experience.employment_type or '').strip()
        if not employment_type:
            errors.append(f"{prefix}Employment type is required")
        elif employment_type not in ExperienceService.VALID_EMPLOYMENT_TYPES:
            errors.append(
                f"{prefix}Invalid employment type, must be one of: "
                f"{', '.join(ExperienceService.VALID_EMPLOYMENT_TYPES)}"
            )

        # Date validation
        start_date = experience.start_date
        end_date = experience.end_date
        if start_date is not None and not isinstance(start_date, date):
            errors.append(f"{prefix}Invalid start date")
            start_date = None
        if end_date is not None and not isinstance(end_date, date):
            errors.append(f"{prefix}Invalid end date")
            end_date = None

        if experience.is_current and experience.end_date is not None:
            errors.append(f"{prefix}End date should be empty when the position is current")
        elif start_date and end_date and end_date < start_date:
            errors.append(f"{prefix}End date cannot be before start date")

        for acc_number, accomplishment in enumerate(experience.accomplishments, start=1):
            if not (accomplishment.title or '').strip():
                errors.append(f"{prefix}Accomplishment {acc_number}: Title is required")

        return errors

    @staticmethod
    def validate(aggregate: ExperienceUpdateData) -> None:
        """
        Validate a whole experience edit submission.

        Raises:
            ValidationError: listing every problem found, each naming the
                position of the offending record
        """
        errors = []
        for number, experience in enumerate(aggregate.work_experiences, start=1):
            errors.extend(ExperienceService.validate_work_experience(experience, number))

        for number, accomplishment in enumerate(aggregate.accomplishments, start=1):
            if not (accomplishment.title or '').strip():
                errors.append(f"Accomplishment {number}: Title is required")

        errors.extend(aggregate.index_errors())

        if errors:
            logger.info("Experience validation failed: %s", errors)
            raise ValidationError(details=errors)

    @staticmethod
    def get_candidate_profile(user) -> CandidateProfile:
        try:
            return CandidateProfile.objects.get(user=user)
        except CandidateProfile.DoesNotExist:
            raise NotFoundError('Candidate profile not found')

    @staticmethod
    def _create_accomplishments(user, parent: Optional[WorkExperience],
                                accomplishments: List[AccomplishmentData],
                                first_position: int = 0) -> List[str]:
        ids = []
        for position, accomplishment in enumerate(accomplishments, start=first_position):
            row = Accomplishment.objects.create(
                candidate=user,
                work_experience=parent,
                title=accomplishment.title.strip(),
                description=accomplishment.description,
                position=position,
            )
            ids.append(str(row.id))
        return ids

    @staticmethod
    def submit(user, aggregate: ExperienceUpdateData) -> PersistedIds:
        """
        Replace the candidate's experiences with the submitted aggregate.

        Everything is written in one transaction: either all experiences and
        accomplishments are stored or none are.

        Args:
            user: Candidate user instance
            aggregate: Submitted experience data

        Returns:
            PersistedIds with the new ids in submission order

        Raises:
            ValidationError: If the aggregate is invalid
            NotFoundError: If the candidate has no profile
            PersistError: If the store fails; nothing is written
        """
        ExperienceService.validate(aggregate)
        profile = ExperienceService.get_candidate_profile(user)

        logger.info(
            "Replacing experiences for user %s: %s work experiences, %s accomplishments",
            user.pk, len(aggregate.work_experiences), len(aggregate.accomplishments),
        )

        try:
            with transaction.atomic():
                Accomplishment.objects.filter(candidate=user).delete()
                WorkExperience.objects.filter(candidate=user).delete()

                persisted = PersistedIds()
                rows = []
                for experience in aggregate.work_experiences:
                    row = WorkExperience.objects.create(candidate=user, **experience.to_model_fields())
                    rows.append(row)
                    persisted.work_experience_ids.append(str(row.id))
                    persisted.nested_accomplishment_ids.append(
                        ExperienceService._create_accomplishments(user, row, experience.accomplishments)
                    )

                # Top-level accomplishments go after the nested ones of the same parent
                next_position: Dict[Optional[int], int] = {
                    number: len(ids) for number, ids in enumerate(persisted.nested_accomplishment_ids)
                }
                next_position[None] = 0
                for accomplishment in aggregate.accomplishments:
                    index = accomplishment.work_experience_index
                    key = index.position if index is not None else None
                    parent = index.resolve(rows) if index is not None else None
                    ids = ExperienceService._create_accomplishments(
                        user, parent, [accomplishment], first_position=next_position[key]
                    )
                    next_position[key] += 1
                    persisted.accomplishment_ids.extend(ids)

                profile.save(update_fields=['updated_at'])
        except DatabaseError as exc:
            logger.error("Experience update failed for user %s: %s", user.pk, exc)
            raise PersistError('Failed to update work experience', details=[str(exc)]) from exc

        logger.info("Experience data updated for user %s", user.pk)
        return persisted

    @staticmethod
    def get_experiences(user) -> Dict[str, list]:
        """
        Get all experiences for a user.

        Current positions come first, then by start date (most recent first).
        Accomplishments keep their submission order.

        Returns:
            Dict with ``work_experiences`` and standalone ``accomplishments``
        """
        work_experiences = (
            WorkExperience.objects.filter(candidate=user)
            .prefetch_related('accomplishments')
            .order_by('-is_current', '-start_date', 'created_at')
        )
        standalone = Accomplishment.objects.filter(
            candidate=user,
            work_experience__isnull=True,
        ).order_by('position', 'created_at')
        return {
            'work_experiences': list(work_experiences),
            'accomplishments': list(standalone),
        }

    @staticmethod
    def get_experience(user, experience_id) -> WorkExperience:
        """
        Get a specific experience by ID.

        Raises:
            NotFoundError: If the experience does not exist or belongs to
                another candidate
        """
        experience = (
            WorkExperience.objects.filter(id=experience_id, candidate=user)
            .prefetch_related('accomplishments')
            .first()
        )
        if experience is None:
            raise NotFoundError('Experience not found')
        return experience

    @staticmethod
    def add_experience(user, data: WorkExperienceData) -> WorkExperience:
        """
        Add a new experience with its accomplishments.

        Raises:
            ValidationError: If validation fails
            NotFoundError: If the candidate has no profile
            PersistError: If the store fails
        """
        errors = ExperienceService.validate_work_experience(data)
        if errors:
            raise ValidationError(details=errors)
        profile = ExperienceService.get_candidate_profile(user)

        try:
            with transaction.atomic():
                experience = WorkExperience.objects.create(candidate=user, **data.to_model_fields())
                ExperienceService._create_accomplishments(user, experience, data.accomplishments)
                profile.save(update_fields=['updated_at'])
        except DatabaseError as exc:
            logger.error("Adding experience failed for user %s: %s", user.pk, exc)
            raise PersistError('Failed to add experience', details=[str(exc)]) from exc

        logger.info("Experience %s created for user %s", experience.id, user.pk)
        return experience

    @staticmethod
    def update_experience(user, experience_id, data: WorkExperienceData) -> WorkExperience:
        """
        Update an existing experience.

        The experience's accomplishments are replaced by ``data.accomplishments``.

        Raises:
            ValidationError: If validation fails
            NotFoundError: If the experience or the candidate profile is missing
            PersistError: If the store fails
        """
        errors = ExperienceService.validate_work_experience(data)
        if errors:
            raise ValidationError(details=errors)
        profile = ExperienceService.get_candidate_profile(user)
        experience = ExperienceService.get_experience(user, experience_id)

        try:
            with transaction.atomic():
                for attr, value in data.to_model_fields().items():
                    setattr(experience, attr, value)
                experience.save()
                Accomplishment.objects.filter(work_experience=experience).delete()
                ExperienceService._create_accomplishments(user, experience, data.accomplishments)
                profile.save(update_fields=['updated_at'])
        except DatabaseError as exc:
            logger.error("Updating experience %s failed: %s", experience_id, exc)
            raise PersistError('Failed to update experience', details=[str(exc)]) from exc

        logger.info("Experience %s updated for user %s", experience.id, user.pk)
        return experience

    @staticmethod
    def delete_experience(user, experience_id) -> None:
        """
        Delete an experience together with its accomplishments.

        Raises:
            NotFoundError: If the experience does not exist
            PersistError: If the store fails
        """
        experience = ExperienceService.get_experience(user, experience_id)

        try:
            with transaction.atomic():
                Accomplishment.objects.filter(work_experience=experience).delete()
                experience.delete()
                profile = CandidateProfile.objects.filter(user=user).first()
                if profile is not None:
                    profile.save(update_fields=['updated_at'])
        except DatabaseError as exc:
            logger.error("Deleting experience %s failed: %s", experience_id, exc)
            raise PersistError('Failed to delete experience', details=[str(exc)]) from exc

        logger.info("Experience %s deleted for user %s", experience_id, user.pk)
