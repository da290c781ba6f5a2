"""
Typed shapes of an experience edit submission.

A profile edit submits one ExperienceUpdateData: the candidate's complete
list of work experiences (each with its own accomplishments) plus top-level
accomplishments. A top-level accomplishment that belongs to an experience
submitted in the same batch points at it through an ExperienceIndex, since
neither row has a permanent id yet.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from django.utils.dateparse import parse_date, parse_datetime

from jobboard.exceptions import ValidationError

DateValue = Union[date, str, None]


def coerce_date(value: Any) -> DateValue:
    """
    Turn a wire date into a ``date``.

    Accepts ``YYYY-MM-DD``, ``YYYY-MM`` (first of the month) and ISO
    datetimes. Empty values become None; anything unparseable is returned
    unchanged so validation can report it.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        parsed = parse_date(text)
        if parsed is None and len(text) == 7:
            parsed = parse_date(f"{text}-01")
        if parsed is None:
            parsed_datetime = parse_datetime(text)
            parsed = parsed_datetime.date() if parsed_datetime else None
    except ValueError:
        # Well formed but impossible, e.g. 2024-02-30
        parsed = None
    return parsed if parsed is not None else text


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class ExperienceIndex:
    """
    Position of a work experience within the same submission.
    """

    position: int

    def __post_init__(self):
        if isinstance(self.position, bool) or not isinstance(self.position, int):
            raise ValidationError(
                f"temp_work_experience_index must be an integer, got {self.position!r}"
            )

    def in_bounds(self, count: int) -> bool:
        return 0 <= self.position < count

    def resolve(self, items: Sequence[Any]) -> Any:
        return items[self.position]


@dataclass
class AccomplishmentData:
    title: str
    id: Optional[str] = None
    description: Optional[str] = None
    work_experience_index: Optional[ExperienceIndex] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> 'AccomplishmentData':
        index = payload.get('temp_work_experience_index', payload.get('work_experience_index'))
        if index is not None and not isinstance(index, ExperienceIndex):
            index = ExperienceIndex(index)
        return cls(
            id=_optional_text(payload.get('id')),
            title=payload.get('title') or '',
            description=_optional_text(payload.get('description')),
            work_experience_index=index,
        )


@dataclass
class WorkExperienceData:
    """
    One work experience as submitted by the candidate.

    ``skill_ids`` holds a set of skill ids; the tuple keeps submission order
    and never repeats an id.
    """

    title: str
    company: str
    employment_type: str
    is_current: bool = False
    start_date: DateValue = None
    end_date: DateValue = None
    id: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    job_source: Optional[str] = None
    skill_ids: Tuple[str, ...] = ()
    media_url: Optional[str] = None
    accomplishments: List[AccomplishmentData] = field(default_factory=list)

    def __post_init__(self):
        self.skill_ids = tuple(dict.fromkeys(str(skill_id) for skill_id in self.skill_ids))

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> 'WorkExperienceData':
        accomplishments = []
        for item in payload.get('accomplishments') or []:
            # Nested accomplishments always belong to this experience
            accomplishments.append(
                AccomplishmentData(
                    id=_optional_text(item.get('id')),
                    title=item.get('title') or '',
                    description=_optional_text(item.get('description')),
                )
            )

        return cls(
            id=_optional_text(payload.get('id')),
            title=payload.get('title') or '',
            company=payload.get('company') or '',
            employment_type=payload.get('employment_type') or '',
            is_current=bool(payload.get('is_current', False)),
            start_date=coerce_date(payload.get('start_date')),
            end_date=coerce_date(payload.get('end_date')),
            location=_optional_text(payload.get('location')),
            description=_optional_text(payload.get('description')),
            job_source=_optional_text(payload.get('job_source')),
            skill_ids=tuple(payload.get('skill_ids') or ()),
            media_url=_optional_text(payload.get('media_url')),
            accomplishments=accomplishments,
        )

    def to_model_fields(self) -> Dict[str, Any]:
        """Column values for a WorkExperience row; call after validation."""
        return {
            'title': self.title.strip(),
            'company': self.company.strip(),
            'employment_type': self.employment_type.strip(),
            'is_current': self.is_current,
            'start_date': self.start_date,
            'end_date': None if self.is_current else self.end_date,
            'location': self.location,
            'description': self.description,
            'job_source': self.job_source,
            'skill_ids': list(self.skill_ids),
            'media_url': self.media_url,
        }


@dataclass
class ExperienceUpdateData:
    """
    The atomic unit of a profile experience edit.

    Every accomplishment index must point inside ``work_experiences``;
    construction fails with ValidationError otherwise.
    """

    work_experiences: List[WorkExperienceData] = field(default_factory=list)
    accomplishments: List[AccomplishmentData] = field(default_factory=list)

    def __post_init__(self):
        errors = self.index_errors()
        if errors:
            raise ValidationError(details=errors)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> 'ExperienceUpdateData':
        return cls(
            work_experiences=[
                WorkExperienceData.from_payload(item)
                for item in payload.get('work_experiences') or []
            ],
            accomplishments=[
                AccomplishmentData.from_payload(item)
                for item in payload.get('accomplishments') or []
            ],
        )

    def index_errors(self) -> List[str]:
        count = len(self.work_experiences)
        errors = []
        for number, accomplishment in enumerate(self.accomplishments, start=1):
            index = accomplishment.work_experience_index
            if index is not None and not index.in_bounds(count):
                errors.append(
                    f"Accomplishment {number}: temp_work_experience_index {index.position} "
                    f"is out of range for {count} work experience(s)"
                )
        return errors


@dataclass
class PersistedIds:
    """
    Ids assigned by the store, in the order the records were submitted.
    """

    work_experience_ids: List[str] = field(default_factory=list)
    accomplishment_ids: List[str] = field(default_factory=list)
    nested_accomplishment_ids: List[List[str]] = field(default_factory=list)

    @property
    def accomplishments_count(self) -> int:
        return len(self.accomplishment_ids) + sum(len(ids) for ids in self.nested_accomplishment_ids)

    def as_dict(self) -> Dict[str, Any]:
        return {
            'work_experience_ids': list(self.work_experience_ids),
            'accomplishment_ids': list(self.accomplishment_ids),
            'nested_accomplishment_ids': [list(ids) for ids in self.nested_accomplishment_ids],
        }
