"""
Error taxonomy shared by every API handler.

Each failure is tagged with an ErrorKind, and the kind alone decides the
HTTP status. Handlers raise these exceptions; ``api_exception_handler``
turns them (and DRF/Django errors) into the ``{"error": ...}`` envelope.
"""
import enum
import logging
from typing import Any, List, Optional

from django.db import DatabaseError
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ErrorKind(str, enum.Enum):
    VALIDATION = 'validation'
    NOT_FOUND = 'not_found'
    PERSIST = 'persist'
    UNKNOWN = 'unknown'


STATUS_FOR_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.PERSIST: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.UNKNOWN: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ApplicationError(Exception):
    """
    Base class for errors surfaced to API clients.

    Args:
        message: Human readable summary, rendered as ``error``.
        details: Optional list of individual problems, rendered as ``details``.
    """

    kind = ErrorKind.UNKNOWN
    default_message = 'An unexpected error occurred'

    def __init__(self, message: Optional[str] = None, details: Optional[List[Any]] = None):
        self.message = message or self.default_message
        self.details = list(details) if details else []
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_FOR_KIND[self.kind]

    def as_envelope(self) -> dict:
        body = {'error': self.message}
        if self.details:
            body['details'] = self.details
        return body


class ValidationError(ApplicationError):
    """Malformed or missing input, including out-of-range index references."""

    kind = ErrorKind.VALIDATION
    default_message = 'Validation failed'


class NotFoundError(ApplicationError):
    kind = ErrorKind.NOT_FOUND
    default_message = 'Record not found'


class PersistError(ApplicationError):
    """The store was unavailable, timed out, or rejected the write."""

    kind = ErrorKind.PERSIST
    default_message = 'Failed to persist changes'


class UnknownError(ApplicationError):
    kind = ErrorKind.UNKNOWN


def flatten_serializer_errors(errors: Any, prefix: str = '') -> List[str]:
    """
    Flatten nested DRF serializer errors into ``"field.sub: message"`` strings.
    """
    flat: List[str] = []
    if isinstance(errors, dict):
        for key, value in errors.items():
            if key == 'non_field_errors':
                path = prefix
            else:
                path = f"{prefix}.{key}" if prefix else str(key)
            flat.extend(flatten_serializer_errors(value, path))
    elif isinstance(errors, list):
        if all(not isinstance(item, (dict, list)) for item in errors):
            for item in errors:
                flat.append(f"{prefix}: {item}" if prefix else str(item))
        else:
            for index, item in enumerate(errors):
                if item:
                    path = f"{prefix}[{index}]" if prefix else f"[{index}]"
                    flat.extend(flatten_serializer_errors(item, path))
    else:
        flat.append(f"{prefix}: {errors}" if prefix else str(errors))
    return flat


def api_exception_handler(exc, context):
    """
    DRF exception handler producing the ``{"error": ...}`` envelope.
    """
    view = context.get('view')
    view_name = view.__class__.__name__ if view is not None else 'unknown view'

    if isinstance(exc, DatabaseError):
        logger.error("Store error in %s: %s", view_name, exc)
        exc = PersistError(details=[str(exc)])

    if isinstance(exc, ApplicationError):
        if exc.kind in (ErrorKind.PERSIST, ErrorKind.UNKNOWN):
            logger.error("%s in %s: %s", exc.__class__.__name__, view_name, exc.message)
        else:
            logger.info("%s in %s: %s", exc.__class__.__name__, view_name, exc.message)
        return Response(exc.as_envelope(), status=exc.status_code)

    response = exception_handler(exc, context)
    if response is None:
        logger.exception("Unhandled error in %s", view_name, exc_info=exc)
        error = UnknownError()
        return Response(error.as_envelope(), status=error.status_code)

    if isinstance(exc, drf_exceptions.ValidationError):
        response.data = {
            'error': ValidationError.default_message,
            'details': flatten_serializer_errors(exc.detail),
        }
    else:
        detail = response.data.get('detail') if isinstance(response.data, dict) else response.data
        response.data = {'error': str(detail)}
    return response
