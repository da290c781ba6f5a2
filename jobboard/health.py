"""
Database connectivity probe.

Shared by the ``/api/health/db/`` endpoint and the ``check_database``
management command.
"""
import logging
from dataclasses import dataclass

from django.contrib.auth import get_user_model
from django.db import DatabaseError, connection

logger = logging.getLogger(__name__)


@dataclass
class DatabaseProbe:
    success: bool
    message: str = ''
    user_count: int = 0
    error: str = ''

    def as_envelope(self) -> dict:
        if self.success:
            return {
                'success': True,
                'message': self.message,
                'userCount': self.user_count,
            }
        return {'success': False, 'error': self.error}


def probe_database() -> DatabaseProbe:
    """
    Open a connection and run one count query against the user table.

    Store failures are reported in the returned probe, never raised.
    """
    try:
        connection.ensure_connection()
        user_count = get_user_model().objects.count()
    except DatabaseError as exc:
        logger.error("Database probe failed: %s", exc)
        return DatabaseProbe(success=False, error=str(exc) or exc.__class__.__name__)

    logger.debug("Database probe succeeded with %s users", user_count)
    return DatabaseProbe(
        success=True,
        message='Database connection successful',
        user_count=user_count,
    )
