"""
User directory service.

Validates and normalizes emails, then delegates to a repository
that performs the atomic upsert.
"""

import logging
from typing import Any, Optional

from email_validator import EmailNotValidError, validate_email

from shared.exceptions import ValidationError

from .exceptions import UserNotFoundError
from .interfaces import IUserDirectory, IUserRepository
from .models import UpsertResult, User

logger = logging.getLogger(__name__)


def normalize_email(email: Optional[str]) -> str:
    """
    Validate an email address and return its case-folded form.

    Raises:
        ValidationError: If the email is missing or not an address
    """
    if not isinstance(email, str) or not email.strip():
        raise ValidationError("Email is required", code="EMAIL_REQUIRED")

    normalized = email.strip().casefold()
    try:
        validate_email(normalized, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValidationError(
            "Email is not a valid address",
            code="EMAIL_INVALID",
            details={"reason": str(e)},
        )
    return normalized


class UserDirectory(IUserDirectory):
    """Profile upsert and lookup keyed by normalized email."""

    def __init__(self, repository: IUserRepository):
        self._repository = repository

    async def upsert(self, email: Optional[str], profile: dict[str, Any]) -> UpsertResult:
        key = normalize_email(email)
        result = await self._repository.upsert(key, profile)
        logger.info("%s user profile for %s", "Created" if result.created else "Updated", key)
        return result

    async def get(self, email: Optional[str]) -> User:
        key = normalize_email(email)
        user = await self._repository.get(key)
        if user is None:
            raise UserNotFoundError(key)
        return user
