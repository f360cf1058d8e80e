"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating client failures into StoreError.
"""

import logging
from typing import Any, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient

from .exceptions import StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: APIError) -> bool:
    """Whether a PostgREST error was raised by a unique constraint."""
    return str(error.code) == UNIQUE_VIOLATION


class BaseRepository(Generic[T]):
    """
    Base class for all Supabase repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Table name via self._table
    - _execute() which runs a query and maps failures to StoreError

    Unique constraint violations are re-raised untouched so subclasses
    can turn them into domain errors.

    Example:
        class WishlistRepository(BaseRepository[WishlistItem]):
            async def get(self, item_id: str) -> Optional[WishlistItem]:
                query = self._db.table(self._table).select("*").eq("id", item_id)
                result = await self._execute(query, "get_item", item_id=item_id)
                ...
    """

    def __init__(self, db: AsyncClient, table: str) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Async Supabase client instance for database operations.
            table: Name of the table this repository owns.
        """
        self._db = db
        self._table = table

    async def _execute(self, query: Any, operation: str, **context: Any) -> Any:
        """
        Run a prepared query.

        Args:
            query: A PostgREST request builder (table or rpc query)
            operation: Short operation name used in logs and errors
            **context: Extra values logged alongside a failure

        Returns:
            The PostgREST response

        Raises:
            APIError: For unique constraint violations only
            StoreError: For any other store or transport failure
        """
        try:
            return await query.execute()
        except APIError as e:
            if is_unique_violation(e):
                raise
            logger.exception(
                "Store operation %s on %s failed (code=%s): %s",
                operation, self._table, e.code, context,
            )
            raise StoreError(
                f"Store operation failed: {operation}",
                operation=operation,
                details={"table": self._table, "store_code": e.code},
            ) from e
        except httpx.HTTPError as e:
            logger.exception(
                "Store operation %s on %s could not reach the store: %s",
                operation, self._table, context,
            )
            raise StoreError(
                f"Store unreachable during {operation}",
                operation=operation,
                details={"table": self._table},
            ) from e
