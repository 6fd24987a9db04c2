"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating PostgREST failures into
ExternalServiceError.
"""

from typing import Any, Callable, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import ExternalServiceError


T = TypeVar("T")


class StoreError(ExternalServiceError):
    """Raised when a Profile Store query fails. Carries the store's message."""

    def __init__(self, message: str, operation: str):
        super().__init__(
            message,
            service="supabase",
            code="STORE_ERROR",
            details={"operation": operation},
        )


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute() wrapper that surfaces store failures as StoreError

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, operation: str, query: Callable[[], Any]) -> Any:
        """
        Run a PostgREST query, converting store and transport failures into StoreError.

        Args:
            operation: Short name of the operation, used in error details.
            query: Zero-argument callable that builds and executes the query.

        Returns:
            The PostgREST response object.
        """
        try:
            return query()
        except APIError as e:
            raise StoreError(e.message or str(e), operation) from e
        except httpx.HTTPError as e:
            raise StoreError(str(e) or e.__class__.__name__, operation) from e
