"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

from shared.access import AccessFactory

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.assistant.cancellation import StreamRegistry
    from modules.assistant.service import AssistantService


class ServiceContainer:
    """
    Container for process-wide service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Services bound to one caller's credentials are
    not cached here; they are built per request by the dependency
    functions below.

    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._auth_service: "IAuthService | None" = None
        self._access_factory: AccessFactory | None = None
        self._assistant_service: "AssistantService | None" = None
        self._stream_registry: "StreamRegistry | None" = None

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService()
        return self._auth_service

    @property
    def access(self) -> AccessFactory:
        """Get the store access factory."""
        if self._access_factory is None:
            self._access_factory = AccessFactory()
        return self._access_factory

    @property
    def assistant(self) -> "AssistantService":
        """Get the assistant service instance."""
        if self._assistant_service is None:
            from modules.assistant.service import AssistantService
            from shared.config import get_settings
            self._assistant_service = AssistantService(
                token_interval=get_settings().assistant_token_interval,
            )
        return self._assistant_service

    @property
    def stream_registry(self) -> "StreamRegistry":
        """Get the registry of in-flight assistant streams."""
        if self._stream_registry is None:
            from modules.assistant.cancellation import StreamRegistry
            self._stream_registry = StreamRegistry()
        return self._stream_registry

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_service = None
        self._access_factory = None
        self._assistant_service = None
        self._stream_registry = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_access_factory() -> AccessFactory:
    """FastAPI dependency for the store access factory."""
    return get_container().access


def get_assistant_service() -> "AssistantService":
    """FastAPI dependency for the assistant service."""
    return get_container().assistant


def get_stream_registry() -> "StreamRegistry":
    """FastAPI dependency for the assistant stream registry."""
    return get_container().stream_registry

