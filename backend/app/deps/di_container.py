"""
Dependency injection container using dependency-injector.
Wires storage, the access guard, services and controllers.
"""

from dependency_injector import containers, providers
from fastapi import Request

from app.core.authorization import AccessGuard
from app.db.storage import Storage
from app.services.health_service import HealthService
from app.controllers.health_controller import HealthController


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Configuration
    config = providers.Configuration()

    # Data access: one Storage per request, built around the request's session
    storage = providers.Factory(Storage)

    # Authorization guard, built around the same Storage as the request
    access_guard = providers.Factory(AccessGuard)

    # Services
    health_service = providers.Singleton(
        HealthService,
        version=config.version,
    )

    # Controllers
    health_controller = providers.Factory(
        HealthController,
        health_service=health_service,
    )


def create_container(**config) -> Container:
    """Build a container for one application instance."""
    container = Container()
    container.config.from_dict(config)
    return container


def get_container(request: Request) -> Container:
    """FastAPI dependency returning the container owned by the running app."""
    return request.app.state.container
