"""Composition Root — wires settings, logging and the controller together.

Invariants:
    - Settings read through get_settings() unless explicitly passed
    - Logging configured before the controller is returned
    - The repository is always supplied by the caller

Design Decisions:
    - Plain function over a DI container: one controller, two collaborators
"""

import logging

from user_api.config import Settings, get_settings
from user_api.core.repository_protocols import ApplicationRepository
from user_api.infrastructure.observability import setup_logging
from user_api.schemas.user import AppUser
from user_api.services.user_controller import UserController

logger = logging.getLogger(__name__)


def build_user_controller(
    repository: ApplicationRepository[AppUser],
    settings: Settings | None = None,
) -> UserController:
    """Configure logging and return a controller bound to ``repository``."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.service_name} controller ready")
    return UserController(
        repository, logging.getLogger("user_api.services.user_controller"),
    )
