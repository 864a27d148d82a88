"""BaseService: shared foundation for medform services.

Every service receives the resolved settings and a clock. The clock is
the only source of "today" the service layer consults, so tests can pin
it without touching configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from medform.config.settings import MedformSettings

logger = logging.getLogger(__name__)

Clock = Callable[[], date]


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ValidationService(BaseService):
            def validate(self, entity: str, action: str, candidate: object) -> ServiceResult:
                today = self._today()
                ...
    """

    def __init__(self, settings: MedformSettings, *, clock: Clock | None = None) -> None:
        self._settings = settings
        self._clock: Clock = clock or settings.today

    def _today(self) -> date:
        today = self._clock()
        logger.debug("Evaluation day resolved to %s", today.isoformat())
        return today
