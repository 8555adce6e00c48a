"""BaseService — shared foundation for pubky-specs services.

Every service receives the :class:`SpecsConfig` it injects into core
operations. Services own the translation of core errors into failed
:class:`ServiceResult` values.
"""

from __future__ import annotations

import structlog

from pubky_app_specs.config.models import DEFAULT_CONFIG, SpecsConfig
from pubky_app_specs.domain.errors import SpecsError
from pubky_app_specs.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class UriService(BaseService):
            def parse(self, uri: str) -> ServiceResult:
                try:
                    location = parse_uri(uri, config=self._config)
                except SpecsError as exc:
                    return self._failure("parse_uri", exc)
                ...
    """

    def __init__(self, config: SpecsConfig = DEFAULT_CONFIG) -> None:
        self._config = config

    @property
    def config(self) -> SpecsConfig:
        return self._config

    def _failure(self, op: str, exc: SpecsError) -> ServiceResult:
        """Convert a core error into a failed result."""
        log.debug("operation.failed", op=op, code=exc.code, message=exc.message)
        return ServiceResult(ok=False, op=op, error=ServiceError.from_exception(exc))
