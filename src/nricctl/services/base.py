"""BaseService: shared foundation for nricctl services.

Services receive the resolved :class:`NricSettings` at construction time
and translate domain errors into failed :class:`ServiceResult` values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nricctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from nricctl.config.settings import NricSettings
    from nricctl.domain.errors import NRICError


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class IdentifierService(BaseService):
            def validate(self, text: str) -> ServiceResult:
                try:
                    ...
                except NRICError as exc:
                    return self._failure("validate", exc, input=text)
    """

    def __init__(self, settings: NricSettings) -> None:
        self._settings = settings

    @staticmethod
    def _failure(op: str, exc: NRICError, **detail: Any) -> ServiceResult:
        """Wrap a domain error in a failed ServiceResult."""
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=detail),
        )
