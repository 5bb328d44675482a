# =============================================================================
# core/errors.py - Error types surfaced by the client and the adapters
# =============================================================================

from typing import Optional


class ExaAPIError(Exception):
    """A remote call failed: transport error, non-2xx status or bad body."""

    def __init__(
        self,
        operation: str,
        message: str,
        *,
        status_code: Optional[int] = None,
    ) -> None:
        self.operation = operation
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class AdapterError(Exception):
    """A tool call failed at ``stage`` ("create client", "search", ...).

    The message is the stage followed by the underlying error, e.g.
    ``"search: HTTP 401: invalid api key"``.
    """

    def __init__(self, stage: str, cause: BaseException) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage}: {cause}")
