"""Outcome of an outbound call.

Webhook deliveries and other remote calls return an OperationResult instead
of raising, so the code that runs them on a worker thread can log one
uniform record per attempt.
"""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: High-level outcome
        message: Human-readable summary for logs
        data: Optional payload, e.g. {"status_code": 200}
        error_code: Machine-readable failure category, e.g. DELIVERY_FAILURE
        retry_after: Seconds the remote asked us to wait (429 only)
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    retry_after: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def transient_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Failure that may clear up by itself: timeouts, refused connections, 429, 5xx."""
        return cls(
            status=OperationStatus.TRANSIENT_ERROR,
            message=message,
            error_code=error_code,
            retry_after=retry_after,
            data=data,
        )

    @classmethod
    def permanent_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Failure that repeats on every attempt: bad payloads, bad URLs, 4xx."""
        return cls(
            status=OperationStatus.PERMANENT_ERROR,
            message=message,
            error_code=error_code,
            data=data,
        )

    @classmethod
    def not_found(
        cls,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """The remote endpoint does not exist (404), e.g. a revoked webhook."""
        return cls(
            status=OperationStatus.NOT_FOUND,
            message=message,
            error_code=error_code,
            data=data,
        )
