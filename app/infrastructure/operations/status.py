"""Operation status enumeration."""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Error that might clear up later (network, timeout, 5xx, 429)
        PERMANENT_ERROR: Error that will not clear up (bad payload, 4xx, bad URL)
        NOT_FOUND: Remote resource not found (404, e.g. a revoked webhook)
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
