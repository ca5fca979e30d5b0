"""Error classifiers for outbound HTTP calls.

Converts requests responses and exceptions into standardized
OperationResult objects so delivery code can log a uniform outcome.

Usage:
    from infrastructure.operations.classifiers import (
        classify_http_response,
        classify_request_error,
    )

    try:
        response = requests.post(url, data=form, timeout=10)
    except requests.RequestException as exc:
        return classify_request_error(exc)
    return classify_http_response(response)
"""

from typing import Optional

import requests

from infrastructure.operations.result import OperationResult


def classify_http_response(
    response: requests.Response, error_code: str = "HTTP_ERROR"
) -> OperationResult:
    """Classify an HTTP response into an OperationResult.

    Any 2xx status is a success. Everything else is an error:

    - 429: Rate limiting -> TRANSIENT_ERROR with retry_after
    - 404: Not found -> NOT_FOUND
    - 5xx: Server error -> TRANSIENT_ERROR
    - Other (3xx, 4xx): PERMANENT_ERROR

    Args:
        response: Response returned by requests
        error_code: Machine error code attached to failures

    Returns:
        OperationResult carrying the status code in data
    """
    status_code = response.status_code
    data = {"status_code": status_code}

    if 200 <= status_code < 300:
        return OperationResult.success(data=data, message=f"HTTP {status_code}")

    message = f"HTTP {status_code}: {response.text[:200]}"

    if status_code == 429:
        retry_after: Optional[int] = None
        header_value = response.headers.get("Retry-After")
        if header_value:
            try:
                retry_after = int(header_value)
            except (ValueError, TypeError):
                pass
        return OperationResult.transient_error(
            message, error_code=error_code, retry_after=retry_after, data=data
        )

    if status_code == 404:
        return OperationResult.not_found(message, error_code=error_code, data=data)

    if 500 <= status_code < 600:
        return OperationResult.transient_error(message, error_code=error_code, data=data)

    return OperationResult.permanent_error(message, error_code=error_code, data=data)


def classify_request_error(
    exc: Exception, error_code: str = "HTTP_ERROR"
) -> OperationResult:
    """Classify a requests transport exception into an OperationResult.

    Timeouts and connection errors are transient. Malformed URLs and other
    request construction errors are permanent.

    Args:
        exc: Exception raised by requests
        error_code: Machine error code attached to the result

    Returns:
        OperationResult with TRANSIENT_ERROR or PERMANENT_ERROR status
    """
    message = f"{type(exc).__name__}: {exc}"

    if isinstance(exc, (requests.Timeout, requests.ConnectionError)):
        return OperationResult.transient_error(message, error_code=error_code)

    return OperationResult.permanent_error(message, error_code=error_code)
