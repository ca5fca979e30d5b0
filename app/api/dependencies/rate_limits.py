from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from api.dependencies.auth import LOGIN_HEADER

limiter = Limiter(
    key_func=get_remote_address,
)


async def rate_limit_handler(_request: Request, exc: Exception):
    """Return a 429 status code and a short error message."""
    if isinstance(exc, RateLimitExceeded):
        return JSONResponse(
            status_code=429,
            content={"message": "Rate limit exceeded"},
        )


def user_key_func(request: Request):
    """Rate limit per acting user, falling back to the client address.

    Every check fans out to chat webhooks, so limits on the check endpoint
    follow the user rather than a shared proxy address.
    """
    login = request.headers.get(LOGIN_HEADER)
    if login:
        return f"user:{login}"
    return get_remote_address(request)


def setup_rate_limiter(app: FastAPI):
    """
    Setup rate limiting for the FastAPI application.
    """
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter():
    """
    Returns the limiter instance.
    """
    return limiter
