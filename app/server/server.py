from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.logging import (
    bind_request_context,
    get_correlation_id,
    get_module_logger,
)
from infrastructure.services import get_settings
from server.lifespan import lifespan

logger = get_module_logger()

CORRELATION_ID_HEADER = "X-Correlation-ID"


handler = FastAPI(title="prchecklist", lifespan=lifespan)
setup_rate_limiter(handler)


@handler.middleware("http")
async def request_context_middleware(request: Request, call_next):
    with bind_request_context(
        correlation_id=request.headers.get(CORRELATION_ID_HEADER),
        user_login=request.headers.get("X-GitHub-Login"),
        request_path=request.url.path,
        request_method=request.method,
    ):
        response = await call_next(request)
        correlation_id = get_correlation_id()
        if correlation_id:
            response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response


allow_origins = (
    ["*"]
    if get_settings().is_production
    else [
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]
)
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


handler.include_router(api_router)
