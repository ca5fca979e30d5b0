from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging.setup import configure_logging
from infrastructure.services import get_notification_executor, get_settings

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(settings=settings)


def _log_configuration(settings: "Settings", logger: BoundLogger) -> None:
    # Secrets (GITHUB_TOKEN) are never logged
    logger.info(
        "configuration_loaded",
        production=settings.is_production,
        git_sha=settings.GIT_SHA,
        github_api_url=settings.github.GITHUB_API_URL,
        github_token_set=bool(settings.github.GITHUB_TOKEN),
        config_path=settings.github.CONFIG_PATH,
        base_url=settings.server.BASE_URL or None,
        behind_proxy=settings.server.BEHIND_PROXY,
        notification_workers=settings.notifications.max_workers,
        notification_max_pending=settings.notifications.max_pending,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _log_configuration(settings, logger)

    executor = get_notification_executor()
    app.state.notification_executor = executor

    yield

    logger.info("application_shutdown")

    # Let queued deliveries drain; their HTTP timeouts bound the wait.
    executor.shutdown(wait=True)
    logger.info("notification_executor_stopped")
