"""Checklist API.

Query parameters identify the checklist (owner, repo, number, stage) and,
for check changes, the item (featureNumber).
"""

from contextlib import contextmanager
from functools import partial
from typing import Annotated, Iterator, Optional

from fastapi import APIRouter, HTTPException, Query, Request

from api.dependencies.auth import CurrentUserDep, RequiredUserDep
from api.dependencies.rate_limits import get_limiter, user_key_func
from infrastructure.configuration import Settings
from infrastructure.logging import get_module_logger
from infrastructure.services import ChecklistServiceDep, SettingsDep
from integrations.github import GitHubError
from models.checklist import (
    DEFAULT_STAGE,
    ChecklistRef,
    ChecklistResponse,
    GitHubUser,
)
from modules.checklist import ChecklistItemNotFound, build_url

logger = get_module_logger()
router = APIRouter(prefix="/api", tags=["Checklist"])
limiter = get_limiter()

FeatureNumber = Annotated[int, Query(alias="featureNumber")]


def checklist_ref(
    owner: str, repo: str, number: int, stage: str = DEFAULT_STAGE
) -> ChecklistRef:
    return ChecklistRef(owner=owner, repo=repo, number=number, stage=stage or DEFAULT_STAGE)


def request_base_url(request: Request, settings: Settings) -> str:
    """Base URL for links in notifications, as seen by the user's browser."""
    if settings.server.BASE_URL:
        return settings.server.BASE_URL
    if settings.server.BEHIND_PROXY:
        host = request.headers.get("x-forwarded-host")
        if host:
            proto = request.headers.get("x-forwarded-proto", "https")
            return f"{proto}://{host}"
    return str(request.base_url)


@contextmanager
def checklist_errors(ref: ChecklistRef) -> Iterator[None]:
    """Translate checklist and GitHub errors into HTTP errors."""
    try:
        yield
    except ChecklistItemNotFound as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except GitHubError as e:
        logger.error(
            "github_error", checklist=str(ref), error=str(e), status_code=e.status_code
        )
        if e.status_code == 404:
            raise HTTPException(status_code=404, detail="Pull request not found") from e
        raise HTTPException(status_code=502, detail="GitHub request failed") from e


@router.get("/me")
def get_me(
    user: CurrentUserDep, service: ChecklistServiceDep
) -> Optional[GitHubUser]:
    """Return the acting user, or null when anonymous.

    The frontend calls this right after sign-in, so known users are recorded
    here.
    """
    if user is not None:
        service.add_user(user)
    return user


@router.get("/checklist")
def get_checklist(
    owner: str,
    repo: str,
    number: int,
    service: ChecklistServiceDep,
    user: RequiredUserDep,
    stage: str = DEFAULT_STAGE,
) -> ChecklistResponse:
    """Get a checklist with its current checks."""
    ref = checklist_ref(owner, repo, number, stage)
    with checklist_errors(ref):
        checklist = service.get_checklist(ref)
    return ChecklistResponse(checklist=checklist, me=user)


@router.put("/check")
@limiter.limit("60/minute", key_func=user_key_func)
def put_check(
    request: Request,
    owner: str,
    repo: str,
    number: int,
    feature_number: FeatureNumber,
    service: ChecklistServiceDep,
    settings: SettingsDep,
    user: RequiredUserDep,
    stage: str = DEFAULT_STAGE,
) -> ChecklistResponse:
    """Check an item as the acting user."""
    ref = checklist_ref(owner, repo, number, stage)
    url_builder = partial(build_url, request_base_url(request, settings))
    with checklist_errors(ref):
        checklist = service.add_check(ref, feature_number, user, url_builder)
    return ChecklistResponse(checklist=checklist, me=user)


@router.delete("/check")
@limiter.limit("60/minute", key_func=user_key_func)
def delete_check(
    request: Request,  # pylint: disable=unused-argument
    owner: str,
    repo: str,
    number: int,
    feature_number: FeatureNumber,
    service: ChecklistServiceDep,
    user: RequiredUserDep,
    stage: str = DEFAULT_STAGE,
) -> ChecklistResponse:
    """Withdraw the acting user's check from an item."""
    ref = checklist_ref(owner, repo, number, stage)
    with checklist_errors(ref):
        checklist = service.remove_check(ref, feature_number, user)
    return ChecklistResponse(checklist=checklist, me=user)
