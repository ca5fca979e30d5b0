"""Acting-user dependencies.

Authentication happens in front of this service (an OAuth proxy or similar)
which forwards the authenticated GitHub identity as request headers. The
user is request-scoped: handlers receive it as a dependency and nothing
about it is kept in module state.
"""

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Request

from models.checklist import GitHubUser

USER_ID_HEADER = "X-GitHub-User-Id"
LOGIN_HEADER = "X-GitHub-Login"
AVATAR_URL_HEADER = "X-GitHub-Avatar-Url"


def get_current_user(request: Request) -> Optional[GitHubUser]:
    """Return the user forwarded by the authenticating front, if any."""
    user_id = request.headers.get(USER_ID_HEADER)
    login = request.headers.get(LOGIN_HEADER)
    if not user_id or not login:
        return None
    try:
        return GitHubUser(
            id=int(user_id),
            login=login,
            avatar_url=request.headers.get(AVATAR_URL_HEADER, ""),
        )
    except ValueError:
        return None


def require_user(
    user: Annotated[Optional[GitHubUser], Depends(get_current_user)],
) -> GitHubUser:
    """Like get_current_user, but rejects anonymous requests with 403."""
    if user is None:
        raise HTTPException(status_code=403, detail="Forbidden")
    return user


CurrentUserDep = Annotated[Optional[GitHubUser], Depends(get_current_user)]
RequiredUserDep = Annotated[GitHubUser, Depends(require_user)]
