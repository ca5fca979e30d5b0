"""Server infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        PRCHECKLIST_BASE_URL: Canonical base URL for notification links;
            empty means derive it from each request (default: "")
        PRCHECKLIST_BEHIND_PROXY: Trust X-Forwarded-* headers (default: False)

    Example:
        ```python
        from infrastructure.services import get_settings

        base_url = get_settings().server.BASE_URL
        ```
    """

    BASE_URL: str = Field(default="", alias="PRCHECKLIST_BASE_URL")
    BEHIND_PROXY: bool = Field(default=False, alias="PRCHECKLIST_BEHIND_PROXY")
