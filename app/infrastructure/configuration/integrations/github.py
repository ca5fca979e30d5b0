"""GitHub integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class GitHubSettings(IntegrationSettings):
    """GitHub REST API configuration.

    Environment Variables:
        GITHUB_TOKEN: Token used for API calls (empty for anonymous access)
        GITHUB_API_URL: API base URL (default: https://api.github.com)
        GITHUB_TIMEOUT_SECONDS: Per-request timeout (default: 30)
        PRCHECKLIST_CONFIG_PATH: Repository path of the checklist config blob

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        api_url = settings.github.GITHUB_API_URL
        ```
    """

    GITHUB_TOKEN: str = ""
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_TIMEOUT_SECONDS: int = 30
    CONFIG_PATH: str = Field(default="prchecklist.yml", alias="PRCHECKLIST_CONFIG_PATH")
