"""Checklist domain models.

A checklist is built from a "release" pull request whose merge commits
reference other pull requests; each referenced pull request becomes an item
that reviewers check off. The checklist configuration is read from a YAML
blob stored in the repository and embeds the notification settings.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_STAGE = "default"

# Item number -> ids of the users who checked it
Checks = Dict[int, List[int]]


class GitHubUser(BaseModel):
    id: int
    login: str
    avatar_url: str = ""


class Commit(BaseModel):
    message: str


class PullRequest(BaseModel):
    title: str
    body: str = ""
    owner: str
    repo: str
    number: int
    is_private: bool = False
    head_sha: str = ""
    # Only filled for the main pull request of a checklist
    commits: List[Commit] = Field(default_factory=list)


class ChecklistRef(BaseModel):
    """Identifies one checklist: a pull request plus a stage."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    number: int
    stage: str = DEFAULT_STAGE

    def __str__(self) -> str:
        s = f"{self.owner}/{self.repo}#{self.number}"
        if self.stage != DEFAULT_STAGE:
            s += f"::{self.stage}"
        return s


class ChannelConfig(BaseModel):
    """An outbound chat webhook."""

    url: str


class NotificationEventsConfig(BaseModel):
    """Channel names to notify, per event kind."""

    on_check: List[str] = Field(default_factory=list)
    on_complete: List[str] = Field(default_factory=list)


class NotificationConfig(BaseModel):
    """Notification section of a checklist configuration.

    Attributes:
        events: Channel names to notify for each event kind. Names may repeat;
            every occurrence triggers its own delivery.
        channels: Channel name -> webhook descriptor. Names referenced by
            events but missing here are ignored.
    """

    events: NotificationEventsConfig = Field(default_factory=NotificationEventsConfig)
    channels: Dict[str, ChannelConfig] = Field(default_factory=dict)


class ChecklistConfig(BaseModel):
    """Parsed contents of the repository's prchecklist.yml."""

    stages: List[str] = Field(default_factory=list)
    notification: NotificationConfig = Field(default_factory=NotificationConfig)


class ChecklistItem(BaseModel):
    """A sub pull request awaiting reviewer check-marks."""

    number: int
    title: str
    checked_by: List[GitHubUser] = Field(default_factory=list)

    @property
    def is_checked(self) -> bool:
        return len(self.checked_by) > 0


class Checklist(BaseModel):
    pull_request: PullRequest
    stage: str = DEFAULT_STAGE
    items: List[ChecklistItem] = Field(default_factory=list)
    # None disables notifications for this checklist
    config: Optional[ChecklistConfig] = None

    @property
    def ref(self) -> ChecklistRef:
        return ChecklistRef(
            owner=self.pull_request.owner,
            repo=self.pull_request.repo,
            number=self.pull_request.number,
            stage=self.stage,
        )

    @property
    def completed(self) -> bool:
        """True once every item has at least one check."""
        return bool(self.items) and all(item.is_checked for item in self.items)

    def path(self) -> str:
        """Application path of the checklist page, e.g. /owner/repo/pull/1."""
        pr = self.pull_request
        path = f"/{pr.owner}/{pr.repo}/pull/{pr.number}"
        if self.stage != DEFAULT_STAGE:
            path += f"/{self.stage}"
        return path

    def item(self, number: int) -> Optional[ChecklistItem]:
        for item in self.items:
            if item.number == number:
                return item
        return None

    def __str__(self) -> str:
        return str(self.ref)


class ChecklistResponse(BaseModel):
    checklist: Checklist
    me: Optional[GitHubUser] = None
