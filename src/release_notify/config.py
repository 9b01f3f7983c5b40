"""Configuration and constants for the notifier."""

from __future__ import annotations

from enum import Enum
from typing import Mapping

from pydantic import BaseModel, ConfigDict

from release_notify.errors import ConfigurationError

ENV_SLACK_WEBHOOK = "SLACK_WEBHOOK"
ENV_SLACK_CHANNEL = "SLACK_CHANNEL"
ENV_SLACK_TITLE = "SLACK_TITLE"
ENV_SLACK_MESSAGE = "SLACK_MESSAGE"
ENV_SLACK_COLOR = "SLACK_COLOR"
ENV_SLACK_FOOTER = "SLACK_FOOTER"
ENV_SLACK_USERNAME = "SLACK_USERNAME"
ENV_SLACK_ICON = "SLACK_ICON"
ENV_SLACK_ICON_EMOJI = "SLACK_ICON_EMOJI"
ENV_SLACK_PRETEXT = "SLACK_PRETEXT"
ENV_VARIANTS = "VARIANTS"
ENV_ENVIRONMENT = "ENVIRONMENT"
ENV_CHANGELOG_URL = "CHANGELOG_URL"
ENV_RELEASE_URL = "RELEASE_URL"
ENV_VERSION_NAME = "VERSION_NAME"
ENV_BASE_URL = "BASE_URL"

ENV_GITHUB_ACTOR = "GITHUB_ACTOR"
ENV_GITHUB_ACTION = "GITHUB_ACTION"
ENV_GITHUB_EVENT_NAME = "GITHUB_EVENT_NAME"
ENV_GITHUB_REF = "GITHUB_REF"
ENV_GITHUB_REPOSITORY = "GITHUB_REPOSITORY"
ENV_GITHUB_WORKFLOW = "GITHUB_WORKFLOW"

DEFAULT_COLOR = "good"
DEFAULT_FOOTER = "AEVI Slack Notification"
DEFAULT_ACTOR = "Unknown"

TAG_PREFIX = "refs/tags/"
BRANCH_PREFIX = "refs/heads/"
REFS_PREFIX = "refs/"

HTTP_TIMEOUT = 10


def env_or(environ: Mapping[str, str], name: str, default: str | None) -> str | None:
    """Return the variable's value if it is set, even to "", else ``default``."""
    if name in environ:
        return environ[name]
    return default


class RefKind(str, Enum):
    BRANCH = "branch"
    TAG = "tag"
    OTHER = "other"


class GitRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    ref: str
    kind: RefKind
    short: str

    @property
    def is_tag(self) -> bool:
        return self.kind == RefKind.TAG

    @property
    def is_branch(self) -> bool:
        return self.kind == RefKind.BRANCH


def parse_ref(ref: str) -> GitRef:
    """Split a reference like ``refs/heads/main`` into its kind and short name.

    Branches and tags lose their ``refs/heads/`` or ``refs/tags/`` prefix.
    Any other ``refs/<namespace>/<name>`` reference (pull requests, notes)
    is kept as kind OTHER with only ``refs/`` stripped. Anything else, or a
    reference with an empty name, raises ConfigurationError.
    """
    if ref.startswith(BRANCH_PREFIX):
        kind, short = RefKind.BRANCH, ref[len(BRANCH_PREFIX):]
    elif ref.startswith(TAG_PREFIX):
        kind, short = RefKind.TAG, ref[len(TAG_PREFIX):]
    elif ref.startswith(REFS_PREFIX):
        kind, short = RefKind.OTHER, ref[len(REFS_PREFIX):]
        namespace, _, name = short.partition("/")
        if not namespace or not name:
            short = ""
    else:
        raise ConfigurationError(
            f"Malformed {ENV_GITHUB_REF} {ref!r}: expected a reference starting "
            f"with {BRANCH_PREFIX!r} or {TAG_PREFIX!r}"
        )

    if not short:
        raise ConfigurationError(f"Malformed {ENV_GITHUB_REF} {ref!r}: the {kind.value} name is empty")

    return GitRef(ref=ref, kind=kind, short=short)


class Settings(BaseModel):
    """Everything the notifier reads from the environment, resolved once."""

    model_config = ConfigDict(frozen=True)

    webhook_url: str
    ref: GitRef

    channel: str | None = None
    title: str | None = None
    message: str | None = None
    color: str | None = DEFAULT_COLOR
    footer: str | None = DEFAULT_FOOTER
    username: str | None = None
    icon_url: str | None = None
    icon_emoji: str | None = None
    pretext: str | None = None
    variants: str | None = None
    environments: str | None = None
    changelog_url: str | None = None
    release_url: str | None = None
    version_name: str | None = None
    base_url: str | None = None

    actor: str | None = DEFAULT_ACTOR
    github_actor: str = ""
    github_action: str = ""
    github_event_name: str = ""
    github_repository: str = ""
    github_workflow: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> Settings:
        webhook_url = environ.get(ENV_SLACK_WEBHOOK, "")
        if not webhook_url:
            raise ConfigurationError(f"{ENV_SLACK_WEBHOOK} URL is required")

        return cls(
            webhook_url=webhook_url,
            ref=parse_ref(environ.get(ENV_GITHUB_REF, "")),
            channel=env_or(environ, ENV_SLACK_CHANNEL, None),
            title=env_or(environ, ENV_SLACK_TITLE, None),
            message=env_or(environ, ENV_SLACK_MESSAGE, None),
            color=env_or(environ, ENV_SLACK_COLOR, DEFAULT_COLOR),
            footer=env_or(environ, ENV_SLACK_FOOTER, DEFAULT_FOOTER),
            username=env_or(environ, ENV_SLACK_USERNAME, None),
            icon_url=env_or(environ, ENV_SLACK_ICON, None),
            icon_emoji=env_or(environ, ENV_SLACK_ICON_EMOJI, None),
            pretext=env_or(environ, ENV_SLACK_PRETEXT, ""),
            variants=env_or(environ, ENV_VARIANTS, None),
            environments=env_or(environ, ENV_ENVIRONMENT, None),
            changelog_url=env_or(environ, ENV_CHANGELOG_URL, None),
            release_url=env_or(environ, ENV_RELEASE_URL, None),
            version_name=env_or(environ, ENV_VERSION_NAME, None),
            base_url=env_or(environ, ENV_BASE_URL, None),
            actor=env_or(environ, ENV_GITHUB_ACTOR, DEFAULT_ACTOR),
            github_actor=environ.get(ENV_GITHUB_ACTOR, ""),
            github_action=environ.get(ENV_GITHUB_ACTION, ""),
            github_event_name=environ.get(ENV_GITHUB_EVENT_NAME, ""),
            github_repository=environ.get(ENV_GITHUB_REPOSITORY, ""),
            github_workflow=environ.get(ENV_GITHUB_WORKFLOW, ""),
        )
