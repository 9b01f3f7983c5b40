"""Envelope assembly from resolved settings."""

from __future__ import annotations

import logging

from release_notify.config import (
    ENV_GITHUB_ACTION,
    ENV_GITHUB_ACTOR,
    ENV_GITHUB_EVENT_NAME,
    ENV_GITHUB_REF,
    ENV_GITHUB_REPOSITORY,
    ENV_GITHUB_WORKFLOW,
    Settings,
)
from release_notify.models import Action, Attachment, AttachmentField, Envelope

logger = logging.getLogger(__name__)


class FieldListBuilder:
    """Collects short attachment fields in display order, skipping empty values."""

    def __init__(self) -> None:
        self._fields: list[AttachmentField] = []

    def add(self, title: str, value: str | None) -> FieldListBuilder:
        if value:
            self._fields.append(AttachmentField(title=title, value=value, short=True))
        return self

    def build(self) -> tuple[AttachmentField, ...]:
        return tuple(self._fields)


class ActionListBuilder:
    """Collects link buttons in display order, skipping empty URLs."""

    def __init__(self) -> None:
        self._actions: list[Action] = []

    def add_button(self, text: str, url: str | None) -> ActionListBuilder:
        if url:
            self._actions.append(Action(type="button", text=text, url=url))
        return self

    def build(self) -> tuple[Action, ...]:
        return tuple(self._actions)


def resolve_version(settings: Settings) -> str | None:
    """Explicit version name, else the tag name when the build runs on a tag."""
    if settings.version_name:
        return settings.version_name
    if settings.ref.is_tag:
        return settings.ref.short
    return None


def build_fields(settings: Settings) -> tuple[AttachmentField, ...]:
    built_from = settings.ref.short if settings.ref.is_branch else None

    fields = (
        FieldListBuilder()
        .add("Base URL", settings.base_url)
        .add("Actioned by", settings.actor)
        .add("Built from", built_from)
        .add("Environments", settings.environments)
        .add("Variants", settings.variants)
        .add("Version", resolve_version(settings))
        .build()
    )
    logger.debug("Built %d attachment fields", len(fields))
    return fields


def build_actions(settings: Settings) -> tuple[Action, ...]:
    actions = (
        ActionListBuilder()
        .add_button("View release", settings.release_url)
        .add_button("Changelog", settings.changelog_url)
        .build()
    )
    logger.debug("Built %d attachment actions", len(actions))
    return actions


def build_fallback(settings: Settings) -> str:
    """Explicit message text, or a summary of the CI run that triggered us."""
    if settings.message:
        return settings.message

    return " \n ".join([
        f"{ENV_GITHUB_ACTION}={settings.github_action}",
        f"{ENV_GITHUB_ACTOR}={settings.github_actor}",
        f"{ENV_GITHUB_EVENT_NAME}={settings.github_event_name}",
        f"{ENV_GITHUB_REF}={settings.ref.ref}",
        f"{ENV_GITHUB_REPOSITORY}={settings.github_repository}",
        f"{ENV_GITHUB_WORKFLOW}={settings.github_workflow}",
    ])


def build_envelope(settings: Settings) -> Envelope:
    attachment = Attachment(
        fallback=build_fallback(settings),
        color=settings.color,
        pretext=settings.pretext,
        footer=settings.footer,
        fields=build_fields(settings),
        actions=build_actions(settings),
    )

    return Envelope(
        text=settings.title,
        username=settings.username,
        icon_url=settings.icon_url,
        icon_emoji=settings.icon_emoji,
        channel=settings.channel,
        attachments=(attachment,),
    )
