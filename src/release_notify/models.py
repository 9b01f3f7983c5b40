"""Message envelope data models for the Slack incoming-webhook payload."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _ValueObject(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class AttachmentField(_ValueObject):
    title: str | None = None
    value: str | None = None
    short: bool = False

    @field_validator("title", "value")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        return v or None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if not self.short:
            data.pop("short")
        return data


class Action(_ValueObject):
    type: str = "button"
    text: str | None = None
    url: str | None = None

    @field_validator("text", "url")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        return v or None


class Attachment(_ValueObject):
    fallback: str = Field(min_length=1)
    pretext: str | None = None
    color: str | None = None
    author_name: str | None = None
    author_link: str | None = None
    author_icon: str | None = None
    footer: str | None = None
    fields: tuple[AttachmentField, ...] = ()
    actions: tuple[Action, ...] = ()

    @field_validator(
        "pretext", "color", "author_name", "author_link", "author_icon", "footer"
    )
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        return v or None

    def to_dict(self) -> dict[str, Any]:
        data = self.model_dump(mode="json", exclude_none=True, exclude={"fields", "actions"})
        if self.fields:
            data["fields"] = [f.to_dict() for f in self.fields]
        if self.actions:
            data["actions"] = [a.to_dict() for a in self.actions]
        return data


class Envelope(_ValueObject):
    """Top-level message posted to the webhook."""

    text: str | None = None
    username: str | None = None
    icon_url: str | None = None
    icon_emoji: str | None = None
    channel: str | None = None
    unfurl_links: bool = False
    attachments: tuple[Attachment, ...] = Field(min_length=1)

    @field_validator("text", "username", "icon_url", "icon_emoji", "channel")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        return v or None

    def to_dict(self) -> dict[str, Any]:
        data = self.model_dump(mode="json", exclude_none=True, exclude={"attachments"})
        data["attachments"] = [a.to_dict() for a in self.attachments]
        return data
