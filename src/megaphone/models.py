"""Data models for megaphone."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

# Python field name -> key in the Megaphone episode body
EPISODE_FIELD_KEYS = {
    "title": "title",
    "pubdate": "pubdate",
    "subtitle": "subtitle",
    "summary": "summary",
    "author": "author",
    "external_id": "externalId",
    "guid": "guid",
    "pre_count": "preCount",
    "post_count": "postCount",
    "insertion_points": "insertionPoints",
    "background_audio_file_url": "backgroundAudioFileUrl",
    "background_image_file_url": "backgroundImageFileUrl",
    "explicit": "explicit",
    "draft": "draft",
    "episode_type": "episodeType",
    "season_number": "seasonNumber",
    "episode_number": "episodeNumber",
    "clean_title": "cleanTitle",
    "custom_fields": "customFields",
}


@dataclass(frozen=True)
class EpisodeOptions:
    """Body of an episode create or update request.

    Only fields that are set are sent. Keys the API knows about but that
    have no named field here can be passed through ``extra``; they are sent
    as given and override named fields with the same key.
    """

    title: str | None = None
    pubdate: str | None = None  # ISO 8601, e.g. 2020-06-01T14:54:02.690Z
    subtitle: str | None = None
    summary: str | None = None
    author: str | None = None
    external_id: str | None = None
    guid: str | None = None
    pre_count: int | None = None
    post_count: int | None = None
    insertion_points: list[float] | None = None  # seconds
    background_audio_file_url: str | None = None
    background_image_file_url: str | None = None
    explicit: bool | None = None
    draft: bool | None = None
    episode_type: str | None = None  # full, trailer, bonus
    season_number: int | None = None
    episode_number: int | None = None
    clean_title: str | None = None
    custom_fields: dict[str, Any] | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> EpisodeOptions:
        """Build options from API-style keys, keeping unknown keys in ``extra``.

        Both the API's camelCase keys and the snake_case field names are
        accepted. Keys whose value is None go to ``extra`` so they are still
        sent, e.g. to clear a field on update.
        """
        by_key = {key: name for name, key in EPISODE_FIELD_KEYS.items()}
        named: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, value in data.items():
            name = by_key.get(key) or (key if key in EPISODE_FIELD_KEYS else None)
            if name is None:
                extra[key] = value
            elif value is None:
                extra[EPISODE_FIELD_KEYS[name]] = value
            else:
                named[name] = value
        return cls(**named, extra=extra)

    def to_body(self) -> dict[str, Any]:
        """Serialize to the JSON body expected by the API."""
        body: dict[str, Any] = {}
        for f in fields(self):
            if f.name == "extra":
                continue
            value = getattr(self, f.name)
            if value is not None:
                body[EPISODE_FIELD_KEYS[f.name]] = value
        body.update(self.extra)
        return body
