"""Episode resources of the Megaphone API.

Each operation validates its identifiers, builds the endpoint URL and
issues exactly one request through the connection. Responses are returned
as parsed by the connection, without further transformation.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from megaphone.config import Config
from megaphone.connection import HttpMethod, Request
from megaphone.errors import MissingRequiredParameter
from megaphone.models import EpisodeOptions

Transport = Callable[[Request], Any]
Options = EpisodeOptions | Mapping[str, Any]


def _require(**values: Any) -> None:
    """Raise MissingRequiredParameter naming every value that is None or False."""
    missing = [name for name, value in values.items() if value is None or value is False]
    if missing:
        raise MissingRequiredParameter(*missing)


def _to_body(options: Options | None) -> dict[str, Any]:
    if options is None:
        return {}
    if isinstance(options, EpisodeOptions):
        return options.to_body()
    return dict(options)


@dataclass(frozen=True)
class EpisodeResource:
    """A single episode, identified by podcast id and episode id.

    Attributes:
        config: Network id and base URL used to build paths.
        connection: Callable that performs the request.
        podcast_id: Id of the podcast the episode belongs to.
        episode_id: Id of the episode; not needed for ``create``.
    """

    config: Config
    connection: Transport
    podcast_id: str | None = None
    episode_id: str | None = None

    @property
    def collection_url(self) -> str:
        return f"{self.config.network_url}/podcasts/{self.podcast_id}/episodes"

    @property
    def url(self) -> str:
        return f"{self.collection_url}/{self.episode_id}"

    def create(self, options: Options | None = None) -> Any:
        """Create an episode in the podcast.

        Args:
            options: Episode fields; ``title`` and ``pubdate`` are required.

        Returns:
            The created episode as returned by the API.

        Raises:
            MissingRequiredParameter: If podcast_id, title or pubdate is missing.

        Example:
            >>> client.podcast("12345").episode().create(
            ...     EpisodeOptions(title="title", pubdate="2020-06-01T14:54:02.690Z")
            ... )
        """
        body = _to_body(options)
        _require(
            podcast_id=self.podcast_id,
            title=body.get("title"),
            pubdate=body.get("pubdate"),
        )
        return self.connection(Request(url=self.collection_url, method=HttpMethod.POST, body=body))

    def show(self) -> Any:
        """Fetch the episode.

        Raises:
            MissingRequiredParameter: If podcast_id or episode_id is missing.
        """
        _require(podcast_id=self.podcast_id, episode_id=self.episode_id)
        return self.connection(Request(url=self.url, method=HttpMethod.GET))

    def update(self, options: Options | None = None) -> Any:
        """Update the episode with the given fields, e.g. ``{"preCount": 2}``.

        Raises:
            MissingRequiredParameter: If podcast_id or episode_id is missing.
        """
        _require(podcast_id=self.podcast_id, episode_id=self.episode_id)
        return self.connection(
            Request(url=self.url, method=HttpMethod.PUT, body=_to_body(options))
        )

    def delete(self) -> Any:
        """Delete the episode.

        Raises:
            MissingRequiredParameter: If podcast_id or episode_id is missing.
        """
        _require(podcast_id=self.podcast_id, episode_id=self.episode_id)
        return self.connection(Request(url=self.url, method=HttpMethod.DELETE))


@dataclass(frozen=True)
class EpisodeCollectionResource:
    """The episodes of a podcast, plus search across the whole network."""

    config: Config
    connection: Transport
    podcast_id: str | None = None

    def list(self) -> Any:
        """List the podcast's episodes.

        Raises:
            MissingRequiredParameter: If podcast_id is missing.
        """
        _require(podcast_id=self.podcast_id)
        return self.connection(
            Request(
                url=f"{self.config.network_url}/podcasts/{self.podcast_id}/episodes",
                method=HttpMethod.GET,
            )
        )

    def search(self, params: Mapping[str, Any] | None = None) -> Any:
        """Search episodes across podcasts, e.g. ``{"externalId": "show_episode-12345"}``.

        Params are sent as the query string unchanged. The podcast id, if
        any, is not part of the request.
        """
        return self.connection(
            Request(
                url=f"{self.config.api_base_url}/search/episodes",
                method=HttpMethod.GET,
                params=dict(params or {}),
            )
        )
