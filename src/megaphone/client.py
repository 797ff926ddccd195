"""Entry point tying configuration, connection and resources together."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from megaphone.config import Config, load_config
from megaphone.connection import Connection
from megaphone.episodes import EpisodeCollectionResource, EpisodeResource


@dataclass(frozen=True)
class PodcastScope:
    """Resources of one podcast."""

    client: MegaphoneClient
    podcast_id: str

    def episode(self, episode_id: str | None = None) -> EpisodeResource:
        return self.client.episode(episode_id, podcast_id=self.podcast_id)

    @property
    def episodes(self) -> EpisodeCollectionResource:
        return EpisodeCollectionResource(
            self.client.config, self.client.connection, self.podcast_id
        )


class MegaphoneClient:
    """Client for one Megaphone network.

    Example:
        >>> with MegaphoneClient(Config(network_id="abc", token="secret")) as megaphone:
        ...     megaphone.podcast("12345").episode("56789").show()
        ...     megaphone.episodes.search({"externalId": "show_episode-12345"})
    """

    def __init__(self, config: Config, connection: Connection | None = None) -> None:
        self.config = config
        self.connection = connection or Connection(config)

    @classmethod
    def from_config_file(cls, path: Path | None = None) -> MegaphoneClient:
        """Create a client from the config files and MEGAPHONE_* variables."""
        return cls(load_config(path))

    def __enter__(self) -> MegaphoneClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.connection.close()

    def podcast(self, podcast_id: str) -> PodcastScope:
        return PodcastScope(self, podcast_id)

    def episode(
        self,
        episode_id: str | None = None,
        podcast_id: str | None = None,
    ) -> EpisodeResource:
        return EpisodeResource(self.config, self.connection, podcast_id, episode_id)

    @property
    def episodes(self) -> EpisodeCollectionResource:
        """Episodes not bound to a podcast; only ``search`` is usable."""
        return EpisodeCollectionResource(self.config, self.connection)
