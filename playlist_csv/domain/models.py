from dataclasses import dataclass, field
from typing import Any, Mapping


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


@dataclass(frozen=True)
class Track:
    """One entry of a playlist's track list."""
    uri: str
    uid: str
    title: str
    subtitle: str

    @classmethod
    def from_dict(cls, data: Any) -> "Track":
        """Builds a Track, an entry that is not an object gives empty fields."""
        if not isinstance(data, Mapping):
            data = {}
        return cls(
            uri=_text(data, "uri"),
            uid=_text(data, "uid"),
            title=_text(data, "title"),
            subtitle=_text(data, "subtitle"),
        )


@dataclass(frozen=True)
class Playlist:
    """Represents the playlist entity found on the embed page."""
    type: str
    name: str
    uri: str
    id: str
    track_list: tuple[Track, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Playlist":
        """
        Builds a Playlist from the decoded entity.

        Fields are taken as they are: a missing field becomes an empty
        string and a missing trackList an empty playlist. Every entry of
        trackList gives one track, in order.
        """
        tracks = data.get("trackList") or []
        return cls(
            type=_text(data, "type"),
            name=_text(data, "name"),
            uri=_text(data, "uri"),
            id=_text(data, "id"),
            track_list=tuple(Track.from_dict(track) for track in tracks),
        )
