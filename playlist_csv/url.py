import re
from typing import Optional

EMBED_URL_TEMPLATE = "https://open.spotify.com/embed/playlist/{playlist_id}"

PLAYLIST_URL_PATTERN = re.compile(
    r"https://open\.spotify\.com/(?:embed/)?playlist/([a-zA-Z0-9]+)"
)


def resolve_playlist_id(url: str) -> Optional[str]:
    """
    Extracts the playlist id from a Spotify playlist URL.

    Accepts both https://open.spotify.com/playlist/<id> and
    https://open.spotify.com/embed/playlist/<id>. Anything following the id
    (query string, trailing slash) is ignored.

    Returns:
        The id, or None if the url is not a playlist URL.
    """
    match = PLAYLIST_URL_PATTERN.search(url)
    return match.group(1) if match else None


def embed_url(playlist_id: str, template: str = EMBED_URL_TEMPLATE) -> str:
    """Builds the embed page URL for a playlist id."""
    return template.format(playlist_id=playlist_id)
