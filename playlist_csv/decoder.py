import json
import logging
from typing import Mapping

from pymonad.either import Either, Left, Right
from toolz import get_in

from playlist_csv.domain.errors import AppError, MarkupNotFoundError, MissingDataError, ParseError
from playlist_csv.domain.models import Playlist

logger = logging.getLogger(__name__)

ENTITY_PATH = ("props", "pageProps", "state", "data", "entity")


def decode_playlist(json_text: str, embed_url: str) -> Either[AppError, Playlist]:
    """
    Decodes the __NEXT_DATA__ blob of an embed page into a Playlist.

    Args:
        json_text: The text of the <script id="__NEXT_DATA__"> element.
        embed_url: The page the text comes from, quoted in error messages.

    Returns:
        Either: A Right(Playlist) with the entity found at
        props.pageProps.state.data.entity, or a Left with
        MarkupNotFoundError (blank text), ParseError (invalid JSON) or
        MissingDataError (entity absent or unusable).
    """
    try:
        data = json.loads(json_text)
    except ValueError as e:
        message = f'Invalid JSON in <script id="__NEXT_DATA__">: {e}'
        logger.error(f"Failed to decode data from '{embed_url}': {e}")
        if not json_text.strip():
            return Left(MarkupNotFoundError(message))
        return Left(ParseError(message))

    entity = get_in(ENTITY_PATH, data)
    if not isinstance(entity, Mapping):
        logger.error(f"No playlist entity in data from '{embed_url}'.")
        return Left(MissingDataError(
            f'Can\'t find valid <script id="__NEXT_DATA__"> on page. Please check {embed_url}'
        ))

    tracks = entity.get("trackList")
    if tracks is not None and not isinstance(tracks, list):
        logger.error(f"trackList from '{embed_url}' is a {type(tracks).__name__}, not a list.")
        return Left(MissingDataError(
            f"The playlist entity has no valid trackList. Please check {embed_url}"
        ))

    playlist = Playlist.from_dict(entity)
    logger.info(f"Decoded playlist '{playlist.name}' with {len(playlist.track_list)} tracks.")
    return Right(playlist)
