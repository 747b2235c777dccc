import logging

from pymonad.either import Either, Left, Right
from toolz import pipe

from playlist_csv.config import Settings
from playlist_csv.decoder import decode_playlist
from playlist_csv.domain.errors import AppError, InvalidUrlError
from playlist_csv.domain.models import Playlist
from playlist_csv.domain.ports import MarkupExtractor, PageFetcher
from playlist_csv.url import embed_url, resolve_playlist_id

logger = logging.getLogger(__name__)


def playlist_id_from_url(url: str) -> Either[InvalidUrlError, str]:
    """
    Returns the playlist id of a Spotify playlist URL.

    Returns:
        Either: A Right(playlist_id), or a Left(InvalidUrlError) if the url
        is not a playlist URL.
    """
    playlist_id = resolve_playlist_id(url)
    if playlist_id is None:
        logger.error(f"'{url}' is not a Spotify playlist URL.")
        return Left(InvalidUrlError(f"'{url}' is not a Spotify playlist URL."))
    logger.info(f"Resolved playlist id '{playlist_id}'.")
    return Right(playlist_id)


def fetch_playlist(
    playlist_id: str,
    fetcher: PageFetcher,
    extractor: MarkupExtractor,
    settings: Settings,
) -> Either[AppError, Playlist]:
    """
    Fetches the embed page of a playlist and decodes its playlist entity.

    Args:
        playlist_id: The id of the playlist.
        fetcher: The adapter used for the single GET request.
        extractor: The adapter pulling the data blob out of the page.
        settings: Provides the embed URL template.

    Returns:
        Either: A Right(Playlist), or the Left of the first failing stage
        (FetchError, ParseError or MissingDataError).
    """
    url = embed_url(playlist_id, settings.embed_url_template)
    return pipe(
        fetcher.fetch_text(url),
        lambda e: e.bind(extractor.extract_next_data),
        lambda e: e.bind(lambda json_text: decode_playlist(json_text, url)),
    )
