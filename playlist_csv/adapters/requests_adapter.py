import logging
from typing import Optional

import requests
from pymonad.either import Either, Left, Right

from playlist_csv.config import Settings
from playlist_csv.domain.errors import FetchError
from playlist_csv.domain.ports import PageFetcher

logger = logging.getLogger(__name__)


class RequestsFetcher(PageFetcher):
    """
    Adapter fetching pages with a requests session.

    The session is used for a single invocation; use the fetcher as a
    context manager to close it afterwards.
    """

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self._settings = settings or Settings()
        self._session = session or requests.Session()

    def __enter__(self) -> "RequestsFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def fetch_text(self, url: str) -> Either[FetchError, str]:
        logger.info(f"Fetching '{url}'.")
        try:
            response = self._session.get(
                url,
                headers=dict(self._settings.headers),
                timeout=self._settings.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Request to '{url}' failed: {e}")
            return Left(FetchError(str(e)))

        if not 200 <= response.status_code < 300:
            status_text = response.reason or f"HTTP {response.status_code}"
            logger.error(f"'{url}' answered with status {response.status_code} ({status_text}).")
            return Left(FetchError(status_text))

        # Without a declared charset requests falls back to ISO-8859-1 for text/html
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"

        logger.info(f"Fetched '{url}' ({len(response.text)} characters).")
        return Right(response.text)
