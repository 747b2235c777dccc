import logging

from bs4 import BeautifulSoup
from pymonad.either import Either, Right

from playlist_csv.domain.errors import AppError
from playlist_csv.domain.ports import MarkupExtractor

logger = logging.getLogger(__name__)

NEXT_DATA_ID = "__NEXT_DATA__"


class NextDataExtractor(MarkupExtractor):
    """
    Adapter reading the serialized page data with BeautifulSoup.
    """

    def extract_next_data(self, html: str) -> Either[AppError, str]:
        soup = BeautifulSoup(html, "html.parser")
        script = soup.find("script", id=NEXT_DATA_ID)
        if script is None or script.string is None:
            # Not an error here, decoding the empty text reports it
            logger.warning(f'No <script id="{NEXT_DATA_ID}"> content found on page.')
            return Right("")
        return Right(str(script.string))
