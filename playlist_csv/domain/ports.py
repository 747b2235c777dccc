from abc import ABC, abstractmethod

from pymonad.either import Either

from .errors import AppError


class PageFetcher(ABC):
    """
    Port defining the contract for retrieving a web page.
    """

    @abstractmethod
    def fetch_text(self, url: str) -> Either[AppError, str]:
        """
        Performs a single GET request on the url.

        Returns:
            Either: A Right(body) with the decoded response body, or a
            Left(FetchError) if the response status is not a success.
        """
        pass


class MarkupExtractor(ABC):
    """
    Port defining the contract for pulling the data blob out of a page.
    """

    @abstractmethod
    def extract_next_data(self, html: str) -> Either[AppError, str]:
        """
        Returns a Right with the text of the <script id="__NEXT_DATA__">
        element, or a Right("") if the page has none.
        """
        pass
