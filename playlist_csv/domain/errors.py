# playlist_csv/domain/errors.py
from dataclasses import dataclass


@dataclass(frozen=True)
class AppError:
    """Base class for the application's errors."""
    message: str


@dataclass(frozen=True)
class InvalidUrlError(AppError):
    """The input is not a Spotify playlist URL."""
    pass


@dataclass(frozen=True)
class FetchError(AppError):
    """The embed page could not be fetched."""
    pass


@dataclass(frozen=True)
class ParseError(AppError):
    """The embedded data blob is not valid JSON."""
    pass


@dataclass(frozen=True)
class MarkupNotFoundError(ParseError):
    """The page has no <script id="__NEXT_DATA__"> content to parse."""
    pass


@dataclass(frozen=True)
class MissingDataError(AppError):
    """The decoded data does not contain a usable playlist entity."""
    pass


@dataclass(frozen=True)
class ConfigError(AppError):
    """The configuration file is unreadable or invalid."""
    pass


@dataclass(frozen=True)
class OutputError(AppError):
    """The CSV could not be written."""
    pass
