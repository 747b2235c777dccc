import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pymonad.either import Either, Left, Right

from playlist_csv.domain.errors import ConfigError
from playlist_csv.url import EMBED_URL_TEMPLATE

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)


def _default_headers() -> dict[str, str]:
    return {"User-Agent": DEFAULT_USER_AGENT}


@dataclass(frozen=True)
class Settings:
    """Settings for fetching the embed page."""
    embed_url_template: str = EMBED_URL_TEMPLATE
    headers: Mapping[str, str] = field(default_factory=_default_headers)
    timeout: Optional[float] = None


def _settings_from_dict(data: Mapping[str, Any]) -> Either[ConfigError, Settings]:
    defaults = Settings()

    template = data.get("embed_url_template", defaults.embed_url_template)
    if not isinstance(template, str) or "{playlist_id}" not in template:
        return Left(ConfigError("'embed_url_template' must be a string containing '{playlist_id}'."))

    headers = data.get("headers", defaults.headers)
    if not isinstance(headers, Mapping):
        return Left(ConfigError("'headers' must be a mapping of header names to values."))

    timeout = data.get("timeout", defaults.timeout)
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            return Left(ConfigError("'timeout' must be a number of seconds."))
        timeout = float(timeout)

    return Right(Settings(
        embed_url_template=template,
        headers={str(k): str(v) for k, v in headers.items()},
        timeout=timeout,
    ))


def load_settings(path: Optional[Path] = None) -> Either[ConfigError, Settings]:
    """
    Loads the settings from a YAML file.

    Args:
        path: The YAML file, or None for the defaults.

    Returns:
        Either: A Right(Settings), keys absent from the file keeping their
        default, or a Left(ConfigError) if the file cannot be read or does
        not hold valid settings.
    """
    if path is None:
        return Right(Settings())

    logger.info(f"Loading configuration from '{path}'.")
    try:
        with open(path, "r", encoding="utf-8") as file:
            data = yaml.safe_load(file)
    except (yaml.YAMLError, IOError) as e:
        logger.error(f"Could not read configuration '{path}': {e}")
        return Left(ConfigError(f"Could not read configuration '{path}': {e}"))

    if data is None:
        return Right(Settings())
    if not isinstance(data, Mapping):
        return Left(ConfigError(f"Configuration '{path}' must be a YAML mapping."))
    return _settings_from_dict(data)
