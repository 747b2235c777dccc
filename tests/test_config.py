import pytest

from playlist_csv.config import DEFAULT_USER_AGENT, Settings, load_settings
from playlist_csv.domain.errors import ConfigError
from playlist_csv.url import EMBED_URL_TEMPLATE


def test_load_settings_defaults():
    result = load_settings(None)

    assert result.is_right()
    settings = result.value
    assert settings == Settings()
    assert settings.embed_url_template == EMBED_URL_TEMPLATE
    assert settings.headers == {"User-Agent": DEFAULT_USER_AGENT}
    assert settings.timeout is None


def test_load_settings_from_yaml(tmp_path):
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        """
embed_url_template: "http://localhost:8000/embed/{playlist_id}"
headers:
  User-Agent: my-agent
  Accept-Language: fr
timeout: 10
unknown_key: ignored
"""
    )

    settings = load_settings(config_file).value

    assert settings.embed_url_template == "http://localhost:8000/embed/{playlist_id}"
    assert settings.headers == {"User-Agent": "my-agent", "Accept-Language": "fr"}
    assert settings.timeout == 10.0


def test_load_settings_partial_file_keeps_defaults(tmp_path):
    config_file = tmp_path / "config.yml"
    config_file.write_text("timeout: 2.5\n")

    settings = load_settings(config_file).value

    assert settings.timeout == 2.5
    assert settings.embed_url_template == EMBED_URL_TEMPLATE
    assert settings.headers == {"User-Agent": DEFAULT_USER_AGENT}


def test_load_settings_empty_file(tmp_path):
    config_file = tmp_path / "config.yml"
    config_file.write_text("")

    assert load_settings(config_file).value == Settings()


def test_load_settings_invalid_yaml(tmp_path, caplog):
    config_file = tmp_path / "config.yml"
    config_file.write_text("headers: [unclosed")

    result = load_settings(config_file)

    assert result.is_left()
    error_value, _ = result.monoid
    assert isinstance(error_value, ConfigError)
    assert "Could not read configuration" in error_value.message
    assert "Could not read configuration" in caplog.text


def test_load_settings_missing_file(tmp_path):
    result = load_settings(tmp_path / "missing.yml")

    assert result.is_left()
    assert isinstance(result.monoid[0], ConfigError)


@pytest.mark.parametrize(
    "content, expected",
    [
        ("- a\n- b\n", "must be a YAML mapping"),
        ("embed_url_template: http://localhost/embed\n", "embed_url_template"),
        ("headers: not-a-mapping\n", "headers"),
        ("timeout: soon\n", "timeout"),
        ("timeout: true\n", "timeout"),
    ],
)
def test_load_settings_rejects_invalid_values(tmp_path, content, expected):
    config_file = tmp_path / "config.yml"
    config_file.write_text(content)

    result = load_settings(config_file)

    assert result.is_left()
    error_value, _ = result.monoid
    assert isinstance(error_value, ConfigError)
    assert expected in error_value.message
