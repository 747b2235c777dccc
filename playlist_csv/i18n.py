# playlist_csv/i18n.py
import locale

MESSAGES = {
    "en": {
        "usage": "Please provide a valid Spotify URL, e.g., https://open.spotify.com/playlist/...",
        "app_help": "Export the tracks of a public Spotify playlist as CSV.",
        "help_url": "URL of the Spotify playlist (https://open.spotify.com/playlist/<id>).",
        "help_output": "Write the CSV to this file instead of standard output.",
        "help_config": "YAML configuration file.",
        "help_lang": "Set the language for output messages (e.g., 'en' or 'fr').",
        "help_verbose": "Show progress logs on standard error.",
        "csv_written": "CSV with {count} tracks written to '{path}'.",
    },
    "fr": {
        "usage": "Veuillez fournir une URL Spotify valide, ex : https://open.spotify.com/playlist/...",
        "app_help": "Exporte les morceaux d'une playlist Spotify publique au format CSV.",
        "help_url": "URL de la playlist Spotify (https://open.spotify.com/playlist/<id>).",
        "help_output": "Écrit le CSV dans ce fichier au lieu de la sortie standard.",
        "help_config": "Fichier de configuration YAML.",
        "help_lang": "Définit la langue des messages de sortie (ex: 'en' ou 'fr').",
        "help_verbose": "Affiche les journaux de progression sur la sortie d'erreur.",
        "csv_written": "CSV de {count} morceaux écrit dans '{path}'.",
    },
}

_current_lang = "en"


def get_default_lang() -> str:
    """Picks French for a French system locale, English otherwise."""
    try:
        lang_code, _ = locale.getlocale()
    except ValueError:
        return "en"
    return "fr" if lang_code and lang_code.startswith("fr") else "en"


def set_lang(lang: str) -> None:
    global _current_lang
    _current_lang = lang if lang in MESSAGES else "en"


def get_message(key: str, **kwargs) -> str:
    return MESSAGES[_current_lang][key].format(**kwargs)


set_lang(get_default_lang())
