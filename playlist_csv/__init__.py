"""Export Spotify playlist tracks as CSV from the public embed page."""

__version__ = "0.1.0"
