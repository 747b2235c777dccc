from playlist_csv.domain.models import Playlist, Track

HEADER = ("Name", "Artist")


def escape_field(value: str) -> str:
    """Quotes a CSV field, doubling the quotes it contains."""
    return '"' + str(value).replace('"', '""') + '"'


def format_row(track: Track) -> str:
    return ",".join([escape_field(track.title), escape_field(track.subtitle)])


def format_csv(playlist: Playlist) -> str:
    """
    Formats the tracks of a playlist as CSV.

    The header row is followed by one title/artist row per track, in
    playlist order. Rows are separated by newlines, with no newline at
    the end.
    """
    rows = [",".join(HEADER)]
    rows.extend(format_row(track) for track in playlist.track_list)
    return "\n".join(rows)
