from playlist_csv.cli import app

app(prog_name="playlist-csv")
