"""Routes HTTP : index, playlists, contenus."""
