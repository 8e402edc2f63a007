"""
Entites metier representant les concepts du catalogue.

Exports:
- ContentType: Type de contenu a ordinal stable (NONE, SOUND, VIDEO)
- ContentEntry: Element d'une playlist
- ContentRecord: Ligne du catalogue de contenus (content_id -> hash)
- Playlist: Playlist complete avec son contenu ordonne
- PlaylistSummary: Projection legere pour le listing
"""

from guava.core.entities.catalog import (
    ContentEntry,
    ContentRecord,
    ContentType,
    Playlist,
    PlaylistSummary,
)

__all__ = [
    "ContentType",
    "ContentEntry",
    "ContentRecord",
    "Playlist",
    "PlaylistSummary",
]
