"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports repository : Contrats de lecture du store de documents
- IContentRepository : Catalogue de contenus (content_id -> hash)
- IPlaylistRepository : Documents de playlists

Ports stockage : Contrats d'acces aux fichiers
- IAssetStore : Localisation et ouverture des assets adresses par hash
"""

from guava.core.ports.file_system import IAssetStore
from guava.core.ports.repositories import IContentRepository, IPlaylistRepository

__all__ = [
    # Repositories
    "IContentRepository",
    "IPlaylistRepository",
    # Stockage
    "IAssetStore",
]
