"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans guava/core/ports/repositories.py.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit les modeles DB (SQLModel) en entites de domaine (dataclass)
"""

from guava.infrastructure.persistence.repositories.content_repository import (
    SQLModelContentRepository,
)
from guava.infrastructure.persistence.repositories.playlist_repository import (
    SQLModelPlaylistRepository,
)

__all__ = [
    "SQLModelContentRepository",
    "SQLModelPlaylistRepository",
]
