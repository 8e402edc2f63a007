"""
Modeles SQLModel pour le catalogue Guava.

Ces modeles representent les tables du catalogue.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- content: Catalogue de contenus (content_id -> hash)
- playlist: Documents de playlists avec leur contenu ordonne

Le champ content_json stocke la sequence ordonnee des elements d'une playlist
sous forme de tableau JSON : [{"name": ..., "content_type": 1, "content_id": ...}].
Les types de contenu sont stockes par ordinal (0, 1, 2).
"""

from __future__ import annotations

import json
from typing import Any, Optional

from sqlmodel import Field, SQLModel


class ContentModel(SQLModel, table=True):
    """
    Modele representant un contenu du catalogue.

    L'index unique sur content_id garantit qu'un identifiant
    resout vers exactement un hash.
    """

    __tablename__ = "content"

    id: int | None = Field(default=None, primary_key=True)
    content_id: str = Field(unique=True, index=True)
    content_type: int = Field(default=0)  # Ordinal ContentType
    hash: str = Field(index=True)


class PlaylistModel(SQLModel, table=True):
    """
    Modele representant une playlist.

    Le contenu est stocke en JSON pour conserver l'ordre exact du document.
    """

    __tablename__ = "playlist"

    id: int | None = Field(default=None, primary_key=True)
    name: str
    identifier: str = Field(unique=True, index=True)
    content_json: Optional[str] = None  # JSON: [{"name", "content_type", "content_id"}]

    @property
    def content(self) -> Optional[list[dict[str, Any]]]:
        """Retourne le contenu deserialise, ou None si absent."""
        if self.content_json is None:
            return None
        return json.loads(self.content_json)
