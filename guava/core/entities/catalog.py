"""
Entites du catalogue multimedia.

Entites representant les contenus adresses par hash et les playlists qui les
referencent. Toutes sont en lecture seule pour le service : elles sont creees
par un processus d'ingestion externe.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional


class ContentType(IntEnum):
    """Type de contenu.

    Les ordinaux sont stables sur le fil et en stockage :
        NONE: 0
        SOUND: 1
        VIDEO: 2
    """

    NONE = 0
    SOUND = 1
    VIDEO = 2

    @classmethod
    def from_ordinal(cls, value: Any) -> "ContentType":
        """
        Decode un ordinal stocke en ContentType.

        Args :
            value : Valeur brute lue depuis le stockage

        Retourne :
            Le ContentType correspondant

        Raises :
            ValueError : Si la valeur n'est pas un ordinal connu (jamais de repli sur NONE)
        """
        # bool est une sous-classe d'int : True ne doit pas devenir SOUND
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Ordinal de type de contenu invalide: {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Ordinal de type de contenu inconnu: {value!r}") from None


@dataclass(frozen=True)
class ContentEntry:
    """
    Element d'une playlist.

    Attributs :
        display_name : Nom affiche (champ "name" du document)
        content_type : Type du contenu reference
        content_id : Identifiant externe stable (pas le hash de stockage)
    """

    display_name: str
    content_type: ContentType
    content_id: str

    def to_dict(self) -> dict:
        """Convertit en dictionnaire pour serialisation JSON."""
        return {
            "name": self.display_name,
            "content_type": int(self.content_type),
            "content_id": self.content_id,
        }


@dataclass(frozen=True)
class ContentRecord:
    """
    Ligne du catalogue de contenus.

    Attributs :
        content_id : Identifiant externe, unique dans le catalogue
        content_type : Type du contenu
        hash : Cle de stockage adressee par contenu (chemin relatif de l'asset)
    """

    content_id: str
    content_type: ContentType
    hash: str


@dataclass
class Playlist:
    """
    Playlist complete avec son contenu ordonne.

    Attributs :
        name : Nom de la playlist
        identifier : Identifiant unique et stable, utilise pour les recherches
        content : Elements dans l'ordre stocke, ou None si la playlist n'en a pas
    """

    name: str
    identifier: str
    content: Optional[tuple[ContentEntry, ...]] = None

    def to_dict(self) -> dict:
        """Convertit en dictionnaire pour serialisation JSON."""
        return {
            "name": self.name,
            "identifier": self.identifier,
            "content": (
                [entry.to_dict() for entry in self.content]
                if self.content is not None
                else None
            ),
        }


@dataclass(frozen=True)
class PlaylistSummary:
    """Projection legere d'une playlist pour la decouverte (sans contenu)."""

    name: str
    identifier: str

    def to_dict(self) -> dict:
        """Convertit en dictionnaire pour serialisation JSON."""
        return {"name": self.name, "identifier": self.identifier}
