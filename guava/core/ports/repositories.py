"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) definissant les contrats de lecture du store de documents.
Les implementations (adaptateurs) fournissent les mecanismes concrets
(SQLModel, en memoire pour les tests, etc.).

Toutes les operations sont en lecture seule : le catalogue est alimente
par un processus d'ingestion externe.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from guava.core.entities.catalog import ContentRecord, Playlist, PlaylistSummary


class IContentRepository(ABC):
    """
    Interface de lecture du catalogue de contenus.

    Les implementations levent BackendError si le store est injoignable,
    si la requete echoue ou si une ligne stockee ne peut pas etre decodee.
    """

    @abstractmethod
    def get_by_content_id(self, content_id: str) -> Optional[ContentRecord]:
        """Recupere un contenu par correspondance exacte sur content_id."""
        ...

    @abstractmethod
    def iter_all(self) -> Iterator[ContentRecord]:
        """Parcourt tous les contenus du catalogue (ordre non garanti)."""
        ...


class IPlaylistRepository(ABC):
    """
    Interface de lecture des playlists.

    Les implementations levent BackendError en cas d'echec du store.
    """

    @abstractmethod
    def get_by_identifier(self, identifier: str) -> Optional[Playlist]:
        """
        Recupere le document complet d'une playlist.

        Args :
            identifier : Identifiant exact de la playlist

        Retourne :
            La playlist avec son contenu dans l'ordre stocke, ou None si aucune ne correspond
        """
        ...

    @abstractmethod
    def iter_summaries(self) -> Iterator[PlaylistSummary]:
        """
        Parcourt toutes les playlists en projection legere (nom + identifiant).

        Le contenu n'est ni lu ni transmis. Une erreur peut survenir en cours
        de parcours, apres que des elements ont deja ete produits.
        """
        ...
