"""
Implementation SQLModel du repository de playlists.

Implemente l'interface IPlaylistRepository : lecture du document complet
par identifiant et listing en projection legere (nom + identifiant).
"""

from typing import Any, Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from guava.core.entities.catalog import ContentEntry, ContentType, Playlist, PlaylistSummary
from guava.core.errors import BackendError
from guava.core.ports.repositories import IPlaylistRepository
from guava.infrastructure.persistence.models import PlaylistModel


def _decode_entry(raw: dict[str, Any]) -> ContentEntry:
    """Decode un element de playlist stocke en JSON."""
    return ContentEntry(
        display_name=raw["name"],
        content_type=ContentType.from_ordinal(raw["content_type"]),
        content_id=raw["content_id"],
    )


class SQLModelPlaylistRepository(IPlaylistRepository):
    """
    Repository SQLModel pour les playlists.

    L'ordre des elements est celui du tableau JSON stocke : aucun tri,
    filtrage ni dedoublonnage n'est applique.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: PlaylistModel) -> Playlist:
        """
        Convertit un modele DB en entite domaine.

        Raises :
            BackendError : Si le contenu stocke est mal forme
        """
        content = None
        if model.content_json is not None:
            try:
                content = tuple(_decode_entry(raw) for raw in model.content)
            except (ValueError, KeyError, TypeError) as exc:
                # json.JSONDecodeError herite de ValueError
                raise BackendError(
                    f"Playlist {model.identifier!r} non decodable: {exc!r}"
                ) from exc

        return Playlist(name=model.name, identifier=model.identifier, content=content)

    def get_by_identifier(self, identifier: str) -> Optional[Playlist]:
        """Recupere le document complet d'une playlist par identifiant exact."""
        statement = select(PlaylistModel).where(PlaylistModel.identifier == identifier)
        try:
            model = self._session.exec(statement).first()
        except SQLAlchemyError as exc:
            raise BackendError(f"Lecture de la playlist {identifier!r} impossible: {exc}") from exc
        if model:
            return self._to_entity(model)
        return None

    def iter_summaries(self) -> Iterator[PlaylistSummary]:
        """Parcourt les playlists en ne lisant que les colonnes name et identifier."""
        statement = select(PlaylistModel.name, PlaylistModel.identifier)
        try:
            for name, identifier in self._session.exec(statement):
                yield PlaylistSummary(name=name, identifier=identifier)
        except SQLAlchemyError as exc:
            raise BackendError(f"Listing des playlists interrompu: {exc}") from exc
