"""
Implementation SQLModel du repository de contenus.

Implemente l'interface IContentRepository pour la lecture du catalogue
de contenus via SQLModel.
"""

from typing import Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from guava.core.entities.catalog import ContentRecord, ContentType
from guava.core.errors import BackendError
from guava.core.ports.repositories import IContentRepository
from guava.infrastructure.persistence.models import ContentModel


class SQLModelContentRepository(IContentRepository):
    """
    Repository SQLModel pour les contenus.

    Convertit ContentModel (persistance) en ContentRecord (domaine).
    Les erreurs du store et les lignes non decodables deviennent BackendError.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: ContentModel) -> ContentRecord:
        """
        Convertit un modele DB en entite domaine.

        Raises :
            BackendError : Si l'ordinal de type de contenu est inconnu
                ou si le hash stocke est vide
        """
        if not model.hash:
            raise BackendError(f"Contenu {model.content_id!r} sans hash")
        try:
            content_type = ContentType.from_ordinal(model.content_type)
        except ValueError as exc:
            raise BackendError(
                f"Contenu {model.content_id!r} non decodable: {exc}"
            ) from exc
        return ContentRecord(
            content_id=model.content_id,
            content_type=content_type,
            hash=model.hash,
        )

    def get_by_content_id(self, content_id: str) -> Optional[ContentRecord]:
        """Recupere un contenu par correspondance exacte sur content_id."""
        statement = select(ContentModel).where(ContentModel.content_id == content_id)
        try:
            model = self._session.exec(statement).first()
        except SQLAlchemyError as exc:
            raise BackendError(f"Lecture du contenu {content_id!r} impossible: {exc}") from exc
        if model:
            return self._to_entity(model)
        return None

    def iter_all(self) -> Iterator[ContentRecord]:
        """Parcourt tous les contenus du catalogue."""
        try:
            for model in self._session.exec(select(ContentModel)):
                yield self._to_entity(model)
        except SQLAlchemyError as exc:
            raise BackendError(f"Parcours du catalogue interrompu: {exc}") from exc
