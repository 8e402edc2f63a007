"""
Configuration de la base de donnees pour Guava.

Ce module fournit :
- Engine construit depuis la chaine de connexion de Settings
- Generateur de session pour l'injection par requete
- Fonction d'initialisation du schema

Aucune fonction ici n'ecrit de donnees : le catalogue est alimente
par un processus d'ingestion externe.
"""

from collections.abc import Generator
from pathlib import Path

from sqlalchemy import Engine
from sqlalchemy.engine import make_url
from sqlmodel import Session, SQLModel, create_engine

from guava.config import Settings


def create_catalog_engine(settings: Settings) -> Engine:
    """
    Cree l'engine du store a partir de la configuration.

    Pour une URL SQLite fichier, le repertoire parent est cree et l'acces
    multi-thread est autorise (les handlers tournent dans le threadpool).

    Args :
        settings : Configuration de l'application

    Retourne :
        Engine SQLAlchemy
    """
    url = make_url(settings.connection_string)
    connect_args: dict = {}

    if url.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(exist_ok=True, parents=True)

    return create_engine(
        url,
        echo=False,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def get_session(engine: Engine) -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation comme dependance FastAPI (une session par requete) ou avec next() :
        session = next(get_session(engine))

    Yields:
        Session SQLModel connectee a l'engine
    """
    with Session(engine) as session:
        yield session


def init_db(engine: Engine) -> None:
    """
    Initialise le schema en creant les tables manquantes.

    Les modeles sont importes ici pour enregistrer leurs metadonnees
    dans SQLModel.metadata. Les tables existantes ne sont pas modifiees.
    """
    from guava.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
