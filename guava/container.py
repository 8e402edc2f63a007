"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
La configuration est construite une seule fois puis injectee dans chaque composant.
"""

from dependency_injector import containers, providers

from .adapters.file_system import FileSystemAssetStore
from .config import Settings
from .infrastructure.persistence.database import create_catalog_engine, init_db
from .infrastructure.persistence.repositories import (
    SQLModelContentRepository,
    SQLModelPlaylistRepository,
)
from .services.content import ContentService
from .services.integrity import IntegrityChecker
from .services.playlist import PlaylistService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Les repositories et services sont des Factory : ils sont crees par requete
    avec la session de la requete.

    Utilisation :
        container = Container()
        container.database.init()  # Cree le schema une fois
        with Session(container.engine()) as session:
            repo = container.content_repository(session=session)
            service = container.content_service(repository=repo)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine - partage par toutes les sessions
    engine = providers.Singleton(create_catalog_engine, settings=config)

    # Schema - Resource pour initialisation unique
    database = providers.Resource(init_db, engine=engine)

    # Assets adresses par hash
    asset_store = providers.Singleton(
        FileSystemAssetStore,
        root=config.provided.assets_dir,
    )

    # Repositories - la session est fournie a l'appel
    content_repository = providers.Factory(SQLModelContentRepository)
    playlist_repository = providers.Factory(SQLModelPlaylistRepository)

    # Services - le repository est fourni a l'appel
    content_service = providers.Factory(
        ContentService,
        asset_store=asset_store,
    )
    playlist_service = providers.Factory(
        PlaylistService,
        allow_partial_listing=config.provided.listing_allow_partial,
    )
    integrity_checker = providers.Factory(
        IntegrityChecker,
        asset_store=asset_store,
    )
