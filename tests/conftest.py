"""
Fixtures pytest partagees pour les tests Guava.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires et base SQLite fichier
- Container DI configure sur ces settings
- Catalogue pre-rempli (le service lui-meme n'ecrit jamais)
- Mocks des ports (IContentRepository, IPlaylistRepository, IAssetStore)
"""

import json
from pathlib import Path
from typing import Iterator
from unittest.mock import MagicMock

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from sqlmodel import Session

from guava.config import Settings
from guava.container import Container
from guava.core.ports.file_system import IAssetStore
from guava.core.ports.repositories import IContentRepository, IPlaylistRepository
from guava.infrastructure.persistence.models import ContentModel, PlaylistModel
from guava.web.app import create_app

# Octets de l'asset "abcd1234" du catalogue de test
ASSET_BYTES = b"ID3\x04\x00fake-sound-payload" * 100


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler la base et la racine des assets.
    """
    assets_dir = tmp_path / "content"
    assets_dir.mkdir()
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        assets_dir=assets_dir,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def container(test_settings: Settings) -> Iterator[Container]:
    """Container DI dont la configuration est remplacee par test_settings."""
    container = Container()
    container.config.override(providers.Object(test_settings))
    container.database.init()
    yield container
    container.engine().dispose()


@pytest.fixture
def session(container: Container) -> Iterator[Session]:
    """Session SQLModel sur la base de test."""
    with Session(container.engine()) as session:
        yield session


@pytest.fixture
def seeded_catalog(session: Session, test_settings: Settings) -> Settings:
    """
    Catalogue de test, ecrit comme le ferait le processus d'ingestion.

    - c1 (Sound) -> abcd1234, fichier present
    - c2 (Video) -> ffff0000, fichier absent
    - p1 "Morning" : [c1, c2]
    - p2 "Evening" : pas de contenu
    """
    session.add(ContentModel(content_id="c1", content_type=1, hash="abcd1234"))
    session.add(ContentModel(content_id="c2", content_type=2, hash="ffff0000"))
    session.add(
        PlaylistModel(
            name="Morning",
            identifier="p1",
            content_json=json.dumps(
                [
                    {"name": "Song", "content_type": 1, "content_id": "c1"},
                    {"name": "Clip", "content_type": 2, "content_id": "c2"},
                ]
            ),
        )
    )
    session.add(PlaylistModel(name="Evening", identifier="p2", content_json=None))
    session.commit()

    (test_settings.assets_dir / "abcd1234").write_bytes(ASSET_BYTES)
    return test_settings


@pytest.fixture
def client(container: Container) -> Iterator[TestClient]:
    """Client HTTP sur une application liee au container de test."""
    app = create_app(container)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def mock_content_repository() -> MagicMock:
    """
    Mock de IContentRepository pour les tests.

    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    mock = MagicMock(spec=IContentRepository)
    mock.get_by_content_id.return_value = None
    mock.iter_all.return_value = iter([])
    return mock


@pytest.fixture
def mock_playlist_repository() -> MagicMock:
    """Mock de IPlaylistRepository pour les tests."""
    mock = MagicMock(spec=IPlaylistRepository)
    mock.get_by_identifier.return_value = None
    mock.iter_summaries.return_value = iter([])
    return mock


@pytest.fixture
def mock_asset_store() -> MagicMock:
    """Mock de IAssetStore pour les tests."""
    mock = MagicMock(spec=IAssetStore)
    mock.iter_hashes.return_value = iter([])
    return mock
