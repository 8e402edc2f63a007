"""
Tests unitaires pour les entites du catalogue.

Tests couvrant:
- ContentType: ordinaux stables et decodage strict
- ContentEntry / Playlist: serialisation (ordre conserve, contenu absent)
- PlaylistSummary: jamais de champ content
- Hierarchie d'erreurs: codes et messages publics
"""

import pytest

from guava.core.entities import (
    ContentEntry,
    ContentRecord,
    ContentType,
    Playlist,
    PlaylistSummary,
)
from guava.core.errors import (
    AssetNotFoundError,
    BackendError,
    BadRequestError,
    CatalogError,
    ContentNotFoundError,
    NotFoundError,
    PlaylistNotFoundError,
)


class TestContentType:
    """Tests du type de contenu a ordinal stable."""

    def test_ordinaux_stables(self):
        """Les ordinaux sont figes : None=0, Sound=1, Video=2."""
        assert ContentType.NONE == 0
        assert ContentType.SOUND == 1
        assert ContentType.VIDEO == 2

    @pytest.mark.parametrize(
        "value,expected",
        [(0, ContentType.NONE), (1, ContentType.SOUND), (2, ContentType.VIDEO)],
    )
    def test_from_ordinal_valeurs_connues(self, value, expected):
        """Chaque ordinal connu est decode vers son type."""
        assert ContentType.from_ordinal(value) is expected

    @pytest.mark.parametrize("value", [3, -1, 42])
    def test_from_ordinal_hors_plage_echoue(self, value):
        """Un ordinal inconnu echoue au lieu de retomber sur NONE."""
        with pytest.raises(ValueError):
            ContentType.from_ordinal(value)

    @pytest.mark.parametrize("value", [True, False, "1", 1.0, None])
    def test_from_ordinal_type_invalide_echoue(self, value):
        """Booleens, chaines, flottants et None sont refuses."""
        with pytest.raises(ValueError):
            ContentType.from_ordinal(value)


class TestPlaylistSerialization:
    """Tests de la serialisation des playlists."""

    def test_entry_to_dict_utilise_ordinal_et_name(self):
        """Le type est serialise par ordinal et le nom affiche sous 'name'."""
        entry = ContentEntry(display_name="Song", content_type=ContentType.SOUND, content_id="c1")
        assert entry.to_dict() == {"name": "Song", "content_type": 1, "content_id": "c1"}

    def test_playlist_conserve_l_ordre(self):
        """L'ordre des elements est celui de la sequence stockee."""
        playlist = Playlist(
            name="Morning",
            identifier="p1",
            content=(
                ContentEntry("B", ContentType.VIDEO, "c2"),
                ContentEntry("A", ContentType.SOUND, "c1"),
                ContentEntry("B", ContentType.VIDEO, "c2"),
            ),
        )
        data = playlist.to_dict()
        assert [e["content_id"] for e in data["content"]] == ["c2", "c1", "c2"]

    def test_playlist_sans_contenu_serialise_null(self):
        """Une playlist sans contenu a content=None."""
        data = Playlist(name="Evening", identifier="p2").to_dict()
        assert data == {"name": "Evening", "identifier": "p2", "content": None}

    def test_summary_sans_champ_content(self):
        """La projection legere n'a pas de champ content, meme a null."""
        summary = PlaylistSummary(name="Morning", identifier="p1")
        assert summary.to_dict() == {"name": "Morning", "identifier": "p1"}
        assert not hasattr(summary, "content")

    def test_record_immuable(self):
        """Les enregistrements lus sont immuables."""
        record = ContentRecord(content_id="c1", content_type=ContentType.SOUND, hash="abcd")
        with pytest.raises(AttributeError):
            record.hash = "autre"  # type: ignore[misc]


class TestErrors:
    """Tests de la hierarchie d'erreurs."""

    @pytest.mark.parametrize(
        "error_cls,status,message",
        [
            (ContentNotFoundError, 404, "content not found"),
            (AssetNotFoundError, 404, "file not found"),
            (PlaylistNotFoundError, 404, "playlist not found"),
            (BadRequestError, 400, "Bad Request"),
            (BackendError, 500, "Internal Server Error"),
        ],
    )
    def test_codes_et_messages_publics(self, error_cls, status, message):
        """Chaque erreur porte son code HTTP et son message public par defaut."""
        error = error_cls("detail interne")
        assert isinstance(error, CatalogError)
        assert error.status_code == status
        assert error.public_message == message
        assert error.detail == "detail interne"

    def test_not_found_regroupe_contenu_et_asset(self):
        """Contenu et asset introuvables partagent la meme classe de base."""
        assert issubclass(ContentNotFoundError, NotFoundError)
        assert issubclass(AssetNotFoundError, NotFoundError)

    def test_message_public_surcharge(self):
        """Le message public peut etre remplace sans exposer le detail."""
        error = BackendError("connexion refusee a 10.0.0.3", public_message="degraded")
        assert error.public_message == "degraded"
        assert "10.0.0.3" not in error.public_message
