"""Tests pour PlaylistService (document complet et listing)."""

import pytest

from guava.core.entities import ContentEntry, ContentType, Playlist, PlaylistSummary
from guava.core.errors import BackendError, BadRequestError, PlaylistNotFoundError
from guava.services.playlist import PlaylistService


def _interrupted_summaries():
    """Deux playlists lues puis une erreur du store."""
    yield PlaylistSummary(name="Morning", identifier="p1")
    yield PlaylistSummary(name="Evening", identifier="p2")
    raise BackendError("curseur perdu")


class TestGetByIdentifier:
    """Tests de get_by_identifier."""

    def test_playlist_trouvee(self, mock_playlist_repository):
        """Le document est retourne tel que stocke, ordre compris."""
        entries = (
            ContentEntry("Song", ContentType.SOUND, "c1"),
            ContentEntry("Clip", ContentType.VIDEO, "c2"),
        )
        mock_playlist_repository.get_by_identifier.return_value = Playlist(
            name="Morning", identifier="p1", content=entries
        )

        playlist = PlaylistService(mock_playlist_repository).get_by_identifier("p1")

        assert playlist.content == entries

    def test_playlist_absente(self, mock_playlist_repository):
        """Aucune playlist : PlaylistNotFoundError, distinct d'un echec du store."""
        with pytest.raises(PlaylistNotFoundError):
            PlaylistService(mock_playlist_repository).get_by_identifier("missing")

    def test_echec_du_store_propage(self, mock_playlist_repository):
        """Un echec du store n'est jamais confondu avec une absence."""
        mock_playlist_repository.get_by_identifier.side_effect = BackendError("timeout")

        with pytest.raises(BackendError):
            PlaylistService(mock_playlist_repository).get_by_identifier("p1")

    def test_identifiant_vide_refuse(self, mock_playlist_repository):
        with pytest.raises(BadRequestError):
            PlaylistService(mock_playlist_repository).get_by_identifier("")

        mock_playlist_repository.get_by_identifier.assert_not_called()


class TestListAll:
    """Tests de list_all."""

    def test_liste_complete(self, mock_playlist_repository):
        mock_playlist_repository.iter_summaries.return_value = iter(
            [PlaylistSummary("Morning", "p1"), PlaylistSummary("Evening", "p2")]
        )

        summaries = PlaylistService(mock_playlist_repository).list_all()

        assert [s.identifier for s in summaries] == ["p1", "p2"]

    def test_catalogue_vide(self, mock_playlist_repository):
        assert PlaylistService(mock_playlist_repository).list_all() == []

    def test_erreur_en_cours_de_lecture_echoue_par_defaut(self, mock_playlist_repository):
        """Par defaut, une erreur en cours de listing fait echouer toute la requete."""
        mock_playlist_repository.iter_summaries.return_value = _interrupted_summaries()

        with pytest.raises(BackendError):
            PlaylistService(mock_playlist_repository).list_all()

    def test_resultats_partiels_si_autorises(self, mock_playlist_repository):
        """Avec la politique partielle, les playlists lues avant l'erreur sont retournees."""
        mock_playlist_repository.iter_summaries.return_value = _interrupted_summaries()

        service = PlaylistService(mock_playlist_repository, allow_partial_listing=True)
        summaries = service.list_all()

        assert [s.identifier for s in summaries] == ["p1", "p2"]
