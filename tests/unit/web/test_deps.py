"""Tests des dependances FastAPI."""

from guava.web.deps import get_db_session


class TestGetDbSession:
    def test_session_liee_a_l_engine_du_container(self, container):
        """La session de requete est ouverte sur l'engine du container, puis fermee."""
        sessions = get_db_session(container)
        session = next(sessions)

        assert session.get_bind() is container.engine()

        sessions.close()

    def test_session_par_requete(self, container):
        """Deux requetes n'obtiennent jamais la meme session."""
        first = next(get_db_session(container))
        second = next(get_db_session(container))

        assert first is not second
        first.close()
        second.close()
