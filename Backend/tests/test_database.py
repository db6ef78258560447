from sqlalchemy import inspect, text
from sqlalchemy.orm import Session

from app.models.artist import Artist
from app.services.artist_service import ArtistService
from app.services.database import get_db, open_store


class TestStore:

    def test_tables_created(self, db_engine):
        tables = set(inspect(db_engine).get_table_names())
        assert {"artist", "audio_file", "artist_audio_file"} <= tables

    def test_foreign_keys_enforced(self, db_engine):
        with db_engine.connect() as conn:
            assert conn.execute(text("PRAGMA foreign_keys")).scalar_one() == 1

    def test_open_store_persists_across_units_of_work(self, session_factory):
        with open_store(session_factory) as db:
            ArtistService(db).insert(Artist(artist_name="artist_name", artist_thumbnail="thumbnail"))

        with open_store(session_factory) as db:
            artists = ArtistService(db).retrieve()

        assert [a.artist_name for a in artists] == ["artist_name"]

    def test_get_db_yields_a_session(self):
        dependency = get_db()
        session = next(dependency)

        assert isinstance(session, Session)
        dependency.close()


class TestClearDatabase:

    def test_clears_the_configured_database(self, db_engine, monkeypatch):
        import clear_db

        monkeypatch.setattr(clear_db.settings, "DATABASE_URL", db_engine.url.render_as_string(hide_password=False))

        clear_db.clear_database()

        assert inspect(db_engine).get_table_names() == []
