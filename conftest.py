import pytest
from faker import Faker
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.services.database import build_engine, create_tables, get_db
from app.services.artist_service import ArtistService
from app.services.audio_file_service import AudioFileService
from factories import ArtistFactory, AudioFileFactory


@pytest.fixture
def db_engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'dtunes-test.sqlite3'}")
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(bind=db_engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def artist_service(db):
    return ArtistService(db)


@pytest.fixture
def audio_file_service(db):
    return AudioFileService(db)


@pytest.fixture
def artist_factory(db):
    ArtistFactory._meta.sqlalchemy_session = db
    return ArtistFactory


@pytest.fixture
def artist(artist_factory):
    return artist_factory()


@pytest.fixture
def audio_file_factory(db):
    AudioFileFactory._meta.sqlalchemy_session = db
    return AudioFileFactory


@pytest.fixture
def audio_file(audio_file_factory):
    return audio_file_factory()


@pytest.fixture
def api_client(session_factory):
    from main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(scope="session")
def fake():
    return Faker()
