from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import settings  # where DATABASE_URL lives


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create a synchronous engine; SQLite connections get foreign keys switched on."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    db_engine = create_engine(database_url, echo=echo, connect_args=connect_args)

    if db_engine.dialect.name == "sqlite":
        @event.listens_for(db_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return db_engine


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

Base = declarative_base()


@contextmanager
def open_store(session_factory: sessionmaker = SessionLocal) -> Iterator[Session]:
    """
    Open a store for one unit of work and close it on exit.

    Usage:
        with open_store() as db:
            ArtistService(db).retrieve()
    """
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


def get_db() -> Iterator[Session]:
    """
    Dependency that provides a database session.
    Session is automatically closed after the request.

    Usage:
        def get_artist_service(db: Session = Depends(get_db)) -> ArtistService:
            return ArtistService(db)
    """
    with open_store() as session:
        try:
            yield session
        except Exception:
            session.rollback()
            raise


def create_tables(db_engine: Engine = engine) -> None:
    # Registers every model on Base.metadata before creating them.
    import app.models  # noqa: F401
    Base.metadata.create_all(bind=db_engine)
