import logging
from typing import List

from fastapi import Depends
from sqlalchemy import delete, insert, select
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.core.timestamps import next_timestamp
from app.models.artist import Artist
from app.models.artist_audio_file import artist_audio_file
from app.models.audio_file import AudioFile
from app.services.base_service import BaseService
from app.services.database import get_db

logger = logging.getLogger(__name__)


class ArtistService(BaseService):
    """Artist records and their audio file associations."""

    def insert(self, artist: Artist) -> Artist:
        """Persist a new artist; storage assigns ``artist_id``."""
        self.db.add(artist)
        self._commit(f"insert artist {artist.artist_name!r}")
        logger.info(f"Inserted artist {artist.artist_name!r} (ID: {artist.artist_id})")
        return artist

    def update(self, artist_id: int, artist: Artist) -> Artist:
        """
        Write the name and thumbnail carried by ``artist`` to the row matching
        ``artist_id`` and refresh ``last_modified`` on both.
        """
        db_artist = self.view(artist_id)

        modified = next_timestamp(max(artist.last_modified, db_artist.last_modified))
        db_artist.artist_name = artist.artist_name
        db_artist.artist_thumbnail = artist.artist_thumbnail
        db_artist.last_modified = modified
        artist.last_modified = modified

        self._commit(f"update artist {artist_id}")
        logger.info(f"Updated artist {artist_id} to {db_artist.artist_name!r}")
        return db_artist

    def view(self, artist_id: int) -> Artist:
        logger.debug(f"Fetching artist with ID {artist_id}")
        artist = self._execute(
            select(Artist).where(Artist.artist_id == artist_id),
            f"view artist {artist_id}"
        ).scalar_one_or_none()
        if artist is None:
            logger.warning(f"Artist with ID {artist_id} not found")
            raise NotFoundError("Artist", artist_id)
        return artist

    def retrieve(self) -> List[Artist]:
        """All artists in insertion order."""
        result = self._execute(
            select(Artist).order_by(Artist.artist_id), "retrieve artists"
        )
        return list(result.scalars().all())

    def search(self, name: str) -> List[Artist]:
        result = self._execute(
            select(Artist)
            .where(Artist.artist_name.icontains(name, autoescape=True))
            .order_by(Artist.artist_id),
            f"search artists for {name!r}"
        )
        return list(result.scalars().all())

    def delete(self, artist_id: int) -> None:
        artist = self.view(artist_id)
        # Associations go first so this holds without ON DELETE CASCADE support.
        self._execute(
            delete(artist_audio_file).where(artist_audio_file.c.artist_id == artist_id),
            f"remove associations of artist {artist_id}"
        )
        self.db.delete(artist)
        self._commit(f"delete artist {artist_id}")
        logger.info(f"Deleted artist {artist_id}")

    def add_audio_file(self, artist_id: int, audio_file_id: int) -> None:
        self.view(artist_id)
        if self.db.get(AudioFile, audio_file_id) is None:
            logger.warning(f"Audio file with ID {audio_file_id} not found")
            raise NotFoundError("AudioFile", audio_file_id)

        self._execute(
            insert(artist_audio_file).values(artist_id=artist_id, audio_file_id=audio_file_id),
            f"add audio file {audio_file_id} to artist {artist_id}"
        )
        self._commit(f"add audio file {audio_file_id} to artist {artist_id}")
        logger.info(f"Added audio file {audio_file_id} to artist {artist_id}")

    def remove_audio_file(self, artist_id: int, audio_file_id: int) -> bool:
        """Drop one association. Missing pairs are a no-op; returns whether a row went."""
        result = self._execute(
            delete(artist_audio_file).where(
                artist_audio_file.c.artist_id == artist_id,
                artist_audio_file.c.audio_file_id == audio_file_id
            ),
            f"remove audio file {audio_file_id} from artist {artist_id}"
        )
        self._commit(f"remove audio file {audio_file_id} from artist {artist_id}")
        removed = result.rowcount > 0
        if removed:
            logger.info(f"Removed audio file {audio_file_id} from artist {artist_id}")
        else:
            logger.debug(f"Audio file {audio_file_id} was not linked to artist {artist_id}")
        return removed

    def retrieve_audio_files(self, artist_id: int) -> List[AudioFile]:
        """Audio files linked to the artist, ascending ``audio_file_id``."""
        stmt = (
            select(AudioFile)
            .join(artist_audio_file, artist_audio_file.c.audio_file_id == AudioFile.audio_file_id)
            .where(artist_audio_file.c.artist_id == artist_id)
            .order_by(AudioFile.audio_file_id)
        )
        result = self._execute(stmt, f"retrieve audio files of artist {artist_id}")
        return list(result.scalars().all())


def get_artist_service(db: Session = Depends(get_db)) -> ArtistService:
    return ArtistService(db)
