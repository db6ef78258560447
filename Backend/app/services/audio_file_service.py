import logging
from typing import List

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.models.artist import Artist
from app.models.artist_audio_file import artist_audio_file
from app.models.audio_file import AudioFile
from app.schemas.audio_file import AudioFileUpdate
from app.services.base_service import BaseService
from app.services.database import get_db

logger = logging.getLogger(__name__)


class AudioFileService(BaseService):

    def insert(self, audio_file: AudioFile) -> AudioFile:
        """Persist a new audio file; storage assigns ``audio_file_id``."""
        self.db.add(audio_file)
        self._commit(f"insert audio file {audio_file.file_name!r}")
        logger.info(f"Inserted audio file {audio_file.file_name!r} (ID: {audio_file.audio_file_id})")
        return audio_file

    def view(self, audio_file_id: int) -> AudioFile:
        """Retrieve an audio file by its ID."""
        logger.debug(f"Fetching audio file with ID {audio_file_id}")
        audio_file = self._execute(
            select(AudioFile).where(AudioFile.audio_file_id == audio_file_id),
            f"view audio file {audio_file_id}"
        ).scalar_one_or_none()
        if audio_file is None:
            logger.warning(f"Audio file with ID {audio_file_id} not found")
            raise NotFoundError("AudioFile", audio_file_id)
        return audio_file

    def retrieve(self) -> List[AudioFile]:
        result = self._execute(
            select(AudioFile).order_by(AudioFile.audio_file_id), "retrieve audio files"
        )
        return list(result.scalars().all())

    def update(self, audio_file_id: int, audio_file_update: AudioFileUpdate) -> AudioFile:
        """Update the fields that were provided."""
        audio_file = self.view(audio_file_id)

        update_data = audio_file_update.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(audio_file, field, value)

        self._commit(f"update audio file {audio_file_id}")
        logger.info(f"Updated audio file {audio_file_id}: {sorted(update_data)}")
        return audio_file

    def delete(self, audio_file_id: int) -> None:
        audio_file = self.view(audio_file_id)
        self._execute(
            delete(artist_audio_file).where(artist_audio_file.c.audio_file_id == audio_file_id),
            f"remove associations of audio file {audio_file_id}"
        )
        self.db.delete(audio_file)
        self._commit(f"delete audio file {audio_file_id}")
        logger.info(f"Deleted audio file {audio_file_id}")

    def retrieve_artists(self, audio_file_id: int) -> List[Artist]:
        stmt = (
            select(Artist)
            .join(artist_audio_file, artist_audio_file.c.artist_id == Artist.artist_id)
            .where(artist_audio_file.c.audio_file_id == audio_file_id)
            .order_by(Artist.artist_id)
        )
        result = self._execute(stmt, f"retrieve artists of audio file {audio_file_id}")
        return list(result.scalars().all())


def get_audio_file_service(db: Session = Depends(get_db)) -> AudioFileService:
    return AudioFileService(db)
