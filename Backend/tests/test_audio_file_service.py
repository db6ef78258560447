import pytest
from pydantic import ValidationError
from sqlalchemy import text

from app.core.exceptions import NotFoundError
from app.models.audio_file import AudioFile
from app.schemas.audio_file import AudioFileUpdate


class TestAudioFileRecord:

    def test_insert_assigns_ids(self, audio_file_service):
        first = audio_file_service.insert(AudioFile(
            file_name="audio_file_0", storage_path="storage_path", thumbnail="thumbnail", favorite=0, owner_id="2"
        ))
        second = audio_file_service.insert(AudioFile(
            file_name="audio_file_1", storage_path="storage_path", thumbnail="thumbnail", favorite=0, owner_id="2"
        ))

        assert (first.audio_file_id, second.audio_file_id) == (1, 2)

    def test_view_by_id(self, audio_file_service):
        audio_file_service.insert(AudioFile(
            file_name="audio_file_0", storage_path="storage_path", thumbnail="thumbnail", favorite=1, owner_id="2"
        ))

        audio_file = audio_file_service.view(1)

        assert audio_file.audio_file_id == 1
        assert audio_file.file_name == "audio_file_0"
        assert audio_file.storage_path == "storage_path"
        assert audio_file.thumbnail == "thumbnail"
        assert audio_file.favorite == 1
        assert audio_file.owner_id == "2"

    def test_favorite_defaults_to_zero(self, audio_file_service):
        audio_file = audio_file_service.insert(AudioFile(file_name="a.mp3", storage_path="a.mp3"))
        assert audio_file.favorite == 0
        assert audio_file.date_added is not None

    def test_view_missing(self, audio_file_service):
        with pytest.raises(NotFoundError):
            audio_file_service.view(3)

    def test_retrieve_in_insertion_order(self, audio_file_factory, audio_file_service):
        files = audio_file_factory.create_batch(4)
        assert [f.file_name for f in audio_file_service.retrieve()] == [f.file_name for f in files]

    def test_update_only_sent_fields(self, audio_file, audio_file_service):
        original_path = audio_file.storage_path

        updated = audio_file_service.update(audio_file.audio_file_id, AudioFileUpdate(favorite=1))

        assert updated.favorite == 1
        assert updated.storage_path == original_path

    def test_update_schema_rejects_null_required_fields(self):
        for field in ("file_name", "storage_path", "favorite"):
            with pytest.raises(ValidationError):
                AudioFileUpdate(**{field: None})

        assert AudioFileUpdate(thumbnail=None).model_dump(exclude_unset=True) == {"thumbnail": None}

    def test_update_missing(self, audio_file_service):
        with pytest.raises(NotFoundError):
            audio_file_service.update(5, AudioFileUpdate(file_name="x.mp3"))

    def test_delete_drops_row_and_associations(self, artist, audio_file, artist_service, audio_file_service, db):
        artist_service.add_audio_file(artist.artist_id, audio_file.audio_file_id)

        audio_file_service.delete(audio_file.audio_file_id)

        assert db.execute(text("SELECT COUNT(*) FROM AUDIO_FILE")).scalar_one() == 0
        assert artist_service.retrieve_audio_files(artist.artist_id) == []

    def test_delete_missing(self, audio_file_service):
        with pytest.raises(NotFoundError):
            audio_file_service.delete(1)

    def test_retrieve_artists(self, artist_factory, audio_file, artist_service, audio_file_service):
        artists = artist_factory.create_batch(3)
        for artist in reversed(artists):
            artist_service.add_audio_file(artist.artist_id, audio_file.audio_file_id)

        found = audio_file_service.retrieve_artists(audio_file.audio_file_id)

        assert [a.artist_id for a in found] == [a.artist_id for a in artists]
