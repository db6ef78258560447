from sqlalchemy import Column, String, Integer, DateTime
from sqlalchemy.orm import relationship
from app.models.artist_audio_file import artist_audio_file # For the many-to-many relationship
from app.core.timestamps import utcnow

from app.services.database import Base

class Artist(Base):
    __tablename__ = "artist"

    artist_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    artist_name = Column(String(255), nullable=False)
    artist_thumbnail = Column(String, nullable=True)
    last_modified = Column(DateTime, nullable=False, default=utcnow)

    # Read-only view of the association; writes go through ArtistService.
    audio_files = relationship(
        "AudioFile",
        secondary=artist_audio_file,
        order_by="AudioFile.audio_file_id",
        viewonly=True
    )

    def __init__(self, **kwargs):
        # Captured at construction, not at insert.
        kwargs.setdefault("last_modified", utcnow())
        super().__init__(**kwargs)

    def __repr__(self):
        return f'{self.__class__.__name__}(artist_id={self.artist_id}, artist_name={self.artist_name!r})'
