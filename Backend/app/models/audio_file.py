from sqlalchemy import Column, String, Integer, DateTime
from sqlalchemy.orm import relationship
from app.models.artist_audio_file import artist_audio_file
from app.core.timestamps import utcnow

from app.services.database import Base

class AudioFile(Base):
    __tablename__ = "audio_file"

    audio_file_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    file_name = Column(String, nullable=False)
    storage_path = Column(String, nullable=False)
    thumbnail = Column(String, nullable=True)
    favorite = Column(Integer, nullable=False, default=0)
    owner_id = Column(String, nullable=True)
    date_added = Column(DateTime, nullable=False, default=utcnow)

    artists = relationship(
        "Artist",
        secondary=artist_audio_file,
        order_by="Artist.artist_id",
        viewonly=True
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("favorite", 0)
        kwargs.setdefault("date_added", utcnow())
        super().__init__(**kwargs)

    def __repr__(self):
        return f'{self.__class__.__name__}(audio_file_id={self.audio_file_id}, file_name={self.file_name!r})'
