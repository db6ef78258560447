from sqlalchemy import Table, Column, Integer, ForeignKey
from app.services.database import Base

# Plain association table; the composite key rejects duplicate pairs.
artist_audio_file = Table(
    'artist_audio_file',
    Base.metadata,
    Column('artist_id', Integer, ForeignKey('artist.artist_id', ondelete='CASCADE'), primary_key=True),
    Column('audio_file_id', Integer, ForeignKey('audio_file.audio_file_id', ondelete='CASCADE'), primary_key=True)
)
