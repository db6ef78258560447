from .artist import Artist
from .artist_audio_file import artist_audio_file
from .audio_file import AudioFile

__all__ = (
    'Artist',
    'AudioFile',
    'artist_audio_file',
)
