import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'Backend')))

from app.models.artist import Artist
from app.models.audio_file import AudioFile
from app.services.artist_service import ArtistService
from app.services.audio_file_service import AudioFileService
from app.services.database import create_tables, open_store

def create_demo_data():
    create_tables()

    with open_store() as db:
        artists = ArtistService(db)
        audio_files = AudioFileService(db)

        # Create demo artists
        demo_artists = [
            Artist(artist_name="The Beatles", artist_thumbnail="thumbnails/beatles.png"),
            Artist(artist_name="Pink Floyd", artist_thumbnail="thumbnails/pink_floyd.png"),
            Artist(artist_name="Miles Davis", artist_thumbnail="thumbnails/miles_davis.png"),
        ]
        for artist in demo_artists:
            artists.insert(artist)

        # Create demo audio files, keyed by the artist that recorded them
        demo_files = {
            0: ["come_together.mp3", "something.mp3"],
            1: ["money.mp3", "time.mp3"],
            2: ["so_what.mp3", "blue_in_green.mp3"],
        }
        for index, file_names in demo_files.items():
            for file_name in file_names:
                audio_file = audio_files.insert(AudioFile(
                    file_name=file_name,
                    storage_path=f"library/{file_name}",
                    thumbnail=demo_artists[index].artist_thumbnail,
                ))
                artists.add_audio_file(demo_artists[index].artist_id, audio_file.audio_file_id)

        print("✅ Demo data created successfully!")

if __name__ == "__main__":
    create_demo_data()
