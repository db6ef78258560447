from fastapi import APIRouter, Depends, status
from typing import List

from app.models.artist import Artist
from app.schemas.artist import ArtistCreate, ArtistResponse, ArtistUpdate
from app.schemas.audio_file import AudioFileResponse
from app.services.artist_service import ArtistService, get_artist_service


router = APIRouter()

# Static routes first
@router.get("/artists/search/", response_model=List[ArtistResponse])
def search_artists(name: str, service: ArtistService = Depends(get_artist_service)):
    """Case-insensitive match on artist name"""
    return service.search(name)

@router.get("/artists/", response_model=List[ArtistResponse])
def list_artists(service: ArtistService = Depends(get_artist_service)):
    """List all artists in insertion order"""
    return service.retrieve()

@router.post("/artists/", response_model=ArtistResponse, status_code=status.HTTP_201_CREATED)
def create_artist(artist_data: ArtistCreate, service: ArtistService = Depends(get_artist_service)):
    return service.insert(Artist(**artist_data.model_dump()))

# Dynamic routes after static ones
@router.get("/artists/{artist_id}", response_model=ArtistResponse)
def read_artist(artist_id: int, service: ArtistService = Depends(get_artist_service)):
    return service.view(artist_id)

@router.put("/artists/{artist_id}", response_model=ArtistResponse)
def update_artist(
    artist_id: int,
    artist_data: ArtistUpdate,
    service: ArtistService = Depends(get_artist_service)
):
    artist = service.view(artist_id)
    artist.artist_name = artist_data.artist_name
    artist.artist_thumbnail = artist_data.artist_thumbnail
    return service.update(artist_id, artist)

@router.delete("/artists/{artist_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_artist(artist_id: int, service: ArtistService = Depends(get_artist_service)):
    service.delete(artist_id)

@router.get("/artists/{artist_id}/audio-files/", response_model=List[AudioFileResponse])
def list_artist_audio_files(artist_id: int, service: ArtistService = Depends(get_artist_service)):
    service.view(artist_id)
    return service.retrieve_audio_files(artist_id)

@router.post(
    "/artists/{artist_id}/audio-files/{audio_file_id}",
    response_model=List[AudioFileResponse],
    status_code=status.HTTP_201_CREATED
)
def add_audio_file_to_artist(
    artist_id: int,
    audio_file_id: int,
    service: ArtistService = Depends(get_artist_service)
):
    service.add_audio_file(artist_id, audio_file_id)
    return service.retrieve_audio_files(artist_id)

@router.delete("/artists/{artist_id}/audio-files/{audio_file_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_audio_file_from_artist(
    artist_id: int,
    audio_file_id: int,
    service: ArtistService = Depends(get_artist_service)
):
    # Removing a link that isn't there still leaves it absent, so this succeeds either way.
    service.remove_audio_file(artist_id, audio_file_id)
