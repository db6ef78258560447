from fastapi import APIRouter, Depends, status
from typing import List

from app.models.audio_file import AudioFile
from app.schemas.artist import ArtistResponse
from app.schemas.audio_file import AudioFileCreate, AudioFileResponse, AudioFileUpdate
from app.services.audio_file_service import AudioFileService, get_audio_file_service


router = APIRouter()

@router.get("/audio-files/", response_model=List[AudioFileResponse])
def list_audio_files(service: AudioFileService = Depends(get_audio_file_service)):
    return service.retrieve()

@router.post("/audio-files/", response_model=AudioFileResponse, status_code=status.HTTP_201_CREATED)
def create_audio_file(audio_file_data: AudioFileCreate, service: AudioFileService = Depends(get_audio_file_service)):
    return service.insert(AudioFile(**audio_file_data.model_dump()))

@router.get("/audio-files/{audio_file_id}", response_model=AudioFileResponse)
def read_audio_file(audio_file_id: int, service: AudioFileService = Depends(get_audio_file_service)):
    return service.view(audio_file_id)

@router.patch("/audio-files/{audio_file_id}", response_model=AudioFileResponse)
def update_audio_file(
    audio_file_id: int,
    audio_file_data: AudioFileUpdate,
    service: AudioFileService = Depends(get_audio_file_service)
):
    return service.update(audio_file_id, audio_file_data)

@router.delete("/audio-files/{audio_file_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_audio_file(audio_file_id: int, service: AudioFileService = Depends(get_audio_file_service)):
    service.delete(audio_file_id)

@router.get("/audio-files/{audio_file_id}/artists/", response_model=List[ArtistResponse])
def list_audio_file_artists(audio_file_id: int, service: AudioFileService = Depends(get_audio_file_service)):
    service.view(audio_file_id)
    return service.retrieve_artists(audio_file_id)
