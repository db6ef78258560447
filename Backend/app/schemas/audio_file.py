from datetime import datetime
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional

class AudioFileBase(BaseModel):
    file_name: str
    storage_path: str
    thumbnail: Optional[str] = None
    favorite: int = 0
    owner_id: Optional[str] = None

class AudioFileCreate(AudioFileBase):
    pass

class AudioFileUpdate(BaseModel):
    # Only the fields that are sent get applied.
    file_name: Optional[str] = None
    storage_path: Optional[str] = None
    thumbnail: Optional[str] = None
    favorite: Optional[int] = None
    owner_id: Optional[str] = None

    @field_validator("file_name", "storage_path", "favorite")
    @classmethod
    def not_null(cls, value):
        # May be left out, but never cleared.
        if value is None:
            raise ValueError("may not be null")
        return value

class AudioFileResponse(AudioFileBase):
    audio_file_id: int
    date_added: datetime

    model_config = ConfigDict(from_attributes=True)
