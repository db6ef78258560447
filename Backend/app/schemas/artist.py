from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import Optional

class ArtistBase(BaseModel):
    artist_name: str
    artist_thumbnail: Optional[str] = None

class ArtistCreate(ArtistBase):
    pass

class ArtistUpdate(ArtistBase):
    pass

class ArtistResponse(ArtistBase):
    artist_id: int
    last_modified: datetime

    model_config = ConfigDict(from_attributes=True)
