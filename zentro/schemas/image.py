from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import List, Optional


class ImageOptions(BaseModel):
    alt_text: Optional[str] = None
    is_primary: bool = False
    display_order: int = 0


class ImageResponse(BaseModel):
    id: int
    property_id: int
    storage_path: str
    file_name: str
    file_size: int
    mime_type: str
    alt_text: Optional[str] = None
    is_primary: bool
    display_order: int
    created_at: Optional[datetime] = None
    public_url: str

    model_config = ConfigDict(from_attributes=True)


class MediaResult(BaseModel):
    """Outcome of a media operation; callers must check ``success``."""

    success: bool
    error: Optional[str] = None
    # "not_found", "storage_error", "database_error" or "invalid_row" on failure
    error_code: Optional[str] = None


class UploadResult(MediaResult):
    data: Optional[ImageResponse] = None


class MediaListResult(MediaResult):
    images: List[ImageResponse] = Field(default_factory=list)


class DeleteResult(MediaResult):
    pass


class YouTubeValidation(BaseModel):
    is_valid: bool
    message: str
