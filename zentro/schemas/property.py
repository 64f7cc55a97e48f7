from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from datetime import datetime
from zentro.models.property import PropertyType, PropertyStatus
from zentro.schemas.image import ImageResponse
from zentro.utils.youtube import validate_youtube_url


class PropertyBase(BaseModel):
    title: str = Field(..., max_length=200)
    type: PropertyType
    status: PropertyStatus
    price: float = Field(..., gt=0)
    currency: str = Field(default="KES", max_length=3)
    description: Optional[str] = None
    location_area: str = Field(..., max_length=100)
    location_city: str = Field(..., max_length=100)
    location_country: str = Field(default="Kenya", max_length=100)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    parking: Optional[int] = Field(None, ge=0)
    size: Optional[float] = Field(None, gt=0)
    size_unit: str = Field(default="m²", max_length=10)
    year_built: Optional[int] = Field(None, ge=1800)
    furnished: bool = False
    amenities: Optional[List[str]] = None
    youtube_url: Optional[str] = None
    available: bool = True
    featured: bool = False


def _check_youtube_url(v):
    if not v:
        return None
    is_valid, message = validate_youtube_url(v)
    if not is_valid:
        raise ValueError(message)
    return v


class PropertyCreate(PropertyBase):
    @field_validator("youtube_url")
    @classmethod
    def check_youtube_url(cls, v):
        return _check_youtube_url(v)


class PropertyUpdate(BaseModel):
    title: Optional[str] = Field(None, max_length=200)
    type: Optional[PropertyType] = None
    status: Optional[PropertyStatus] = None
    price: Optional[float] = Field(None, gt=0)
    currency: Optional[str] = Field(None, max_length=3)
    description: Optional[str] = None
    location_area: Optional[str] = Field(None, max_length=100)
    location_city: Optional[str] = Field(None, max_length=100)
    location_country: Optional[str] = Field(None, max_length=100)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    parking: Optional[int] = Field(None, ge=0)
    size: Optional[float] = Field(None, gt=0)
    size_unit: Optional[str] = Field(None, max_length=10)
    year_built: Optional[int] = Field(None, ge=1800)
    furnished: Optional[bool] = None
    amenities: Optional[List[str]] = None
    youtube_url: Optional[str] = None
    available: Optional[bool] = None
    featured: Optional[bool] = None

    @field_validator("youtube_url")
    @classmethod
    def check_youtube_url(cls, v):
        return _check_youtube_url(v)


class PropertyMedia(BaseModel):
    main: str
    gallery: List[str] = Field(default_factory=list)
    images: List[ImageResponse] = Field(default_factory=list)


class PropertyResponse(PropertyBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    youtube_id: Optional[str] = None
    media: Optional[PropertyMedia] = None

    model_config = ConfigDict(from_attributes=True)
