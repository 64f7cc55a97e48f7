from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    Float,
    Boolean,
    DateTime,
    JSON,
    Enum,
)
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from zentro.database import Base
import enum


class PropertyType(str, enum.Enum):
    VILLA = "Villa"
    APARTMENT = "Apartment"
    PENTHOUSE = "Penthouse"
    CONDO = "Condo"


class PropertyStatus(str, enum.Enum):
    FOR_SALE = "For Sale"
    FOR_RENT = "For Rent"


class Property(Base):
    __tablename__ = "properties"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    type = Column(Enum(PropertyType), nullable=False)
    status = Column(Enum(PropertyStatus), nullable=False)
    price = Column(Float, nullable=False)
    currency = Column(String(3), default="KES")
    description = Column(Text, nullable=True)

    # Location
    location_area = Column(String(100), nullable=False)
    location_city = Column(String(100), nullable=False)
    location_country = Column(String(100), default="Kenya")
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    # Features
    bedrooms = Column(Integer, nullable=True)
    bathrooms = Column(Integer, nullable=True)
    parking = Column(Integer, nullable=True)
    size = Column(Float, nullable=True)
    size_unit = Column(String(10), default="m²")
    year_built = Column(Integer, nullable=True)
    furnished = Column(Boolean, default=False)
    amenities = Column(JSON, nullable=True)  # ["Swimming Pool", "Garden"]

    youtube_url = Column(String(500), nullable=True)

    available = Column(Boolean, default=True)
    featured = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    images = relationship(
        "PropertyImage", back_populates="property", cascade="all, delete-orphan"
    )
