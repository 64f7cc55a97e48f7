from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, false, text
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from zentro.database import Base


class PropertyImage(Base):
    __tablename__ = "property_images"

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(
        Integer, ForeignKey("properties.id"), nullable=False, index=True
    )
    storage_path = Column(String(500), nullable=False, unique=True)  # bucket key
    file_name = Column(String(255), nullable=False)
    file_size = Column(Integer, nullable=False)
    mime_type = Column(String(100), nullable=False)
    alt_text = Column(String(200), nullable=True)
    is_primary = Column(Boolean, nullable=False, default=False, server_default=false())
    display_order = Column(Integer, nullable=False, default=0, server_default=text("0"))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    property = relationship("Property", back_populates="images")
