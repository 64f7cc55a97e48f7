import enum
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import func
from zentro.database import Base


class InquiryStatus(str, enum.Enum):
    NEW = "new"
    IN_PROGRESS = "in_progress"
    CONTACTED = "contacted"
    RESOLVED = "resolved"
    CLOSED = "closed"


class InquiryPriority(str, enum.Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class ContactInquiry(Base):
    __tablename__ = "contact_inquiries"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(50), nullable=True)
    # Kept when the listing is deleted
    property_id = Column(
        Integer, ForeignKey("properties.id", ondelete="SET NULL"), nullable=True
    )
    inquiry_type = Column(String(50), default="general")
    subject = Column(String(255), nullable=True)
    message = Column(Text, nullable=False)
    preferred_contact_method = Column(String(20), default="email")
    preferred_contact_time = Column(String(100), nullable=True)
    source = Column(String(50), default="website")

    # Request metadata
    user_agent = Column(String(500), nullable=True)
    ip_address = Column(String(64), nullable=True)
    referrer = Column(String(500), nullable=True)

    # Follow-up
    status = Column(String(20), default=InquiryStatus.NEW.value, nullable=False)
    priority = Column(String(20), default=InquiryPriority.NORMAL.value, nullable=False)
    assigned_to = Column(String(200), nullable=True)
    admin_notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    contacted_at = Column(DateTime(timezone=True), nullable=True)
