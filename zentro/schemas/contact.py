from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from datetime import datetime
from typing import Optional

from zentro.models.contact_inquiry import InquiryPriority, InquiryStatus


class ContactInquiryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    property_id: Optional[int] = None
    inquiry_type: str = Field(default="general", max_length=50)
    subject: Optional[str] = Field(None, max_length=255)
    message: str = Field(..., min_length=1)
    preferred_contact_method: str = Field(default="email", max_length=20)
    preferred_contact_time: Optional[str] = Field(None, max_length=100)
    source: str = Field(default="website", max_length=50)

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v):
        return v.lower()


class InquiryReceipt(BaseModel):
    id: int
    status: InquiryStatus
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ContactInquiryResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    property_id: Optional[int] = None
    inquiry_type: str
    subject: Optional[str] = None
    message: str
    preferred_contact_method: str
    preferred_contact_time: Optional[str] = None
    source: str
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None
    referrer: Optional[str] = None
    status: InquiryStatus
    priority: InquiryPriority
    assigned_to: Optional[str] = None
    admin_notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    contacted_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ContactInquiryUpdate(BaseModel):
    status: Optional[InquiryStatus] = None
    priority: Optional[InquiryPriority] = None
    assigned_to: Optional[str] = None
    admin_notes: Optional[str] = None
