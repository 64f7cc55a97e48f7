import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session
from starlette import status

from zentro.models.contact_inquiry import (
    ContactInquiry,
    InquiryPriority,
    InquiryStatus,
)
from zentro.models.property import Property
from zentro.schemas.contact import ContactInquiryCreate, ContactInquiryUpdate

logger = logging.getLogger(__name__)


class ContactService:

    def __init__(self, db: Session):
        self.db = db

    def create_inquiry(
        self,
        inquiry_data: ContactInquiryCreate,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
        referrer: Optional[str] = None,
    ):
        if inquiry_data.property_id is not None:
            exists = (
                self.db.query(Property.id)
                .filter(Property.id == inquiry_data.property_id)
                .first()
            )
            if not exists:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Property not found",
                )

        inquiry = ContactInquiry(
            **inquiry_data.model_dump(),
            ip_address=ip_address,
            user_agent=user_agent,
            referrer=referrer,
            status=InquiryStatus.NEW.value,
            priority=InquiryPriority.NORMAL.value,
        )
        self.db.add(inquiry)
        self.db.commit()
        self.db.refresh(inquiry)
        logger.info(
            "Contact inquiry %s received (property %s)",
            inquiry.id,
            inquiry.property_id,
        )
        return inquiry

    def get_inquiries(
        self,
        status: Optional[InquiryStatus] = None,
        priority: Optional[InquiryPriority] = None,
        inquiry_type: Optional[str] = None,
        property_id: Optional[int] = None,
        skip: int = 0,
        limit: int = 50,
    ):
        query = self.db.query(ContactInquiry)
        if status:
            query = query.filter(ContactInquiry.status == status.value)
        if priority:
            query = query.filter(ContactInquiry.priority == priority.value)
        if inquiry_type:
            query = query.filter(ContactInquiry.inquiry_type == inquiry_type)
        if property_id is not None:
            query = query.filter(ContactInquiry.property_id == property_id)
        return (
            query.order_by(ContactInquiry.created_at.desc(), ContactInquiry.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_inquiry(self, inquiry_id: int):
        inquiry = (
            self.db.query(ContactInquiry).filter(ContactInquiry.id == inquiry_id).first()
        )
        if not inquiry:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Contact inquiry not found",
            )
        return inquiry

    def update_inquiry(self, inquiry_id: int, update: ContactInquiryUpdate):
        inquiry = self.get_inquiry(inquiry_id)

        changes = update.model_dump(exclude_unset=True)
        if not changes:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No update data provided",
            )
        for key, value in changes.items():
            if key in ("status", "priority"):
                if value is None:
                    continue
                value = value.value
            setattr(inquiry, key, value)
        if changes.get("status") == InquiryStatus.CONTACTED:
            inquiry.contacted_at = datetime.now(timezone.utc)

        self.db.commit()
        self.db.refresh(inquiry)
        return inquiry

    def delete_inquiry(self, inquiry_id: int):
        inquiry = self.get_inquiry(inquiry_id)
        self.db.delete(inquiry)
        self.db.commit()
