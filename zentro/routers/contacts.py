from typing import List, Optional

from fastapi import APIRouter, Query, Request, Response
from starlette import status

from zentro.dependencies import admin_dependency, db_dependency, limiter
from zentro.models.contact_inquiry import InquiryPriority, InquiryStatus
from zentro.schemas.contact import (
    ContactInquiryCreate,
    ContactInquiryResponse,
    ContactInquiryUpdate,
    InquiryReceipt,
)
from zentro.services.contact_service import ContactService

router = APIRouter(prefix="/contacts", tags=["contacts"])


@router.post("/", response_model=InquiryReceipt, status_code=status.HTTP_201_CREATED)
@limiter.limit("10/minute")
async def submit_inquiry(
    request: Request, db: db_dependency, inquiry: ContactInquiryCreate
):
    return ContactService(db).create_inquiry(
        inquiry,
        ip_address=request.headers.get("x-forwarded-for")
        or (request.client.host if request.client else None),
        user_agent=request.headers.get("user-agent"),
        referrer=request.headers.get("referer"),
    )


@router.get(
    "/", response_model=List[ContactInquiryResponse], status_code=status.HTTP_200_OK
)
async def get_inquiries(
    db: db_dependency,
    admin: admin_dependency,
    inquiry_status: Optional[InquiryStatus] = Query(None, alias="status"),
    priority: Optional[InquiryPriority] = Query(None),
    inquiry_type: Optional[str] = Query(None),
    property_id: Optional[int] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=500),
):
    return ContactService(db).get_inquiries(
        status=inquiry_status,
        priority=priority,
        inquiry_type=inquiry_type,
        property_id=property_id,
        skip=skip,
        limit=limit,
    )


@router.get(
    "/{inquiry_id}",
    response_model=ContactInquiryResponse,
    status_code=status.HTTP_200_OK,
)
async def get_inquiry(db: db_dependency, admin: admin_dependency, inquiry_id: int):
    return ContactService(db).get_inquiry(inquiry_id)


@router.put(
    "/{inquiry_id}/status",
    response_model=ContactInquiryResponse,
    status_code=status.HTTP_200_OK,
)
async def update_inquiry(
    db: db_dependency,
    admin: admin_dependency,
    inquiry_id: int,
    update: ContactInquiryUpdate,
):
    return ContactService(db).update_inquiry(inquiry_id, update)


@router.delete("/{inquiry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_inquiry(db: db_dependency, admin: admin_dependency, inquiry_id: int):
    ContactService(db).delete_inquiry(inquiry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
