from typing import List, Optional

from fastapi import APIRouter, File, Form, HTTPException, Response, UploadFile, status

from zentro.config import settings
from zentro.dependencies import admin_dependency, db_dependency, media_dependency
from zentro.schemas.image import ImageOptions, ImageResponse, YouTubeValidation
from zentro.services.media_manager import MediaFile

router = APIRouter(prefix="/property_images", tags=["property_images"])


@router.get(
    "/youtube/validate",
    response_model=YouTubeValidation,
    status_code=status.HTTP_200_OK,
)
async def validate_youtube(media_manager: media_dependency, url: Optional[str] = None):
    return media_manager.validate_youtube_url(url)


@router.post(
    "/{property_id}",
    response_model=ImageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_property_image(
    db: db_dependency,
    admin: admin_dependency,
    media_manager: media_dependency,
    property_id: int,
    alt_text: str = Form(None),
    is_primary: bool = Form(False),
    display_order: int = Form(0),
    file: UploadFile = File(...),
):
    if file.content_type not in settings.ALLOWED_IMAGE_TYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported image type: {file.content_type}",
        )

    data = await file.read()
    if len(data) > settings.MAX_IMAGE_SIZE:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Image exceeds {settings.MAX_IMAGE_SIZE} bytes",
        )

    result = await media_manager.upload_image(
        db,
        MediaFile(
            name=file.filename or "upload",
            size=len(data),
            content_type=file.content_type,
            data=data,
        ),
        property_id,
        ImageOptions(
            alt_text=alt_text, is_primary=is_primary, display_order=display_order
        ),
    )
    if not result.success:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=result.error)
    return result.data


@router.get(
    "/{property_id}",
    response_model=List[ImageResponse],
    status_code=status.HTTP_200_OK,
)
async def get_property_images(
    db: db_dependency, media_manager: media_dependency, property_id: int
):
    result = await media_manager.get_property_media(db, property_id)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=result.error)
    return result.images


@router.delete("/{image_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_image(
    db: db_dependency,
    admin: admin_dependency,
    media_manager: media_dependency,
    image_id: int,
):
    result = await media_manager.delete_image(db, image_id)
    if not result.success:
        if result.error_code == "not_found":
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=result.error
            )
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
