import logging
import secrets
import string
import time
from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from zentro.models.property_images import PropertyImage
from zentro.schemas.image import (
    DeleteResult,
    ImageOptions,
    ImageResponse,
    MediaListResult,
    UploadResult,
    YouTubeValidation,
)
from zentro.services.storage import StorageError
from zentro.utils.youtube import validate_youtube_url

logger = logging.getLogger(__name__)

_TOKEN_ALPHABET = string.digits + string.ascii_lowercase
PLACEHOLDER_IMAGE_PATH = "placeholder/default-property.jpg"


@dataclass
class MediaFile:
    name: str
    size: int
    content_type: str
    data: bytes


def _random_token(length: int = 6) -> str:
    return "".join(secrets.choice(_TOKEN_ALPHABET) for _ in range(length))


def build_storage_path(property_id: int, file_name: str) -> str:
    """Key for a new blob: ``<property_id>/<millis>_<token>.<ext>``.

    The extension is whatever follows the last dot of ``file_name``; a name
    without a dot is used whole, as the upload form never strips it.
    """
    extension = file_name.rsplit(".", 1)[-1]
    millis = int(time.time() * 1000)
    return f"{property_id}/{millis}_{_random_token()}.{extension}"


class MediaManager:
    """Keeps property images in the object store and ``property_images`` in step.

    Every public operation returns a result object instead of raising; the
    storage and database writes are not atomic, so a failure between them can
    leave an orphaned blob (upload) or row (delete).
    """

    def __init__(
        self,
        storage,
        images_bucket: str = "property-images",
        thumbnails_bucket: str = "property-thumbnails",
    ):
        self.storage = storage
        self.buckets = {"images": images_bucket, "thumbnails": thumbnails_bucket}

    @property
    def images_bucket(self) -> str:
        return self.buckets["images"]

    def public_url(self, storage_path: str) -> str:
        return self.storage.get_public_url(self.images_bucket, storage_path)

    def placeholder_url(self) -> str:
        return self.public_url(PLACEHOLDER_IMAGE_PATH)

    def _to_response(self, image: PropertyImage) -> ImageResponse:
        return ImageResponse(
            id=image.id,
            property_id=image.property_id,
            storage_path=image.storage_path,
            file_name=image.file_name,
            file_size=image.file_size,
            mime_type=image.mime_type,
            alt_text=image.alt_text,
            is_primary=bool(image.is_primary),
            display_order=image.display_order,
            created_at=image.created_at,
            public_url=self.public_url(image.storage_path),
        )

    async def upload_image(
        self,
        db: Session,
        file: MediaFile,
        property_id: int,
        options: Optional[ImageOptions] = None,
    ) -> UploadResult:
        options = options or ImageOptions()
        storage_path = build_storage_path(property_id, file.name)

        try:
            self.storage.upload(
                self.images_bucket,
                storage_path,
                file.data,
                content_type=file.content_type,
                cache_control="3600",
                upsert=False,
            )
        except StorageError as exc:
            logger.error(f"Error uploading image: {exc}", exc_info=True)
            return UploadResult(
                success=False, error=str(exc), error_code="storage_error"
            )

        image = PropertyImage(
            property_id=property_id,
            storage_path=storage_path,
            file_name=file.name,
            file_size=file.size,
            mime_type=file.content_type,
            alt_text=options.alt_text
            or f"Property image for listing {property_id}",
            is_primary=options.is_primary,
            display_order=options.display_order,
        )
        db.add(image)
        try:
            db.commit()
            db.refresh(image)
        except SQLAlchemyError as exc:
            # The blob stays at storage_path with no row pointing at it
            db.rollback()
            logger.error(
                f"Error saving metadata for uploaded image {storage_path}: {exc}",
                exc_info=True,
            )
            return UploadResult(
                success=False, error=str(exc), error_code="database_error"
            )

        logger.info(
            "Uploaded image %s for property %s as %s",
            file.name,
            property_id,
            storage_path,
        )
        return UploadResult(success=True, data=self._to_response(image))

    async def get_property_media(self, db: Session, property_id: int) -> MediaListResult:
        try:
            images = (
                db.query(PropertyImage)
                .filter(PropertyImage.property_id == property_id)
                .order_by(PropertyImage.display_order.asc(), PropertyImage.id.asc())
                .all()
            )
            responses = [self._to_response(image) for image in images]
        except SQLAlchemyError as exc:
            logger.error(f"Error fetching property media: {exc}", exc_info=True)
            return MediaListResult(
                success=False, error=str(exc), error_code="database_error"
            )
        except ValidationError as exc:
            # Rows written outside this service may not fit ImageResponse
            logger.error(
                f"Invalid media row for property {property_id}: {exc}", exc_info=True
            )
            return MediaListResult(
                success=False, error=str(exc), error_code="invalid_row"
            )

        return MediaListResult(success=True, images=responses)

    async def delete_image(self, db: Session, image_id: int) -> DeleteResult:
        try:
            image = db.query(PropertyImage).filter(PropertyImage.id == image_id).first()
        except SQLAlchemyError as exc:
            logger.error(f"Error deleting image: {exc}", exc_info=True)
            return DeleteResult(
                success=False, error=str(exc), error_code="database_error"
            )

        if image is None:
            message = f"Image {image_id} not found"
            logger.error(f"Error deleting image: {message}")
            return DeleteResult(success=False, error=message, error_code="not_found")

        storage_path = image.storage_path
        try:
            self.storage.remove(self.images_bucket, [storage_path])
        except StorageError as exc:
            logger.error(f"Error deleting image: {exc}", exc_info=True)
            return DeleteResult(
                success=False, error=str(exc), error_code="storage_error"
            )

        try:
            db.delete(image)
            db.commit()
        except SQLAlchemyError as exc:
            # Row now points at a blob that no longer exists
            db.rollback()
            logger.error(
                f"Error deleting metadata for image {image_id} ({storage_path}): {exc}",
                exc_info=True,
            )
            return DeleteResult(
                success=False, error=str(exc), error_code="database_error"
            )

        logger.info("Deleted image %s (%s)", image_id, storage_path)
        return DeleteResult(success=True)

    def validate_youtube_url(self, url: Optional[str]) -> YouTubeValidation:
        is_valid, message = validate_youtube_url(url)
        return YouTubeValidation(is_valid=is_valid, message=message)
