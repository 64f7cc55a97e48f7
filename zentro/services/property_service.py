import logging
from typing import List, Optional
from sqlalchemy import and_, func, or_, select
from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from zentro.models.property import Property, PropertyStatus, PropertyType
from zentro.models.property_images import PropertyImage
from zentro.schemas.image import ImageResponse
from zentro.schemas.property import (
    PropertyCreate,
    PropertyMedia,
    PropertyResponse,
    PropertyUpdate,
)
from zentro.services.media_manager import MediaManager
from zentro.utils.youtube import extract_youtube_id

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "created_at": Property.created_at,
    "updated_at": Property.updated_at,
    "price": Property.price,
    "title": Property.title,
    "bedrooms": Property.bedrooms,
    "size": Property.size,
}


def combine_property_with_media(
    images: List[ImageResponse], placeholder_url: str
) -> PropertyMedia:
    """Pick the listing's main image and gallery.

    The main image is the first primary image, or the first image when none
    is primary; the gallery holds every other non-primary image. A property
    without images gets the placeholder as its main image.
    """
    if not images:
        return PropertyMedia(main=placeholder_url, gallery=[], images=[])

    main = next((img for img in images if img.is_primary), images[0])
    gallery = [
        img.public_url for img in images if not img.is_primary and img.id != main.id
    ]
    return PropertyMedia(main=main.public_url, gallery=gallery, images=images)


class PropertyService:
    async def create_property(self, db: Session, property_data: PropertyCreate):
        new_property = Property(**property_data.model_dump())

        db.add(new_property)
        db.commit()
        db.refresh(new_property)

        return new_property

    async def get_properties(
        self,
        db: Session,
        # Property details
        property_type: Optional[PropertyType] = None,
        status: Optional[PropertyStatus] = None,
        # Location filters
        location: Optional[str] = None,
        location_city: Optional[str] = None,
        location_area: Optional[str] = None,
        # Range filters
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        bedrooms: Optional[int] = None,
        bathrooms: Optional[int] = None,
        min_size: Optional[float] = None,
        max_size: Optional[float] = None,
        # Flags
        furnished: Optional[bool] = None,
        featured: Optional[bool] = None,
        available: Optional[bool] = None,
        # Pagination
        skip: int = 0,
        limit: int = 100,
        # Sorting
        sort_by: str = "created_at",
        sort_order: str = "desc",
    ):
        """
        List properties matching every given filter.

        Location filters are case-insensitive partial matches; ``location``
        matches either the city or the area. ``bedrooms`` and ``bathrooms``
        are exact counts. Results are sorted by ``sort_by`` and then by id in
        the same direction.
        """
        conditions = []

        if property_type:
            conditions.append(Property.type == property_type)
        if status:
            conditions.append(Property.status == status)

        if location:
            conditions.append(
                or_(
                    func.lower(Property.location_city).contains(location.lower()),
                    func.lower(Property.location_area).contains(location.lower()),
                )
            )
        if location_city:
            conditions.append(
                func.lower(Property.location_city).contains(location_city.lower())
            )
        if location_area:
            conditions.append(
                func.lower(Property.location_area).contains(location_area.lower())
            )

        if min_price is not None:
            conditions.append(Property.price >= min_price)
        if max_price is not None:
            conditions.append(Property.price <= max_price)
        if bedrooms is not None:
            conditions.append(Property.bedrooms == bedrooms)
        if bathrooms is not None:
            conditions.append(Property.bathrooms == bathrooms)
        if min_size is not None:
            conditions.append(Property.size >= min_size)
        if max_size is not None:
            conditions.append(Property.size <= max_size)

        if furnished is not None:
            conditions.append(Property.furnished == furnished)
        if featured is not None:
            conditions.append(Property.featured == featured)
        if available is not None:
            conditions.append(Property.available == available)

        sort_column = SORT_COLUMNS.get(sort_by, Property.created_at)
        if sort_order == "asc":
            order = (sort_column.asc(), Property.id.asc())
        else:
            order = (sort_column.desc(), Property.id.desc())

        query = select(Property)
        if conditions:
            query = query.where(and_(*conditions))
        result = db.execute(query.order_by(*order).offset(skip).limit(limit))
        return result.scalars().all()

    async def get_property(self, db: Session, property_id: int):
        result = db.execute(select(Property).where(Property.id == property_id))
        property = result.scalar_one_or_none()

        if not property:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Property with ID {property_id} not found",
            )
        return property

    async def update_property(
        self, db: Session, property_id: int, property_data: PropertyUpdate
    ):
        property = await self.get_property(db, property_id)

        update_data = property_data.model_dump(exclude_unset=True)
        if not update_data:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No update data provided",
            )
        for key, value in update_data.items():
            setattr(property, key, value)

        db.commit()
        db.refresh(property)

        return property

    async def delete_property(
        self, db: Session, property_id: int, media_manager: MediaManager
    ):
        """Delete a listing after removing each of its images.

        Images go through the Media Manager so their blobs are removed too.
        The first failing image stops the delete: the listing and its
        remaining images are kept and the failure is raised as a 502.
        """
        property = await self.get_property(db, property_id)

        image_ids = [
            image_id
            for (image_id,) in db.query(PropertyImage.id)
            .filter(PropertyImage.property_id == property_id)
            .order_by(PropertyImage.id)
            .all()
        ]
        for image_id in image_ids:
            result = await media_manager.delete_image(db, image_id)
            if not result.success:
                logger.error(
                    f"Aborting delete of property {property_id}: {result.error}"
                )
                raise HTTPException(
                    status_code=status.HTTP_502_BAD_GATEWAY,
                    detail=result.error,
                )

        db.delete(property)
        db.commit()
        logger.info(
            "Deleted property %s with %d images", property_id, len(image_ids)
        )

    async def with_media(
        self, db: Session, property: Property, media_manager: MediaManager
    ) -> PropertyResponse:
        media = await media_manager.get_property_media(db, property.id)
        if not media.success:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=media.error,
            )
        response = PropertyResponse.model_validate(property)
        response.youtube_id = extract_youtube_id(property.youtube_url)
        response.media = combine_property_with_media(
            media.images, media_manager.placeholder_url()
        )
        return response
