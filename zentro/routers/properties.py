from typing import List, Optional

from fastapi import APIRouter, Query, Response
from starlette import status

from zentro.dependencies import admin_dependency, db_dependency, media_dependency
from zentro.models.property import PropertyStatus, PropertyType
from zentro.schemas.property import PropertyCreate, PropertyResponse, PropertyUpdate
from zentro.services.property_service import PropertyService

router = APIRouter(prefix="/properties", tags=["properties"])


@router.post("/", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
async def create_property(
    db: db_dependency,
    admin: admin_dependency,
    media_manager: media_dependency,
    property: PropertyCreate,
):
    service = PropertyService()
    result = await service.create_property(db=db, property_data=property)
    return await service.with_media(db, result, media_manager)


@router.get("/", response_model=List[PropertyResponse], status_code=status.HTTP_200_OK)
async def get_properties(
    db: db_dependency,
    media_manager: media_dependency,
    property_type: Optional[PropertyType] = Query(
        None, alias="type", description="Type of property"
    ),
    property_status: Optional[PropertyStatus] = Query(
        None, alias="status", description="For Sale or For Rent"
    ),
    location: Optional[str] = Query(
        None, description="Partial match on city or area"
    ),
    location_city: Optional[str] = Query(None, description="Partial match on city"),
    location_area: Optional[str] = Query(None, description="Partial match on area"),
    min_price: Optional[float] = Query(None, ge=0, description="Minimum price"),
    max_price: Optional[float] = Query(None, ge=0, description="Maximum price"),
    bedrooms: Optional[int] = Query(None, ge=0, description="Exact bedroom count"),
    bathrooms: Optional[int] = Query(None, ge=0, description="Exact bathroom count"),
    min_size: Optional[float] = Query(None, ge=0),
    max_size: Optional[float] = Query(None, ge=0),
    furnished: Optional[bool] = Query(None),
    featured: Optional[bool] = Query(None),
    available: Optional[bool] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    sort_by: str = Query(
        "created_at",
        pattern="^(created_at|updated_at|price|title|bedrooms|size)$",
        description="Field to sort by",
    ),
    sort_order: str = Query("desc", pattern="^(asc|desc)$", description="Sort order"),
):
    """
    List properties with their media summary.

    All filters are optional and can be combined.
    """
    service = PropertyService()
    properties = await service.get_properties(
        db,
        property_type=property_type,
        status=property_status,
        location=location,
        location_city=location_city,
        location_area=location_area,
        min_price=min_price,
        max_price=max_price,
        bedrooms=bedrooms,
        bathrooms=bathrooms,
        min_size=min_size,
        max_size=max_size,
        furnished=furnished,
        featured=featured,
        available=available,
        skip=skip,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return [await service.with_media(db, p, media_manager) for p in properties]


@router.get(
    "/{property_id}", response_model=PropertyResponse, status_code=status.HTTP_200_OK
)
async def get_property(
    db: db_dependency, media_manager: media_dependency, property_id: int
):
    service = PropertyService()
    property = await service.get_property(db, property_id)
    return await service.with_media(db, property, media_manager)


@router.put(
    "/{property_id}", response_model=PropertyResponse, status_code=status.HTTP_200_OK
)
async def update_property(
    db: db_dependency,
    admin: admin_dependency,
    media_manager: media_dependency,
    property_id: int,
    property: PropertyUpdate,
):
    service = PropertyService()
    result = await service.update_property(db, property_id, property)
    return await service.with_media(db, result, media_manager)


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_property(
    db: db_dependency,
    admin: admin_dependency,
    media_manager: media_dependency,
    property_id: int,
):
    await PropertyService().delete_property(db, property_id, media_manager)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
