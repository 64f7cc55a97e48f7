from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette import status
from sqlalchemy.orm import Session

from zentro.config import settings
from zentro.database import SessionLocal
from zentro.models.admin_user import AdminUser
from zentro.services.auth_service import get_current_admin
from zentro.services.media_manager import MediaManager
from zentro.services.storage import create_supabase_storage

# Shared rate limiter, keyed by client address
limiter = Limiter(key_func=get_remote_address)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@lru_cache
def get_media_manager() -> MediaManager:
    return MediaManager(
        create_supabase_storage(),
        images_bucket=settings.IMAGES_BUCKET,
        thumbnails_bucket=settings.THUMBNAILS_BUCKET,
    )


def require_admin(
    current_admin: Annotated[dict, Depends(get_current_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> dict:
    """Token claims of an admin whose account still exists and is active."""
    if current_admin.get("role") != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient permissions",
        )
    admin = db.query(AdminUser).filter(AdminUser.id == current_admin["id"]).first()
    if admin is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not authenticate admin",
        )
    if not admin.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin account is disabled",
        )
    return current_admin


db_dependency = Annotated[Session, Depends(get_db)]
media_dependency = Annotated[MediaManager, Depends(get_media_manager)]
admin_dependency = Annotated[dict, Depends(require_admin)]
