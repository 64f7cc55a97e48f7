import logging
from datetime import datetime, timedelta, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.security import OAuth2PasswordRequestForm
from starlette import status

from zentro.config import settings
from zentro.dependencies import admin_dependency, db_dependency, limiter
from zentro.schemas.admin import AdminResponse, Token
from zentro.services.auth_service import authenticate_admin, create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/login", response_model=Token, status_code=status.HTTP_200_OK)
@limiter.limit("5/minute")
async def login_for_access_token(
    request: Request,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    db: db_dependency,
):
    admin = authenticate_admin(form_data.username, form_data.password, db)
    if not admin:
        logger.warning("Failed admin login for %s", form_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    if not admin.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin account is disabled",
        )

    admin.last_login = datetime.now(timezone.utc)
    db.commit()

    token = create_access_token(
        admin.email,
        admin.id,
        admin.role,
        timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return {"access_token": token, "token_type": "bearer"}


@router.get("/me", response_model=AdminResponse, status_code=status.HTTP_200_OK)
async def read_current_admin(admin: admin_dependency):
    return admin
