import logging
from datetime import datetime, timedelta, timezone
from typing import Annotated
from fastapi import Depends, HTTPException
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session
from starlette import status
from zentro.config import settings
from zentro.models.admin_user import AdminUser
from fastapi.security import OAuth2PasswordBearer

logger = logging.getLogger(__name__)

SECRET_KEY = settings.SECRET_KEY
ALGORITHM = settings.ALGORITHM

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_bearer = OAuth2PasswordBearer(tokenUrl="admin/login")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(email: str, admin_id: int, role: str, expires_delta: timedelta):
    encode = {"sub": email, "id": admin_id, "role": role}
    expires = datetime.now(timezone.utc) + expires_delta
    encode.update({"exp": expires})
    return jwt.encode(encode, SECRET_KEY, algorithm=ALGORITHM)


def authenticate_admin(email: str, password: str, db: Session):
    admin: AdminUser = (
        db.query(AdminUser).filter(AdminUser.email == email.strip().lower()).first()
    )
    if not admin:
        return False
    if not pwd_context.verify(password, admin.password_hash):
        return False
    return admin


def ensure_admin_user(db: Session, email: str, password: str, name: str = "Admin User"):
    """Create the bootstrap admin account if it does not exist yet."""
    email = email.strip().lower()
    admin = db.query(AdminUser).filter(AdminUser.email == email).first()
    if admin:
        return admin
    admin = AdminUser(
        email=email,
        name=name,
        password_hash=get_password_hash(password),
        role="admin",
        is_active=True,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info("Created admin user %s", email)
    return admin


async def get_current_admin(token: Annotated[str, Depends(oauth2_bearer)]):
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        email: str = payload.get("sub")
        admin_id: int = payload.get("id")
        role: str = payload.get("role")
        if not email or not admin_id:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Could not authenticate admin",
            )
        return {"email": email, "id": admin_id, "role": role}
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not authenticate admin",
        )
