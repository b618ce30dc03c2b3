from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt
from sqlalchemy.orm import Session
import logging
import os
import uuid
from dotenv import load_dotenv

from db.database import get_db
from exceptions import AuthenticationError
from model.token_model import AccessToken
from model.usermodels import User
from repository.user_repository import UserRepository
from utils.hashing import PasswordHasher, password_hasher

load_dotenv()

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

# JWT Configuration
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRY_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRY_MINUTES", "1440"))


def create_access_token(data: dict, expires_minutes: Optional[int] = None) -> str:
    to_encode = data.copy()
    expire = datetime.utcnow() + timedelta(minutes=expires_minutes or ACCESS_TOKEN_EXPIRY_MINUTES)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)


def verify_access_token(token: str):
    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
        return payload
    except JWTError:
        return None


def issue_token(db: Session, user: User, name: str = "auth-token") -> str:
    """Create a bearer token for the user and record it so it can be revoked."""
    jti = uuid.uuid4().hex
    db.add(AccessToken(user_id=user.id, jti=jti, name=name))
    db.commit()
    logger.info(f"Issued {name} for user {user.id}")
    return create_access_token({"sub": str(user.id), "email": user.email, "jti": jti})


def revoke_token(db: Session, jti: str) -> bool:
    deleted = db.query(AccessToken).filter(AccessToken.jti == jti).delete(synchronize_session=False)
    db.commit()
    return bool(deleted)


def revoke_all_tokens(db: Session, user_id: int) -> int:
    deleted = db.query(AccessToken).filter(AccessToken.user_id == user_id).delete(synchronize_session=False)
    db.commit()
    logger.info(f"Revoked {deleted} tokens for user {user_id}")
    return deleted


def authenticate_user(
    db: Session, email: str, password: str, hasher: Optional[PasswordHasher] = None
) -> Optional[User]:
    """Return the user when the credentials match, None otherwise."""
    user = UserRepository(db).get_by_email(email)
    hasher = hasher or password_hasher
    if user is None or not hasher.verify(password, user.password):
        return None
    return user


def get_token_payload(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> dict:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError()
    payload = verify_access_token(credentials.credentials)
    if not payload or not payload.get("jti") or not payload.get("sub"):
        raise AuthenticationError()
    return payload


def get_current_user(payload: dict = Depends(get_token_payload), db: Session = Depends(get_db)) -> User:
    token = db.query(AccessToken).filter(AccessToken.jti == payload["jti"]).first()
    if token is None:
        # Revoked by logout
        raise AuthenticationError()

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise AuthenticationError()
    if token.user_id != user_id:
        raise AuthenticationError()

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise AuthenticationError()

    token.last_used_at = datetime.utcnow()
    db.commit()
    return user
