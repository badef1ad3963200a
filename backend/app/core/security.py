from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from jose import jwt, JWTError
from app.config import settings

# 액세스 토큰 생성
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt

# 사용자 정보로 토큰 생성 (관리자 여부 포함, 기본값은 일반 사용자)
def create_token(username: str, is_admin: bool = False, expires_delta: Optional[timedelta] = None) -> str:
    return create_access_token(
        {"sub": username, "username": username, "isAdmin": bool(is_admin)},
        expires_delta=expires_delta
    )

# 토큰 검증 후 payload 반환. 유효하지 않으면 JWTError
def decode_token(token: str) -> Dict[str, Any]:
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    if payload.get("username") is None:
        raise JWTError("username 클레임이 없습니다.")
    return payload
