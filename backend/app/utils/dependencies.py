from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from typing import Any, Dict, Optional
from app.core.security import decode_token
from app.utils.exceptions import ForbiddenException, UnauthorizedException
from app.utils.logger import auth_logger

oauth2_scheme_optional = OAuth2PasswordBearer(tokenUrl="/token", auto_error=False)

# 토큰이 있으면 검증 후 payload 반환. 토큰이 없거나 유효하지 않으면 비로그인으로 취급
def get_token_payload(token: Optional[str] = Depends(oauth2_scheme_optional)) -> Optional[Dict[str, Any]]:
    if not token:
        return None
    try:
        return decode_token(token)
    except JWTError as e:
        auth_logger.info(f"유효하지 않은 토큰: {str(e)}")
        return None

# 로그인 필수
def ensure_logged_in(payload: Optional[Dict[str, Any]] = Depends(get_token_payload)) -> Dict[str, Any]:
    if payload is None:
        raise UnauthorizedException()
    return payload

# 관리자 전용
def ensure_admin(payload: Dict[str, Any] = Depends(ensure_logged_in)) -> Dict[str, Any]:
    if payload.get("isAdmin") is not True:
        auth_logger.warning(f"관리자 권한 없음: {payload.get('username')}")
        raise ForbiddenException("관리자 권한이 필요합니다.")
    return payload
