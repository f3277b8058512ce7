import logging
from datetime import datetime, timedelta, timezone

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from app.core.config import settings
from app.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"

# 토큰 누락 시 FastAPI 기본 403 대신 UnauthorizedError(401)로 처리
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(admin_id: str, expires_delta: timedelta | None = None) -> str:
    """관리자용 JWT 액세스 토큰 발급

    Args:
        admin_id: 관리자 식별자 (퀴즈 세션의 created_by로 기록됨)
        expires_delta: 만료 시간 (기본값: settings.access_token_expire_minutes)
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode = {"sub": admin_id, "role": ADMIN_ROLE, "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def verify_admin_token(token: str) -> str:
    """토큰 검증 후 관리자 ID 반환

    Raises:
        UnauthorizedError: 서명 오류, 만료, 관리자 역할 아님
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as e:
        logger.warning(f"관리자 토큰 검증 실패: {e.__class__.__name__}")
        raise UnauthorizedError("유효하지 않거나 만료된 토큰입니다") from e

    admin_id = payload.get("sub")
    if not admin_id or payload.get("role") != ADMIN_ROLE:
        raise UnauthorizedError("관리자 권한이 없는 토큰입니다")
    return admin_id


async def require_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """보호된 작업(세션 생성/시작/종료/수정)용 의존성, 관리자 ID 반환"""
    if credentials is None:
        raise UnauthorizedError()
    return verify_admin_token(credentials.credentials)
