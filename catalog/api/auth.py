"""인증 라우터 — 회원가입, 로그인, 현재 사용자 조회.

Auth Router — Registration, login and current-user endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.deps import get_current_user
from catalog.database import get_db
from catalog.models.user import User
from catalog.schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from catalog.services.auth_service import auth_service
from catalog.services.user_service import user_service

router: APIRouter = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=201)
async def register(
    data: RegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserResponse:
    """새 계정을 등록합니다.

    Register a new account. E-mail must be unused.
    """
    result: UserResponse = await auth_service.register(db, data)
    await db.commit()
    return result


@router.post("/login", response_model=TokenResponse)
async def login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """로그인 — 액세스 토큰 발급.

    Exchange e-mail and password for a bearer access token.
    """
    return await auth_service.login(db, data)


@router.get("/me", response_model=UserResponse)
async def me(
    current_user: Annotated[User, Depends(get_current_user)],
) -> UserResponse:
    """현재 로그인한 사용자 정보를 반환합니다."""
    return user_service.to_response(current_user)
