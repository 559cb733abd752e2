"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication-related Pydantic request/response schema definitions.
Covers registration, login, token issuance and current user info.
"""

from datetime import datetime
from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    """회원가입 요청 스키마.

    Account registration request schema.

    Attributes:
        name: 표시 이름 (Display name)
        email: 이메일 (E-mail address, unique across all users)
        password: 비밀번호 (Plain text, will be bcrypt-hashed on server)
    """

    name: str = Field(min_length=1)  # 표시 이름 (Display name)
    email: EmailStr  # 이메일 — 전체 고유 (Globally unique e-mail)
    password: str = Field(min_length=1)  # 비밀번호 — 평문, 서버에서 bcrypt 해싱 (Plain text, hashed server-side)


class LoginRequest(BaseModel):
    """로그인 요청 스키마."""

    email: EmailStr
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    """JWT 토큰 발급 응답 스키마.

    Attributes:
        access_token: JWT 액세스 토큰 (Short-lived access token)
        token_type: 토큰 유형 (Always "bearer" for Authorization header)
    """

    access_token: str
    token_type: str = "bearer"


class UserResponse(BaseModel):
    """사용자 응답 스키마 — 비밀번호 해시는 절대 포함하지 않음.

    User response schema. Never includes the password hash.
    """

    id: str
    name: str
    email: str
    created_at: datetime
