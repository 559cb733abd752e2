"""인증 서비스 — 회원가입, 로그인 비즈니스 로직.

Auth Service — Business logic for registration and login.
Issues the bearer tokens that the identity dependency later resolves
into the acting owner of catalog operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models.user import User
from catalog.repositories.user_repository import user_repository
from catalog.schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from catalog.services.user_service import user_service
from catalog.utils.exceptions import UnauthorizedError
from catalog.utils.jwt import create_access_token
from catalog.utils.password import verify_password


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스.

    Service handling authentication business logic.
    """

    def _build_jwt_payload(self, user: User) -> dict[str, str]:
        """JWT 토큰 페이로드를 생성합니다.

        Build the JWT token payload from user data.
        """
        return {
            "sub": str(user.id),
            "email": user.email,
        }

    async def register(
        self,
        db: AsyncSession,
        data: RegisterRequest,
    ) -> UserResponse:
        """새 계정을 등록합니다.

        Register a new account.

        Raises:
            DuplicateError: 이메일이 이미 사용 중일 때 (E-mail already registered)
        """
        user: User = await user_service.create_user(
            db, data.name, data.email, data.password
        )
        return user_service.to_response(user)

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
    ) -> TokenResponse:
        """로그인을 처리하고 액세스 토큰을 발급합니다.

        Verify credentials and issue an access token.

        Raises:
            UnauthorizedError: 잘못된 인증 정보일 때 (Invalid credentials)
        """
        user: User | None = await user_repository.get_by_email(db, data.email)
        if user is None or not verify_password(data.password, user.password_hash):
            raise UnauthorizedError("Invalid email or password")

        return TokenResponse(access_token=create_access_token(self._build_jwt_payload(user)))


# 싱글턴 인스턴스 — Singleton instance
auth_service: AuthService = AuthService()
