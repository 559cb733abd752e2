"""사용자 서비스 — 사용자 계정 생성.

User Service — Creation of user accounts (repository owners).
E-mail uniqueness follows the same pattern as repository names: a lookup
rejects the common case, the unique constraint on users.email, hit inside a
savepoint, rejects concurrent registrations.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models.user import User
from catalog.repositories.user_repository import user_repository
from catalog.schemas.auth import UserResponse
from catalog.utils.exceptions import DuplicateError
from catalog.utils.password import hash_password

logger = logging.getLogger(__name__)


class UserService:
    """사용자 관련 비즈니스 로직을 처리하는 서비스."""

    def to_response(self, user: User) -> UserResponse:
        return UserResponse(
            id=str(user.id),
            name=user.name,
            email=user.email,
            created_at=user.created_at,
        )

    async def create_user(
        self,
        db: AsyncSession,
        name: str,
        email: str,
        password: str,
        user_id: UUID | None = None,
    ) -> User:
        """새 사용자를 생성합니다.

        Create a user account. The id may be supplied by the caller;
        otherwise it is generated on insert.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 표시 이름 (Display name)
            email: 이메일, 전체 고유 (E-mail, unique across all users)
            password: 평문 비밀번호 (Plain text password, stored as bcrypt hash)
            user_id: 지정할 UUID (Explicit UUID, optional)

        Returns:
            User: 생성된 사용자 (Created user)

        Raises:
            DuplicateError: 이메일이 이미 사용 중일 때 (E-mail already registered)
        """
        if await user_repository.exists(db, {"email": email}):
            raise DuplicateError("A user with this email already exists")

        fields: dict = {
            "name": name,
            "email": email,
            "password_hash": hash_password(password),
        }
        if user_id is not None:
            fields["id"] = user_id

        try:
            async with db.begin_nested():
                return await user_repository.create(db, fields)
        except IntegrityError as exc:
            # 동시 가입이 먼저 커밋된 경우 — A concurrent registration took the e-mail
            if await user_repository.get_by_email(db, email) is None:
                raise
            logger.info("Duplicate e-mail on insert: %r", email)
            raise DuplicateError("A user with this email already exists") from exc


# 싱글턴 인스턴스 — Singleton instance
user_service: UserService = UserService()
