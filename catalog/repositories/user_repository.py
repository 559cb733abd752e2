"""사용자 레포지토리 — 사용자 CRUD 및 이메일 조회.

User Repository — CRUD and lookup-by-email for user accounts.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models.user import User
from catalog.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """users 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Data-access class for the users table.
    """

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> User | None:
        """이메일로 사용자를 조회합니다.

        Retrieve a user by e-mail address.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 조회할 이메일 (E-mail to look up)

        Returns:
            User | None: 조회된 사용자 또는 None (Found user or None)
        """
        query: Select = select(User).where(User.email == email)
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
