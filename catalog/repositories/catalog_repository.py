"""카탈로그 레포지토리 — Repository 모델 CRUD 및 소유자 범위 쿼리.

Catalog Repository — CRUD and owner-scoped queries for the Repository model.
Extends BaseRepository with lookups by (owner, name), which back the
per-owner name uniqueness rule.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models.repository import Repository
from catalog.repositories.base import BaseRepository


class CatalogRepository(BaseRepository[Repository]):
    """repositories 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Data-access class for the repositories table.
    """

    def __init__(self) -> None:
        super().__init__(Repository)

    async def find(
        self,
        db: AsyncSession,
        owner_id: UUID | None = None,
        name: str | None = None,
    ) -> Repository | None:
        """소유자/이름 조건으로 첫 번째 레포지토리를 조회합니다.

        Return the first repository matching the optional owner and name filters.
        With both filters set at most one row can match (unique constraint).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            owner_id: 소유자 UUID 필터 (Owner filter, optional)
            name: 이름 필터 (Name filter, optional)

        Returns:
            Repository | None: 일치하는 레코드 또는 None (Matching record or None)
        """
        query: Select = select(Repository)
        if owner_id is not None:
            query = query.where(Repository.user_id == owner_id)
        if name is not None:
            query = query.where(Repository.name == name)
        result = await db.execute(query.limit(1))
        return result.scalars().first()

    async def list_all(self, db: AsyncSession) -> list[Repository]:
        """모든 레포지토리를 조회합니다.

        Retrieve every repository. Ordered by creation time for stable
        output; callers must not rely on the order.
        """
        rows = await self.get_all(db, order_by=Repository.created_at)
        return list(rows)

    async def list_by_owner(
        self,
        db: AsyncSession,
        owner_id: UUID,
    ) -> list[Repository]:
        """소유자의 레포지토리 목록을 조회합니다.

        Retrieve all repositories belonging to one owner.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            owner_id: 소유자 UUID (Owner UUID)

        Returns:
            list[Repository]: 레포지토리 목록 (List of repositories)
        """
        rows = await self.get_all(db, owner_id=owner_id, order_by=Repository.created_at)
        return list(rows)


# 싱글턴 인스턴스 — Singleton instance
catalog_repository: CatalogRepository = CatalogRepository()
