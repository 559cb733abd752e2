"""레포지토리 카탈로그 서비스 — 레포지토리 생성/조회/수정/삭제 비즈니스 로직.

Repository Catalog Service — Business logic for catalog repositories.
Enforces the rule that an owner's repository names are unique
(different owners may share a name). The pre-insert lookup rejects the
common case early; the (user_id, name) unique constraint, hit inside a
savepoint, rejects the concurrent case without touching the caller's
outer transaction.

Store errors (SQLAlchemyError) are never retried or wrapped: retrying a
create whose first attempt actually committed could break uniqueness.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models.repository import Repository
from catalog.repositories.catalog_repository import catalog_repository
from catalog.repositories.user_repository import user_repository
from catalog.schemas.repository import (
    RepositoryCreate,
    RepositoryListResponse,
    RepositoryResponse,
    RepositoryUpdate,
)
from catalog.utils.exceptions import InvalidRequestError, NameConflictError, NotFoundError
from catalog.utils.validation import (
    as_error_dicts,
    validate_repository_creation,
    validate_repository_update,
)

logger = logging.getLogger(__name__)


class RepositoryService:
    """레포지토리 관련 비즈니스 로직을 처리하는 서비스.

    Service handling catalog repository business logic.
    Holds no state between calls.
    """

    def _to_response(self, repository: Repository) -> RepositoryResponse:
        """레포지토리 모델을 응답 스키마로 변환합니다.

        Convert a Repository model instance to a RepositoryResponse schema.
        """
        return RepositoryResponse(
            id=str(repository.id),
            owner=str(repository.user_id),
            name=repository.name,
            description=repository.description,
            version=repository.version,
            taxonomy=repository.taxonomy,
            created_at=repository.created_at,
        )

    async def list_repositories(self, db: AsyncSession) -> RepositoryListResponse:
        """전체 레포지토리 목록을 조회합니다 (소유자 필터 없음).

        List every repository in the catalog, regardless of owner.
        An empty store yields an empty list, never an error.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            RepositoryListResponse: 레포지토리 목록 (Repository list)
        """
        repositories: list[Repository] = await catalog_repository.list_all(db)
        return RepositoryListResponse(
            repositories=[self._to_response(r) for r in repositories]
        )

    async def list_repositories_by_owner(
        self,
        db: AsyncSession,
        owner_id: UUID,
    ) -> RepositoryListResponse:
        """특정 소유자의 레포지토리 목록을 조회합니다.

        List the repositories of one owner. Unknown owners yield an empty list.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            owner_id: 소유자 UUID (Owner UUID)

        Returns:
            RepositoryListResponse: 레포지토리 목록 (Repository list)
        """
        repositories: list[Repository] = await catalog_repository.list_by_owner(db, owner_id)
        return RepositoryListResponse(
            repositories=[self._to_response(r) for r in repositories]
        )

    async def get_repository(
        self,
        db: AsyncSession,
        owner_id: UUID,
        repository_id: UUID,
    ) -> RepositoryResponse:
        """소유자 범위에서 단일 레포지토리를 조회합니다.

        Retrieve one repository of the given owner.

        Raises:
            NotFoundError: 없거나 다른 소유자의 레포지토리일 때
                           (Missing, or owned by someone else)
        """
        repository: Repository | None = await catalog_repository.get_by_id(
            db, repository_id, owner_id
        )
        if repository is None:
            raise NotFoundError("Repository not found")
        return self._to_response(repository)

    async def _insert_unique(
        self,
        db: AsyncSession,
        owner_id: UUID,
        fields: dict,
    ) -> Repository:
        # SAVEPOINT 안에서 INSERT — 제약 위반 시 이 INSERT만 롤백
        # Insert inside a savepoint so a constraint hit only undoes this insert
        try:
            async with db.begin_nested():
                return await catalog_repository.create(db, fields)
        except IntegrityError as exc:
            # 동시 생성이 먼저 커밋된 경우 — A concurrent creation won the race
            winner: Repository | None = await catalog_repository.find(
                db, owner_id=owner_id, name=fields["name"]
            )
            if winner is None:
                raise
            logger.info(
                "Repository name conflict on insert: owner=%s name=%r",
                owner_id,
                fields["name"],
            )
            raise NameConflictError() from exc

    async def create_new_repository(
        self,
        db: AsyncSession,
        owner_id: UUID,
        data: RepositoryCreate,
    ) -> RepositoryResponse:
        """새 레포지토리를 생성합니다.

        Create a new repository for the authenticated owner.

        Steps:
            1. 요청 검증 — 실패 시 저장소 호출 없음 (Validate; no store call on failure)
            2. 같은 소유자+이름 조회 — 있으면 충돌 (Look up owner+name; conflict if found)
            3. SAVEPOINT 안에서 INSERT (Insert inside a savepoint)
            4. 생성된 ID 포함 결과 반환 (Return the record with its generated id)

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            owner_id: 소유자 UUID, 인증 계층에서 확인됨 (Owner UUID, already authenticated)
            data: 레포지토리 생성 데이터 (Repository creation data)

        Returns:
            RepositoryResponse: 생성된 레포지토리 응답 (Created repository response)

        Raises:
            InvalidRequestError: 이름이 비었거나 소유자가 없을 때 (Empty name or missing owner)
            NameConflictError: 같은 소유자에게 같은 이름이 있을 때
                               (Owner already has a repository with this name)
        """
        errors = validate_repository_creation(owner_id, data)
        if errors:
            raise InvalidRequestError(as_error_dicts(errors))

        existing: Repository | None = await catalog_repository.find(
            db, owner_id=owner_id, name=data.name
        )
        if existing is not None:
            logger.info("Repository name conflict: owner=%s name=%r", owner_id, data.name)
            raise NameConflictError()

        repository: Repository = await self._insert_unique(
            db,
            owner_id,
            {
                "user_id": owner_id,
                "name": data.name,
                "version": data.version,
                "description": data.description,
                "taxonomy": data.taxonomy,
            },
        )
        logger.info(
            "Repository created: id=%s owner=%s name=%r",
            repository.id,
            owner_id,
            repository.name,
        )
        return self._to_response(repository)

    async def update_repository(
        self,
        db: AsyncSession,
        owner_id: UUID,
        repository_id: UUID,
        data: RepositoryUpdate,
    ) -> RepositoryResponse:
        """레포지토리 정보를 수정합니다. 이름 변경 시 고유성을 다시 확인.

        Partially update a repository of the given owner.
        A rename re-checks the per-owner name uniqueness rule.

        Raises:
            InvalidRequestError: 새 이름이 비었을 때 (Empty new name)
            NotFoundError: 레포지토리를 찾을 수 없을 때 (Repository not found)
            NameConflictError: 새 이름이 이미 사용 중일 때 (New name already used)
        """
        errors = validate_repository_update(data)
        if errors:
            raise InvalidRequestError(as_error_dicts(errors))

        repository: Repository | None = await catalog_repository.get_by_id(
            db, repository_id, owner_id
        )
        if repository is None:
            raise NotFoundError("Repository not found")

        update_data: dict = data.model_dump(exclude_unset=True)
        # 이름은 NULL 불가 — name is NOT NULL, an explicit null means "keep"
        if "name" in update_data and update_data["name"] is None:
            del update_data["name"]

        new_name: str | None = update_data.get("name")
        if new_name is not None and new_name != repository.name:
            taken: Repository | None = await catalog_repository.find(
                db, owner_id=owner_id, name=new_name
            )
            if taken is not None:
                raise NameConflictError()

        try:
            async with db.begin_nested():
                updated: Repository | None = await catalog_repository.update(
                    db, repository_id, update_data, owner_id
                )
        except IntegrityError as exc:
            if new_name is None:
                raise
            raise NameConflictError() from exc
        if updated is None:
            raise NotFoundError("Repository not found")
        return self._to_response(updated)

    async def delete_repository(
        self,
        db: AsyncSession,
        owner_id: UUID,
        repository_id: UUID,
    ) -> None:
        """레포지토리를 삭제합니다.

        Delete one repository of the given owner.

        Raises:
            NotFoundError: 레포지토리를 찾을 수 없을 때 (Repository not found)
        """
        deleted: bool = await catalog_repository.delete(db, repository_id, owner_id)
        if not deleted:
            raise NotFoundError("Repository not found")
        logger.info("Repository deleted: id=%s owner=%s", repository_id, owner_id)

    async def wipe_all(self, db: AsyncSession) -> None:
        """모든 레포지토리와 사용자를 삭제합니다 (테스트/관리용).

        Delete every repository, then every user.
        Dependents go first so no repository ever points at a missing owner.
        """
        repositories: int = await catalog_repository.delete_all(db)
        users: int = await user_repository.delete_all(db)
        logger.warning("Catalog wiped: repositories=%d users=%d", repositories, users)


# 싱글턴 인스턴스 — Singleton instance
repository_service: RepositoryService = RepositoryService()
