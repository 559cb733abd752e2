"""레포지토리 카탈로그 서비스 테스트.

Repository Catalog Service tests — listing, creation and the per-owner
name uniqueness rule, exercised directly against the service layer.
"""

from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.repositories.catalog_repository import catalog_repository
from catalog.schemas.repository import RepositoryCreate, RepositoryUpdate
from catalog.services.repository_service import repository_service
from catalog.utils.exceptions import InvalidRequestError, NameConflictError, NotFoundError


def _summary(entry) -> tuple[str, str, str, str | None]:
    return (entry.owner, entry.id, entry.name, entry.description)


class TestListRepositories:
    """레포지토리 목록 조회 테스트."""

    async def test_no_existing_repositories_empty_list(self, db: AsyncSession):
        """레포지토리가 없으면 빈 목록."""
        result = await repository_service.list_repositories(db)
        assert result.repositories == []

    async def test_single_repository_in_list(self, db: AsyncSession, db_utils, user1):
        """레포지토리 1개 — 목록에 포함."""
        repository = await db_utils.create_test_repository(user1.id, "A repository")

        result = await repository_service.list_repositories(db)

        assert len(result.repositories) == 1
        entry = result.repositories[0]
        assert entry.owner == str(user1.id)
        assert entry.id == str(repository.id)
        assert entry.name == "A repository"
        assert entry.description is None

    async def test_repositories_of_different_users(self, db: AsyncSession, db_utils, user1, user2):
        """서로 다른 사용자의 레포지토리 — 모두 목록에 포함 (순서 무관)."""
        repo1 = await db_utils.create_test_repository(user1.id, "First Repository")
        repo2 = await db_utils.create_test_repository(user2.id, "Second Repository", description="Second")

        result = await repository_service.list_repositories(db)

        assert {_summary(e) for e in result.repositories} == {
            (str(user1.id), str(repo1.id), "First Repository", None),
            (str(user2.id), str(repo2.id), "Second Repository", "Second"),
        }

    async def test_list_by_owner_filters(self, db: AsyncSession, db_utils, user1, user2):
        """소유자별 목록은 해당 소유자의 레포지토리만 포함."""
        await db_utils.create_test_repository(user1.id, "Mine")
        await db_utils.create_test_repository(user2.id, "Theirs")

        result = await repository_service.list_repositories_by_owner(db, user1.id)

        assert [e.name for e in result.repositories] == ["Mine"]

    async def test_list_by_unknown_owner_is_empty(self, db: AsyncSession, db_utils, user1):
        await db_utils.create_test_repository(user1.id, "Mine")
        result = await repository_service.list_repositories_by_owner(db, uuid4())
        assert result.repositories == []


class TestCreateRepository:
    """레포지토리 생성 테스트."""

    async def test_create_first_repository(self, db: AsyncSession, user1):
        """첫 레포지토리 생성 — 목록에 새 레코드만 존재."""
        data = RepositoryCreate(name="First repository", description="A description")

        created = await repository_service.create_new_repository(db, user1.id, data)

        listing = await repository_service.list_repositories(db)
        assert len(listing.repositories) == 1
        entry = listing.repositories[0]
        assert entry.id == created.id
        assert entry.owner == str(user1.id)
        assert entry.name == "First repository"
        assert entry.description == "A description"

    async def test_create_without_description(self, db: AsyncSession, user1):
        """설명 없이 생성 — description은 비어 있음."""
        created = await repository_service.create_new_repository(
            db, user1.id, RepositoryCreate(name="Bare")
        )
        assert created.description is None
        assert created.id

    async def test_create_with_extension_fields(self, db: AsyncSession, user1):
        """version/taxonomy 확장 필드 저장."""
        created = await repository_service.create_new_repository(
            db, user1.id, RepositoryCreate(name="Tagged", version="1.0", taxonomy="math")
        )
        assert created.version == "1.0"
        assert created.taxonomy == "math"

    async def test_name_conflict_same_owner(self, db: AsyncSession, db_utils, user1):
        """같은 소유자가 같은 이름으로 생성 시 실패, 목록 불변."""
        original = await db_utils.create_test_repository(user1.id, "First Repository")

        with pytest.raises(NameConflictError) as exc_info:
            await repository_service.create_new_repository(
                db, user1.id, RepositoryCreate(name="First Repository", description="A new description")
            )
        assert exc_info.value.status_code == 409

        listing = await repository_service.list_repositories(db)
        assert len(listing.repositories) == 1
        assert listing.repositories[0].id == str(original.id)
        assert listing.repositories[0].description is None

    async def test_conflict_ignores_version_and_taxonomy(self, db: AsyncSession, db_utils, user1):
        """version/taxonomy가 달라도 이름이 같으면 충돌."""
        await db_utils.create_test_repository(user1.id, "Same", version="1.0", taxonomy="a")
        with pytest.raises(NameConflictError):
            await repository_service.create_new_repository(
                db, user1.id, RepositoryCreate(name="Same", version="2.0", taxonomy="b")
            )

    async def test_other_owner_may_reuse_name(self, db: AsyncSession, db_utils, user1, user2):
        """다른 사용자는 사용 중인 이름으로 생성 가능."""
        repo1 = await db_utils.create_test_repository(user1.id, "First Repository", description="A description")

        created = await repository_service.create_new_repository(
            db, user2.id, RepositoryCreate(name="First Repository", description="A description")
        )

        listing = await repository_service.list_repositories(db)
        assert {_summary(e) for e in listing.repositories} == {
            (str(user1.id), str(repo1.id), "First Repository", "A description"),
            (str(user2.id), created.id, "First Repository", "A description"),
        }

    async def test_concurrent_insert_conflict_leaves_store_unchanged(
        self, db: AsyncSession, db_utils, user1, monkeypatch
    ):
        """사전 조회를 통과한 동시 생성도 제약으로 거부, 외부 트랜잭션 유지."""
        await db_utils.create_test_repository(user1.id, "Raced")
        real_find = catalog_repository.find
        calls: list[str | None] = []

        async def _stale_find(session, owner_id=None, name=None):
            calls.append(name)
            # 첫 조회는 경쟁 상대의 INSERT 이전 상태를 흉내냄
            if len(calls) == 1:
                return None
            return await real_find(session, owner_id=owner_id, name=name)

        monkeypatch.setattr(catalog_repository, "find", _stale_find)

        with pytest.raises(NameConflictError):
            await repository_service.create_new_repository(
                db, user1.id, RepositoryCreate(name="Raced")
            )

        assert len(calls) == 2
        listing = await repository_service.list_repositories(db)
        assert [e.name for e in listing.repositories] == ["Raced"]
        # 세션은 계속 사용 가능 — outer transaction survived the savepoint rollback
        again = await repository_service.create_new_repository(
            db, user1.id, RepositoryCreate(name="Other")
        )
        assert again.name == "Other"

    @pytest.mark.parametrize("name", ["", "   "])
    async def test_empty_name_rejected(self, db: AsyncSession, user1, name):
        """빈 이름은 저장소 호출 전에 거부."""
        with pytest.raises(InvalidRequestError) as exc_info:
            await repository_service.create_new_repository(db, user1.id, RepositoryCreate(name=name))
        assert exc_info.value.status_code == 422
        assert exc_info.value.errors[0]["field"] == "name"
        listing = await repository_service.list_repositories(db)
        assert listing.repositories == []

    async def test_missing_owner_rejected(self, db: AsyncSession):
        with pytest.raises(InvalidRequestError) as exc_info:
            await repository_service.create_new_repository(db, None, RepositoryCreate(name="x"))
        assert [e["field"] for e in exc_info.value.errors] == ["owner"]


class TestOwnerScopedOperations:
    """소유자 범위 조회/수정/삭제 테스트."""

    async def test_get_repository(self, db: AsyncSession, db_utils, user1):
        repo = await db_utils.create_test_repository(user1.id, "Mine", description="d")
        result = await repository_service.get_repository(db, user1.id, repo.id)
        assert result.name == "Mine"
        assert result.description == "d"

    async def test_get_repository_of_other_owner_not_found(self, db: AsyncSession, db_utils, user1, user2):
        repo = await db_utils.create_test_repository(user1.id, "Mine")
        with pytest.raises(NotFoundError):
            await repository_service.get_repository(db, user2.id, repo.id)

    async def test_update_description(self, db: AsyncSession, db_utils, user1):
        repo = await db_utils.create_test_repository(user1.id, "Mine")
        result = await repository_service.update_repository(
            db, user1.id, repo.id, RepositoryUpdate(description="new")
        )
        assert result.name == "Mine"
        assert result.description == "new"

    async def test_rename(self, db: AsyncSession, db_utils, user1):
        repo = await db_utils.create_test_repository(user1.id, "Old")
        result = await repository_service.update_repository(
            db, user1.id, repo.id, RepositoryUpdate(name="New")
        )
        assert result.name == "New"

    async def test_rename_to_same_name_allowed(self, db: AsyncSession, db_utils, user1):
        """자기 자신의 이름으로 변경은 충돌 아님."""
        repo = await db_utils.create_test_repository(user1.id, "Same")
        result = await repository_service.update_repository(
            db, user1.id, repo.id, RepositoryUpdate(name="Same", taxonomy="t")
        )
        assert result.taxonomy == "t"

    async def test_rename_conflict(self, db: AsyncSession, db_utils, user1):
        """이름 변경 시 같은 소유자의 기존 이름과 충돌하면 실패."""
        await db_utils.create_test_repository(user1.id, "Taken")
        repo = await db_utils.create_test_repository(user1.id, "Free")
        with pytest.raises(NameConflictError):
            await repository_service.update_repository(
                db, user1.id, repo.id, RepositoryUpdate(name="Taken")
            )
        unchanged = await repository_service.get_repository(db, user1.id, repo.id)
        assert unchanged.name == "Free"

    async def test_rename_conflict_caught_by_constraint(
        self, db: AsyncSession, db_utils, user1, monkeypatch
    ):
        """사전 조회를 통과한 이름 변경도 제약으로 거부, 기존 이름 유지."""
        await db_utils.create_test_repository(user1.id, "Taken")
        repo = await db_utils.create_test_repository(user1.id, "Free")
        # SAVEPOINT 롤백 후 인스턴스가 만료되므로 ID를 미리 읽어둠
        repo_id = repo.id

        async def _stale_find(session, owner_id=None, name=None):
            return None

        monkeypatch.setattr(catalog_repository, "find", _stale_find)

        with pytest.raises(NameConflictError):
            await repository_service.update_repository(
                db, user1.id, repo_id, RepositoryUpdate(name="Taken")
            )

        monkeypatch.undo()
        unchanged = await repository_service.get_repository(db, user1.id, repo_id)
        assert unchanged.name == "Free"
        listing = await repository_service.list_repositories_by_owner(db, user1.id)
        assert sorted(e.name for e in listing.repositories) == ["Free", "Taken"]

    async def test_rename_to_name_used_by_other_owner(self, db: AsyncSession, db_utils, user1, user2):
        await db_utils.create_test_repository(user2.id, "Shared")
        repo = await db_utils.create_test_repository(user1.id, "Mine")
        result = await repository_service.update_repository(
            db, user1.id, repo.id, RepositoryUpdate(name="Shared")
        )
        assert result.name == "Shared"

    async def test_rename_to_empty_rejected(self, db: AsyncSession, db_utils, user1):
        repo = await db_utils.create_test_repository(user1.id, "Mine")
        with pytest.raises(InvalidRequestError):
            await repository_service.update_repository(
                db, user1.id, repo.id, RepositoryUpdate(name=" ")
            )

    async def test_update_missing_not_found(self, db: AsyncSession, user1):
        with pytest.raises(NotFoundError):
            await repository_service.update_repository(
                db, user1.id, uuid4(), RepositoryUpdate(description="x")
            )

    async def test_delete_repository(self, db: AsyncSession, db_utils, user1):
        repo = await db_utils.create_test_repository(user1.id, "Gone")
        await repository_service.delete_repository(db, user1.id, repo.id)
        listing = await repository_service.list_repositories(db)
        assert listing.repositories == []

    async def test_delete_other_owners_repository_not_found(self, db: AsyncSession, db_utils, user1, user2):
        repo = await db_utils.create_test_repository(user1.id, "Kept")
        with pytest.raises(NotFoundError):
            await repository_service.delete_repository(db, user2.id, repo.id)
        listing = await repository_service.list_repositories(db)
        assert len(listing.repositories) == 1

    async def test_name_reusable_after_delete(self, db: AsyncSession, db_utils, user1):
        repo = await db_utils.create_test_repository(user1.id, "Again")
        await repository_service.delete_repository(db, user1.id, repo.id)
        created = await repository_service.create_new_repository(
            db, user1.id, RepositoryCreate(name="Again")
        )
        assert created.name == "Again"


class TestWipeAll:
    """전체 삭제 테스트."""

    async def test_wipe_removes_repositories_and_users(self, db: AsyncSession, db_utils, user1, user2):
        await db_utils.create_test_repository(user1.id, "One")
        await db_utils.create_test_repository(user2.id, "Two")

        await db_utils.wipe_db()

        listing = await repository_service.list_repositories(db)
        assert listing.repositories == []
        from catalog.repositories.user_repository import user_repository
        assert list(await user_repository.get_all(db)) == []
