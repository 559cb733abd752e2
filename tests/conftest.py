"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Every test gets a fresh engine (StaticPool keeps the single in-memory
connection alive), so no data leaks between tests.
"""

from collections.abc import AsyncGenerator
from uuid import UUID

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from catalog.database import Base, get_db
from catalog.main import app
from catalog.models import *  # noqa: F401,F403 — register all models with metadata
from catalog.models.repository import Repository
from catalog.models.user import User
from catalog.repositories.catalog_repository import catalog_repository
from catalog.repositories.user_repository import user_repository
from catalog.services.repository_service import repository_service
from catalog.utils.jwt import create_access_token
from catalog.utils.password import hash_password

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

USER1_ID = UUID("00000000-0000-0000-0000-000000000001")
USER2_ID = UUID("00000000-0000-0000-0000-000000000002")


def _enable_sqlite_savepoints(eng: AsyncEngine) -> None:
    """SQLite 드라이버가 SAVEPOINT를 올바르게 처리하도록 설정합니다.

    Let SQLAlchemy emit BEGIN itself so SAVEPOINT (begin_nested) works,
    and turn on foreign key enforcement to match PostgreSQL.
    """

    @event.listens_for(eng.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):  # noqa: ARG001
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(eng.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 스키마를 새로 만듭니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    _enable_sqlite_savepoints(eng)

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
class DbTestUtils:
    """테스트 작성을 돕는 DB 헬퍼 — 테스트마다 세션에 바인딩됩니다.

    Database helper for tests, bound to the per-test session.
    Writes go straight through the data-access layer, bypassing the
    catalog service, so tests can set up state the service would refuse.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.db: AsyncSession = session

    async def wipe_db(self) -> None:
        await repository_service.wipe_all(self.db)

    async def create_test_user(
        self,
        user_id: UUID,
        name: str,
        email: str,
        pw: str,
    ) -> User:
        """새 사용자를 생성합니다."""
        return await user_repository.create(
            self.db,
            {
                "id": user_id,
                "name": name,
                "email": email,
                "password_hash": hash_password(pw),
            },
        )

    async def create_test_repository(
        self,
        user_id: UUID,
        repo_name: str,
        version: str | None = None,
        description: str | None = None,
        taxonomy: str | None = None,
    ) -> Repository:
        """기존 사용자에게 새 레포지토리를 생성합니다."""
        return await catalog_repository.create(
            self.db,
            {
                "user_id": user_id,
                "name": repo_name,
                "version": version,
                "description": description,
                "taxonomy": taxonomy,
            },
        )


@pytest.fixture
def db_utils(db: AsyncSession) -> DbTestUtils:
    return DbTestUtils(db)


@pytest_asyncio.fixture
async def user1(db_utils: DbTestUtils) -> User:
    """첫 번째 테스트 사용자를 생성합니다."""
    return await db_utils.create_test_user(USER1_ID, "First User", "mail1@example.com", "pw1")


@pytest_asyncio.fixture
async def user2(db_utils: DbTestUtils) -> User:
    """두 번째 테스트 사용자를 생성합니다."""
    return await db_utils.create_test_user(USER2_ID, "Second User", "mail2@example.com", "pw2")


def make_token(user: User) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({"sub": str(user.id), "email": user.email})


@pytest.fixture
def user1_token(user1: User) -> str:
    return make_token(user1)


@pytest.fixture
def user2_token(user2: User) -> str:
    return make_token(user2)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
