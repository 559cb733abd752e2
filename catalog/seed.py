"""초기 데이터 시드 스크립트 — 데모 사용자와 레포지토리 생성.

Seed script — Creates a demo user and a couple of repositories.

Usage:
    python -m catalog.seed           # 시드 (Seed, idempotent)
    python -m catalog.seed --wipe    # 전체 삭제 후 시드 (Wipe everything, then seed)

Creates:
    - 1개 사용자: demo@example.com / demo123 (1 user)
    - 2개 레포지토리: "Starter Repository", "Examples" (2 repositories)
"""

import asyncio
import sys

from sqlalchemy import select

from catalog.database import async_session, init_models
from catalog.models import User
from catalog.schemas.repository import RepositoryCreate
from catalog.services.repository_service import repository_service
from catalog.services.user_service import user_service

DEMO_EMAIL = "demo@example.com"


async def seed(wipe: bool = False) -> None:
    """데이터베이스를 데모 데이터로 시드합니다.

    Seed the database with demo data, creating tables first.
    Idempotent: 데모 사용자가 이미 있으면 건너뜁니다 (Skips if the demo user exists).
    """
    await init_models()

    async with async_session() as db:
        if wipe:
            await repository_service.wipe_all(db)
            await db.commit()
            print("Catalog wiped.")

        result = await db.execute(select(User).where(User.email == DEMO_EMAIL))
        if result.scalar_one_or_none():
            print("Already seeded. Skipping.")
            return

        user: User = await user_service.create_user(db, "Demo User", DEMO_EMAIL, "demo123")
        for name, description in [
            ("Starter Repository", "Created by the seed script"),
            ("Examples", None),
        ]:
            await repository_service.create_new_repository(
                db, user.id, RepositoryCreate(name=name, description=description)
            )
        await db.commit()
        print(f"Seeded user {DEMO_EMAIL} with 2 repositories.")


if __name__ == "__main__":
    asyncio.run(seed(wipe="--wipe" in sys.argv[1:]))
