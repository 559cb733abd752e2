"""레포지토리 SQLAlchemy ORM 모델 정의.

Repository SQLAlchemy ORM model definition.
A repository here is a named catalog entry owned by exactly one user;
it has nothing to do with source control.

Tables:
    - repositories: 사용자 소유 카탈로그 항목 (User-owned catalog entries)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Text, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database import Base


class Repository(Base):
    """레포지토리 모델 — 사용자 소유의 이름 있는 카탈로그 항목.

    Repository model — Named catalog entry owned by a single user.
    The name is unique among the repositories of the same owner only;
    different owners may reuse a name.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier, store-generated)
        user_id: 소유자 FK (Owner foreign key)
        name: 레포지토리 이름 (Repository name, unique per owner)
        version: 버전 (Version label, optional)
        description: 설명 (Description, optional)
        taxonomy: 분류 태그 (Taxonomy tag, optional)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        user: 소유자 (Owner)

    Constraints:
        uq_repository_owner_name: 소유자 내 이름 고유 (Unique name per owner)
    """

    __tablename__ = "repositories"

    # 레포지토리 고유 식별자 — Repository unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소유자 FK — Owner (CASCADE: 사용자 삭제 시 레포지토리도 삭제)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    # 레포지토리 이름 — Repository name
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 버전 — Version label (optional, 고유성 제약에 포함되지 않음)
    version: Mapped[str | None] = mapped_column(String(100), nullable=True)
    # 설명 — Free-text description (optional)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    # 분류 — Taxonomy tag (optional, 고유성 제약에 포함되지 않음)
    taxonomy: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_repository_owner_name"),
    )

    # 관계 — Relationships
    user = relationship("User", back_populates="repositories")
