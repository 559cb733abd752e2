"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the SQLAlchemy
metadata, which is required for table creation and relationship resolution.

Modules:
    user: 사용자 계정 (User accounts)
    repository: 사용자 소유 레포지토리 (User-owned catalog repositories)
"""

from catalog.models.user import User
from catalog.models.repository import Repository

__all__ = [
    "User",
    "Repository",
]
