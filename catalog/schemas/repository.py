"""레포지토리 관련 Pydantic 요청/응답 스키마 정의.

Repository Pydantic request/response schema definitions.
Covers creation, partial update, single response and list response.
Optional fields that are unset stay None and are omitted on serialization
by the routers (response_model_exclude_none), so callers never see null.
"""

from datetime import datetime
from pydantic import BaseModel


class RepositoryCreate(BaseModel):
    """레포지토리 생성 요청 스키마.

    Repository creation request schema.
    The owner is the authenticated user, never part of the body.
    Emptiness of name is checked by validate_repository_creation,
    not by pydantic, so the error body stays structured.

    Attributes:
        name: 레포지토리 이름 (Repository name, unique per owner)
        description: 설명 (Description, optional)
        version: 버전 (Version label, optional)
        taxonomy: 분류 태그 (Taxonomy tag, optional)
    """

    name: str  # 레포지토리 이름 (Repository name)
    description: str | None = None  # 설명 (Optional description)
    version: str | None = None  # 버전 — 고유성 제약 미포함 (Not part of the uniqueness rule)
    taxonomy: str | None = None  # 분류 — 고유성 제약 미포함 (Not part of the uniqueness rule)


class RepositoryUpdate(BaseModel):
    """레포지토리 수정 요청 스키마 (부분 업데이트)."""

    name: str | None = None
    description: str | None = None
    version: str | None = None
    taxonomy: str | None = None


class RepositoryResponse(BaseModel):
    """레포지토리 응답 스키마.

    Repository summary returned from the API and the catalog service.

    Attributes:
        id: 레포지토리 UUID (Repository identifier)
        owner: 소유자 UUID (Owner user identifier)
        name: 레포지토리 이름 (Repository name)
        description: 설명 (Description, omitted when unset)
        version: 버전 (Version label, omitted when unset)
        taxonomy: 분류 태그 (Taxonomy tag, omitted when unset)
        created_at: 생성 일시 (Creation timestamp)
    """

    id: str  # 레포지토리 UUID 문자열 (Repository UUID as string)
    owner: str  # 소유자 UUID 문자열 (Owner UUID as string)
    name: str
    description: str | None = None
    version: str | None = None
    taxonomy: str | None = None
    created_at: datetime | None = None


class RepositoryListResponse(BaseModel):
    """레포지토리 목록 응답 스키마.

    Repository list response. Order of entries is not significant.
    """

    repositories: list[RepositoryResponse] = []
