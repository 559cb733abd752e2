"""레포지토리 라우터 — 카탈로그 레포지토리 엔드포인트.

Repository Router — Catalog repository endpoints.
Listing covers the whole catalog; creation and single-record operations
act on behalf of the authenticated owner. Unset optional fields are
omitted from responses (response_model_exclude_none).
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.deps import get_current_user
from catalog.database import get_db
from catalog.models.user import User
from catalog.schemas.repository import (
    RepositoryCreate,
    RepositoryListResponse,
    RepositoryResponse,
    RepositoryUpdate,
)
from catalog.services.repository_service import repository_service

router: APIRouter = APIRouter()


@router.get("", response_model=RepositoryListResponse, response_model_exclude_none=True)
async def list_repositories(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> RepositoryListResponse:
    """전체 레포지토리 목록을 조회합니다.

    List every repository in the catalog.
    """
    return await repository_service.list_repositories(db)


@router.get("/mine", response_model=RepositoryListResponse, response_model_exclude_none=True)
async def list_my_repositories(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> RepositoryListResponse:
    """현재 사용자가 소유한 레포지토리 목록을 조회합니다."""
    return await repository_service.list_repositories_by_owner(db, current_user.id)


@router.post("", response_model=RepositoryResponse, response_model_exclude_none=True, status_code=201)
async def create_repository(
    data: RepositoryCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> RepositoryResponse:
    """새 레포지토리를 생성합니다. 같은 소유자 내 이름 중복 시 409.

    Create a repository owned by the current user. 409 on a name conflict.
    """
    result: RepositoryResponse = await repository_service.create_new_repository(
        db, current_user.id, data
    )
    await db.commit()
    return result


@router.get("/{repository_id}", response_model=RepositoryResponse, response_model_exclude_none=True)
async def get_repository(
    repository_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> RepositoryResponse:
    """현재 사용자의 레포지토리 상세를 조회합니다."""
    return await repository_service.get_repository(db, current_user.id, repository_id)


@router.put("/{repository_id}", response_model=RepositoryResponse, response_model_exclude_none=True)
async def update_repository(
    repository_id: UUID,
    data: RepositoryUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> RepositoryResponse:
    """레포지토리를 수정합니다. 이름 변경 시 중복 확인.

    Update a repository of the current user; renames are re-checked.
    """
    result: RepositoryResponse = await repository_service.update_repository(
        db, current_user.id, repository_id, data
    )
    await db.commit()
    return result


@router.delete("/{repository_id}", status_code=204)
async def delete_repository(
    repository_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> None:
    """레포지토리를 삭제합니다."""
    await repository_service.delete_repository(db, current_user.id, repository_id)
    await db.commit()
