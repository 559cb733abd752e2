"""요청 검증 유틸리티 모듈.

Request validation utility module.
Boundary checks that run before any catalog operation touches the store.
Each validator returns a list of field errors; an empty list means valid.

Usage:
    errors = validate_repository_creation(owner_id, data)
    if errors:
        raise InvalidRequestError(errors)
"""

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from catalog.config import settings
from catalog.schemas.repository import RepositoryCreate, RepositoryUpdate


class FieldError(BaseModel):
    """필드 단위 검증 오류.

    Single field validation failure.

    Attributes:
        field: 오류가 난 필드 이름 (Offending field name)
        message: 사람이 읽을 수 있는 사유 (Human readable reason)
    """

    field: str
    message: str


def _check_name(name: str | None, errors: list[FieldError]) -> None:
    # None은 "변경 없음" — 호출자가 필수 여부를 판단 (None means "not supplied")
    if name is None:
        return
    if not name.strip():
        errors.append(FieldError(field="name", message="Name must not be empty"))
    elif len(name) > settings.REPOSITORY_NAME_MAX_LENGTH:
        errors.append(
            FieldError(
                field="name",
                message=f"Name must be at most {settings.REPOSITORY_NAME_MAX_LENGTH} characters",
            )
        )


def validate_repository_creation(
    owner_id: UUID | None,
    data: RepositoryCreate | None,
) -> list[FieldError]:
    """레포지토리 생성 요청을 검증합니다.

    Validate a repository creation request.
    Checks that an owner is present, the payload exists, and the name
    is non-empty and within the column length.

    Args:
        owner_id: 소유자 UUID (Acting owner identifier)
        data: 생성 요청 데이터 (Creation request)

    Returns:
        list[FieldError]: 오류 목록, 비어 있으면 유효 (Errors; empty when valid)
    """
    errors: list[FieldError] = []
    if owner_id is None:
        errors.append(FieldError(field="owner", message="Owner is required"))
    if data is None:
        errors.append(FieldError(field="body", message="Request body is required"))
        return errors
    _check_name(data.name, errors)
    return errors


def validate_repository_update(data: RepositoryUpdate) -> list[FieldError]:
    """레포지토리 수정 요청을 검증합니다. 이름이 주어진 경우에만 이름을 검사.

    Validate a partial update; the name is checked only when supplied.
    """
    errors: list[FieldError] = []
    _check_name(data.name, errors)
    return errors


def as_error_dicts(errors: list[FieldError]) -> list[dict[str, Any]]:
    """검증 오류를 예외 상세용 딕셔너리로 변환합니다.

    Convert field errors into plain dicts for an exception detail body.
    """
    return [e.model_dump() for e in errors]
