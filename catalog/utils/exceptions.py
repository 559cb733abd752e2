"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns.
These simplify error raising across services and repositories by
eliminating the need to specify status codes at each call site.

Store failures (SQLAlchemyError) are never wrapped here; they propagate as-is.

Usage:
    from catalog.utils.exceptions import NotFoundError, NameConflictError
    raise NotFoundError("Repository not found")
    raise NameConflictError("A repository with this name already exists")
"""

from typing import Any

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource (user, repository) does not exist
    or is not visible to the acting owner.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    409 Conflict exception.
    Raised when attempting to create a resource that violates a uniqueness constraint
    (e.g. duplicate e-mail address).

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class NameConflictError(DuplicateError):
    """레포지토리 이름 충돌 예외 — 같은 소유자에게 같은 이름이 이미 있을 때.

    Raised when an owner already has a repository with the requested name.
    No record is written when this is raised.

    Args:
        detail: 오류 메시지 (Error message)
    """

    def __init__(self, detail: str = "A repository with this name already exists") -> None:
        super().__init__(detail=detail)


class InvalidRequestError(HTTPException):
    """422 예외 — 요청 데이터가 사전 조건을 만족하지 않을 때 사용.

    422 Unprocessable Entity exception with a structured detail body:
    {"message": "...", "errors": [{"field": "...", "message": "..."}]}

    Args:
        errors: 필드별 오류 목록 (Per-field error entries)
        message: 요약 메시지 (Summary message)
    """

    def __init__(
        self,
        errors: list[dict[str, Any]],
        message: str = "Invalid request",
    ) -> None:
        self.errors: list[dict[str, Any]] = errors
        super().__init__(
            status_code=422,
            detail={"message": message, "errors": errors},
        )


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    401 Unauthorized exception.
    Raised when authentication is missing, invalid, or expired
    (e.g. missing JWT token, expired token, invalid credentials).

    Args:
        detail: 오류 메시지 (Error message, default: "Authentication required")
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)
