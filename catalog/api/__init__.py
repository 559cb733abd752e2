"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates all endpoints into a single router.

Included routers:
    - auth: 회원가입/로그인 (Registration and login)
    - repositories: 레포지토리 카탈로그 (Repository catalog)
"""

from fastapi import APIRouter

from catalog.api.auth import router as auth_router
from catalog.api.repositories import router as repositories_router

api_router: APIRouter = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["Auth"])
api_router.include_router(repositories_router, prefix="/repositories", tags=["Repositories"])
