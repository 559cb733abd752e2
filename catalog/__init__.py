"""레포지토리 카탈로그 서버 패키지.

Repository Catalog Server package.
Multi-tenant catalog of user-owned repository records.
"""
