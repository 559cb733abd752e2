"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer (the persistence store).
Each data-access class extends BaseRepository for generic CRUD and adds
model-specific queries. Not to be confused with the Repository model,
which is the catalog entry being stored.
"""
