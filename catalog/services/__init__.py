"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services are stateless singletons; every call receives the session to use.
"""
