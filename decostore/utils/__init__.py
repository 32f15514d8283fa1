"""유틸리티 패키지 — 예외, 비밀번호 해싱, 로깅.

Utility package — Exceptions, password hashing and logging.
"""
