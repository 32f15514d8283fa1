"""Pydantic 스키마 패키지 — 저장 전 입력 검증.

Pydantic schema package — Input validation before persistence.
"""
