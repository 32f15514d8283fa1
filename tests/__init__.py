"""데코레이션 스토어 테스트 패키지 (Decoration store test package)."""
