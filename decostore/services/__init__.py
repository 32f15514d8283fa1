"""서비스 패키지 — 스토어를 호출하는 상위 계층 헬퍼.

Service package — Calling-layer helpers over the repositories.
Services own the policies the store deliberately leaves out: password
hashing at registration, one representative image per post, and the
anti-spam threshold on sticker placement. They flush but never commit.
"""
