"""Database Infrastructure — SQLAlchemy declarative base and session factory.

Invariants:
    - Single async engine per DatabaseSessionManager
    - All sessions are async (AsyncSession)
"""
