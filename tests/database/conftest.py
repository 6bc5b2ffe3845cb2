# tests/database/conftest.py
from __future__ import annotations

import pytest
from sqlalchemy.orm import Session


@pytest.fixture()
def db(session_factory) -> Session:
    """Per-test session on the shared test engine. Rows are cleared by `session_factory`."""
    session = session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
