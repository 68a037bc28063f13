from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="quizmaster-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR / 'quizmaster_test.db'}"
os.environ["JWT_SECRET_KEY"] = "test-jwt-secret"
os.environ["APPLY_MIGRATIONS_ON_STARTUP"] = "false"
os.environ.pop("JWT_AUDIENCE", None)
os.environ.pop("JWT_ISSUER", None)

from quizmaster.db.models.base import Base  # noqa: E402
from quizmaster.db.session import engine  # noqa: E402


@pytest.fixture(autouse=True)
async def fresh_schema() -> None:
    # Pooled aiosqlite connections are bound to the previous test's event loop.
    await engine.dispose()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield

    await engine.dispose()
