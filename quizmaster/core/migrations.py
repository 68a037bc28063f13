from __future__ import annotations

import asyncio
from pathlib import Path

import structlog
from alembic import command
from alembic.config import Config

from quizmaster.core.config import get_settings

logger = structlog.get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]
ALEMBIC_INI_PATH = PROJECT_ROOT / "alembic.ini"


def build_alembic_config(database_url: str) -> Config:
    config = Config(str(ALEMBIC_INI_PATH))
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", database_url)
    return config


def upgrade_to_head(database_url: str) -> None:
    command.upgrade(build_alembic_config(database_url), "head")


async def apply_migrations() -> None:
    database_url = get_settings().database_url
    logger.info("migrations_apply_started")
    # env.py drives its own event loop, so it cannot share the server's.
    await asyncio.to_thread(upgrade_to_head, database_url)
    logger.info("migrations_apply_finished")
