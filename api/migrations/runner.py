"""
Run Alembic from inside the app.

`env.py` drives its own event loop with `asyncio.run`, so the upgrade is
pushed to a worker thread when called from the running server loop.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

from core import db
from core.config import Settings

logger = logging.getLogger(__name__)

SCRIPT_LOCATION = Path(__file__).resolve().parent


def alembic_config(settings: Settings) -> Config:
    config = Config()
    config.set_main_option("script_location", str(SCRIPT_LOCATION))
    # Passed as an attribute, not a main option, so "%" in passwords is not interpolated.
    config.attributes["database_url"] = db.database_url(settings)
    return config


def upgrade_head(settings: Settings) -> None:
    logger.info("migrations_upgrade target=head")
    command.upgrade(alembic_config(settings), "head")


async def run_pending(settings: Settings) -> None:
    await asyncio.to_thread(upgrade_head, settings)
