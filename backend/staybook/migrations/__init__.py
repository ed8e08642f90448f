"""Alembic migration infrastructure for Staybook.

Provides programmatic Alembic configuration — no alembic.ini needed.
The migration scripts live alongside this module::

    python -c "from staybook.migrations import upgrade_head; upgrade_head()"
"""

from __future__ import annotations

from pathlib import Path

from alembic.config import Config


def build_config(db_url: str) -> Config:
    """Build an Alembic Config pointing at our migration scripts."""
    cfg = Config()
    cfg.set_main_option("script_location", str(Path(__file__).parent))
    cfg.set_main_option("sqlalchemy.url", db_url)
    return cfg


def upgrade_head(db_url: str | None = None) -> None:
    """Apply all migrations; defaults to the configured application database."""
    from alembic import command

    if db_url is None:
        from staybook.config import settings

        db_url = settings.async_database_url
    command.upgrade(build_config(db_url), "head")
