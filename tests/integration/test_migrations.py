# -*- coding: utf-8 -*-
"""
Integration тесты миграций Alembic
"""

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from reprova.config.settings import settings

ROOT = Path(__file__).resolve().parents[2]


class TestMigrations:
    """Миграции через асинхронный драйвер из DATABASE_URL"""

    def test_upgrade_head_with_async_url(self, tmp_path, monkeypatch):
        # Arrange
        db_path = tmp_path / "reprova.db"
        monkeypatch.setattr(
            settings, "database_url", f"sqlite+aiosqlite:///{db_path}"
        )
        config = Config()
        config.set_main_option("script_location", str(ROOT / "alembic"))

        # Act
        command.upgrade(config, "head")

        # Assert
        engine = create_engine(f"sqlite:///{db_path}")
        try:
            inspector = inspect(engine)
            assert "questions" in inspector.get_table_names()
            indexes = {ix["name"] for ix in inspector.get_indexes("questions")}
            assert {"ix_questions_theme", "ix_questions_pvt"} <= indexes
        finally:
            engine.dispose()
