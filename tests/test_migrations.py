"""Alembic migrations produce the schema the ORM models describe."""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from friendlytime.db.session import Base

MIGRATIONS_DIR = Path(__file__).resolve().parents[1] / "migrations"


@pytest.fixture()
def alembic_config(tmp_path, monkeypatch) -> Config:
    monkeypatch.delenv("ALEMBIC_URL", raising=False)
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    cfg.set_main_option("sqlalchemy.url", url)
    return cfg


def _columns(inspector, table: str) -> dict[str, bool]:
    return {col["name"]: col["nullable"] for col in inspector.get_columns(table)}


def test_upgrade_head_matches_models(alembic_config) -> None:
    command.upgrade(alembic_config, "head")

    engine = create_engine(alembic_config.get_main_option("sqlalchemy.url"))
    try:
        inspector = inspect(engine)

        assert set(inspector.get_table_names()) - {"alembic_version"} == set(Base.metadata.tables)
        for name, table in Base.metadata.tables.items():
            assert _columns(inspector, name) == {col.name: col.nullable for col in table.columns}, name

        assert {ix["name"] for ix in inspector.get_indexes("messages")} == {"ix_messages_pair"}
        assert inspector.get_foreign_keys("messages") == []
        assert {fk["referred_table"] for fk in inspector.get_foreign_keys("bookings")} == {"users"}
        assert [uc["column_names"] for uc in inspector.get_unique_constraints("users")] == [["email"]]
        assert "ck_users_role" in {ck["name"] for ck in inspector.get_check_constraints("users")}
    finally:
        engine.dispose()


def test_downgrade_base_drops_everything(alembic_config) -> None:
    command.upgrade(alembic_config, "head")
    command.downgrade(alembic_config, "base")

    engine = create_engine(alembic_config.get_main_option("sqlalchemy.url"))
    try:
        assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    finally:
        engine.dispose()
