from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

BACKEND_DIR = Path(__file__).resolve().parents[1]


def make_config(url: str) -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(BACKEND_DIR / "alembic"))
    cfg.set_main_option("sqlalchemy.url", url)
    return cfg


def test_upgrade_creates_reward_tables(tmp_path):
    url = f"sqlite:///{tmp_path / 'rewards.db'}"
    cfg = make_config(url)

    command.upgrade(cfg, "head")

    insp = inspect(create_engine(url))
    tables = set(insp.get_table_names())
    assert {"piano_sessions", "weekly_awards", "tests", "incidents", "transactions"} <= tables

    uniques = insp.get_unique_constraints("weekly_awards")
    assert any(u["column_names"] == ["week_start"] for u in uniques)
    fks = insp.get_foreign_keys("weekly_awards")
    assert fks[0]["referred_table"] == "transactions"

    command.downgrade(cfg, "base")
    tables = set(inspect(create_engine(url)).get_table_names())
    assert "weekly_awards" not in tables
