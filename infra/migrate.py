from pathlib import Path
from alembic import command
from alembic.config import Config

# project root (infra -> project root) holds the 'migration' folder
_MIGRATION_DIR = Path(__file__).resolve().parents[1] / "migration"


def run_migrations(db_url: str) -> None:
    if not _MIGRATION_DIR.exists():
        raise RuntimeError(f"Alembic script_location missing: {_MIGRATION_DIR}")

    alembic_ini = _MIGRATION_DIR / "alembic.ini"
    if not alembic_ini.exists():
        raise RuntimeError(f"Alembic config missing: {alembic_ini}")

    cfg = Config(str(alembic_ini))
    cfg.set_main_option("script_location", str(_MIGRATION_DIR))
    cfg.set_main_option("sqlalchemy.url", db_url)

    command.upgrade(cfg, "head")
