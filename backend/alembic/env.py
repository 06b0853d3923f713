from logging.config import fileConfig
from sqlalchemy import create_engine, pool
from alembic import context
import logging
import sys
from pathlib import Path

# company_api lives next to this directory
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)
logger = logging.getLogger("alembic.env")

from company_api.core.config import settings  # noqa: E402
from company_api.db.session import normalize_database_url  # noqa: E402
from company_api.models.base import Base  # noqa: E402
from company_api.models import company, user  # noqa: F401,E402

target_metadata = Base.metadata


def _configure_and_run(**kwargs):
    context.configure(target_metadata=target_metadata, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations(url: str):
    """Migrate the database named by settings; alembic.ini sqlalchemy.url is ignored."""
    logger.info("running migrations against %s", url.rsplit("@", 1)[-1])
    if context.is_offline_mode():
        _configure_and_run(url=url, literal_binds=True, dialect_opts={"paramstyle": "named"})
        return
    engine = create_engine(url, poolclass=pool.NullPool)
    with engine.connect() as connection:
        _configure_and_run(connection=connection)


run_migrations(normalize_database_url(settings.database_url))
