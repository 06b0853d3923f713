import logging

from company_api.db.session import engine
from company_api.models import company  # noqa: F401
from company_api.models import user  # noqa: F401
from company_api.models.base import Base

logger = logging.getLogger(__name__)


def create_tables():
    """Create every mapped table that does not exist yet (dev and tests)."""
    Base.metadata.create_all(bind=engine)
    logger.info("database tables ensured: %s", ", ".join(sorted(Base.metadata.tables)))


def drop_tables():
    Base.metadata.drop_all(bind=engine)
