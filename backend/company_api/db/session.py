from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
import importlib.util
from company_api.core.config import settings


def normalize_database_url(url: str) -> str:
    """Point plain Postgres URLs at the psycopg (v3) driver when psycopg2 is absent.

    SQLAlchemy loads psycopg2 for 'postgresql://' by default; only 'psycopg'
    (dependency: psycopg[binary]) is installed, so the driver is injected.
    """
    try:
        psycopg2_present = importlib.util.find_spec("psycopg2") is not None  # type: ignore
    except ValueError:  # pragma: no cover
        psycopg2_present = False

    # Normalize legacy prefix 'postgres://' -> 'postgresql://'
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    if not psycopg2_present and url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


SQLALCHEMY_DATABASE_URL = normalize_database_url(settings.database_url)

connect_args = {}
if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    # Sessions are handed across the server's worker threads
    connect_args["check_same_thread"] = False

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
