# easyshop/database.py
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from easyshop.core.config import get_settings

settings = get_settings()

# ---------------------------------------------------------
# Engine construction
#
# - SQLite (local dev / tests): allow use across the threadpool
#   FastAPI runs sync handlers in; in-memory databases share a
#   single connection through StaticPool.
# - Server databases: pooled connections, validated before use.
#   PostgreSQL URLs get sslmode=require when DB_SSL_REQUIRED is set.
# ---------------------------------------------------------

_MEMORY_URLS = {"sqlite://", "sqlite:///:memory:"}


def build_engine(db_url: str, echo: bool = False):
    """
    Create a SQLAlchemy engine suited to the given database URL.
    """
    if db_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if db_url in _MEMORY_URLS:
            kwargs["poolclass"] = StaticPool
        return create_engine(db_url, echo=echo, **kwargs)

    if db_url.startswith("postgresql") and settings.DB_SSL_REQUIRED:
        if "sslmode=" not in db_url:
            separator = "&" if "?" in db_url else "?"
            db_url = f"{db_url}{separator}sslmode=require"

    return create_engine(
        db_url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)


def create_db_and_tables() -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    SQLModel.metadata.create_all(engine)


def get_session():
    """
    FastAPI dependency that yields a SQLModel Session.

    The session is closed when the request finishes, whether the
    handler returned normally or raised.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
