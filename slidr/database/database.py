from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from ..config import DATABASE_URL, SQL_ECHO


def is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ignore les clés étrangères tant que le PRAGMA n'est pas activé"""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Paramètre nécessaire pour SQLite uniquement
connect_args = {"check_same_thread": False} if is_sqlite(DATABASE_URL) else {}

engine = create_engine(
    DATABASE_URL,
    echo=SQL_ECHO,
    future=True,
    connect_args=connect_args,
)
if is_sqlite(DATABASE_URL):
    enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
Base = declarative_base()


def create_tables(bind: Engine = engine) -> None:
    # Les modèles doivent être importés pour être enregistrés dans Base.metadata
    from ..models import project, user  # noqa: F401

    Base.metadata.create_all(bind=bind)


# Dependency pour FastAPI
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
