# app/core/database.py
import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import get_settings

settings = get_settings()

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


# SQLite leaves foreign keys off unless asked; owners and tutors must exist
@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_db(bind: Engine = engine) -> None:
    # Import the models so their tables are registered on Base
    from app.ticket import models as ticket_models  # noqa: F401
    from app.user import models as user_models  # noqa: F401

    Base.metadata.create_all(bind=bind)


# Request-scoped session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
