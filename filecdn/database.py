import logging
import threading
from contextlib import contextmanager

import sqlalchemy as sa
from sqlalchemy import StaticPool, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base, Session

from filecdn.config import get_settings
from filecdn.errors import Internal

logger = logging.getLogger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Catalog:
    # one connection, one lock: at most one catalog operation in flight.
    # The lock is not reentrant, never open a session inside another.

    def __init__(self, url: str):
        connect_args = {}
        if url.startswith("sqlite"):
            connect_args["check_same_thread"] = False

        self.url = url
        self.engine = sa.create_engine(url, connect_args=connect_args, poolclass=StaticPool)
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self._lock = threading.Lock()
        self._sessionmaker = sessionmaker(bind=self.engine, autocommit=False, autoflush=False,
                                          expire_on_commit=False)

    def create_tables(self):
        # models must be imported so their tables are registered on Base.metadata
        from filecdn.models import auth_token_model, file_model, user_model  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self):
        Base.metadata.drop_all(bind=self.engine)

    def locked(self) -> bool:
        return self._lock.locked()

    @contextmanager
    def session(self):
        with self._lock:
            db: Session = self._sessionmaker()
            try:
                yield db
                db.commit()
            except SQLAlchemyError as error:
                db.rollback()
                logger.exception("Catalog operation failed")
                raise Internal("Catalog operation failed") from error
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    def dispose(self):
        self.engine.dispose()


catalog = Catalog(get_settings().database_url)


def get_catalog() -> Catalog:
    return catalog
