from typing import NamedTuple

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, scoped_session, sessionmaker
from sqlalchemy.orm.query import Query
from sqlalchemy.pool import StaticPool

from parking_violations import settings

_DB_CONN_CACHE = None


class DatabaseConnection(NamedTuple):
    engine: Engine
    session: scoped_session


def _create_engine(database_url: str) -> Engine:
    """Creates an engine wrapping the configured db.
    :return: an engine around the db.
    """
    if database_url.startswith('sqlite'):
        # a single shared connection keeps an in-memory db alive
        return create_engine(
            database_url,
            connect_args={'check_same_thread': False},
            poolclass=StaticPool)

    return create_engine(database_url, pool_pre_ping=True)


def _create_scoped_session(engine: Engine) -> scoped_session:
    """Returns a scoped_session to the db connected to the given
    engine.
    :param engine: an engine connected to the target db.
    :return: a scoped_session to the db connected to the engine.
    """
    return scoped_session(
        sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=engine,
            expire_on_commit=False))


def init_database() -> DatabaseConnection:
    global _DB_CONN_CACHE  # pylint: disable=global-statement
    if not _DB_CONN_CACHE:
        engine = _create_engine(settings.DATABASE_URL)
        session = _create_scoped_session(engine=engine)
        db = DatabaseConnection(engine=engine, session=session)
        _DB_CONN_CACHE = db

    return _DB_CONN_CACHE


def init_schema() -> None:
    """Create any missing tables. Deployed databases are migrated with
    alembic instead.
    """
    # model modules register their tables on import
    from parking_violations.models import plate_watch, user  # noqa: F401

    DeclarativeBase.metadata.create_all(bind=init_database().engine)


def drop_schema() -> None:
    DeclarativeBase.metadata.drop_all(bind=init_database().engine)


DeclarativeBase = declarative_base()
DeclarativeBase.query: Query = init_database().session.query_property()
