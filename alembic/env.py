from alembic import context

from parking_violations.db.database import DeclarativeBase, init_database
from parking_violations.models import plate_watch, user  # noqa: F401

target_metadata = DeclarativeBase.metadata


def run_migrations_online():
    with init_database().engine.connect() as connection:
        context.configure(connection=connection,
                          target_metadata=target_metadata)

        with context.begin_transaction():
            context.run_migrations()


run_migrations_online()
