import os
from logging.config import fileConfig

import taskboard.models  # noqa: F401  registers all models on Base.metadata
from alembic import context
from taskboard.core.database import Base, engine
from taskboard.core.migrations import make_revision_hook

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# revision ids follow YYYY_MM_DD_NNN, counted per day in this directory
process_revision_directives = make_revision_hook(
    os.path.join(os.path.dirname(__file__), "versions")
)


def run_migrations_offline() -> None:
    """Emit the migration SQL for the settings URL without connecting."""
    context.configure(
        url=engine.url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        process_revision_directives=process_revision_directives,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations through the application engine.

    sqlalchemy.url in alembic.ini is a placeholder; taskboard settings own the URL.
    SQLite gets batch mode because it cannot ALTER most column definitions.
    """
    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
            compare_type=True,
            process_revision_directives=process_revision_directives,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
