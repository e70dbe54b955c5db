from logging.config import fileConfig
from sqlalchemy import engine_from_config, pool
from alembic import context

# Os models precisam ser importados antes de ler Base.metadata
import models  # noqa: F401
from db import Base
from core.config import settings

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# URL vem sempre das configurações da aplicação (.env)
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

target_metadata = Base.metadata


def _opcoes_comuns(sqlite: bool) -> dict:
    """SQLite não suporta ALTER TABLE completo: migrações em modo batch."""
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "compare_server_default": True,
        "render_as_batch": sqlite,
    }


def run_migrations_offline() -> None:
    """Gera o SQL das migrações sem conectar no banco."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_opcoes_comuns(url.startswith("sqlite")),
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Aplica as migrações no banco configurado em DATABASE_URL."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            **_opcoes_comuns(connection.dialect.name == "sqlite"),
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
