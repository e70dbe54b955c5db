# core/logging.py
import logging

from .config import settings

FORMATO = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configurar_logging(nivel: str | None = None) -> None:
    """Configura o logging raiz da aplicação (uma única vez)."""
    logging.basicConfig(
        level=getattr(logging, (nivel or settings.LOG_LEVEL).upper(), logging.INFO),
        format=FORMATO,
    )
    # SQL só aparece em DEBUG explícito
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
