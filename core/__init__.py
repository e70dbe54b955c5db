# core/__init__.py
from .config import settings, get_settings
from .logging import configurar_logging

__all__ = [
    "settings",
    "get_settings",
    "configurar_logging",
]
