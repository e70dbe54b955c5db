# core/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Configurações da aplicação."""

    # Aplicação
    APP_NAME: str = "Gestão de Obras"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./gestao_obras.db"

    # Armazenamento de arquivos (uploads de comprovantes e notas)
    STORAGE_DIR: str = "data"
    STORAGE_PUBLIC_URL: str = "/api/objects/upload"

    # Empresa (cabeçalho dos PDFs)
    EMPRESA_NOME: str = "Vidraçaria"
    EMPRESA_TELEFONE: str = ""
    EMPRESA_EMAIL: str = ""

    # Cliente usado para projetos administrativos sem cliente
    CLIENTE_ADMINISTRATIVO_NOME: str = "Administrativo"

    # Pagamento de conta: True = no máximo uma transação espelhada por conta
    ESPELHAR_PAGAMENTO_UMA_VEZ: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Retorna instância cacheada das configurações."""
    return Settings()


settings = get_settings()
