from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker
from dotenv import load_dotenv
import logging
import uuid

load_dotenv()

from core.config import settings

logger = logging.getLogger(__name__)

# ============================================================
# CONFIGURAÇÃO DO SQLAlchemy
# ============================================================

DATABASE_URL = settings.DATABASE_URL


def _engine_kwargs(url: str) -> dict:
    """Parâmetros do engine conforme o banco (SQLite não usa pool de conexões)."""
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,  # Verifica conexão antes de usar
        "pool_size": 10,        # Pool de conexões
        "max_overflow": 20,     # Conexões extras quando necessário
    }


# Cria o engine do banco
engine = create_engine(DATABASE_URL, echo=False, **_engine_kwargs(DATABASE_URL))

# Cria a sessão
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base para os modelos
Base = declarative_base()


def gerar_id() -> str:
    """Chave primária padrão: UUID em texto."""
    return str(uuid.uuid4())


@event.listens_for(Engine, "connect")
def _habilitar_fk_sqlite(dbapi_connection, connection_record):
    """SQLite só respeita ON DELETE CASCADE / SET NULL com foreign_keys ligado."""
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# ============================================================
# DEPENDENCY INJECTION para FastAPI
# ============================================================

def get_db():
    """
    Cria uma sessão do banco de dados para cada requisição.
    Fecha automaticamente após o uso.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def criar_tabelas():
    """Cria as tabelas que ainda não existem (ambiente de desenvolvimento)."""
    import models  # noqa: F401  registra os modelos no metadata

    Base.metadata.create_all(bind=engine)


# ============================================================
# FUNÇÃO AUXILIAR PARA TESTAR CONEXÃO
# ============================================================

def test_connection():
    """Testa se a conexão com o banco está funcionando"""
    try:
        with engine.connect():
            logger.info("Conexão com o banco de dados OK")
            return True
    except Exception as e:
        logger.error(f"Erro ao conectar no banco: {e}")
        return False


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    test_connection()
