"""Pytest configuration and fixtures."""

import os
from decimal import Decimal

# Configura o ambiente antes de importar settings/db
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401  registra as tabelas no metadata
from core.config import settings
from db import Base, get_db
from main import app
from models import Cliente, Projeto, Transacao, Conta


@pytest.fixture
def engine():
    """Banco SQLite em memória, recriado a cada teste."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory, tmp_path, monkeypatch):
    """TestClient com get_db apontando para o banco em memória."""
    monkeypatch.setattr(settings, "STORAGE_DIR", str(tmp_path))

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ============================================================
# DADOS DE EXEMPLO
# ============================================================

@pytest.fixture
def cliente(db_session):
    cliente = Cliente(nome="Construtora Alfa", contato="Marina", telefone="11999990000")
    db_session.add(cliente)
    db_session.commit()
    return cliente


@pytest.fixture
def projeto(db_session, cliente):
    """Projeto de R$ 1000,00 sem transações e sem conta."""
    projeto = Projeto(
        nome="Box banheiro",
        cliente_id=cliente.id,
        valor=Decimal("1000.00"),
        tipo="vidro",
        status="aprovado",
        data="2026-11-10",
    )
    db_session.add(projeto)
    db_session.commit()
    return projeto


@pytest.fixture
def add_transacao(db_session):
    def _add(projeto, valor, tipo="receita", descricao="Entrada", data="2026-10-01"):
        transacao = Transacao(
            projeto_id=projeto.id, tipo=tipo, descricao=descricao, valor=Decimal(valor), data=data
        )
        db_session.add(transacao)
        db_session.commit()
        return transacao
    return _add


@pytest.fixture
def add_conta(db_session):
    def _add(projeto=None, tipo="receber", valor="100.00", status="pendente", descricao="Conta avulsa"):
        conta = Conta(
            tipo=tipo,
            descricao=descricao,
            valor=Decimal(valor),
            data_vencimento="2026-12-01",
            status=status,
            projeto_id=projeto.id if projeto else None,
            data="2026-10-19",
        )
        db_session.add(conta)
        db_session.commit()
        return conta
    return _add


@pytest.fixture
def cliente_api(client):
    """Cliente criado pela API; retorna o JSON."""
    response = client.post("/api/clients", json={
        "nome": "Maria Souza",
        "contato": "Maria",
        "telefone": "11988887777",
        "email": "maria@example.com",
    })
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def criar_projeto_api(client, cliente_api):
    def _criar(valor="1000.00", **extra):
        payload = {
            "nome": "Espelho sala",
            "cliente_id": cliente_api["id"],
            "valor": valor,
            "tipo": "espelho",
            "data": "2026-11-30",
        }
        payload.update(extra)
        response = client.post("/api/projects", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _criar
