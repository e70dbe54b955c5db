# models/cliente.py
from sqlalchemy import Column, String, DateTime, text
from sqlalchemy.orm import relationship
from db import Base, gerar_id


class Cliente(Base):
    """Modelo de Cliente"""

    __tablename__ = "clientes"

    id = Column(String(36), primary_key=True, default=gerar_id)
    nome = Column(String(150), nullable=False)
    contato = Column(String(150), nullable=False)
    email = Column(String(150), nullable=True)
    telefone = Column(String(30), nullable=False)
    endereco = Column(String(255), nullable=True)
    cnpj_cpf = Column(String(20), nullable=True)

    # Preenchido apenas em clientes criados pelo sistema (ex: "administrativo")
    chave_sistema = Column(String(50), nullable=True, unique=True)

    created_at = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"), nullable=False)

    # ============================================================
    # RELACIONAMENTOS
    # ============================================================

    # 1 cliente → N projetos
    projetos = relationship(
        "Projeto",
        back_populates="cliente",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    # 1 cliente → N orçamentos
    orcamentos = relationship(
        "Orcamento",
        back_populates="cliente",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Cliente(id={self.id}, nome='{self.nome}')>"
