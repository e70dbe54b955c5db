# models/projeto.py
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Numeric, text
from sqlalchemy.orm import relationship
from db import Base, gerar_id


class Projeto(Base):
    """Modelo de Projeto (obra)"""

    __tablename__ = "projetos"

    id = Column(String(36), primary_key=True, default=gerar_id)
    nome = Column(String(150), nullable=False)
    cliente_id = Column(
        String(36),
        ForeignKey("clientes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    descricao = Column(Text, nullable=True)
    valor = Column(Numeric(10, 2), nullable=False)
    tipo = Column(String(30), nullable=False)  # vidro, espelho, reparo, administrativo
    status = Column(String(20), nullable=False, default="orcamento", index=True)
    data = Column(String(10), nullable=False)  # YYYY-MM-DD

    created_at = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"), nullable=False)

    # ============================================================
    # RELACIONAMENTOS
    # ============================================================

    cliente = relationship("Cliente", back_populates="projetos")

    # 1 projeto → N transações (cascade no banco)
    transacoes = relationship(
        "Transacao",
        back_populates="projeto",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    # 1 projeto → N arquivos
    arquivos = relationship(
        "ArquivoProjeto",
        back_populates="projeto",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    # Contas sobrevivem à exclusão do projeto (projeto_id vira NULL)
    contas = relationship("Conta", back_populates="projeto")

    def __repr__(self):
        return f"<Projeto(id={self.id}, nome='{self.nome}', status='{self.status}')>"
