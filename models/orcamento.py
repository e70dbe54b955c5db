# models/orcamento.py
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Numeric, text
from sqlalchemy.orm import relationship
from db import Base, gerar_id


class Orcamento(Base):
    """Modelo de Orçamento"""

    __tablename__ = "orcamentos"

    id = Column(String(36), primary_key=True, default=gerar_id)
    cliente_id = Column(
        String(36),
        ForeignKey("clientes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    numero = Column(String(30), nullable=False, index=True)  # Ex: ORC-2025-001
    status = Column(String(20), nullable=False, default="pendente")  # pendente, aprovado, recusado
    validade = Column(String(10), nullable=False)
    local = Column(String(150), nullable=True)  # LOCAL/AMBIENTE
    tipo = Column(String(50), nullable=True)
    desconto = Column(Numeric(5, 2), nullable=False, default=0)  # percentual: 10.50 = 10,5%
    observacoes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"), nullable=False)

    cliente = relationship("Cliente", back_populates="orcamentos")

    itens = relationship(
        "ItemOrcamento",
        back_populates="orcamento",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Orcamento(id={self.id}, numero='{self.numero}')>"


class ItemOrcamento(Base):
    """Item (linha) de um orçamento"""

    __tablename__ = "itens_orcamento"

    id = Column(String(36), primary_key=True, default=gerar_id)
    orcamento_id = Column(
        String(36),
        ForeignKey("orcamentos.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    descricao = Column(String(255), nullable=False)
    quantidade = Column(Numeric(10, 2), nullable=False)
    largura = Column(Numeric(10, 2), nullable=True)
    altura = Column(Numeric(10, 2), nullable=True)
    cor_espessura = Column(String(100), nullable=True)
    cor_perfil = Column(String(100), nullable=True)
    cor_acessorio = Column(String(100), nullable=True)
    linha = Column(String(100), nullable=True)
    data_entrega = Column(String(10), nullable=True)
    observacoes = Column(Text, nullable=True)
    preco_unitario = Column(Numeric(10, 2), nullable=False)
    total = Column(Numeric(10, 2), nullable=False)
    imagem_url = Column(String(500), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"), nullable=False)

    orcamento = relationship("Orcamento", back_populates="itens")

    def __repr__(self):
        return f"<ItemOrcamento(id={self.id}, descricao='{self.descricao}', total={self.total})>"
