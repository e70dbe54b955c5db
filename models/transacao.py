# models/transacao.py
from sqlalchemy import Column, String, DateTime, ForeignKey, Numeric, text
from sqlalchemy.orm import relationship
from db import Base, gerar_id


class Transacao(Base):
    """Modelo de Transação financeira de um projeto"""

    __tablename__ = "transacoes"

    id = Column(String(36), primary_key=True, default=gerar_id)
    projeto_id = Column(
        String(36),
        ForeignKey("projetos.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tipo = Column(String(20), nullable=False)  # receita, despesa
    descricao = Column(String(255), nullable=False)
    valor = Column(Numeric(10, 2), nullable=False)
    data = Column(String(10), nullable=False)  # YYYY-MM-DD

    created_at = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"), nullable=False)

    projeto = relationship("Projeto", back_populates="transacoes")

    arquivos = relationship(
        "ArquivoTransacao",
        back_populates="transacao",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Transacao(id={self.id}, tipo='{self.tipo}', valor={self.valor})>"
