# models/conta.py
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Numeric, Index, text
from sqlalchemy.orm import relationship
from db import Base, gerar_id


class Conta(Base):
    """Modelo de Conta a pagar / a receber"""

    __tablename__ = "contas"
    __table_args__ = (
        # No máximo uma conta de saldo automática por projeto
        Index(
            "ux_contas_saldo_automatico_projeto",
            "projeto_id",
            unique=True,
            sqlite_where=text("saldo_automatico = 1"),
            postgresql_where=text("saldo_automatico = true"),
        ),
    )

    id = Column(String(36), primary_key=True, default=gerar_id)
    tipo = Column(String(20), nullable=False, index=True)  # pagar, receber
    descricao = Column(String(255), nullable=False)
    valor = Column(Numeric(10, 2), nullable=False)
    data_vencimento = Column(String(10), nullable=False)
    status = Column(String(20), nullable=False, default="pendente", index=True)  # pendente, pago, atrasado
    projeto_id = Column(
        String(36),
        ForeignKey("projetos.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    data = Column(String(10), nullable=False)  # data de emissão
    saldo_automatico = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"), nullable=False)

    projeto = relationship("Projeto", back_populates="contas")

    def __repr__(self):
        return f"<Conta(id={self.id}, tipo='{self.tipo}', status='{self.status}', valor={self.valor})>"
