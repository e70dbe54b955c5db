# models/arquivo.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, text
from sqlalchemy.orm import relationship
from db import Base, gerar_id


class ArquivoProjeto(Base):
    """Arquivo anexado a um projeto (metadados + caminho no storage)"""

    __tablename__ = "arquivos_projeto"

    id = Column(String(36), primary_key=True, default=gerar_id)
    projeto_id = Column(
        String(36),
        ForeignKey("projetos.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    nome_arquivo = Column(String(255), nullable=False)
    tipo_arquivo = Column(String(100), nullable=False)
    tamanho = Column(Integer, nullable=False)
    categoria = Column(String(50), nullable=False)  # comprovante, nota_fiscal_recebida, nota_fiscal_emitida
    object_path = Column(String(500), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"), nullable=False)

    projeto = relationship("Projeto", back_populates="arquivos")

    def __repr__(self):
        return f"<ArquivoProjeto(id={self.id}, nome='{self.nome_arquivo}')>"


class ArquivoTransacao(Base):
    """Comprovante anexado a uma transação"""

    __tablename__ = "arquivos_transacao"

    id = Column(String(36), primary_key=True, default=gerar_id)
    transacao_id = Column(
        String(36),
        ForeignKey("transacoes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    nome_arquivo = Column(String(255), nullable=False)
    tipo_arquivo = Column(String(100), nullable=False)
    tamanho = Column(Integer, nullable=False)
    object_path = Column(String(500), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"), nullable=False)

    transacao = relationship("Transacao", back_populates="arquivos")

    def __repr__(self):
        return f"<ArquivoTransacao(id={self.id}, nome='{self.nome_arquivo}')>"
