# services/transacao_service.py
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from models.projeto import Projeto
from models.transacao import Transacao
from models.arquivo import ArquivoTransacao
from services.file_storage_service import FileStorageService
from services.sincronizacao_service import sincronizar_por_id
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


def listar_transacoes(db: Session, projeto_id: Optional[str] = None) -> List[Transacao]:
    query = db.query(Transacao)
    if projeto_id:
        query = query.filter(Transacao.projeto_id == projeto_id)
    return query.order_by(Transacao.created_at.desc()).all()


def buscar_transacao(db: Session, id: str) -> Optional[Transacao]:
    return db.query(Transacao).filter(Transacao.id == id).first()


def criar_transacao(db: Session, dados: dict) -> Transacao:
    if not db.get(Projeto, dados["projeto_id"]):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Projeto não encontrado")

    db_transacao = Transacao(**dados)
    db.add(db_transacao)
    db.commit()
    db.refresh(db_transacao)

    sincronizar_por_id(db, db_transacao.projeto_id)
    return db_transacao


def atualizar_transacao(db: Session, id: str, dados: dict) -> Optional[Transacao]:
    db_transacao = buscar_transacao(db, id)
    if not db_transacao:
        return None
    logger.debug(f"Atualizando transação {id}: {dados}")

    for key, value in dados.items():
        setattr(db_transacao, key, value)
    db.commit()
    db.refresh(db_transacao)

    sincronizar_por_id(db, db_transacao.projeto_id)
    return db_transacao


def deletar_transacao(db: Session, id: str) -> bool:
    db_transacao = buscar_transacao(db, id)
    if not db_transacao:
        return False
    projeto_id = db_transacao.projeto_id
    db.delete(db_transacao)
    db.commit()

    sincronizar_por_id(db, projeto_id)
    return True


# ============================================================
# ARQUIVOS DE TRANSAÇÃO (comprovantes)
# ============================================================

def listar_arquivos_transacoes(db: Session, projeto_id: str) -> List[ArquivoTransacao]:
    return db.query(ArquivoTransacao).join(
        Transacao, ArquivoTransacao.transacao_id == Transacao.id
    ).filter(
        Transacao.projeto_id == projeto_id
    ).order_by(ArquivoTransacao.created_at.desc()).all()


def criar_arquivo_transacao(db: Session, dados: dict) -> ArquivoTransacao:
    if not buscar_transacao(db, dados["transacao_id"]):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transação não encontrada")
    db_arquivo = ArquivoTransacao(**dados)
    db.add(db_arquivo)
    db.commit()
    db.refresh(db_arquivo)
    return db_arquivo


def deletar_arquivo_transacao(db: Session, id: str) -> bool:
    db_arquivo = db.query(ArquivoTransacao).filter(ArquivoTransacao.id == id).first()
    if not db_arquivo:
        return False
    object_path = db_arquivo.object_path
    db.delete(db_arquivo)
    db.commit()
    FileStorageService().remover(object_path)
    return True
