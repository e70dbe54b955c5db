# services/arquivo_service.py
from sqlalchemy.orm import Session
from models.arquivo import ArquivoProjeto
from services.file_storage_service import FileStorageService
from typing import List


def listar_arquivos_projeto(db: Session, projeto_id: str) -> List[ArquivoProjeto]:
    return db.query(ArquivoProjeto).filter(
        ArquivoProjeto.projeto_id == projeto_id
    ).order_by(ArquivoProjeto.created_at.desc()).all()


def criar_arquivo_projeto(db: Session, projeto_id: str, dados: dict) -> ArquivoProjeto:
    db_arquivo = ArquivoProjeto(projeto_id=projeto_id, **dados)
    db.add(db_arquivo)
    db.commit()
    db.refresh(db_arquivo)
    return db_arquivo


def deletar_arquivo_projeto(db: Session, id: str) -> bool:
    db_arquivo = db.query(ArquivoProjeto).filter(ArquivoProjeto.id == id).first()
    if not db_arquivo:
        return False
    object_path = db_arquivo.object_path
    db.delete(db_arquivo)
    db.commit()
    FileStorageService().remover(object_path)
    return True
