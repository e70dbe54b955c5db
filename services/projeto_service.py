# services/projeto_service.py
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from models.projeto import Projeto
from schemas.projeto_schema import TIPO_ADMINISTRATIVO
from services.cliente_service import buscar_cliente, obter_ou_criar_cliente_administrativo
from services.sincronizacao_service import sincronizar_contas_projeto
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


def listar_projetos(db: Session) -> List[Projeto]:
    return db.query(Projeto).order_by(Projeto.created_at.desc()).all()


def listar_projetos_do_cliente(db: Session, cliente_id: str) -> List[Projeto]:
    return db.query(Projeto).filter(
        Projeto.cliente_id == cliente_id
    ).order_by(Projeto.created_at.desc()).all()


def buscar_projeto(db: Session, id: str) -> Optional[Projeto]:
    return db.query(Projeto).filter(Projeto.id == id).first()


def _resolver_cliente(db: Session, dados: dict) -> str:
    cliente_id = dados.get("cliente_id")
    if not cliente_id:
        if dados.get("tipo") == TIPO_ADMINISTRATIVO:
            return obter_ou_criar_cliente_administrativo(db).id
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="cliente_id é obrigatório")
    if not buscar_cliente(db, cliente_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cliente não encontrado")
    return cliente_id


def criar_projeto(db: Session, dados: dict) -> Projeto:
    dados["cliente_id"] = _resolver_cliente(db, dados)

    db_projeto = Projeto(**dados)
    db.add(db_projeto)
    db.commit()
    db.refresh(db_projeto)
    logger.info(f"Projeto criado: {db_projeto.id} ({db_projeto.nome})")

    sincronizar_contas_projeto(db, db_projeto)
    return db_projeto


def atualizar_projeto(db: Session, id: str, dados: dict) -> Optional[Projeto]:
    db_projeto = buscar_projeto(db, id)
    if not db_projeto:
        return None

    if "cliente_id" in dados:
        if dados["cliente_id"] is None:
            dados.pop("cliente_id")
        elif not buscar_cliente(db, dados["cliente_id"]):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cliente não encontrado")

    for key, value in dados.items():
        setattr(db_projeto, key, value)
    db.commit()
    db.refresh(db_projeto)

    sincronizar_contas_projeto(db, db_projeto)
    return db_projeto


def atualizar_status_projeto(db: Session, id: str, novo_status: str) -> Optional[Projeto]:
    """Altera apenas o status; o saldo é ressincronizado como em qualquer edição."""
    return atualizar_projeto(db, id, {"status": novo_status})


def deletar_projeto(db: Session, id: str) -> bool:
    db_projeto = buscar_projeto(db, id)
    if not db_projeto:
        return False
    db.delete(db_projeto)
    db.commit()
    logger.info(f"Projeto removido: {id}")
    return True
