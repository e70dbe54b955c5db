# services/conta_service.py
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from models.conta import Conta
from models.projeto import Projeto
from services.sincronizacao_service import (
    registrar_pagamento_conta,
    garantir_transacao_conta_paga,
)
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


def _validar_projeto(db: Session, projeto_id: Optional[str]) -> None:
    if projeto_id and not db.get(Projeto, projeto_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Projeto não encontrado")


def listar_contas(
    db: Session,
    tipo: Optional[str] = None,
    status_conta: Optional[str] = None,
    projeto_id: Optional[str] = None,
) -> List[Conta]:
    query = db.query(Conta)
    if tipo:
        query = query.filter(Conta.tipo == tipo)
    if status_conta:
        query = query.filter(Conta.status == status_conta)
    if projeto_id:
        query = query.filter(Conta.projeto_id == projeto_id)
    return query.order_by(Conta.created_at.desc()).all()


def buscar_conta(db: Session, id: str) -> Optional[Conta]:
    return db.query(Conta).filter(Conta.id == id).first()


def criar_conta(db: Session, dados: dict) -> Conta:
    _validar_projeto(db, dados.get("projeto_id"))
    db_conta = Conta(**dados)
    db.add(db_conta)
    db.commit()
    db.refresh(db_conta)
    return db_conta


def atualizar_conta(db: Session, id: str, dados: dict) -> Optional[Conta]:
    """
    Atualização parcial. Se a conta passar para "pago", a transação
    espelho é gerada depois que a atualização já foi gravada.
    """
    db_conta = buscar_conta(db, id)
    if not db_conta:
        return None

    if "projeto_id" in dados:
        _validar_projeto(db, dados["projeto_id"])

    status_anterior = db_conta.status
    for key, value in dados.items():
        setattr(db_conta, key, value)
    db.commit()
    db.refresh(db_conta)

    registrar_pagamento_conta(db, db_conta, status_anterior)
    return db_conta


def deletar_conta(db: Session, id: str) -> bool:
    db_conta = buscar_conta(db, id)
    if not db_conta:
        return False
    db.delete(db_conta)
    db.commit()
    return True


def garantir_transacao(db: Session, id: str):
    db_conta = buscar_conta(db, id)
    if not db_conta:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Conta não encontrada")
    return garantir_transacao_conta_paga(db, db_conta)
