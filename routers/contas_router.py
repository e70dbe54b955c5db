# routers/contas_router.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from db import get_db

from services.conta_service import (
    listar_contas,
    buscar_conta,
    criar_conta,
    atualizar_conta,
    deletar_conta,
    garantir_transacao,
)
from schemas.conta_schema import (
    ContaCreate,
    ContaUpdate,
    ContaOut,
    GarantirTransacaoOut,
    StatusConta,
    TipoConta,
)

router = APIRouter(prefix="/bills", tags=["Contas"])


@router.get("", response_model=List[ContaOut])
def route_listar_contas(
    tipo: Optional[TipoConta] = None,
    status: Optional[StatusConta] = None,
    projeto_id: Optional[str] = Query(None, alias="projectId"),
    db: Session = Depends(get_db),
):
    return listar_contas(
        db,
        tipo=tipo.value if tipo else None,
        status_conta=status.value if status else None,
        projeto_id=projeto_id,
    )


@router.get("/{id}", response_model=ContaOut)
def route_buscar_conta(id: str, db: Session = Depends(get_db)):
    conta = buscar_conta(db, id)
    if not conta:
        raise HTTPException(status_code=404, detail="Conta não encontrada")
    return conta


@router.post("", response_model=ContaOut, status_code=201)
def route_criar_conta(conta: ContaCreate, db: Session = Depends(get_db)):
    return criar_conta(db, conta.model_dump())


@router.patch("/{id}", response_model=ContaOut)
def route_atualizar_conta(id: str, conta: ContaUpdate, db: Session = Depends(get_db)):
    updated = atualizar_conta(db, id, conta.model_dump(exclude_unset=True))
    if not updated:
        raise HTTPException(status_code=404, detail="Conta não encontrada")
    return updated


@router.delete("/{id}", status_code=204)
def route_deletar_conta(id: str, db: Session = Depends(get_db)):
    sucesso = deletar_conta(db, id)
    if not sucesso:
        raise HTTPException(status_code=404, detail="Conta não encontrada")
    return None


@router.post("/{id}/ensure-transaction", response_model=GarantirTransacaoOut)
def route_garantir_transacao(id: str, db: Session = Depends(get_db)):
    """
    Garante que a conta paga tenha sua transação espelho.
    Chamadas repetidas retornam a mesma transação sem criar outra.
    """
    transacao, criada = garantir_transacao(db, id)
    return {"criada": criada, "transacao": transacao}
