# routers/transacoes_router.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from db import get_db

from services.transacao_service import (
    listar_transacoes,
    buscar_transacao,
    criar_transacao,
    atualizar_transacao,
    deletar_transacao,
    listar_arquivos_transacoes,
    criar_arquivo_transacao,
    deletar_arquivo_transacao,
)
from schemas.transacao_schema import TransacaoCreate, TransacaoUpdate, TransacaoOut
from schemas.arquivo_schema import ArquivoTransacaoCreate, ArquivoTransacaoOut

router = APIRouter(prefix="/transactions", tags=["Transações"])


@router.get("", response_model=List[TransacaoOut])
def route_listar_transacoes(
    projeto_id: Optional[str] = Query(None, alias="projectId"),
    db: Session = Depends(get_db),
):
    return listar_transacoes(db, projeto_id)


# ============================================================
# COMPROVANTES (antes de /{id} para não colidir com a rota)
# ============================================================

@router.get("/files", response_model=List[ArquivoTransacaoOut])
def route_listar_arquivos(projeto_id: str = Query(..., alias="projectId"), db: Session = Depends(get_db)):
    return listar_arquivos_transacoes(db, projeto_id)


@router.post("/files", response_model=ArquivoTransacaoOut, status_code=201)
def route_criar_arquivo(arquivo: ArquivoTransacaoCreate, db: Session = Depends(get_db)):
    return criar_arquivo_transacao(db, arquivo.model_dump())


@router.delete("/files/{id}", status_code=204)
def route_deletar_arquivo(id: str, db: Session = Depends(get_db)):
    sucesso = deletar_arquivo_transacao(db, id)
    if not sucesso:
        raise HTTPException(status_code=404, detail="Arquivo não encontrado")
    return None


@router.get("/{id}", response_model=TransacaoOut)
def route_buscar_transacao(id: str, db: Session = Depends(get_db)):
    transacao = buscar_transacao(db, id)
    if not transacao:
        raise HTTPException(status_code=404, detail="Transação não encontrada")
    return transacao


@router.post("", response_model=TransacaoOut, status_code=201)
def route_criar_transacao(transacao: TransacaoCreate, db: Session = Depends(get_db)):
    return criar_transacao(db, transacao.model_dump())


@router.patch("/{id}", response_model=TransacaoOut)
def route_atualizar_transacao(id: str, transacao: TransacaoUpdate, db: Session = Depends(get_db)):
    updated = atualizar_transacao(db, id, transacao.model_dump(exclude_unset=True))
    if not updated:
        raise HTTPException(status_code=404, detail="Transação não encontrada")
    return updated


@router.delete("/{id}", status_code=204)
def route_deletar_transacao(id: str, db: Session = Depends(get_db)):
    sucesso = deletar_transacao(db, id)
    if not sucesso:
        raise HTTPException(status_code=404, detail="Transação não encontrada")
    return None
