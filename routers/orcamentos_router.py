# routers/orcamentos_router.py
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session
from typing import List
from db import get_db

from services.orcamento_service import (
    listar_orcamentos,
    buscar_orcamento,
    detalhar_orcamento,
    criar_orcamento,
    atualizar_orcamento,
    deletar_orcamento,
    listar_itens,
    criar_item,
    deletar_item,
)
from services.relatorio_service import gerar_orcamento_pdf
from schemas.orcamento_schema import (
    OrcamentoCreate,
    OrcamentoUpdate,
    OrcamentoOut,
    OrcamentoDetalhe,
    ItemOrcamentoCreate,
    ItemOrcamentoOut,
)

router = APIRouter(tags=["Orçamentos"])


def _obter_ou_404(db: Session, id: str):
    orcamento = buscar_orcamento(db, id)
    if not orcamento:
        raise HTTPException(status_code=404, detail="Orçamento não encontrado")
    return orcamento


@router.get("/quotes", response_model=List[OrcamentoOut])
def route_listar_orcamentos(db: Session = Depends(get_db)):
    return listar_orcamentos(db)


@router.get("/quotes/{id}", response_model=OrcamentoDetalhe)
def route_buscar_orcamento(id: str, db: Session = Depends(get_db)):
    return detalhar_orcamento(_obter_ou_404(db, id))


@router.post("/quotes", response_model=OrcamentoOut, status_code=201)
def route_criar_orcamento(orcamento: OrcamentoCreate, db: Session = Depends(get_db)):
    return criar_orcamento(db, orcamento.model_dump())


@router.patch("/quotes/{id}", response_model=OrcamentoOut)
def route_atualizar_orcamento(id: str, orcamento: OrcamentoUpdate, db: Session = Depends(get_db)):
    updated = atualizar_orcamento(db, id, orcamento.model_dump(exclude_unset=True))
    if not updated:
        raise HTTPException(status_code=404, detail="Orçamento não encontrado")
    return updated


@router.delete("/quotes/{id}", status_code=204)
def route_deletar_orcamento(id: str, db: Session = Depends(get_db)):
    sucesso = deletar_orcamento(db, id)
    if not sucesso:
        raise HTTPException(status_code=404, detail="Orçamento não encontrado")
    return None


@router.get("/quotes/{id}/items", response_model=List[ItemOrcamentoOut])
def route_listar_itens(id: str, db: Session = Depends(get_db)):
    _obter_ou_404(db, id)
    return listar_itens(db, id)


@router.get("/quotes/{id}/pdf")
def route_orcamento_pdf(id: str, db: Session = Depends(get_db)):
    orcamento = _obter_ou_404(db, id)
    pdf = gerar_orcamento_pdf(orcamento, orcamento.cliente, listar_itens(db, id))
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{orcamento.numero}.pdf"'},
    )


# ============================================================
# ITENS
# ============================================================

@router.post("/quote-items", response_model=ItemOrcamentoOut, status_code=201)
def route_criar_item(item: ItemOrcamentoCreate, db: Session = Depends(get_db)):
    return criar_item(db, item.model_dump())


@router.delete("/quote-items/{id}", status_code=204)
def route_deletar_item(id: str, db: Session = Depends(get_db)):
    sucesso = deletar_item(db, id)
    if not sucesso:
        raise HTTPException(status_code=404, detail="Item não encontrado")
    return None
