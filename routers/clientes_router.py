# routers/clientes_router.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from db import get_db

from services.cliente_service import (
    listar_clientes,
    buscar_cliente,
    criar_cliente,
    atualizar_cliente,
    deletar_cliente,
)
from services.projeto_service import listar_projetos_do_cliente
from services.orcamento_service import listar_orcamentos
from schemas.cliente_schema import ClienteCreate, ClienteUpdate, ClienteOut
from schemas.projeto_schema import ProjetoOut
from schemas.orcamento_schema import OrcamentoOut

router = APIRouter(prefix="/clients", tags=["Clientes"])


@router.get("", response_model=List[ClienteOut])
def route_listar_clientes(db: Session = Depends(get_db)):
    return listar_clientes(db)


@router.get("/{id}", response_model=ClienteOut)
def route_buscar_cliente(id: str, db: Session = Depends(get_db)):
    cliente = buscar_cliente(db, id)
    if not cliente:
        raise HTTPException(status_code=404, detail="Cliente não encontrado")
    return cliente


@router.get("/{id}/projects", response_model=List[ProjetoOut])
def route_projetos_do_cliente(id: str, db: Session = Depends(get_db)):
    return listar_projetos_do_cliente(db, id)


@router.get("/{id}/quotes", response_model=List[OrcamentoOut])
def route_orcamentos_do_cliente(id: str, db: Session = Depends(get_db)):
    return listar_orcamentos(db, cliente_id=id)


@router.post("", response_model=ClienteOut, status_code=201)
def route_criar_cliente(cliente: ClienteCreate, db: Session = Depends(get_db)):
    return criar_cliente(db, cliente.model_dump())


@router.patch("/{id}", response_model=ClienteOut)
def route_atualizar_cliente(id: str, cliente: ClienteUpdate, db: Session = Depends(get_db)):
    updated = atualizar_cliente(db, id, cliente.model_dump(exclude_unset=True))
    if not updated:
        raise HTTPException(status_code=404, detail="Cliente não encontrado")
    return updated


@router.delete("/{id}", status_code=204)
def route_deletar_cliente(id: str, db: Session = Depends(get_db)):
    sucesso = deletar_cliente(db, id)
    if not sucesso:
        raise HTTPException(status_code=404, detail="Cliente não encontrado")
    return None
