# routers/projetos_router.py
from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session
from typing import List, Optional
from db import get_db

from services.projeto_service import (
    listar_projetos,
    buscar_projeto,
    criar_projeto,
    atualizar_projeto,
    atualizar_status_projeto,
    deletar_projeto,
)
from services.transacao_service import listar_transacoes
from services.arquivo_service import (
    listar_arquivos_projeto,
    criar_arquivo_projeto,
    deletar_arquivo_projeto,
)
from services.relatorio_service import gerar_relatorio_projeto_pdf
from schemas.projeto_schema import ProjetoCreate, ProjetoUpdate, ProjetoStatusUpdate, ProjetoOut
from schemas.transacao_schema import TransacaoOut
from schemas.arquivo_schema import ArquivoProjetoCreate, ArquivoProjetoOut
from schemas.comum import PADRAO_DATA

router = APIRouter(prefix="/projects", tags=["Projetos"])


def _obter_ou_404(db: Session, id: str):
    projeto = buscar_projeto(db, id)
    if not projeto:
        raise HTTPException(status_code=404, detail="Projeto não encontrado")
    return projeto


@router.get("", response_model=List[ProjetoOut])
def route_listar_projetos(db: Session = Depends(get_db)):
    return listar_projetos(db)


@router.get("/{id}", response_model=ProjetoOut)
def route_buscar_projeto(id: str, db: Session = Depends(get_db)):
    return _obter_ou_404(db, id)


@router.post("", response_model=ProjetoOut, status_code=201)
def route_criar_projeto(projeto: ProjetoCreate, db: Session = Depends(get_db)):
    return criar_projeto(db, projeto.model_dump())


@router.patch("/{id}", response_model=ProjetoOut)
def route_atualizar_projeto(id: str, projeto: ProjetoUpdate, db: Session = Depends(get_db)):
    updated = atualizar_projeto(db, id, projeto.model_dump(exclude_unset=True))
    if not updated:
        raise HTTPException(status_code=404, detail="Projeto não encontrado")
    return updated


@router.put("/{id}/status", response_model=ProjetoOut)
def route_atualizar_status(id: str, dados: ProjetoStatusUpdate, db: Session = Depends(get_db)):
    updated = atualizar_status_projeto(db, id, dados.status)
    if not updated:
        raise HTTPException(status_code=404, detail="Projeto não encontrado")
    return updated


@router.delete("/{id}", status_code=204)
def route_deletar_projeto(id: str, db: Session = Depends(get_db)):
    sucesso = deletar_projeto(db, id)
    if not sucesso:
        raise HTTPException(status_code=404, detail="Projeto não encontrado")
    return None


@router.get("/{id}/transactions", response_model=List[TransacaoOut])
def route_transacoes_do_projeto(id: str, db: Session = Depends(get_db)):
    return listar_transacoes(db, projeto_id=id)


# ============================================================
# ARQUIVOS DO PROJETO
# ============================================================

@router.get("/{id}/files", response_model=List[ArquivoProjetoOut])
def route_listar_arquivos(id: str, db: Session = Depends(get_db)):
    return listar_arquivos_projeto(db, id)


@router.post("/{id}/files", response_model=ArquivoProjetoOut, status_code=201)
def route_criar_arquivo(id: str, arquivo: ArquivoProjetoCreate, db: Session = Depends(get_db)):
    _obter_ou_404(db, id)
    return criar_arquivo_projeto(db, id, arquivo.model_dump())


@router.delete("/{id}/files/{arquivo_id}", status_code=204)
def route_deletar_arquivo(id: str, arquivo_id: str, db: Session = Depends(get_db)):
    sucesso = deletar_arquivo_projeto(db, arquivo_id)
    if not sucesso:
        raise HTTPException(status_code=404, detail="Arquivo não encontrado")
    return None


# ============================================================
# RELATÓRIO PDF
# ============================================================

@router.get("/{id}/report")
def route_relatorio_projeto(
    id: str,
    inicio: Optional[str] = Query(None, pattern=PADRAO_DATA, description="Data inicial (YYYY-MM-DD)"),
    fim: Optional[str] = Query(None, pattern=PADRAO_DATA, description="Data final (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
):
    projeto = _obter_ou_404(db, id)
    pdf = gerar_relatorio_projeto_pdf(
        projeto,
        transacoes=listar_transacoes(db, projeto_id=id),
        arquivos=listar_arquivos_projeto(db, id),
        periodo=(inicio, fim),
        cliente=projeto.cliente,
    )
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="relatorio-{projeto.id}.pdf"'},
    )
