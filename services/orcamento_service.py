# services/orcamento_service.py
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Tuple
import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from models.cliente import Cliente
from models.orcamento import Orcamento, ItemOrcamento

logger = logging.getLogger(__name__)

CENTAVOS = Decimal("0.01")


def _arredondar(valor: Decimal) -> Decimal:
    return Decimal(str(valor)).quantize(CENTAVOS, rounding=ROUND_HALF_UP)


def calcular_totais(orcamento: Orcamento, itens: List[ItemOrcamento]) -> Tuple[Decimal, Decimal]:
    """
    Retorna (subtotal, total) do orçamento.

    subtotal = soma de quantidade x preço unitário dos itens
    total = subtotal - desconto percentual
    """
    subtotal = sum(
        (Decimal(str(i.quantidade)) * Decimal(str(i.preco_unitario)) for i in itens),
        Decimal("0"),
    )
    desconto = Decimal(str(orcamento.desconto or 0))
    total = subtotal - subtotal * desconto / Decimal("100")
    return _arredondar(subtotal), _arredondar(total)


def gerar_numero_orcamento(db: Session, ano: Optional[int] = None) -> str:
    """Próximo número sequencial do ano no formato ORC-AAAA-NNN."""
    ano = ano or date.today().year
    prefixo = f"ORC-{ano}-"
    numeros = db.query(Orcamento.numero).filter(Orcamento.numero.like(f"{prefixo}%")).all()
    sequencias = [int(n[len(prefixo):]) for (n,) in numeros if n[len(prefixo):].isdigit()]
    return f"{prefixo}{max(sequencias, default=0) + 1:03d}"


def listar_orcamentos(db: Session, cliente_id: Optional[str] = None) -> List[Orcamento]:
    query = db.query(Orcamento)
    if cliente_id:
        query = query.filter(Orcamento.cliente_id == cliente_id)
    return query.order_by(Orcamento.created_at.desc()).all()


def buscar_orcamento(db: Session, id: str) -> Optional[Orcamento]:
    return db.query(Orcamento).filter(Orcamento.id == id).first()


def detalhar_orcamento(orcamento: Orcamento) -> dict:
    """Orçamento com itens e totais, no formato de OrcamentoDetalhe."""
    subtotal, total = calcular_totais(orcamento, orcamento.itens)
    return {
        **{c.name: getattr(orcamento, c.name) for c in Orcamento.__table__.columns},
        "itens": orcamento.itens,
        "subtotal": subtotal,
        "total": total,
    }


def criar_orcamento(db: Session, dados: dict) -> Orcamento:
    if not db.get(Cliente, dados["cliente_id"]):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cliente não encontrado")
    if not dados.get("numero"):
        dados["numero"] = gerar_numero_orcamento(db)

    db_orcamento = Orcamento(**dados)
    db.add(db_orcamento)
    db.commit()
    db.refresh(db_orcamento)
    logger.info(f"Orçamento {db_orcamento.numero} criado")
    return db_orcamento


def atualizar_orcamento(db: Session, id: str, dados: dict) -> Optional[Orcamento]:
    db_orcamento = buscar_orcamento(db, id)
    if not db_orcamento:
        return None
    for key, value in dados.items():
        setattr(db_orcamento, key, value)
    db.commit()
    db.refresh(db_orcamento)
    return db_orcamento


def deletar_orcamento(db: Session, id: str) -> bool:
    db_orcamento = buscar_orcamento(db, id)
    if not db_orcamento:
        return False
    db.delete(db_orcamento)
    db.commit()
    return True


# ============================================================
# ITENS
# ============================================================

def listar_itens(db: Session, orcamento_id: str) -> List[ItemOrcamento]:
    return db.query(ItemOrcamento).filter(
        ItemOrcamento.orcamento_id == orcamento_id
    ).order_by(ItemOrcamento.created_at).all()


def criar_item(db: Session, dados: dict) -> ItemOrcamento:
    if not buscar_orcamento(db, dados["orcamento_id"]):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Orçamento não encontrado")

    # Total da linha sempre calculado no servidor
    dados["total"] = _arredondar(Decimal(str(dados["quantidade"])) * Decimal(str(dados["preco_unitario"])))
    db_item = ItemOrcamento(**dados)
    db.add(db_item)
    db.commit()
    db.refresh(db_item)
    return db_item


def deletar_item(db: Session, id: str) -> bool:
    db_item = db.query(ItemOrcamento).filter(ItemOrcamento.id == id).first()
    if not db_item:
        return False
    db.delete(db_item)
    db.commit()
    return True
