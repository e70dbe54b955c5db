from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from enum import Enum

from .comum import AtualizacaoParcial, DataISO, Dinheiro


class StatusOrcamento(str, Enum):
    PENDENTE = "pendente"
    APROVADO = "aprovado"
    RECUSADO = "recusado"


# ===================
# ITENS
# ===================

class ItemOrcamentoCreate(BaseModel):
    orcamento_id: str
    descricao: str = Field(..., min_length=1, max_length=255)
    quantidade: Decimal = Field(..., gt=0)
    largura: Optional[Decimal] = None
    altura: Optional[Decimal] = None
    cor_espessura: Optional[str] = None
    cor_perfil: Optional[str] = None
    cor_acessorio: Optional[str] = None
    linha: Optional[str] = None
    data_entrega: Optional[DataISO] = None
    observacoes: Optional[str] = None
    preco_unitario: Dinheiro = Field(..., ge=0)
    imagem_url: Optional[str] = None


class ItemOrcamentoOut(BaseModel):
    id: str
    orcamento_id: str
    descricao: str
    quantidade: Decimal
    largura: Optional[Decimal] = None
    altura: Optional[Decimal] = None
    cor_espessura: Optional[str] = None
    cor_perfil: Optional[str] = None
    cor_acessorio: Optional[str] = None
    linha: Optional[str] = None
    data_entrega: Optional[str] = None
    observacoes: Optional[str] = None
    preco_unitario: Dinheiro
    total: Dinheiro
    imagem_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


# ===================
# ORÇAMENTO
# ===================

class OrcamentoCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    cliente_id: str
    # Gerado automaticamente (ORC-AAAA-NNN) quando omitido
    numero: Optional[str] = None
    status: StatusOrcamento = StatusOrcamento.PENDENTE
    validade: DataISO
    local: Optional[str] = None
    tipo: Optional[str] = None
    desconto: Decimal = Field(Decimal("0"), ge=0, le=100)
    observacoes: Optional[str] = None


class OrcamentoUpdate(AtualizacaoParcial):
    model_config = ConfigDict(use_enum_values=True)
    CAMPOS_OBRIGATORIOS = ("numero", "status", "validade", "desconto")

    numero: Optional[str] = None
    status: Optional[StatusOrcamento] = None
    validade: Optional[DataISO] = None
    local: Optional[str] = None
    tipo: Optional[str] = None
    desconto: Optional[Decimal] = Field(None, ge=0, le=100)
    observacoes: Optional[str] = None


class OrcamentoOut(BaseModel):
    id: str
    cliente_id: str
    numero: str
    status: StatusOrcamento
    validade: str
    local: Optional[str] = None
    tipo: Optional[str] = None
    desconto: Decimal
    observacoes: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrcamentoDetalhe(OrcamentoOut):
    """Orçamento com itens e totais calculados."""
    itens: List[ItemOrcamentoOut] = []
    subtotal: Dinheiro
    total: Dinheiro
