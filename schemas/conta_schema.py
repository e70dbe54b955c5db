"""
Schemas de Conta (a pagar / a receber).
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from enum import Enum

from .comum import AtualizacaoParcial, DataISO, Dinheiro
from .transacao_schema import TransacaoOut


class TipoConta(str, Enum):
    RECEBER = "receber"
    PAGAR = "pagar"


class StatusConta(str, Enum):
    PENDENTE = "pendente"
    PAGO = "pago"
    ATRASADO = "atrasado"


class ContaCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    tipo: TipoConta
    descricao: str = Field(..., min_length=1, max_length=255)
    valor: Dinheiro = Field(..., ge=0)
    data_vencimento: DataISO
    status: StatusConta = StatusConta.PENDENTE
    projeto_id: Optional[str] = None
    data: DataISO


class ContaUpdate(AtualizacaoParcial):
    model_config = ConfigDict(use_enum_values=True)
    CAMPOS_OBRIGATORIOS = ("tipo", "descricao", "valor", "data_vencimento", "status", "data")

    tipo: Optional[TipoConta] = None
    descricao: Optional[str] = Field(None, min_length=1, max_length=255)
    valor: Optional[Dinheiro] = Field(None, ge=0)
    data_vencimento: Optional[DataISO] = None
    status: Optional[StatusConta] = None
    projeto_id: Optional[str] = None
    data: Optional[DataISO] = None


class ContaOut(BaseModel):
    id: str
    tipo: TipoConta
    descricao: str
    valor: Dinheiro
    data_vencimento: str
    status: StatusConta
    projeto_id: Optional[str] = None
    data: str
    saldo_automatico: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class GarantirTransacaoOut(BaseModel):
    """Resultado do reparo idempotente de uma conta paga."""
    criada: bool
    transacao: TransacaoOut
