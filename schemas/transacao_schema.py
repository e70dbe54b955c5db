from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from enum import Enum

from .comum import AtualizacaoParcial, DataISO, Dinheiro


class TipoTransacao(str, Enum):
    RECEITA = "receita"
    DESPESA = "despesa"


class TransacaoCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    projeto_id: str
    tipo: TipoTransacao
    descricao: str = Field(..., min_length=1, max_length=255)
    valor: Dinheiro = Field(..., gt=0)
    data: DataISO


class TransacaoUpdate(AtualizacaoParcial):
    model_config = ConfigDict(use_enum_values=True)
    CAMPOS_OBRIGATORIOS = ("tipo", "descricao", "valor", "data")

    tipo: Optional[TipoTransacao] = None
    descricao: Optional[str] = Field(None, min_length=1, max_length=255)
    valor: Optional[Dinheiro] = Field(None, gt=0)
    data: Optional[DataISO] = None


class TransacaoOut(BaseModel):
    id: str
    projeto_id: str
    tipo: TipoTransacao
    descricao: str
    valor: Dinheiro
    data: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
