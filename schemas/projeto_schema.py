"""
Schemas de Projeto (obra).
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from enum import Enum

from .comum import AtualizacaoParcial, DataISO, Dinheiro


class StatusProjeto(str, Enum):
    """Status possíveis de um projeto."""
    ORCAMENTO = "orcamento"
    APROVADO = "aprovado"
    EXECUCAO = "execucao"
    FINALIZADO = "finalizado"
    CANCELADO = "cancelado"


TIPO_ADMINISTRATIVO = "administrativo"


class ProjetoCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    nome: str = Field(..., min_length=1, max_length=150)
    # Opcional apenas para projetos administrativos
    cliente_id: Optional[str] = None
    descricao: Optional[str] = None
    valor: Dinheiro = Field(..., ge=0)
    tipo: str = Field(..., min_length=1, max_length=30)  # vidro, espelho, reparo, administrativo
    status: StatusProjeto = StatusProjeto.ORCAMENTO
    data: DataISO


class ProjetoUpdate(AtualizacaoParcial):
    model_config = ConfigDict(use_enum_values=True)
    CAMPOS_OBRIGATORIOS = ("nome", "valor", "tipo", "status", "data")

    nome: Optional[str] = Field(None, min_length=1, max_length=150)
    cliente_id: Optional[str] = None
    descricao: Optional[str] = None
    valor: Optional[Dinheiro] = Field(None, ge=0)
    tipo: Optional[str] = None
    status: Optional[StatusProjeto] = None
    data: Optional[DataISO] = None


class ProjetoStatusUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    status: StatusProjeto


class ProjetoOut(BaseModel):
    id: str
    nome: str
    cliente_id: str
    descricao: Optional[str] = None
    valor: Dinheiro
    tipo: str
    status: StatusProjeto
    data: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
