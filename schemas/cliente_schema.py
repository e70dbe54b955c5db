from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from .comum import AtualizacaoParcial


class ClienteBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=150)
    contato: str = Field(..., min_length=1, max_length=150)
    email: Optional[str] = None
    telefone: str = Field(..., min_length=1, max_length=30)
    endereco: Optional[str] = None
    cnpj_cpf: Optional[str] = None


class ClienteCreate(ClienteBase):
    pass


class ClienteUpdate(AtualizacaoParcial):
    CAMPOS_OBRIGATORIOS = ("nome", "contato", "telefone")

    nome: Optional[str] = Field(None, min_length=1, max_length=150)
    contato: Optional[str] = None
    email: Optional[str] = None
    telefone: Optional[str] = None
    endereco: Optional[str] = None
    cnpj_cpf: Optional[str] = None


class ClienteOut(ClienteBase):
    id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
