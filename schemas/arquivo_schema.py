from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from enum import Enum


class CategoriaArquivo(str, Enum):
    COMPROVANTE = "comprovante"
    NOTA_FISCAL_RECEBIDA = "nota_fiscal_recebida"
    NOTA_FISCAL_EMITIDA = "nota_fiscal_emitida"


class ArquivoProjetoCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    nome_arquivo: str = Field(..., min_length=1)
    tipo_arquivo: str
    tamanho: int = Field(..., ge=0)
    categoria: CategoriaArquivo
    object_path: str


class ArquivoProjetoOut(ArquivoProjetoCreate):
    id: str
    projeto_id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ArquivoTransacaoCreate(BaseModel):
    transacao_id: str
    nome_arquivo: str = Field(..., min_length=1)
    tipo_arquivo: str
    tamanho: int = Field(..., ge=0)
    object_path: str


class ArquivoTransacaoOut(ArquivoTransacaoCreate):
    id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UploadURLResponse(BaseModel):
    """URL para envio do arquivo e caminho que deve ser gravado nos metadados."""
    upload_url: str
    object_path: str
