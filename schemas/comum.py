"""
Tipos compartilhados entre os schemas.

Valores monetários trafegam como string com duas casas ("1000.00");
datas de negócio trafegam como string "YYYY-MM-DD".
"""
from datetime import date
from decimal import Decimal
from typing import Annotated, ClassVar, Tuple

from pydantic import AfterValidator, BaseModel, PlainSerializer, model_validator


def _validar_data(valor: str) -> str:
    try:
        date.fromisoformat(valor)
    except ValueError:
        raise ValueError("Data deve estar no formato YYYY-MM-DD")
    if len(valor) != 10:
        raise ValueError("Data deve estar no formato YYYY-MM-DD")
    return valor


PADRAO_DATA = r"^\d{4}-\d{2}-\d{2}$"

Dinheiro = Annotated[
    Decimal,
    PlainSerializer(lambda v: f"{v:.2f}", return_type=str, when_used="json"),
]

DataISO = Annotated[str, AfterValidator(_validar_data)]


class AtualizacaoParcial(BaseModel):
    """
    Base dos schemas de PATCH.

    Campos omitidos não são alterados; campos listados em CAMPOS_OBRIGATORIOS
    não aceitam null explícito, porque a coluna correspondente é NOT NULL.
    """
    CAMPOS_OBRIGATORIOS: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _rejeitar_nulos(self):
        nulos = [
            campo for campo in self.CAMPOS_OBRIGATORIOS
            if campo in self.model_fields_set and getattr(self, campo) is None
        ]
        if nulos:
            raise ValueError(f"Campos não podem ser nulos: {', '.join(nulos)}")
        return self
