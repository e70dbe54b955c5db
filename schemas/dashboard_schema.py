"""
Schemas para o Dashboard.
"""
from pydantic import BaseModel
from typing import List


class GraficoMensal(BaseModel):
    """Receitas e despesas de um mês."""
    mes: str  # "Jan", "Fev", etc.
    ano: int
    receitas: float
    despesas: float


class DashboardStats(BaseModel):
    """Estatisticas gerais do dashboard."""
    projetos_ativos: int
    total_clientes: int
    receitas: float
    despesas: float
    lucro: float
    margem: float  # Percentual 0-100, uma casa decimal
    contas_receber_pendentes: float
    contas_pagar_pendentes: float
    grafico_mensal: List[GraficoMensal]
