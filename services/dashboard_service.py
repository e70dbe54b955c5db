"""
Service para o Dashboard.
"""
import logging
from datetime import date
from typing import List, Optional

from dateutil.relativedelta import relativedelta
from sqlalchemy import func
from sqlalchemy.orm import Session

from models import Cliente, Conta, Projeto, Transacao
from schemas.conta_schema import StatusConta, TipoConta
from schemas.dashboard_schema import DashboardStats, GraficoMensal
from schemas.projeto_schema import StatusProjeto

logger = logging.getLogger(__name__)

MESES_ABREV = ["", "Jan", "Fev", "Mar", "Abr", "Mai", "Jun", "Jul", "Ago", "Set", "Out", "Nov", "Dez"]

STATUS_ATIVOS = [StatusProjeto.APROVADO.value, StatusProjeto.EXECUCAO.value]


class DashboardService:
    """Service para os números consolidados da tela inicial."""

    def _somar_transacoes(self, db: Session, tipo: str) -> float:
        total = db.query(func.coalesce(func.sum(Transacao.valor), 0)).filter(
            Transacao.tipo == tipo
        ).scalar()
        return float(total or 0)

    def _somar_contas_pendentes(self, db: Session, tipo: str) -> float:
        total = db.query(func.coalesce(func.sum(Conta.valor), 0)).filter(
            Conta.tipo == tipo,
            Conta.status != StatusConta.PAGO.value,
        ).scalar()
        return float(total or 0)

    def _get_grafico_mensal(
        self, db: Session, meses: int = 6, hoje: Optional[date] = None
    ) -> List[GraficoMensal]:
        """Receitas e despesas dos últimos N meses (mês atual incluso)."""
        hoje = hoje or date.today()
        inicio = (hoje.replace(day=1) - relativedelta(months=meses - 1))

        transacoes = db.query(Transacao.data, Transacao.tipo, Transacao.valor).filter(
            Transacao.data >= inicio.isoformat()
        ).all()

        totais = {}
        for data, tipo, valor in transacoes:
            chave = data[:7]
            receitas, despesas = totais.get(chave, (0.0, 0.0))
            if tipo == "receita":
                receitas += float(valor)
            else:
                despesas += float(valor)
            totais[chave] = (receitas, despesas)

        grafico = []
        for i in range(meses):
            mes = inicio + relativedelta(months=i)
            receitas, despesas = totais.get(f"{mes.year}-{mes.month:02d}", (0.0, 0.0))
            grafico.append(GraficoMensal(
                mes=MESES_ABREV[mes.month],
                ano=mes.year,
                receitas=round(receitas, 2),
                despesas=round(despesas, 2),
            ))
        return grafico

    def get_stats(self, db: Session, hoje: Optional[date] = None) -> DashboardStats:
        projetos_ativos = db.query(Projeto).filter(Projeto.status.in_(STATUS_ATIVOS)).count()
        total_clientes = db.query(Cliente).count()

        receitas = self._somar_transacoes(db, "receita")
        despesas = self._somar_transacoes(db, "despesa")
        lucro = receitas - despesas
        margem = (lucro / receitas * 100) if receitas > 0 else 0.0

        logger.debug(f"Dashboard: receitas={receitas} despesas={despesas}")

        return DashboardStats(
            projetos_ativos=projetos_ativos,
            total_clientes=total_clientes,
            receitas=round(receitas, 2),
            despesas=round(despesas, 2),
            lucro=round(lucro, 2),
            margem=round(margem, 1),
            contas_receber_pendentes=round(self._somar_contas_pendentes(db, TipoConta.RECEBER.value), 2),
            contas_pagar_pendentes=round(self._somar_contas_pendentes(db, TipoConta.PAGAR.value), 2),
            grafico_mensal=self._get_grafico_mensal(db, hoje=hoje),
        )
