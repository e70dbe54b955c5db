"""Tests for the project balance reconciliation."""

import gc
from decimal import Decimal

import pytest
from fastapi import HTTPException

from core.config import settings
from models import Cliente, Conta, Transacao
from services import sincronizacao_service
from services.conta_service import atualizar_conta
from services.projeto_service import criar_projeto
from services.sincronizacao_service import (
    _lock_do_projeto,
    calcular_saldo_pendente,
    garantir_transacao_conta_paga,
    sincronizar_contas_projeto,
)


def _contas_do_projeto(db, projeto):
    return db.query(Conta).filter(Conta.projeto_id == projeto.id).all()


def _falhar(*args, **kwargs):
    raise RuntimeError("banco indisponível")


class TestSaldoPendente:
    """Tests for the pending balance calculation."""

    def test_sem_transacoes(self, db_session, projeto):
        """Pending balance equals the contracted value."""
        assert calcular_saldo_pendente(db_session, projeto) == Decimal("1000.00")

    def test_despesas_nao_abatem(self, db_session, projeto, add_transacao):
        """Only income reduces the balance."""
        add_transacao(projeto, "300.00")
        add_transacao(projeto, "500.00", tipo="despesa")

        assert calcular_saldo_pendente(db_session, projeto) == Decimal("700.00")

    def test_saldo_negativo(self, db_session, projeto, add_transacao):
        """Overpayment yields a negative balance."""
        add_transacao(projeto, "1200.00")

        assert calcular_saldo_pendente(db_session, projeto) == Decimal("-200.00")


class TestSincronizarContasProjeto:
    """Tests for creating and updating the automatic receivable bill."""

    def test_cria_conta_de_saldo(self, db_session, projeto):
        """A project with pending balance gets one receivable bill."""
        conta = sincronizar_contas_projeto(db_session, projeto)

        assert conta is not None
        assert conta.tipo == "receber"
        assert conta.status == "pendente"
        assert conta.valor == Decimal("1000.00")
        assert conta.descricao == "Saldo a receber - Box banheiro"
        assert conta.data_vencimento == "2026-11-10"
        assert conta.saldo_automatico is True
        assert len(_contas_do_projeto(db_session, projeto)) == 1

    def test_receita_parcial_atualiza_mesma_conta(self, db_session, projeto, add_transacao):
        """Partial income updates the existing bill instead of creating another."""
        primeira = sincronizar_contas_projeto(db_session, projeto)
        add_transacao(projeto, "400.00")

        segunda = sincronizar_contas_projeto(db_session, projeto)

        assert segunda.id == primeira.id
        assert segunda.valor == Decimal("600.00")
        assert segunda.status == "pendente"
        assert len(_contas_do_projeto(db_session, projeto)) == 1

    def test_quitacao_marca_paga_com_valor_cheio(self, db_session, projeto, add_transacao):
        """Once fully received, the bill is paid and carries the full value."""
        sincronizar_contas_projeto(db_session, projeto)
        add_transacao(projeto, "400.00")
        sincronizar_contas_projeto(db_session, projeto)
        add_transacao(projeto, "600.00")

        conta = sincronizar_contas_projeto(db_session, projeto)

        assert conta.status == "pago"
        assert conta.valor == Decimal("1000.00")
        assert len(_contas_do_projeto(db_session, projeto)) == 1

    def test_sobrepagamento_nao_remove_conta(self, db_session, projeto, add_transacao):
        """A negative balance still keeps the bill, marked as paid."""
        sincronizar_contas_projeto(db_session, projeto)
        add_transacao(projeto, "1500.00")

        conta = sincronizar_contas_projeto(db_session, projeto)

        assert conta.status == "pago"
        assert len(_contas_do_projeto(db_session, projeto)) == 1

    def test_estorno_reabre_conta(self, db_session, projeto, add_transacao):
        """Removing income brings a paid bill back to pending."""
        sincronizar_contas_projeto(db_session, projeto)
        receita = add_transacao(projeto, "1000.00")
        sincronizar_contas_projeto(db_session, projeto)

        db_session.delete(receita)
        db_session.commit()
        conta = sincronizar_contas_projeto(db_session, projeto)

        assert conta.status == "pendente"
        assert conta.valor == Decimal("1000.00")

    def test_projeto_quitado_sem_conta(self, db_session, projeto, add_transacao):
        """No bill is created when nothing is pending."""
        add_transacao(projeto, "1000.00")

        assert sincronizar_contas_projeto(db_session, projeto) is None
        assert _contas_do_projeto(db_session, projeto) == []

    def test_projeto_valor_zero(self, db_session, projeto):
        """A zero-valued project never gets a bill."""
        projeto.valor = Decimal("0")
        db_session.commit()

        assert sincronizar_contas_projeto(db_session, projeto) is None
        assert _contas_do_projeto(db_session, projeto) == []

    def test_arredondamento_centavos(self, db_session, projeto, add_transacao):
        """Balances are kept with two decimal places."""
        for _ in range(3):
            add_transacao(projeto, "333.33")

        conta = sincronizar_contas_projeto(db_session, projeto)

        assert conta.valor == Decimal("0.01")

    def test_idempotente(self, db_session, projeto, monkeypatch):
        """A second sync with nothing changed writes nothing."""
        primeira = sincronizar_contas_projeto(db_session, projeto)
        monkeypatch.setattr(sincronizacao_service, "_gravar_conta_saldo", _falhar)

        segunda = sincronizar_contas_projeto(db_session, projeto)

        assert segunda is not None
        assert segunda.id == primeira.id

    def test_conta_manual_nao_e_alterada(self, db_session, projeto, add_conta):
        """Manual receivable bills of the project are left untouched."""
        manual = add_conta(projeto, tipo="receber", valor="250.00", descricao="Sinal combinado")

        automatica = sincronizar_contas_projeto(db_session, projeto)
        db_session.refresh(manual)

        assert automatica.id != manual.id
        assert manual.valor == Decimal("250.00")
        assert manual.descricao == "Sinal combinado"
        assert manual.saldo_automatico is False

    def test_nome_do_projeto_atualiza_descricao(self, db_session, projeto):
        """Renaming the project refreshes the bill description."""
        sincronizar_contas_projeto(db_session, projeto)
        projeto.nome = "Box suíte"
        db_session.commit()

        conta = sincronizar_contas_projeto(db_session, projeto)

        assert conta.descricao == "Saldo a receber - Box suíte"


class TestFalhaNaSincronizacao:
    """Tests for failures during reconciliation."""

    def test_falha_e_registrada_e_engolida(self, db_session, projeto, monkeypatch, caplog):
        """Errors are logged and never raised to the caller."""
        monkeypatch.setattr(sincronizacao_service, "_gravar_conta_saldo", _falhar)

        assert sincronizar_contas_projeto(db_session, projeto) is None
        assert _contas_do_projeto(db_session, projeto) == []
        assert "Falha ao sincronizar contas do projeto" in caplog.text

    def test_proxima_sincronizacao_corrige(self, db_session, projeto, add_transacao, monkeypatch):
        """The next successful sync repairs the balance."""
        monkeypatch.setattr(sincronizacao_service, "_gravar_conta_saldo", _falhar)
        sincronizar_contas_projeto(db_session, projeto)
        monkeypatch.undo()

        add_transacao(projeto, "100.00")
        conta = sincronizar_contas_projeto(db_session, projeto)

        assert conta.valor == Decimal("900.00")

    def test_lock_por_projeto(self):
        """Each project has its own lock."""
        lock = _lock_do_projeto("a")

        assert _lock_do_projeto("a") is lock
        assert _lock_do_projeto("b") is not lock

    def test_lock_liberado_sem_uso(self):
        """Locks are dropped once no sync holds them."""
        lock = _lock_do_projeto("projeto-removido")
        assert "projeto-removido" in sincronizacao_service._locks_projetos

        del lock
        gc.collect()

        assert "projeto-removido" not in sincronizacao_service._locks_projetos


class TestPagamentoDeConta:
    """Tests for mirroring paid bills into transactions."""

    def _transacoes(self, db, projeto, tipo=None):
        query = db.query(Transacao).filter(Transacao.projeto_id == projeto.id)
        if tipo:
            query = query.filter(Transacao.tipo == tipo)
        return query.all()

    def test_conta_receber_paga_gera_receita(self, db_session, projeto):
        """Paying the automatic bill records the income and settles the project."""
        conta = sincronizar_contas_projeto(db_session, projeto)

        atualizar_conta(db_session, conta.id, {"status": "pago"})

        receitas = self._transacoes(db_session, projeto, "receita")
        assert len(receitas) == 1
        assert receitas[0].descricao == "Recebimento: Saldo a receber - Box banheiro"
        assert receitas[0].valor == Decimal("1000.00")

        db_session.refresh(conta)
        assert conta.status == "pago"
        assert conta.valor == Decimal("1000.00")

    def test_conta_pagar_paga_gera_despesa(self, db_session, projeto, add_conta):
        """Paying a payable bill records an expense."""
        conta = add_conta(projeto, tipo="pagar", valor="150.00", descricao="Ferragens")

        atualizar_conta(db_session, conta.id, {"status": "pago"})

        despesas = self._transacoes(db_session, projeto, "despesa")
        assert len(despesas) == 1
        assert despesas[0].descricao == "Despesa: Ferragens"
        assert despesas[0].valor == Decimal("150.00")

    def test_conta_ja_paga_nao_gera_transacao(self, db_session, projeto, add_conta):
        """Editing an already paid bill does not mirror it again."""
        conta = add_conta(projeto, tipo="pagar", status="pago", descricao="Frete")

        atualizar_conta(db_session, conta.id, {"status": "pago", "descricao": "Frete urgente"})

        assert self._transacoes(db_session, projeto) == []

    def test_conta_sem_projeto(self, db_session, add_conta):
        """Bills without a project are never mirrored."""
        conta = add_conta(None, tipo="pagar", descricao="Aluguel")

        atualizar_conta(db_session, conta.id, {"status": "pago"})

        assert db_session.query(Transacao).count() == 0

    def test_pago_pendente_pago_espelha_duas_vezes(self, db_session, projeto, add_conta, monkeypatch):
        """Each transition to paid records one transaction."""
        monkeypatch.setattr(settings, "ESPELHAR_PAGAMENTO_UMA_VEZ", False)
        conta = add_conta(projeto, tipo="pagar", valor="80.00", descricao="Silicone")

        atualizar_conta(db_session, conta.id, {"status": "pago"})
        atualizar_conta(db_session, conta.id, {"status": "pendente"})
        atualizar_conta(db_session, conta.id, {"status": "pago"})

        assert len(self._transacoes(db_session, projeto, "despesa")) == 2

    def test_espelhar_uma_vez(self, db_session, projeto, add_conta, monkeypatch):
        """With the once-only setting a repeated payment reuses the transaction."""
        monkeypatch.setattr(settings, "ESPELHAR_PAGAMENTO_UMA_VEZ", True)
        conta = add_conta(projeto, tipo="pagar", valor="80.00", descricao="Silicone")

        atualizar_conta(db_session, conta.id, {"status": "pago"})
        atualizar_conta(db_session, conta.id, {"status": "pendente"})
        atualizar_conta(db_session, conta.id, {"status": "pago"})

        assert len(self._transacoes(db_session, projeto, "despesa")) == 1

    def test_falha_no_espelho_mantem_pagamento(self, db_session, projeto, add_conta, monkeypatch):
        """The bill stays paid even if the mirror transaction fails."""
        conta = add_conta(projeto, tipo="pagar", descricao="Vidro temperado")
        monkeypatch.setattr(sincronizacao_service, "_espelhar_conta", _falhar)

        atualizada = atualizar_conta(db_session, conta.id, {"status": "pago"})

        assert atualizada.status == "pago"
        assert self._transacoes(db_session, projeto) == []


class TestGarantirTransacao:
    """Tests for the idempotent repair of paid bills."""

    def test_cria_uma_unica_vez(self, db_session, projeto, add_conta):
        """Repeated calls return the same transaction."""
        conta = add_conta(projeto, tipo="pagar", valor="320.00", status="pago", descricao="Perfis")

        primeira, criada = garantir_transacao_conta_paga(db_session, conta)
        segunda, criada_de_novo = garantir_transacao_conta_paga(db_session, conta)

        assert criada is True
        assert criada_de_novo is False
        assert segunda.id == primeira.id
        assert primeira.descricao == "Despesa: Perfis"
        assert db_session.query(Transacao).count() == 1

    def test_conta_nao_paga(self, db_session, projeto, add_conta):
        """Unpaid bills are rejected with a conflict."""
        conta = add_conta(projeto, tipo="pagar")

        with pytest.raises(HTTPException) as exc:
            garantir_transacao_conta_paga(db_session, conta)

        assert exc.value.status_code == 409

    def test_conta_sem_projeto(self, db_session, add_conta):
        """Paid bills without a project are rejected."""
        conta = add_conta(None, tipo="pagar", status="pago")

        with pytest.raises(HTTPException) as exc:
            garantir_transacao_conta_paga(db_session, conta)

        assert exc.value.status_code == 400


class TestClienteAdministrativo:
    """Tests for administrative projects without a client."""

    def test_reutiliza_cliente_administrativo(self, db_session):
        """All administrative projects share one internal client."""
        dados = {"nome": "Compra de ferramentas", "valor": Decimal("0"), "tipo": "administrativo", "data": "2026-10-01"}

        primeiro = criar_projeto(db_session, dict(dados))
        segundo = criar_projeto(db_session, dict(dados, nome="Manutenção da van"))

        assert primeiro.cliente_id == segundo.cliente_id
        administrativos = db_session.query(Cliente).filter(Cliente.chave_sistema == "administrativo").all()
        assert len(administrativos) == 1
        assert administrativos[0].nome == settings.CLIENTE_ADMINISTRATIVO_NOME

    def test_cliente_obrigatorio_para_obra(self, db_session):
        """Regular projects require a client."""
        dados = {"nome": "Janela", "valor": Decimal("500"), "tipo": "vidro", "data": "2026-10-01"}

        with pytest.raises(HTTPException) as exc:
            criar_projeto(db_session, dados)

        assert exc.value.status_code == 400


class TestContaDeSaldoNoReparo:
    """The automatic balance bill and the repair operation."""

    def test_reparo_recusado(self, db_session, projeto, add_transacao):
        """Repairing the automatic bill would count the revenue twice."""
        sincronizar_contas_projeto(db_session, projeto)
        add_transacao(projeto, "1000.00")
        conta = sincronizar_contas_projeto(db_session, projeto)
        assert conta.status == "pago"

        with pytest.raises(HTTPException) as exc:
            garantir_transacao_conta_paga(db_session, conta)

        assert exc.value.status_code == 409
        assert db_session.query(Transacao).count() == 1

    def test_espelhar_uma_vez_na_conta_de_saldo(self, db_session, projeto, monkeypatch):
        """With the once-only setting, paying the automatic bill still records the receipt."""
        monkeypatch.setattr(settings, "ESPELHAR_PAGAMENTO_UMA_VEZ", True)
        conta = sincronizar_contas_projeto(db_session, projeto)

        atualizar_conta(db_session, conta.id, {"status": "pago"})

        receitas = db_session.query(Transacao).filter(Transacao.tipo == "receita").all()
        assert [r.valor for r in receitas] == [Decimal("1000.00")]
