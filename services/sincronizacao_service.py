"""
Sincronização financeira entre projeto, transações e contas.

Regras:
- Cada projeto com saldo a receber positivo tem uma única conta "receber"
  automática (saldo_automatico=True) cujo valor é
  valor do projeto - soma das receitas.
- Quando o saldo chega a zero (ou fica negativo) a conta automática é
  marcada como paga com o valor cheio do projeto. Nunca é excluída.
- Pagar uma conta vinculada a projeto gera a transação espelho
  (receita para "receber", despesa para "pagar") e ressincroniza o projeto.

A sincronização é best-effort: erros são registrados no log e a operação
principal (criação/edição de projeto ou transação) segue normalmente.
"""
import logging
import threading
import weakref
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Tuple

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from core.config import settings
from models import Conta, Projeto, Transacao
from schemas.conta_schema import StatusConta, TipoConta
from schemas.transacao_schema import TipoTransacao

logger = logging.getLogger(__name__)

CENTAVOS = Decimal("0.01")

PREFIXO_RECEBIMENTO = "Recebimento: "
PREFIXO_DESPESA = "Despesa: "

# Um lock por projeto: serializa leitura do saldo + gravação da conta.
# A entrada some quando nenhuma sincronização do projeto está em andamento.
_locks_projetos = weakref.WeakValueDictionary()
_locks_guard = threading.Lock()


def _lock_do_projeto(projeto_id: str) -> threading.Lock:
    with _locks_guard:
        lock = _locks_projetos.get(projeto_id)
        if lock is None:
            lock = threading.Lock()
            _locks_projetos[projeto_id] = lock
        return lock


def _hoje() -> str:
    return date.today().isoformat()


def _arredondar(valor) -> Decimal:
    return Decimal(str(valor)).quantize(CENTAVOS, rounding=ROUND_HALF_UP)


def descricao_saldo(projeto: Projeto) -> str:
    return f"Saldo a receber - {projeto.nome}"


# ==================================================
# CONSULTAS
# ==================================================

def calcular_saldo_pendente(db: Session, projeto: Projeto) -> Decimal:
    """Valor contratado menos a soma das receitas do projeto."""
    transacoes = db.query(Transacao).filter(Transacao.projeto_id == projeto.id).all()
    recebido = sum(
        (Decimal(str(t.valor)) for t in transacoes if t.tipo == TipoTransacao.RECEITA.value),
        Decimal("0"),
    )
    return Decimal(str(projeto.valor)) - recebido


def buscar_conta_saldo(db: Session, projeto_id: str) -> Optional[Conta]:
    """Conta a receber automática do projeto (contas manuais são ignoradas)."""
    return db.query(Conta).filter(
        Conta.projeto_id == projeto_id,
        Conta.tipo == TipoConta.RECEBER.value,
        Conta.saldo_automatico.is_(True),
    ).first()


def _conta_coincide(conta: Conta, campos: dict) -> bool:
    for campo, esperado in campos.items():
        atual = getattr(conta, campo)
        if isinstance(esperado, Decimal):
            if atual is None or _arredondar(atual) != esperado:
                return False
        elif atual != esperado:
            return False
    return True


def _gravar_conta_saldo(db: Session, conta: Optional[Conta], campos: dict) -> Conta:
    if conta is None:
        conta = Conta(**campos)
        db.add(conta)
    else:
        for key, value in campos.items():
            setattr(conta, key, value)
    db.commit()
    db.refresh(conta)
    return conta


# ==================================================
# SINCRONIZAÇÃO DO SALDO
# ==================================================

def _sincronizar(db: Session, projeto: Projeto) -> Optional[Conta]:
    pendente = calcular_saldo_pendente(db, projeto)
    conta = buscar_conta_saldo(db, projeto.id)

    if pendente > 0:
        campos = {
            "descricao": descricao_saldo(projeto),
            "valor": _arredondar(pendente),
            "data_vencimento": projeto.data,
            "status": StatusConta.PENDENTE.value,
        }
        if conta is not None and _conta_coincide(conta, campos):
            return conta

        campos.update(
            tipo=TipoConta.RECEBER.value,
            projeto_id=projeto.id,
            data=_hoje(),
            saldo_automatico=True,
        )
        acao = "criada" if conta is None else "atualizada"
        conta = _gravar_conta_saldo(db, conta, campos)
        logger.info(
            "Conta de saldo %s para projeto %s: R$ %s pendente",
            acao, projeto.id, campos["valor"],
        )
        return conta

    if conta is None:
        return None

    campos = {
        "status": StatusConta.PAGO.value,
        "valor": _arredondar(projeto.valor),
    }
    if _conta_coincide(conta, campos):
        return conta

    conta = _gravar_conta_saldo(db, conta, campos)
    logger.info("Projeto %s quitado: conta %s marcada como paga", projeto.id, conta.id)
    return conta


def sincronizar_contas_projeto(db: Session, projeto: Projeto) -> Optional[Conta]:
    """
    Recalcula o saldo a receber do projeto e cria/atualiza a conta automática.

    Nunca propaga exceções: em caso de falha faz rollback, registra o erro
    e retorna None. A próxima alteração no projeto corrige o saldo.
    """
    try:
        with _lock_do_projeto(projeto.id):
            return _sincronizar(db, projeto)
    except Exception:
        logger.exception(
            "Falha ao sincronizar contas do projeto %s",
            getattr(projeto, "id", None),
        )
        db.rollback()
        return None


def sincronizar_por_id(db: Session, projeto_id: Optional[str]) -> Optional[Conta]:
    """Carrega o projeto e sincroniza; projeto inexistente é ignorado."""
    if not projeto_id:
        return None
    try:
        projeto = db.get(Projeto, projeto_id)
    except Exception:
        logger.exception(f"Falha ao carregar projeto {projeto_id} para sincronização")
        db.rollback()
        return None
    if projeto is None:
        logger.warning(f"Projeto {projeto_id} não encontrado para sincronização")
        return None
    return sincronizar_contas_projeto(db, projeto)


# ==================================================
# PAGAMENTO DE CONTAS
# ==================================================

def _direcao(conta: Conta) -> Tuple[str, str]:
    """(tipo da transação, prefixo da descrição) para a conta."""
    if conta.tipo == TipoConta.RECEBER.value:
        return TipoTransacao.RECEITA.value, PREFIXO_RECEBIMENTO
    return TipoTransacao.DESPESA.value, PREFIXO_DESPESA


def _espelhar_conta(db: Session, conta: Conta) -> Transacao:
    tipo, prefixo = _direcao(conta)
    transacao = Transacao(
        projeto_id=conta.projeto_id,
        tipo=tipo,
        descricao=f"{prefixo}{conta.descricao}",
        valor=_arredondar(conta.valor),
        data=_hoje(),
    )
    db.add(transacao)
    db.commit()
    db.refresh(transacao)
    logger.info(
        "Transação %s (%s) gerada pelo pagamento da conta %s",
        transacao.id, tipo, conta.id,
    )

    sincronizar_por_id(db, transacao.projeto_id)
    return transacao


def buscar_transacao_espelho(db: Session, conta: Conta) -> Optional[Transacao]:
    """Transação já gerada para a conta: mesmo projeto, direção, descrição e valor."""
    tipo, prefixo = _direcao(conta)
    candidatas = db.query(Transacao).filter(
        Transacao.projeto_id == conta.projeto_id,
        Transacao.tipo == tipo,
        Transacao.descricao == f"{prefixo}{conta.descricao}",
    ).order_by(Transacao.created_at).all()
    valor = _arredondar(conta.valor)
    return next((t for t in candidatas if _arredondar(t.valor) == valor), None)


def registrar_pagamento_conta(
    db: Session, conta: Conta, status_anterior: Optional[str]
) -> Optional[Transacao]:
    """
    Reage à transição de uma conta para "pago".

    Gera uma transação por transição (pago -> pendente -> pago gera duas),
    a menos que ESPELHAR_PAGAMENTO_UMA_VEZ esteja ligado. Erros são
    registrados e não afetam a atualização da conta.
    """
    if status_anterior == StatusConta.PAGO.value or conta.status != StatusConta.PAGO.value:
        return None
    if not conta.projeto_id:
        return None

    try:
        if settings.ESPELHAR_PAGAMENTO_UMA_VEZ:
            transacao, _ = _garantir_espelho(db, conta)
            return transacao
        return _espelhar_conta(db, conta)
    except Exception:
        logger.exception(f"Falha ao gerar transação para a conta paga {conta.id}")
        db.rollback()
        return None


def garantir_transacao_conta_paga(db: Session, conta: Conta) -> Tuple[Transacao, bool]:
    """
    Versão idempotente do espelhamento, usada para reparar dados.

    Returns:
        Tupla (transação, criada)
    """
    if conta.status != StatusConta.PAGO.value:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Conta não está paga")
    if not conta.projeto_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Conta sem projeto vinculado")
    if conta.saldo_automatico:
        # O valor da conta de saldo muda a cada sincronização
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Conta de saldo automática: o recebimento já é registrado pelo pagamento",
        )

    return _garantir_espelho(db, conta)


def _garantir_espelho(db: Session, conta: Conta) -> Tuple[Transacao, bool]:
    existente = buscar_transacao_espelho(db, conta)
    if existente is not None:
        return existente, False
    return _espelhar_conta(db, conta), True
