# services/cliente_service.py
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from models.cliente import Cliente
from core.config import settings
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

CHAVE_CLIENTE_ADMINISTRATIVO = "administrativo"


def listar_clientes(db: Session) -> List[Cliente]:
    return db.query(Cliente).order_by(Cliente.created_at.desc()).all()


def buscar_cliente(db: Session, id: str) -> Optional[Cliente]:
    return db.query(Cliente).filter(Cliente.id == id).first()


def criar_cliente(db: Session, dados: dict) -> Cliente:
    db_cliente = Cliente(**dados)
    db.add(db_cliente)
    db.commit()
    db.refresh(db_cliente)
    return db_cliente


def atualizar_cliente(db: Session, id: str, dados: dict) -> Optional[Cliente]:
    db_cliente = buscar_cliente(db, id)
    if not db_cliente:
        return None
    for key, value in dados.items():
        setattr(db_cliente, key, value)
    db.commit()
    db.refresh(db_cliente)
    return db_cliente


def deletar_cliente(db: Session, id: str) -> bool:
    db_cliente = buscar_cliente(db, id)
    if not db_cliente:
        return False
    db.delete(db_cliente)
    db.commit()
    return True


def obter_ou_criar_cliente_administrativo(db: Session) -> Cliente:
    """
    Retorna o cliente interno usado pelos projetos administrativos,
    criando-o na primeira chamada.
    """
    cliente = db.query(Cliente).filter(
        Cliente.chave_sistema == CHAVE_CLIENTE_ADMINISTRATIVO
    ).first()
    if cliente:
        return cliente

    nome = settings.CLIENTE_ADMINISTRATIVO_NOME
    cliente = Cliente(
        nome=nome,
        contato=nome,
        telefone="-",
        chave_sistema=CHAVE_CLIENTE_ADMINISTRATIVO,
    )
    db.add(cliente)
    try:
        db.commit()
    except IntegrityError:
        # Outra requisição criou o cliente entre a consulta e o insert
        db.rollback()
        return db.query(Cliente).filter(
            Cliente.chave_sistema == CHAVE_CLIENTE_ADMINISTRATIVO
        ).one()

    db.refresh(cliente)
    logger.info(f"Cliente administrativo criado: {cliente.id}")
    return cliente
