# models/__init__.py
"""
Importações dos modelos em ordem correta para evitar problemas de relacionamento.

ORDEM IMPORTANTE:
1. Base (do db.py)
2. Cliente (sem FK)
3. Projeto e Orçamento (FK para cliente)
4. Modelos que dependem de projeto
"""

# Importa Base do db.py
from db import Base

# 1. Modelos independentes
from .cliente import Cliente

# 2. Modelos com FK para cliente
from .projeto import Projeto
from .orcamento import Orcamento, ItemOrcamento

# 3. Modelos com FK para projeto
from .transacao import Transacao
from .conta import Conta
from .arquivo import ArquivoProjeto, ArquivoTransacao

__all__ = [
    "Base",
    "Cliente",
    "Projeto",
    "Orcamento",
    "ItemOrcamento",
    "Transacao",
    "Conta",
    "ArquivoProjeto",
    "ArquivoTransacao",
]
