from .cliente_schema import (
    ClienteCreate,
    ClienteUpdate,
    ClienteOut
)

from .projeto_schema import (
    ProjetoCreate,
    ProjetoUpdate,
    ProjetoStatusUpdate,
    ProjetoOut,
    StatusProjeto
)

from .transacao_schema import (
    TransacaoCreate,
    TransacaoUpdate,
    TransacaoOut,
    TipoTransacao
)

from .conta_schema import (
    ContaCreate,
    ContaUpdate,
    ContaOut,
    GarantirTransacaoOut,
    StatusConta,
    TipoConta
)

from .orcamento_schema import (
    OrcamentoCreate,
    OrcamentoUpdate,
    OrcamentoOut,
    OrcamentoDetalhe,
    ItemOrcamentoCreate,
    ItemOrcamentoOut,
    StatusOrcamento
)

from .arquivo_schema import (
    ArquivoProjetoCreate,
    ArquivoProjetoOut,
    ArquivoTransacaoCreate,
    ArquivoTransacaoOut,
    UploadURLResponse
)

from .dashboard_schema import (
    DashboardStats,
    GraficoMensal
)

__all__ = [
    "ClienteCreate",
    "ClienteUpdate",
    "ClienteOut",

    "ProjetoCreate",
    "ProjetoUpdate",
    "ProjetoStatusUpdate",
    "ProjetoOut",
    "StatusProjeto",

    "TransacaoCreate",
    "TransacaoUpdate",
    "TransacaoOut",
    "TipoTransacao",

    # Contas a pagar / receber
    "ContaCreate",
    "ContaUpdate",
    "ContaOut",
    "GarantirTransacaoOut",
    "StatusConta",
    "TipoConta",

    # Orçamentos
    "OrcamentoCreate",
    "OrcamentoUpdate",
    "OrcamentoOut",
    "OrcamentoDetalhe",
    "ItemOrcamentoCreate",
    "ItemOrcamentoOut",
    "StatusOrcamento",

    "ArquivoProjetoCreate",
    "ArquivoProjetoOut",
    "ArquivoTransacaoCreate",
    "ArquivoTransacaoOut",
    "UploadURLResponse",

    "DashboardStats",
    "GraficoMensal",
]
