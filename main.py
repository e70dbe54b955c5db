from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware
from dotenv import load_dotenv
import logging
import os

load_dotenv()
from core.config import settings
from core.logging import configurar_logging
from db import criar_tabelas
from routers.clientes_router import router as clientes_router
from routers.projetos_router import router as projetos_router
from routers.transacoes_router import router as transacoes_router
from routers.contas_router import router as contas_router
from routers.orcamentos_router import router as orcamentos_router
from routers.objetos_router import router as objetos_router, download_router
from routers.dashboard_router import router as dashboard_router

configurar_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DATABASE_URL.startswith("sqlite"):
        criar_tabelas()
    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} iniciado ({settings.ENVIRONMENT})")
    yield


app = FastAPI(
    title="Gestão de Obras API",
    description="""
API de gestão para vidraçaria: clientes, obras, financeiro e orçamentos.

Fluxo:
1. Cadastro de cliente
2. Projeto (obra) com valor contratado
3. Lançamento de receitas e despesas
4. Contas a receber sincronizadas com o saldo de cada obra
""",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=["*"])

cors_origins = [
    value
    for key, value in os.environ.items()
    if key.startswith("CORS_ORIGIN") and value.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_origin_regex=r"http://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Captura exceções não tratadas para que a resposta 500
    passe pelo CORSMiddleware e inclua os headers corretos."""
    logger.exception(f"Erro não tratado em {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"detail": f"Erro interno do servidor: {str(exc)}"},
    )


app.include_router(clientes_router, prefix="/api")
app.include_router(projetos_router, prefix="/api")
app.include_router(transacoes_router, prefix="/api")
app.include_router(contas_router, prefix="/api")
app.include_router(orcamentos_router, prefix="/api")
app.include_router(objetos_router, prefix="/api")
app.include_router(dashboard_router, prefix="/api")
app.include_router(download_router)
