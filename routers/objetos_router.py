# routers/objetos_router.py
import logging

from fastapi import APIRouter, HTTPException, Request, Response

from services.file_storage_service import FileStorageService, ObjetoNaoEncontradoError
from schemas.arquivo_schema import UploadURLResponse

logger = logging.getLogger(__name__)

# Rotas de API (/api/objects/...)
router = APIRouter(prefix="/objects", tags=["Arquivos"])

# Download público (/objects/<id>), sem o prefixo /api
download_router = APIRouter(tags=["Arquivos"])


@router.post("/upload", response_model=UploadURLResponse)
def route_solicitar_upload():
    return FileStorageService().solicitar_upload()


@router.put("/upload/{object_id}", status_code=200)
async def route_enviar_objeto(object_id: str, request: Request):
    conteudo = await request.body()
    try:
        object_path = FileStorageService().salvar(object_id, conteudo)
    except ObjetoNaoEncontradoError:
        raise HTTPException(status_code=404, detail="Objeto não encontrado")
    return {"object_path": object_path, "tamanho": len(conteudo)}


@download_router.get("/objects/{object_id}")
def route_baixar_objeto(object_id: str):
    storage = FileStorageService()
    try:
        arquivo = storage.resolver(f"/objects/{object_id}")
    except ObjetoNaoEncontradoError:
        raise HTTPException(status_code=404, detail="Objeto não encontrado")
    return Response(content=storage.baixar(arquivo), media_type="application/octet-stream")
