"""
Service para armazenamento de arquivos enviados (comprovantes, notas fiscais).

Estrutura de diretórios:
{STORAGE_DIR}/uploads/{object_id}

O caminho público de um objeto é "/objects/{object_id}"; é esse valor que
fica gravado em ArquivoProjeto.object_path / ArquivoTransacao.object_path.
"""
import logging
import uuid
from pathlib import Path
from typing import Optional

from core.config import settings

logger = logging.getLogger(__name__)

PREFIXO_OBJETO = "/objects/"


class ObjetoNaoEncontradoError(Exception):
    """Objeto inexistente ou caminho fora do padrão /objects/<id>."""

    def __init__(self, object_path: str = ""):
        super().__init__(f"Objeto não encontrado: {object_path}")
        self.object_path = object_path


class FileStorageService:
    """Service para armazenamento local de objetos enviados pelo usuário."""

    def __init__(self, base_dir: Optional[str] = None):
        self.base_dir = Path(base_dir or settings.STORAGE_DIR) / "uploads"

    @staticmethod
    def _ensure_directory(path: Path) -> None:
        """Cria diretório se não existir."""
        path.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _validar_object_id(object_id: str) -> str:
        """Aceita apenas UUIDs para impedir path traversal."""
        try:
            return str(uuid.UUID(object_id))
        except (ValueError, AttributeError):
            raise ObjetoNaoEncontradoError(object_id)

    def solicitar_upload(self) -> dict:
        """
        Reserva um novo objeto e retorna a URL para envio do conteúdo.

        Returns:
            {"upload_url": "<url PUT>", "object_path": "/objects/<id>"}
        """
        object_id = str(uuid.uuid4())
        upload_url = f"{settings.STORAGE_PUBLIC_URL.rstrip('/')}/{object_id}"
        logger.info(f"URL de upload gerada para objeto {object_id}")
        return {"upload_url": upload_url, "object_path": f"{PREFIXO_OBJETO}{object_id}"}

    def salvar(self, object_id: str, conteudo: bytes) -> str:
        """
        Grava o conteúdo do objeto.

        Returns:
            Caminho público do objeto (/objects/<id>)
        """
        object_id = self._validar_object_id(object_id)
        self._ensure_directory(self.base_dir)

        file_path = self.base_dir / object_id
        with open(file_path, 'wb') as f:
            f.write(conteudo)

        logger.info(f"Objeto salvo: {file_path} ({len(conteudo)} bytes)")
        return f"{PREFIXO_OBJETO}{object_id}"

    def resolver(self, object_path: str) -> Path:
        """Converte "/objects/<id>" no arquivo local correspondente."""
        if not object_path.startswith(PREFIXO_OBJETO):
            raise ObjetoNaoEncontradoError(object_path)

        object_id = self._validar_object_id(object_path[len(PREFIXO_OBJETO):])
        file_path = self.base_dir / object_id
        if not file_path.exists():
            raise ObjetoNaoEncontradoError(object_path)
        return file_path

    def baixar(self, arquivo: Path) -> bytes:
        """Lê o conteúdo de um objeto resolvido."""
        with open(arquivo, 'rb') as f:
            return f.read()

    def remover(self, object_path: str) -> bool:
        """Remove o objeto; retorna False se ele não existir."""
        try:
            arquivo = self.resolver(object_path)
        except ObjetoNaoEncontradoError:
            return False
        arquivo.unlink()
        logger.info(f"Objeto removido: {arquivo}")
        return True
