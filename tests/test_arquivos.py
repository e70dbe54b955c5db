"""Tests for object storage and project files."""

import pytest

from services.file_storage_service import FileStorageService, ObjetoNaoEncontradoError


class TestFileStorageService:
    """Tests for the local object store."""

    def test_salvar_e_resolver(self, tmp_path):
        storage = FileStorageService(str(tmp_path))
        reserva = storage.solicitar_upload()
        object_id = reserva["object_path"].rsplit("/", 1)[1]

        caminho = storage.salvar(object_id, b"conteudo")

        assert caminho == reserva["object_path"]
        assert storage.baixar(storage.resolver(caminho)) == b"conteudo"

    def test_upload_url_aponta_para_o_objeto(self, tmp_path):
        reserva = FileStorageService(str(tmp_path)).solicitar_upload()

        assert reserva["upload_url"].endswith(reserva["object_path"].rsplit("/", 1)[1])

    @pytest.mark.parametrize("caminho", [
        "/objects/../../etc/passwd",
        "/uploads/0b6b1d2e-52a4-4c39-9a1e-2f1f0f3f8d11",
        "/objects/0b6b1d2e-52a4-4c39-9a1e-2f1f0f3f8d11",
    ])
    def test_caminhos_invalidos(self, tmp_path, caminho):
        """Only existing /objects/<uuid> paths resolve."""
        with pytest.raises(ObjetoNaoEncontradoError):
            FileStorageService(str(tmp_path)).resolver(caminho)

    def test_remover(self, tmp_path):
        storage = FileStorageService(str(tmp_path))
        object_id = storage.solicitar_upload()["object_path"].rsplit("/", 1)[1]
        caminho = storage.salvar(object_id, b"x")

        assert storage.remover(caminho) is True
        assert storage.remover(caminho) is False


class TestObjetosAPI:
    """Upload and download endpoints."""

    def test_upload_e_download(self, client):
        reserva = client.post("/api/objects/upload").json()
        object_id = reserva["object_path"].rsplit("/", 1)[1]

        envio = client.put(f"/api/objects/upload/{object_id}", content=b"%PDF-nota")
        assert envio.status_code == 200
        assert envio.json() == {"object_path": reserva["object_path"], "tamanho": 9}

        download = client.get(reserva["object_path"])
        assert download.status_code == 200
        assert download.content == b"%PDF-nota"

    def test_upload_id_invalido(self, client):
        assert client.put("/api/objects/upload/nao-e-uuid", content=b"x").status_code == 404

    def test_download_inexistente(self, client):
        assert client.get("/objects/0b6b1d2e-52a4-4c39-9a1e-2f1f0f3f8d11").status_code == 404


class TestArquivosDoProjeto:
    """Project file metadata endpoints."""

    def test_anexar_listar_excluir(self, client, criar_projeto_api):
        projeto = criar_projeto_api()

        response = client.post(f"/api/projects/{projeto['id']}/files", json={
            "nome_arquivo": "nf-123.pdf",
            "tipo_arquivo": "application/pdf",
            "tamanho": 51200,
            "categoria": "nota_fiscal_emitida",
            "object_path": "/objects/0b6b1d2e-52a4-4c39-9a1e-2f1f0f3f8d11",
        })
        assert response.status_code == 201
        arquivo = response.json()
        assert arquivo["projeto_id"] == projeto["id"]

        lista = client.get(f"/api/projects/{projeto['id']}/files").json()
        assert [a["categoria"] for a in lista] == ["nota_fiscal_emitida"]

        assert client.delete(f"/api/projects/{projeto['id']}/files/{arquivo['id']}").status_code == 204
        assert client.get(f"/api/projects/{projeto['id']}/files").json() == []

    def test_categoria_invalida(self, client, criar_projeto_api):
        projeto = criar_projeto_api()

        response = client.post(f"/api/projects/{projeto['id']}/files", json={
            "nome_arquivo": "foto.jpg",
            "tipo_arquivo": "image/jpeg",
            "tamanho": 10,
            "categoria": "foto",
            "object_path": "/objects/0b6b1d2e-52a4-4c39-9a1e-2f1f0f3f8d11",
        })

        assert response.status_code == 422

    def test_projeto_inexistente(self, client):
        response = client.post("/api/projects/nao-existe/files", json={
            "nome_arquivo": "foto.jpg",
            "tipo_arquivo": "image/jpeg",
            "tamanho": 10,
            "categoria": "comprovante",
            "object_path": "/objects/0b6b1d2e-52a4-4c39-9a1e-2f1f0f3f8d11",
        })

        assert response.status_code == 404


class TestExclusaoRemoveObjeto:
    """Deleting file metadata also removes the stored object."""

    def _enviar(self, client, conteudo=b"comprovante"):
        reserva = client.post("/api/objects/upload").json()
        object_id = reserva["object_path"].rsplit("/", 1)[1]
        assert client.put(f"/api/objects/upload/{object_id}", content=conteudo).status_code == 200
        return reserva["object_path"]

    def test_arquivo_do_projeto(self, client, criar_projeto_api):
        projeto = criar_projeto_api()
        object_path = self._enviar(client)
        arquivo = client.post(f"/api/projects/{projeto['id']}/files", json={
            "nome_arquivo": "nf.pdf",
            "tipo_arquivo": "application/pdf",
            "tamanho": 11,
            "categoria": "nota_fiscal_recebida",
            "object_path": object_path,
        }).json()
        assert client.get(object_path).status_code == 200

        assert client.delete(f"/api/projects/{projeto['id']}/files/{arquivo['id']}").status_code == 204

        assert client.get(object_path).status_code == 404

    def test_comprovante_da_transacao(self, client, criar_projeto_api):
        projeto = criar_projeto_api()
        transacao = client.post("/api/transactions", json={
            "projeto_id": projeto["id"],
            "tipo": "despesa",
            "descricao": "Vidro",
            "valor": "90.00",
            "data": "2026-10-15",
        }).json()
        object_path = self._enviar(client)
        arquivo = client.post("/api/transactions/files", json={
            "transacao_id": transacao["id"],
            "nome_arquivo": "recibo.png",
            "tipo_arquivo": "image/png",
            "tamanho": 11,
            "object_path": object_path,
        }).json()

        assert client.delete(f"/api/transactions/files/{arquivo['id']}").status_code == 204

        assert client.get(object_path).status_code == 404
