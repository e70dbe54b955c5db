"""
Geração de PDFs: relatório financeiro de obra e orçamento.

Funções somente leitura: recebem entidades já carregadas e devolvem os
bytes do PDF. Erros de renderização sobem para o chamador.
"""
import io
import logging
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer

from core.config import settings
from services.orcamento_service import calcular_totais

logger = logging.getLogger(__name__)

COR_CABECALHO = colors.Color(0.2, 0.2, 0.2)

COLUNAS_TRANSACAO = ["data", "tipo", "descricao", "valor"]


def formatar_moeda(valor) -> str:
    """Formata no padrão brasileiro: R$ 1.234,56"""
    texto = f"{Decimal(str(valor)):,.2f}"
    return "R$ " + texto.replace(",", "_").replace(".", ",").replace("_", ".")


def formatar_data(data: Optional[str]) -> str:
    """YYYY-MM-DD -> DD/MM/YYYY"""
    if not data or len(data) != 10:
        return data or ""
    return f"{data[8:10]}/{data[5:7]}/{data[0:4]}"


# ==================================================
# AGREGAÇÃO
# ==================================================

def transacoes_para_dataframe(transacoes: Iterable) -> pd.DataFrame:
    registros = [
        {
            "data": t.data,
            "tipo": t.tipo,
            "descricao": t.descricao,
            "valor": Decimal(str(t.valor)),
        }
        for t in transacoes
    ]
    return pd.DataFrame(registros, columns=COLUNAS_TRANSACAO)


def filtrar_periodo(df: pd.DataFrame, periodo: Tuple[Optional[str], Optional[str]]) -> pd.DataFrame:
    """Filtra por data (comparação lexicográfica de YYYY-MM-DD, limites inclusivos)."""
    inicio, fim = periodo
    if inicio:
        df = df[df["data"] >= inicio]
    if fim:
        df = df[df["data"] <= fim]
    return df.sort_values("data").reset_index(drop=True)


def resumir_transacoes(df: pd.DataFrame) -> dict:
    receitas = sum(df.loc[df["tipo"] == "receita", "valor"], Decimal("0"))
    despesas = sum(df.loc[df["tipo"] == "despesa", "valor"], Decimal("0"))
    return {
        "receitas": receitas,
        "despesas": despesas,
        "saldo": receitas - despesas,
        "quantidade": int(len(df)),
    }


# ==================================================
# ESTILOS
# ==================================================

def _estilos() -> dict:
    styles = getSampleStyleSheet()
    normal = ParagraphStyle('Normal_Obra', parent=styles['Normal'], fontName='Helvetica', fontSize=9, leading=12)
    return {
        "normal": normal,
        "negrito": ParagraphStyle('Negrito_Obra', parent=normal, fontName='Helvetica-Bold'),
        "cabecalho": ParagraphStyle('Cabecalho_Obra', parent=normal, fontName='Helvetica-Bold', textColor=colors.white),
        "titulo": ParagraphStyle('Titulo_Obra', parent=styles['Heading1'], fontName='Helvetica-Bold', fontSize=18, spaceAfter=12),
        "subtitulo": ParagraphStyle('Subtitulo_Obra', parent=styles['Heading2'], fontName='Helvetica-Bold', fontSize=12, spaceBefore=10, spaceAfter=6),
    }


def _tabela(linhas: List[list], larguras: List[float]) -> Table:
    tabela = Table(linhas, colWidths=larguras, repeatRows=1)
    tabela.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), COR_CABECALHO),
        ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
        ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.whitesmoke]),
        ('PADDING', (0, 0), (-1, -1), 5),
    ]))
    return tabela


def _cabecalho_empresa(estilos: dict) -> list:
    linhas = [Paragraph(settings.EMPRESA_NOME, estilos["titulo"])]
    contato = " | ".join(c for c in [settings.EMPRESA_TELEFONE, settings.EMPRESA_EMAIL] if c)
    if contato:
        linhas.append(Paragraph(contato, estilos["normal"]))
    linhas.append(Spacer(1, 0.2 * inch))
    return linhas


def _renderizar(story: list) -> bytes:
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4, rightMargin=40, leftMargin=40, topMargin=40, bottomMargin=40)
    doc.build(story)
    return buffer.getvalue()


# ==================================================
# RELATÓRIO DE OBRA
# ==================================================

def gerar_relatorio_projeto_pdf(
    projeto,
    transacoes: Iterable,
    arquivos: Iterable,
    periodo: Tuple[Optional[str], Optional[str]] = (None, None),
    cliente=None,
) -> bytes:
    """Relatório financeiro do projeto no período (inicio, fim)."""
    estilos = _estilos()
    df = filtrar_periodo(transacoes_para_dataframe(transacoes), periodo)
    resumo = resumir_transacoes(df)
    inicio, fim = periodo

    story = _cabecalho_empresa(estilos)
    story.append(Paragraph(f"Relatório da Obra: {projeto.nome}", estilos["subtitulo"]))

    dados_projeto = [
        ["Cliente", cliente.nome if cliente else "-"],
        ["Tipo", projeto.tipo],
        ["Status", projeto.status],
        ["Data", formatar_data(projeto.data)],
        ["Valor contratado", formatar_moeda(projeto.valor)],
        ["Período", f"{formatar_data(inicio) or 'início'} a {formatar_data(fim) or 'hoje'}"],
    ]
    story.append(Table(
        [[Paragraph(r, estilos["negrito"]), Paragraph(str(v), estilos["normal"])] for r, v in dados_projeto],
        colWidths=[1.8 * inch, 4.4 * inch],
    ))

    story.append(Paragraph("Resumo financeiro", estilos["subtitulo"]))
    story.append(Table([
        ["Receitas", formatar_moeda(resumo["receitas"])],
        ["Despesas", formatar_moeda(resumo["despesas"])],
        ["Saldo", formatar_moeda(resumo["saldo"])],
    ], colWidths=[1.8 * inch, 2 * inch]))

    story.append(Paragraph(f"Transações ({resumo['quantidade']})", estilos["subtitulo"]))
    linhas = [[Paragraph(c, estilos["cabecalho"]) for c in ["Data", "Tipo", "Descrição", "Valor"]]]
    for row in df.itertuples(index=False):
        linhas.append([
            formatar_data(row.data),
            row.tipo,
            Paragraph(row.descricao, estilos["normal"]),
            formatar_moeda(row.valor),
        ])
    story.append(_tabela(linhas, [0.9 * inch, 0.9 * inch, 3.2 * inch, 1.2 * inch]))

    arquivos = list(arquivos)
    if arquivos:
        story.append(Paragraph("Arquivos anexados", estilos["subtitulo"]))
        linhas = [[Paragraph(c, estilos["cabecalho"]) for c in ["Arquivo", "Categoria", "Tamanho"]]]
        for arquivo in arquivos:
            linhas.append([
                Paragraph(arquivo.nome_arquivo, estilos["normal"]),
                getattr(arquivo, "categoria", "comprovante"),
                f"{arquivo.tamanho / 1024:.1f} KB",
            ])
        story.append(_tabela(linhas, [3.4 * inch, 1.6 * inch, 1.2 * inch]))

    logger.info(f"Gerando relatório PDF do projeto {projeto.id} ({resumo['quantidade']} transações)")
    return _renderizar(story)


# ==================================================
# ORÇAMENTO
# ==================================================

def gerar_orcamento_pdf(orcamento, cliente, itens: Iterable) -> bytes:
    estilos = _estilos()
    itens = list(itens)
    subtotal, total = calcular_totais(orcamento, itens)

    story = _cabecalho_empresa(estilos)
    story.append(Paragraph(f"Orçamento {orcamento.numero}", estilos["subtitulo"]))

    dados = [
        ["Cliente", cliente.nome if cliente else "-"],
        ["Contato", f"{cliente.contato} - {cliente.telefone}" if cliente else "-"],
        ["Local/Ambiente", orcamento.local or "-"],
        ["Tipo", orcamento.tipo or "-"],
        ["Validade", formatar_data(orcamento.validade)],
    ]
    story.append(Table(
        [[Paragraph(r, estilos["negrito"]), Paragraph(str(v), estilos["normal"])] for r, v in dados],
        colWidths=[1.8 * inch, 4.4 * inch],
    ))
    story.append(Spacer(1, 0.2 * inch))

    linhas = [[Paragraph(c, estilos["cabecalho"]) for c in ["Descrição", "Medidas", "Qtd", "Unitário", "Total"]]]
    for item in itens:
        medidas = "-"
        if item.largura and item.altura:
            medidas = f"{item.largura} x {item.altura}"
        detalhes = [item.descricao] + [d for d in [item.cor_espessura, item.linha, item.observacoes] if d]
        linhas.append([
            Paragraph("<br/>".join(detalhes), estilos["normal"]),
            medidas,
            str(item.quantidade),
            formatar_moeda(item.preco_unitario),
            formatar_moeda(item.total),
        ])
    story.append(_tabela(linhas, [2.6 * inch, 1.1 * inch, 0.6 * inch, 1 * inch, 1 * inch]))
    story.append(Spacer(1, 0.2 * inch))

    totais = [["Subtotal", formatar_moeda(subtotal)]]
    if orcamento.desconto:
        totais.append([f"Desconto ({orcamento.desconto}%)", formatar_moeda(subtotal - total)])
    totais.append([Paragraph("Total", estilos["negrito"]), Paragraph(formatar_moeda(total), estilos["negrito"])])
    story.append(Table(totais, colWidths=[4.3 * inch, 2 * inch], style=[('ALIGN', (0, 0), (-1, -1), 'RIGHT')]))

    if orcamento.observacoes:
        story.append(Paragraph("Observações", estilos["subtitulo"]))
        story.append(Paragraph(orcamento.observacoes, estilos["normal"]))

    logger.info(f"Gerando PDF do orçamento {orcamento.numero}")
    return _renderizar(story)
