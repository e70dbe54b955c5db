"""tabelas iniciais

Revision ID: c1a2b3d4e5f6
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = 'c1a2b3d4e5f6'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp() -> sa.Column:
    return sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False)


def upgrade() -> None:
    """Upgrade schema - Cria as tabelas de clientes, obras, financeiro e orçamentos."""

    # Clientes
    op.create_table(
        'clientes',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('nome', sa.String(length=150), nullable=False),
        sa.Column('contato', sa.String(length=150), nullable=False),
        sa.Column('email', sa.String(length=150), nullable=True),
        sa.Column('telefone', sa.String(length=30), nullable=False),
        sa.Column('endereco', sa.String(length=255), nullable=True),
        sa.Column('cnpj_cpf', sa.String(length=20), nullable=True),
        sa.Column('chave_sistema', sa.String(length=50), nullable=True),
        _timestamp(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('chave_sistema'),
    )

    # Projetos (obras)
    op.create_table(
        'projetos',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('nome', sa.String(length=150), nullable=False),
        sa.Column('cliente_id', sa.String(length=36), nullable=False),
        sa.Column('descricao', sa.Text(), nullable=True),
        sa.Column('valor', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('tipo', sa.String(length=30), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('data', sa.String(length=10), nullable=False),
        _timestamp(),
        sa.ForeignKeyConstraint(['cliente_id'], ['clientes.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_projetos_cliente_id', 'projetos', ['cliente_id'])
    op.create_index('ix_projetos_status', 'projetos', ['status'])

    # Transações
    op.create_table(
        'transacoes',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('projeto_id', sa.String(length=36), nullable=False),
        sa.Column('tipo', sa.String(length=20), nullable=False),
        sa.Column('descricao', sa.String(length=255), nullable=False),
        sa.Column('valor', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('data', sa.String(length=10), nullable=False),
        _timestamp(),
        sa.ForeignKeyConstraint(['projeto_id'], ['projetos.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_transacoes_projeto_id', 'transacoes', ['projeto_id'])

    # Contas a pagar / receber
    op.create_table(
        'contas',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('tipo', sa.String(length=20), nullable=False),
        sa.Column('descricao', sa.String(length=255), nullable=False),
        sa.Column('valor', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('data_vencimento', sa.String(length=10), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('projeto_id', sa.String(length=36), nullable=True),
        sa.Column('data', sa.String(length=10), nullable=False),
        sa.Column('saldo_automatico', sa.Boolean(), nullable=False, server_default=sa.false()),
        _timestamp(),
        sa.ForeignKeyConstraint(['projeto_id'], ['projetos.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_contas_tipo', 'contas', ['tipo'])
    op.create_index('ix_contas_status', 'contas', ['status'])
    op.create_index('ix_contas_projeto_id', 'contas', ['projeto_id'])
    op.create_index(
        'ux_contas_saldo_automatico_projeto',
        'contas',
        ['projeto_id'],
        unique=True,
        sqlite_where=sa.text('saldo_automatico = 1'),
        postgresql_where=sa.text('saldo_automatico = true'),
    )

    # Orçamentos
    op.create_table(
        'orcamentos',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('cliente_id', sa.String(length=36), nullable=False),
        sa.Column('numero', sa.String(length=30), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('validade', sa.String(length=10), nullable=False),
        sa.Column('local', sa.String(length=150), nullable=True),
        sa.Column('tipo', sa.String(length=50), nullable=True),
        sa.Column('desconto', sa.Numeric(precision=5, scale=2), nullable=False),
        sa.Column('observacoes', sa.Text(), nullable=True),
        _timestamp(),
        sa.ForeignKeyConstraint(['cliente_id'], ['clientes.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_orcamentos_cliente_id', 'orcamentos', ['cliente_id'])
    op.create_index('ix_orcamentos_numero', 'orcamentos', ['numero'])

    op.create_table(
        'itens_orcamento',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('orcamento_id', sa.String(length=36), nullable=False),
        sa.Column('descricao', sa.String(length=255), nullable=False),
        sa.Column('quantidade', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('largura', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('altura', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('cor_espessura', sa.String(length=100), nullable=True),
        sa.Column('cor_perfil', sa.String(length=100), nullable=True),
        sa.Column('cor_acessorio', sa.String(length=100), nullable=True),
        sa.Column('linha', sa.String(length=100), nullable=True),
        sa.Column('data_entrega', sa.String(length=10), nullable=True),
        sa.Column('observacoes', sa.Text(), nullable=True),
        sa.Column('preco_unitario', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('total', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('imagem_url', sa.String(length=500), nullable=True),
        _timestamp(),
        sa.ForeignKeyConstraint(['orcamento_id'], ['orcamentos.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_itens_orcamento_orcamento_id', 'itens_orcamento', ['orcamento_id'])

    # Arquivos
    op.create_table(
        'arquivos_projeto',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('projeto_id', sa.String(length=36), nullable=False),
        sa.Column('nome_arquivo', sa.String(length=255), nullable=False),
        sa.Column('tipo_arquivo', sa.String(length=100), nullable=False),
        sa.Column('tamanho', sa.Integer(), nullable=False),
        sa.Column('categoria', sa.String(length=50), nullable=False),
        sa.Column('object_path', sa.String(length=500), nullable=False),
        _timestamp(),
        sa.ForeignKeyConstraint(['projeto_id'], ['projetos.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_arquivos_projeto_projeto_id', 'arquivos_projeto', ['projeto_id'])

    op.create_table(
        'arquivos_transacao',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('transacao_id', sa.String(length=36), nullable=False),
        sa.Column('nome_arquivo', sa.String(length=255), nullable=False),
        sa.Column('tipo_arquivo', sa.String(length=100), nullable=False),
        sa.Column('tamanho', sa.Integer(), nullable=False),
        sa.Column('object_path', sa.String(length=500), nullable=False),
        _timestamp(),
        sa.ForeignKeyConstraint(['transacao_id'], ['transacoes.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_arquivos_transacao_transacao_id', 'arquivos_transacao', ['transacao_id'])


def downgrade() -> None:
    """Downgrade schema - Remove todas as tabelas."""
    op.drop_table('arquivos_transacao')
    op.drop_table('arquivos_projeto')
    op.drop_table('itens_orcamento')
    op.drop_table('orcamentos')
    op.drop_index('ux_contas_saldo_automatico_projeto', table_name='contas')
    op.drop_table('contas')
    op.drop_table('transacoes')
    op.drop_table('projetos')
    op.drop_table('clientes')
