"""initial schema: companies and users

Revision ID: 0001_initial
Revises: 
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None

company_type = sa.Enum(
    'Corporations', 'NonProfit', 'Cooperative', 'Sole Proprietorship',
    name='company_type',
)

def upgrade():
    op.create_table('companies',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.String(length=3000), nullable=False, server_default=''),
        sa.Column('amount_of_employees', sa.Integer(), nullable=False),
        sa.Column('registered', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('type', company_type, nullable=False),
    )
    op.create_index('ix_companies_name', 'companies', ['name'], unique=True)
    op.create_index('ix_companies_amount_of_employees', 'companies', ['amount_of_employees'])
    op.create_index('ix_companies_registered', 'companies', ['registered'])
    op.create_index('ix_companies_type', 'companies', ['type'])
    op.create_table('users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_name', 'users', ['name'], unique=True)

def downgrade():
    op.drop_index('ix_users_name', table_name='users')
    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('users')
    op.drop_index('ix_companies_type', table_name='companies')
    op.drop_index('ix_companies_registered', table_name='companies')
    op.drop_index('ix_companies_amount_of_employees', table_name='companies')
    op.drop_index('ix_companies_name', table_name='companies')
    op.drop_table('companies')
    company_type.drop(op.get_bind(), checkfirst=True)
