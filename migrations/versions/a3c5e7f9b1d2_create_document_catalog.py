"""create users, custom tours and document catalog tables

Revision ID: a3c5e7f9b1d2
Revises:
Create Date: 2026-10-18 10:12:44.318206

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'a3c5e7f9b1d2'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(length=120), nullable=False),
        sa.Column('first_name', sa.String(length=50), nullable=False),
        sa.Column('last_name', sa.String(length=50), nullable=False),
        sa.Column('user_type', sa.Enum('system_admin', 'provider_admin', 'tourist', name='usertype'), nullable=False),
        sa.Column('phone_number', sa.String(length=30), nullable=True),
        sa.Column('country', sa.String(length=100), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_date', sa.DateTime(), nullable=False),
        sa.Column('updated_date', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('users', schema=None) as batch_op:
        batch_op.create_index('ix_users_email', ['email'], unique=True)

    op.create_table('custom_tours',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tour_name', sa.String(length=200), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('status', sa.Enum('draft', 'published', 'completed', 'cancelled', name='tourstatus'), nullable=False),
        sa.Column('join_code', sa.String(length=10), nullable=False),
        sa.Column('max_tourists', sa.Integer(), nullable=False),
        sa.Column('remaining_tourists', sa.Integer(), nullable=False),
        sa.Column('group_chat_link', sa.String(length=500), nullable=True),
        sa.Column('created_by', sa.Integer(), nullable=True),
        sa.Column('created_date', sa.DateTime(), nullable=False),
        sa.Column('updated_date', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['created_by'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('custom_tours', schema=None) as batch_op:
        batch_op.create_index('ix_custom_tours_tour_name', ['tour_name'], unique=False)
        batch_op.create_index('ix_custom_tours_status', ['status'], unique=False)
        batch_op.create_index('ix_custom_tours_join_code', ['join_code'], unique=True)
        batch_op.create_index('ix_custom_tours_created_by', ['created_by'], unique=False)

    op.create_table('document_types',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('document_type_name', sa.String(length=120), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_required', sa.Boolean(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=True),
        sa.Column('created_date', sa.DateTime(), nullable=False),
        sa.Column('updated_date', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['created_by'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('document_type_name', name='uq_document_types_document_type_name')
    )
    with op.batch_alter_table('document_types', schema=None) as batch_op:
        batch_op.create_index('ix_document_types_created_by', ['created_by'], unique=False)

    op.create_table('tour_documents',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('custom_tour_id', sa.Integer(), nullable=False),
        sa.Column('document_name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('file_name', sa.String(length=255), nullable=False),
        sa.Column('file_url', sa.String(length=500), nullable=False),
        sa.Column('file_size', sa.BigInteger(), nullable=True),
        sa.Column('uploaded_by', sa.Integer(), nullable=False),
        sa.Column('is_visible_to_tourists', sa.Boolean(), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=True),
        sa.Column('created_date', sa.DateTime(), nullable=False),
        sa.Column('updated_date', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['custom_tour_id'], ['custom_tours.id']),
        sa.ForeignKeyConstraint(['uploaded_by'], ['users.id']),
        sa.ForeignKeyConstraint(['created_by'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('tour_documents', schema=None) as batch_op:
        batch_op.create_index('ix_tour_documents_custom_tour_id', ['custom_tour_id'], unique=False)
        batch_op.create_index('ix_tour_documents_uploaded_by', ['uploaded_by'], unique=False)


def downgrade():
    with op.batch_alter_table('tour_documents', schema=None) as batch_op:
        batch_op.drop_index('ix_tour_documents_uploaded_by')
        batch_op.drop_index('ix_tour_documents_custom_tour_id')
    op.drop_table('tour_documents')

    with op.batch_alter_table('document_types', schema=None) as batch_op:
        batch_op.drop_index('ix_document_types_created_by')
    op.drop_table('document_types')

    with op.batch_alter_table('custom_tours', schema=None) as batch_op:
        batch_op.drop_index('ix_custom_tours_created_by')
        batch_op.drop_index('ix_custom_tours_join_code')
        batch_op.drop_index('ix_custom_tours_status')
        batch_op.drop_index('ix_custom_tours_tour_name')
    op.drop_table('custom_tours')

    with op.batch_alter_table('users', schema=None) as batch_op:
        batch_op.drop_index('ix_users_email')
    op.drop_table('users')
