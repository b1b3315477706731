"""Create property management tables

Revision ID: 20261019_000001
Revises: None
Create Date: 2026-10-19

This migration creates the properties, units, tenants, maintenance_requests,
payments and documents tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261019_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Create the property management tables."""
    op.create_table(
        'properties',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=False),
        sa.Column(
            'property_type',
            sa.Enum('SINGLE_FAMILY', 'MULTI_FAMILY', 'APARTMENT', 'CONDO',
                    name='property_type', create_constraint=True),
            nullable=False,
            server_default='APARTMENT'
        ),
        sa.Column('price', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('bedrooms', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('bathrooms', sa.Float(), nullable=False, server_default='0'),
        sa.Column('size', sa.Float(), nullable=False, server_default='0'),
        sa.Column('features', sa.JSON(), nullable=False),
        sa.Column('images', sa.JSON(), nullable=False),
        sa.Column(
            'status',
            sa.Enum('AVAILABLE', 'OCCUPIED', 'MAINTENANCE', 'OFFLINE',
                    name='property_status', create_constraint=True),
            nullable=False,
            server_default='AVAILABLE'
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_properties_user_id', 'properties', ['user_id'])
    op.create_index('ix_properties_status', 'properties', ['status'])

    op.create_table(
        'units',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('unit_number', sa.String(length=50), nullable=False),
        sa.Column('bedrooms', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('bathrooms', sa.Float(), nullable=False, server_default='0'),
        sa.Column('size', sa.Float(), nullable=False, server_default='0'),
        sa.Column('rent', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column(
            'status',
            sa.Enum('VACANT', 'OCCUPIED', name='unit_status', create_constraint=True),
            nullable=False,
            server_default='VACANT'
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['property_id'],
            ['properties.id'],
            name='fk_units_property_id',
            ondelete='CASCADE'
        ),
    )
    op.create_index('ix_units_property_id', 'units', ['property_id'])

    op.create_table(
        'tenants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('unit_id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=False),
        sa.Column('emergency_contact', sa.String(length=255), nullable=True),
        sa.Column('lease_start', sa.Date(), nullable=False),
        sa.Column('lease_end', sa.Date(), nullable=False),
        sa.Column('rent_amount', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('deposit_amount', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('payment_due_day', sa.Integer(), nullable=False, server_default='1'),
        sa.Column(
            'status',
            sa.Enum('ACTIVE', 'PENDING', 'PAST', name='tenant_status', create_constraint=True),
            nullable=False,
            server_default='PENDING'
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['unit_id'],
            ['units.id'],
            name='fk_tenants_unit_id',
            ondelete='CASCADE'
        ),
    )
    # One tenant per unit
    op.create_index('ix_tenants_unit_id', 'tenants', ['unit_id'], unique=True)

    op.create_table(
        'maintenance_requests',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column(
            'priority',
            sa.Enum('LOW', 'MEDIUM', 'HIGH', 'URGENT',
                    name='maintenance_priority', create_constraint=True),
            nullable=False,
            server_default='MEDIUM'
        ),
        sa.Column(
            'category',
            sa.Enum('PLUMBING', 'ELECTRICAL', 'HVAC', 'APPLIANCE', 'STRUCTURAL', 'OTHER',
                    name='maintenance_category', create_constraint=True),
            nullable=False,
            server_default='OTHER'
        ),
        sa.Column(
            'status',
            sa.Enum('OPEN', 'IN_PROGRESS', 'COMPLETED',
                    name='maintenance_status', create_constraint=True),
            nullable=False,
            server_default='OPEN'
        ),
        sa.Column('assigned_to', sa.String(length=255), nullable=True),
        sa.Column('cost', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('images', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['property_id'],
            ['properties.id'],
            name='fk_maintenance_requests_property_id',
            ondelete='CASCADE'
        ),
        # NO ACTION: SQL Server rejects a second cascade path from properties
        sa.ForeignKeyConstraint(
            ['tenant_id'],
            ['tenants.id'],
            name='fk_maintenance_requests_tenant_id',
            ondelete='NO ACTION'
        ),
    )
    op.create_index('ix_maintenance_requests_property_id', 'maintenance_requests', ['property_id'])
    op.create_index('ix_maintenance_requests_tenant_id', 'maintenance_requests', ['tenant_id'])
    op.create_index('ix_maintenance_requests_status', 'maintenance_requests', ['status'])
    op.create_index('ix_maintenance_requests_created_at', 'maintenance_requests', ['created_at'])

    op.create_table(
        'payments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column(
            'status',
            sa.Enum('PENDING', 'COMPLETED', 'FAILED', name='payment_status', create_constraint=True),
            nullable=False,
            server_default='PENDING'
        ),
        sa.Column('method', sa.String(length=50), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['tenant_id'],
            ['tenants.id'],
            name='fk_payments_tenant_id',
            ondelete='CASCADE'
        ),
    )
    op.create_index('ix_payments_tenant_id', 'payments', ['tenant_id'])
    op.create_index('ix_payments_created_at', 'payments', ['created_at'])

    op.create_table(
        'documents',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column(
            'type',
            sa.Enum('LEASE', 'APPLICATION', 'AGREEMENT', 'ID', 'INSURANCE', 'OTHER',
                    name='document_type', create_constraint=True),
            nullable=False
        ),
        sa.Column(
            'category',
            sa.Enum('TENANT', 'PROPERTY', 'MAINTENANCE', 'FINANCIAL', 'OTHER',
                    name='document_category', create_constraint=True),
            nullable=False,
            server_default='OTHER'
        ),
        sa.Column('url', sa.String(length=1000), nullable=False),
        sa.Column('file_size', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('mime_type', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['property_id'],
            ['properties.id'],
            name='fk_documents_property_id',
            ondelete='CASCADE'
        ),
        sa.ForeignKeyConstraint(
            ['tenant_id'],
            ['tenants.id'],
            name='fk_documents_tenant_id',
            ondelete='NO ACTION'
        ),
    )
    op.create_index('ix_documents_property_id', 'documents', ['property_id'])
    op.create_index('ix_documents_tenant_id', 'documents', ['tenant_id'])


def downgrade() -> None:
    """Drop the property management tables."""
    op.drop_index('ix_documents_tenant_id', table_name='documents')
    op.drop_index('ix_documents_property_id', table_name='documents')
    op.drop_table('documents')

    op.drop_index('ix_payments_created_at', table_name='payments')
    op.drop_index('ix_payments_tenant_id', table_name='payments')
    op.drop_table('payments')

    op.drop_index('ix_maintenance_requests_created_at', table_name='maintenance_requests')
    op.drop_index('ix_maintenance_requests_status', table_name='maintenance_requests')
    op.drop_index('ix_maintenance_requests_tenant_id', table_name='maintenance_requests')
    op.drop_index('ix_maintenance_requests_property_id', table_name='maintenance_requests')
    op.drop_table('maintenance_requests')

    op.drop_index('ix_tenants_unit_id', table_name='tenants')
    op.drop_table('tenants')

    op.drop_index('ix_units_property_id', table_name='units')
    op.drop_table('units')

    op.drop_index('ix_properties_status', table_name='properties')
    op.drop_index('ix_properties_user_id', table_name='properties')
    op.drop_table('properties')
