"""Initial Listing Launchpad schema

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19

Profiles, role assignments, properties, service requests with photos,
contact forms and the audit log. Timestamps are BIGINT nanoseconds since epoch.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ROLE = sa.Enum('ADMIN', 'USER', 'GUEST', name='role')
URGENCY = sa.Enum('LOW', 'MEDIUM', 'HIGH', 'INSPECTION_SHOWSTOPPER', name='urgency')
STATUS = sa.Enum('PENDING', 'SCHEDULED', 'IN_PROGRESS', 'COMPLETED', name='servicerequeststatus')
AUDIT_ACTION = sa.Enum(
    'PROPERTY_CREATED', 'SERVICE_REQUEST_CREATED', 'STATUS_CHANGED',
    'PHOTO_ATTACHED', 'ROLE_ASSIGNED', 'CONTACT_FORM_RECEIVED',
    name='auditaction',
)


def upgrade() -> None:
    # === USER PROFILES ===
    op.create_table(
        'user_profiles',
        sa.Column('principal', sa.String(128), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('role', ROLE, nullable=False),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
        sa.Column('updated_at', sa.BigInteger(), nullable=False),
    )

    # === ROLE ASSIGNMENTS ===
    op.create_table(
        'role_assignments',
        sa.Column('principal', sa.String(128), primary_key=True),
        sa.Column('role', ROLE, nullable=False),
        sa.Column('assigned_by', sa.String(128), nullable=True),
        sa.Column('assigned_at', sa.BigInteger(), nullable=False),
    )

    # === PROPERTIES ===
    op.create_table(
        'properties',
        sa.Column('id', sa.String(128), primary_key=True),
        sa.Column('address', sa.String(255), nullable=False),
        sa.Column('city', sa.String(100), nullable=False),
        sa.Column('state', sa.String(50), nullable=False),
        sa.Column('zip', sa.String(20), nullable=False),
        sa.Column('owner', sa.String(128), nullable=False, index=True),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
    )

    # === SERVICE REQUESTS ===
    op.create_table(
        'service_requests',
        sa.Column('seq', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('property_id', sa.String(128), sa.ForeignKey('properties.id'), nullable=False, index=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('urgency', URGENCY, nullable=False),
        sa.Column('status', STATUS, nullable=False, index=True),
        sa.Column('created_by', sa.String(128), nullable=False, index=True),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
        sa.Column('updated_at', sa.BigInteger(), nullable=False),
    )

    # === SERVICE REQUEST PHOTOS (append only) ===
    op.create_table(
        'service_request_photos',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('request_seq', sa.Integer(), sa.ForeignKey('service_requests.seq', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('content_ref', sa.String(1024), nullable=False),
        sa.Column('uploaded_by', sa.String(128), nullable=False),
        sa.Column('uploaded_at', sa.BigInteger(), nullable=False),
    )

    # === CONTACT FORMS ===
    op.create_table(
        'contact_forms',
        sa.Column('seq', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column('phone', sa.Text(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('submitted_at', sa.BigInteger(), nullable=False),
    )

    # === AUDIT LOG ===
    op.create_table(
        'audit_log',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('actor', sa.String(128), nullable=True, index=True),
        sa.Column('action', AUDIT_ACTION, nullable=False, index=True),
        sa.Column('resource_type', sa.String(50), nullable=False),
        sa.Column('resource_id', sa.String(128), nullable=False, index=True),
        sa.Column('details', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.BigInteger(), nullable=False, index=True),
    )


def downgrade() -> None:
    op.drop_table('audit_log')
    op.drop_table('contact_forms')
    op.drop_table('service_request_photos')
    op.drop_table('service_requests')
    op.drop_table('properties')
    op.drop_table('role_assignments')
    op.drop_table('user_profiles')

    bind = op.get_bind()
    for enum_type in (AUDIT_ACTION, STATUS, URGENCY, ROLE):
        enum_type.drop(bind, checkfirst=True)
