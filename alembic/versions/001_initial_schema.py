"""initial schema: admin accounts, departments, news/events, notifications

Revision ID: 001
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    bind = op.get_bind()
    is_sqlite = bind.dialect.name == 'sqlite'

    json_type = sa.JSON() if is_sqlite else postgresql.JSONB(astext_type=sa.Text())
    timestamp_default = sa.text("(datetime('now'))") if is_sqlite else sa.text('now()')

    # ------------------------------------------------------------------
    # admin_accounts
    # ------------------------------------------------------------------
    op.create_table(
        'admin_accounts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('admin_id', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False, server_default='admin'),
        sa.Column('permissions', json_type, nullable=False, server_default='[]'),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('department', sa.String(length=255), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('last_login', sa.DateTime(), nullable=True),
        sa.Column('failed_login_attempts', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('lock_until', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_admin_accounts_admin_id', 'admin_accounts', ['admin_id'], unique=True)
    op.create_index('ix_admin_accounts_email', 'admin_accounts', ['email'], unique=True)
    op.create_index('ix_admin_accounts_is_active', 'admin_accounts', ['is_active'])

    # ------------------------------------------------------------------
    # departments
    # ------------------------------------------------------------------
    op.create_table(
        'departments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('code', sa.String(length=20), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('head_of_dept', sa.String(length=255), nullable=False),
        sa.Column('founded_year', sa.Integer(), nullable=False),
        sa.Column('total_faculty', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('image_url', sa.String(length=1024), nullable=False, server_default=''),
        sa.Column('path', sa.String(length=255), nullable=False),
        sa.Column('facilities', json_type, nullable=False, server_default='[]'),
        sa.Column('research_areas', json_type, nullable=False, server_default='[]'),
        sa.Column('contact_email', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('contact_phone', sa.String(length=50), nullable=False, server_default=''),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
        sa.UniqueConstraint('code'),
    )
    op.create_index('ix_departments_id', 'departments', ['id'])
    op.create_index('ix_departments_path', 'departments', ['path'], unique=True)
    op.create_index('ix_departments_is_active', 'departments', ['is_active'])

    # ------------------------------------------------------------------
    # news_events
    # ------------------------------------------------------------------
    op.create_table(
        'news_events',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('category', sa.String(length=20), nullable=False, server_default='News'),
        sa.Column('location', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('start_time', sa.String(length=20), nullable=False, server_default=''),
        sa.Column('end_time', sa.String(length=20), nullable=False, server_default=''),
        sa.Column('event_type', sa.String(length=20), nullable=False, server_default='Other'),
        sa.Column('image_url', sa.String(length=1024), nullable=False, server_default=''),
        sa.Column('facebook_embed_url', sa.String(length=1024), nullable=False, server_default=''),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_news_events_id', 'news_events', ['id'])
    op.create_index('ix_news_events_date', 'news_events', ['date'])
    op.create_index('ix_news_events_is_active', 'news_events', ['is_active'])

    # ------------------------------------------------------------------
    # notifications
    # ------------------------------------------------------------------
    op.create_table(
        'notifications',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.Column('category', sa.String(length=20), nullable=False, server_default='General'),
        sa.Column('priority', sa.String(length=20), nullable=False, server_default='Normal'),
        sa.Column('department', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('target_audience', sa.String(length=20), nullable=False, server_default='All'),
        sa.Column('image_url', sa.String(length=1024), nullable=False, server_default=''),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('expires_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_notifications_id', 'notifications', ['id'])
    op.create_index('ix_notifications_date', 'notifications', ['date'])
    op.create_index('ix_notifications_target_audience', 'notifications', ['target_audience'])
    op.create_index('ix_notifications_is_active', 'notifications', ['is_active'])


def downgrade() -> None:
    op.drop_table('notifications')
    op.drop_table('news_events')
    op.drop_table('departments')
    op.drop_table('admin_accounts')
