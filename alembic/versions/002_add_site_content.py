"""add faculty, downloads, research, sliders and site settings

Revision ID: 002
Revises: 001
Create Date: 2026-10-18 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '002'
down_revision = '001'
branch_labels = None
depends_on = None


def upgrade() -> None:
    bind = op.get_bind()
    is_sqlite = bind.dialect.name == 'sqlite'

    json_type = sa.JSON() if is_sqlite else postgresql.JSONB(astext_type=sa.Text())
    timestamp_default = sa.text("(datetime('now'))") if is_sqlite else sa.text('now()')

    # ------------------------------------------------------------------
    # faculty
    # ------------------------------------------------------------------
    op.create_table(
        'faculty',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('department_id', sa.Integer(), nullable=False),
        sa.Column('designation', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=False, server_default=''),
        sa.Column('image_url', sa.String(length=1024), nullable=False, server_default=''),
        sa.Column('education', sa.String(length=200), nullable=False, server_default=''),
        sa.Column('specialization', sa.String(length=150), nullable=False, server_default=''),
        sa.Column('bio', sa.Text(), nullable=False, server_default=''),
        sa.Column('research_interest', sa.String(length=300), nullable=False, server_default=''),
        sa.Column('experience', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('publications', json_type, nullable=False, server_default='[]'),
        sa.Column('social_links', json_type, nullable=False, server_default='{}'),
        sa.Column('office_location', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('office_hours', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('joining_date', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.ForeignKeyConstraint(['department_id'], ['departments.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_faculty_id', 'faculty', ['id'])
    op.create_index('ix_faculty_department_id', 'faculty', ['department_id'])
    op.create_index('ix_faculty_designation', 'faculty', ['designation'])
    op.create_index('ix_faculty_email', 'faculty', ['email'], unique=True)
    op.create_index('ix_faculty_is_active', 'faculty', ['is_active'])

    # ------------------------------------------------------------------
    # downloads
    # ------------------------------------------------------------------
    op.create_table(
        'downloads',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('file_url', sa.String(length=1024), nullable=False),
        sa.Column('file_name', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('file_size', sa.String(length=50), nullable=False, server_default=''),
        sa.Column('category', sa.String(length=30), nullable=False, server_default='General'),
        sa.Column('department', sa.String(length=255), nullable=False),
        sa.Column('file_type', sa.String(length=10), nullable=False, server_default='PDF'),
        sa.Column('download_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('last_downloaded', sa.DateTime(), nullable=True),
        sa.Column('uploaded_by', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_downloads_id', 'downloads', ['id'])
    op.create_index('ix_downloads_category', 'downloads', ['category'])
    op.create_index('ix_downloads_department', 'downloads', ['department'])
    op.create_index('ix_downloads_download_count', 'downloads', ['download_count'])
    op.create_index('ix_downloads_is_active', 'downloads', ['is_active'])

    # ------------------------------------------------------------------
    # research
    # ------------------------------------------------------------------
    op.create_table(
        'research',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('authors', json_type, nullable=False, server_default='[]'),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='Draft'),
        sa.Column('file_url', sa.String(length=1024), nullable=False, server_default=''),
        sa.Column('published_date', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.Column('views', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('downloads', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_research_id', 'research', ['id'])
    op.create_index('ix_research_status', 'research', ['status'])
    op.create_index('ix_research_published_date', 'research', ['published_date'])

    # ------------------------------------------------------------------
    # sliders
    # ------------------------------------------------------------------
    op.create_table(
        'sliders',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('image_url', sa.String(length=1024), nullable=False),
        sa.Column('button_text', sa.String(length=100), nullable=False, server_default='Learn More'),
        sa.Column('button_link', sa.String(length=1024), nullable=False, server_default='/'),
        sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('auto_play', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('auto_play_interval', sa.Integer(), nullable=False, server_default='5000'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_sliders_id', 'sliders', ['id'])
    op.create_index('ix_sliders_order', 'sliders', ['order'])
    op.create_index('ix_sliders_is_active', 'sliders', ['is_active'])

    # ------------------------------------------------------------------
    # site_settings
    # ------------------------------------------------------------------
    op.create_table(
        'site_settings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('theme', sa.String(length=20), nullable=False, server_default='default'),
        sa.Column('school_name', sa.String(length=255), nullable=False, server_default='SIHS'),
        sa.Column('address', sa.String(length=512), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=False, server_default=''),
        sa.Column('whatsapp', sa.String(length=50), nullable=False, server_default=''),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('website', sa.String(length=1024), nullable=False, server_default=''),
        sa.Column('logo', sa.String(length=1024), nullable=False, server_default='/images/logo.png'),
        sa.Column('favicon', sa.String(length=1024), nullable=False, server_default=''),
        sa.Column('map_embed_url', sa.String(length=2048), nullable=False, server_default=''),
        sa.Column('map_location', json_type, nullable=False, server_default='{}'),
        sa.Column('social_links', json_type, nullable=False, server_default='{}'),
        sa.Column('opening_hours', json_type, nullable=False, server_default='{}'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    op.drop_table('site_settings')
    op.drop_table('sliders')
    op.drop_table('research')
    op.drop_table('downloads')
    op.drop_table('faculty')
