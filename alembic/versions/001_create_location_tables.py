"""Create location tables

Revision ID: 001_create_location_tables
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_create_location_tables'
down_revision = None
branch_labels = None
depends_on = None


def _metadata_columns():
    return [
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('retired', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('date_retired', sa.DateTime(timezone=True), nullable=True),
        sa.Column('retire_reason', sa.String(length=255), nullable=True),
        sa.Column('uuid', sa.String(length=38), nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table('location_tags',
    sa.Column('id', sa.Integer(), nullable=False),
    *_metadata_columns(),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_location_tags_name'), 'location_tags', ['name'], unique=False)
    op.create_index(op.f('ix_location_tags_retired'), 'location_tags', ['retired'], unique=False)
    op.create_index(op.f('ix_location_tags_uuid'), 'location_tags', ['uuid'], unique=True)

    op.create_table('locations',
    sa.Column('id', sa.Integer(), nullable=False),
    *_metadata_columns(),
    sa.Column('address1', sa.String(length=255), nullable=True),
    sa.Column('address2', sa.String(length=255), nullable=True),
    sa.Column('city_village', sa.String(length=255), nullable=True),
    sa.Column('state_province', sa.String(length=255), nullable=True),
    sa.Column('country', sa.String(length=100), nullable=True),
    sa.Column('postal_code', sa.String(length=50), nullable=True),
    sa.Column('latitude', sa.String(length=50), nullable=True),
    sa.Column('longitude', sa.String(length=50), nullable=True),
    sa.Column('parent_location_id', sa.Integer(), nullable=True),
    sa.ForeignKeyConstraint(['parent_location_id'], ['locations.id'], ),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_locations_name'), 'locations', ['name'], unique=False)
    op.create_index(op.f('ix_locations_retired'), 'locations', ['retired'], unique=False)
    op.create_index(op.f('ix_locations_uuid'), 'locations', ['uuid'], unique=True)
    op.create_index(op.f('ix_locations_parent_location_id'), 'locations', ['parent_location_id'], unique=False)

    op.create_table('location_tag_map',
    sa.Column('location_id', sa.Integer(), nullable=False),
    sa.Column('location_tag_id', sa.Integer(), nullable=False),
    sa.ForeignKeyConstraint(['location_id'], ['locations.id'], ondelete='CASCADE'),
    sa.ForeignKeyConstraint(['location_tag_id'], ['location_tags.id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('location_id', 'location_tag_id')
    )

    op.create_table('location_names',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('location_id', sa.Integer(), nullable=False),
    sa.Column('locale', sa.String(length=10), nullable=False),
    sa.Column('value', sa.String(length=255), nullable=False),
    sa.ForeignKeyConstraint(['location_id'], ['locations.id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('id'),
    sa.UniqueConstraint('location_id', 'locale', name='uq_location_names_locale')
    )
    op.create_index(op.f('ix_location_names_value'), 'location_names', ['value'], unique=False)

    op.create_table('location_tag_names',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('location_tag_id', sa.Integer(), nullable=False),
    sa.Column('locale', sa.String(length=10), nullable=False),
    sa.Column('value', sa.String(length=255), nullable=False),
    sa.ForeignKeyConstraint(['location_tag_id'], ['location_tags.id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('id'),
    sa.UniqueConstraint('location_tag_id', 'locale', name='uq_location_tag_names_locale')
    )
    op.create_index(op.f('ix_location_tag_names_value'), 'location_tag_names', ['value'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_location_tag_names_value'), table_name='location_tag_names')
    op.drop_table('location_tag_names')
    op.drop_index(op.f('ix_location_names_value'), table_name='location_names')
    op.drop_table('location_names')
    op.drop_table('location_tag_map')
    op.drop_index(op.f('ix_locations_parent_location_id'), table_name='locations')
    op.drop_index(op.f('ix_locations_uuid'), table_name='locations')
    op.drop_index(op.f('ix_locations_retired'), table_name='locations')
    op.drop_index(op.f('ix_locations_name'), table_name='locations')
    op.drop_table('locations')
    op.drop_index(op.f('ix_location_tags_uuid'), table_name='location_tags')
    op.drop_index(op.f('ix_location_tags_retired'), table_name='location_tags')
    op.drop_index(op.f('ix_location_tags_name'), table_name='location_tags')
    op.drop_table('location_tags')
