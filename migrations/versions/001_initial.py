"""Initial schema - lists, penalties, ranking configurations, ranked lists

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19 00:00:00.000000

Based on the SQLAlchemy models defined in database/models/.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ==================================================
    # LISTS
    # ==================================================

    op.create_table(
        'lists',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('url', sa.Text, nullable=True),
        sa.Column('media_type', sa.String(20), nullable=False),
        sa.Column('year_published', sa.Integer, nullable=True),
        # Credibility attributes
        sa.Column('high_quality_source', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('category_specific', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('location_specific', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('voter_names_unknown', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('voter_count_unknown', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('voter_count_estimated', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('num_years_covered', sa.Integer, nullable=True),
        sa.Column('number_of_voters', sa.Integer, nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=True),
        sa.Column('updated_at', sa.DateTime, nullable=True),
    )

    with op.batch_alter_table('lists') as batch_op:
        batch_op.create_index('ix_lists_media_type', ['media_type'])
        batch_op.create_index('idx_lists_high_quality', ['high_quality_source'])

    # ==================================================
    # RANKING CONFIGURATIONS
    # ==================================================

    op.create_table(
        'ranking_configurations',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('media_type', sa.String(20), nullable=False),
        sa.Column('algorithm_version', sa.Integer, nullable=False, server_default='1'),
        sa.Column('exponent', sa.Float, nullable=False, server_default='3.0'),
        sa.Column('bonus_pool_percentage', sa.Float, nullable=False, server_default='3.0'),
        sa.Column('min_list_weight', sa.Integer, nullable=False, server_default='1'),
        sa.Column('global', sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column('user_id', sa.Integer, nullable=True),
        sa.Column(
            'inherited_from_id',
            sa.Integer,
            sa.ForeignKey('ranking_configurations.id', ondelete='SET NULL'),
            nullable=True
        ),
        sa.Column('archived', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime, nullable=True),
        sa.Column('updated_at', sa.DateTime, nullable=True),
        sa.CheckConstraint('algorithm_version > 0', name='ck_ranking_configuration_version'),
        sa.CheckConstraint('exponent > 0 AND exponent <= 10', name='ck_ranking_configuration_exponent'),
        sa.CheckConstraint(
            'bonus_pool_percentage >= 0 AND bonus_pool_percentage <= 100',
            name='ck_ranking_configuration_bonus_pool'
        ),
    )

    with op.batch_alter_table('ranking_configurations') as batch_op:
        batch_op.create_index('ix_ranking_configurations_media_type', ['media_type'])
        batch_op.create_index('idx_ranking_configurations_media_global', ['media_type', 'global'])

    # ==================================================
    # PENALTIES
    # ==================================================

    op.create_table(
        'penalties',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('media_type', sa.String(20), nullable=False, server_default='cross_media'),
        sa.Column('dynamic_type', sa.String(50), nullable=True),
        sa.Column('global', sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column('user_id', sa.Integer, nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=True),
        sa.Column('updated_at', sa.DateTime, nullable=True),
    )

    with op.batch_alter_table('penalties') as batch_op:
        batch_op.create_index('ix_penalties_media_type', ['media_type'])
        batch_op.create_index('ix_penalties_dynamic_type', ['dynamic_type'])

    op.create_table(
        'penalty_applications',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('penalty_id', sa.Integer, sa.ForeignKey('penalties.id', ondelete='CASCADE'), nullable=False),
        sa.Column(
            'ranking_configuration_id',
            sa.Integer,
            sa.ForeignKey('ranking_configurations.id', ondelete='CASCADE'),
            nullable=False
        ),
        sa.Column('value', sa.Float, nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime, nullable=True),
        sa.Column('updated_at', sa.DateTime, nullable=True),
        sa.UniqueConstraint('penalty_id', 'ranking_configuration_id', name='uq_penalty_application'),
        sa.CheckConstraint('value >= 0 AND value <= 100', name='ck_penalty_application_value'),
    )

    with op.batch_alter_table('penalty_applications') as batch_op:
        batch_op.create_index('ix_penalty_applications_penalty_id', ['penalty_id'])
        batch_op.create_index('ix_penalty_applications_ranking_configuration_id', ['ranking_configuration_id'])

    op.create_table(
        'list_penalties',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('list_id', sa.Integer, sa.ForeignKey('lists.id', ondelete='CASCADE'), nullable=False),
        sa.Column('penalty_id', sa.Integer, sa.ForeignKey('penalties.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=True),
        sa.Column('updated_at', sa.DateTime, nullable=True),
        sa.UniqueConstraint('list_id', 'penalty_id', name='uq_list_penalty'),
    )

    with op.batch_alter_table('list_penalties') as batch_op:
        batch_op.create_index('ix_list_penalties_list_id', ['list_id'])
        batch_op.create_index('ix_list_penalties_penalty_id', ['penalty_id'])

    # ==================================================
    # RANKED LISTS
    # ==================================================

    op.create_table(
        'ranked_lists',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('list_id', sa.Integer, sa.ForeignKey('lists.id', ondelete='CASCADE'), nullable=False),
        sa.Column(
            'ranking_configuration_id',
            sa.Integer,
            sa.ForeignKey('ranking_configurations.id', ondelete='CASCADE'),
            nullable=False
        ),
        sa.Column('weight', sa.Integer, nullable=True),
        sa.Column('calculated_weight_details', sa.JSON, nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=True),
        sa.Column('updated_at', sa.DateTime, nullable=True),
        sa.UniqueConstraint('list_id', 'ranking_configuration_id', name='uq_ranked_list'),
    )

    with op.batch_alter_table('ranked_lists') as batch_op:
        batch_op.create_index('ix_ranked_lists_list_id', ['list_id'])
        batch_op.create_index('ix_ranked_lists_ranking_configuration_id', ['ranking_configuration_id'])


def downgrade() -> None:
    op.drop_table('ranked_lists')
    op.drop_table('list_penalties')
    op.drop_table('penalty_applications')
    op.drop_table('penalties')
    op.drop_table('ranking_configurations')
    op.drop_table('lists')
