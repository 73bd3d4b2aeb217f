"""Initial FoundrBox schema

Revision ID: 20261019_000001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '20261019_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _json():
    return sa.JSON().with_variant(postgresql.JSONB(), 'postgresql')


def _timestamp(name: str, nullable: bool = False) -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), nullable=nullable)


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.String(255), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('full_name', sa.String(255), nullable=True),
        _timestamp('created_at'),
    )

    op.create_table(
        'idea_validations',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(255), nullable=False),
        sa.Column('idea_title', sa.String(500), nullable=False),
        sa.Column('idea_description', sa.Text(), nullable=False),
        sa.Column('target_audience', sa.Text(), nullable=True),
        sa.Column('problem_solving', sa.Text(), nullable=True),
        sa.Column('unique_value_proposition', sa.Text(), nullable=True),
        sa.Column('business_model', sa.Text(), nullable=True),
        sa.Column('technical_feasibility', sa.Text(), nullable=True),
        sa.Column('resource_requirements', sa.Text(), nullable=True),
        sa.Column('validation_result', _json(), nullable=False),
        sa.Column('overall_score', sa.Float(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('is_fallback', sa.Boolean(), nullable=False),
        _timestamp('created_at'),
        _timestamp('updated_at'),
    )
    op.create_index('ix_idea_validations_user_id', 'idea_validations', ['user_id'])

    op.create_table(
        'market_research',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(255), nullable=False),
        sa.Column('project_title', sa.String(500), nullable=False),
        sa.Column('industry_sector', sa.String(255), nullable=False),
        sa.Column('target_market', sa.Text(), nullable=False),
        sa.Column('geographic_focus', sa.String(255), nullable=True),
        sa.Column('research_goals', sa.Text(), nullable=True),
        sa.Column('research_result', _json(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('is_fallback', sa.Boolean(), nullable=False),
        _timestamp('created_at'),
        _timestamp('updated_at'),
    )
    op.create_index('ix_market_research_user_id', 'market_research', ['user_id'])

    for table, name_column, data_column, score_column in (
        ('market_trends', 'trend_name', 'trend_data', sa.Column('impact_score', sa.Integer(), nullable=False)),
        ('competitor_analysis', 'competitor_name', 'competitor_data', sa.Column('threat_level', sa.String(20), nullable=False)),
        ('market_opportunities', 'opportunity_title', 'opportunity_data', sa.Column('potential_score', sa.Float(), nullable=False)),
    ):
        op.create_table(
            table,
            sa.Column('id', sa.String(36), primary_key=True),
            sa.Column('user_id', sa.String(255), nullable=False),
            sa.Column('research_id', sa.String(36), sa.ForeignKey('market_research.id', ondelete='CASCADE'), nullable=False),
            sa.Column(name_column, sa.String(500), nullable=False),
            sa.Column(data_column, _json(), nullable=False),
            score_column,
            _timestamp('created_at'),
        )
        op.create_index(f'ix_{table}_user_id', table, ['user_id'])
        op.create_index(f'ix_{table}_research_id', table, ['research_id'])

    op.create_table(
        'pitch_assistant',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(255), nullable=False),
        sa.Column('idea_source', sa.String(50), nullable=True),
        sa.Column('idea_id', sa.String(36), nullable=True),
        sa.Column('idea_title', sa.String(500), nullable=False),
        sa.Column('idea_description', sa.Text(), nullable=False),
        sa.Column('pitch_content', _json(), nullable=False),
        sa.Column('is_fallback', sa.Boolean(), nullable=False),
        _timestamp('created_at'),
    )
    op.create_index('ix_pitch_assistant_user_id', 'pitch_assistant', ['user_id'])

    op.create_table(
        'growth_conversations',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(255), nullable=False),
        sa.Column('conversation_title', sa.String(500), nullable=False),
        sa.Column('message_count', sa.Integer(), nullable=False),
        _timestamp('last_message_at', nullable=True),
        _timestamp('created_at'),
        _timestamp('updated_at'),
    )
    op.create_index('ix_growth_conversations_user_id', 'growth_conversations', ['user_id'])

    op.create_table(
        'growth_messages',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('conversation_id', sa.String(36), sa.ForeignKey('growth_conversations.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.String(255), nullable=False),
        sa.Column('role', sa.String(20), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        _timestamp('created_at'),
    )
    op.create_index('ix_growth_messages_conversation_id', 'growth_messages', ['conversation_id'])
    op.create_index('ix_growth_messages_user_id', 'growth_messages', ['user_id'])
    op.create_index('ix_growth_messages_created_at', 'growth_messages', ['created_at'])

    op.create_table(
        'growth_insights',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('conversation_id', sa.String(36), sa.ForeignKey('growth_conversations.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.String(255), nullable=False),
        sa.Column('insight_type', sa.String(20), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('priority', sa.String(20), nullable=False),
        _timestamp('created_at'),
    )
    op.create_index('ix_growth_insights_conversation_id', 'growth_insights', ['conversation_id'])
    op.create_index('ix_growth_insights_user_id', 'growth_insights', ['user_id'])

    op.create_table(
        'dashboard_data',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(255), nullable=False),
        sa.Column('data_type', sa.String(100), nullable=False),
        sa.Column('data', _json(), nullable=True),
        _timestamp('created_at'),
        _timestamp('updated_at'),
        sa.UniqueConstraint('user_id', 'data_type', name='uq_dashboard_data_user_type'),
    )
    op.create_index('ix_dashboard_data_user_id', 'dashboard_data', ['user_id'])


def downgrade() -> None:
    # Children first so foreign keys never dangle
    for table in (
        'dashboard_data',
        'growth_insights',
        'growth_messages',
        'growth_conversations',
        'pitch_assistant',
        'market_opportunities',
        'competitor_analysis',
        'market_trends',
        'market_research',
        'idea_validations',
        'users',
    ):
        op.drop_table(table)
