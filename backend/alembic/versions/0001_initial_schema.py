"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

NOW = sa.text('CURRENT_TIMESTAMP')


def _enum() -> sa.String:
    # Enums are stored as their string values
    return sa.String(length=32)


def upgrade() -> None:
    op.create_table('users',
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table('scenarios',
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('main_idea', sa.Text(), nullable=False),
        sa.Column('world_context', sa.Text(), nullable=True),
        sa.Column('political_situation', sa.Text(), nullable=True),
        sa.Column('key_themes', sa.JSON(), nullable=True),
        sa.Column('status', _enum(), nullable=False),
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_scenarios_user_id', 'scenarios', ['user_id'])
    op.create_index('ix_scenarios_status', 'scenarios', ['status'])

    op.create_table('sessions',
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('creator_mode', _enum(), nullable=False),
        sa.Column('current_phase', sa.Integer(), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('ai_mode', _enum(), nullable=False),
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_sessions_user_id', 'sessions', ['user_id'])

    op.create_table('regions',
        sa.Column('scenario_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('type', _enum(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('controlling_faction', sa.String(length=200), nullable=True),
        sa.Column('population', sa.Integer(), nullable=True),
        sa.Column('resources', sa.JSON(), nullable=True),
        sa.Column('threat_level', sa.Integer(), nullable=False),
        sa.Column('political_stance', _enum(), nullable=True),
        sa.Column('trade_routes', sa.JSON(), nullable=True),
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.ForeignKeyConstraint(['scenario_id'], ['scenarios.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('threat_level BETWEEN 1 AND 5', name='ck_regions_threat_level'),
    )
    op.create_index('ix_regions_scenario_id', 'regions', ['scenario_id'])

    op.create_table('scenario_npcs',
        sa.Column('scenario_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('role', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('location', sa.String(length=200), nullable=True),
        sa.Column('faction', sa.String(length=200), nullable=True),
        sa.Column('importance', _enum(), nullable=False),
        sa.Column('status', _enum(), nullable=False),
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.ForeignKeyConstraint(['scenario_id'], ['scenarios.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_scenario_npcs_scenario_id', 'scenario_npcs', ['scenario_id'])

    op.create_table('scenario_quests',
        sa.Column('scenario_id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', _enum(), nullable=False),
        sa.Column('priority', _enum(), nullable=False),
        sa.Column('rewards', sa.Text(), nullable=True),
        sa.Column('requirements', sa.Text(), nullable=True),
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.ForeignKeyConstraint(['scenario_id'], ['scenarios.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_scenario_quests_scenario_id', 'scenario_quests', ['scenario_id'])

    op.create_table('environmental_conditions',
        sa.Column('scenario_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('severity', _enum(), nullable=False),
        sa.Column('affected_regions', sa.JSON(), nullable=True),
        sa.Column('duration', sa.String(length=200), nullable=True),
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.ForeignKeyConstraint(['scenario_id'], ['scenarios.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_environmental_conditions_scenario_id', 'environmental_conditions', ['scenario_id']
    )

    op.create_table('scenario_sessions',
        sa.Column('scenario_id', sa.Uuid(), nullable=False),
        sa.Column('session_id', sa.Uuid(), nullable=False),
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.ForeignKeyConstraint(['scenario_id'], ['scenarios.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['session_id'], ['sessions.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('scenario_id', 'session_id', name='uq_scenario_session'),
    )
    op.create_index('ix_scenario_sessions_scenario_id', 'scenario_sessions', ['scenario_id'])
    op.create_index('ix_scenario_sessions_session_id', 'scenario_sessions', ['session_id'])

    op.create_table('player_characters',
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('session_id', sa.Uuid(), nullable=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('character_class', sa.String(length=100), nullable=False),
        sa.Column('level', sa.Integer(), nullable=False),
        sa.Column('background', sa.Text(), nullable=True),
        sa.Column('stats', sa.JSON(), nullable=True),
        sa.Column('skills', sa.JSON(), nullable=True),
        sa.Column('equipment', sa.JSON(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['session_id'], ['sessions.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_player_characters_user_id', 'player_characters', ['user_id'])
    op.create_index('ix_player_characters_session_id', 'player_characters', ['session_id'])

    op.create_table('session_players',
        sa.Column('session_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('character_id', sa.Uuid(), nullable=True),
        sa.Column('role', _enum(), nullable=False),
        sa.Column('is_online', sa.Boolean(), nullable=False),
        sa.Column('joined_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.Column('last_active', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(['session_id'], ['sessions.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['character_id'], ['player_characters.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_session_players_session_id', 'session_players', ['session_id'])

    op.create_table('nodes',
        sa.Column('session_id', sa.Uuid(), nullable=False),
        sa.Column('type', _enum(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('properties', sa.JSON(), nullable=True),
        sa.Column('x', sa.Float(), nullable=False),
        sa.Column('y', sa.Float(), nullable=False),
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.ForeignKeyConstraint(['session_id'], ['sessions.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_nodes_session_id', 'nodes', ['session_id'])

    op.create_table('connections',
        sa.Column('session_id', sa.Uuid(), nullable=False),
        sa.Column('from_node_id', sa.Uuid(), nullable=False),
        sa.Column('to_node_id', sa.Uuid(), nullable=False),
        sa.Column('type', _enum(), nullable=False),
        sa.Column('strength', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.ForeignKeyConstraint(['session_id'], ['sessions.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['from_node_id'], ['nodes.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['to_node_id'], ['nodes.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_connections_session_id', 'connections', ['session_id'])

    op.create_table('timeline_events',
        sa.Column('session_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('phase', _enum(), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.Column('creator_mode', _enum(), nullable=False),
        sa.Column('completion', _enum(), nullable=False),
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.ForeignKeyConstraint(['session_id'], ['sessions.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_timeline_events_session_id', 'timeline_events', ['session_id']
    )


def downgrade() -> None:
    op.drop_index('ix_timeline_events_session_id', table_name='timeline_events')
    op.drop_table('timeline_events')
    op.drop_index('ix_connections_session_id', table_name='connections')
    op.drop_table('connections')
    op.drop_index('ix_nodes_session_id', table_name='nodes')
    op.drop_table('nodes')
    op.drop_index('ix_session_players_session_id', table_name='session_players')
    op.drop_table('session_players')
    op.drop_index('ix_player_characters_session_id', table_name='player_characters')
    op.drop_index('ix_player_characters_user_id', table_name='player_characters')
    op.drop_table('player_characters')
    op.drop_index('ix_scenario_sessions_session_id', table_name='scenario_sessions')
    op.drop_index('ix_scenario_sessions_scenario_id', table_name='scenario_sessions')
    op.drop_table('scenario_sessions')
    op.drop_index('ix_environmental_conditions_scenario_id', table_name='environmental_conditions')
    op.drop_table('environmental_conditions')
    op.drop_index('ix_scenario_quests_scenario_id', table_name='scenario_quests')
    op.drop_table('scenario_quests')
    op.drop_index('ix_scenario_npcs_scenario_id', table_name='scenario_npcs')
    op.drop_table('scenario_npcs')
    op.drop_index('ix_regions_scenario_id', table_name='regions')
    op.drop_table('regions')
    op.drop_index('ix_sessions_user_id', table_name='sessions')
    op.drop_table('sessions')
    op.drop_index('ix_scenarios_status', table_name='scenarios')
    op.drop_index('ix_scenarios_user_id', table_name='scenarios')
    op.drop_table('scenarios')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
