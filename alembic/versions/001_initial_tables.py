"""Initial tables

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Players
    op.create_table(
        'players',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('number', sa.Integer(), nullable=False),
        sa.Column('positions', sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_players_number', 'players', ['number'], unique=True)

    # Matches
    op.create_table(
        'matches',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('opponent', sa.String(length=255), nullable=False),
        sa.Column('home', sa.Boolean(), nullable=False),
        sa.Column('goals_for', sa.Integer(), nullable=True),
        sa.Column('goals_against', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_matches_date', 'matches', ['date'])

    # Formations
    op.create_table(
        'formations',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('shape', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table(
        'formation_slots',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('formation_id', sa.BigInteger(), nullable=False),
        sa.Column('sort_order', sa.Integer(), nullable=False),
        sa.Column('slot_id', sa.String(length=255), nullable=False),
        sa.Column('position', sa.String(length=255), nullable=False),
        sa.Column('player_id', sa.BigInteger(), nullable=True),
        sa.ForeignKeyConstraint(['formation_id'], ['formations.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('formation_id', 'slot_id', name='uq_formation_slot_id')
    )
    op.create_index('ix_formation_slots_formation_id', 'formation_slots', ['formation_id'])

    # Lineups (one per match)
    op.create_table(
        'lineups',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('match_id', sa.BigInteger(), nullable=False),
        sa.Column('formation_id', sa.BigInteger(), nullable=False),
        sa.Column('captain_player_id', sa.BigInteger(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('match_id', name='uq_lineup_match')
    )
    op.create_table(
        'lineup_slots',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('lineup_id', sa.BigInteger(), nullable=False),
        sa.Column('slot_id', sa.String(length=255), nullable=False),
        sa.Column('pos', sa.String(length=255), nullable=False),
        sa.Column('player_id', sa.BigInteger(), nullable=True),
        sa.Column('is_captain', sa.Boolean(), nullable=False),
        sa.Column('rating', sa.Float(), nullable=True),
        sa.Column('goals', sa.Integer(), nullable=True),
        sa.Column('assists', sa.Integer(), nullable=True),
        sa.Column('yellow_cards', sa.Integer(), nullable=True),
        sa.Column('red_cards', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['lineup_id'], ['lineups.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_lineup_slots_lineup_id', 'lineup_slots', ['lineup_id'])
    op.create_table(
        'lineup_player_stats',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('lineup_id', sa.BigInteger(), nullable=False),
        sa.Column('player_id', sa.BigInteger(), nullable=False),
        sa.Column('goals', sa.Integer(), nullable=False),
        sa.Column('assists', sa.Integer(), nullable=False),
        sa.Column('yellow_cards', sa.Integer(), nullable=False),
        sa.Column('red_cards', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['lineup_id'], ['lineups.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('lineup_id', 'player_id', name='uq_lineup_player_stat')
    )
    op.create_index('ix_lineup_player_stats_lineup_id', 'lineup_player_stats', ['lineup_id'])
    op.create_index('ix_lineup_player_stats_player_id', 'lineup_player_stats', ['player_id'])


def downgrade() -> None:
    op.drop_table('lineup_player_stats')
    op.drop_table('lineup_slots')
    op.drop_table('lineups')
    op.drop_table('formation_slots')
    op.drop_table('formations')
    op.drop_table('matches')
    op.drop_table('players')
