"""create team, player, match, match_player and hole_result tables

Revision ID: 5c1d7e9a2b40
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5c1d7e9a2b40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    existing_tables = set(insp.get_table_names())

    if 'team' not in existing_tables:
        op.create_table(
            'team',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=64), nullable=False),
            sa.Column('color', sa.String(length=32), nullable=False, server_default=''),
        )
    if 'player' not in existing_tables:
        op.create_table(
            'player',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=64), nullable=False),
            sa.Column('email', sa.String(length=120), nullable=True),
            sa.Column('hcp', sa.Float(), nullable=True),
            sa.Column('team_id', sa.Integer(), sa.ForeignKey('team.id'), nullable=True),
        )
    if 'match' not in existing_tables:
        op.create_table(
            'match',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('team_a_id', sa.Integer(), sa.ForeignKey('team.id'), nullable=False),
            sa.Column('team_b_id', sa.Integer(), sa.ForeignKey('team.id'), nullable=False),
            sa.Column('format', sa.String(length=32), nullable=False, server_default='singles'),
            sa.Column('status', sa.String(length=32), nullable=False, server_default='prepared'),
            sa.Column('holes', sa.String(length=16), nullable=False, server_default='18'),
            sa.Column('start_time', sa.String(length=32), nullable=True),
        )
    if 'match_player' not in existing_tables:
        op.create_table(
            'match_player',
            sa.Column('match_id', sa.Integer(), sa.ForeignKey('match.id'), primary_key=True),
            sa.Column('player_id', sa.Integer(), sa.ForeignKey('player.id'), primary_key=True),
            sa.Column('team_side', sa.String(length=1), nullable=False),
        )
    if 'hole_result' not in existing_tables:
        op.create_table(
            'hole_result',
            sa.Column('match_id', sa.Integer(), sa.ForeignKey('match.id'), primary_key=True),
            sa.Column('hole', sa.Integer(), primary_key=True),
            sa.Column('result', sa.String(length=2), nullable=False),
        )


def downgrade():
    op.drop_table('hole_result')
    op.drop_table('match_player')
    op.drop_table('match')
    op.drop_table('player')
    op.drop_table('team')
